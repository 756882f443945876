"""Per-occupant escape and return route generation.

Each occupant gets two routes of four waypoints::

    escape: Desk -> Aisle -> Door -> Outside
    return: Outside -> Door -> Aisle -> Desk

Door and outside waypoints are separate instances per occupant and per
route, sharing only the anchor position, so wait times and traversal
state never leak between occupants.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..value_objects import (
    AgentAssignment,
    AnchorSet,
    Position3D,
    Route,
    RouteSettings,
    RouteType,
    Waypoint,
    WaypointLabel,
)

logger = logging.getLogger(__name__)

__all__ = [
    "RouteGenerator",
    "aisle_midpoint",
    "route_name",
    "select_routes",
    "waypoint_name",
]

_ESCAPE_ORDER: tuple[WaypointLabel, ...] = (
    WaypointLabel.DESK,
    WaypointLabel.AISLE,
    WaypointLabel.DOOR,
    WaypointLabel.OUTSIDE,
)


def waypoint_name(
    agent_id: str, route_type: RouteType, index: int, label: WaypointLabel
) -> str:
    """Waypoint name, e.g. ``student_0_Escape_01_Desk``.

    ``index`` is 1-based.
    """
    return f"{agent_id}_{route_type.label}_{index:02d}_{label.value}"


def route_name(agent_id: str, route_type: RouteType) -> str:
    """Route name, e.g. ``EscapeRoute_student_0``."""
    return f"{route_type.label}Route_{agent_id}"


def aisle_midpoint(desk_position: Position3D, door_position: Position3D) -> Position3D:
    """Point in the center aisle halfway between a desk and the door.

    X is always 0 (the center aisle) regardless of the desk column.
    """
    return Position3D(0.0, 0.0, (desk_position.z + door_position.z) / 2)


def select_routes(routes: Iterable[Route], route_type: RouteType | str) -> list[Route]:
    """Pick routes of one kind by case-insensitive substring match on the name."""
    if isinstance(route_type, RouteType):
        needle = route_type.value
    else:
        needle = route_type.lower()
    return [route for route in routes if needle in route.name.lower()]


class RouteGenerator:
    """Builds escape/return route pairs from desks and anchors."""

    def generate(
        self,
        agents: list[AgentAssignment],
        anchors: AnchorSet,
        settings: RouteSettings | None = None,
    ) -> list[Route]:
        """Generate two routes per agent, escape first.

        Args:
            agents: Occupants with their assigned desks.
            anchors: Resolved door/board/outside anchors.
            settings: Movement settings; defaults apply when None.

        Returns:
            Routes ordered by agent, each agent's escape route before its
            return route.
        """
        settings = settings or RouteSettings()
        logger.info(f"Generating routes for {len(agents)} occupants")

        routes: list[Route] = []
        for agent in agents:
            points = {
                WaypointLabel.DESK: agent.desk.position,
                WaypointLabel.AISLE: aisle_midpoint(agent.desk.position, anchors.door),
                WaypointLabel.DOOR: anchors.door,
                WaypointLabel.OUTSIDE: anchors.outside,
            }
            routes.append(
                self._build_route(agent.agent_id, RouteType.ESCAPE, _ESCAPE_ORDER, points, settings)
            )
            routes.append(
                self._build_route(
                    agent.agent_id,
                    RouteType.RETURN,
                    tuple(reversed(_ESCAPE_ORDER)),
                    points,
                    settings,
                )
            )
            logger.debug(f"Generated routes for {agent.agent_id}")

        logger.info(f"Generated {len(routes)} routes")
        return routes

    def _build_route(
        self,
        agent_id: str,
        route_type: RouteType,
        order: tuple[WaypointLabel, ...],
        points: dict[WaypointLabel, Position3D],
        settings: RouteSettings,
    ) -> Route:
        waypoints = tuple(
            Waypoint(
                name=waypoint_name(agent_id, route_type, index, label),
                position=points[label],
                label=label,
            )
            for index, label in enumerate(order, start=1)
        )
        for waypoint in waypoints:
            logger.debug(f"Created waypoint {waypoint.name} at {waypoint.position}")

        return Route(
            name=route_name(agent_id, route_type),
            agent_id=agent_id,
            waypoints=waypoints,
            movement_speed=settings.speed_for(route_type),
            rotation_speed=settings.rotation_speed,
            is_running=settings.is_running,
            is_looping=settings.is_looping,
            is_ping_pong=settings.is_ping_pong,
            kind=route_type,
        )
