"""Output formatters and exporters for classroom layouts."""

from __future__ import annotations

import json
import math
from typing import Any

from classrooms.application.dtos import LayoutOutput
from classrooms.domain import Position3D, Route


def _position_dict(position: Position3D) -> dict[str, float]:
    return {"x": position.x, "y": position.y, "z": position.z}


def _route_dict(route: Route) -> dict[str, Any]:
    route_type = route.route_type
    return {
        "name": route.name,
        "agent_id": route.agent_id,
        "route_type": route_type.value if route_type else None,
        "movement_speed": route.movement_speed,
        "rotation_speed": route.rotation_speed,
        "is_running": route.is_running,
        "is_looping": route.is_looping,
        "is_ping_pong": route.is_ping_pong,
        "waypoints": [
            {
                "name": waypoint.name,
                "label": waypoint.label.value,
                "position": _position_dict(waypoint.position),
                "wait_duration": waypoint.wait_duration,
            }
            for waypoint in route.waypoints
        ],
    }


def layout_to_dict(output: LayoutOutput) -> dict[str, Any]:
    """Convert a layout into plain data for downstream scene assembly."""
    if not output.is_valid:
        return {"errors": list(output.errors)}

    anchors = None
    if output.anchors is not None:
        anchors = {
            "door": _position_dict(output.anchors.door),
            "board": _position_dict(output.anchors.board),
            "outside": _position_dict(output.anchors.outside),
        }

    return {
        "desks": [
            {
                "desk_id": desk.desk_id,
                "row": desk.row,
                "column": desk.column,
                "position": _position_dict(desk.position),
                "stand_position": _position_dict(desk.stand_position),
                "surface_anchor": _position_dict(desk.surface_anchor),
            }
            for desk in output.desks
        ],
        "anchors": anchors,
        "agents": [
            {
                "agent_id": agent.agent_id,
                "agent_name": agent.agent_name,
                "desk_id": agent.desk.desk_id,
            }
            for agent in output.agents
        ],
        "routes": [_route_dict(route) for route in output.routes],
        "warnings": [
            {
                "component": warning.component,
                "subject": warning.subject,
                "message": warning.message,
            }
            for warning in output.warnings
        ],
    }


class JsonExporter:
    """Exports layout data as JSON."""

    def export(self, output: LayoutOutput) -> str:
        """Export layout output as JSON string."""
        return json.dumps(layout_to_dict(output), indent=2)


class LayoutSummaryFormatter:
    """Formats a layout as human-readable tables."""

    def format(self, output: LayoutOutput) -> str:
        if not output.is_valid:
            return "\n".join(f"Error: {error}" for error in output.errors)

        sections = [self._format_desks(output), self._format_anchors(output)]
        if output.routes:
            sections.append(self._format_routes(output))
        if output.warnings:
            sections.append(self._format_warnings(output))
        return "\n\n".join(sections)

    def _format_desks(self, output: LayoutOutput) -> str:
        occupants = {agent.desk.desk_id: agent.agent_id for agent in output.agents}
        lines = [
            "DESKS",
            "=" * 60,
            f"{'Desk':<12} {'X':>8} {'Z':>8}   {'Occupant'}",
            "-" * 60,
        ]
        for desk in output.desks:
            lines.append(
                f"{desk.desk_id:<12} {desk.position.x:>8.2f} {desk.position.z:>8.2f}   "
                f"{occupants.get(desk.desk_id, '-')}"
            )
        return "\n".join(lines)

    def _format_anchors(self, output: LayoutOutput) -> str:
        anchors = output.anchors
        lines = ["ANCHORS", "=" * 60]
        if anchors is not None:
            lines.append(f"{'Door':<12} {anchors.door}")
            lines.append(f"{'Board':<12} {anchors.board}")
            lines.append(f"{'Outside':<12} {anchors.outside}")
        return "\n".join(lines)

    def _format_routes(self, output: LayoutOutput) -> str:
        lines = [
            "ROUTES",
            "=" * 60,
            f"{'Route':<28} {'Speed':>6}   {'Waypoints'}",
            "-" * 60,
        ]
        for route in output.routes:
            path = " -> ".join(w.label.value for w in route.waypoints)
            lines.append(f"{route.name:<28} {route.movement_speed:>6.1f}   {path}")
        return "\n".join(lines)

    def _format_warnings(self, output: LayoutOutput) -> str:
        lines = ["WARNINGS", "=" * 60]
        lines.extend(f"  {warning}" for warning in output.warnings)
        return "\n".join(lines)


class FloorPlanDiagramFormatter:
    """ASCII top-down view of the classroom.

    The front wall (board) is drawn at the top and the back wall (door)
    at the bottom. ``D`` marks desks, ``B`` the board and ``|`` the door.
    The outside point lies beyond the walls and is listed below.
    """

    def __init__(self, cells_per_meter: int = 2) -> None:
        self.cells_per_meter = cells_per_meter

    def format(self, output: LayoutOutput, width: float, depth: float) -> str:
        if not output.is_valid or output.anchors is None:
            return "No layout to display."

        cols = max(1, math.ceil(width * self.cells_per_meter))
        rows = max(1, math.ceil(depth * self.cells_per_meter))
        canvas = [[" "] * cols for _ in range(rows)]

        def plot(position: Position3D, mark: str) -> None:
            # Points on a wall are drawn on the nearest inside cell.
            col = math.floor((position.x + width / 2) * self.cells_per_meter)
            row = math.floor((position.z + depth / 2) * self.cells_per_meter)
            canvas[min(max(row, 0), rows - 1)][min(max(col, 0), cols - 1)] = mark

        for desk in output.desks:
            plot(desk.position, "D")
        plot(output.anchors.board, "B")
        plot(output.anchors.door, "|")

        border = "+" + "-" * cols + "+"
        lines = [f"Classroom {width}m x {depth}m (front wall at top)", border]
        lines.extend("|" + "".join(row) + "|" for row in canvas)
        lines.append(border)
        lines.append(f"Outside: {output.anchors.outside}")
        return "\n".join(lines)
