"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from classrooms.domain import (
    AgentAssignment,
    AnchorSet,
    DeskSlot,
    GridSpec,
    LayoutWarning,
    RoomSpec,
    Route,
    RouteType,
)
from classrooms.domain.value_objects import GRID_ROWS

logger = logging.getLogger(__name__)


@dataclass
class RoomInput:
    """Input DTO for classroom dimensions (meters)."""

    width: float
    depth: float
    height: float

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not 5.0 <= self.width <= 30.0:
            errors.append("classroom.width must be between 5.0 and 30.0 meters")
        if not 5.0 <= self.depth <= 30.0:
            errors.append("classroom.depth must be between 5.0 and 30.0 meters")
        if not 2.0 <= self.height <= 10.0:
            errors.append("classroom.height must be between 2.0 and 10.0 meters")
        return errors

    def to_room_spec(self) -> RoomSpec:
        return RoomSpec(width=self.width, depth=self.depth, height=self.height)


@dataclass
class GridInput:
    """Input DTO for the desk grid."""

    occupant_count: int
    spacing_x: float = 2.0
    spacing_z: float = 2.5
    aisle_width: float = 1.5
    rows: int = GRID_ROWS

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not 4 <= self.occupant_count <= 10:
            errors.append("students must be between 4 and 10")
        if self.occupant_count % GRID_ROWS != 0:
            errors.append("students must be even (for 2-row grid)")
        if not 1.0 <= self.spacing_x <= 5.0:
            errors.append("desk_layout.spacing_x must be between 1.0 and 5.0 meters")
        if not 1.0 <= self.spacing_z <= 5.0:
            errors.append("desk_layout.spacing_z must be between 1.0 and 5.0 meters")
        if not 1.0 <= self.aisle_width <= 3.0:
            errors.append("desk_layout.aisle_width must be between 1.0 and 3.0 meters")
        return errors

    def to_grid_spec(self) -> GridSpec:
        """Convert to GridSpec, forcing the fixed row count."""
        if self.rows != GRID_ROWS:
            logger.warning(f"Overriding rows={self.rows} to {GRID_ROWS}")
        return GridSpec(
            occupant_count=self.occupant_count,
            spacing_x=self.spacing_x,
            spacing_z=self.spacing_z,
            aisle_width=self.aisle_width,
        )


@dataclass
class LayoutOutput:
    """Output DTO containing the generated classroom layout.

    When ``errors`` is non-empty nothing was generated: desks, agents and
    routes are empty and anchors is None.

    Attributes:
        desks: Desk slots in row-major order.
        agents: Occupant-to-desk assignments.
        anchors: Resolved door, board and outside positions.
        routes: Escape and return routes, two per agent.
        warnings: Non-fatal anomalies corrected or reported during generation.
        errors: Fatal input errors.
    """

    desks: list[DeskSlot] = field(default_factory=list)
    agents: list[AgentAssignment] = field(default_factory=list)
    anchors: AnchorSet | None = None
    routes: list[Route] = field(default_factory=list)
    warnings: list[LayoutWarning] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def escape_routes(self) -> list[Route]:
        return [r for r in self.routes if r.route_type is RouteType.ESCAPE]

    @property
    def return_routes(self) -> list[Route]:
        return [r for r in self.routes if r.route_type is RouteType.RETURN]

    def routes_for(self, agent_id: str) -> list[Route]:
        return [route for route in self.routes if route.agent_id == agent_id]
