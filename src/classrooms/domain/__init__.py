"""Domain layer - layout and route generation engine."""

from .services import (
    AgentAssignmentService,
    AgentRequest,
    AnchorPositionResolver,
    BoundaryValidator,
    DeskGridLayoutEngine,
    RouteGenerator,
    select_routes,
)
from .value_objects import (
    AgentAssignment,
    AnchorSet,
    DeskSlot,
    GridSpec,
    LayoutWarning,
    Position3D,
    RoomSpec,
    Route,
    RouteSettings,
    RouteType,
    Waypoint,
    WaypointLabel,
)

__all__ = [
    "AgentAssignment",
    "AgentAssignmentService",
    "AgentRequest",
    "AnchorPositionResolver",
    "AnchorSet",
    "BoundaryValidator",
    "DeskGridLayoutEngine",
    "DeskSlot",
    "GridSpec",
    "LayoutWarning",
    "Position3D",
    "RoomSpec",
    "Route",
    "RouteGenerator",
    "RouteSettings",
    "RouteType",
    "Waypoint",
    "WaypointLabel",
    "select_routes",
]
