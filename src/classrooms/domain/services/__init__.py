"""Domain services for classroom layout generation."""

from .anchors import AnchorPositionResolver
from .assignment import AgentAssignmentService, AgentRequest
from .boundary import BoundaryValidator
from .desk_grid import DeskGridLayoutEngine
from .routes import RouteGenerator, select_routes

__all__ = [
    "AgentAssignmentService",
    "AgentRequest",
    "AnchorPositionResolver",
    "BoundaryValidator",
    "DeskGridLayoutEngine",
    "RouteGenerator",
    "select_routes",
]
