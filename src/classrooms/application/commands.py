"""Application commands (use cases) for classroom layout generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from classrooms.domain import (
    AgentAssignmentService,
    AgentRequest,
    AnchorPositionResolver,
    DeskGridLayoutEngine,
    LayoutWarning,
    Position3D,
    RouteGenerator,
    RouteSettings,
)

from .dtos import GridInput, LayoutOutput, RoomInput

if TYPE_CHECKING:
    from classrooms.application.config import ClassroomConfiguration

logger = logging.getLogger(__name__)


class GenerateLayoutCommand:
    """Command to generate desks, anchors and routes for a classroom.

    The pipeline runs in a fixed order: desk grid, then anchors (which
    need the grid bounds), then occupant assignment and routes. The
    command keeps no state between calls, so re-running it with the same
    input reproduces the same output.
    """

    def __init__(
        self,
        grid_engine: DeskGridLayoutEngine | None = None,
        anchor_resolver: AnchorPositionResolver | None = None,
        assignment_service: AgentAssignmentService | None = None,
        route_generator: RouteGenerator | None = None,
    ) -> None:
        self.grid_engine = grid_engine or DeskGridLayoutEngine()
        self.anchor_resolver = anchor_resolver or AnchorPositionResolver(self.grid_engine)
        self.assignment_service = assignment_service or AgentAssignmentService()
        self.route_generator = route_generator or RouteGenerator()

    def execute(
        self,
        room_input: RoomInput,
        grid_input: GridInput,
        manual_door: Position3D | None = None,
        manual_board: Position3D | None = None,
        board_size: Position3D | None = None,
        detected_board_depth: float | None = None,
        agent_requests: list[AgentRequest] | None = None,
        route_settings: RouteSettings | None = None,
        generate_routes: bool = True,
    ) -> LayoutOutput:
        """Execute the layout generation command.

        Args:
            room_input: Classroom dimensions.
            grid_input: Desk grid parameters.
            manual_door: Optional door override (discarded if outside the room).
            manual_board: Optional line for the board's front face.
            board_size: Optional board size; only its depth is used.
            detected_board_depth: Optional depth measured from the board asset.
            agent_requests: Optional manual occupant configuration.
            route_settings: Route movement settings.
            generate_routes: When False, no routes are produced.

        Returns:
            LayoutOutput with the generated layout, or only errors when the
            input is invalid.
        """
        errors = room_input.validate() + grid_input.validate()
        if errors:
            for error in errors:
                logger.error(f"Invalid layout input: {error}")
            return LayoutOutput(errors=errors)

        room = room_input.to_room_spec()
        grid = grid_input.to_grid_spec()
        warnings: list[LayoutWarning] = []

        desks = self.grid_engine.generate(room, grid, warnings)
        anchors = self.anchor_resolver.resolve(
            room,
            grid,
            manual_door=manual_door,
            manual_board=manual_board,
            board_size=board_size,
            detected_board_depth=detected_board_depth,
            warnings=warnings,
        )
        agents = self.assignment_service.assign(desks, grid.occupant_count, agent_requests)

        if generate_routes:
            routes = self.route_generator.generate(agents, anchors, route_settings)
        else:
            logger.info("Automatic route generation disabled")
            routes = []

        logger.info(
            f"Layout complete: {len(desks)} desks, {len(routes)} routes, "
            f"{len(warnings)} warnings"
        )
        return LayoutOutput(
            desks=desks,
            agents=agents,
            anchors=anchors,
            routes=routes,
            warnings=warnings,
        )

    def execute_config(self, config: ClassroomConfiguration) -> LayoutOutput:
        """Execute the command for a loaded classroom configuration."""
        from classrooms.application.config import (
            config_to_agent_requests,
            config_to_anchor_overrides,
            config_to_grid_input,
            config_to_room_input,
            config_to_route_settings,
        )

        overrides = config_to_anchor_overrides(config)
        return self.execute(
            config_to_room_input(config),
            config_to_grid_input(config),
            manual_door=overrides.manual_door,
            manual_board=overrides.manual_board,
            board_size=overrides.board_size,
            detected_board_depth=overrides.detected_board_depth,
            agent_requests=config_to_agent_requests(config),
            route_settings=config_to_route_settings(config),
            generate_routes=config.route_generation.auto_generate_routes,
        )
