"""Conversion from configuration models to domain objects."""

from dataclasses import dataclass

from classrooms.application.config.schemas import ClassroomConfiguration, Vector3Config
from classrooms.application.dtos import GridInput, RoomInput
from classrooms.domain.services import AgentRequest
from classrooms.domain.value_objects import GridSpec, Position3D, RoomSpec, RouteSettings


def _position(vector: Vector3Config | None) -> Position3D | None:
    return vector.to_position() if vector is not None else None


def config_to_room_input(config: ClassroomConfiguration) -> RoomInput:
    """Build the RoomInput from the classroom dimensions."""
    classroom = config.classroom
    return RoomInput(width=classroom.width, depth=classroom.depth, height=classroom.height)


def config_to_grid_input(config: ClassroomConfiguration) -> GridInput:
    """Build the GridInput from the student count and desk layout."""
    layout = config.desk_layout
    return GridInput(
        occupant_count=config.students,
        spacing_x=layout.spacing_x,
        spacing_z=layout.spacing_z,
        aisle_width=layout.aisle_width,
        rows=layout.rows,
    )


def config_to_room(config: ClassroomConfiguration) -> RoomSpec:
    return config_to_room_input(config).to_room_spec()


def config_to_grid(config: ClassroomConfiguration) -> GridSpec:
    return config_to_grid_input(config).to_grid_spec()


def config_to_route_settings(config: ClassroomConfiguration) -> RouteSettings:
    """Build RouteSettings. Generated routes never loop or ping-pong."""
    routes = config.route_generation
    return RouteSettings(
        escape_speed=routes.escape_route_speed,
        return_speed=routes.return_route_speed,
        rotation_speed=routes.rotation_speed,
        is_running=routes.is_running,
    )


def config_to_agent_requests(config: ClassroomConfiguration) -> list[AgentRequest]:
    """Convert manual student configs into assignment requests."""
    return [
        AgentRequest(
            agent_id=student.student_id,
            agent_name=student.student_name,
            desk_id=student.desk_id,
        )
        for student in config.student_configs
    ]


@dataclass(frozen=True)
class AnchorOverrides:
    """Manual anchor inputs taken from a configuration."""

    manual_door: Position3D | None = None
    manual_board: Position3D | None = None
    board_size: Position3D | None = None
    detected_board_depth: float | None = None


def config_to_anchor_overrides(config: ClassroomConfiguration) -> AnchorOverrides:
    """Collect the manual anchor overrides of a configuration."""
    return AnchorOverrides(
        manual_door=_position(config.classroom.door_position),
        manual_board=_position(config.classroom.board_position),
        board_size=_position(config.environment.board_size),
        detected_board_depth=config.environment.detected_board_depth,
    )
