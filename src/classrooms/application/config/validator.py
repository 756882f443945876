"""Configuration validation beyond the schema.

The schema rejects out-of-range values. This module adds checks that need
the whole configuration: blocking errors (occupant ids that collide once
generated ids are filled in, which would produce colliding waypoint
names) and advisory warnings about values that generation will correct
or ignore.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from classrooms.application.config.adapter import (
    config_to_agent_requests,
    config_to_grid,
    config_to_room,
)
from classrooms.application.config.schemas import ClassroomConfiguration
from classrooms.domain.services import (
    AgentAssignmentService,
    BoundaryValidator,
    DeskGridLayoutEngine,
)
from classrooms.domain.services.desk_grid import desk_id
from classrooms.domain.value_objects import DeskSlot, LayoutWarning

# Boards lower or higher than this margin from floor/ceiling are flagged.
BOARD_HEIGHT_MARGIN: float = 0.5


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: Dotted path to the offending field
        message: Human-readable description
        value: The offending value
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: Dotted path to the concerning field
        message: Human-readable description
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Collected validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> ValidationResult:
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def _check_door(config: ClassroomConfiguration, result: ValidationResult) -> None:
    door = config.classroom.door_position
    if door is None:
        return
    classroom = config.classroom
    validator = BoundaryValidator(config_to_room(config))
    if not validator.is_within_bounds(door.x, door.z):
        result.add_warning(
            "classroom.door_position",
            f"Door ({door.x}, {door.z}) is outside the classroom "
            f"(±{classroom.width / 2}, ±{classroom.depth / 2})",
            "The computed default door position will be used instead",
        )
    if door.y < 0 or door.y > classroom.height:
        result.add_warning(
            "classroom.door_position.y",
            f"Door height {door.y} is outside the classroom height (0-{classroom.height})",
        )


def _check_board(config: ClassroomConfiguration, result: ValidationResult) -> None:
    board = config.classroom.board_position
    if board is None:
        return
    height = config.classroom.height
    if board.z > -BOARD_HEIGHT_MARGIN:
        result.add_warning(
            "classroom.board_position.z",
            f"Board Z {board.z} is not on the front half of the classroom",
            "Use a negative Z near the front wall",
        )
    if board.y < BOARD_HEIGHT_MARGIN or board.y > height - BOARD_HEIGHT_MARGIN:
        result.add_warning(
            "classroom.board_position.y",
            f"Board height {board.y} should be between {BOARD_HEIGHT_MARGIN} "
            f"and {height - BOARD_HEIGHT_MARGIN}",
        )


def _check_students(config: ClassroomConfiguration, result: ValidationResult) -> None:
    grid = config_to_grid(config)
    known_desks = {
        desk_id(row, column) for row in range(grid.rows) for column in range(grid.columns)
    }

    if len(config.student_configs) > config.students:
        result.add_warning(
            "student_configs",
            f"{len(config.student_configs)} student configs for {config.students} students; "
            "extra configs are ignored",
        )

    named_by: dict[str, int] = {}
    for i, student in enumerate(config.student_configs):
        if student.desk_id is None:
            continue
        if student.desk_id not in known_desks:
            result.add_warning(
                f"student_configs[{i}].desk_id",
                f"Desk '{student.desk_id}' does not exist in a "
                f"{grid.rows}x{grid.columns} grid",
            )
        if student.desk_id in named_by:
            result.add_warning(
                f"student_configs[{i}].desk_id",
                f"Desk '{student.desk_id}' is also named by "
                f"student_configs[{named_by[student.desk_id]}]; only the last config is used",
            )
        named_by[student.desk_id] = i


def _check_agent_ids(
    config: ClassroomConfiguration, desks: list[DeskSlot], result: ValidationResult
) -> None:
    # Resolve ids exactly as generation does, generated ones included.
    agents = AgentAssignmentService().assign(
        desks, config.students, config_to_agent_requests(config)
    )
    for agent_id, count in Counter(a.agent_id for a in agents).items():
        if count > 1:
            taken = ", ".join(a.desk.desk_id for a in agents if a.agent_id == agent_id)
            result.add_error(
                "student_configs",
                f"Agent id '{agent_id}' would be used for {count} desks ({taken}); "
                "waypoint and route names would collide",
                agent_id,
            )


def _check_desk_bounds(
    config: ClassroomConfiguration, result: ValidationResult
) -> list[DeskSlot]:
    room = config_to_room(config)
    outside: list[LayoutWarning] = []
    desks = DeskGridLayoutEngine().generate(room, config_to_grid(config), outside)
    for warning in outside:
        result.add_warning(
            "desk_layout",
            f"{warning.subject} {warning.message}",
            "Reduce spacing or enlarge the classroom",
        )
    return desks


def validate_config(config: ClassroomConfiguration) -> ValidationResult:
    """Run all configuration checks on an already schema-valid config."""
    result = ValidationResult()
    _check_door(config, result)
    _check_board(config, result)
    _check_students(config, result)
    desks = _check_desk_bounds(config, result)
    _check_agent_ids(config, desks, result)
    return result
