"""Classroom configuration schemas.

Pydantic models describing the declarative classroom layout file. Range
checks live here so that every field violation is collected into a
single validation report before any generation happens.
"""

import logging
from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from classrooms.domain.value_objects import GRID_ROWS, Position3D

logger = logging.getLogger(__name__)

# Supported schema versions for configuration files
# Version 1.0: Initial classroom layout schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class Difficulty(str, Enum):
    """Level difficulty."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Vector3Config(BaseModel):
    """A 3D vector in meters, in the room-centered frame."""

    model_config = ConfigDict(extra="forbid")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_position(self) -> Position3D:
        return Position3D(self.x, self.y, self.z)


class DeskLayoutConfig(BaseModel):
    """Desk grid configuration.

    Attributes:
        rows: Row count. Always 2; other values are overridden.
        spacing_x: Distance between desk columns (1.0 to 5.0).
        spacing_z: Distance between desk rows (1.0 to 5.0).
        aisle_width: Gap between the two rows (1.0 to 3.0).
    """

    model_config = ConfigDict(extra="forbid")

    rows: int = GRID_ROWS
    spacing_x: float = Field(default=2.0, ge=1.0, le=5.0)
    spacing_z: float = Field(default=2.5, ge=1.0, le=5.0)
    aisle_width: float = Field(default=1.5, ge=1.0, le=3.0)

    @field_validator("rows")
    @classmethod
    def force_two_rows(cls, v: int) -> int:
        """Override any row count to the fixed 2-row layout."""
        if v != GRID_ROWS:
            logger.warning(f"Overriding desk_layout.rows={v} to {GRID_ROWS}")
        return GRID_ROWS


class ClassroomDimensionsConfig(BaseModel):
    """Classroom geometry and optional anchor overrides.

    Attributes:
        width: Room width along X (5.0 to 30.0).
        depth: Room depth along Z (5.0 to 30.0).
        height: Room height along Y (2.0 to 10.0).
        door_position: Manual door position; computed when omitted.
        board_position: Manual board front-face line; computed when omitted.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=10.0, ge=5.0, le=30.0)
    depth: float = Field(default=8.0, ge=5.0, le=30.0)
    height: float = Field(default=3.0, ge=2.0, le=10.0)
    door_position: Vector3Config | None = None
    board_position: Vector3Config | None = None


class RouteGenerationConfig(BaseModel):
    """Route generation settings."""

    model_config = ConfigDict(extra="forbid")

    auto_generate_routes: bool = True
    escape_route_speed: float = Field(default=3.0, gt=0)
    return_route_speed: float = Field(default=2.0, gt=0)
    rotation_speed: float = Field(default=180.0, gt=0)
    is_running: bool = False


class EnvironmentConfig(BaseModel):
    """Environment settings that affect anchor placement.

    Attributes:
        board_size: Board dimensions; only the Z (depth) component is used.
        detected_board_depth: Depth measured from the board asset, used
            when board_size has no usable depth.
    """

    model_config = ConfigDict(extra="forbid")

    board_size: Vector3Config | None = Field(
        default_factory=lambda: Vector3Config(x=4.0, y=2.0, z=0.1)
    )
    detected_board_depth: float | None = Field(default=None, ge=0)


class StudentConfig(BaseModel):
    """Manual occupant configuration.

    Attributes:
        student_id: Identifier used in waypoint names.
        student_name: Display name.
        desk_id: Desk to bind this occupant to (e.g. "Desk_0_1").
    """

    model_config = ConfigDict(extra="forbid")

    student_id: str | None = Field(default=None, min_length=1)
    student_name: str | None = Field(default=None, min_length=1)
    desk_id: str | None = Field(default=None, pattern=r"^Desk_\d+_\d+$")


class ClassroomConfiguration(BaseModel):
    """Root configuration model for a classroom layout file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    level_id: str = Field(default="classroom", min_length=1, max_length=50)
    difficulty: Difficulty = Difficulty.MEDIUM
    students: int = Field(..., ge=4, le=10)
    desk_layout: DeskLayoutConfig = Field(default_factory=DeskLayoutConfig)
    classroom: ClassroomDimensionsConfig = Field(
        default_factory=ClassroomDimensionsConfig
    )
    route_generation: RouteGenerationConfig = Field(
        default_factory=RouteGenerationConfig
    )
    environment: EnvironmentConfig = Field(default_factory=EnvironmentConfig)
    student_configs: list[StudentConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @field_validator("students")
    @classmethod
    def validate_even(cls, v: int) -> int:
        if v % GRID_ROWS != 0:
            raise ValueError("students must be even (for 2-row grid)")
        return v
