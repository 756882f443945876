"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field


class PositionSchema(BaseModel):
    """Position in the room-centered frame (meters)."""

    x: float
    y: float
    z: float


class DeskSchema(BaseModel):
    """A placed desk."""

    desk_id: str = Field(..., description="Desk identifier (Desk_{row}_{col})")
    row: int
    column: int
    position: PositionSchema
    stand_position: PositionSchema = Field(..., description="Occupant stand point")
    surface_anchor: PositionSchema = Field(..., description="Anchor on the desk surface")


class AnchorsSchema(BaseModel):
    """Resolved classroom anchors."""

    door: PositionSchema
    board: PositionSchema
    outside: PositionSchema


class AgentSchema(BaseModel):
    """An occupant and the desk assigned to it."""

    agent_id: str
    agent_name: str
    desk_id: str


class WaypointSchema(BaseModel):
    """A route waypoint."""

    name: str
    label: str
    position: PositionSchema
    wait_duration: float = 0.0


class RouteSchema(BaseModel):
    """An occupant route."""

    name: str = Field(..., description="Route name containing Escape or Return")
    agent_id: str
    route_type: str | None = None
    movement_speed: float
    rotation_speed: float
    is_running: bool
    is_looping: bool
    is_ping_pong: bool
    waypoints: list[WaypointSchema]


class LayoutWarningSchema(BaseModel):
    """A non-fatal correction made during generation."""

    component: str
    subject: str | None = None
    message: str


class LayoutResponseSchema(BaseModel):
    """Response for layout generation."""

    desks: list[DeskSchema] = Field(default_factory=list)
    anchors: AnchorsSchema | None = None
    agents: list[AgentSchema] = Field(default_factory=list)
    routes: list[RouteSchema] = Field(default_factory=list)
    warnings: list[LayoutWarningSchema] = Field(default_factory=list)


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, str]] = Field(default_factory=list)
    warnings: list[dict[str, str]] = Field(default_factory=list)
