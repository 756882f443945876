"""Pydantic schemas for the REST API."""

from classrooms.web.schemas.requests import (
    ConfigValidateRequest,
    GenerateFromConfigRequest,
)
from classrooms.web.schemas.responses import (
    AgentSchema,
    AnchorsSchema,
    DeskSchema,
    LayoutResponseSchema,
    LayoutWarningSchema,
    PositionSchema,
    RouteSchema,
    ValidationResultSchema,
    WaypointSchema,
)

__all__ = [
    "AgentSchema",
    "AnchorsSchema",
    "ConfigValidateRequest",
    "DeskSchema",
    "GenerateFromConfigRequest",
    "LayoutResponseSchema",
    "LayoutWarningSchema",
    "PositionSchema",
    "RouteSchema",
    "ValidationResultSchema",
    "WaypointSchema",
]
