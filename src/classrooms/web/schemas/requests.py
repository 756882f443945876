"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class GenerateFromConfigRequest(BaseModel):
    """Request for generating a layout from a full classroom configuration."""

    config: dict[str, Any] = Field(..., description="Full classroom configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a classroom configuration."""

    config: dict[str, Any] = Field(..., description="Classroom configuration to validate")
