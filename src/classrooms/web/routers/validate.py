"""Configuration validation endpoints."""

from fastapi import APIRouter

from classrooms.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from classrooms.web.schemas.requests import ConfigValidateRequest
from classrooms.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a classroom configuration without generating.

    Schema violations are reported as errors in the body rather than as
    an HTTP error, so clients get every problem in one response.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"path": str(d.get("path")), "message": str(d.get("message"))}
                for d in e.details
            ],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"path": e.path, "message": e.message} for e in result.errors],
        warnings=[{"path": w.path, "message": w.message} for w in result.warnings],
    )
