"""Layout generation endpoints."""

from fastapi import APIRouter

from classrooms.application.config import load_config_from_dict, validate_config
from classrooms.infrastructure import layout_to_dict
from classrooms.web.dependencies import GenerateCommandDep
from classrooms.web.exceptions import LayoutGenerationError
from classrooms.web.schemas.requests import GenerateFromConfigRequest
from classrooms.web.schemas.responses import LayoutResponseSchema

router = APIRouter(prefix="/generate", tags=["generate"])


@router.post("", response_model=LayoutResponseSchema)
async def generate_layout(
    request: GenerateFromConfigRequest,
    command: GenerateCommandDep,
) -> LayoutResponseSchema:
    """Generate desks, anchors and routes from a classroom configuration.

    Raises:
        ConfigError: If the configuration fails schema validation (422).
        LayoutGenerationError: If configuration checks or generation
            report errors (422).
    """
    config = load_config_from_dict(request.config)

    validation = validate_config(config)
    if not validation.is_valid:
        raise LayoutGenerationError([f"{e.path}: {e.message}" for e in validation.errors])

    output = command.execute_config(config)
    if not output.is_valid:
        raise LayoutGenerationError(output.errors)

    return LayoutResponseSchema.model_validate(layout_to_dict(output))
