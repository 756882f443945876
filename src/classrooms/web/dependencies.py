"""FastAPI dependency injection for layout services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from classrooms.application.commands import GenerateLayoutCommand
from classrooms.application.factory import ServiceFactory, get_factory


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_generate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> GenerateLayoutCommand:
    """Dependency for GenerateLayoutCommand."""
    return factory.create_generate_command()


GenerateCommandDep = Annotated[GenerateLayoutCommand, Depends(get_generate_command)]
