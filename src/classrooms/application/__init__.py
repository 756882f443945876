"""Application layer - use cases and DTOs."""

from .commands import GenerateLayoutCommand
from .dtos import GridInput, LayoutOutput, RoomInput
from .factory import ServiceFactory, get_factory

__all__ = [
    "GenerateLayoutCommand",
    "GridInput",
    "LayoutOutput",
    "RoomInput",
    "ServiceFactory",
    "get_factory",
]
