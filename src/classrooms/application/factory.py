"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from classrooms.application.commands import GenerateLayoutCommand
    from classrooms.domain.services import (
        AnchorPositionResolver,
        DeskGridLayoutEngine,
        RouteGenerator,
    )
    from classrooms.infrastructure import JsonExporter, LayoutSummaryFormatter


@dataclass
class ServiceFactory:
    """Creates and caches service instances.

    Domain services are stateless, so one instance of each is shared by
    every command the factory creates. Tests may replace a service by
    assigning the cached attribute before creating a command.
    """

    _grid_engine: DeskGridLayoutEngine | None = field(default=None, init=False, repr=False)
    _anchor_resolver: AnchorPositionResolver | None = field(
        default=None, init=False, repr=False
    )
    _route_generator: RouteGenerator | None = field(default=None, init=False, repr=False)

    def get_grid_engine(self) -> DeskGridLayoutEngine:
        if self._grid_engine is None:
            from classrooms.domain.services import DeskGridLayoutEngine

            self._grid_engine = DeskGridLayoutEngine()
        return self._grid_engine

    def get_anchor_resolver(self) -> AnchorPositionResolver:
        if self._anchor_resolver is None:
            from classrooms.domain.services import AnchorPositionResolver

            self._anchor_resolver = AnchorPositionResolver(self.get_grid_engine())
        return self._anchor_resolver

    def get_route_generator(self) -> RouteGenerator:
        if self._route_generator is None:
            from classrooms.domain.services import RouteGenerator

            self._route_generator = RouteGenerator()
        return self._route_generator

    def create_generate_command(self) -> GenerateLayoutCommand:
        from classrooms.application.commands import GenerateLayoutCommand

        return GenerateLayoutCommand(
            grid_engine=self.get_grid_engine(),
            anchor_resolver=self.get_anchor_resolver(),
            route_generator=self.get_route_generator(),
        )

    def get_json_exporter(self) -> JsonExporter:
        from classrooms.infrastructure import JsonExporter

        return JsonExporter()

    def get_summary_formatter(self) -> LayoutSummaryFormatter:
        from classrooms.infrastructure import LayoutSummaryFormatter

        return LayoutSummaryFormatter()


_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the process-wide ServiceFactory."""
    global _factory
    if _factory is None:
        _factory = ServiceFactory()
    return _factory
