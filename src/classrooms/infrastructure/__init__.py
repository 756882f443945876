"""Infrastructure layer - output formatters and exporters."""

from .formatters import (
    FloorPlanDiagramFormatter,
    JsonExporter,
    LayoutSummaryFormatter,
    layout_to_dict,
)

__all__ = [
    "FloorPlanDiagramFormatter",
    "JsonExporter",
    "LayoutSummaryFormatter",
    "layout_to_dict",
]
