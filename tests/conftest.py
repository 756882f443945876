"""Pytest configuration and shared fixtures for classroom layout tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from classrooms.application.commands import GenerateLayoutCommand
    from classrooms.domain import GridSpec, RoomSpec


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests across layers")


# =============================================================================
# Shared domain fixtures
# =============================================================================


@pytest.fixture
def room() -> "RoomSpec":
    """Standard 10m x 8m x 3m classroom."""
    from classrooms.domain import RoomSpec

    return RoomSpec(width=10.0, depth=8.0, height=3.0)


@pytest.fixture
def grid() -> "GridSpec":
    """Six occupants with default spacing and aisle."""
    from classrooms.domain import GridSpec

    return GridSpec(occupant_count=6, spacing_x=2.0, spacing_z=2.5, aisle_width=1.5)


# =============================================================================
# Shared fixtures for command creation
# =============================================================================


@pytest.fixture
def generate_command() -> "GenerateLayoutCommand":
    """Create a GenerateLayoutCommand instance using the factory."""
    from classrooms.application.factory import get_factory

    return get_factory().create_generate_command()


@pytest.fixture
def config_data() -> dict[str, Any]:
    """A complete, valid classroom configuration."""
    return {
        "schema_version": "1.0",
        "level_id": "classroom_01",
        "difficulty": "medium",
        "students": 6,
        "desk_layout": {"rows": 2, "spacing_x": 2.0, "spacing_z": 2.5, "aisle_width": 1.5},
        "classroom": {"width": 10.0, "depth": 8.0, "height": 3.0},
        "route_generation": {
            "auto_generate_routes": True,
            "escape_route_speed": 3.0,
            "return_route_speed": 2.0,
        },
    }


@pytest.fixture
def write_config(tmp_path: Path):
    """Write configuration data to a JSON file and return its path."""

    def _write(data: dict[str, Any], name: str = "classroom.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
