"""Configuration schema and loading for classroom layouts.

Public API:
    - ClassroomConfiguration: Root configuration model
    - load_config / load_config_from_dict: Load and validate configuration
    - ConfigError: Exception for configuration errors
    - validate_config / ValidationResult: Whole-configuration checks
    - config_to_*: Conversion to domain objects

Example:
    >>> from pathlib import Path
    >>> from classrooms.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("level.json"))
    ... except ConfigError as e:
    ...     for detail in e.details:
    ...         print(f"  {detail['path']}: {detail['message']}")
"""

from classrooms.application.config.adapter import (
    AnchorOverrides,
    config_to_agent_requests,
    config_to_anchor_overrides,
    config_to_grid,
    config_to_grid_input,
    config_to_room,
    config_to_room_input,
    config_to_route_settings,
)
from classrooms.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from classrooms.application.config.schemas import (
    SUPPORTED_VERSIONS,
    ClassroomConfiguration,
    ClassroomDimensionsConfig,
    DeskLayoutConfig,
    Difficulty,
    EnvironmentConfig,
    RouteGenerationConfig,
    StudentConfig,
    Vector3Config,
)
from classrooms.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "AnchorOverrides",
    "ClassroomConfiguration",
    "ClassroomDimensionsConfig",
    "ConfigError",
    "DeskLayoutConfig",
    "Difficulty",
    "EnvironmentConfig",
    "RouteGenerationConfig",
    "SUPPORTED_VERSIONS",
    "StudentConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "Vector3Config",
    "config_to_agent_requests",
    "config_to_anchor_overrides",
    "config_to_grid",
    "config_to_grid_input",
    "config_to_room",
    "config_to_room_input",
    "config_to_route_settings",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
