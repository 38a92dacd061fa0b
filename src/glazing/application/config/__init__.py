"""Configuration loading, validation and adaptation for grid payloads.

Typical flow:

    config = load_config(Path("storefront.json"))
    result = validate_config(config)
    if result.is_valid:
        descriptor, definition = config_to_domain(config)
"""

from glazing.application.config.adapter import (
    config_to_definition,
    config_to_descriptor,
    config_to_domain,
    config_to_naming,
    config_to_spacing,
)
from glazing.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from glazing.application.config.merger import (
    build_config_from_cli,
    merge_config_with_cli,
)
from glazing.application.config.schema import (
    SUPPORTED_VERSIONS,
    ComponentsConfig,
    GridConfig,
    GridConfiguration,
    OpeningConfig,
    SpacingConfig,
)
from glazing.application.config.validator import (
    FIELD_PATHS,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "ComponentsConfig",
    "GridConfig",
    "GridConfiguration",
    "OpeningConfig",
    "SpacingConfig",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Merging
    "build_config_from_cli",
    "merge_config_with_cli",
    # Adapters
    "config_to_definition",
    "config_to_descriptor",
    "config_to_domain",
    "config_to_naming",
    "config_to_spacing",
    # Validation
    "FIELD_PATHS",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
]
