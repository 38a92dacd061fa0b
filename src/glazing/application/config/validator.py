"""Full validation of a grid configuration.

Combines the domain constraint checks with configuration-level advisories
into one ``ValidationResult`` whose exit code drives the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from glazing.application.config.adapter import config_to_domain
from glazing.application.config.schema import GridConfiguration
from glazing.domain.exceptions import UnsupportedFeatureError, ValidationError
from glazing.domain.services import SpacingStrategyFactory, ValidationRules
from glazing.domain.value_objects import (
    GridDefinition,
    OpeningDescriptor,
    SpacingKind,
    fraction_of,
    inches_to_feet,
)

logger = logging.getLogger(__name__)

# Domain field identifiers and where they live in a configuration
FIELD_PATHS: dict[str, str] = {
    "width": "opening.width",
    "height": "opening.height",
    "sill_height": "opening.sill_height",
    "start_position": "opening.start_position",
    "transom_height": "opening.transom_height",
    "columns": "grid.columns",
    "rows": "grid.rows",
    "mullion_width": "grid.mullion_width",
}


@dataclass
class ValidationWarning:
    """A non-blocking advisory.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Errors use the domain ``ValidationError`` record with ``field`` holding
    the JSON path into the configuration.
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(field=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def validate_config(
    config: GridConfiguration,
    rules: ValidationRules | None = None,
) -> ValidationResult:
    """Validate a configuration without computing its layout.

    Args:
        config: Parsed grid configuration.
        rules: Domain rules to apply (defaults to ``ValidationRules()``).

    Returns:
        ValidationResult with every error and advisory found.
    """
    rules = rules or ValidationRules()
    result = ValidationResult()
    descriptor, definition = config_to_domain(config)

    for error in rules.validate(descriptor, definition):
        result.add_error(FIELD_PATHS.get(error.field, error.field), error.message, error.value)

    result.merge(_check_spacing(config, definition))

    if result.is_valid:
        result.merge(_check_mullion_coverage(descriptor, definition))

    logger.debug(
        f"Configuration validated: {len(result.errors)} error(s), "
        f"{len(result.warnings)} warning(s)"
    )
    return result


def _check_spacing(config: GridConfiguration, definition: GridDefinition) -> ValidationResult:
    result = ValidationResult()
    factory = SpacingStrategyFactory()
    spacing = config.grid.spacing

    for axis, strategy in (
        ("vertical", definition.spacing.vertical),
        ("horizontal", definition.spacing.horizontal),
    ):
        try:
            factory.create_strategy(strategy, axis=axis)
        except UnsupportedFeatureError as e:
            result.add_error(f"grid.spacing.{axis}", e.message, strategy.kind.value)

    if spacing.vertical is SpacingKind.EQUAL and spacing.vertical_offsets:
        result.add_warning(
            "grid.spacing.vertical_offsets",
            "Offsets are ignored with equal spacing",
            suggestion="Remove vertical_offsets or leave spacing on equal intentionally",
        )
    if spacing.horizontal is SpacingKind.EQUAL and spacing.horizontal_offsets:
        result.add_warning(
            "grid.spacing.horizontal_offsets",
            "Offsets are ignored with equal spacing",
            suggestion="Remove horizontal_offsets or leave spacing on equal intentionally",
        )
    return result


def _check_mullion_coverage(
    descriptor: OpeningDescriptor, definition: GridDefinition
) -> ValidationResult:
    """Warn when the mullion face would hide a whole lite in the preview."""
    result = ValidationResult()
    face = inches_to_feet(definition.mullion_width)
    column_width = fraction_of(descriptor.width, 1, definition.columns)
    row_height = fraction_of(descriptor.grid_height, 1, definition.rows)

    if face >= column_width or face >= row_height:
        result.add_warning(
            "grid.mullion_width",
            f"Mullion face width of {definition.mullion_width} in. covers an entire "
            "lite in the elevation preview",
            suggestion="Reduce columns/rows or use a narrower mullion",
        )
    return result
