"""Constraint checks for opening descriptors and grid definitions."""

from __future__ import annotations

import logging
from decimal import Decimal

from ..exceptions import ValidationError
from ..value_objects import (
    GridDefinition,
    OpeningDescriptor,
    feet_to_inches,
    fraction_of,
)

logger = logging.getLogger(__name__)

__all__ = ["ValidationRules", "validate"]


class ValidationRules:
    """Checks every grid constraint in a single pass.

    Violations are collected rather than raised so that a form can show all
    of them at once. An empty list means the inputs may be laid out.
    """

    MIN_DIVISIONS = 1
    MAX_DIVISIONS = 20
    MAX_MULLION_WIDTH = Decimal("6")
    # Smallest lite that can be glazed, in feet (6 inches)
    MIN_PANEL_SIZE = Decimal("0.5")
    # Keeps every coordinate and area exact at layout precision
    MAX_DIMENSION = Decimal("100000")

    def validate(
        self, descriptor: OpeningDescriptor, definition: GridDefinition
    ) -> list[ValidationError]:
        errors: list[ValidationError] = []
        errors.extend(self._check_opening(descriptor))
        errors.extend(self._check_grid(definition))
        errors.extend(self._check_transom(descriptor))

        # Lite size only makes sense once the divisions themselves are sane
        if not errors:
            errors.extend(self._check_panel_size(descriptor, definition))

        if errors:
            logger.debug(f"Grid validation found {len(errors)} violation(s)")
        return errors

    def _check_opening(self, descriptor: OpeningDescriptor) -> list[ValidationError]:
        errors: list[ValidationError] = []
        for name, label in (("width", "Opening width"), ("height", "Opening height")):
            value = getattr(descriptor, name)
            error = self._check_magnitude(name, label, value)
            if error is None and value <= 0:
                error = ValidationError(name, f"{label} must be greater than 0", value)
            if error is not None:
                errors.append(error)
        for name, label in (
            ("sill_height", "Sill height"),
            ("start_position", "Start position"),
        ):
            value = getattr(descriptor, name)
            error = self._check_magnitude(name, label, value)
            if error is None and value < 0:
                error = ValidationError(name, f"{label} cannot be negative", value)
            if error is not None:
                errors.append(error)
        return errors

    def _check_magnitude(
        self, field: str, label: str, value: Decimal
    ) -> ValidationError | None:
        """Reject values that cannot be compared or laid out exactly."""
        if not value.is_finite():
            return ValidationError(field, f"{label} must be a finite number", value)
        if abs(value) > self.MAX_DIMENSION:
            return ValidationError(
                field, f"{label} must be at most {self.MAX_DIMENSION} feet", value
            )
        return None

    def _check_grid(self, definition: GridDefinition) -> list[ValidationError]:
        errors: list[ValidationError] = []
        if not self.MIN_DIVISIONS <= definition.columns <= self.MAX_DIVISIONS:
            errors.append(
                ValidationError(
                    "columns", "Columns must be between 1 and 20", definition.columns
                )
            )
        if not self.MIN_DIVISIONS <= definition.rows <= self.MAX_DIVISIONS:
            errors.append(
                ValidationError("rows", "Rows must be between 1 and 20", definition.rows)
            )
        mullion = definition.mullion_width
        if not mullion.is_finite():
            errors.append(
                ValidationError(
                    "mullion_width", "Mullion width must be a finite number", mullion
                )
            )
        elif mullion <= 0 or mullion > self.MAX_MULLION_WIDTH:
            errors.append(
                ValidationError(
                    "mullion_width",
                    "Mullion width must be between 0 and 6 inches",
                    mullion,
                )
            )
        return errors

    def _check_transom(self, descriptor: OpeningDescriptor) -> list[ValidationError]:
        if not descriptor.has_transom:
            return []
        transom = descriptor.transom_height
        if transom is not None:
            error = self._check_magnitude("transom_height", "Transom height", transom)
            if error is not None:
                return [error]
        if transom is None or transom <= 0:
            return [
                ValidationError(
                    "transom_height",
                    "Transom height is required when transom is enabled",
                    transom,
                )
            ]
        height = descriptor.height
        if height.is_finite() and height > 0 and transom >= height:
            return [
                ValidationError(
                    "transom_height",
                    "Transom height cannot be greater than or equal to opening height",
                    transom,
                )
            ]
        return []

    def _check_panel_size(
        self, descriptor: OpeningDescriptor, definition: GridDefinition
    ) -> list[ValidationError]:
        errors: list[ValidationError] = []
        column_width = fraction_of(descriptor.width, 1, definition.columns)
        row_height = fraction_of(descriptor.grid_height, 1, definition.rows)

        if column_width < self.MIN_PANEL_SIZE:
            errors.append(
                ValidationError(
                    "columns",
                    f"Too many columns: each panel would be only "
                    f'{feet_to_inches(column_width):.1f}" wide',
                    definition.columns,
                )
            )
        if row_height < self.MIN_PANEL_SIZE:
            errors.append(
                ValidationError(
                    "rows",
                    f"Too many rows: each panel would be only "
                    f'{feet_to_inches(row_height):.1f}" tall',
                    definition.rows,
                )
            )
        return errors


_DEFAULT_RULES = ValidationRules()


def validate(
    descriptor: OpeningDescriptor, definition: GridDefinition
) -> list[ValidationError]:
    """Return every constraint the inputs violate (empty when valid)."""
    return _DEFAULT_RULES.validate(descriptor, definition)
