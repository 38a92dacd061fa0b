"""Axis division strategies and the factory that selects them."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from ..exceptions import UnsupportedFeatureError
from ..value_objects import (
    CustomSpacing,
    EqualSpacing,
    SpacingStrategy,
    ZERO,
    fraction_of,
)

if TYPE_CHECKING:
    from glazing.contracts.strategies import AxisDivisionStrategy

__all__ = ["EqualDivision", "SpacingStrategyFactory"]


class EqualDivision:
    """Split an axis into ``count`` bays of equal nominal size.

    Interior boundaries are rounded to layout precision; the outer
    boundaries are the exact axis bounds, so bay sizes always sum to the
    axis length.
    """

    def edges(self, length: Decimal, count: int) -> tuple[Decimal, ...]:
        interior = tuple(fraction_of(length, i, count) for i in range(1, count))
        return (ZERO, *interior, length)


class SpacingStrategyFactory:
    """Map a spacing variant to the strategy that implements it.

    Example:
        ```python
        factory = SpacingStrategyFactory()
        divider = factory.create_strategy(EqualSpacing(), axis="vertical")
        edges = divider.edges(Decimal("10"), 3)
        ```
    """

    def create_strategy(
        self, spacing: SpacingStrategy, axis: str
    ) -> "AxisDivisionStrategy":
        """Return the division strategy for one axis.

        Args:
            spacing: Spacing variant requested for the axis.
            axis: "vertical" or "horizontal", used in error reporting.

        Raises:
            UnsupportedFeatureError: If custom spacing is requested.
            TypeError: If the variant is not a known spacing strategy.
        """
        if isinstance(spacing, EqualSpacing):
            return EqualDivision()
        if isinstance(spacing, CustomSpacing):
            raise UnsupportedFeatureError(
                feature="custom_spacing",
                field=f"spacing.{axis}",
                message=(
                    f"Custom {axis} spacing is not supported; "
                    "only equal spacing is implemented"
                ),
            )
        raise TypeError(f"Unknown spacing strategy: {spacing!r}")
