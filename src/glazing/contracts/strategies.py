"""Strategy protocols for dividing an opening axis.

A spacing strategy turns an axis length and a bay count into the ordered
bay boundaries along that axis. The grid layout engine asks a factory for
the strategy matching each axis of the grid definition, so new spacing
variants can be added without touching the engine.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, runtime_checkable


@runtime_checkable
class AxisDivisionStrategy(Protocol):
    """Protocol for axis division strategies.

    Example:
        ```python
        class EqualDivision:
            def edges(self, length: Decimal, count: int) -> tuple[Decimal, ...]:
                return tuple(fraction_of(length, i, count) for i in range(count + 1))
        ```
    """

    def edges(self, length: Decimal, count: int) -> tuple[Decimal, ...]:
        """Return ``count + 1`` ascending boundaries from 0 to ``length``.

        Args:
            length: Axis length in feet.
            count: Number of bays along the axis (at least 1).

        Returns:
            Boundaries where the first is zero and the last is ``length``.
        """
        ...


__all__ = [
    "AxisDivisionStrategy",
]
