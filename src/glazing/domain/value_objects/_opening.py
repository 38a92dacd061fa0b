"""Opening dimension value objects."""

from __future__ import annotations

from dataclasses import dataclass

from ._units import ZERO, normalize


@dataclass(frozen=True)
class OpeningDescriptor:
    """Physical dimensions of one opening on an elevation.

    All dimensions are in feet and are normalized to fixed-point ``Decimal``
    at the shared layout precision. Range checks are left to
    ``ValidationRules`` so that every violation can be reported at once.

    Attributes:
        width: Rough opening width.
        height: Rough opening height, including any transom.
        sill_height: Height of the sill above finished floor.
        start_position: Horizontal offset of the opening along the elevation.
        has_transom: Whether a transom lite sits above the main grid.
        transom_height: Height of the transom lite (required with has_transom).
    """

    width: Decimal
    height: Decimal
    sill_height: Decimal = ZERO
    start_position: Decimal = ZERO
    has_transom: bool = False
    transom_height: Decimal | None = None

    def __post_init__(self) -> None:
        for name in ("width", "height", "sill_height", "start_position"):
            object.__setattr__(self, name, normalize(getattr(self, name)))
        if self.transom_height is not None:
            object.__setattr__(
                self, "transom_height", normalize(self.transom_height)
            )

    @property
    def transom_allowance(self) -> Decimal:
        """Height taken by the transom, zero when there is none."""
        transom = self.transom_height
        if self.has_transom and transom is not None and transom.is_finite() and transom > 0:
            return transom
        return ZERO

    @property
    def grid_height(self) -> Decimal:
        """Height available to the main mullion grid below the transom."""
        return self.height - self.transom_allowance

    @property
    def head_height(self) -> Decimal:
        """Elevation of the head above finished floor."""
        return self.sill_height + self.height

    @property
    def area(self) -> Decimal:
        """Rough opening area in square feet."""
        return self.width * self.height

    @property
    def perimeter(self) -> Decimal:
        return 2 * (self.width + self.height)
