"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from glazing.domain import (
    GridLayout,
    GridStatistics,
    QuantityBreakdown,
    Takeoff,
    ValidationError,
)
from glazing.domain.services import GlassQuantity


@dataclass
class GridOutput:
    """Output DTO for one grid computation.

    Attributes:
        layout: Computed geometry for the preview renderer (None on failure).
        takeoff: Framing and glass quantities for costing (None on failure).
        statistics: Summary counts for the grid statistics panel.
        errors: Every validation error when the inputs were rejected.
    """

    layout: GridLayout | None = None
    takeoff: Takeoff | None = None
    statistics: GridStatistics | None = None
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors and self.layout is not None

    @property
    def error_messages(self) -> list[str]:
        return [e.message for e in self.errors]

    @property
    def quantities(self) -> dict[str, QuantityBreakdown]:
        """Framing quantities keyed by catalog name (empty on failure)."""
        return self.takeoff.components if self.takeoff else {}

    @property
    def glass(self) -> GlassQuantity | None:
        return self.takeoff.glass if self.takeoff else None
