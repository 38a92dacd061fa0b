"""Domain services for grid layout and quantity takeoff."""

from .grid_layout import GridLayoutEngine, compute
from .grid_statistics import GridStatistics
from .quantity_aggregator import (
    ComponentQuantityAggregator,
    GlassQuantity,
    QuantityBreakdown,
    Takeoff,
    aggregate,
)
from .spacing import EqualDivision, SpacingStrategyFactory
from .validation import ValidationRules, validate

__all__ = [
    "ComponentQuantityAggregator",
    "EqualDivision",
    "GlassQuantity",
    "GridLayoutEngine",
    "GridStatistics",
    "QuantityBreakdown",
    "SpacingStrategyFactory",
    "Takeoff",
    "ValidationRules",
    "aggregate",
    "compute",
    "validate",
]
