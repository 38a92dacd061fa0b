"""Domain layer - grid geometry and takeoff logic."""

from .exceptions import LayoutValidationError, UnsupportedFeatureError, ValidationError
from .services import (
    ComponentQuantityAggregator,
    GlassQuantity,
    GridLayoutEngine,
    GridStatistics,
    QuantityBreakdown,
    Takeoff,
    ValidationRules,
    aggregate,
    compute,
    validate,
)
from .value_objects import (
    ComponentNaming,
    CustomSpacing,
    EqualSpacing,
    GlassPanel,
    GridDefinition,
    GridLayout,
    GridSpacing,
    MullionKind,
    MullionMember,
    OpeningDescriptor,
    RoleKind,
    SpacingKind,
)

__all__ = [
    "ComponentNaming",
    "ComponentQuantityAggregator",
    "CustomSpacing",
    "EqualSpacing",
    "GlassPanel",
    "GlassQuantity",
    "GridDefinition",
    "GridLayout",
    "GridLayoutEngine",
    "GridSpacing",
    "GridStatistics",
    "LayoutValidationError",
    "MullionKind",
    "MullionMember",
    "OpeningDescriptor",
    "QuantityBreakdown",
    "RoleKind",
    "SpacingKind",
    "Takeoff",
    "UnsupportedFeatureError",
    "ValidationError",
    "ValidationRules",
    "aggregate",
    "compute",
    "validate",
]
