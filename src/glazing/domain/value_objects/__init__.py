"""Value objects for the glazing domain.

This module provides immutable data types used throughout the grid layout
and takeoff engine. All classes are re-exported from sub-modules for
convenience.
"""

from __future__ import annotations

# Fixed-point helpers
from ._units import (
    PRECISION,
    ZERO,
    feet_to_inches,
    fraction_of,
    inches_to_feet,
    is_representable,
    normalize,
    quantize,
    to_decimal,
)

# Opening dimensions
from ._opening import OpeningDescriptor

# Grid definition
from ._grid import (
    DEFAULT_COLUMNS,
    DEFAULT_MULLION_WIDTH,
    DEFAULT_ROWS,
    ComponentNaming,
    CustomSpacing,
    EqualSpacing,
    GridDefinition,
    GridSpacing,
    RoleKind,
    SpacingKind,
    SpacingStrategy,
    spacing_from_kind,
)

# Derived layout
from ._layout import (
    GlassPanel,
    GridLayout,
    MullionKind,
    MullionMember,
)

__all__ = [
    # Units
    "PRECISION",
    "ZERO",
    "feet_to_inches",
    "fraction_of",
    "inches_to_feet",
    "is_representable",
    "normalize",
    "quantize",
    "to_decimal",
    # Opening
    "OpeningDescriptor",
    # Grid definition
    "DEFAULT_COLUMNS",
    "DEFAULT_MULLION_WIDTH",
    "DEFAULT_ROWS",
    "ComponentNaming",
    "CustomSpacing",
    "EqualSpacing",
    "GridDefinition",
    "GridSpacing",
    "RoleKind",
    "SpacingKind",
    "SpacingStrategy",
    "spacing_from_kind",
    # Layout
    "GlassPanel",
    "GridLayout",
    "MullionKind",
    "MullionMember",
]
