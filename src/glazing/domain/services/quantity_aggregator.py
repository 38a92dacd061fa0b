"""Quantity takeoff from a computed grid layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from ..value_objects import ComponentNaming, GridLayout, RoleKind, ZERO

logger = logging.getLogger(__name__)

__all__ = [
    "ComponentQuantityAggregator",
    "GlassQuantity",
    "QuantityBreakdown",
    "Takeoff",
    "aggregate",
]


@dataclass(frozen=True)
class QuantityBreakdown:
    """Linear takeoff for one catalog part.

    Attributes:
        catalog_name: Part name the quantities are priced under.
        roles: Framing roles that map onto this part, in role order.
        runs: Length of every individual run in linear feet.
    """

    catalog_name: str
    roles: tuple[RoleKind, ...]
    runs: tuple[Decimal, ...]

    @property
    def count(self) -> int:
        return len(self.runs)

    @property
    def total_length(self) -> Decimal:
        return sum(self.runs, ZERO)

    @property
    def length_each(self) -> Decimal | None:
        """Common run length, or None when runs differ in length."""
        lengths = set(self.runs)
        if len(lengths) == 1:
            return self.runs[0]
        return None

    def merge(self, other: "QuantityBreakdown") -> "QuantityBreakdown":
        """Combine two breakdowns priced under the same catalog name."""
        if other.catalog_name != self.catalog_name:
            raise ValueError(
                f"Cannot merge '{other.catalog_name}' into '{self.catalog_name}'"
            )
        roles = self.roles + tuple(r for r in other.roles if r not in self.roles)
        return QuantityBreakdown(
            catalog_name=self.catalog_name,
            roles=roles,
            runs=self.runs + other.runs,
        )


@dataclass(frozen=True)
class GlassQuantity:
    """Glass takeoff, kept apart from framing quantities."""

    panel_areas: tuple[Decimal, ...]
    standard_count: int
    transom_count: int

    @property
    def count(self) -> int:
        return len(self.panel_areas)

    @property
    def total_area(self) -> Decimal:
        return sum(self.panel_areas, ZERO)


@dataclass(frozen=True)
class Takeoff:
    """Framing quantities by catalog name plus the glass takeoff."""

    components: dict[str, QuantityBreakdown]
    glass: GlassQuantity

    @property
    def total_linear_feet(self) -> Decimal:
        return sum((q.total_length for q in self.components.values()), ZERO)


class ComponentQuantityAggregator:
    """Turns a layout into priced-by-name quantities.

    Each framing role contributes whole runs: one sill and one head the
    width of the opening, two jambs the height of the opening, one vertical
    per interior vertical mullion and one horizontal per interior horizontal
    mullion (plus the transom bar, which is stocked as a horizontal). Roles
    sharing a catalog name are summed under that name.
    """

    def role_runs(self, layout: GridLayout) -> dict[RoleKind, tuple[Decimal, ...]]:
        """Return the run lengths contributed by each framing role."""
        horizontal_runs = (layout.width,) * len(layout.horizontal_mullions)
        if layout.transom_bar is not None:
            horizontal_runs += (layout.width,)
        return {
            RoleKind.SILL: (layout.width,),
            RoleKind.HEAD: (layout.width,),
            RoleKind.JAMB: (layout.height, layout.height),
            RoleKind.VERTICAL: (layout.grid_height,) * len(layout.vertical_mullions),
            RoleKind.HORIZONTAL: horizontal_runs,
        }

    def aggregate(
        self, layout: GridLayout, components: ComponentNaming
    ) -> dict[str, QuantityBreakdown]:
        """Group framing runs by catalog name.

        Roles with no runs (verticals in a single-column grid, for example)
        are left out of the result.
        """
        quantities: dict[str, QuantityBreakdown] = {}
        for role, runs in self.role_runs(layout).items():
            if not runs:
                continue
            name = components.name_for(role)
            breakdown = QuantityBreakdown(catalog_name=name, roles=(role,), runs=runs)
            if name in quantities:
                logger.debug(f"Role '{role.value}' shares catalog name '{name}'")
                breakdown = quantities[name].merge(breakdown)
            quantities[name] = breakdown
        return quantities

    def glass(self, layout: GridLayout) -> GlassQuantity:
        return GlassQuantity(
            panel_areas=tuple(panel.area for panel in layout.all_panels),
            standard_count=len(layout.panels),
            transom_count=len(layout.transom_panels),
        )

    def takeoff(self, layout: GridLayout, components: ComponentNaming) -> Takeoff:
        return Takeoff(
            components=self.aggregate(layout, components),
            glass=self.glass(layout),
        )


_DEFAULT_AGGREGATOR = ComponentQuantityAggregator()


def aggregate(
    layout: GridLayout, components: ComponentNaming
) -> dict[str, QuantityBreakdown]:
    """Aggregate framing quantities with the default aggregator."""
    return _DEFAULT_AGGREGATOR.aggregate(layout, components)
