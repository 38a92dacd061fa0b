"""Grid layout engine.

Derives mullion positions, lite cells and framing members for an opening
from its dimensions and grid definition. The engine keeps no state between
calls: identical inputs always give an equal layout, so callers can rebuild
the layout on every edit and retry freely.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ..exceptions import LayoutValidationError
from ..value_objects import (
    GlassPanel,
    GridDefinition,
    GridLayout,
    MullionKind,
    MullionMember,
    OpeningDescriptor,
    ZERO,
)
from .spacing import SpacingStrategyFactory
from .validation import ValidationRules

logger = logging.getLogger(__name__)

__all__ = ["GridLayoutEngine", "compute"]


def _bays(edges: tuple[Decimal, ...]) -> list[tuple[Decimal, Decimal]]:
    return list(zip(edges, edges[1:]))


class GridLayoutEngine:
    """Computes a GridLayout from an opening and its grid definition.

    Geometry follows the overlay model used by the elevation preview:
    mullion face width is carried on the layout for drawing but does not
    reduce the nominal lite sizes.
    """

    def __init__(
        self,
        validation_rules: ValidationRules | None = None,
        spacing_factory: SpacingStrategyFactory | None = None,
    ) -> None:
        self._rules = validation_rules or ValidationRules()
        self._spacing_factory = spacing_factory or SpacingStrategyFactory()

    def compute(
        self, descriptor: OpeningDescriptor, definition: GridDefinition
    ) -> GridLayout:
        """Lay out the grid.

        Args:
            descriptor: Opening dimensions.
            definition: Grid divisions, mullion width, spacing and naming.

        Returns:
            A freshly built GridLayout.

        Raises:
            LayoutValidationError: If any constraint is violated. All
                violations are carried on the exception.
            UnsupportedFeatureError: If custom spacing is requested on
                either axis.
        """
        errors = self._rules.validate(descriptor, definition)
        if errors:
            raise LayoutValidationError(errors)

        vertical_divider = self._spacing_factory.create_strategy(
            definition.spacing.vertical, axis="vertical"
        )
        horizontal_divider = self._spacing_factory.create_strategy(
            definition.spacing.horizontal, axis="horizontal"
        )

        width = descriptor.width
        grid_height = descriptor.grid_height
        x_edges = vertical_divider.edges(width, definition.columns)
        y_edges = horizontal_divider.edges(grid_height, definition.rows)

        panels = self._main_panels(x_edges, y_edges)
        transom_panels: tuple[GlassPanel, ...] = ()
        transom_bar: Decimal | None = None
        if descriptor.transom_allowance > 0:
            transom_bar = grid_height
            transom_panels = self._transom_panels(
                x_edges, grid_height, descriptor.transom_allowance, definition.rows
            )

        layout = GridLayout(
            width=width,
            height=descriptor.height,
            grid_height=grid_height,
            columns=definition.columns,
            rows=definition.rows,
            mullion_width=definition.mullion_width,
            vertical_mullions=x_edges[1:-1],
            horizontal_mullions=y_edges[1:-1],
            panels=panels,
            transom_panels=transom_panels,
            transom_bar=transom_bar,
            members=self._members(
                x_edges, y_edges, descriptor.height, grid_height, transom_bar
            ),
        )
        logger.debug(
            f"Computed {definition.columns}x{definition.rows} grid: "
            f"{len(layout.all_panels)} lites, {len(layout.members)} members"
        )
        return layout

    def _main_panels(
        self, x_edges: tuple[Decimal, ...], y_edges: tuple[Decimal, ...]
    ) -> tuple[GlassPanel, ...]:
        return tuple(
            GlassPanel(
                column=col,
                row=row,
                x=x0,
                y=y0,
                width=x1 - x0,
                height=y1 - y0,
            )
            for row, (y0, y1) in enumerate(_bays(y_edges))
            for col, (x0, x1) in enumerate(_bays(x_edges))
        )

    def _transom_panels(
        self,
        x_edges: tuple[Decimal, ...],
        grid_height: Decimal,
        transom_height: Decimal,
        rows: int,
    ) -> tuple[GlassPanel, ...]:
        return tuple(
            GlassPanel(
                column=col,
                row=rows,
                x=x0,
                y=grid_height,
                width=x1 - x0,
                height=transom_height,
                is_transom=True,
            )
            for col, (x0, x1) in enumerate(_bays(x_edges))
        )

    def _members(
        self,
        x_edges: tuple[Decimal, ...],
        y_edges: tuple[Decimal, ...],
        height: Decimal,
        grid_height: Decimal,
        transom_bar: Decimal | None,
    ) -> tuple[MullionMember, ...]:
        members: list[MullionMember] = []

        # Verticals run continuously from sill to head of the main grid
        for index, x in enumerate(x_edges[1:-1], start=1):
            members.append(
                MullionMember(
                    kind=MullionKind.VERTICAL,
                    index=index,
                    segment=None,
                    position=x,
                    length=grid_height,
                )
            )

        for index, y in enumerate(y_edges[1:-1], start=1):
            members.extend(self._segments(MullionKind.HORIZONTAL, index, y, x_edges))

        if transom_bar is not None:
            members.extend(
                self._segments(MullionKind.TRANSOM, len(y_edges) - 1, transom_bar, x_edges)
            )

        members.extend(self._segments(MullionKind.SILL, 0, ZERO, x_edges))
        members.extend(self._segments(MullionKind.HEAD, 0, height, x_edges))

        # Jambs always span the full opening, transom included
        members.append(
            MullionMember(
                kind=MullionKind.JAMB_LEFT,
                index=0,
                segment=None,
                position=ZERO,
                length=height,
            )
        )
        members.append(
            MullionMember(
                kind=MullionKind.JAMB_RIGHT,
                index=0,
                segment=None,
                position=x_edges[-1],
                length=height,
            )
        )
        return tuple(members)

    def _segments(
        self,
        kind: MullionKind,
        index: int,
        position: Decimal,
        x_edges: tuple[Decimal, ...],
    ) -> list[MullionMember]:
        return [
            MullionMember(
                kind=kind,
                index=index,
                segment=segment,
                position=position,
                length=x1 - x0,
                start_x=x0,
                end_x=x1,
            )
            for segment, (x0, x1) in enumerate(_bays(x_edges))
        ]


_DEFAULT_ENGINE = GridLayoutEngine()


def compute(descriptor: OpeningDescriptor, definition: GridDefinition) -> GridLayout:
    """Compute a layout with the default engine."""
    return _DEFAULT_ENGINE.compute(descriptor, definition)
