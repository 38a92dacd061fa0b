"""Derived grid layout value objects."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from ._units import ZERO


class MullionKind(str, Enum):
    """Kind of framing member as stored on an opening record."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    TRANSOM = "transom"
    SILL = "sill"
    HEAD = "head"
    JAMB_LEFT = "jamb_left"
    JAMB_RIGHT = "jamb_right"


@dataclass(frozen=True)
class GlassPanel:
    """One glass lite in the grid.

    Coordinates are measured in feet from the bottom-left corner of the
    opening, with row 0 at the sill.
    """

    column: int
    row: int
    x: Decimal
    y: Decimal
    width: Decimal
    height: Decimal
    is_transom: bool = False

    @property
    def area(self) -> Decimal:
        """Nominal lite area in square feet."""
        return self.width * self.height


@dataclass(frozen=True)
class MullionMember:
    """A single framing member run.

    Verticals and jambs are continuous; horizontals, transom bars, sills and
    heads are split into one segment per bay between verticals.

    Attributes:
        kind: Member kind.
        index: 1-based grid line for verticals, horizontals and transom bars;
            0 for perimeter members.
        segment: Bay index for segmented members, None for continuous ones.
        position: Offset of the member centerline (x for verticals and jambs,
            y for everything else).
        length: Run length in feet.
        start_x: Left end of a segmented member.
        end_x: Right end of a segmented member.
    """

    kind: MullionKind
    index: int
    segment: int | None
    position: Decimal
    length: Decimal
    start_x: Decimal | None = None
    end_x: Decimal | None = None


@dataclass(frozen=True)
class GridLayout:
    """Mullion and lite geometry derived from an opening and its grid.

    A layout is rebuilt from scratch whenever its inputs change; it is never
    edited in place.
    """

    width: Decimal
    height: Decimal
    grid_height: Decimal
    columns: int
    rows: int
    mullion_width: Decimal
    vertical_mullions: tuple[Decimal, ...]
    horizontal_mullions: tuple[Decimal, ...]
    panels: tuple[GlassPanel, ...]
    transom_panels: tuple[GlassPanel, ...] = ()
    transom_bar: Decimal | None = None
    members: tuple[MullionMember, ...] = ()

    @property
    def perimeter(self) -> Decimal:
        return 2 * (self.width + self.height)

    @property
    def panel_count(self) -> int:
        return len(self.panels)

    @property
    def has_transom(self) -> bool:
        return self.transom_bar is not None

    @property
    def transom_height(self) -> Decimal:
        return self.height - self.grid_height

    @property
    def all_panels(self) -> tuple[GlassPanel, ...]:
        """Main grid lites followed by transom lites."""
        return self.panels + self.transom_panels

    def column_edges(self) -> tuple[Decimal, ...]:
        """X offsets of every bay boundary, jambs included."""
        return (ZERO, *self.vertical_mullions, self.width)

    def row_edges(self) -> tuple[Decimal, ...]:
        """Y offsets of every main-grid boundary, sill and transom bar included."""
        return (ZERO, *self.horizontal_mullions, self.grid_height)

    def members_of(self, kind: MullionKind) -> tuple[MullionMember, ...]:
        return tuple(m for m in self.members if m.kind is kind)
