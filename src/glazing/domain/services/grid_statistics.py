"""Summary statistics for a grid layout."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from decimal import Decimal

from ..value_objects import GridLayout, MullionKind, ZERO

__all__ = ["GridStatistics"]


@dataclass(frozen=True)
class GridStatistics:
    """Counts and totals shown alongside the grid preview.

    Member counts are per stored member, so segmented sills, heads and
    horizontals count once per bay.
    """

    total_members: int
    members_by_kind: dict[MullionKind, int]
    total_member_length: Decimal
    glass_panels: int
    standard_panels: int
    transom_panels: int
    total_glass_area: Decimal
    opening_area: Decimal

    @classmethod
    def from_layout(cls, layout: GridLayout) -> "GridStatistics":
        counts = Counter(member.kind for member in layout.members)
        return cls(
            total_members=len(layout.members),
            members_by_kind={kind: counts[kind] for kind in MullionKind if counts[kind]},
            total_member_length=sum((m.length for m in layout.members), ZERO),
            glass_panels=len(layout.all_panels),
            standard_panels=len(layout.panels),
            transom_panels=len(layout.transom_panels),
            total_glass_area=sum((p.area for p in layout.all_panels), ZERO),
            opening_area=layout.width * layout.height,
        )
