"""JSON export of grid layouts and takeoffs.

Lengths and areas are written as decimal strings so downstream pricing
never sees a binary float.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from glazing.application.dtos import GridOutput
from glazing.domain import GlassPanel, GridLayout, GridStatistics, MullionMember
from glazing.domain.services import GlassQuantity, QuantityBreakdown


def _dec(value: Decimal | None) -> str | None:
    return None if value is None else str(value)


def panel_to_dict(panel: GlassPanel) -> dict[str, Any]:
    return {
        "column": panel.column,
        "row": panel.row,
        "x": _dec(panel.x),
        "y": _dec(panel.y),
        "width": _dec(panel.width),
        "height": _dec(panel.height),
        "area": _dec(panel.area),
        "is_transom": panel.is_transom,
    }


def member_to_dict(member: MullionMember) -> dict[str, Any]:
    return {
        "kind": member.kind.value,
        "index": member.index,
        "segment": member.segment,
        "position": _dec(member.position),
        "length": _dec(member.length),
        "start_x": _dec(member.start_x),
        "end_x": _dec(member.end_x),
    }


def layout_to_dict(layout: GridLayout) -> dict[str, Any]:
    return {
        "width": _dec(layout.width),
        "height": _dec(layout.height),
        "grid_height": _dec(layout.grid_height),
        "columns": layout.columns,
        "rows": layout.rows,
        "mullion_width": _dec(layout.mullion_width),
        "perimeter": _dec(layout.perimeter),
        "vertical_mullions": [_dec(x) for x in layout.vertical_mullions],
        "horizontal_mullions": [_dec(y) for y in layout.horizontal_mullions],
        "transom_bar": _dec(layout.transom_bar),
        "panels": [panel_to_dict(p) for p in layout.panels],
        "transom_panels": [panel_to_dict(p) for p in layout.transom_panels],
        "members": [member_to_dict(m) for m in layout.members],
    }


def quantity_to_dict(breakdown: QuantityBreakdown) -> dict[str, Any]:
    return {
        "catalog_name": breakdown.catalog_name,
        "roles": [r.value for r in breakdown.roles],
        "count": breakdown.count,
        "length_each": _dec(breakdown.length_each),
        "total_length": _dec(breakdown.total_length),
    }


def glass_to_dict(glass: GlassQuantity) -> dict[str, Any]:
    return {
        "count": glass.count,
        "standard_count": glass.standard_count,
        "transom_count": glass.transom_count,
        "total_area": _dec(glass.total_area),
        "panel_areas": [_dec(a) for a in glass.panel_areas],
    }


def statistics_to_dict(stats: GridStatistics) -> dict[str, Any]:
    return {
        "total_members": stats.total_members,
        "members_by_kind": {k.value: v for k, v in stats.members_by_kind.items()},
        "total_member_length": _dec(stats.total_member_length),
        "glass_panels": stats.glass_panels,
        "standard_panels": stats.standard_panels,
        "transom_panels": stats.transom_panels,
        "total_glass_area": _dec(stats.total_glass_area),
        "opening_area": _dec(stats.opening_area),
    }


class JsonExporter:
    """Exports grid output as JSON."""

    def to_dict(self, output: GridOutput) -> dict[str, Any]:
        if not output.is_valid:
            return {
                "errors": [
                    {"field": e.field, "message": e.message} for e in output.errors
                ]
            }
        data: dict[str, Any] = {"layout": layout_to_dict(output.layout)}
        if output.takeoff is not None:
            data["quantities"] = {
                name: quantity_to_dict(q) for name, q in output.quantities.items()
            }
            data["glass"] = glass_to_dict(output.takeoff.glass)
        if output.statistics is not None:
            data["statistics"] = statistics_to_dict(output.statistics)
        return data

    @staticmethod
    def dumps(data: dict[str, Any]) -> str:
        return json.dumps(data, indent=2)

    def export(self, output: GridOutput) -> str:
        """Export grid output as a JSON string."""
        return self.dumps(self.to_dict(output))
