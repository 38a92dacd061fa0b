"""Text formatters for grid layouts and takeoffs."""

from __future__ import annotations

from decimal import Decimal

from glazing.application.dtos import GridOutput
from glazing.domain import GridLayout, GridStatistics, QuantityBreakdown
from glazing.domain.services import GlassQuantity


def _ft(value: Decimal) -> str:
    return f"{value:.4f}"


class LayoutFormatter:
    """Formats mullion positions and lites as a table."""

    def format(self, layout: GridLayout) -> str:
        lines = [
            "GRID LAYOUT",
            "=" * 70,
            f"Opening: {_ft(layout.width)} ft x {_ft(layout.height)} ft  "
            f"({layout.columns} columns x {layout.rows} rows, "
            f"{layout.mullion_width} in. mullions)",
            f"Perimeter: {_ft(layout.perimeter)} ft",
        ]
        if layout.has_transom:
            lines.append(
                f"Transom: {_ft(layout.transom_height)} ft above {_ft(layout.grid_height)} ft"
            )

        verticals = ", ".join(_ft(x) for x in layout.vertical_mullions) or "none"
        horizontals = ", ".join(_ft(y) for y in layout.horizontal_mullions) or "none"
        lines.append(f"Vertical mullions (x):   {verticals}")
        lines.append(f"Horizontal mullions (y): {horizontals}")

        lines.extend(
            [
                "",
                f"{'Lite':<10} {'X':<10} {'Y':<10} {'Width':<10} {'Height':<10} {'Area (sq ft)'}",
                "-" * 70,
            ]
        )
        for panel in layout.all_panels:
            label = f"T{panel.column + 1}" if panel.is_transom else (
                f"R{panel.row + 1}C{panel.column + 1}"
            )
            lines.append(
                f"{label:<10} {_ft(panel.x):<10} {_ft(panel.y):<10} "
                f"{_ft(panel.width):<10} {_ft(panel.height):<10} {panel.area:.2f}"
            )
        return "\n".join(lines)


class TakeoffFormatter:
    """Formats framing and glass quantities for the estimator."""

    def format(
        self, quantities: dict[str, QuantityBreakdown], glass: GlassQuantity
    ) -> str:
        lines = [
            "FRAMING TAKEOFF",
            "=" * 70,
            f"{'Catalog Part':<24} {'Roles':<20} {'Qty':<6} {'Each (ft)':<10} {'Total (LF)'}",
            "-" * 70,
        ]
        total = Decimal("0")
        for name, breakdown in quantities.items():
            roles = "+".join(r.value for r in breakdown.roles)
            each = breakdown.length_each
            each_str = _ft(each) if each is not None else "mixed"
            lines.append(
                f"{name:<24} {roles:<20} {breakdown.count:<6} {each_str:<10} "
                f"{_ft(breakdown.total_length)}"
            )
            total += breakdown.total_length
        lines.append("-" * 70)
        lines.append(f"{'TOTAL':<24} {'':<20} {'':<6} {'':<10} {_ft(total)}")
        lines.extend(
            [
                "",
                "GLASS TAKEOFF",
                "=" * 70,
                f"Lites: {glass.count} ({glass.standard_count} standard, "
                f"{glass.transom_count} transom)",
                f"Total glass area: {glass.total_area:.2f} sq ft",
            ]
        )
        return "\n".join(lines)


class StatisticsFormatter:
    """Formats the grid statistics summary."""

    def format(self, stats: GridStatistics) -> str:
        lines = [
            "GRID STATISTICS",
            "=" * 40,
            f"Glass panels:    {stats.glass_panels}",
            f"Members:         {stats.total_members}",
            f"Member length:   {_ft(stats.total_member_length)} ft",
            f"Glass area:      {stats.total_glass_area:.2f} sq ft",
            f"Opening area:    {stats.opening_area:.2f} sq ft",
            "",
            "Member types:",
        ]
        for kind, count in stats.members_by_kind.items():
            lines.append(f"  {kind.value.replace('_', ' ').capitalize():<14} {count}")
        return "\n".join(lines)


class GridReportFormatter:
    """Combines layout, takeoff and statistics into one report."""

    def __init__(self) -> None:
        self._layout = LayoutFormatter()
        self._takeoff = TakeoffFormatter()
        self._stats = StatisticsFormatter()

    def format(self, output: GridOutput) -> str:
        if not output.is_valid:
            return "\n".join(f"Error: {m}" for m in output.error_messages)
        sections = [self._layout.format(output.layout)]
        if output.takeoff is not None:
            sections.append(self._takeoff.format(output.quantities, output.takeoff.glass))
        if output.statistics is not None:
            sections.append(self._stats.format(output.statistics))
        return "\n\n".join(sections)
