"""Infrastructure layer - output formatting and export."""

from .exporters import JsonExporter, layout_to_dict
from .formatters import (
    GridReportFormatter,
    LayoutFormatter,
    StatisticsFormatter,
    TakeoffFormatter,
)

__all__ = [
    "GridReportFormatter",
    "JsonExporter",
    "LayoutFormatter",
    "StatisticsFormatter",
    "TakeoffFormatter",
    "layout_to_dict",
]
