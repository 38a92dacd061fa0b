"""Protocols shared across layers."""

from .strategies import AxisDivisionStrategy

__all__ = [
    "AxisDivisionStrategy",
]
