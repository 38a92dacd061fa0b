"""Application layer - use cases and orchestration."""

from .commands import GenerateGridCommand
from .dtos import GridOutput
from .factory import ServiceFactory, get_factory

__all__ = [
    "GenerateGridCommand",
    "GridOutput",
    "ServiceFactory",
    "get_factory",
]
