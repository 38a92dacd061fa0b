"""API routers for the REST API."""

from glazing.web.routers.grid import router as grid_router
from glazing.web.routers.validate import router as validate_router

__all__ = [
    "grid_router",
    "validate_router",
]
