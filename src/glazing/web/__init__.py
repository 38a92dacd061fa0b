"""FastAPI REST API for opening grid layout and takeoff.

Usage:
    uvicorn glazing.web:app --reload
"""

from glazing.web.app import app, create_app

__all__ = ["app", "create_app"]
