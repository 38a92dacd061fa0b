"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from glazing.application.config import ConfigError
from glazing.domain import LayoutValidationError, UnsupportedFeatureError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(LayoutValidationError)
    async def layout_validation_handler(
        request: Request, exc: LayoutValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Grid validation failed",
                "error_type": "validation",
                "details": [
                    {
                        "field": e.field,
                        "message": e.message,
                        "value": None if e.value is None else str(e.value),
                    }
                    for e in exc.errors
                ],
            },
        )

    @app.exception_handler(UnsupportedFeatureError)
    async def unsupported_feature_handler(
        request: Request, exc: UnsupportedFeatureError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": exc.message,
                "error_type": "unsupported_feature",
                "details": {"feature": exc.feature, "field": exc.field},
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Configuration validation failed",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )
