"""Pydantic schemas for the REST API."""

from glazing.web.schemas.requests import ConfigValidateRequest, GridRequest
from glazing.web.schemas.responses import (
    ErrorResponseSchema,
    GlassSchema,
    GridLayoutSchema,
    LayoutResponseSchema,
    MemberSchema,
    PanelSchema,
    QuantitySchema,
    StatisticsSchema,
    TakeoffResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "GridRequest",
    # Responses
    "ErrorResponseSchema",
    "GlassSchema",
    "GridLayoutSchema",
    "LayoutResponseSchema",
    "MemberSchema",
    "PanelSchema",
    "QuantitySchema",
    "StatisticsSchema",
    "TakeoffResponseSchema",
    "ValidationResultSchema",
]
