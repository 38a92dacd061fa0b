"""Configuration validation endpoints."""

from fastapi import APIRouter

from glazing.application.config import load_config_from_dict, validate_config
from glazing.web.schemas.requests import ConfigValidateRequest
from glazing.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a grid configuration without laying it out.

    Schema errors (wrong types, unknown keys) are raised as ConfigError and
    returned as 422 by the registered handler.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.field} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
