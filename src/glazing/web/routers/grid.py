"""Grid layout and takeoff endpoints.

Both endpoints rebuild the layout from the submitted dimensions every
time; the caller persists the result in place of any stored grid.
"""

import logging

from fastapi import APIRouter

from glazing.application.commands import GenerateGridCommand
from glazing.application.dtos import GridOutput
from glazing.domain import LayoutValidationError
from glazing.infrastructure.exporters import (
    glass_to_dict,
    layout_to_dict,
    quantity_to_dict,
    statistics_to_dict,
)
from glazing.web.dependencies import GenerateCommandDep
from glazing.web.schemas.requests import GridRequest
from glazing.web.schemas.responses import (
    ErrorResponseSchema,
    GlassSchema,
    GridLayoutSchema,
    LayoutResponseSchema,
    QuantitySchema,
    StatisticsSchema,
    TakeoffResponseSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/grid",
    tags=["grid"],
    responses={
        400: {"model": ErrorResponseSchema, "description": "Unsupported feature"},
        422: {"model": ErrorResponseSchema, "description": "Grid validation failed"},
    },
)


def _run(command: GenerateGridCommand, request: GridRequest) -> GridOutput:
    output = command.execute_config(request.to_configuration())
    if not output.is_valid:
        raise LayoutValidationError(output.errors)
    return output


@router.post("/layout", response_model=LayoutResponseSchema)
async def compute_layout(
    request: GridRequest,
    command: GenerateCommandDep,
) -> LayoutResponseSchema:
    """Compute mullion and lite geometry for the elevation preview."""
    output = _run(command, request)
    return LayoutResponseSchema(
        layout=GridLayoutSchema.model_validate(layout_to_dict(output.layout)),
        statistics=StatisticsSchema.model_validate(statistics_to_dict(output.statistics)),
    )


@router.post("/takeoff", response_model=TakeoffResponseSchema)
async def compute_takeoff(
    request: GridRequest,
    command: GenerateCommandDep,
) -> TakeoffResponseSchema:
    """Compute geometry plus framing and glass quantities for costing."""
    output = _run(command, request)
    logger.debug(f"Takeoff produced {len(output.quantities)} catalog part(s)")
    return TakeoffResponseSchema(
        layout=GridLayoutSchema.model_validate(layout_to_dict(output.layout)),
        quantities={
            name: QuantitySchema.model_validate(quantity_to_dict(q))
            for name, q in output.quantities.items()
        },
        glass=GlassSchema.model_validate(glass_to_dict(output.takeoff.glass)),
        statistics=StatisticsSchema.model_validate(statistics_to_dict(output.statistics)),
    )
