"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from glazing.application.config import GridConfig, GridConfiguration, OpeningConfig


class GridRequest(BaseModel):
    """Request for laying out one opening grid.

    Grid fields left out fall back to a 2 x 2 grid with 2.5 in. mullions,
    equal spacing and the default catalog names.
    """

    opening: OpeningConfig = Field(..., description="Opening dimensions in feet")
    grid: GridConfig = Field(
        default_factory=GridConfig, description="Grid definition"
    )

    def to_configuration(self) -> GridConfiguration:
        return GridConfiguration(opening=self.opening, grid=self.grid)


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Grid configuration JSON")
