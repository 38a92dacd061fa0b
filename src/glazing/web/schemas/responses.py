"""Pydantic response schemas for the REST API.

Lengths and areas are ``Decimal`` and serialize as JSON strings.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field


class PanelSchema(BaseModel):
    """One glass lite."""

    column: int = Field(..., description="Zero-based column")
    row: int = Field(..., description="Zero-based row, transom lites use row == rows")
    x: Decimal = Field(..., description="Left edge in feet")
    y: Decimal = Field(..., description="Bottom edge in feet")
    width: Decimal = Field(..., description="Lite width in feet")
    height: Decimal = Field(..., description="Lite height in feet")
    area: Decimal = Field(..., description="Lite area in square feet")
    is_transom: bool = Field(default=False, description="Whether this is a transom lite")


class MemberSchema(BaseModel):
    """One framing member run."""

    kind: str = Field(..., description="Member kind")
    index: int = Field(..., description="Grid line index (0 for perimeter)")
    segment: int | None = Field(default=None, description="Bay index for segmented members")
    position: Decimal = Field(..., description="Centerline offset in feet")
    length: Decimal = Field(..., description="Run length in feet")
    start_x: Decimal | None = Field(default=None, description="Segment start in feet")
    end_x: Decimal | None = Field(default=None, description="Segment end in feet")


class GridLayoutSchema(BaseModel):
    """Geometry consumed by the elevation preview."""

    width: Decimal
    height: Decimal
    grid_height: Decimal
    columns: int
    rows: int
    mullion_width: Decimal = Field(..., description="Mullion face width in inches")
    perimeter: Decimal
    vertical_mullions: list[Decimal] = Field(default_factory=list)
    horizontal_mullions: list[Decimal] = Field(default_factory=list)
    transom_bar: Decimal | None = None
    panels: list[PanelSchema] = Field(default_factory=list)
    transom_panels: list[PanelSchema] = Field(default_factory=list)
    members: list[MemberSchema] = Field(default_factory=list)


class QuantitySchema(BaseModel):
    """Framing takeoff for one catalog part."""

    catalog_name: str
    roles: list[str]
    count: int
    length_each: Decimal | None = Field(
        default=None, description="Common run length, null when runs differ"
    )
    total_length: Decimal = Field(..., description="Linear feet")


class GlassSchema(BaseModel):
    """Glass takeoff."""

    count: int
    standard_count: int
    transom_count: int
    total_area: Decimal = Field(..., description="Square feet")
    panel_areas: list[Decimal] = Field(default_factory=list)


class StatisticsSchema(BaseModel):
    """Grid statistics summary."""

    total_members: int
    members_by_kind: dict[str, int]
    total_member_length: Decimal
    glass_panels: int
    standard_panels: int
    transom_panels: int
    total_glass_area: Decimal
    opening_area: Decimal


class LayoutResponseSchema(BaseModel):
    """Response for grid layout."""

    layout: GridLayoutSchema
    statistics: StatisticsSchema


class TakeoffResponseSchema(BaseModel):
    """Response for grid layout plus takeoff."""

    layout: GridLayoutSchema
    quantities: dict[str, QuantitySchema] = Field(
        ..., description="Framing quantities by catalog name"
    )
    glass: GlassSchema
    statistics: StatisticsSchema


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
