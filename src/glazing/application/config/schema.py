"""Pydantic models for grid configuration payloads.

A configuration carries one opening and its grid definition, either as a
JSON file for the CLI or as a request body for the REST API. Range checks
on dimensions and divisions are left to the domain validation rules, which
report every violation at once.
"""

from decimal import Decimal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from glazing.domain.value_objects import (
    DEFAULT_COLUMNS,
    DEFAULT_MULLION_WIDTH,
    DEFAULT_ROWS,
    SpacingKind,
)

# Supported schema versions for configuration files
# Version 1.0: Opening dimensions and equal-spaced grid
# Version 1.1: Added transom and per-axis spacing
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class OpeningConfig(BaseModel):
    """Opening dimensions in feet.

    Attributes:
        width: Rough opening width.
        height: Rough opening height, transom included.
        sill_height: Sill height above finished floor.
        start_position: Offset of the opening along its elevation.
        has_transom: Whether a transom lite sits above the grid.
        transom_height: Transom lite height, required when has_transom is set.
    """

    model_config = ConfigDict(extra="forbid")

    width: Decimal
    height: Decimal
    sill_height: Decimal = Decimal("0")
    start_position: Decimal = Decimal("0")
    has_transom: bool = False
    transom_height: Decimal | None = None


class SpacingConfig(BaseModel):
    """Spacing strategy per axis.

    Attributes:
        vertical: How vertical mullions are spaced across the width.
        horizontal: How horizontal mullions are spaced up the height.
        vertical_offsets: Mullion offsets for custom vertical spacing.
        horizontal_offsets: Mullion offsets for custom horizontal spacing.
    """

    model_config = ConfigDict(extra="forbid")

    vertical: SpacingKind = SpacingKind.EQUAL
    horizontal: SpacingKind = SpacingKind.EQUAL
    vertical_offsets: list[Decimal] = Field(default_factory=list)
    horizontal_offsets: list[Decimal] = Field(default_factory=list)


class ComponentsConfig(BaseModel):
    """Catalog name used to price each framing role."""

    model_config = ConfigDict(extra="forbid")

    sill: str = Field(default="Sill", min_length=1)
    head: str = Field(default="Head", min_length=1)
    jamb: str = Field(default="Jamb", min_length=1)
    vertical: str = Field(default="Vertical", min_length=1)
    horizontal: str = Field(default="Horizontal", min_length=1)

    @field_validator("sill", "head", "jamb", "vertical", "horizontal")
    @classmethod
    def strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Catalog name must not be blank")
        return stripped


class GridConfig(BaseModel):
    """Grid definition.

    Attributes:
        columns: Number of lites across.
        rows: Number of lites up the main grid.
        mullion_width: Mullion face width in inches.
        spacing: Spacing strategy per axis.
        components: Catalog naming per framing role.
    """

    model_config = ConfigDict(extra="forbid")

    columns: int = DEFAULT_COLUMNS
    rows: int = DEFAULT_ROWS
    mullion_width: Decimal = DEFAULT_MULLION_WIDTH
    spacing: SpacingConfig = Field(default_factory=SpacingConfig)
    components: ComponentsConfig = Field(default_factory=ComponentsConfig)


class GridConfiguration(BaseModel):
    """Root configuration for one opening grid.

    Example:
        ```json
        {
            "schema_version": "1.1",
            "opening": {"width": 10, "height": 8},
            "grid": {"columns": 3, "rows": 2}
        }
        ```
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.1"
    opening: OpeningConfig
    grid: GridConfig = Field(default_factory=GridConfig)

    @field_validator("schema_version")
    @classmethod
    def check_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{value}'. Supported versions: {supported}"
            )
        return value
