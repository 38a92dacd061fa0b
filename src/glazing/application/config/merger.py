"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only arguments that are
not None override the configuration.
"""

from decimal import Decimal
from typing import Any

from glazing.application.config.loader import load_config_from_dict
from glazing.application.config.schema import GridConfiguration


def merge_config_with_cli(
    config: GridConfiguration,
    *,
    width: Decimal | None = None,
    height: Decimal | None = None,
    sill_height: Decimal | None = None,
    transom_height: Decimal | None = None,
    columns: int | None = None,
    rows: int | None = None,
    mullion_width: Decimal | None = None,
) -> GridConfiguration:
    """Merge CLI arguments with configuration values.

    Giving a transom height on the command line also turns the transom on.

    Raises:
        ConfigError: If an override fails schema validation.

    Example:
        >>> config = load_config(Path("storefront.json"))
        >>> merged = merge_config_with_cli(config, columns=4)
        >>> merged.grid.columns
        4
    """
    data = config.model_dump()
    _override(
        data["opening"],
        width=width,
        height=height,
        sill_height=sill_height,
        transom_height=transom_height,
    )
    if transom_height is not None:
        data["opening"]["has_transom"] = True
    _override(data["grid"], columns=columns, rows=rows, mullion_width=mullion_width)
    return load_config_from_dict(data)


def build_config_from_cli(
    *,
    width: Decimal,
    height: Decimal,
    sill_height: Decimal | None = None,
    transom_height: Decimal | None = None,
    columns: int | None = None,
    rows: int | None = None,
    mullion_width: Decimal | None = None,
) -> GridConfiguration:
    """Build a configuration purely from CLI arguments, defaults elsewhere."""
    base = load_config_from_dict(
        {"opening": {"width": width, "height": height}}
    )
    return merge_config_with_cli(
        base,
        sill_height=sill_height,
        transom_height=transom_height,
        columns=columns,
        rows=rows,
        mullion_width=mullion_width,
    )


def _override(section: dict[str, Any], **overrides: Any) -> None:
    for key, value in overrides.items():
        if value is not None:
            section[key] = value
