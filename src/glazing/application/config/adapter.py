"""Adapters from configuration models to domain value objects."""

from __future__ import annotations

from glazing.application.config.schema import (
    ComponentsConfig,
    GridConfig,
    GridConfiguration,
    OpeningConfig,
    SpacingConfig,
)
from glazing.domain.value_objects import (
    ComponentNaming,
    GridDefinition,
    GridSpacing,
    OpeningDescriptor,
    spacing_from_kind,
)


def config_to_descriptor(opening: OpeningConfig) -> OpeningDescriptor:
    return OpeningDescriptor(
        width=opening.width,
        height=opening.height,
        sill_height=opening.sill_height,
        start_position=opening.start_position,
        has_transom=opening.has_transom,
        transom_height=opening.transom_height,
    )


def config_to_spacing(spacing: SpacingConfig) -> GridSpacing:
    return GridSpacing(
        vertical=spacing_from_kind(spacing.vertical, spacing.vertical_offsets),
        horizontal=spacing_from_kind(spacing.horizontal, spacing.horizontal_offsets),
    )


def config_to_naming(components: ComponentsConfig) -> ComponentNaming:
    return ComponentNaming(**components.model_dump())


def config_to_definition(grid: GridConfig) -> GridDefinition:
    return GridDefinition(
        columns=grid.columns,
        rows=grid.rows,
        mullion_width=grid.mullion_width,
        spacing=config_to_spacing(grid.spacing),
        components=config_to_naming(grid.components),
    )


def config_to_domain(
    config: GridConfiguration,
) -> tuple[OpeningDescriptor, GridDefinition]:
    """Convert a full configuration to the engine's two inputs.

    Example:
        >>> descriptor, definition = config_to_domain(load_config(path))
        >>> layout = GridLayoutEngine().compute(descriptor, definition)
    """
    return config_to_descriptor(config.opening), config_to_definition(config.grid)
