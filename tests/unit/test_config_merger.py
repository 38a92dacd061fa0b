"""Unit tests for configuration merger and adapter.

These tests verify:
- CLI args override config values when provided
- CLI args are ignored when None
- A transom height on the command line turns the transom on
- Adapter correctly converts config to domain value objects
"""

from decimal import Decimal

import pytest

from glazing.application.config import (
    ConfigError,
    GridConfiguration,
    build_config_from_cli,
    config_to_domain,
    config_to_spacing,
    merge_config_with_cli,
)
from glazing.application.config.schema import SpacingConfig
from glazing.domain import (
    ComponentNaming,
    CustomSpacing,
    EqualSpacing,
    GridDefinition,
    OpeningDescriptor,
)


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli function."""

    @pytest.fixture
    def base_config(self) -> GridConfiguration:
        return GridConfiguration.model_validate(
            {
                "opening": {"width": 10, "height": 8, "sill_height": 1},
                "grid": {
                    "columns": 3,
                    "rows": 2,
                    "components": {"vertical": "SF-451 Vertical"},
                },
            }
        )

    def test_no_overrides_returns_equivalent_config(
        self, base_config: GridConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config)
        assert merged.model_dump() == base_config.model_dump()

    def test_overrides_replace_values(self, base_config: GridConfiguration) -> None:
        merged = merge_config_with_cli(
            base_config, width=Decimal("12"), columns=4, mullion_width=Decimal("2")
        )
        assert merged.opening.width == Decimal("12")
        assert merged.opening.height == Decimal("8")
        assert merged.grid.columns == 4
        assert merged.grid.rows == 2
        assert merged.grid.mullion_width == Decimal("2")
        assert merged.grid.components.vertical == "SF-451 Vertical"

    def test_original_not_mutated(self, base_config: GridConfiguration) -> None:
        merge_config_with_cli(base_config, rows=5)
        assert base_config.grid.rows == 2

    def test_transom_override_enables_transom(
        self, base_config: GridConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config, transom_height=Decimal("2"))
        assert merged.opening.has_transom is True
        assert merged.opening.transom_height == Decimal("2")

    def test_schema_failure_raises_config_error(
        self, base_config: GridConfiguration
    ) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(base_config, width=Decimal("NaN"))
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "opening.width"


class TestBuildConfigFromCli:
    """Tests for build_config_from_cli."""

    def test_defaults_fill_in(self) -> None:
        config = build_config_from_cli(width=Decimal("10"), height=Decimal("8"))
        assert config.grid.columns == 2
        assert config.grid.mullion_width == Decimal("2.5")
        assert config.opening.has_transom is False

    def test_all_options(self) -> None:
        config = build_config_from_cli(
            width=Decimal("10"),
            height=Decimal("10"),
            sill_height=Decimal("1.5"),
            transom_height=Decimal("2"),
            columns=3,
            rows=1,
            mullion_width=Decimal("1.75"),
        )
        assert config.opening.sill_height == Decimal("1.5")
        assert config.opening.has_transom is True
        assert (config.grid.columns, config.grid.rows) == (3, 1)

    def test_non_finite_dimension_raises_config_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            build_config_from_cli(width=Decimal("Infinity"), height=Decimal("8"))
        assert [d["path"] for d in exc_info.value.details] == ["opening.width"]


class TestConfigToDomain:
    """Tests for the config to domain adapter."""

    def test_full_conversion(self) -> None:
        config = GridConfiguration.model_validate(
            {
                "opening": {
                    "width": 10,
                    "height": 10,
                    "start_position": 4,
                    "has_transom": True,
                    "transom_height": 2,
                },
                "grid": {"columns": 3, "rows": 2, "components": {"jamb": "Frame"}},
            }
        )
        descriptor, definition = config_to_domain(config)
        assert isinstance(descriptor, OpeningDescriptor)
        assert isinstance(definition, GridDefinition)
        assert descriptor.start_position == Decimal("4")
        assert descriptor.grid_height == Decimal("8")
        assert definition.columns == 3
        assert definition.components == ComponentNaming(jamb="Frame")

    def test_spacing_variants(self) -> None:
        spacing = config_to_spacing(
            SpacingConfig(vertical="custom", vertical_offsets=[Decimal("2.5")])
        )
        assert spacing.vertical == CustomSpacing(offsets=(Decimal("2.5"),))
        assert spacing.horizontal == EqualSpacing()
