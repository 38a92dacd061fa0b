"""Unit tests for glazing domain value objects.

These tests verify:
- Fixed-point helpers round half-up at four decimal places
- OpeningDescriptor normalizes dimensions and derives transom geometry
- ComponentNaming defaults, lookups and blank-name rejection
- Spacing variants and the tag-based constructor
- GridLayout derived properties
"""

from decimal import Decimal, Inexact, localcontext

import pytest

from glazing.domain.value_objects import (
    ComponentNaming,
    CustomSpacing,
    EqualSpacing,
    GlassPanel,
    GridDefinition,
    GridLayout,
    GridSpacing,
    MullionKind,
    MullionMember,
    OpeningDescriptor,
    RoleKind,
    SpacingKind,
    feet_to_inches,
    fraction_of,
    inches_to_feet,
    is_representable,
    normalize,
    quantize,
    spacing_from_kind,
    to_decimal,
)


class TestUnits:
    """Tests for the fixed-point helpers."""

    def test_float_goes_through_str(self) -> None:
        assert to_decimal(2.5) == Decimal("2.5")
        assert to_decimal(0.1) == Decimal("0.1")

    def test_int_and_str_accepted(self) -> None:
        assert to_decimal(10) == Decimal("10")
        assert to_decimal("3.25") == Decimal("3.25")

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError):
            to_decimal(True)

    def test_quantize_rounds_half_up(self) -> None:
        assert quantize(Decimal("1.23445")) == Decimal("1.2345")
        assert quantize(Decimal("1.23444")) == Decimal("1.2344")

    def test_fraction_of_thirds(self) -> None:
        assert fraction_of(Decimal("10"), 1, 3) == Decimal("3.3333")
        assert fraction_of(Decimal("10"), 2, 3) == Decimal("6.6667")

    def test_inch_conversions(self) -> None:
        assert feet_to_inches(Decimal("0.5")) == Decimal("6")
        assert inches_to_feet(Decimal("2.5")) == Decimal("0.2083")

    def test_rounding_leaves_thread_context_alone(self) -> None:
        with localcontext() as ctx:
            ctx.clear_flags()
            quantize(Decimal("1.23456"))
            fraction_of(Decimal("10"), 1, 3)
            assert not ctx.flags[Inexact]

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity", "1E24"])
    def test_normalize_passes_unrepresentable_through(self, raw: str) -> None:
        value = normalize(Decimal(raw))
        assert not is_representable(value)
        assert str(value) == str(Decimal(raw))

    def test_normalize_largest_representable(self) -> None:
        assert is_representable(Decimal("9.99E23"))
        assert normalize(Decimal("9.99E23")) == Decimal("999000000000000000000000.0000")

    def test_normalize_rounds(self) -> None:
        assert normalize(1.23445) == Decimal("1.2345")
        assert normalize(0) == Decimal("0.0000")


class TestOpeningDescriptor:
    """Tests for OpeningDescriptor."""

    def test_dimensions_are_quantized(self) -> None:
        opening = OpeningDescriptor(width=10, height=7.33333)
        assert opening.width == Decimal("10.0000")
        assert opening.height == Decimal("7.3333")
        assert opening.sill_height == Decimal("0")

    def test_no_transom_uses_full_height(self) -> None:
        opening = OpeningDescriptor(width=Decimal("10"), height=Decimal("8"))
        assert opening.transom_allowance == Decimal("0")
        assert opening.grid_height == Decimal("8")

    def test_transom_reduces_grid_height(self, transom_opening: OpeningDescriptor) -> None:
        assert transom_opening.transom_allowance == Decimal("2")
        assert transom_opening.grid_height == Decimal("8")

    def test_transom_height_ignored_when_disabled(self) -> None:
        opening = OpeningDescriptor(
            width=Decimal("10"), height=Decimal("8"), transom_height=Decimal("2")
        )
        assert opening.grid_height == Decimal("8")

    def test_derived_measurements(self) -> None:
        opening = OpeningDescriptor(
            width=Decimal("10"), height=Decimal("8"), sill_height=Decimal("1.5")
        )
        assert opening.head_height == Decimal("9.5")
        assert opening.area == Decimal("80")
        assert opening.perimeter == Decimal("36")

    def test_is_immutable(self) -> None:
        opening = OpeningDescriptor(width=Decimal("10"), height=Decimal("8"))
        with pytest.raises(AttributeError):
            opening.width = Decimal("12")  # type: ignore[misc]


class TestComponentNaming:
    """Tests for ComponentNaming."""

    def test_defaults(self) -> None:
        naming = ComponentNaming()
        assert dict(naming.items()) == {
            RoleKind.SILL: "Sill",
            RoleKind.HEAD: "Head",
            RoleKind.JAMB: "Jamb",
            RoleKind.VERTICAL: "Vertical",
            RoleKind.HORIZONTAL: "Horizontal",
        }

    def test_name_for_accepts_role_value(self) -> None:
        naming = ComponentNaming(jamb="SF-451 Jamb")
        assert naming.name_for(RoleKind.JAMB) == "SF-451 Jamb"
        assert naming.name_for("jamb") == "SF-451 Jamb"

    def test_from_mapping_keeps_missing_defaults(self) -> None:
        naming = ComponentNaming.from_mapping({RoleKind.HORIZONTAL: "Sill", "head": "Cap"})
        assert naming.horizontal == "Sill"
        assert naming.head == "Cap"
        assert naming.sill == "Sill"

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="vertical"):
            ComponentNaming(vertical="  ")


class TestSpacing:
    """Tests for spacing variants."""

    def test_default_spacing_is_equal(self) -> None:
        spacing = GridSpacing()
        assert isinstance(spacing.vertical, EqualSpacing)
        assert isinstance(spacing.horizontal, EqualSpacing)

    def test_variant_tags(self) -> None:
        assert EqualSpacing.kind is SpacingKind.EQUAL
        assert CustomSpacing.kind is SpacingKind.CUSTOM

    def test_custom_offsets_normalized(self) -> None:
        spacing = CustomSpacing(offsets=(2.5, "6"))
        assert spacing.offsets == (Decimal("2.5000"), Decimal("6.0000"))

    def test_spacing_from_kind(self) -> None:
        assert spacing_from_kind("equal") == EqualSpacing()
        custom = spacing_from_kind(SpacingKind.CUSTOM, [Decimal("3")])
        assert isinstance(custom, CustomSpacing)
        assert custom.offsets == (Decimal("3"),)

    def test_spacing_from_unknown_kind(self) -> None:
        with pytest.raises(ValueError):
            spacing_from_kind("golden")


class TestGridDefinition:
    """Tests for GridDefinition."""

    def test_defaults(self) -> None:
        definition = GridDefinition()
        assert definition.columns == 2
        assert definition.rows == 2
        assert definition.mullion_width == Decimal("2.5")
        assert definition.components == ComponentNaming()

    def test_mullion_width_from_float(self) -> None:
        assert GridDefinition(mullion_width=1.75).mullion_width == Decimal("1.75")


class TestGridLayout:
    """Tests for GridLayout derived properties."""

    @pytest.fixture
    def layout(self) -> GridLayout:
        panels = (
            GlassPanel(0, 0, Decimal("0"), Decimal("0"), Decimal("5"), Decimal("6")),
            GlassPanel(1, 0, Decimal("5"), Decimal("0"), Decimal("5"), Decimal("6")),
        )
        transom = (
            GlassPanel(0, 1, Decimal("0"), Decimal("6"), Decimal("5"), Decimal("2"), True),
            GlassPanel(1, 1, Decimal("5"), Decimal("6"), Decimal("5"), Decimal("2"), True),
        )
        members = (
            MullionMember(MullionKind.VERTICAL, 1, None, Decimal("5"), Decimal("6")),
            MullionMember(MullionKind.JAMB_LEFT, 0, None, Decimal("0"), Decimal("8")),
        )
        return GridLayout(
            width=Decimal("10"),
            height=Decimal("8"),
            grid_height=Decimal("6"),
            columns=2,
            rows=1,
            mullion_width=Decimal("2.5"),
            vertical_mullions=(Decimal("5"),),
            horizontal_mullions=(),
            panels=panels,
            transom_panels=transom,
            transom_bar=Decimal("6"),
            members=members,
        )

    def test_perimeter(self, layout: GridLayout) -> None:
        assert layout.perimeter == Decimal("36")

    def test_transom_properties(self, layout: GridLayout) -> None:
        assert layout.has_transom
        assert layout.transom_height == Decimal("2")
        assert layout.panel_count == 2
        assert len(layout.all_panels) == 4

    def test_edges(self, layout: GridLayout) -> None:
        assert layout.column_edges() == (Decimal("0"), Decimal("5"), Decimal("10"))
        assert layout.row_edges() == (Decimal("0"), Decimal("6"))

    def test_members_of(self, layout: GridLayout) -> None:
        verticals = layout.members_of(MullionKind.VERTICAL)
        assert len(verticals) == 1
        assert verticals[0].position == Decimal("5")
        assert layout.members_of(MullionKind.SILL) == ()

    def test_panel_area(self) -> None:
        panel = GlassPanel(0, 0, Decimal("0"), Decimal("0"), Decimal("3.3333"), Decimal("4"))
        assert panel.area == Decimal("13.3332")
