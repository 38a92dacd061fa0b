"""Grid definition value objects: spacing strategies and component naming."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Union

from ._units import normalize

DEFAULT_COLUMNS = 2
DEFAULT_ROWS = 2
DEFAULT_MULLION_WIDTH = Decimal("2.5")


class RoleKind(str, Enum):
    """Structural role of a framing member in an opening.

    The role is the identity of a member; the catalog name a user assigns to
    it is presentation and may be shared between roles.
    """

    SILL = "sill"
    HEAD = "head"
    JAMB = "jamb"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class SpacingKind(str, Enum):
    """Tag for the spacing strategy variants."""

    EQUAL = "equal"
    CUSTOM = "custom"


@dataclass(frozen=True)
class EqualSpacing:
    """Divide an axis into equal bays."""

    kind: ClassVar[SpacingKind] = SpacingKind.EQUAL


@dataclass(frozen=True)
class CustomSpacing:
    """Place mullions at explicit offsets along an axis.

    Declared so that requests for it can be recognized and refused; no
    layout is computed from it yet.
    """

    kind: ClassVar[SpacingKind] = SpacingKind.CUSTOM

    offsets: tuple[Decimal, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "offsets", tuple(normalize(o) for o in self.offsets)
        )


SpacingStrategy = Union[EqualSpacing, CustomSpacing]


def spacing_from_kind(
    kind: SpacingKind | str, offsets: tuple[Decimal, ...] | list | None = None
) -> SpacingStrategy:
    """Build a spacing strategy from its tag.

    Raises:
        ValueError: If the tag is not a known spacing kind.
    """
    kind = SpacingKind(kind)
    if kind is SpacingKind.CUSTOM:
        return CustomSpacing(offsets=tuple(offsets or ()))
    return EqualSpacing()


@dataclass(frozen=True)
class GridSpacing:
    """Spacing strategy per axis.

    ``vertical`` governs where vertical mullions fall across the width;
    ``horizontal`` governs where horizontal mullions fall up the height.
    """

    vertical: SpacingStrategy = field(default_factory=EqualSpacing)
    horizontal: SpacingStrategy = field(default_factory=EqualSpacing)


@dataclass(frozen=True)
class ComponentNaming:
    """Catalog name assigned to each framing role."""

    sill: str = "Sill"
    head: str = "Head"
    jamb: str = "Jamb"
    vertical: str = "Vertical"
    horizontal: str = "Horizontal"

    def __post_init__(self) -> None:
        for role in RoleKind:
            if not getattr(self, role.value).strip():
                raise ValueError(f"Catalog name for {role.value} must not be empty")

    def name_for(self, role: RoleKind) -> str:
        return getattr(self, RoleKind(role).value)

    def items(self) -> Iterator[tuple[RoleKind, str]]:
        """Yield (role, catalog name) pairs in role declaration order."""
        for role in RoleKind:
            yield role, self.name_for(role)

    @classmethod
    def from_mapping(cls, mapping: Mapping[RoleKind | str, str]) -> "ComponentNaming":
        """Build naming from a role mapping, keeping defaults for missing roles."""
        return cls(**{RoleKind(role).value: name for role, name in mapping.items()})


@dataclass(frozen=True)
class GridDefinition:
    """Parametric description of how an opening is subdivided.

    Attributes:
        columns: Number of lites across the opening.
        rows: Number of lites up the main grid.
        mullion_width: Face width of the framing members in inches.
        spacing: Spacing strategy for each axis.
        components: Catalog name per framing role.
    """

    columns: int = DEFAULT_COLUMNS
    rows: int = DEFAULT_ROWS
    mullion_width: Decimal = DEFAULT_MULLION_WIDTH
    spacing: GridSpacing = field(default_factory=GridSpacing)
    components: ComponentNaming = field(default_factory=ComponentNaming)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "mullion_width", normalize(self.mullion_width)
        )
