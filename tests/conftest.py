"""Pytest configuration and shared fixtures for glazing grid tests."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import pytest

from glazing.domain import GridDefinition, OpeningDescriptor

if TYPE_CHECKING:
    from glazing.application.commands import GenerateGridCommand


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end CLI and API tests")


# =============================================================================
# Shared domain inputs
# =============================================================================


@pytest.fixture
def storefront_opening() -> OpeningDescriptor:
    """10 ft x 8 ft opening without a transom."""
    return OpeningDescriptor(width=Decimal("10"), height=Decimal("8"))


@pytest.fixture
def three_by_two() -> GridDefinition:
    """3 columns x 2 rows with default mullions, spacing and naming."""
    return GridDefinition(columns=3, rows=2)


@pytest.fixture
def transom_opening() -> OpeningDescriptor:
    """10 ft x 10 ft opening with a 2 ft transom."""
    return OpeningDescriptor(
        width=Decimal("10"),
        height=Decimal("10"),
        has_transom=True,
        transom_height=Decimal("2"),
    )


# =============================================================================
# Shared fixtures for command creation
# =============================================================================


@pytest.fixture
def generate_command() -> "GenerateGridCommand":
    """Create a GenerateGridCommand using the service factory."""
    from glazing.application.factory import get_factory

    return get_factory().create_generate_command()
