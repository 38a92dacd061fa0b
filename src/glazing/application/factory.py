"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from glazing.application.commands import GenerateGridCommand
    from glazing.domain.services import (
        ComponentQuantityAggregator,
        GridLayoutEngine,
        ValidationRules,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Services are stateless, so one cached instance of each is shared by
    every command the factory creates. Tests can construct their own
    factory or pass replacements straight to ``GenerateGridCommand``.
    """

    _validation_rules: "ValidationRules | None" = field(
        default=None, init=False, repr=False
    )
    _layout_engine: "GridLayoutEngine | None" = field(
        default=None, init=False, repr=False
    )
    _aggregator: "ComponentQuantityAggregator | None" = field(
        default=None, init=False, repr=False
    )

    def get_validation_rules(self) -> "ValidationRules":
        if self._validation_rules is None:
            from glazing.domain.services import ValidationRules

            self._validation_rules = ValidationRules()
        return self._validation_rules

    def get_layout_engine(self) -> "GridLayoutEngine":
        if self._layout_engine is None:
            from glazing.domain.services import GridLayoutEngine

            self._layout_engine = GridLayoutEngine(self.get_validation_rules())
        return self._layout_engine

    def get_aggregator(self) -> "ComponentQuantityAggregator":
        if self._aggregator is None:
            from glazing.domain.services import ComponentQuantityAggregator

            self._aggregator = ComponentQuantityAggregator()
        return self._aggregator

    def create_generate_command(self) -> "GenerateGridCommand":
        from glazing.application.commands import GenerateGridCommand

        return GenerateGridCommand(
            validation_rules=self.get_validation_rules(),
            layout_engine=self.get_layout_engine(),
            aggregator=self.get_aggregator(),
        )


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
