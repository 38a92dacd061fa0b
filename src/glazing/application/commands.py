"""Application commands (use cases) for grid layout and takeoff."""

from __future__ import annotations

import logging

from glazing.application.config import GridConfiguration, config_to_domain
from glazing.domain import (
    ComponentQuantityAggregator,
    GridDefinition,
    GridLayoutEngine,
    GridStatistics,
    LayoutValidationError,
    OpeningDescriptor,
    ValidationRules,
)

from .dtos import GridOutput

logger = logging.getLogger(__name__)


class GenerateGridCommand:
    """Validate, lay out and take off one opening grid.

    Runs on every opening create, edit or explicit regenerate request. The
    pipeline is side-effect free, so the owning service can retry it and
    replace any stored layout wholesale with the result.
    """

    def __init__(
        self,
        validation_rules: ValidationRules | None = None,
        layout_engine: GridLayoutEngine | None = None,
        aggregator: ComponentQuantityAggregator | None = None,
    ) -> None:
        self.validation_rules = validation_rules or ValidationRules()
        self.layout_engine = layout_engine or GridLayoutEngine(self.validation_rules)
        self.aggregator = aggregator or ComponentQuantityAggregator()

    def execute(
        self, descriptor: OpeningDescriptor, definition: GridDefinition
    ) -> GridOutput:
        """Execute the grid pipeline.

        Validation failures are returned on the output rather than raised.

        Raises:
            UnsupportedFeatureError: If custom spacing is requested. This is
                a request the engine cannot serve, not a data-entry error.
        """
        errors = self.validation_rules.validate(descriptor, definition)
        if errors:
            logger.info(f"Grid rejected with {len(errors)} validation error(s)")
            return GridOutput(errors=errors)

        try:
            layout = self.layout_engine.compute(descriptor, definition)
        except LayoutValidationError as e:
            return GridOutput(errors=e.errors)

        takeoff = self.aggregator.takeoff(layout, definition.components)
        return GridOutput(
            layout=layout,
            takeoff=takeoff,
            statistics=GridStatistics.from_layout(layout),
        )

    def execute_config(self, config: GridConfiguration) -> GridOutput:
        """Execute the pipeline for a parsed configuration."""
        descriptor, definition = config_to_domain(config)
        return self.execute(descriptor, definition)
