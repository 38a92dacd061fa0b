"""Domain errors raised by the grid layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """A single violated constraint.

    Attributes:
        field: Identifier of the offending input field (e.g. "columns").
        message: Human-readable description of the violation.
        value: The value that failed the check.
    """

    field: str
    message: str
    value: Any = None


class LayoutValidationError(Exception):
    """Raised when a layout is requested for inputs that fail validation.

    Carries every violation found, never just the first one.
    """

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = list(errors)
        summary = "; ".join(e.message for e in self.errors)
        super().__init__(f"Grid validation failed: {summary}")

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]


class UnsupportedFeatureError(Exception):
    """Raised when a declared but unimplemented variant is requested."""

    def __init__(self, feature: str, message: str, field: str | None = None) -> None:
        self.feature = feature
        self.field = field
        self.message = message
        super().__init__(message)
