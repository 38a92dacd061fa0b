"""Fixed-point helpers shared by every coordinate derivation."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal

# One ten-thousandth of a foot (about 0.0012 inch)
PRECISION = Decimal("0.0001")

ZERO = Decimal("0")

INCHES_PER_FOOT = Decimal("12")

_SIGNIFICANT_DIGITS = 28

# Largest adjusted exponent that still quantizes to PRECISION within
# _SIGNIFICANT_DIGITS
_MAX_ADJUSTED = _SIGNIFICANT_DIGITS + PRECISION.as_tuple().exponent - 1


def _context() -> Context:
    # Fresh per call: contexts carry mutable signal flags
    return Context(prec=_SIGNIFICANT_DIGITS, rounding=ROUND_HALF_UP)


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    """Convert a user-supplied number to Decimal without binary float noise.

    Floats are routed through ``str`` so ``2.5`` becomes ``Decimal("2.5")``
    rather than its exact binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean is not a valid dimension")
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def is_representable(value: Decimal) -> bool:
    """Whether ``value`` is finite and fits the layout precision."""
    return value.is_finite() and (value.is_zero() or value.adjusted() <= _MAX_ADJUSTED)


def quantize(value: Decimal) -> Decimal:
    """Round to the shared layout precision (half-up)."""
    return value.quantize(PRECISION, rounding=ROUND_HALF_UP, context=_context())


def normalize(value: Decimal | float | int | str) -> Decimal:
    """Convert and quantize, passing unrepresentable values through as-is.

    NaN, infinities and magnitudes beyond the layout precision are left
    untouched so that ``ValidationRules`` can report them against a field.
    """
    converted = to_decimal(value)
    if not is_representable(converted):
        return converted
    return quantize(converted)


def fraction_of(length: Decimal, index: int, count: int) -> Decimal:
    """Return ``index / count`` of ``length`` rounded to layout precision."""
    context = _context()
    scaled = context.multiply(length, Decimal(index))
    return quantize(context.divide(scaled, Decimal(count)))


def feet_to_inches(value: Decimal) -> Decimal:
    return _context().multiply(value, INCHES_PER_FOOT)


def inches_to_feet(value: Decimal) -> Decimal:
    return quantize(_context().divide(value, INCHES_PER_FOOT))
