"""
Fixed-Point Truncation
======================

Shared rounding helper for the intersection engine.

Design:
- Float -> Decimal through the shortest repr (no binary expansion noise)
- Truncation toward zero (ROUND_DOWN), never round-half
- Trailing zeros stripped so equal values compare equal
- Non-finite values pass through untouched
"""

from decimal import Decimal, ROUND_DOWN, Context

PLACES = 5
"""Decimal places kept by every rounding step of the engine."""

# Wide enough for any float at PLACES decimals. InvalidOperation is not
# trapped, so inf - inf yields NaN instead of raising.
_CONTEXT = Context(prec=400, rounding=ROUND_DOWN, traps=[])


def truncate(value: float, places: int = PLACES) -> Decimal:
    """
    Truncate a float toward zero to a fixed number of decimal places.

    Args:
        value: Float to truncate
        places: Decimal places to keep (default: 5)

    Returns:
        Normalized Decimal, e.g. truncate(1.999999) == Decimal("1.99999")
        and truncate(-0.123456) == Decimal("-0.12345")

    Non-finite input (inf, NaN) is returned as a non-finite Decimal.
    """
    exact = Decimal(repr(float(value)))
    if not exact.is_finite():
        return exact

    quantum = Decimal(1).scaleb(-places)
    return exact.quantize(quantum, context=_CONTEXT).normalize(_CONTEXT)


def truncate_float(value: float, places: int = PLACES) -> float:
    """truncate() converted back to float; -0.0 comes back as 0.0."""
    return float(truncate(value, places)) + 0.0


def add(left: Decimal, right: Decimal) -> Decimal:
    """Sum two truncated values without trapping on non-finite operands."""
    return _CONTEXT.add(left, right)


def abs_difference(left: Decimal, right: Decimal) -> Decimal:
    """|left - right| without trapping on non-finite operands."""
    return _CONTEXT.abs(_CONTEXT.subtract(left, right))
