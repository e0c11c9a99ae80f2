"""Rounding and clamping helpers shared by the scoring and forecast code."""

from decimal import Decimal, ROUND_HALF_UP


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round halves away from zero on the exact binary value.

    ``round()`` uses banker's rounding, which would turn 0.25 into 0.2 and
    shift displayed scores by a tenth.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round1(value: float) -> float:
    return round_half_up(value, 1)


def round_int(value: float) -> int:
    return int(round_half_up(value, 0))


def mean(values) -> float:
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def non_negative(value) -> float:
    """Missing or negative readings count as 0."""
    if value is None or value < 0:
        return 0
    return value
