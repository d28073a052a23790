import math
from numbers import Real

from .errors import (
    IntervalOverflowError,
    InvalidFactorError,
    InvalidQualityError,
    InvalidRepeatCountError,
)

MIN_FACTOR = 1.3
MIN_QUALITY = 0
MAX_QUALITY = 5
PASS_THRESHOLD = 2
FIRST_INTERVAL = 1
SECOND_INTERVAL = 6


def validate_quality(quality: int) -> int:
    """Return quality unchanged if it is an SM-2 rating (0-5)."""
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise InvalidQualityError(f"Quality must be an integer, got {quality!r}")
    if quality < MIN_QUALITY or quality > MAX_QUALITY:
        raise InvalidQualityError(
            f"Quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {quality}"
        )
    return quality


def _validate_factor(factor: float) -> float:
    if isinstance(factor, bool) or not isinstance(factor, Real):
        raise InvalidFactorError(f"Ease factor must be a number, got {factor!r}")
    if factor <= 0:
        raise InvalidFactorError(f"Ease factor must be positive, got {factor}")
    return factor


def is_pass(quality: int) -> bool:
    """Whether a rating counts as a successful repetition (marginal passes included)."""
    return quality >= PASS_THRESHOLD


def calc_new_factor(old_factor: float, quality: int) -> float:
    """Update an E-Factor from a quality rating, never going below 1.3."""
    _validate_factor(old_factor)
    validate_quality(quality)
    distance = MAX_QUALITY - quality
    new_factor = old_factor + (0.1 - distance * (0.08 + distance * 0.02))
    return max(MIN_FACTOR, new_factor)


def calc_interval(repeat_count: int, factor: float) -> float:
    """Interval in days for the given repetition.

    1 -> 1 day, 2 -> 6 days, n >= 3 -> interval(n - 1) * factor. The loop
    multiplies in the same order as the recurrence so results match it exactly.
    """
    if isinstance(repeat_count, bool) or not isinstance(repeat_count, int):
        raise InvalidRepeatCountError(f"Repeat count must be an integer, got {repeat_count!r}")
    if repeat_count < 1:
        raise InvalidRepeatCountError(f"Repeat count must be at least 1, got {repeat_count}")
    _validate_factor(factor)
    if repeat_count == 1:
        return FIRST_INTERVAL
    interval = SECOND_INTERVAL
    for _ in range(repeat_count - 2):
        interval = interval * factor
        if not math.isfinite(interval):
            raise IntervalOverflowError(
                f"Interval for repetition {repeat_count} with factor {factor} is not finite"
            )
    return interval


class SM2:
    """Stateless SM-2 scheduler; one instance can be shared by every card."""

    calc_new_factor = staticmethod(calc_new_factor)
    calc_interval = staticmethod(calc_interval)
    is_pass = staticmethod(is_pass)


default_sm2 = SM2()
