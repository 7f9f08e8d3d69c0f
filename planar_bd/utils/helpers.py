"""
Small stateless numeric helpers used across the planar_bd package.

Provides scalar clamping, linear range normalisation, and the single-step
angle wrap used to move ``atan2`` results across the +-pi branch cut.
"""

from __future__ import annotations

from planar_bd.utils.constants import TWO_PI


def clamp(value: float, lo: float, hi: float) -> float:
    """Return *value* clamped to the closed interval [*lo*, *hi*].

    Args:
        value: The scalar to clamp.
        lo: Lower bound (inclusive).
        hi: Upper bound (inclusive).

    Returns:
        The clamped scalar.
    """
    return max(lo, min(hi, value))


def clamp_unit(value: float) -> float:
    """Return *value* clamped to [0, 1]."""
    return clamp(value, 0.0, 1.0)


def normalize_to_range(value: float, lo: float, hi: float) -> float:
    """Scale *value* from [*lo*, *hi*] into [0, 1] without clamping.

    Args:
        value: Value in the original range.
        lo: Minimum of the original range.
        hi: Maximum of the original range.

    Returns:
        The linearly rescaled value.
    """
    span = hi - lo
    safe_span = span if span != 0.0 else 1.0
    return (value - lo) / safe_span


def wrap_once(angle: float, lo: float, hi: float, period: float = TWO_PI) -> float:
    """Bring *angle* into [*lo*, *hi*] with at most one shift by *period*.

    An angle already inside the interval is returned unchanged.  Angles
    below *lo* gain one period and angles above *hi* lose one; the result
    is not re-checked, so a value more than one period out stays out.

    Args:
        angle: Angle in radians.
        lo: Lower bound of the accepted interval.
        hi: Upper bound of the accepted interval.
        period: Shift applied on either side (default ``2*pi``).

    Returns:
        The corrected angle.
    """
    if angle < lo:
        return angle + period
    if angle > hi:
        return angle - period
    return angle
