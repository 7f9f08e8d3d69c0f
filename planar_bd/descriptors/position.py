"""
Gripper-position descriptors in Cartesian and polar form.

Classes:
    PositionalCoord: Normalised (x, y) of the gripper.
    PolarCoord: Normalised (radius, angle) of the gripper.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List

from planar_bd.descriptors.base import BaseDescriptor, gripper_xy
from planar_bd.descriptors.configs import DescriptorConfig
from planar_bd.utils.constants import (
    ANGLE_TOLERANCE,
    POLAR_ANGLE_RANGE,
    POLAR_SHIFT_THRESHOLD,
    TWO_PI,
)
from planar_bd.utils.helpers import clamp_unit, normalize_to_range

logger = logging.getLogger(__name__)


class PositionalCoord(BaseDescriptor):
    """Cartesian gripper position mapped to the unit square.

    The gripper's reachable x-range is ``[-factor, factor]`` and its
    y-range ``[-factor, 0]``.  x is mapped so that 0.5 is the origin; y is
    negated so that 1 is furthest below the origin.  Both are clamped,
    which absorbs penetration transients.
    """

    name = "positional"

    def __init__(self, config: DescriptorConfig | None = None) -> None:
        super().__init__(config)
        self._x = 0.0
        self._y = 0.0

    @property
    def arity(self) -> int:
        return 2

    def _compute(self, simu: Any, robot: Any) -> None:
        self._x, self._y = gripper_xy(robot)
        logger.debug("positional coord %.4f, %.4f", self._x, self._y)

    def _extract(self) -> List[float]:
        factor = self.config.factor
        x = (self._x + factor) / (2.0 * factor)
        y = -self._y / factor
        return [clamp_unit(x), clamp_unit(y)]


class PolarCoord(BaseDescriptor):
    """Gripper position as normalised radius and angle.

    Angles at or below ``0.10`` rad are shifted by ``2*pi`` so the lower
    half-plane maps onto the contiguous range ``(pi - 0.10, 2*pi]``.  The
    radius is divided by ``factor`` and the angle mapped from
    ``[pi, 2*pi]`` to ``[0, 1]``, both clamped.

    Attributes:
        in_expected_range: ``False`` when the last sample violated the
            reachable-sector check (wall contact or over-extension).
    """

    name = "polar"

    def __init__(self, config: DescriptorConfig | None = None) -> None:
        super().__init__(config)
        self._d = 0.0
        self._theta = 0.0
        self.in_expected_range = True

    @property
    def arity(self) -> int:
        return 2

    def _compute(self, simu: Any, robot: Any) -> None:
        x, y = gripper_xy(robot)
        self._d = math.hypot(x, y)
        theta = math.atan2(y, x)
        self._theta = theta + TWO_PI if theta <= POLAR_SHIFT_THRESHOLD else theta
        self.in_expected_range = self._check_sector(y)
        logger.debug("polar coord %.4f, %.4f", self._d, self._theta)

    def _check_sector(self, y: float) -> bool:
        """Either the gripper touched the wall (y > 0) or it lies in the sector."""
        lo, hi = POLAR_ANGLE_RANGE
        max_radius = self.config.factor + self.config.thickness / 2.0
        ok = y > 0 or (
            lo - ANGLE_TOLERANCE <= self._theta <= hi + ANGLE_TOLERANCE
            and self._d <= max_radius
        )
        if not ok:
            logger.warning(
                "gripper outside reachable sector: d=%.4f (max %.4f), theta=%.4f",
                self._d,
                max_radius,
                self._theta,
            )
        return ok

    def _extract(self) -> List[float]:
        lo, hi = POLAR_ANGLE_RANGE
        return [
            clamp_unit(self._d / self.config.factor),
            clamp_unit(normalize_to_range(self._theta, lo, hi)),
        ]
