"""
Controller-command descriptor.

Classes:
    AngleSum: Sliding-window means of the controller's parameter vector.
"""

from __future__ import annotations

from typing import Any, List

import numpy as np

from planar_bd.descriptors.base import BaseDescriptor
from planar_bd.descriptors.configs import DescriptorConfig
from planar_bd.descriptors.errors import InvalidInputError
from planar_bd.utils.constants import ANGLE_SUM_WIDTH, ANGLE_SUM_WINDOWS


class AngleSum(BaseDescriptor):
    """Mean of each of six overlapping width-3 windows of the commands.

    Window ``i`` averages parameters ``i``, ``i + 1`` and ``i + 2``.  The
    values are emitted as-is: unlike the pose descriptors there is no
    clamping or range normalisation, commands being assumed bounded already.
    """

    name = "angle_sum"
    bounded = False

    def __init__(self, config: DescriptorConfig | None = None) -> None:
        super().__init__(config)
        self._sum_angles: List[float] = []

    @property
    def arity(self) -> int:
        return ANGLE_SUM_WINDOWS

    @property
    def required_parameters(self) -> int:
        """Minimum length of the controller parameter vector."""
        return ANGLE_SUM_WINDOWS + ANGLE_SUM_WIDTH - 1

    def _read_commands(self, simu: Any) -> np.ndarray:
        """Return the controller parameters as a flat float array.

        Raises:
            InvalidInputError: If there are too few or non-finite parameters.
        """
        commands = np.asarray(list(simu.controller().parameters()), dtype=np.float64)
        commands = commands.ravel()
        if commands.shape[0] < self.required_parameters:
            raise InvalidInputError(
                f"AngleSum needs at least {self.required_parameters} controller "
                f"parameters, got {commands.shape[0]}"
            )
        if not np.all(np.isfinite(commands[: self.required_parameters])):
            raise InvalidInputError("controller parameters are not finite")
        return commands

    def _compute(self, simu: Any, robot: Any) -> None:
        commands = self._read_commands(simu)
        self._sum_angles = [
            float(commands[i : i + ANGLE_SUM_WIDTH].sum()) / ANGLE_SUM_WIDTH
            for i in range(ANGLE_SUM_WINDOWS)
        ]

    def _extract(self) -> List[float]:
        return list(self._sum_angles)
