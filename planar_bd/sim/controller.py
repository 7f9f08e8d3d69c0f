"""
Open-loop controller driving the planar arm toward fixed joint targets.

Classes:
    OpenLoopController: Holds a parameter vector of target joint angles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np

from planar_bd.utils.constants import DEFAULT_JOINT_COUNT, DEFAULT_MAX_JOINT_STEP


@dataclass
class OpenLoopController:
    """Position controller whose parameters are the target joint angles.

    The parameter vector is what an outer search algorithm evolves; the
    ``AngleSum`` descriptor reads it back through ``parameters()``.

    Attributes:
        params: Target angle for each joint (radians).
        max_step: Largest joint change issued per step (radians).
    """

    params: np.ndarray = field(
        default_factory=lambda: np.zeros(DEFAULT_JOINT_COUNT)
    )
    max_step: float = DEFAULT_MAX_JOINT_STEP

    def __post_init__(self) -> None:
        self.params = np.asarray(self.params, dtype=np.float64).ravel()

    def parameters(self) -> List[float]:
        """Return the parameter vector as a list of floats."""
        return [float(p) for p in self.params]

    def command(self, joint_positions: np.ndarray) -> np.ndarray:
        """Return the per-joint delta that moves toward the targets.

        Args:
            joint_positions: Current joint angles; must match ``params`` in length.

        Returns:
            Delta vector clipped to ``[-max_step, max_step]``.

        Raises:
            ValueError: On a length mismatch.
        """
        q = np.asarray(joint_positions, dtype=np.float64).ravel()
        if q.shape != self.params.shape:
            raise ValueError(
                f"Controller has {self.params.shape[0]} targets, arm has {q.shape[0]} joints"
            )
        return np.clip(self.params - q, -self.max_step, self.max_step)
