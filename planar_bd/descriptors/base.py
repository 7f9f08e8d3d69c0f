"""
Capability contract shared by all behaviour descriptors.

A descriptor is created once and then, for every simulation evaluation,
``compute`` reads the collaborators and ``extract`` turns the stored
fields into a feature vector.  State is overwritten on each ``compute``,
never accumulated, so one instance can serve many evaluations.

Classes:
    BaseDescriptor: Abstract base class for all descriptor variants.

Functions:
    read_xy: Read the planar world position of a body.
    gripper_xy: Read the planar world position of the gripper.
    joint_xy: Read the planar world position of a joint.
"""

from __future__ import annotations

import abc
from typing import Any, List, Tuple

import numpy as np
from gymnasium import spaces

from planar_bd.descriptors.configs import DescriptorConfig
from planar_bd.descriptors.errors import InvalidInputError, NotComputedError


def read_xy(body: Any, label: str) -> Tuple[float, float]:
    """Return the (x, y) world position of *body*.

    Args:
        body: Object exposing ``world_position() -> (x, y, z)``.
        label: Name of the body, used in error messages.

    Returns:
        Tuple of floats ``(x, y)``.

    Raises:
        InvalidInputError: If *body* is missing, or its position has fewer
            than two components or non-finite coordinates.
    """
    if body is None:
        raise InvalidInputError(f"{label} body is missing")
    position = np.asarray(body.world_position(), dtype=np.float64).ravel()
    if position.shape[0] < 2:
        raise InvalidInputError(
            f"{label} position needs at least 2 components, got {position.shape[0]}"
        )
    if not np.all(np.isfinite(position[:2])):
        raise InvalidInputError(f"{label} position is not finite: {position[:2]}")
    return float(position[0]), float(position[1])


def gripper_xy(robot: Any) -> Tuple[float, float]:
    """Return the planar world position of the robot's gripper."""
    return read_xy(robot.gripper(), "gripper")


def joint_xy(robot: Any, index: int) -> Tuple[float, float]:
    """Return the planar world position of joint *index*.

    Raises:
        InvalidInputError: If the robot has no joint at *index*.
    """
    try:
        body = robot.joint(index)
    except (IndexError, KeyError) as exc:
        raise InvalidInputError(f"robot has no joint {index}") from exc
    return read_xy(body, f"joint {index}")


class BaseDescriptor(abc.ABC):
    """Abstract base class for behaviour descriptors.

    Subclasses implement ``_compute`` (read collaborators, store fields)
    and ``_extract`` (fields to features).  The public ``compute`` and
    ``extract`` wrap them with the compute-before-extract precondition.

    Attributes:
        name: Registry name of the variant.
        config: Arm geometry used for normalisation.
    """

    name: str = "base"
    bounded: bool = True

    def __init__(self, config: DescriptorConfig | None = None) -> None:
        """Initialise the descriptor.

        Args:
            config: Optional ``DescriptorConfig``; defaults are used when *None*.
        """
        self.config = config or DescriptorConfig()
        self._computed = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    @abc.abstractmethod
    def arity(self) -> int:
        """Return the fixed number of features produced by ``extract``."""
        raise NotImplementedError

    @property
    def space(self) -> spaces.Box:
        """Return the behaviour-descriptor space as a Gymnasium ``Box``.

        Returns:
            ``[0, 1]^arity`` for bounded variants, otherwise an unbounded box.
        """
        if self.bounded:
            return spaces.Box(low=0.0, high=1.0, shape=(self.arity,), dtype=np.float64)
        return spaces.Box(
            low=-np.inf, high=np.inf, shape=(self.arity,), dtype=np.float64
        )

    @property
    def is_computed(self) -> bool:
        """Whether ``extract`` may be called."""
        return self._computed

    def compute(self, simu: Any, robot: Any, init_trans: Any = None) -> None:
        """Read the current pose / commands and overwrite the descriptor state.

        Args:
            simu: Simulation context exposing ``controller().parameters()``.
            robot: Robot handle exposing ``gripper()`` and ``joint(i)``.
            init_trans: Initial 6-D transform of the robot; unused.

        Raises:
            InvalidInputError: On malformed collaborator data.  The
                descriptor is left un-computed in that case.
        """
        self._computed = False
        self._compute(simu, robot)
        self._computed = True

    def extract(self) -> List[float]:
        """Return the feature vector for the last ``compute``.

        Returns:
            A new list of ``arity`` floats.

        Raises:
            NotComputedError: If ``compute`` has not succeeded yet.
        """
        if not self._computed:
            raise NotComputedError(
                f"{type(self).__name__}.extract() called before compute()"
            )
        return [float(v) for v in self._extract()]

    def __call__(self, simu: Any, robot: Any, init_trans: Any = None) -> List[float]:
        """Compute and extract in one call."""
        self.compute(simu, robot, init_trans)
        return self.extract()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(config={self.config!r})"

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def _compute(self, simu: Any, robot: Any) -> None:
        """Read collaborators and store variant-specific fields."""
        raise NotImplementedError

    @abc.abstractmethod
    def _extract(self) -> List[float]:
        """Convert stored fields into features."""
        raise NotImplementedError
