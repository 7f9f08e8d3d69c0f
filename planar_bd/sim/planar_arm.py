"""
Kinematic planar arm exposing world-frame bodies.

The arm is a serial chain of revolute joints in the XY plane, hanging
straight down from the origin at zero joint angles.  Joint ``i`` sits at
the start of link ``i`` and the gripper at the end of the last link.  Only
kinematics are modelled: there are no dynamics, contacts, or walls.

Classes:
    Body: A rigid body reporting its world position.
    PlanarArm: The planar arm simulation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from planar_bd.sim.configs import PlanarArmConfig


@dataclass
class Body:
    """A body of the arm with a fixed world position.

    Attributes:
        name: Body identifier (``'joint_3'``, ``'gripper'``, ...).
        position: World position [x, y, z].
    """

    name: str
    position: np.ndarray

    def world_position(self) -> np.ndarray:
        """Return a copy of the world position [x, y, z]."""
        return self.position.copy()


@dataclass
class PlanarArm:
    """A planar serial arm with position-limited revolute joints.

    Attributes:
        config: Link lengths, joint limits, and base heading.
        joint_positions: Current joint angles in radians.
    """

    config: PlanarArmConfig = field(default_factory=PlanarArmConfig)
    joint_positions: np.ndarray | None = None

    def __post_init__(self) -> None:
        if self.joint_positions is None:
            self.joint_positions = np.zeros(self.num_joints)
        self.joint_positions = self._clip_positions(
            np.asarray(self.joint_positions, dtype=np.float64)
        )
        self._points = self._forward_kinematics()

    @property
    def num_joints(self) -> int:
        return self.config.num_joints

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def reset(self) -> np.ndarray:
        """Reset all joints to zero and recompute body positions.

        Returns:
            A copy of the post-reset joint positions.
        """
        return self.set_joint_positions(np.zeros(self.num_joints))

    def set_joint_positions(self, positions: Sequence[float]) -> np.ndarray:
        """Set the joint angles directly, clipped to the joint limits.

        Args:
            positions: One angle per joint.

        Returns:
            A copy of the applied joint positions.

        Raises:
            ValueError: If the number of angles does not match the arm.
        """
        q = np.asarray(positions, dtype=np.float64).ravel()
        if q.shape[0] != self.num_joints:
            raise ValueError(f"Expected {self.num_joints} joint angles, got {q.shape[0]}")
        self.joint_positions = self._clip_positions(q)
        self._points = self._forward_kinematics()
        return self.joint_positions.copy()

    def step(self, action: np.ndarray) -> np.ndarray:
        """Apply per-joint velocity deltas and return the gripper position.

        Args:
            action: Per-joint deltas (radians / step); extra entries are ignored.

        Returns:
            Updated gripper world position [x, y, z].
        """
        delta = np.asarray(action, dtype=np.float64).ravel()[: self.num_joints]
        self.joint_positions = self._clip_positions(self.joint_positions + delta)
        self._points = self._forward_kinematics()
        return self._points[-1].copy()

    def joint(self, index: int) -> Body:
        """Return the body of joint *index*.

        Raises:
            IndexError: If *index* is outside ``[0, num_joints)``.
        """
        if not 0 <= index < self.num_joints:
            raise IndexError(f"joint index {index} out of range [0, {self.num_joints})")
        return Body(name=f"joint_{index}", position=self._points[index].copy())

    def gripper(self) -> Body:
        """Return the body at the end of the last link."""
        return Body(name="gripper", position=self._points[-1].copy())

    def bodies(self) -> List[Body]:
        """Return every joint body followed by the gripper."""
        return [self.joint(i) for i in range(self.num_joints)] + [self.gripper()]

    def get_state(self) -> np.ndarray:
        """Return joint positions followed by the gripper (x, y).

        Returns:
            1-D NumPy array of shape ``(num_joints + 2,)``.
        """
        return np.concatenate([self.joint_positions, self._points[-1][:2]])

    # ------------------------------------------------------------------
    # Kinematics helpers
    # ------------------------------------------------------------------

    def _clip_positions(self, raw: np.ndarray) -> np.ndarray:
        limit = self.config.joint_limit
        return np.clip(raw, -limit, limit)

    def _forward_kinematics(self) -> np.ndarray:
        """Compute the world position of every joint and of the gripper.

        Returns:
            Array of shape ``(num_joints + 1, 3)``; row 0 is the base.
        """
        headings = self.config.base_heading + np.cumsum(self.joint_positions)
        lengths = np.asarray(self.config.link_lengths, dtype=np.float64)
        points = np.zeros((self.num_joints + 1, 3), dtype=np.float64)
        points[1:, 0] = np.cumsum(lengths * np.cos(headings))
        points[1:, 1] = np.cumsum(lengths * np.sin(headings))
        return points
