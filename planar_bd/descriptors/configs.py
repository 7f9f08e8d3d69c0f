"""
Dataclass configuration shared by every descriptor variant.

Classes:
    DescriptorConfig: Arm geometry used to normalise descriptor features.
"""

from __future__ import annotations

from dataclasses import dataclass

from planar_bd.utils.constants import (
    DEFAULT_FACTOR,
    DEFAULT_JOINT_COUNT,
    DEFAULT_THICKNESS,
)


@dataclass(frozen=True)
class DescriptorConfig:
    """Geometry of the arm as seen by the descriptors.

    Attributes:
        factor: Maximum reachable radius / extent of the arm (metres).
        thickness: Thickness of an arm segment (metres).
        joint_count: Number of joints in the chain, gripper excluded.
    """

    factor: float = DEFAULT_FACTOR
    thickness: float = DEFAULT_THICKNESS
    joint_count: int = DEFAULT_JOINT_COUNT

    def __post_init__(self) -> None:
        """Reject geometry that would make normalisation meaningless.

        Raises:
            ValueError: On a non-positive factor, negative thickness,
                fewer than two joints, or a non-integer joint count.
        """
        if self.factor <= 0.0:
            raise ValueError(f"`factor` must be positive, got {self.factor}")
        if self.thickness < 0.0:
            raise ValueError(f"`thickness` must be non-negative, got {self.thickness}")
        if isinstance(self.joint_count, bool) or not isinstance(self.joint_count, int):
            raise ValueError(f"`joint_count` must be an int, got {self.joint_count!r}")
        if self.joint_count < 2:
            raise ValueError(f"`joint_count` must be at least 2, got {self.joint_count}")
