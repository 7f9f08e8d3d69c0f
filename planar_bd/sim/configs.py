"""
Dataclass configurations for the reference arm and its environment.

Classes:
    PlanarArmConfig: Geometry and joint limits of the planar arm.
    PlanarArmEnvConfig: Episode settings of ``PlanarArmEnv``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from planar_bd.descriptors.configs import DescriptorConfig
from planar_bd.utils.constants import (
    BASE_HEADING,
    DEFAULT_FACTOR,
    ANGLE_SUM_WIDTH,
    ANGLE_SUM_WINDOWS,
    DEFAULT_JOINT_COUNT,
    DEFAULT_MAX_JOINT_STEP,
    JOINT_LIMIT,
)


def _default_link_lengths() -> Tuple[float, ...]:
    """Equal links whose total length equals the default reach."""
    return (DEFAULT_FACTOR / DEFAULT_JOINT_COUNT,) * DEFAULT_JOINT_COUNT


@dataclass(frozen=True)
class PlanarArmConfig:
    """Geometry of the reference planar arm.

    Attributes:
        link_lengths: Length of each link (metres); one joint per link.
        joint_limit: Symmetric per-joint position limit (radians).
        base_heading: World-frame heading of the first link at zero angles.
    """

    link_lengths: Tuple[float, ...] = field(default_factory=_default_link_lengths)
    joint_limit: float = JOINT_LIMIT
    base_heading: float = BASE_HEADING

    def __post_init__(self) -> None:
        if len(self.link_lengths) < 1:
            raise ValueError("`link_lengths` must contain at least one link")
        if any(length <= 0.0 for length in self.link_lengths):
            raise ValueError(f"link lengths must be positive, got {self.link_lengths}")
        if self.joint_limit <= 0.0:
            raise ValueError(f"`joint_limit` must be positive, got {self.joint_limit}")

    @property
    def num_joints(self) -> int:
        """Number of revolute joints (one per link)."""
        return len(self.link_lengths)


@dataclass
class PlanarArmEnvConfig:
    """Configuration for the planar arm environment.

    Attributes:
        episode_length: Steps per evaluation before truncation.
        max_joint_step: Largest per-step joint change (radians).
        arm: Geometry of the simulated arm.
        descriptor: Registered descriptor name reported at episode end, or
            *None* to skip descriptor computation.
        descriptor_config: Geometry used by the descriptor.
    """

    episode_length: int = 100
    max_joint_step: float = DEFAULT_MAX_JOINT_STEP
    arm: PlanarArmConfig = field(default_factory=PlanarArmConfig)
    descriptor: str | None = None
    descriptor_config: DescriptorConfig = field(default_factory=DescriptorConfig)

    def __post_init__(self) -> None:
        """Reject settings that would only fail once an episode has run.

        Raises:
            ValueError: On an empty episode, a non-positive joint step, or a
                descriptor that needs more joints than the arm has.
        """
        if self.episode_length < 1:
            raise ValueError("`episode_length` must be at least 1")
        if self.max_joint_step <= 0.0:
            raise ValueError("`max_joint_step` must be positive")
        if self.descriptor is not None:
            self._check_descriptor_fits_arm()

    def _check_descriptor_fits_arm(self) -> None:
        num_joints = self.arm.num_joints
        if self.descriptor_config.joint_count > num_joints:
            raise ValueError(
                f"descriptor expects {self.descriptor_config.joint_count} joints, "
                f"arm has {num_joints}"
            )
        required = ANGLE_SUM_WINDOWS + ANGLE_SUM_WIDTH - 1
        if self.descriptor == "angle_sum" and num_joints < required:
            raise ValueError(
                f"angle_sum needs at least {required} controller parameters, "
                f"arm has {num_joints} joints"
            )
