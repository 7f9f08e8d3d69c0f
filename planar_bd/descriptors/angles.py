"""
Joint-chain heading descriptors.

The chain is sampled at every other joint (1, 3, 5, ...) starting from
the base at the origin, modelling pairs of segments.  For each sampled
segment the world-frame heading ``atan2(dy, dx)`` is computed and handed
to an ``AngleFrame`` strategy, which expresses it either absolutely or
relative to the previous segment and normalises it to [0, 1].

Classes:
    AngleFrame: Strategy interface for transforming and normalising headings.
    AbsoluteFrame: Headings in the world frame, ``[0, 2*pi]``.
    RelativeFrame: Headings relative to the previous segment, ``+-3*pi/4``.
    JointChainDescriptor: Shared traversal parameterised by an ``AngleFrame``.
    ResultantAngle: Absolute headings of each segment pair.
    RelativeResultantAngle: Relative headings of each segment pair.

Functions:
    segment_heading: Clipped absolute heading from one point to another.
"""

from __future__ import annotations

import abc
import logging
import math
from typing import Any, List, Tuple

from planar_bd.descriptors.base import BaseDescriptor, joint_xy
from planar_bd.descriptors.configs import DescriptorConfig
from planar_bd.utils.constants import (
    ABSOLUTE_ANGLE_RANGE,
    ABSOLUTE_CLIP_RANGE,
    INITIAL_OFFSET_ANGLE,
    RELATIVE_ANGLE_RANGE,
    RELATIVE_CLIP_RANGE,
)
from planar_bd.utils.helpers import clamp_unit, normalize_to_range, wrap_once

logger = logging.getLogger(__name__)


def segment_heading(start: Tuple[float, float], end: Tuple[float, float]) -> float:
    """Return the heading from *start* to *end* in ``[-0.10, 2*pi + 0.10]``.

    ``atan2`` yields ``(-pi, pi]``; one ``2*pi`` correction moves the lower
    half-plane up, which is enough for the arm's range of motion.

    Args:
        start: Planar point the segment starts from.
        end: Planar point the segment ends at.

    Returns:
        Heading in radians.
    """
    raw = math.atan2(end[1] - start[1], end[0] - start[0])
    return wrap_once(raw, *ABSOLUTE_CLIP_RANGE)


class AngleFrame(abc.ABC):
    """Strategy turning absolute segment headings into normalised features."""

    @abc.abstractmethod
    def transform(self, heading: float, offset: float) -> float:
        """Express *heading* in this frame given the previous segment's heading.

        Args:
            heading: Clipped absolute heading of the current segment.
            offset: Clipped absolute heading of the previous segment.

        Returns:
            The angle exposed by the descriptor.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def normalise(self, angle: float) -> float:
        """Map a transformed angle to [0, 1]."""
        raise NotImplementedError


class AbsoluteFrame(AngleFrame):
    """World-frame headings; the offset is ignored."""

    def transform(self, heading: float, offset: float) -> float:
        return heading

    def normalise(self, angle: float) -> float:
        return clamp_unit(normalize_to_range(angle, *ABSOLUTE_ANGLE_RANGE))


class RelativeFrame(AngleFrame):
    """Headings relative to the previous segment.

    Two equal-length segments each turning at most ``pi/2`` combine into a
    relative angle within ``+-3*pi/4``, which is the normalisation window.
    """

    def transform(self, heading: float, offset: float) -> float:
        return wrap_once(heading - offset, *RELATIVE_CLIP_RANGE)

    def normalise(self, angle: float) -> float:
        return clamp_unit(normalize_to_range(angle, *RELATIVE_ANGLE_RANGE))


class JointChainDescriptor(BaseDescriptor):
    """Walks the joint chain and records one angle per pair of segments.

    The offset handed to the frame for segment ``k + 1`` is the clipped
    absolute heading of segment ``k``, never the transformed angle, so the
    offset chain follows the global orientation while the exposed features
    stay in the frame's convention.  The first offset is ``1.5*pi``
    (pointing straight down).

    Attributes:
        frame: Strategy used to transform and normalise headings.
    """

    name = "joint_chain"

    def __init__(
        self, frame: AngleFrame, config: DescriptorConfig | None = None
    ) -> None:
        """Initialise the chain descriptor.

        Args:
            frame: ``AngleFrame`` strategy.
            config: Optional ``DescriptorConfig``; defaults are used when *None*.
        """
        super().__init__(config)
        self.frame = frame
        self._angles: List[float] = []
        self._offsets: List[float] = []

    @property
    def arity(self) -> int:
        return len(self.sampled_joints)

    @property
    def sampled_joints(self) -> range:
        """Indices of the joints read on each ``compute``."""
        return range(1, self.config.joint_count, 2)

    @property
    def angles(self) -> Tuple[float, ...]:
        """Transformed, un-normalised angles of the last ``compute``."""
        return tuple(self._angles)

    @property
    def offsets(self) -> Tuple[float, ...]:
        """Offset handed to the frame for each segment of the last ``compute``."""
        return tuple(self._offsets)

    def _compute(self, simu: Any, robot: Any) -> None:
        angles: List[float] = []
        offsets: List[float] = []
        base = (0.0, 0.0)
        offset = INITIAL_OFFSET_ANGLE
        for index in self.sampled_joints:
            position = joint_xy(robot, index)
            heading = segment_heading(base, position)
            angles.append(self.frame.transform(heading, offset))
            offsets.append(offset)
            logger.debug(
                "joint %d at (%.4f, %.4f): heading %.4f, offset %.4f",
                index,
                position[0],
                position[1],
                heading,
                offset,
            )
            offset = heading
            base = position
        self._angles = angles
        self._offsets = offsets

    def _extract(self) -> List[float]:
        return [self.frame.normalise(a) for a in self._angles]


class ResultantAngle(JointChainDescriptor):
    """Absolute world-frame heading of each pair of segments, ``[0, 2*pi]``."""

    name = "resultant_angle"

    def __init__(self, config: DescriptorConfig | None = None) -> None:
        super().__init__(AbsoluteFrame(), config)


class RelativeResultantAngle(JointChainDescriptor):
    """Heading of each pair of segments relative to the previous pair."""

    name = "relative_resultant_angle"

    def __init__(self, config: DescriptorConfig | None = None) -> None:
        super().__init__(RelativeFrame(), config)
