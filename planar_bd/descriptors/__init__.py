"""
Behaviour descriptors for the planar arm.

Each descriptor reads the current pose (or controller commands) with
``compute`` and returns a fixed-size feature vector with ``extract``.
"""

from planar_bd.descriptors.angle_sum import AngleSum
from planar_bd.descriptors.angles import (
    AbsoluteFrame,
    AngleFrame,
    RelativeFrame,
    RelativeResultantAngle,
    ResultantAngle,
)
from planar_bd.descriptors.base import BaseDescriptor
from planar_bd.descriptors.configs import DescriptorConfig
from planar_bd.descriptors.errors import (
    DescriptorError,
    InvalidInputError,
    NotComputedError,
)
from planar_bd.descriptors.factory import available_descriptors, make_descriptor
from planar_bd.descriptors.position import PolarCoord, PositionalCoord

__all__ = [
    "AbsoluteFrame",
    "AngleFrame",
    "AngleSum",
    "BaseDescriptor",
    "DescriptorConfig",
    "DescriptorError",
    "InvalidInputError",
    "NotComputedError",
    "PolarCoord",
    "PositionalCoord",
    "RelativeFrame",
    "RelativeResultantAngle",
    "ResultantAngle",
    "available_descriptors",
    "make_descriptor",
]
