"""
Shared constants for the planar_bd package.

Geometry defaults describe the 8-joint planar arm whose terminal link
reaches at most ``DEFAULT_FACTOR`` metres below the base.  Angle ranges are
the normalisation windows used by the descriptor family.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

PI: float = float(np.pi)
TWO_PI: float = 2.0 * PI

# ---------------------------------------------------------------------------
# Arm geometry defaults
# ---------------------------------------------------------------------------
DEFAULT_FACTOR: float = 0.5425  # largest |y| of the gripper (link 8)
DEFAULT_THICKNESS: float = 0.0775
DEFAULT_JOINT_COUNT: int = 8

# ---------------------------------------------------------------------------
# Angle windows (radians)
# ---------------------------------------------------------------------------
ANGLE_TOLERANCE: float = 0.10  # room left for the thickness of the arm

POLAR_SHIFT_THRESHOLD: float = ANGLE_TOLERANCE
POLAR_ANGLE_RANGE: Tuple[float, float] = (PI, TWO_PI)

ABSOLUTE_ANGLE_RANGE: Tuple[float, float] = (0.0, TWO_PI)
ABSOLUTE_CLIP_RANGE: Tuple[float, float] = (
    -ANGLE_TOLERANCE,
    TWO_PI + ANGLE_TOLERANCE,
)

# Two equal segments each turning at most pi/2 stay within +-3pi/4.
RELATIVE_ANGLE_RANGE: Tuple[float, float] = (-0.75 * PI, 0.75 * PI)
RELATIVE_CLIP_RANGE: Tuple[float, float] = (
    -0.75 * PI - ANGLE_TOLERANCE,
    0.75 * PI + ANGLE_TOLERANCE,
)
INITIAL_OFFSET_ANGLE: float = 1.5 * PI  # straight down

# ---------------------------------------------------------------------------
# Command-sum windows
# ---------------------------------------------------------------------------
ANGLE_SUM_WINDOWS: int = 6
ANGLE_SUM_WIDTH: int = 3

# ---------------------------------------------------------------------------
# Reference arm
# ---------------------------------------------------------------------------
BASE_HEADING: float = -0.5 * PI
JOINT_LIMIT: float = 0.5 * PI
DEFAULT_MAX_JOINT_STEP: float = 0.1
