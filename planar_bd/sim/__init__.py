"""
Reference kinematic collaborators for the descriptors.

Provides a planar 8-joint arm exposing world-frame bodies, an open-loop
controller exposing its parameter vector, and a Gymnasium environment that
acts as the simulation context for descriptor evaluation.
"""

from planar_bd.sim.configs import PlanarArmConfig, PlanarArmEnvConfig
from planar_bd.sim.controller import OpenLoopController
from planar_bd.sim.env import PlanarArmEnv
from planar_bd.sim.planar_arm import Body, PlanarArm

__all__ = [
    "Body",
    "OpenLoopController",
    "PlanarArm",
    "PlanarArmConfig",
    "PlanarArmEnv",
    "PlanarArmEnvConfig",
]
