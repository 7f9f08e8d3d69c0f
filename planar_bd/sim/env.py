"""
Planar arm simulation environment (Gymnasium-compatible).

The agent emits per-joint deltas for a planar arm.  The environment doubles
as the simulation context handed to descriptors: it exposes the active
controller through ``controller()`` and the arm through ``robot``.  When a
descriptor is configured, the descriptor of the final pose is reported in
the ``info`` dict of the truncating step.

Classes:
    PlanarArmEnv: Gymnasium environment wrapping ``PlanarArm``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from planar_bd.descriptors.base import BaseDescriptor
from planar_bd.descriptors.factory import make_descriptor
from planar_bd.sim.configs import PlanarArmEnvConfig
from planar_bd.sim.controller import OpenLoopController
from planar_bd.sim.planar_arm import PlanarArm

BEHAVIOR_DESCRIPTOR: str = "behavior_descriptor"


class PlanarArmEnv(gym.Env):
    """Gymnasium environment for open-loop evaluations of the planar arm.

    There is no task reward: behaviours are characterised by their
    descriptor rather than scored.  Episodes are truncated after
    ``episode_length`` steps and never terminate early.

    Attributes:
        metadata: Gymnasium metadata (no render modes).
        cfg: ``PlanarArmEnvConfig`` controlling episode length and geometry.
        robot: The simulated ``PlanarArm``.
        descriptor: Descriptor evaluated at truncation, or *None*.
    """

    metadata: Dict[str, Any] = {"render_modes": []}

    def __init__(self, cfg: PlanarArmEnvConfig | None = None) -> None:
        """Initialise the environment.

        Args:
            cfg: Optional configuration; a default ``PlanarArmEnvConfig`` is
                used when *None*.
        """
        super().__init__()
        self.cfg = cfg or PlanarArmEnvConfig()
        self.robot = PlanarArm(config=self.cfg.arm)
        self.descriptor: Optional[BaseDescriptor] = (
            make_descriptor(self.cfg.descriptor, self.cfg.descriptor_config)
            if self.cfg.descriptor is not None
            else None
        )
        self._controller = OpenLoopController(
            params=np.zeros(self.robot.num_joints), max_step=self.cfg.max_joint_step
        )
        self._step_count = 0
        self._init_spaces()

    def _init_spaces(self) -> None:
        """Define action and observation Gymnasium spaces."""
        n = self.robot.num_joints
        step = self.cfg.max_joint_step
        self.action_space = spaces.Box(low=-step, high=step, shape=(n,), dtype=np.float64)
        limit = self.cfg.arm.joint_limit
        reach = float(sum(self.cfg.arm.link_lengths))
        low = np.concatenate([np.full(n, -limit), np.full(2, -reach)])
        high = np.concatenate([np.full(n, limit), np.full(2, reach)])
        self.observation_space = spaces.Box(low=low, high=high, dtype=np.float64)

    # ------------------------------------------------------------------
    # Simulation context
    # ------------------------------------------------------------------

    def controller(self) -> OpenLoopController:
        """Return the controller of the current evaluation."""
        return self._controller

    def set_controller(self, controller: OpenLoopController) -> None:
        """Replace the controller used by ``rollout``.

        Raises:
            ValueError: If the controller does not have one target per joint.
        """
        if len(controller.params) != self.robot.num_joints:
            raise ValueError(
                f"Controller has {len(controller.params)} targets, "
                f"arm has {self.robot.num_joints} joints"
            )
        self._controller = controller

    # ------------------------------------------------------------------
    # Gymnasium API
    # ------------------------------------------------------------------

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """Reset the arm to its zero pose.

        Args:
            seed: Optional seed, forwarded to ``gym.Env.reset``.
            options: Optional ``{"parameters": [...]}`` installing a new
                open-loop controller.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self._step_count = 0
        self.robot.reset()
        if options and "parameters" in options:
            self.set_controller(
                OpenLoopController(
                    params=np.asarray(options["parameters"], dtype=np.float64),
                    max_step=self.cfg.max_joint_step,
                )
            )
        return self._build_observation(), {}

    def step(
        self, action: np.ndarray
    ) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """Apply per-joint deltas for one step.

        Args:
            action: Per-joint deltas, clipped to the action space.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        clipped = np.clip(
            np.asarray(action, dtype=np.float64),
            self.action_space.low,
            self.action_space.high,
        )
        self.robot.step(clipped)
        self._step_count += 1
        truncated = self._step_count >= self.cfg.episode_length
        info: Dict[str, Any] = {}
        if truncated and self.descriptor is not None:
            info[BEHAVIOR_DESCRIPTOR] = self.descriptor(self, self.robot)
        return self._build_observation(), 0.0, False, truncated, info

    def _build_observation(self) -> np.ndarray:
        return self.robot.get_state()

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def rollout(self, parameters: Sequence[float]) -> List[float]:
        """Run one open-loop evaluation and return its behaviour descriptor.

        Args:
            parameters: Target joint angles for the controller.

        Returns:
            The descriptor of the final pose.

        Raises:
            RuntimeError: If no descriptor is configured.
        """
        if self.descriptor is None:
            raise RuntimeError("PlanarArmEnv.rollout() requires `cfg.descriptor`")
        self.reset(options={"parameters": parameters})
        truncated = False
        info: Dict[str, Any] = {}
        while not truncated:
            action = self._controller.command(self.robot.joint_positions)
            _, _, _, truncated, info = self.step(action)
        return info[BEHAVIOR_DESCRIPTOR]
