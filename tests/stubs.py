"""Stub collaborators shared by the descriptor tests."""
from __future__ import annotations

import math
from typing import Dict, Sequence, Tuple


class StubBody:
    def __init__(self, x: float, y: float, z: float = 0.0) -> None:
        self._position = (x, y, z)

    def world_position(self) -> Tuple[float, float, float]:
        return self._position


class StubRobot:
    """Robot handle with a fixed gripper and an explicit joint table."""

    def __init__(
        self,
        gripper: Tuple[float, float] = (0.0, 0.0),
        joints: Dict[int, Tuple[float, float]] | None = None,
    ) -> None:
        self._gripper = StubBody(*gripper)
        self._joints = {i: StubBody(*p) for i, p in (joints or {}).items()}

    def gripper(self) -> StubBody:
        return self._gripper

    def joint(self, index: int) -> StubBody:
        return self._joints[index]


class StubController:
    def __init__(self, params: Sequence[float]) -> None:
        self._params = list(params)

    def parameters(self):
        return list(self._params)


class StubSimulation:
    def __init__(self, params: Sequence[float] = ()) -> None:
        self._controller = StubController(params)

    def controller(self) -> StubController:
        return self._controller


def chain_from_headings(headings: Sequence[float], length: float = 0.1) -> StubRobot:
    """Robot whose sampled joints (1, 3, 5, ...) follow the given headings."""
    joints = {}
    x, y = 0.0, 0.0
    for k, heading in enumerate(headings):
        x += length * math.cos(heading)
        y += length * math.sin(heading)
        joints[2 * k + 1] = (x, y)
    return StubRobot(joints=joints)


