"""Shared fixtures: a stub simulation whose controller holds eight zero commands."""
from __future__ import annotations

import pytest

from tests.stubs import StubSimulation


@pytest.fixture
def simu() -> StubSimulation:
    return StubSimulation(params=[0.0] * 8)
