import logging
import math

import pytest

from planar_bd.descriptors import DescriptorConfig, PolarCoord, PositionalCoord
from planar_bd.utils.constants import DEFAULT_FACTOR
from tests.stubs import StubRobot

F = DEFAULT_FACTOR


# ---------------------------------------------------------------------------
# PositionalCoord
# ---------------------------------------------------------------------------

def test_positional_origin(simu):
    d = PositionalCoord()
    d.compute(simu, StubRobot(gripper=(0.0, 0.0)))
    assert d.extract() == [0.5, 0.0]


def test_positional_far_corner(simu):
    d = PositionalCoord()
    d.compute(simu, StubRobot(gripper=(F, -F)))
    assert d.extract() == [1.0, 1.0]


def test_positional_hanging_straight_down(simu):
    d = PositionalCoord()
    d.compute(simu, StubRobot(gripper=(-F / 2, -F / 2)))
    assert d.extract() == pytest.approx([0.25, 0.5])


@pytest.mark.parametrize("gripper,expected", [
    ((2.0, 1.0), [1.0, 0.0]),
    ((-2.0, -2.0), [0.0, 1.0]),
])
def test_positional_clamps_out_of_range_samples(simu, gripper, expected):
    d = PositionalCoord()
    d.compute(simu, StubRobot(gripper=gripper))
    assert d.extract() == expected


def test_positional_uses_configured_factor(simu):
    d = PositionalCoord(DescriptorConfig(factor=1.0))
    d.compute(simu, StubRobot(gripper=(0.5, -0.25)))
    assert d.extract() == pytest.approx([0.75, 0.25])


def test_positional_extract_is_idempotent(simu):
    d = PositionalCoord()
    d.compute(simu, StubRobot(gripper=(0.1, -0.2)))
    first = d.extract()
    second = d.extract()
    assert first == second
    assert first is not second


# ---------------------------------------------------------------------------
# PolarCoord
# ---------------------------------------------------------------------------

def test_polar_positive_x_axis_is_shifted(simu):
    d = PolarCoord()
    d.compute(simu, StubRobot(gripper=(F, 0.0)))
    assert d.extract() == pytest.approx([1.0, 1.0])
    assert d.in_expected_range


def test_polar_straight_down(simu):
    d = PolarCoord()
    d.compute(simu, StubRobot(gripper=(0.0, -F)))
    assert d.extract() == pytest.approx([1.0, 0.5])


def test_polar_lower_left_quadrant(simu):
    d = PolarCoord()
    d.compute(simu, StubRobot(gripper=(-F / 2, -F / 2)))
    radius, angle = d.extract()
    assert radius == pytest.approx(1.0 / math.sqrt(2.0))
    assert angle == pytest.approx(0.25)


def test_polar_over_extension_is_flagged_not_fatal(simu, caplog):
    d = PolarCoord()
    with caplog.at_level(logging.WARNING, logger="planar_bd.descriptors.position"):
        d.compute(simu, StubRobot(gripper=(0.0, -1.0)))
    assert not d.in_expected_range
    assert "outside reachable sector" in caplog.text
    assert d.extract() == pytest.approx([1.0, 0.5])


def test_polar_wall_contact_is_accepted_and_clamped(simu):
    d = PolarCoord()
    d.compute(simu, StubRobot(gripper=(0.1, 0.2)))
    assert d.in_expected_range
    radius, angle = d.extract()
    assert radius == pytest.approx(math.hypot(0.1, 0.2) / F)
    assert angle == 0.0


def test_polar_flag_resets_on_next_compute(simu):
    d = PolarCoord()
    d.compute(simu, StubRobot(gripper=(0.0, -1.0)))
    assert not d.in_expected_range
    d.compute(simu, StubRobot(gripper=(0.0, -F / 2)))
    assert d.in_expected_range


@pytest.mark.parametrize("gripper", [
    (0.3, -0.1), (-0.3, -0.1), (5.0, -5.0), (-5.0, 5.0), (0.0, 0.0), (1e-9, -1e-9),
])
def test_position_features_stay_in_unit_interval(simu, gripper):
    for d in (PositionalCoord(), PolarCoord()):
        d.compute(simu, StubRobot(gripper=gripper))
        assert all(0.0 <= v <= 1.0 for v in d.extract())
