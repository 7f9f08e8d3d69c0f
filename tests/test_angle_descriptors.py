import math

import pytest

from planar_bd.descriptors import (
    DescriptorConfig,
    InvalidInputError,
    RelativeResultantAngle,
    ResultantAngle,
)
from planar_bd.descriptors.angles import segment_heading
from planar_bd.utils.constants import TWO_PI
from tests.stubs import StubRobot, chain_from_headings

PI = math.pi


def relative_feature(angle):
    return (angle + 0.75 * PI) / (1.5 * PI)


# ---------------------------------------------------------------------------
# segment_heading
# ---------------------------------------------------------------------------

def test_segment_heading_upper_half_plane_unchanged():
    assert segment_heading((0.0, 0.0), (1.0, 1.0)) == math.atan2(1.0, 1.0)


def test_segment_heading_lower_half_plane_shifted():
    assert segment_heading((0.0, 0.0), (0.0, -1.0)) == pytest.approx(1.5 * PI)


def test_segment_heading_tolerates_small_negative_angle():
    start, end = (0.0, 0.0), (1.0, -0.05)
    assert segment_heading(start, end) == math.atan2(-0.05, 1.0)


# ---------------------------------------------------------------------------
# ResultantAngle
# ---------------------------------------------------------------------------

def test_resultant_angle_arity_follows_joint_count():
    assert ResultantAngle().arity == 4
    assert ResultantAngle(DescriptorConfig(joint_count=5)).arity == 2
    assert ResultantAngle(DescriptorConfig(joint_count=6)).arity == 3
    assert list(ResultantAngle().sampled_joints) == [1, 3, 5, 7]


def test_resultant_angle_collinear_chain_gives_equal_features(simu):
    d = ResultantAngle()
    d.compute(simu, chain_from_headings([0.0] * 4))
    assert d.extract() == [0.0, 0.0, 0.0, 0.0]

    d.compute(simu, chain_from_headings([-0.5 * PI] * 4))
    features = d.extract()
    assert features == pytest.approx([0.75] * 4)
    assert len(set(round(f, 12) for f in features)) == 1


def test_resultant_angle_mixed_headings(simu):
    d = ResultantAngle()
    d.compute(simu, chain_from_headings([0.5 * PI, PI - 0.2, -0.25 * PI, -0.2]))
    assert d.extract() == pytest.approx([
        0.25,
        (PI - 0.2) / TWO_PI,
        1.75 * PI / TWO_PI,
        (TWO_PI - 0.2) / TWO_PI,
    ])


def test_resultant_angle_reads_every_other_joint_from_origin(simu):
    robot = StubRobot(joints={1: (0.0, -0.1), 3: (0.1, -0.1), 5: (0.1, -0.2), 7: (0.0, -0.2)})
    d = ResultantAngle()
    d.compute(simu, robot)
    assert d.extract() == pytest.approx([0.75, 0.0, 0.75, 0.5])


def test_resultant_angle_missing_joint_raises(simu):
    robot = StubRobot(joints={1: (0.0, -0.1), 3: (0.0, -0.2)})
    d = ResultantAngle()
    with pytest.raises(InvalidInputError, match="joint 5"):
        d.compute(simu, robot)
    assert not d.is_computed


# ---------------------------------------------------------------------------
# RelativeResultantAngle
# ---------------------------------------------------------------------------

def test_relative_offset_chain_uses_absolute_headings(simu):
    absolute = [1.5 * PI, 1.5 * PI + 0.4, 1.5 * PI - 0.5, 1.5 * PI + 0.5]
    d = RelativeResultantAngle()
    d.compute(simu, chain_from_headings(absolute))

    assert list(d.offsets) == pytest.approx([1.5 * PI] + absolute[:-1])
    assert list(d.angles) == pytest.approx([0.0, 0.4, -0.9, 1.0])
    assert d.extract() == pytest.approx(
        [relative_feature(a) for a in (0.0, 0.4, -0.9, 1.0)]
    )


def test_relative_first_segment_is_measured_from_straight_down(simu):
    d = RelativeResultantAngle()
    d.compute(simu, chain_from_headings([0.0, 0.0, 0.0, 0.0]))
    # 0 - 1.5pi is wrapped once to +0.5pi; the rest are collinear
    assert list(d.angles) == pytest.approx([0.5 * PI, 0.0, 0.0, 0.0])
    assert d.extract() == pytest.approx([relative_feature(0.5 * PI), 0.5, 0.5, 0.5])


def test_relative_angle_wraps_across_branch_cut(simu):
    # second segment crosses from the fourth quadrant into the first
    d = RelativeResultantAngle()
    d.compute(simu, chain_from_headings([-0.3, 0.3, 0.3, 0.3]))
    assert d.angles[1] == pytest.approx(0.6)


def test_relative_angles_are_clamped(simu):
    # a full reversal is outside +-3pi/4
    d = RelativeResultantAngle()
    d.compute(simu, chain_from_headings([1.5 * PI, 0.5 * PI - 0.01, 1.5 * PI, 1.5 * PI]))
    features = d.extract()
    assert features[1] == 1.0
    assert all(0.0 <= v <= 1.0 for v in features)


def test_resultant_and_relative_share_traversal(simu):
    robot = chain_from_headings([1.5 * PI, 1.5 * PI + 0.4, 1.5 * PI - 0.5, 1.5 * PI + 0.5])
    absolute = ResultantAngle()
    relative = RelativeResultantAngle()
    absolute.compute(simu, robot)
    relative.compute(simu, robot)
    assert list(relative.offsets[1:]) == pytest.approx(list(absolute.angles[:-1]))


@pytest.mark.parametrize("headings", [
    [0.0, PI, 0.0, PI],
    [0.5 * PI, -0.5 * PI, 0.5 * PI, -0.5 * PI],
    [3.0, -3.0, 2.0, -2.0],
    [-0.09, -0.11, 6.3, 0.05],
])
def test_chain_features_stay_in_unit_interval(simu, headings):
    for d in (ResultantAngle(), RelativeResultantAngle()):
        d.compute(simu, chain_from_headings(headings))
        assert all(0.0 <= v <= 1.0 for v in d.extract())
