################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for pose interpolation and mirroring."""

from __future__ import annotations

import dataclasses
import math

import pytest

from oasis_trajectory.config.trajectory_params import FieldParams
from oasis_trajectory.math_utils.quantities import Angle
from oasis_trajectory.math_utils.quantities import Length
from oasis_trajectory.path.pose import HeadingInterpolation
from oasis_trajectory.path.pose import Pose


# Half of the default field length in meters
HALF_FIELD_X_M: float = 8.775

# Half of the default field width in meters
HALF_FIELD_Y_M: float = 4.025


def _pose(
    x: float = 0.0,
    y: float = 0.0,
    heading: float = 0.0,
    omega: float = 0.0,
    vx: float = 0.0,
    vy: float = 0.0,
) -> Pose:
    return Pose.from_si(
        x_m=x,
        y_m=y,
        heading_rad=heading,
        angular_velocity_rps=omega,
        velocity_x_mps=vx,
        velocity_y_mps=vy,
    )


def test_from_si_and_as_tuple() -> None:
    """SI construction should round-trip through as_tuple."""
    pose: Pose = _pose(1.0, 2.0, 0.5, -0.25, 3.0, -4.0)
    assert pose.as_tuple() == (1.0, 2.0, 0.5, -0.25, 3.0, -4.0)


def test_pose_is_frozen() -> None:
    """Poses cannot be modified after construction."""
    pose: Pose = _pose()
    with pytest.raises(dataclasses.FrozenInstanceError):
        pose.x = Length.from_meters(1.0)  # type: ignore[misc]


def test_interpolate_field_wise() -> None:
    """Every field blends independently and linearly."""
    start: Pose = _pose(0.0, 1.0, 0.0, 2.0, -1.0, 4.0)
    end: Pose = _pose(4.0, -3.0, 2.0, -2.0, 3.0, 0.0)
    blended: Pose = start.interpolate(end, 0.25)
    assert blended.as_tuple() == pytest.approx((1.0, 0.0, 0.5, 1.0, 0.0, 3.0))


def test_interpolate_endpoints() -> None:
    """Progress 0 and 1 reproduce the endpoints."""
    start: Pose = _pose(0.5, 1.0, 0.25, 2.0, -1.0, 4.0)
    end: Pose = _pose(4.0, -3.0, 2.0, -2.0, 3.0, 0.0)
    assert start.interpolate(end, 0.0) == start
    assert start.interpolate(end, 1.0).as_tuple() == pytest.approx(end.as_tuple())


def test_linear_heading_takes_long_way() -> None:
    """Linear heading blends through zero across the +/-pi seam."""
    start: Pose = _pose(heading=3.0)
    end: Pose = _pose(heading=-3.0)
    assert start.interpolate(end, 0.5).heading.radians == 0.0


def test_shortest_heading_crosses_seam() -> None:
    """Shortest-arc heading blends through pi across the seam."""
    start: Pose = _pose(heading=3.0)
    end: Pose = _pose(heading=-3.0)
    blended: Pose = start.interpolate(end, 0.5, HeadingInterpolation.SHORTEST)
    assert blended.heading.radians == pytest.approx(math.pi)


def test_mirror_position_exact() -> None:
    """Mirrored x is 2 * reference - x in floating point."""
    pose: Pose = _pose(x=8.02192, y=1.5)
    mirrored: Pose = pose.mirror(
        Length.from_meters(HALF_FIELD_X_M), Length.from_meters(HALF_FIELD_Y_M)
    )
    assert mirrored.x.meters == HALF_FIELD_X_M * 2.0 - 8.02192
    assert mirrored.x.meters == pytest.approx(9.52808)
    assert mirrored.y.meters == pytest.approx(6.55)


def test_mirror_heading_and_rates() -> None:
    """Heading gains a half turn, omega flips, velocity passes through."""
    pose: Pose = _pose(heading=0.5, omega=1.25, vx=2.0, vy=-1.0)
    mirrored: Pose = pose.mirror(Length.from_meters(1.0), Length.from_meters(1.0))
    assert mirrored.heading.radians == pytest.approx(0.5 + math.pi)
    assert mirrored.angular_velocity.radians_per_second == -1.25
    assert mirrored.velocity_x == pose.velocity_x
    assert mirrored.velocity_y == pose.velocity_y


def test_mirror_velocity_opt_in() -> None:
    """mirror_velocity negates both linear velocity components."""
    pose: Pose = _pose(vx=2.0, vy=-1.0)
    mirrored: Pose = pose.mirror(
        Length.from_meters(1.0), Length.from_meters(1.0), mirror_velocity=True
    )
    assert mirrored.velocity_x.meters_per_second == -2.0
    assert mirrored.velocity_y.meters_per_second == 1.0


def test_double_mirror_restores_spatial_fields() -> None:
    """Mirroring twice restores x, y and heading modulo a full turn."""
    pose: Pose = _pose(x=3.21, y=7.5, heading=-2.75)
    reference_x: Length = Length.from_meters(HALF_FIELD_X_M)
    reference_y: Length = Length.from_meters(HALF_FIELD_Y_M)
    restored: Pose = pose.mirror(reference_x, reference_y).mirror(
        reference_x, reference_y
    )
    assert restored.x.meters == pytest.approx(3.21, abs=1e-12)
    assert restored.y.meters == pytest.approx(7.5, abs=1e-12)
    heading_error: float = math.remainder(
        restored.heading.radians - pose.heading.radians, 2.0 * math.pi
    )
    assert heading_error == pytest.approx(0.0, abs=1e-12)
    assert restored.angular_velocity == pose.angular_velocity


def test_mirror_across_field_center() -> None:
    """mirror_across uses half the field dimensions as the reference."""
    pose: Pose = _pose(x=8.02192, y=1.0, heading=0.1)
    expected: Pose = pose.mirror(
        Length.from_meters(HALF_FIELD_X_M), Length.from_meters(HALF_FIELD_Y_M)
    )
    assert pose.mirror_across(FieldParams()) == expected


def test_mirror_does_not_modify_source() -> None:
    """Mirroring returns a new pose."""
    pose: Pose = _pose(x=1.0, heading=Angle.from_degrees(30.0).radians)
    before: tuple[float, ...] = pose.as_tuple()
    pose.mirror(Length.from_meters(2.0), Length.from_meters(2.0))
    assert pose.as_tuple() == before
