################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Interpolatable robot pose."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from oasis_trajectory.config.trajectory_params import FieldParams
from oasis_trajectory.math_utils import units
from oasis_trajectory.math_utils.quantities import Angle
from oasis_trajectory.math_utils.quantities import AngularVelocity
from oasis_trajectory.math_utils.quantities import Length
from oasis_trajectory.math_utils.quantities import Velocity
from oasis_trajectory.math_utils.quantities import lerp


# Mirroring leaves linear velocity untouched unless asked otherwise, so a
# mirrored pose is not an exact reflection of its velocity
VELOCITY_PASS_THROUGH: bool = True


class HeadingInterpolation(enum.Enum):
    """
    Heading blend used between two samples

    Attributes:
        LINEAR: Blend the raw heading values, no wraparound handling
        SHORTEST: Blend along the shortest arc between the two headings
    """

    LINEAR = "linear"
    SHORTEST = "shortest"


@dataclass(frozen=True)
class Pose:
    """Robot state at one instant of a trajectory.

    Attributes:
        x: Field x position
        y: Field y position
        heading: Robot heading, counter-clockwise from +x
        angular_velocity: Heading rate
        velocity_x: Linear velocity along field x
        velocity_y: Linear velocity along field y
    """

    x: Length
    y: Length
    heading: Angle
    angular_velocity: AngularVelocity
    velocity_x: Velocity
    velocity_y: Velocity

    @classmethod
    def from_si(
        cls,
        *,
        x_m: float,
        y_m: float,
        heading_rad: float,
        angular_velocity_rps: float,
        velocity_x_mps: float,
        velocity_y_mps: float,
    ) -> Pose:
        """Build a pose from bare values in meters, radians and seconds."""
        return cls(
            x=Length.from_meters(x_m),
            y=Length.from_meters(y_m),
            heading=Angle.from_radians(heading_rad),
            angular_velocity=AngularVelocity.from_radians_per_second(
                angular_velocity_rps
            ),
            velocity_x=Velocity.from_meters_per_second(velocity_x_mps),
            velocity_y=Velocity.from_meters_per_second(velocity_y_mps),
        )

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        """Return (x, y, heading, angular_velocity, velocity_x, velocity_y) in SI."""
        return (
            self.x.meters,
            self.y.meters,
            self.heading.radians,
            self.angular_velocity.radians_per_second,
            self.velocity_x.meters_per_second,
            self.velocity_y.meters_per_second,
        )

    def interpolate(
        self,
        other: Pose,
        progress: float,
        heading_mode: HeadingInterpolation = HeadingInterpolation.LINEAR,
    ) -> Pose:
        """Return the field-wise blend self + (other - self) * progress.

        With the default LINEAR mode the heading is blended as a raw value,
        so headings on either side of +/-pi are interpolated the long way
        around. SHORTEST blends across the wrapped difference instead.
        """
        heading: Angle
        if heading_mode is HeadingInterpolation.SHORTEST:
            delta: Angle = (other.heading - self.heading).wrapped()
            heading = self.heading + delta * progress
        else:
            heading = lerp(self.heading, other.heading, progress)

        return Pose(
            x=lerp(self.x, other.x, progress),
            y=lerp(self.y, other.y, progress),
            heading=heading,
            angular_velocity=lerp(
                self.angular_velocity, other.angular_velocity, progress
            ),
            velocity_x=lerp(self.velocity_x, other.velocity_x, progress),
            velocity_y=lerp(self.velocity_y, other.velocity_y, progress),
        )

    def mirror(
        self,
        reference_x: Length,
        reference_y: Length,
        *,
        mirror_velocity: bool = not VELOCITY_PASS_THROUGH,
    ) -> Pose:
        """Return the pose as seen from the opposite side of a symmetric field.

        Position is reflected through (reference_x, reference_y), a half turn
        is added to the heading and the angular velocity is negated. Linear
        velocity passes through unchanged unless mirror_velocity is set.
        """
        velocity_x: Velocity = self.velocity_x
        velocity_y: Velocity = self.velocity_y
        if mirror_velocity:
            velocity_x = -velocity_x
            velocity_y = -velocity_y

        return Pose(
            x=reference_x * 2.0 - self.x,
            y=reference_y * 2.0 - self.y,
            heading=self.heading + Angle.from_radians(units.HALF_TURN_RAD),
            angular_velocity=-self.angular_velocity,
            velocity_x=velocity_x,
            velocity_y=velocity_y,
        )

    def mirror_across(
        self,
        field: FieldParams,
        *,
        mirror_velocity: bool = not VELOCITY_PASS_THROUGH,
    ) -> Pose:
        """Mirror the pose about the center of the field."""
        return self.mirror(
            Length.from_meters(field.half_length_m()),
            Length.from_meters(field.half_width_m()),
            mirror_velocity=mirror_velocity,
        )
