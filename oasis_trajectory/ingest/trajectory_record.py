################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Planner records consumed by trajectory ingestion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from oasis_trajectory.ingest.ingest_errors import MalformedSampleError
from oasis_trajectory.ingest.ingest_errors import ParseError
from oasis_trajectory.math_utils.validation import require_finite
from oasis_trajectory.math_utils.validation import require_non_negative
from oasis_trajectory.path.pose import Pose
from oasis_trajectory.timing.finite_time import FiniteTime


@dataclass(frozen=True)
class Sample:
    """One planner-emitted trajectory row.

    Attributes:
        t: Timestamp in seconds, finite and non-negative
        x: Field x position in meters
        y: Field y position in meters
        heading: Heading in radians
        angular_velocity: Heading rate in rad/s
        velocity_x: Velocity along field x in m/s
        velocity_y: Velocity along field y in m/s
    """

    t: float
    x: float
    y: float
    heading: float
    angular_velocity: float
    velocity_x: float
    velocity_y: float

    def __post_init__(self) -> None:
        """Validate the timestamp and motion fields."""
        try:
            key: FiniteTime = FiniteTime(self.t)
            require_non_negative(key.seconds, "t")
        except ValueError as exc:
            raise MalformedSampleError(str(exc)) from exc
        object.__setattr__(self, "t", key.seconds)

        name: str
        for name in (
            "x",
            "y",
            "heading",
            "angular_velocity",
            "velocity_x",
            "velocity_y",
        ):
            try:
                value: float = require_finite(getattr(self, name), name)
            except ValueError as exc:
                raise MalformedSampleError(str(exc)) from exc
            object.__setattr__(self, name, value)

    def key(self) -> FiniteTime:
        """Return the ordered timestamp key of the sample."""
        return FiniteTime(self.t)

    def to_pose(self) -> Pose:
        """Convert the sample's SI fields into a typed pose."""
        return Pose.from_si(
            x_m=self.x,
            y_m=self.y,
            heading_rad=self.heading,
            angular_velocity_rps=self.angular_velocity,
            velocity_x_mps=self.velocity_x,
            velocity_y_mps=self.velocity_y,
        )


@dataclass(frozen=True)
class PlannerWaypoint:
    """Planner-side waypoint flags.

    Attributes:
        split: True when the waypoint marks a segment boundary
    """

    split: bool

    def __post_init__(self) -> None:
        if not isinstance(self.split, bool):
            raise ParseError("split must be a bool")


@dataclass(frozen=True)
class TrajectoryRecord:
    """Validated trajectory as handed over by an external parser.

    Attributes:
        samples: Planner samples in source order
        waypoints: Waypoint timestamps in seconds. When planner_waypoints is
            set this holds one timestamp per planner waypoint, matched by
            position, and only split waypoints are kept.
        planner_waypoints: Optional planner waypoint flags
        name: Trajectory name, informational only
    """

    samples: Sequence[Sample]
    waypoints: Sequence[float] = ()
    planner_waypoints: Sequence[PlannerWaypoint] | None = None
    name: str = ""

    def __post_init__(self) -> None:
        """Validate the record shape and coerce sequences to tuples."""
        samples: tuple[Sample, ...] = tuple(self.samples)
        index: int
        sample: Sample
        for index, sample in enumerate(samples):
            if not isinstance(sample, Sample):
                raise ParseError(f"samples[{index}] must be a Sample")
        object.__setattr__(self, "samples", samples)

        waypoints: list[float] = []
        value: float
        for index, value in enumerate(self.waypoints):
            try:
                waypoints.append(require_finite(value, f"waypoints[{index}]"))
            except ValueError as exc:
                raise ParseError(str(exc)) from exc
        object.__setattr__(self, "waypoints", tuple(waypoints))

        if self.planner_waypoints is not None:
            planner_waypoints: tuple[PlannerWaypoint, ...] = tuple(
                self.planner_waypoints
            )
            planner_waypoint: PlannerWaypoint
            for index, planner_waypoint in enumerate(planner_waypoints):
                if not isinstance(planner_waypoint, PlannerWaypoint):
                    raise ParseError(
                        f"planner_waypoints[{index}] must be a PlannerWaypoint"
                    )
            if len(planner_waypoints) != len(waypoints):
                raise ParseError(
                    "planner_waypoints must match waypoints one to one, "
                    f"got {len(planner_waypoints)} and {len(waypoints)}"
                )
            object.__setattr__(self, "planner_waypoints", planner_waypoints)

        if not isinstance(self.name, str):
            raise ParseError("name must be a string")
