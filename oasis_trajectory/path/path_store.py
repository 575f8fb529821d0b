################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Time-indexed trajectory store with interpolated lookup
"""

from __future__ import annotations

import math
from typing import Iterable
from typing import Mapping

import numpy as np

from oasis_trajectory.config.trajectory_params import FieldParams
from oasis_trajectory.ingest.ingest_errors import EmptyTrajectoryError
from oasis_trajectory.ingest.ingest_errors import ParseError
from oasis_trajectory.math_utils.quantities import Time
from oasis_trajectory.path.pose import HeadingInterpolation
from oasis_trajectory.path.pose import Pose
from oasis_trajectory.timing.finite_time import FiniteTime


class Path:
    """
    Immutable mapping from timestamp to pose, queried in continuous time

    A query between two samples blends the bracketing poses linearly. Queries
    before the first sample return the first pose, and queries at or after
    the last sample return the last pose, so a lookup never fails for an
    out-of-range time.
    """

    def __init__(
        self,
        samples: Mapping[FiniteTime, Pose],
        waypoints: Iterable[FiniteTime] = (),
        *,
        heading_mode: HeadingInterpolation = HeadingInterpolation.LINEAR,
    ) -> None:
        if not samples:
            raise EmptyTrajectoryError("Path requires at least one sample")

        waypoint_keys: tuple[FiniteTime, ...] = tuple(waypoints)

        keys: list[FiniteTime] = sorted(samples)

        times: np.ndarray = np.array([key.seconds for key in keys], dtype=np.float64)
        times.setflags(write=False)

        waypoint: FiniteTime
        for waypoint in waypoint_keys:
            if waypoint not in samples:
                raise ParseError(
                    f"Waypoint {waypoint.seconds} s is not a sample timestamp"
                )

        self._times: np.ndarray = times
        self._poses: tuple[Pose, ...] = tuple(samples[key] for key in keys)
        self._waypoints: tuple[Time, ...] = tuple(
            waypoint.to_time() for waypoint in waypoint_keys
        )
        self._heading_mode: HeadingInterpolation = heading_mode

    def __len__(self) -> int:
        return len(self._poses)

    @property
    def heading_mode(self) -> HeadingInterpolation:
        return self._heading_mode

    def query(self, elapsed_time: Time | float) -> Pose:
        """Return the pose at the elapsed time, clamped to the sample range.

        Floats are interpreted as seconds. NaN has no position in the time
        order and raises ValueError.
        """
        t: float
        if isinstance(elapsed_time, Time):
            t = elapsed_time.seconds
        else:
            try:
                t = float(elapsed_time)
            except OverflowError:
                # Integers beyond float range clamp like infinities
                t = math.inf if elapsed_time > 0 else -math.inf
        if math.isnan(t):
            raise ValueError("elapsed_time must not be NaN")

        # Greatest sample time <= t
        floor_index: int = int(np.searchsorted(self._times, t, side="right")) - 1
        if floor_index < 0:
            return self._poses[0]

        next_index: int = floor_index + 1
        if next_index >= len(self._poses):
            return self._poses[floor_index]

        floor_time: float = float(self._times[floor_index])
        if t == floor_time:
            return self._poses[floor_index]

        next_time: float = float(self._times[next_index])
        progress: float = (t - floor_time) / (next_time - floor_time)

        return self._poses[floor_index].interpolate(
            self._poses[next_index], progress, self._heading_mode
        )

    def query_mirrored(
        self,
        elapsed_time: Time | float,
        field: FieldParams,
        *,
        mirror_velocity: bool = False,
    ) -> Pose:
        """Return the pose at the elapsed time mirrored about the field center."""
        return self.query(elapsed_time).mirror_across(
            field, mirror_velocity=mirror_velocity
        )

    def length(self) -> Time:
        """Return the timestamp of the last sample."""
        return Time.from_seconds(float(self._times[-1]))

    def start_time(self) -> Time:
        """Return the timestamp of the first sample."""
        return Time.from_seconds(float(self._times[0]))

    def waypoints(self) -> tuple[Time, ...]:
        """Return waypoint timestamps in source order."""
        return self._waypoints

    def waypoint_poses(self) -> tuple[Pose, ...]:
        """Return the pose at each waypoint, in waypoint order."""
        return tuple(self.query(waypoint) for waypoint in self._waypoints)

    def sample_times(self) -> tuple[Time, ...]:
        """Return all sample timestamps in increasing order."""
        return tuple(Time.from_seconds(float(t)) for t in self._times)
