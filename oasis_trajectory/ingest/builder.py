################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Build a path from a planner trajectory record."""

from __future__ import annotations

import logging
from typing import Sequence

from oasis_trajectory.config.trajectory_config import TrajectoryConfig
from oasis_trajectory.ingest.ingest_errors import DuplicateTimestampError
from oasis_trajectory.ingest.ingest_errors import EmptyTrajectoryError
from oasis_trajectory.ingest.ingest_errors import MalformedSampleError
from oasis_trajectory.ingest.ingest_errors import ParseError
from oasis_trajectory.ingest.schema import parse_json
from oasis_trajectory.ingest.trajectory_record import PlannerWaypoint
from oasis_trajectory.ingest.trajectory_record import TrajectoryRecord
from oasis_trajectory.path.path_store import Path
from oasis_trajectory.path.pose import Pose
from oasis_trajectory.timing.finite_time import FiniteTime
from oasis_trajectory.timing.finite_time import FiniteTimeError


_LOG: logging.Logger = logging.getLogger(__name__)


def derive_waypoints(
    planner_waypoints: Sequence[PlannerWaypoint],
    waypoint_times: Sequence[float],
) -> list[float]:
    """Return the timestamps of the planner waypoints flagged as splits.

    Planner waypoints and waypoint timestamps correspond by position.
    """
    if len(planner_waypoints) != len(waypoint_times):
        raise ParseError(
            "planner waypoints and waypoint timestamps differ in length: "
            f"{len(planner_waypoints)} != {len(waypoint_times)}"
        )
    return [
        t
        for planner_waypoint, t in zip(planner_waypoints, waypoint_times)
        if planner_waypoint.split
    ]


def build(record: TrajectoryRecord, config: TrajectoryConfig | None = None) -> Path:
    """Build an immutable path from a trajectory record.

    Samples are keyed by timestamp. A repeated timestamp either replaces the
    earlier sample or fails ingestion, depending on the configured duplicate
    policy. Any failure leaves nothing built.
    """
    if config is None:
        config = TrajectoryConfig()

    if not record.samples:
        raise EmptyTrajectoryError("Trajectory has no samples")

    reject_duplicates: bool = config.rejects_duplicates()
    samples: dict[FiniteTime, Pose] = {}
    for index, sample in enumerate(record.samples):
        key: FiniteTime = sample.key()
        if key in samples:
            if reject_duplicates:
                raise DuplicateTimestampError(
                    f"samples[{index}] repeats timestamp {key.seconds} s"
                )
            _LOG.info(
                "Sample %d overwrites earlier sample at %f s", index, key.seconds
            )
        samples[key] = sample.to_pose()

    waypoint_times: Sequence[float] = record.waypoints
    if record.planner_waypoints is not None:
        waypoint_times = derive_waypoints(record.planner_waypoints, waypoint_times)

    waypoints: list[FiniteTime] = []
    for index, t in enumerate(waypoint_times):
        try:
            waypoints.append(FiniteTime(t))
        except FiniteTimeError as exc:
            raise MalformedSampleError(f"waypoints[{index}]: {exc}") from exc

    path: Path = Path(samples, waypoints, heading_mode=config.heading_mode())

    _LOG.debug(
        "Built path '%s' with %d samples over %f s and %d waypoints",
        record.name,
        len(path),
        path.length().seconds,
        len(waypoints),
    )

    return path


def build_from_json(text: str, config: TrajectoryConfig | None = None) -> Path:
    """Read trajectory JSON text with the configured schema and build a path."""
    if config is None:
        config = TrajectoryConfig()
    return build(parse_json(text, config.schema()), config)
