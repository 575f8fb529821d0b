################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Time-indexed robot trajectories with interpolated pose lookup."""

from __future__ import annotations

from oasis_trajectory.config.trajectory_config import TrajectoryConfig
from oasis_trajectory.config.trajectory_params import TrajectoryParams
from oasis_trajectory.ingest.builder import build
from oasis_trajectory.ingest.builder import build_from_json
from oasis_trajectory.ingest.ingest_errors import DuplicateTimestampError
from oasis_trajectory.ingest.ingest_errors import EmptyTrajectoryError
from oasis_trajectory.ingest.ingest_errors import MalformedSampleError
from oasis_trajectory.ingest.ingest_errors import ParseError
from oasis_trajectory.ingest.trajectory_record import PlannerWaypoint
from oasis_trajectory.ingest.trajectory_record import Sample
from oasis_trajectory.ingest.trajectory_record import TrajectoryRecord
from oasis_trajectory.path.path_store import Path
from oasis_trajectory.path.pose import HeadingInterpolation
from oasis_trajectory.path.pose import Pose


__all__ = [
    "DuplicateTimestampError",
    "EmptyTrajectoryError",
    "HeadingInterpolation",
    "MalformedSampleError",
    "ParseError",
    "Path",
    "PlannerWaypoint",
    "Pose",
    "Sample",
    "TrajectoryConfig",
    "TrajectoryParams",
    "TrajectoryRecord",
    "build",
    "build_from_json",
]
