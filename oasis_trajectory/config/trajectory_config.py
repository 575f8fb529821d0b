################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for trajectory lookup."""

from __future__ import annotations

from dataclasses import dataclass

from oasis_trajectory.config.trajectory_params import FieldParams
from oasis_trajectory.config.trajectory_params import TrajectoryParams
from oasis_trajectory.config.trajectory_params import TrajectoryParamsError
from oasis_trajectory.ingest.schema import SchemaVariant
from oasis_trajectory.ingest.schema import get_schema
from oasis_trajectory.path.pose import HeadingInterpolation


# Accepted values for ingest.duplicate_policy
DUPLICATE_POLICIES: frozenset[str] = frozenset({"overwrite", "reject"})


class TrajectoryConfigError(Exception):
    """Raised when trajectory configuration validation fails."""


@dataclass(frozen=True)
class TrajectoryConfig:
    """Convenience wrapper around trajectory parameters."""

    params: TrajectoryParams

    def __init__(self, params: TrajectoryParams | None = None) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(
            self, "params", params if params is not None else TrajectoryParams.defaults()
        )
        self.validate()

    def validate(self) -> None:
        """Validate parameter invariants and cross-namespace policies."""
        try:
            self.params.validate()
        except TrajectoryParamsError as exc:
            raise TrajectoryConfigError(str(exc)) from exc

        try:
            get_schema(self.params.ingest.schema)
        except ValueError as exc:
            raise TrajectoryConfigError(str(exc)) from exc

        if self.params.ingest.duplicate_policy not in DUPLICATE_POLICIES:
            raise TrajectoryConfigError(
                "ingest.duplicate_policy must be overwrite or reject"
            )

        if self.params.interpolation.heading_mode not in {
            mode.value for mode in HeadingInterpolation
        }:
            raise TrajectoryConfigError(
                "interpolation.heading_mode must be linear or shortest"
            )

    def schema(self) -> SchemaVariant:
        """Return the configured schema variant."""
        return get_schema(self.params.ingest.schema)

    def duplicate_policy(self) -> str:
        """Return the configured duplicate timestamp policy."""
        return self.params.ingest.duplicate_policy

    def rejects_duplicates(self) -> bool:
        """Return True if duplicate timestamps fail ingestion."""
        return self.params.ingest.duplicate_policy == "reject"

    def heading_mode(self) -> HeadingInterpolation:
        """Return the configured heading interpolation."""
        return HeadingInterpolation(self.params.interpolation.heading_mode)

    def field(self) -> FieldParams:
        """Return the configured field dimensions."""
        return self.params.field

    def mirror_velocity(self) -> bool:
        """Return True if mirroring negates linear velocity."""
        return self.params.mirror.mirror_velocity
