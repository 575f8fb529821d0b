################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for trajectory ingestion and lookup."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Sample schema variant used to read planner documents
INGEST_SCHEMA: str = "choreo_legacy"
# Policy for repeated sample timestamps
INGEST_DUPLICATE_POLICY: str = "overwrite"

# Heading blend between samples
INTERPOLATION_HEADING_MODE: str = "linear"

# Field length along x in meters
FIELD_LENGTH_M: float = 17.55
# Field width along y in meters
FIELD_WIDTH_M: float = 8.05

# Negate linear velocity when mirroring
MIRROR_VELOCITY: bool = False


class TrajectoryParamsError(Exception):
    """Raised when trajectory parameter validation fails."""


def _require_positive(value: float, name: str) -> None:
    """Require a positive value."""
    if not value > 0.0:
        raise TrajectoryParamsError(f"{name} must be positive")


def _require_str(value: Any, name: str) -> None:
    """Require a non-empty string."""
    if not isinstance(value, str) or not value:
        raise TrajectoryParamsError(f"{name} must be a non-empty string")


@dataclass(frozen=True)
class IngestParams:
    """Trajectory ingestion parameters."""

    # Schema variant name
    schema: str = INGEST_SCHEMA
    # "overwrite" keeps the last duplicate, "reject" fails ingestion
    duplicate_policy: str = INGEST_DUPLICATE_POLICY


@dataclass(frozen=True)
class InterpolationParams:
    """Pose interpolation parameters."""

    # "linear" or "shortest"
    heading_mode: str = INTERPOLATION_HEADING_MODE


@dataclass(frozen=True)
class FieldParams:
    """Dimensions of the symmetric playing field."""

    # Field length along x in meters
    length_m: float = FIELD_LENGTH_M
    # Field width along y in meters
    width_m: float = FIELD_WIDTH_M

    def half_length_m(self) -> float:
        return self.length_m / 2.0

    def half_width_m(self) -> float:
        return self.width_m / 2.0


@dataclass(frozen=True)
class MirrorParams:
    """Mirror transform parameters."""

    # Negate linear velocity when mirroring
    mirror_velocity: bool = MIRROR_VELOCITY


@dataclass(frozen=True)
class TrajectoryParams:
    """Complete configuration tree for trajectory lookup."""

    ingest: IngestParams
    interpolation: InterpolationParams
    field: FieldParams
    mirror: MirrorParams

    @classmethod
    def defaults(cls) -> TrajectoryParams:
        """Return the default trajectory parameter tree."""
        return cls(
            ingest=IngestParams(),
            interpolation=InterpolationParams(),
            field=FieldParams(),
            mirror=MirrorParams(),
        )

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_str(self.ingest.schema, "ingest.schema")
        _require_str(self.ingest.duplicate_policy, "ingest.duplicate_policy")
        _require_str(self.interpolation.heading_mode, "interpolation.heading_mode")

        _require_positive(self.field.length_m, "field.length_m")
        _require_positive(self.field.width_m, "field.width_m")

        if not isinstance(self.mirror.mirror_velocity, bool):
            raise TrajectoryParamsError("mirror.mirror_velocity must be a bool")

    def replace(self, **namespace_overrides: Any) -> TrajectoryParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
