################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Schema variants for planner trajectory documents.

Planner revisions disagree on field names (``t`` or ``timestamp``,
``omega`` or ``angularVelocity``, ...). A :class:`SchemaVariant` names the
fields of one revision, and :func:`parse_document` reads a decoded document
with it into a :class:`TrajectoryRecord`.
"""

from __future__ import annotations

import json
import logging
import numbers
from dataclasses import dataclass
from typing import Any
from typing import Mapping
from typing import Sequence

from oasis_trajectory.ingest.ingest_errors import MalformedSampleError
from oasis_trajectory.ingest.ingest_errors import ParseError
from oasis_trajectory.ingest.trajectory_record import PlannerWaypoint
from oasis_trajectory.ingest.trajectory_record import Sample
from oasis_trajectory.ingest.trajectory_record import TrajectoryRecord


_LOG: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaVariant:
    """Field names used by one planner schema revision.

    Attributes:
        name: Variant identifier used in configuration
        time_field: Sample timestamp field
        x_field: Sample x position field
        y_field: Sample y position field
        heading_field: Sample heading field
        angular_velocity_field: Sample angular velocity field
        velocity_x_field: Sample x velocity field
        velocity_y_field: Sample y velocity field
        trajectory_key: Top-level key of the trajectory object
        samples_key: Key of the sample array inside the trajectory object
        waypoints_key: Key of the waypoint timestamp array inside the
            trajectory object
        name_key: Top-level key of the trajectory name
        planner_waypoints_path: Keys leading from the document root to the
            planner waypoint array, empty when waypoints are raw timestamps
        split_key: Boolean field marking a planner waypoint as a split point
    """

    name: str
    time_field: str
    x_field: str = "x"
    y_field: str = "y"
    heading_field: str = "heading"
    angular_velocity_field: str = "omega"
    velocity_x_field: str = "vx"
    velocity_y_field: str = "vy"
    trajectory_key: str = "trajectory"
    samples_key: str = "samples"
    waypoints_key: str = "waypoints"
    name_key: str = "name"
    planner_waypoints_path: tuple[str, ...] = ()
    split_key: str = "split"

    def sample_fields(self) -> tuple[str, ...]:
        """Return the sample field names in Sample declaration order."""
        return (
            self.time_field,
            self.x_field,
            self.y_field,
            self.heading_field,
            self.angular_velocity_field,
            self.velocity_x_field,
            self.velocity_y_field,
        )


CHOREO_LEGACY: SchemaVariant = SchemaVariant(
    name="choreo_legacy",
    time_field="t",
)

CHOREO_SPLIT: SchemaVariant = SchemaVariant(
    name="choreo_split",
    time_field="t",
    planner_waypoints_path=("snapshot", "waypoints"),
)

CHOREO_VERBOSE: SchemaVariant = SchemaVariant(
    name="choreo_verbose",
    time_field="timestamp",
    angular_velocity_field="angularVelocity",
    velocity_x_field="velocityX",
    velocity_y_field="velocityY",
)

SCHEMAS: dict[str, SchemaVariant] = {
    schema.name: schema for schema in (CHOREO_LEGACY, CHOREO_SPLIT, CHOREO_VERBOSE)
}


def get_schema(name: str) -> SchemaVariant:
    """Return the schema variant registered under the given name."""
    try:
        return SCHEMAS[name]
    except KeyError as exc:
        raise ValueError(
            f"Unknown schema variant '{name}', expected one of {sorted(SCHEMAS)}"
        ) from exc


def parse_json(text: str, schema: SchemaVariant = CHOREO_LEGACY) -> TrajectoryRecord:
    """Decode JSON text and read it as a trajectory record."""
    try:
        document: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid trajectory JSON: {exc}") from exc
    return parse_document(document, schema)


def parse_document(
    document: Any, schema: SchemaVariant = CHOREO_LEGACY
) -> TrajectoryRecord:
    """Read a decoded trajectory document into a trajectory record."""
    root: Mapping[str, Any] = _require_mapping(document, "document")
    trajectory: Mapping[str, Any] = _require_mapping(
        _require_key(root, schema.trajectory_key, "document"), schema.trajectory_key
    )

    raw_samples: Sequence[Any] = _require_list(
        _require_key(trajectory, schema.samples_key, schema.trajectory_key),
        schema.samples_key,
    )
    samples: list[Sample] = [
        _parse_sample(row, index, schema) for index, row in enumerate(raw_samples)
    ]

    raw_waypoints: Sequence[Any] = _require_list(
        _require_key(trajectory, schema.waypoints_key, schema.trajectory_key),
        schema.waypoints_key,
    )
    waypoints: list[float] = [
        _require_number(value, f"{schema.waypoints_key}[{index}]")
        for index, value in enumerate(raw_waypoints)
    ]

    planner_waypoints: list[PlannerWaypoint] | None = None
    if schema.planner_waypoints_path:
        planner_waypoints = _parse_planner_waypoints(root, schema)

    name: Any = root.get(schema.name_key, "")
    if not isinstance(name, str):
        raise ParseError(f"{schema.name_key} must be a string")

    _LOG.debug(
        "Read %d samples and %d waypoints with schema %s",
        len(samples),
        len(waypoints),
        schema.name,
    )

    return TrajectoryRecord(
        samples=samples,
        waypoints=waypoints,
        planner_waypoints=planner_waypoints,
        name=name,
    )


def _parse_sample(row: Any, index: int, schema: SchemaVariant) -> Sample:
    """Read one sample row."""
    where: str = f"{schema.samples_key}[{index}]"
    fields: Mapping[str, Any] = _require_mapping(row, where)
    values: list[float] = [
        _require_number(_require_key(fields, field, where), f"{where}.{field}")
        for field in schema.sample_fields()
    ]
    try:
        return Sample(*values)
    except MalformedSampleError as exc:
        raise MalformedSampleError(f"{where}: {exc}") from exc


def _parse_planner_waypoints(
    root: Mapping[str, Any], schema: SchemaVariant
) -> list[PlannerWaypoint]:
    """Follow the planner waypoint path and read the split flags."""
    node: Any = root
    where: str = "document"
    key: str
    for key in schema.planner_waypoints_path:
        node = _require_key(_require_mapping(node, where), key, where)
        where = key

    entries: Sequence[Any] = _require_list(node, where)
    planner_waypoints: list[PlannerWaypoint] = []
    index: int
    entry: Any
    for index, entry in enumerate(entries):
        entry_where: str = f"{where}[{index}]"
        fields: Mapping[str, Any] = _require_mapping(entry, entry_where)
        split: Any = _require_key(fields, schema.split_key, entry_where)
        if not isinstance(split, bool):
            raise ParseError(f"{entry_where}.{schema.split_key} must be a bool")
        planner_waypoints.append(PlannerWaypoint(split=split))

    return planner_waypoints


def _require_mapping(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ParseError(f"{name} must be an object")
    return value


def _require_list(value: Any, name: str) -> Sequence[Any]:
    if not isinstance(value, (list, tuple)):
        raise ParseError(f"{name} must be an array")
    return value


def _require_key(mapping: Mapping[str, Any], key: str, name: str) -> Any:
    if key not in mapping:
        raise ParseError(f"{name} is missing '{key}'")
    return mapping[key]


def _require_number(value: Any, name: str) -> float:
    # Finiteness is checked by the record types so NaN reports as malformed
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ParseError(f"{name} must be a number")
    try:
        return float(value)
    except OverflowError as exc:
        raise ParseError(f"{name} must be a finite number") from exc
