################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Typed physical quantities for pose arithmetic.

Each quantity stores a single finite float in its canonical SI unit.
Addition and subtraction are only defined between quantities of the same
type, and scaling is only defined by a real scalar, so a length can never
be added to an angle or a velocity by mistake.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any
from typing import TypeVar

from oasis_trajectory.math_utils import units
from oasis_trajectory.math_utils.validation import require_finite


Q = TypeVar("Q", bound="Quantity")


def _is_scalar(value: Any) -> bool:
    """Return True for real, non-boolean scalars."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class Quantity:
    """Base type for a scalar physical quantity.

    Attributes:
        value: Magnitude in the canonical SI unit of the concrete type
    """

    value: float

    def __post_init__(self) -> None:
        """Validate that the magnitude is finite."""
        object.__setattr__(
            self, "value", require_finite(self.value, type(self).__name__)
        )

    def __add__(self: Q, other: Q) -> Q:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value + other.value)

    def __sub__(self: Q, other: Q) -> Q:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value - other.value)

    def __mul__(self: Q, scalar: float) -> Q:
        if not _is_scalar(scalar):
            return NotImplemented
        return type(self)(self.value * float(scalar))

    def __rmul__(self: Q, scalar: float) -> Q:
        return self.__mul__(scalar)

    def __truediv__(self: Q, scalar: float) -> Q:
        if not _is_scalar(scalar):
            return NotImplemented
        return type(self)(self.value / float(scalar))

    def __neg__(self: Q) -> Q:
        return type(self)(-self.value)

    def __lt__(self: Q, other: Q) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __le__(self: Q, other: Q) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self: Q, other: Q) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value > other.value

    def __ge__(self: Q, other: Q) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value >= other.value


@dataclass(frozen=True)
class Length(Quantity):
    """Distance in meters."""

    @classmethod
    def from_meters(cls, meters: float) -> Length:
        return cls(meters)

    @classmethod
    def from_millimeters(cls, millimeters: float) -> Length:
        return cls(float(units.mm2m(millimeters)))

    @property
    def meters(self) -> float:
        return self.value

    @property
    def millimeters(self) -> float:
        return float(units.m2mm(self.value))


@dataclass(frozen=True)
class Angle(Quantity):
    """Planar angle in radians."""

    @classmethod
    def from_radians(cls, radians: float) -> Angle:
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees: float) -> Angle:
        return cls(float(units.deg2rad(degrees)))

    @property
    def radians(self) -> float:
        return self.value

    @property
    def degrees(self) -> float:
        return float(units.rad2deg(self.value))

    def wrapped(self) -> Angle:
        """Return the equivalent angle in [-pi, pi)."""
        return Angle(units.wrap_angle(self.value))


@dataclass(frozen=True)
class AngularVelocity(Quantity):
    """Angular rate in radians per second."""

    @classmethod
    def from_radians_per_second(cls, radians_per_second: float) -> AngularVelocity:
        return cls(radians_per_second)

    @classmethod
    def from_degrees_per_second(cls, degrees_per_second: float) -> AngularVelocity:
        return cls(float(units.deg2rad(degrees_per_second)))

    @property
    def radians_per_second(self) -> float:
        return self.value

    @property
    def degrees_per_second(self) -> float:
        return float(units.rad2deg(self.value))


@dataclass(frozen=True)
class Velocity(Quantity):
    """Linear speed along one axis in meters per second."""

    @classmethod
    def from_meters_per_second(cls, meters_per_second: float) -> Velocity:
        return cls(meters_per_second)

    @classmethod
    def from_millimeters_per_second(cls, millimeters_per_second: float) -> Velocity:
        return cls(float(units.mm2m(millimeters_per_second)))

    @property
    def meters_per_second(self) -> float:
        return self.value

    @property
    def millimeters_per_second(self) -> float:
        return float(units.m2mm(self.value))


@dataclass(frozen=True)
class Time(Quantity):
    """Elapsed time in seconds."""

    @classmethod
    def from_seconds(cls, seconds: float) -> Time:
        return cls(seconds)

    @classmethod
    def from_milliseconds(cls, milliseconds: float) -> Time:
        return cls(float(units.ms2s(milliseconds)))

    @property
    def seconds(self) -> float:
        return self.value

    @property
    def milliseconds(self) -> float:
        return float(units.s2ms(self.value))


def lerp(start: Q, end: Q, fraction: float) -> Q:
    """Blend two quantities of the same type, start at 0 and end at 1.

    The blend is computed on the raw magnitudes so that a finite result is
    returned even when end - start would overflow.
    """
    if type(end) is not type(start):
        raise TypeError("lerp requires quantities of the same type")
    return type(start)(start.value * (1.0 - fraction) + end.value * fraction)
