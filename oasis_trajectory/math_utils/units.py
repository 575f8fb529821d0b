################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Unit conversion factors and pure conversion helpers.

Every value inside the trajectory library is carried in one canonical SI
unit per dimension: meters, radians, seconds and their derivatives. The
helpers below are the only place other units are translated, and they
hold no state.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


# Millimeters per meter
MM_PER_M: float = 1000.0

# Milliseconds per second
MS_PER_S: float = 1000.0

# One full turn in radians
TWO_PI: float = 2.0 * math.pi

# One half turn in radians
HALF_TURN_RAD: float = math.pi


def _scaled(
    x: float | NDArray[np.float64], factor: float
) -> float | NDArray[np.float64]:
    """Multiply a scalar or array by a factor, keeping scalars as floats."""
    arr: NDArray[np.float64] = np.asarray(x, dtype=float)
    result: NDArray[np.float64] = arr * factor
    if np.ndim(result) == 0:
        return float(result)
    return result


def deg2rad(x: float | NDArray[np.float64]) -> float | NDArray[np.float64]:
    """Convert degrees to radians."""
    arr: NDArray[np.float64] = np.asarray(x, dtype=float)
    result: NDArray[np.float64] = np.deg2rad(arr)
    if np.ndim(result) == 0:
        return float(result)
    return result


def rad2deg(x: float | NDArray[np.float64]) -> float | NDArray[np.float64]:
    """Convert radians to degrees."""
    arr: NDArray[np.float64] = np.asarray(x, dtype=float)
    result: NDArray[np.float64] = np.rad2deg(arr)
    if np.ndim(result) == 0:
        return float(result)
    return result


def mm2m(x: float | NDArray[np.float64]) -> float | NDArray[np.float64]:
    """Convert millimeters to meters."""
    return _scaled(x, 1.0 / MM_PER_M)


def m2mm(x: float | NDArray[np.float64]) -> float | NDArray[np.float64]:
    """Convert meters to millimeters."""
    return _scaled(x, MM_PER_M)


def ms2s(x: float | NDArray[np.float64]) -> float | NDArray[np.float64]:
    """Convert milliseconds to seconds."""
    return _scaled(x, 1.0 / MS_PER_S)


def s2ms(x: float | NDArray[np.float64]) -> float | NDArray[np.float64]:
    """Convert seconds to milliseconds."""
    return _scaled(x, MS_PER_S)


def wrap_angle(angle_rad: float) -> float:
    """Wrap an angle in radians to [-pi, pi)."""
    wrapped: float = (angle_rad + math.pi) % TWO_PI - math.pi
    return wrapped
