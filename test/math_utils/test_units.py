################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for unit conversion helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_trajectory.math_utils import units


def test_deg_rad_roundtrip_scalar() -> None:
    """Checks scalar deg/rad conversion roundtrip."""
    value_deg: float = 45.0
    value_rad: float = float(units.deg2rad(value_deg))
    assert value_rad == pytest.approx(math.pi / 4.0)
    roundtrip: float = float(units.rad2deg(value_rad))
    assert np.isclose(roundtrip, value_deg)


def test_deg_rad_roundtrip_array() -> None:
    """Checks array deg/rad conversion roundtrip."""
    values_deg: NDArray[np.float64] = np.array([0.0, 90.0, 180.0], dtype=float)
    values_rad: NDArray[np.float64] = np.asarray(units.deg2rad(values_deg), dtype=float)
    roundtrip: NDArray[np.float64] = np.asarray(units.rad2deg(values_rad), dtype=float)
    assert np.allclose(roundtrip, values_deg)


def test_scalar_input_returns_float() -> None:
    """Scalar inputs should come back as plain floats."""
    assert isinstance(units.mm2m(250.0), float)
    assert isinstance(units.s2ms(0.25), float)


def test_length_and_time_factors() -> None:
    """Checks millimeter and millisecond conversions."""
    assert units.mm2m(1500.0) == pytest.approx(1.5)
    assert units.m2mm(1.5) == pytest.approx(1500.0)
    assert units.ms2s(20.0) == pytest.approx(0.02)
    assert units.s2ms(0.02) == pytest.approx(20.0)


def test_wrap_angle_range() -> None:
    """Wrapped angles should land in [-pi, pi)."""
    assert units.wrap_angle(0.0) == 0.0
    assert units.wrap_angle(1.5 * math.pi) == pytest.approx(-0.5 * math.pi)
    assert units.wrap_angle(-1.5 * math.pi) == pytest.approx(0.5 * math.pi)
    assert units.wrap_angle(math.pi) == pytest.approx(-math.pi)
    assert units.wrap_angle(5.0 * units.TWO_PI + 0.25) == pytest.approx(0.25)
