################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for trajectory inputs."""

from __future__ import annotations

import math
import numbers
from typing import Any


def require_finite(value: Any, name: str) -> float:
    """Return the value as a float, rejecting non-real or non-finite input."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"{name} must be a real number")
    try:
        result: float = float(value)
    except OverflowError as exc:
        raise ValueError(f"{name} must be finite") from exc
    if not math.isfinite(result):
        raise ValueError(f"{name} must be finite")
    return result


def require_non_negative(value: float, name: str) -> float:
    """Return a finite value that is not negative."""
    result: float = require_finite(value, name)
    if result < 0.0:
        raise ValueError(f"{name} must be non-negative")
    return result

