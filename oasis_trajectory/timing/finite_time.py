################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Ordered timestamp keys for trajectory samples."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from oasis_trajectory.math_utils.quantities import Time


class FiniteTimeError(ValueError):
    """Raised when a timestamp cannot be used as an ordered key."""


@dataclass(frozen=True, order=True)
class FiniteTime:
    """Timestamp in seconds that is guaranteed to be finite.

    A bare float is not totally ordered because NaN compares false against
    everything, so NaN and infinities are rejected here before the value is
    used as a key.

    Attributes:
        seconds: Timestamp in seconds
    """

    seconds: float

    def __post_init__(self) -> None:
        """Reject timestamps that break ordering."""
        if isinstance(self.seconds, bool) or not isinstance(
            self.seconds, numbers.Real
        ):
            raise FiniteTimeError("Timestamp must be a real number")
        try:
            seconds: float = float(self.seconds)
        except OverflowError as exc:
            raise FiniteTimeError("Timestamp must be finite") from exc
        if math.isnan(seconds):
            raise FiniteTimeError("Timestamp must not be NaN")
        if not math.isfinite(seconds):
            raise FiniteTimeError("Timestamp must be finite")
        object.__setattr__(self, "seconds", seconds)

    def to_time(self) -> Time:
        """Return the timestamp as a typed time quantity."""
        return Time.from_seconds(self.seconds)
