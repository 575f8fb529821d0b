################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Errors raised while turning planner records into a path."""

from __future__ import annotations


class ParseError(Exception):
    """Raised when a trajectory record does not have the expected shape."""


class MalformedSampleError(ParseError):
    """Raised when a sample carries an unusable timestamp or field value."""


class DuplicateTimestampError(ParseError):
    """Raised when duplicate timestamps are rejected by policy."""


class EmptyTrajectoryError(ParseError):
    """Raised when a path would be built from zero samples."""
