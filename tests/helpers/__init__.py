# tests/helpers/__init__.py
"""Shared test utilities for the reactgpu test suite.

Usage:
    >>> from tests.helpers import expect_success, assert_buffers_close, ATOL_FLOAT64
"""

from __future__ import annotations

from tests.helpers.assertions import assert_buffers_close
from tests.helpers.constants import (
    ATOL_FLOAT64,
    DEFAULT_THREADS_PER_BLOCK,
    RAMP_SIZE,
    RTOL_FLOAT32,
    SMALL_THREADS_PER_BLOCK,
)
from tests.helpers.result_utils import E, T, expect_failure, expect_success

__all__ = [
    "expect_success",
    "expect_failure",
    "T",
    "E",
    "assert_buffers_close",
    "ATOL_FLOAT64",
    "DEFAULT_THREADS_PER_BLOCK",
    "RAMP_SIZE",
    "RTOL_FLOAT32",
    "SMALL_THREADS_PER_BLOCK",
]
