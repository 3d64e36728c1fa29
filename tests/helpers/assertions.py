# tests/helpers/assertions.py
"""Custom assertion helpers for reactgpu tests."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


def assert_buffers_close(
    actual: NDArray[Any],
    expected: NDArray[Any],
    *,
    rtol: float = 0.0,
    atol: float = 1e-9,
    msg: str | None = None,
) -> None:
    """Assert two buffers match element-wise, reporting the worst offender.

    Raises:
        AssertionError: On length mismatch or when any element differs beyond
            tolerance.
    """
    if actual.shape != expected.shape:
        raise AssertionError(f"Shape mismatch: {actual.shape} != {expected.shape}")
    if not np.allclose(actual, expected, rtol=rtol, atol=atol):
        diff = np.abs(actual.astype(np.float64) - expected.astype(np.float64))
        worst = int(np.argmax(diff))
        error_msg = (
            f"Buffers differ: max_abs_diff={diff[worst]:.2e} at index {worst} "
            f"(actual={actual[worst]!r}, expected={expected[worst]!r}), "
            f"rtol={rtol:.2e}, atol={atol:.2e}"
        )
        if msg:
            error_msg = f"{msg}: {error_msg}"
        raise AssertionError(error_msg)
