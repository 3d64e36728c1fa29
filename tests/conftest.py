# tests/conftest.py
"""Global PyTest fixtures for the test-suite.

The Numba CUDA simulator is switched on before anything imports Numba, so the
suite runs without GPU hardware.  Export ``NUMBA_ENABLE_CUDASIM=0`` to run the
same tests against a real device; tests marked ``gpu`` only run then.
"""

from __future__ import annotations

import os

# isort: off
os.environ.setdefault("NUMBA_ENABLE_CUDASIM", "1")

from numba import config as numba_config  # noqa: E402

# isort: on

import signal
from types import FrameType
from typing import Any, Callable, Generator

import numpy as np
import pytest
from numpy.typing import NDArray

from reactgpu.runtime import DispatchConfig, ExecutionQueue, default_queue
from tests.helpers import RAMP_SIZE, expect_success

DEFAULT_TEST_TIMEOUT_SECONDS = 60.0


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip ``gpu`` tests when the simulator stands in for the device."""
    if not numba_config.ENABLE_CUDASIM:
        return
    skip_gpu = pytest.mark.skip(reason="requires a CUDA device (NUMBA_ENABLE_CUDASIM=0)")
    for item in items:
        if "gpu" in item.keywords:
            item.add_marker(skip_gpu)


def _build_timeout_handler(
    timeout_seconds: float,
) -> Callable[[int, FrameType | None], None]:
    """Create SIGALRM handler that fails the test when timeout is reached."""

    def _handle_timeout(signum: int, frame: FrameType | None) -> None:
        pytest.fail(
            f"Test exceeded {timeout_seconds:.0f}s timeout (includes setup/teardown)",
            pytrace=True,
        )

    return _handle_timeout


@pytest.fixture(autouse=True)
def per_test_timeout() -> Generator[None, None, None]:
    """Fail any test that runs longer than the default timeout."""
    if not hasattr(signal, "SIGALRM") or not hasattr(signal, "setitimer"):
        yield
        return

    handler = _build_timeout_handler(DEFAULT_TEST_TIMEOUT_SECONDS)
    previous_handler = signal.getsignal(signal.SIGALRM)
    signal.signal(signal.SIGALRM, handler)
    signal.setitimer(signal.ITIMER_REAL, DEFAULT_TEST_TIMEOUT_SECONDS)
    try:
        yield
    finally:
        signal.setitimer(signal.ITIMER_REAL, 0.0)
        signal.signal(signal.SIGALRM, previous_handler)


@pytest.fixture(scope="session")
def queue() -> ExecutionQueue:
    """Execution queue on the default device (simulator unless disabled)."""
    return expect_success(default_queue(DispatchConfig()))


@pytest.fixture
def ramp() -> NDArray[Any]:
    """Fresh ``[0, 1, ..., 31]`` float64 buffer."""
    return np.arange(RAMP_SIZE, dtype=np.float64)
