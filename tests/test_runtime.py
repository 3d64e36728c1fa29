"""Tests for :mod:`reactgpu.runtime`."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import numpy as np
import pytest
from numba import config as numba_config
from pydantic import ValidationError

from reactgpu.models.numerical import Precision
from reactgpu.runtime import (
    CudaRuntime,
    DispatchConfig,
    ExecutionQueue,
    build_dispatch_config,
    decide_cuda_runtime,
    open_queue,
)
from tests.helpers import expect_failure, expect_success


class TestDispatchConfig:
    def test_defaults(self) -> None:
        config = DispatchConfig()
        assert config.threads_per_block == 256
        assert config.precision is Precision.float64

    def test_precision_from_string(self) -> None:
        config = expect_success(build_dispatch_config(precision="float32"))
        assert config.precision is Precision.float32

    @pytest.mark.parametrize("tpb", [0, 48, 2048])
    def test_rejects_invalid_block_size(self, tpb: int) -> None:
        error = expect_failure(build_dispatch_config(threads_per_block=tpb))
        assert error.kind == "InvalidDispatchConfig"

    def test_rejects_unknown_precision(self) -> None:
        error = expect_failure(build_dispatch_config(precision="float16"))
        assert error.kind == "InvalidDispatchConfig"

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DispatchConfig().threads_per_block = 32  # type: ignore[misc]


class TestRuntimeDecision:
    def test_simulator_is_ready(self) -> None:
        if not numba_config.ENABLE_CUDASIM:
            pytest.skip("simulator disabled")
        runtime = decide_cuda_runtime()
        assert runtime.kind == "ready"
        assert runtime.simulator
        assert runtime.device_name

    def test_open_queue_on_ready_runtime(self) -> None:
        queue = expect_success(open_queue(decide_cuda_runtime()))
        assert isinstance(queue, ExecutionQueue)
        assert queue.config == DispatchConfig()
        queue.synchronize()

    def test_open_queue_on_rejected_runtime(self) -> None:
        error = expect_failure(open_queue(CudaRuntime(kind="rejected", reason="cuda_unavailable")))
        assert error.kind == "QueueUnavailable"
        assert error.reason == "cuda_unavailable"

    def test_queue_is_read_only(self, queue: ExecutionQueue) -> None:
        with pytest.raises(FrozenInstanceError):
            setattr(queue, "device_name", "other")


class TestPrecision:
    def test_numpy_round_trip(self) -> None:
        assert Precision.from_numpy(Precision.float32.to_numpy()) is Precision.float32

    def test_matches(self) -> None:
        assert Precision.float64.matches("float64")
        assert not Precision.float64.matches("float32")

    def test_unsupported(self) -> None:
        with pytest.raises(ValueError, match="Unsupported NumPy dtype"):
            Precision.from_numpy(np.int32)  # type: ignore[arg-type]
