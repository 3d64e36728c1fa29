"""
CUDA runtime decision and execution-queue acquisition.

Device readiness is modelled as data (:class:`CudaRuntime`) and turned into a
ready-to-use :class:`ExecutionQueue` by :func:`open_queue`.  When Numba's CUDA
simulator is enabled (``NUMBA_ENABLE_CUDASIM=1``) the queue is backed by the
simulator, so reactions run without GPU hardware.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Protocol, TypeAlias

from numba import config as numba_config
from numba import cuda
from pydantic import BaseModel, ConfigDict

from reactgpu.errors.runtime import InvalidDispatchConfig, QueueUnavailable
from reactgpu.models.numerical import Precision
from reactgpu.result import Failure, Result, Success
from reactgpu.validation import validate_model

logger = logging.getLogger(__name__)

# Valid CUDA thread block sizes (must be power of 2, range [32, 1024])
ThreadsPerBlock: TypeAlias = Literal[32, 64, 128, 256, 512, 1024]


class DispatchConfig(BaseModel):
    """Immutable launch settings shared by every reaction on a queue."""

    threads_per_block: ThreadsPerBlock = 256
    precision: Precision = Precision.float64

    model_config = ConfigDict(frozen=True, extra="forbid")


def build_dispatch_config(
    *,
    threads_per_block: int = 256,
    precision: Precision | str = Precision.float64,
) -> Result[DispatchConfig, InvalidDispatchConfig]:
    """Create DispatchConfig via pure validation."""
    match validate_model(
        DispatchConfig, threads_per_block=threads_per_block, precision=precision
    ):
        case Failure(error):
            return Failure(InvalidDispatchConfig(error=error))
        case Success(config):
            return Success(config)


class StreamLike(Protocol):
    """The part of a Numba CUDA stream the dispatch bridge relies on."""

    def synchronize(self) -> None:
        ...


@dataclass(frozen=True)
class ExecutionQueue:
    """Handle to one accelerator context.  Shared read-only by all reactions.

    Attributes:
        stream: Numba CUDA stream kernels and transfers are issued on.
        device_name: Human-readable device name.
        config: Launch settings applied to every dispatch on this queue.
        simulator: True when backed by the Numba CUDA simulator.
    """

    stream: StreamLike
    device_name: str
    config: DispatchConfig = DispatchConfig()
    simulator: bool = False

    def synchronize(self) -> None:
        """Block until all work issued on the stream has finished."""
        self.stream.synchronize()


@dataclass(frozen=True)
class CudaRuntime:
    """CUDA runtime readiness ADT.

    Attributes:
        kind: Discriminator indicating whether a device is ready.
        device_name: Selected device name when ready.
        simulator: True when the Numba CUDA simulator stands in for a device.
        reason: Failure reason when not ready.
    """

    kind: Literal["ready", "rejected"]
    device_name: str | None = None
    simulator: bool = False
    reason: str | None = None


def _device_name() -> str:
    raw = cuda.get_current_device().name
    return raw.decode() if isinstance(raw, bytes) else str(raw)


def decide_cuda_runtime() -> CudaRuntime:
    """Return CUDA runtime readiness.

    Returns:
        CudaRuntime: `ready` when the simulator is enabled or a CUDA device is
        present, otherwise `rejected`.
    """
    if numba_config.ENABLE_CUDASIM:
        return CudaRuntime(kind="ready", device_name="Numba CUDA simulator", simulator=True)
    match cuda.is_available():
        case False:
            return CudaRuntime(kind="rejected", reason="cuda_unavailable")
        case True:
            return CudaRuntime(kind="ready", device_name=_device_name())
    return CudaRuntime(kind="rejected", reason="cuda_runtime_unknown")


def open_queue(
    runtime: CudaRuntime, config: DispatchConfig = DispatchConfig()
) -> Result[ExecutionQueue, QueueUnavailable]:
    """Bind a fresh stream on the selected device.

    Args:
        runtime: Decision produced by `decide_cuda_runtime`.
        config: Launch settings carried by the queue.

    Returns:
        Success with the queue, or Failure explaining why no device is usable.
    """
    match runtime:
        case CudaRuntime(kind="ready", device_name=name, simulator=simulated):
            logger.debug("Opening execution queue on %s", name)
            return Success(
                ExecutionQueue(
                    stream=cuda.stream(),
                    device_name=name or "unknown",
                    config=config,
                    simulator=simulated,
                )
            )
        case _:
            return Failure(QueueUnavailable(reason=runtime.reason or "cuda_runtime_rejected"))


def default_queue(config: DispatchConfig = DispatchConfig()) -> Result[ExecutionQueue, QueueUnavailable]:
    """Decide the runtime and open a queue on it in one step."""
    return open_queue(decide_cuda_runtime(), config)
