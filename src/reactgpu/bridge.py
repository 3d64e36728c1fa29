"""
Dispatch bridge: run one device operation over a whole buffer on a queue.

The bridge is written once, generically over "anything exposing a device
operation", and instantiated per operation *type*: :func:`compile_kernel`
closes a Numba CUDA kernel over that type's ``apply`` so the per-element work
is statically specialised for the device.  Dynamic dispatch only happens one
layer up, in :class:`reactgpu.reaction.Reaction`.

Protocol of :func:`dispatch`:
    1. take the variant's device operation by value
    2. check the buffer at the boundary and record its length ``N``
    3. wrap the buffer as a device-accessible region
    4. launch one kernel invocation per index in ``[0, N)``
    5. block until the stream has drained
    6. turn any device-side failure into ``AcceleratorExecutionError``

No retry and no partial-completion recovery: after a failure the buffer
contents are unspecified and the caller must not treat them as transformed.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, TypeVar

import numpy as np
from numba import cuda
from numba.core.errors import NumbaError

from reactgpu.device_ops import DeviceOperation, DeviceParams, SupportsDeviceOperation
from reactgpu.errors.dispatch import (
    AcceleratorExecutionError,
    BufferContractViolation,
    BufferDTypeMismatch,
    BufferNotContiguous,
    BufferNotOneDimensional,
    BufferReadOnly,
    DispatchStage,
    ReactionError,
    UnsupportedBuffer,
)
from reactgpu.models.numerical import Precision
from reactgpu.result import Failure, Result, Success
from reactgpu.runtime.cuda_runtime import DispatchConfig, ExecutionQueue

logger = logging.getLogger(__name__)

B = TypeVar("B")

__all__ = [
    "LaunchConfig",
    "check_buffer",
    "compile_kernel",
    "device_region",
    "dispatch",
    "plan_launch",
]


# ─────────────────────────────── launch geometry ────────────────────────────


@dataclass(frozen=True)
class LaunchConfig:
    """Grid for one dispatch: ``blocks * threads_per_block >= elements``."""

    elements: int
    blocks: int
    threads_per_block: int


def plan_launch(elements: int, config: DispatchConfig) -> LaunchConfig:
    """Smallest 1-D grid covering ``elements`` with the configured block size."""
    tpb = config.threads_per_block
    return LaunchConfig(
        elements=elements,
        blocks=(elements + tpb - 1) // tpb,
        threads_per_block=tpb,
    )


# ─────────────────────────────── boundary checks ────────────────────────────


def _is_device_array(buffer: object) -> bool:
    return hasattr(buffer, "__cuda_array_interface__")


def check_buffer(buffer: object, precision: Precision) -> Result[int, BufferContractViolation]:
    """Validate the caller's buffer before anything touches the device.

    Accepts a NumPy array or any object exposing ``__cuda_array_interface__``.

    Returns:
        Success(element count) or the first contract violation found.
    """
    if _is_device_array(buffer):
        view = cuda.as_cuda_array(buffer)
        shape, dtype = tuple(view.shape), view.dtype
        contiguous, writable = bool(view.is_c_contiguous()), True
    elif isinstance(buffer, np.ndarray):
        shape, dtype = buffer.shape, buffer.dtype
        contiguous, writable = bool(buffer.flags.c_contiguous), bool(buffer.flags.writeable)
    else:
        return Failure(UnsupportedBuffer(type_name=type(buffer).__name__))

    if len(shape) != 1:
        return Failure(BufferNotOneDimensional(ndim=len(shape)))
    if not contiguous:
        return Failure(BufferNotContiguous())
    if not writable:
        return Failure(BufferReadOnly())
    if not precision.matches(dtype):
        return Failure(BufferDTypeMismatch(expected=precision.value, actual=str(dtype)))
    return Success(int(shape[0]))


# ─────────────────────────────── kernel cache ───────────────────────────────

_KERNELS: dict[type[Any], Any] = {}


def _build_apply_kernel(apply: Callable[[float, DeviceParams], float]) -> Any:
    device_apply = cuda.jit(device=True)(apply)

    @cuda.jit
    def apply_kernel(io: Any, params: Any) -> None:
        idx = cuda.grid(1)
        if idx < io.shape[0]:
            io[idx] = device_apply(io[idx], params)

    return apply_kernel


def compile_kernel(op_type: type[DeviceOperation]) -> Any:
    """Return the kernel specialised for ``op_type``, building it on first use.

    Numba compiles lazily, so argument-type specialisation (element precision,
    parameter types) happens at the first launch and is cached by the
    dispatcher itself.
    """
    kernel = _KERNELS.get(op_type)
    if kernel is None:
        logger.debug("Building apply kernel for %s", op_type.__name__)
        kernel = _build_apply_kernel(op_type.apply)
        _KERNELS[op_type] = kernel
    return kernel


# ─────────────────────────────── device region ──────────────────────────────


@contextmanager
def device_region(queue: ExecutionQueue, buffer: Any) -> Iterator[Any]:
    """Grant the device read/write access to ``buffer`` for one dispatch.

    Device-resident buffers are wrapped without a copy.  Host buffers are
    staged to the device on entry and copied back into the same storage on a
    clean exit.  If the body raises, nothing is copied back and the staging
    allocation is dropped with the frame.
    """
    if _is_device_array(buffer):
        yield cuda.as_cuda_array(buffer)
        return

    staged = cuda.to_device(buffer, stream=queue.stream)
    yield staged
    staged.copy_to_host(buffer, stream=queue.stream)
    queue.synchronize()


# ─────────────────────────────── bridge ─────────────────────────────────────


def _accelerator_failure(
    exc: Exception, stage: DispatchStage, operation: str
) -> AcceleratorExecutionError:
    code = getattr(exc, "code", None)
    return AcceleratorExecutionError(
        message=f"{type(exc).__name__}: {exc}",
        stage="compile" if isinstance(exc, NumbaError) else stage,
        operation=operation,
        cuda_error_code=code if isinstance(code, int) else None,
    )


def dispatch(
    variant: SupportsDeviceOperation[DeviceOperation],
    queue: ExecutionQueue,
    buffer: B,
) -> Result[B, ReactionError]:
    """Apply ``variant``'s device operation to every element of ``buffer``.

    Blocks until the device has finished.  The buffer is mutated in place and
    returned inside ``Success``; on any failure ``Failure`` carries either the
    boundary violation or an :class:`AcceleratorExecutionError`.
    """
    operation = variant.device_operation()
    op_name = type(operation).__name__

    match check_buffer(buffer, queue.config.precision):
        case Failure(violation):
            logger.warning("Rejected buffer for %s: %s", op_name, violation.kind)
            return Failure(violation)
        case Success(elements):
            pass

    if elements == 0:
        return Success(buffer)

    launch = plan_launch(elements, queue.config)
    kernel = compile_kernel(type(operation))
    params = operation.params

    stage: DispatchStage = "transfer"
    try:
        with device_region(queue, buffer) as region:
            stage = "launch"
            logger.debug(
                "Launching %s over %d elements (%d blocks x %d threads) on %s",
                op_name,
                launch.elements,
                launch.blocks,
                launch.threads_per_block,
                queue.device_name,
            )
            kernel[launch.blocks, launch.threads_per_block, queue.stream](region, params)
            stage = "synchronize"
            queue.synchronize()
            stage = "transfer"
    except Exception as exc:
        failure = _accelerator_failure(exc, stage, op_name)
        logger.error(
            "%s failed during %s on %s: %s",
            op_name,
            failure.stage,
            queue.device_name,
            failure.message,
        )
        return Failure(failure)

    logger.debug("%s completed over %d elements", op_name, elements)
    return Success(buffer)
