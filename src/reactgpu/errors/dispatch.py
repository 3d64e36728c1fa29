"""Error ADTs raised at the dispatch boundary.

Buffer contract violations are detected on the host before anything is
submitted.  ``AcceleratorExecutionError`` covers everything that goes wrong
once the device is involved; the buffer contents after such a failure are
unspecified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DispatchStage = Literal["compile", "launch", "transfer", "synchronize"]


@dataclass(frozen=True)
class AcceleratorExecutionError:
    """Kernel compilation, submission, transfer or execution failed on the device.

    Attributes:
        kind: Discriminator for pattern matching. Always "AcceleratorExecutionError".
        message: Diagnostic reported by the driver or the simulator.
        stage: Dispatch step that was running when the failure surfaced.
        operation: Name of the device operation being applied.
        cuda_error_code: CUDA driver error code, when the driver supplied one.
    """

    message: str
    stage: DispatchStage
    operation: str = ""
    cuda_error_code: int | None = None
    kind: Literal["AcceleratorExecutionError"] = "AcceleratorExecutionError"


@dataclass(frozen=True)
class BufferNotOneDimensional:
    """Buffer must be a flat sequence of elements."""

    ndim: int
    kind: Literal["BufferNotOneDimensional"] = "BufferNotOneDimensional"


@dataclass(frozen=True)
class BufferNotContiguous:
    """Buffer storage must be C-contiguous to be wrapped for the device."""

    kind: Literal["BufferNotContiguous"] = "BufferNotContiguous"


@dataclass(frozen=True)
class BufferReadOnly:
    """Buffer cannot be mutated in place."""

    kind: Literal["BufferReadOnly"] = "BufferReadOnly"


@dataclass(frozen=True)
class BufferDTypeMismatch:
    """Buffer element format differs from the queue's configured precision."""

    expected: str
    actual: str
    kind: Literal["BufferDTypeMismatch"] = "BufferDTypeMismatch"


@dataclass(frozen=True)
class UnsupportedBuffer:
    """Object is neither a NumPy array nor a CUDA array."""

    type_name: str
    kind: Literal["UnsupportedBuffer"] = "UnsupportedBuffer"


BufferContractViolation = (
    BufferNotOneDimensional
    | BufferNotContiguous
    | BufferReadOnly
    | BufferDTypeMismatch
    | UnsupportedBuffer
)

ReactionError = AcceleratorExecutionError | BufferContractViolation
