"""reactgpu error ADTs."""

from reactgpu.errors.construction import (
    ConstructionError,
    InvalidReactionParams,
    ReactionConstructionFailed,
    UnknownReactionKind,
)
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
from reactgpu.errors.runtime import InvalidDispatchConfig, QueueError, QueueUnavailable

__all__ = [
    "ConstructionError",
    "InvalidReactionParams",
    "ReactionConstructionFailed",
    "UnknownReactionKind",
    "AcceleratorExecutionError",
    "BufferContractViolation",
    "BufferDTypeMismatch",
    "BufferNotContiguous",
    "BufferNotOneDimensional",
    "BufferReadOnly",
    "DispatchStage",
    "ReactionError",
    "UnsupportedBuffer",
    "InvalidDispatchConfig",
    "QueueError",
    "QueueUnavailable",
]
