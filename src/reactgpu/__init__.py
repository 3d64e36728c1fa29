"""
reactgpu
========

Pluggable per-element reactions dispatched as Numba CUDA kernels.

A :class:`Reaction` is the uniform handle callers store and invoke; concrete
kinds derive from :class:`ReactionBase` and carry a device operation that the
dispatch bridge compiles once per type and launches over the whole buffer.
"""

from reactgpu.bridge import LaunchConfig, check_buffer, compile_kernel, dispatch, plan_launch
from reactgpu.device_ops import DeviceOperation, OffsetOp, ScaleOp, SupportsDeviceOperation
from reactgpu.factory import make_reaction, parse_reaction_spec
from reactgpu.models.numerical import Precision
from reactgpu.reaction import Reaction, ReactionBase, react_all
from reactgpu.reactions import REACTION_KINDS, OffsetReaction, ScaleReaction
from reactgpu.result import Failure, Result, Success
from reactgpu.runtime import (
    CudaRuntime,
    DispatchConfig,
    ExecutionQueue,
    build_dispatch_config,
    decide_cuda_runtime,
    default_queue,
    open_queue,
)

__all__ = [
    "CudaRuntime",
    "DeviceOperation",
    "DispatchConfig",
    "ExecutionQueue",
    "Failure",
    "LaunchConfig",
    "OffsetOp",
    "OffsetReaction",
    "Precision",
    "REACTION_KINDS",
    "Reaction",
    "ReactionBase",
    "Result",
    "ScaleOp",
    "ScaleReaction",
    "Success",
    "SupportsDeviceOperation",
    "build_dispatch_config",
    "check_buffer",
    "compile_kernel",
    "decide_cuda_runtime",
    "default_queue",
    "dispatch",
    "make_reaction",
    "open_queue",
    "parse_reaction_spec",
    "plan_launch",
    "react_all",
]
