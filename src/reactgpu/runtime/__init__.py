"""Runtime utilities for acquiring execution queues."""

from reactgpu.runtime.cuda_runtime import (
    CudaRuntime,
    DispatchConfig,
    ExecutionQueue,
    StreamLike,
    ThreadsPerBlock,
    build_dispatch_config,
    decide_cuda_runtime,
    default_queue,
    open_queue,
)

__all__ = [
    "CudaRuntime",
    "DispatchConfig",
    "ExecutionQueue",
    "StreamLike",
    "ThreadsPerBlock",
    "build_dispatch_config",
    "decide_cuda_runtime",
    "default_queue",
    "open_queue",
]
