"""Error ADTs for execution-queue acquisition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import ValidationError


@dataclass(frozen=True)
class QueueUnavailable:
    """No CUDA device (real or simulated) could back an execution queue."""

    reason: str
    kind: Literal["QueueUnavailable"] = "QueueUnavailable"


@dataclass(frozen=True)
class InvalidDispatchConfig:
    """Dispatch configuration failed Pydantic validation."""

    error: ValidationError
    kind: Literal["InvalidDispatchConfig"] = "InvalidDispatchConfig"


QueueError = QueueUnavailable | InvalidDispatchConfig
