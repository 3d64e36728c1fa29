"""
Device operations: the per-element payload a reaction ships to the device.

A device operation is a frozen dataclass of scalar parameters plus a static,
pure ``apply(value, params)``.  The dispatch bridge compiles ``apply`` once per
operation *type* as a Numba CUDA device function and passes ``params`` to the
kernel by value, so nothing inside the kernel goes through a dynamic dispatch
table.  The very same ``apply`` runs on the host, which is what the tests use
as the reference implementation.

Rules for ``apply``:
    - depends only on ``value`` and ``params``
    - no allocation, no I/O, no globals that live in host memory
    - must type-check under Numba (scalars and tuple indexing only)

Adding a reaction kind means adding one class here and one variant in
:mod:`reactgpu.reactions`; :mod:`reactgpu.bridge` does not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol, TypeAlias, TypeVar

Scalar: TypeAlias = float | int
DeviceParams: TypeAlias = tuple[Scalar, ...]


class DeviceOperation(Protocol):
    """Anything the dispatch bridge can compile and launch."""

    @property
    def params(self) -> DeviceParams:
        """Scalar parameters copied to the device for every launch."""
        ...

    @staticmethod
    def apply(value: float, params: DeviceParams) -> float:
        """Return the transformed element."""
        ...


Op = TypeVar("Op", bound=DeviceOperation, covariant=True)


class SupportsDeviceOperation(Protocol[Op]):
    """A reaction variant that can hand out its device operation by value."""

    def device_operation(self) -> Op:
        ...


@dataclass(frozen=True)
class ScaleOp:
    """Multiply the element by ``factor``."""

    factor: float
    kind: Literal["ScaleOp"] = "ScaleOp"

    @property
    def params(self) -> tuple[float]:
        return (float(self.factor),)

    @staticmethod
    def apply(value: float, params: tuple[float]) -> float:
        return value * params[0]


@dataclass(frozen=True)
class OffsetOp:
    """Add the integral ``increment`` to the element."""

    increment: int
    kind: Literal["OffsetOp"] = "OffsetOp"

    @property
    def params(self) -> tuple[int]:
        return (int(self.increment),)

    @staticmethod
    def apply(value: float, params: tuple[int]) -> float:
        return value + params[0]


__all__ = [
    "DeviceOperation",
    "DeviceParams",
    "OffsetOp",
    "Scalar",
    "ScaleOp",
    "SupportsDeviceOperation",
]
