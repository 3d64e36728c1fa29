"""
Example reaction kinds.

Each variant pairs a device operation from :mod:`reactgpu.device_ops` with a
Pydantic ``params_model``.  The constructor validates its arguments against that
model, so direct construction and :func:`reactgpu.factory.make_reaction` reject
the same inputs; the former raises ``ValidationError`` (a ``ValueError``), the
latter returns it inside ``Failure``.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, StrictInt

from reactgpu.device_ops import OffsetOp, ScaleOp
from reactgpu.reaction import ReactionBase


class ScaleParams(BaseModel):
    """Parameters of :class:`ScaleReaction`."""

    factor: float

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)


class OffsetParams(BaseModel):
    """Parameters of :class:`OffsetReaction`."""

    increment: StrictInt

    model_config = ConfigDict(frozen=True, extra="forbid")


class ScaleReaction(ReactionBase[ScaleOp]):
    """Multiply every element by ``factor``."""

    params_model = ScaleParams

    def __init__(self, factor: float) -> None:
        params = ScaleParams(factor=factor)
        self._op = ScaleOp(factor=params.factor)

    def device_operation(self) -> ScaleOp:
        return self._op

    def __repr__(self) -> str:
        return f"ScaleReaction(factor={self._op.factor!r})"


class OffsetReaction(ReactionBase[OffsetOp]):
    """Add the integral ``increment`` to every element."""

    params_model = OffsetParams

    def __init__(self, increment: int) -> None:
        params = OffsetParams(increment=increment)
        self._op = OffsetOp(increment=params.increment)

    def device_operation(self) -> OffsetOp:
        return self._op

    def __repr__(self) -> str:
        return f"OffsetReaction(increment={self._op.increment!r})"


REACTION_KINDS: Mapping[str, type[ReactionBase[Any]]] = {
    "scale": ScaleReaction,
    "offset": OffsetReaction,
}

__all__ = [
    "OffsetParams",
    "OffsetReaction",
    "REACTION_KINDS",
    "ScaleParams",
    "ScaleReaction",
]
