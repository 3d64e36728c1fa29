"""
The uniform reaction handle.

:class:`Reaction` is the one type callers store and invoke.  Concrete kinds
derive from :class:`ReactionBase`, parameterised by their device operation,
which routes ``react`` through :func:`reactgpu.bridge.dispatch`.  The
generic bridge is never exposed through the uniform interface itself.

Example:
    >>> reactions: list[Reaction] = [ScaleReaction(0.1), OffsetReaction(2)]
    >>> match react_all(reactions, queue, buffer):
    ...     case Success(out):
    ...         print(out)
    ...     case Failure(error):
    ...         print(f"halted: {error.kind}")
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, Sequence, TypeVar

from pydantic import BaseModel

from reactgpu.device_ops import DeviceOperation
from reactgpu.bridge import dispatch
from reactgpu.errors.dispatch import ReactionError
from reactgpu.result import Result, Success, fold_results
from reactgpu.runtime.cuda_runtime import ExecutionQueue

logger = logging.getLogger(__name__)

B = TypeVar("B")
Op = TypeVar("Op", bound=DeviceOperation)


class Reaction:
    """Apply one transformation to a whole buffer via an execution queue."""

    def react(self, queue: ExecutionQueue, buffer: B) -> Result[B, ReactionError]:
        """Transform ``buffer`` in place.

        The unspecialised base does nothing and returns the buffer untouched.
        """
        logger.warning(
            "%s.react called without a device operation; buffer left unchanged",
            type(self).__name__,
        )
        return Success(buffer)


class ReactionBase(Reaction, ABC, Generic[Op]):
    """A concrete reaction kind owning exactly one device operation.

    ``params_model`` names the Pydantic model the factory validates
    constructor keywords against; ``None`` skips validation.
    """

    params_model: ClassVar[type[BaseModel] | None] = None

    @abstractmethod
    def device_operation(self) -> Op:
        """Return the device operation by value."""

    def react(self, queue: ExecutionQueue, buffer: B) -> Result[B, ReactionError]:
        return dispatch(self, queue, buffer)


def react_all(
    reactions: Sequence[Reaction], queue: ExecutionQueue, buffer: B
) -> Result[B, ReactionError]:
    """Drive ``reactions`` in order through the uniform interface.

    Stops at the first failure; later reactions are not submitted.
    """

    def step(current: B, reaction: Reaction) -> Result[B, ReactionError]:
        return reaction.react(queue, current)

    return fold_results(list(reactions), step, buffer)
