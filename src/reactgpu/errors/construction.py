"""Error ADTs for reaction construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import ValidationError


@dataclass(frozen=True)
class InvalidReactionParams:
    """Reaction parameters violate the variant's params model (Pydantic failure)."""

    reaction: str
    error: ValidationError
    kind: Literal["InvalidReactionParams"] = "InvalidReactionParams"


@dataclass(frozen=True)
class ReactionConstructionFailed:
    """The variant constructor itself rejected validated parameters."""

    reaction: str
    message: str
    kind: Literal["ReactionConstructionFailed"] = "ReactionConstructionFailed"


@dataclass(frozen=True)
class UnknownReactionKind:
    """No registered reaction variant carries this name."""

    name: str
    known: tuple[str, ...]
    kind: Literal["UnknownReactionKind"] = "UnknownReactionKind"


ConstructionError = InvalidReactionParams | ReactionConstructionFailed | UnknownReactionKind
