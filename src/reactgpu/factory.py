"""
Reaction factory.

:func:`make_reaction` is the validated way to build a reaction: keywords are
checked against the variant's ``params_model`` and the result is handed back
typed as the uniform :class:`~reactgpu.reaction.Reaction`, ready to be stored
next to reactions of any other kind.

Example:
    >>> match make_reaction(ScaleReaction, factor=0.1):
    ...     case Success(reaction):
    ...         reactions.append(reaction)
    ...     case Failure(error):
    ...         print(error.kind)
"""

from __future__ import annotations

import logging
from typing import Any

from reactgpu.errors.construction import (
    ConstructionError,
    InvalidReactionParams,
    ReactionConstructionFailed,
    UnknownReactionKind,
)
from reactgpu.reaction import Reaction, ReactionBase
from reactgpu.reactions import REACTION_KINDS
from reactgpu.result import Failure, Result, Success
from reactgpu.validation import validate_model

logger = logging.getLogger(__name__)

__all__ = ["make_reaction", "parse_reaction_spec"]


def make_reaction(
    variant_cls: type[ReactionBase[Any]], **params: object
) -> Result[Reaction, ConstructionError]:
    """Construct ``variant_cls`` and return it as the uniform handle.

    Args:
        variant_cls: Concrete reaction kind.
        **params: Constructor keywords, validated against
            ``variant_cls.params_model`` when it is set.

    Returns:
        Success(Reaction), ``InvalidReactionParams`` when validation fails, or
        ``ReactionConstructionFailed`` when the constructor itself rejects the
        validated values.
    """
    name = variant_cls.__name__
    kwargs: dict[str, object] = dict(params)

    if variant_cls.params_model is not None:
        match validate_model(variant_cls.params_model, **params):
            case Failure(error):
                return Failure(InvalidReactionParams(reaction=name, error=error))
            case Success(validated):
                kwargs = validated.model_dump()

    try:
        reaction: Reaction = variant_cls(**kwargs)
    except (TypeError, ValueError) as exc:
        return Failure(ReactionConstructionFailed(reaction=name, message=str(exc)))

    logger.debug("Constructed %r", reaction)
    return Success(reaction)


def _parse_scalar(raw: str) -> int | float | str:
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


def parse_reaction_spec(token: str) -> Result[Reaction, ConstructionError]:
    """Build a reaction from a ``"<kind>:<value>"`` token such as ``"scale:0.1"``.

    The value is bound to the single field of the kind's params model.  A
    missing value is reported by validation, not guessed.
    """
    name, _, raw = token.partition(":")
    variant_cls = REACTION_KINDS.get(name.strip().lower())
    if variant_cls is None:
        return Failure(UnknownReactionKind(name=name, known=tuple(sorted(REACTION_KINDS))))

    model = variant_cls.params_model
    if model is None or not raw:
        return make_reaction(variant_cls)
    field = next(iter(model.model_fields))
    return make_reaction(variant_cls, **{field: _parse_scalar(raw.strip())})
