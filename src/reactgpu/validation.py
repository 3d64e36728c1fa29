"""Pydantic validation at the reactgpu boundaries.

Reaction parameters and dispatch configuration are Pydantic models.  The
factory and the runtime build them through :func:`validate_model` so a bad
value comes back as ``Failure(ValidationError)`` instead of an exception, and
the CLI renders that error with :func:`summarize_errors`.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from reactgpu.result import Failure, Result, Success


TModel = TypeVar("TModel", bound=BaseModel)

__all__: list[str] = ["summarize_errors", "validate_model"]


def validate_model(model_cls: type[TModel], **data: object) -> Result[TModel, ValidationError]:
    """Build ``model_cls`` from keyword data, returning the validation error on failure."""
    try:
        return Success(model_cls(**data))
    except ValidationError as exc:
        return Failure(exc)


def summarize_errors(error: ValidationError) -> str:
    """One-line ``field: message`` summary, e.g. ``increment: Input should be a valid integer``."""
    parts: list[str] = []
    for issue in error.errors():
        field = ".".join(str(part) for part in issue["loc"]) or error.title
        parts.append(f"{field}: {issue['msg']}")
    return "; ".join(parts)
