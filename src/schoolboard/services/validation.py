"""Report pydantic validation errors the way a form does: one message at a time.

The field rules live on the request schemas; services call :func:`validate`
so callers outside HTTP get the same checks, and the app's
``RequestValidationError`` handler uses :func:`first_error_message`.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from schoolboard.core.errors import ValidationFailure

ModelT = TypeVar("ModelT", bound=BaseModel)

# Request sections FastAPI prefixes onto error locations.
_SECTIONS = {"body", "query", "path", "header", "cookie"}


def field_label(loc: Sequence[int | str]) -> str:
    """``("body", "school_id")`` -> ``"School"``."""
    names = [part for part in loc if isinstance(part, str) and part not in _SECTIONS]
    if not names:
        return "Request"
    name = names[-1].removesuffix("_id")
    return name.replace("_", " ").capitalize()


def describe_error(error: Mapping[str, Any]) -> str:
    label = field_label(error.get("loc", ()))
    kind = error.get("type")
    ctx = error.get("ctx") or {}

    if kind == "missing" or error.get("input", ...) is None:
        return f"{label} is required"
    if kind == "string_too_short":
        if ctx.get("min_length") == 1:
            return f"{label} is required"
        return f"{label} must be at least {ctx['min_length']} characters"
    if kind == "string_too_long":
        return f"{label} too long"
    if kind == "string_pattern_mismatch":
        return f"{label} may only contain letters, numbers, dots, dashes and underscores"
    if kind == "literal_error":
        return f"{label} must be one of: {ctx['expected']}"
    return f"{label}: {error.get('msg', 'invalid value')}"


def first_error_message(errors: Sequence[Mapping[str, Any]]) -> str:
    if not errors:
        return "Invalid input"
    return describe_error(errors[0])


def validate(model: type[ModelT], **fields: Any) -> ModelT:
    """Build ``model`` from ``fields`` or raise the first failing rule."""
    try:
        return model.model_validate(fields)
    except ValidationError as exc:
        raise ValidationFailure(first_error_message(exc.errors())) from exc
