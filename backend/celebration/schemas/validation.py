"""Schema checks that return a tagged result instead of raising."""
from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel, ValidationError

# Error types that mean "the field was not really filled in"
_REQUIRED_TYPES = {"missing", "string_too_short", "int_parsing", "greater_than", "string_type", "int_type"}


@dataclass(frozen=True)
class Rejected:
    """Field-level validation messages keyed by camelCase field name."""

    errors: dict[str, list[str]]


def field_errors(exc: ValidationError, schema: type[BaseModel]) -> dict[str, list[str]]:
    """Flatten a pydantic ValidationError into ``{field: [messages]}``."""
    messages = getattr(schema, "field_messages", {})
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "payload"
        if err["type"] in _REQUIRED_TYPES and field in messages:
            text = messages[field]
        else:
            text = err["msg"]
        bucket = errors.setdefault(field, [])
        if text not in bucket:
            bucket.append(text)
    return errors


def check(schema: type[BaseModel], payload: Any) -> Union[BaseModel, Rejected]:
    """Validate ``payload`` against ``schema``; return the model or ``Rejected``."""
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        return Rejected(field_errors(exc, schema))
