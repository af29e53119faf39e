"""
Pure validation entry point shared by request handlers, seed scripts and tests.

validate(schema, candidate) never raises for bad input: it returns either the
validated insert model or a list of field-path/message pairs.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Generic, Iterable, Optional, TypeVar

from pydantic import BaseModel, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Location prefixes FastAPI adds in front of the field path.
_REQUEST_PARTS = ("body", "path", "query", "header")


@dataclass
class FieldError:
    field: str
    message: str
    type: str = "value_error"

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass
class ValidationResult(Generic[SchemaT]):
    value: Optional[SchemaT] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


def field_errors(raw_errors: Iterable[dict[str, Any]]) -> list[FieldError]:
    """Flatten pydantic/FastAPI error dicts into dotted field paths."""
    out: list[FieldError] = []
    for err in raw_errors:
        loc = list(err.get("loc") or ())
        if loc and loc[0] in _REQUEST_PARTS:
            loc = loc[1:]
        path = ".".join(str(part) for part in loc) or "body"
        out.append(FieldError(field=path, message=str(err.get("msg", "Invalid value")), type=str(err.get("type", "value_error"))))
    return out


def validate(schema: type[SchemaT], candidate: Any) -> ValidationResult[SchemaT]:
    try:
        value = schema.model_validate(candidate)
    except ValidationError as exc:
        return ValidationResult(errors=field_errors(exc.errors()))
    return ValidationResult(value=value)
