"""
Shared case conversion and row serialization for API responses.
Uses Pydantic's alias_generators for consistency with schema validation.
"""
from datetime import date, datetime
from typing import Any

from pydantic.alias_generators import to_camel
from sqlalchemy import inspect

# Columns that must never leave the server.
_PRIVATE_COLUMNS = frozenset({"password_hash"})


def to_camel_key(s: str) -> str:
    """Convert a single snake_case key to camelCase (first letter lower)."""
    return to_camel(s)


def _json_value(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def row_to_response(row: Any) -> dict[str, Any]:
    """
    Serialize an ORM row to a camelCase dict keyed by column name.
    JSON column payloads (features, metadata, ...) are returned as stored.
    """
    out: dict[str, Any] = {}
    for attr in inspect(type(row)).column_attrs:
        column_name = attr.columns[0].name
        if column_name in _PRIVATE_COLUMNS:
            continue
        out[to_camel_key(column_name)] = _json_value(getattr(row, attr.key))
    return out
