"""
Shared building blocks for insert schemas.

Insert schemas describe what a client may submit: the entity minus the
server-assigned id, status and timestamps. Keys are camelCase on the wire
(snake_case names are accepted too) and unknown keys are rejected.
"""
import json
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, StringConstraints
from pydantic.alias_generators import to_camel


def _reject_bool(value: Any) -> Any:
    # Lax int mode would read true/false as 1/0.
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value


def _parse_json_text(value: Any) -> Any:
    """Accept a JSON document given as text; the declared type still validates the result."""
    if isinstance(value, str):
        try:
            return json.loads(value)
        except ValueError as exc:
            raise ValueError("must be valid JSON") from exc
    return value


RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
OptionalText = Annotated[str, StringConstraints(strip_whitespace=True)]
# Bounds of the 32-bit Integer columns these values are stored in.
INT_COLUMN_MIN = -2_147_483_648
INT_COLUMN_MAX = 2_147_483_647

# Whole currency units; form inputs arrive as strings and are coerced.
Amount = Annotated[int, BeforeValidator(_reject_bool), Field(ge=0, le=INT_COLUMN_MAX)]
# sortOrder / orderIndex
Position = Annotated[int, BeforeValidator(_reject_bool), Field(ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)]
StringList = Annotated[list[str], BeforeValidator(_parse_json_text)]
JsonObject = Annotated[dict[str, Any], BeforeValidator(_parse_json_text)]


class InsertSchema(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "forbid",
    }

    def to_storage_dict(self) -> dict[str, Any]:
        """Column-keyed values for the ORM (snake_case attribute names)."""
        return self.model_dump(by_alias=False)
