from typing import Optional

from schemas.base import InsertSchema, OptionalText, RequiredText


class BranchCreate(InsertSchema):
    """Branches are seeded rather than submitted; the schema guards the seed data."""

    name: RequiredText
    address: RequiredText
    phone: RequiredText
    latitude: Optional[OptionalText] = None
    longitude: Optional[OptionalText] = None
    hours: RequiredText
