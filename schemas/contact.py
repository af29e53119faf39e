from typing import Optional

from pydantic import Field

from schemas.base import InsertSchema, JsonObject, OptionalText, Position, RequiredText


class ContactMessageCreate(InsertSchema):
    first_name: RequiredText
    last_name: RequiredText
    email: RequiredText
    phone: Optional[OptionalText] = None
    subject: RequiredText
    message: RequiredText


class ContactInfoCreate(InsertSchema):
    section_key: RequiredText
    title: RequiredText
    content: RequiredText
    image_url: Optional[OptionalText] = None
    meta: Optional[JsonObject] = Field(None, alias="metadata")
    is_active: bool = True
    sort_order: Position = 0
