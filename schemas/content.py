from typing import Literal, Optional

from pydantic import Field

from schemas.base import InsertSchema, JsonObject, OptionalText, Position, RequiredText, StringList

SectionType = Literal["hero", "feature", "testimonial", "gallery", "text", "cta"]


class PageContentSectionCreate(InsertSchema):
    page_id: RequiredText
    section_type: SectionType
    title: RequiredText
    content: RequiredText
    image: Optional[OptionalText] = None
    button_text: Optional[OptionalText] = None
    button_link: Optional[OptionalText] = None
    order_index: Position = 0
    is_visible: bool = True
    meta: Optional[JsonObject] = Field(None, alias="metadata")


class HeroSlideCreate(InsertSchema):
    title: RequiredText
    description: RequiredText
    primary_button_text: RequiredText
    primary_button_link: RequiredText
    secondary_button_text: Optional[OptionalText] = None
    secondary_button_link: Optional[OptionalText] = None
    background_image: RequiredText
    hero_image: Optional[OptionalText] = None
    background_color: RequiredText
    statistic1_value: Optional[OptionalText] = None
    statistic1_label: Optional[OptionalText] = None
    statistic2_value: Optional[OptionalText] = None
    statistic2_label: Optional[OptionalText] = None
    statistic3_value: Optional[OptionalText] = None
    statistic3_label: Optional[OptionalText] = None
    is_active: bool = True
    sort_order: Position = 0


class ProductCardCreate(InsertSchema):
    title: RequiredText
    description: RequiredText
    features: StringList
    button_text: RequiredText
    button_link: RequiredText
    icon_name: RequiredText
    background_color: RequiredText
    is_active: bool = True
    sort_order: Position = 0


class FaqItemCreate(InsertSchema):
    question: RequiredText
    answer: RequiredText
    category: RequiredText
    is_active: bool = True
    sort_order: Position = 0


class ProductCreate(InsertSchema):
    name: RequiredText
    description: RequiredText
    features: StringList
    benefits: StringList
    requirements: StringList
    interest_rate: Optional[OptionalText] = None
    minimum_amount: Optional[OptionalText] = None
    maximum_amount: Optional[OptionalText] = None
    tenure: Optional[OptionalText] = None
    category: RequiredText
    image_url: Optional[OptionalText] = None
    is_active: bool = True
    sort_order: Position = 0


class AboutSectionCreate(InsertSchema):
    section_type: RequiredText
    title: RequiredText
    content: RequiredText
    image_url: Optional[OptionalText] = None
    meta: Optional[JsonObject] = Field(None, alias="metadata")
    is_active: bool = True
    sort_order: Position = 0
