from datetime import date
from typing import Annotated, Literal, Optional

from pydantic import StringConstraints

from schemas.base import InsertSchema, OptionalText, RequiredText

NewsCategory = Literal["Technology", "Education", "Business", "Security"]

NEWS_CATEGORIES: tuple[str, ...] = ("Technology", "Education", "Business", "Security")

Slug = Annotated[str, StringConstraints(strip_whitespace=True, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")]


class NewsArticleCreate(InsertSchema):
    title: RequiredText
    slug: Slug
    summary: RequiredText
    content: RequiredText
    category: NewsCategory
    author: RequiredText
    publish_date: date
    read_time: RequiredText
    featured: bool = False
    image: Optional[OptionalText] = None
