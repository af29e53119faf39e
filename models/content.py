from sqlalchemy import Boolean, Column, Integer, JSON, String, Text

from database import Base
from models.common import created_at_column, updated_at_column


class PageContentSection(Base):
    __tablename__ = "page_content_sections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Free-text page tag, not a foreign key.
    page_id = Column(String(64), nullable=False, index=True)
    section_type = Column(String(32), nullable=False)
    title = Column(String(256), nullable=False)
    content = Column(Text, nullable=False)
    image = Column(String(512), nullable=True)
    button_text = Column(String(128), nullable=True)
    button_link = Column(String(512), nullable=True)
    # Neither unique nor compacted; reordering just rewrites this value.
    order_index = Column(Integer, nullable=False, default=0)
    is_visible = Column(Boolean, nullable=False, default=True)
    meta = Column("metadata", JSON, nullable=True)
    created_at = created_at_column()
    updated_at = updated_at_column()


class HeroSlide(Base):
    __tablename__ = "hero_slides"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(256), nullable=False)
    description = Column(Text, nullable=False)
    primary_button_text = Column(String(128), nullable=False)
    primary_button_link = Column(String(512), nullable=False)
    secondary_button_text = Column(String(128), nullable=True)
    secondary_button_link = Column(String(512), nullable=True)
    background_image = Column(String(512), nullable=False)
    hero_image = Column(String(512), nullable=True)
    background_color = Column(String(64), nullable=False)
    statistic1_value = Column(String(64), nullable=True)
    statistic1_label = Column(String(128), nullable=True)
    statistic2_value = Column(String(64), nullable=True)
    statistic2_label = Column(String(128), nullable=True)
    statistic3_value = Column(String(64), nullable=True)
    statistic3_label = Column(String(128), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = created_at_column()
    updated_at = updated_at_column()


class ProductCard(Base):
    __tablename__ = "product_cards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(256), nullable=False)
    description = Column(Text, nullable=False)
    features = Column(JSON, nullable=False)
    button_text = Column(String(128), nullable=False)
    button_link = Column(String(512), nullable=False)
    icon_name = Column(String(64), nullable=False)
    background_color = Column(String(64), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = created_at_column()
    updated_at = updated_at_column()


class FaqItem(Base):
    __tablename__ = "faq_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    category = Column(String(64), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = created_at_column()
    updated_at = updated_at_column()


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(256), nullable=False)
    description = Column(Text, nullable=False)
    features = Column(JSON, nullable=False)
    benefits = Column(JSON, nullable=False)
    requirements = Column(JSON, nullable=False)
    interest_rate = Column(String(64), nullable=True)
    minimum_amount = Column(String(64), nullable=True)
    maximum_amount = Column(String(64), nullable=True)
    tenure = Column(String(64), nullable=True)
    category = Column(String(64), nullable=False, index=True)
    image_url = Column(String(512), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = created_at_column()
    updated_at = updated_at_column()


class AboutSection(Base):
    __tablename__ = "about_sections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    section_type = Column(String(64), nullable=False, index=True)
    title = Column(String(256), nullable=False)
    content = Column(Text, nullable=False)
    image_url = Column(String(512), nullable=True)
    meta = Column("metadata", JSON, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = created_at_column()
    updated_at = updated_at_column()
