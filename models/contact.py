from sqlalchemy import Boolean, Column, Integer, JSON, String, Text

from database import Base
from models.common import created_at_column, updated_at_column


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(128), nullable=False)
    last_name = Column(String(128), nullable=False)
    email = Column(String(320), nullable=False)
    phone = Column(String(32), nullable=True)
    subject = Column(String(256), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(32), nullable=False, default="new", index=True)
    created_at = created_at_column()


class ContactInfo(Base):
    """Contact page blocks, grouped client-side by section_key."""

    __tablename__ = "contact_info"

    id = Column(Integer, primary_key=True, autoincrement=True)
    section_key = Column(String(64), nullable=False, index=True)
    title = Column(String(256), nullable=False)
    content = Column(Text, nullable=False)
    image_url = Column(String(512), nullable=True)
    # "metadata" is reserved on declarative classes, hence the attribute name.
    meta = Column("metadata", JSON, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = created_at_column()
    updated_at = updated_at_column()
