from sqlalchemy import Boolean, Column, Date, Integer, String, Text

from database import Base
from models.common import created_at_column, updated_at_column


class NewsArticle(Base):
    __tablename__ = "news_articles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(256), nullable=False)
    slug = Column(String(256), unique=True, nullable=False, index=True)
    summary = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String(32), nullable=False, index=True)
    author = Column(String(128), nullable=False)
    publish_date = Column(Date, nullable=False)
    read_time = Column(String(32), nullable=False)
    featured = Column(Boolean, nullable=False, default=False)
    image = Column(String(512), nullable=True)
    created_at = created_at_column()
    updated_at = updated_at_column()
