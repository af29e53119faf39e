"""
Storage facade: the only component that issues persistence operations.

A DatabaseStorage wraps the AsyncSession of one request. Each operation runs a
single statement and writes commit immediately; there are no cross-table
transactions, no caching and no retries. Any SQLAlchemy failure is logged,
the session rolled back, and StorageUnavailableError raised in its place.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional, Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from errors import NotFoundError, StorageUnavailableError
from models import (
    AboutSection,
    AccountApplication,
    AdminUser,
    Branch,
    ContactInfo,
    ContactMessage,
    FaqItem,
    HeroSlide,
    LoanApplication,
    NewsArticle,
    PageContentSection,
    Product,
    ProductCard,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

ENTITY_LABELS: dict[type, str] = {
    AccountApplication: "Account application",
    LoanApplication: "Loan application",
    ContactMessage: "Contact message",
    Branch: "Branch",
    NewsArticle: "News article",
    PageContentSection: "Page content section",
    HeroSlide: "Hero slide",
    ProductCard: "Product card",
    FaqItem: "FAQ item",
    ContactInfo: "Contact info",
    Product: "Product",
    AboutSection: "About section",
    AdminUser: "Admin user",
}


def entity_label(model: type) -> str:
    return ENTITY_LABELS.get(model, model.__name__)


class DatabaseStorage:
    def __init__(self, session: AsyncSession):
        self._session = session

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            logger.error("Storage operation failed: %s (%s)", operation, exc.__class__.__name__, extra={"operation": operation})
            await self._session.rollback()
            raise StorageUnavailableError() from exc

    # --- generic entity operations ---

    async def create(self, model: type[ModelT], payload: dict[str, Any]) -> ModelT:
        row = model(**payload)
        async with self._guard(f"create {model.__tablename__}"):
            self._session.add(row)
            await self._session.commit()
        return row

    async def list_all(
        self,
        model: type[ModelT],
        *criteria: Any,
        order_by: Optional[Sequence[Any]] = None,
    ) -> list[ModelT]:
        stmt = select(model)
        if criteria:
            stmt = stmt.where(*criteria)
        stmt = stmt.order_by(*(order_by or (model.id,)))
        async with self._guard(f"list {model.__tablename__}"):
            result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, model: type[ModelT], entity_id: int) -> ModelT:
        async with self._guard(f"get {model.__tablename__}"):
            row = await self._session.get(model, entity_id)
        if row is None:
            raise NotFoundError(entity_label(model), entity_id)
        return row

    async def update(self, model: type[ModelT], entity_id: int, payload: dict[str, Any]) -> ModelT:
        row = await self.get(model, entity_id)
        for key, value in payload.items():
            setattr(row, key, value)
        async with self._guard(f"update {model.__tablename__}"):
            await self._session.commit()
        return row

    async def delete(self, model: type, entity_id: int) -> None:
        row = await self.get(model, entity_id)
        async with self._guard(f"delete {model.__tablename__}"):
            await self._session.delete(row)
            await self._session.commit()

    async def count(self, model: type) -> int:
        async with self._guard(f"count {model.__tablename__}"):
            result = await self._session.execute(select(func.count()).select_from(model))
        return int(result.scalar_one())

    # --- branches ---

    async def list_branches(self) -> list[Branch]:
        """Pure read; the default branch is seeded at startup (services/seed.py)."""
        return await self.list_all(Branch, order_by=(Branch.id,))

    # --- news ---

    async def list_news_articles(self, category: Optional[str] = None) -> list[NewsArticle]:
        criteria = []
        if category and category != "All":
            criteria.append(NewsArticle.category == category)
        return await self.list_all(
            NewsArticle,
            *criteria,
            order_by=(NewsArticle.created_at.desc(), NewsArticle.id.desc()),
        )

    async def get_featured_news_article(self) -> Optional[NewsArticle]:
        stmt = (
            select(NewsArticle)
            .where(NewsArticle.featured.is_(True))
            .order_by(NewsArticle.created_at.desc(), NewsArticle.id.desc())
            .limit(1)
        )
        async with self._guard("get featured news_articles"):
            result = await self._session.execute(stmt)
        return result.scalars().first()

    async def get_news_article_by_slug(self, slug: str) -> Optional[NewsArticle]:
        async with self._guard("get news_articles by slug"):
            result = await self._session.execute(select(NewsArticle).where(NewsArticle.slug == slug))
        return result.scalar_one_or_none()

    # --- page sections and sort-ordered CMS collections ---

    async def list_page_content_sections(self, page_id: str) -> list[PageContentSection]:
        return await self.list_all(
            PageContentSection,
            PageContentSection.page_id == page_id,
            order_by=(PageContentSection.order_index, PageContentSection.id),
        )

    async def list_content(self, model: type[ModelT], include_inactive: bool = False) -> list[ModelT]:
        """List a sortOrder-ordered CMS collection; public callers only see active rows."""
        criteria = [] if include_inactive else [model.is_active.is_(True)]
        return await self.list_all(model, *criteria, order_by=(model.sort_order, model.id))

    # --- admin users ---

    async def get_admin_user(self, username: str) -> Optional[AdminUser]:
        async with self._guard("get admin_users"):
            result = await self._session.execute(select(AdminUser).where(AdminUser.username == username))
        return result.scalar_one_or_none()

    async def create_admin_user(self, username: str, password_hash: str) -> AdminUser:
        return await self.create(AdminUser, {"username": username, "password_hash": password_hash})

    async def count_admin_users(self) -> int:
        return await self.count(AdminUser)
