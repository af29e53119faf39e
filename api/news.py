from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_storage, require_admin
from errors import ConflictError
from models import NewsArticle
from schemas.news import NewsArticleCreate
from services.security import AdminSession
from services.storage import DatabaseStorage
from utils.case import row_to_response

router = APIRouter(prefix="/api/news-articles", tags=["news"])

MSG_SLUG_IN_USE = "Slug already in use"


@router.get("")
async def list_news_articles(
    category: Optional[str] = Query(None, description="Technology, Education, Business, Security or All"),
    storage: DatabaseStorage = Depends(get_storage),
) -> list[dict[str, Any]]:
    rows = await storage.list_news_articles(category)
    return [row_to_response(r) for r in rows]


@router.get("/featured")
async def get_featured_news_article(storage: DatabaseStorage = Depends(get_storage)) -> Optional[dict[str, Any]]:
    row = await storage.get_featured_news_article()
    return row_to_response(row) if row is not None else None


@router.get("/{article_id}")
async def get_news_article(article_id: int, storage: DatabaseStorage = Depends(get_storage)) -> dict[str, Any]:
    return row_to_response(await storage.get(NewsArticle, article_id))


@router.post("", status_code=201)
async def create_news_article(
    body: NewsArticleCreate,
    storage: DatabaseStorage = Depends(get_storage),
    _: AdminSession = Depends(require_admin),
) -> dict[str, Any]:
    if await storage.get_news_article_by_slug(body.slug) is not None:
        raise ConflictError(MSG_SLUG_IN_USE)
    row = await storage.create(NewsArticle, body.to_storage_dict())
    return row_to_response(row)


@router.put("/{article_id}")
async def update_news_article(
    article_id: int,
    body: NewsArticleCreate,
    storage: DatabaseStorage = Depends(get_storage),
    _: AdminSession = Depends(require_admin),
) -> dict[str, Any]:
    await storage.get(NewsArticle, article_id)
    existing = await storage.get_news_article_by_slug(body.slug)
    if existing is not None and existing.id != article_id:
        raise ConflictError(MSG_SLUG_IN_USE)
    row = await storage.update(NewsArticle, article_id, body.to_storage_dict())
    return row_to_response(row)


@router.delete("/{article_id}")
async def delete_news_article(
    article_id: int,
    storage: DatabaseStorage = Depends(get_storage),
    _: AdminSession = Depends(require_admin),
) -> dict[str, Any]:
    await storage.delete(NewsArticle, article_id)
    return {"success": True, "id": article_id}
