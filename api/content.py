"""
CRUD routers for the sortOrder-ordered CMS collections (homepage slides,
product cards, FAQ, contact info, products, about sections).

All six share one shape, so the routes are built from a small table rather than
written out six times. Public GETs return active rows only; includeInactive=true
also returns drafts and needs an admin session, as do all writes.
"""
from typing import Any

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from api.deps import get_storage, optional_admin, require_admin
from errors import AuthError
from models import AboutSection, ContactInfo, FaqItem, HeroSlide, Product, ProductCard
from schemas.contact import ContactInfoCreate
from schemas.content import AboutSectionCreate, FaqItemCreate, HeroSlideCreate, ProductCardCreate, ProductCreate
from services.security import AdminSession
from services.storage import DatabaseStorage
from utils.case import row_to_response

# (url segment, model, insert schema)
CONTENT_COLLECTIONS: tuple[tuple[str, type, type[BaseModel]], ...] = (
    ("hero-slides", HeroSlide, HeroSlideCreate),
    ("product-cards", ProductCard, ProductCardCreate),
    ("faq-items", FaqItem, FaqItemCreate),
    ("contact-info", ContactInfo, ContactInfoCreate),
    ("products", Product, ProductCreate),
    ("about-sections", AboutSection, AboutSectionCreate),
)


def build_content_router(path: str, model: type, create_schema: type[BaseModel]) -> APIRouter:
    router = APIRouter(prefix=f"/api/{path}", tags=[path])
    name = path.replace("-", "_")

    @router.get("", name=f"list_{name}")
    async def list_items(
        include_inactive: bool = Query(False, alias="includeInactive"),
        storage: DatabaseStorage = Depends(get_storage),
        admin: AdminSession | None = Depends(optional_admin),
    ) -> list[dict[str, Any]]:
        if include_inactive and admin is None:
            raise AuthError("Admin session required to list inactive items")
        rows = await storage.list_content(model, include_inactive=include_inactive)
        return [row_to_response(r) for r in rows]

    @router.post("", status_code=201, name=f"create_{name}")
    async def create_item(
        body: create_schema,
        storage: DatabaseStorage = Depends(get_storage),
        _: AdminSession = Depends(require_admin),
    ) -> dict[str, Any]:
        row = await storage.create(model, body.to_storage_dict())
        return row_to_response(row)

    @router.put("/{item_id}", name=f"update_{name}")
    async def update_item(
        item_id: int,
        body: create_schema,
        storage: DatabaseStorage = Depends(get_storage),
        _: AdminSession = Depends(require_admin),
    ) -> dict[str, Any]:
        row = await storage.update(model, item_id, body.to_storage_dict())
        return row_to_response(row)

    @router.delete("/{item_id}", name=f"delete_{name}")
    async def delete_item(
        item_id: int,
        storage: DatabaseStorage = Depends(get_storage),
        _: AdminSession = Depends(require_admin),
    ) -> dict[str, Any]:
        await storage.delete(model, item_id)
        return {"success": True, "id": item_id}

    return router


routers = [build_content_router(path, model, schema) for path, model, schema in CONTENT_COLLECTIONS]
