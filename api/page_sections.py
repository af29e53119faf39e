from typing import Any

from fastapi import APIRouter, Depends

from api.deps import get_storage, require_admin
from models import PageContentSection
from schemas.content import PageContentSectionCreate
from services.security import AdminSession
from services.storage import DatabaseStorage
from utils.case import row_to_response

router = APIRouter(prefix="/api/page-content-sections", tags=["page-content"])


@router.get("/{page_id}")
async def list_page_content_sections(
    page_id: str,
    storage: DatabaseStorage = Depends(get_storage),
) -> list[dict[str, Any]]:
    """Sections of one page in display order (orderIndex, then id)."""
    rows = await storage.list_page_content_sections(page_id)
    return [row_to_response(r) for r in rows]


@router.post("", status_code=201)
async def create_page_content_section(
    body: PageContentSectionCreate,
    storage: DatabaseStorage = Depends(get_storage),
    _: AdminSession = Depends(require_admin),
) -> dict[str, Any]:
    row = await storage.create(PageContentSection, body.to_storage_dict())
    return row_to_response(row)


@router.put("/{section_id}")
async def update_page_content_section(
    section_id: int,
    body: PageContentSectionCreate,
    storage: DatabaseStorage = Depends(get_storage),
    _: AdminSession = Depends(require_admin),
) -> dict[str, Any]:
    row = await storage.update(PageContentSection, section_id, body.to_storage_dict())
    return row_to_response(row)


@router.delete("/{section_id}")
async def delete_page_content_section(
    section_id: int,
    storage: DatabaseStorage = Depends(get_storage),
    _: AdminSession = Depends(require_admin),
) -> dict[str, Any]:
    await storage.delete(PageContentSection, section_id)
    return {"success": True, "id": section_id}
