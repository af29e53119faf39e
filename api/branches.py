from typing import Any

from fastapi import APIRouter, Depends

from api.deps import get_storage
from models import Branch
from services.storage import DatabaseStorage
from utils.case import row_to_response

router = APIRouter(prefix="/api/branches", tags=["branches"])


@router.get("")
async def list_branches(storage: DatabaseStorage = Depends(get_storage)) -> list[dict[str, Any]]:
    rows = await storage.list_branches()
    return [row_to_response(r) for r in rows]


@router.get("/{branch_id}")
async def get_branch(branch_id: int, storage: DatabaseStorage = Depends(get_storage)) -> dict[str, Any]:
    return row_to_response(await storage.get(Branch, branch_id))
