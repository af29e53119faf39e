"""
Lead capture: account opening, loan applications and contact messages.

Submissions are public; reading them back is admin-only since they carry
personal data.
"""
from typing import Any

from fastapi import APIRouter, Depends

from api.deps import get_storage, require_admin
from models import AccountApplication, ContactMessage, LoanApplication
from schemas.application import AccountApplicationCreate, LoanApplicationCreate
from schemas.contact import ContactMessageCreate
from services.security import AdminSession
from services.storage import DatabaseStorage
from utils.case import row_to_response

router = APIRouter(prefix="/api", tags=["applications"])


@router.post("/account-applications", status_code=201)
async def create_account_application(
    body: AccountApplicationCreate,
    storage: DatabaseStorage = Depends(get_storage),
) -> dict[str, Any]:
    row = await storage.create(AccountApplication, body.to_storage_dict())
    return row_to_response(row)


@router.get("/account-applications")
async def list_account_applications(
    storage: DatabaseStorage = Depends(get_storage),
    _: AdminSession = Depends(require_admin),
) -> list[dict[str, Any]]:
    rows = await storage.list_all(AccountApplication, order_by=(AccountApplication.id.desc(),))
    return [row_to_response(r) for r in rows]


@router.get("/account-applications/{application_id}")
async def get_account_application(
    application_id: int,
    storage: DatabaseStorage = Depends(get_storage),
    _: AdminSession = Depends(require_admin),
) -> dict[str, Any]:
    return row_to_response(await storage.get(AccountApplication, application_id))


@router.post("/loan-applications", status_code=201)
async def create_loan_application(
    body: LoanApplicationCreate,
    storage: DatabaseStorage = Depends(get_storage),
) -> dict[str, Any]:
    row = await storage.create(LoanApplication, body.to_storage_dict())
    return row_to_response(row)


@router.get("/loan-applications")
async def list_loan_applications(
    storage: DatabaseStorage = Depends(get_storage),
    _: AdminSession = Depends(require_admin),
) -> list[dict[str, Any]]:
    rows = await storage.list_all(LoanApplication, order_by=(LoanApplication.id.desc(),))
    return [row_to_response(r) for r in rows]


@router.get("/loan-applications/{application_id}")
async def get_loan_application(
    application_id: int,
    storage: DatabaseStorage = Depends(get_storage),
    _: AdminSession = Depends(require_admin),
) -> dict[str, Any]:
    return row_to_response(await storage.get(LoanApplication, application_id))


@router.post("/contact-messages", status_code=201)
async def create_contact_message(
    body: ContactMessageCreate,
    storage: DatabaseStorage = Depends(get_storage),
) -> dict[str, Any]:
    row = await storage.create(ContactMessage, body.to_storage_dict())
    return row_to_response(row)


@router.get("/contact-messages")
async def list_contact_messages(
    storage: DatabaseStorage = Depends(get_storage),
    _: AdminSession = Depends(require_admin),
) -> list[dict[str, Any]]:
    rows = await storage.list_all(ContactMessage, order_by=(ContactMessage.id.desc(),))
    return [row_to_response(r) for r in rows]
