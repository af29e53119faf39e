"""
Explicit seeding. Runs once at startup (and from scripts/seed_content.py)
instead of inserting defaults from inside a read.
"""
from __future__ import annotations

import logging
from typing import Any

from errors import StorageUnavailableError
from models import Branch
from schemas.branch import BranchCreate
from schemas.validation import validate
from services.storage import DatabaseStorage

logger = logging.getLogger(__name__)

DEFAULT_BRANCH: dict[str, Any] = {
    "name": "Lead City University Branch",
    "address": "Lead City University Campus, Toll Gate Area, Ibadan-Lagos Express Way, Ibadan, Oyo State",
    "phone": "+234 803 456 7890",
    "latitude": "7.3775",
    "longitude": "3.9470",
    "hours": "Mon - Fri: 8:00 AM - 4:00 PM",
}


async def seed_default_branch(storage: DatabaseStorage) -> bool:
    """Insert the default branch if the branches table is empty. Returns True if inserted."""
    if await storage.count(Branch) > 0:
        return False
    result = validate(BranchCreate, DEFAULT_BRANCH)
    if not result.ok:
        raise ValueError(f"Invalid default branch: {[e.to_dict() for e in result.errors]}")
    try:
        await storage.create(Branch, result.value.to_storage_dict())
    except StorageUnavailableError:
        # Another process seeded first; the unique name rejected our copy.
        if await storage.count(Branch) > 0:
            return False
        raise
    logger.info("Seeded default branch: %s", DEFAULT_BRANCH["name"])
    return True
