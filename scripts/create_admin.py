"""
Create an admin account from the command line.
Run: python -m scripts.create_admin <username>   (password is prompted)
"""
import argparse
import asyncio
import getpass
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import database
from schemas import AdminSetup, validate
from services import security
from services.storage import DatabaseStorage


async def create_admin(username: str, password: str) -> None:
    result = validate(AdminSetup, {"username": username, "password": password})
    if not result.ok:
        raise SystemExit("; ".join(f"{e.field}: {e.message}" for e in result.errors))
    if not await database.init_db():
        raise SystemExit("DATABASE_URL is not set.")
    async with database.AsyncSessionLocal() as session:
        storage = DatabaseStorage(session)
        if await storage.get_admin_user(result.value.username) is not None:
            raise SystemExit(f"Admin {result.value.username} already exists")
        await storage.create_admin_user(result.value.username, security.hash_password(result.value.password))
    print(f"Created admin {result.value.username}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Create an admin account")
    parser.add_argument("username")
    args = parser.parse_args()
    password = getpass.getpass("Password: ")
    if password != getpass.getpass("Repeat password: "):
        raise SystemExit("Passwords do not match")
    asyncio.run(create_admin(args.username, password))


if __name__ == "__main__":
    main()
