"""
Shared test helpers: an in-memory SQLite database per test and sample payloads.
"""
import unittest

import httpx
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import models  # noqa: F401  (registers tables on Base.metadata)
from database import Base, get_db
from main import app
from services.security import build_admin_token, hash_password
from services.storage import DatabaseStorage


async def make_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return engine


def make_sessionmaker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


def account_application_payload(**overrides):
    payload = {
        "firstName": "Ada",
        "lastName": "Obi",
        "email": "ada@example.com",
        "phone": "+2348000000000",
        "dateOfBirth": "1990-01-01",
        "address": "12 Example St",
        "idType": "national-id",
        "idNumber": "A1234567",
        "accountType": "savings",
        "initialDeposit": 1000,
    }
    payload.update(overrides)
    return payload


def loan_application_payload(**overrides):
    payload = {
        "firstName": "Tunde",
        "lastName": "Bello",
        "email": "tunde@example.com",
        "phone": "+2348011111111",
        "businessName": "Bello Provisions",
        "businessType": "Retail",
        "businessAddress": "4 Market Road, Ibadan",
        "loanAmount": "250000",
        "loanPurpose": "Restock inventory",
        "monthlyIncome": "180000",
        "monthlyExpenses": "90000",
    }
    payload.update(overrides)
    return payload


def news_article_payload(**overrides):
    payload = {
        "title": "New Branch Hours",
        "slug": "new-branch-hours",
        "summary": "Extended hours at the campus branch.",
        "content": "From next month the campus branch opens until 5 PM.",
        "category": "Business",
        "author": "Lead City MFB Team",
        "publishDate": "2024-08-01",
        "readTime": "1 min read",
    }
    payload.update(overrides)
    return payload


def faq_item_payload(**overrides):
    payload = {
        "question": "Do you offer student accounts?",
        "answer": "Yes, with no minimum balance.",
        "category": "Accounts",
    }
    payload.update(overrides)
    return payload


class StorageTestCase(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.engine = await make_engine()
        self.sessionmaker = make_sessionmaker(self.engine)
        self.session = self.sessionmaker()
        self.storage = DatabaseStorage(self.session)

    async def asyncTearDown(self):
        await self.session.close()
        await self.engine.dispose()

    def fresh_storage(self) -> DatabaseStorage:
        """Storage on a new session, so reads cannot come from the identity map."""
        session = self.sessionmaker()
        self.addAsyncCleanup(session.close)
        return DatabaseStorage(session)


class ApiTestCase(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.engine = await make_engine()
        self.sessionmaker = make_sessionmaker(self.engine)

        async def override_get_db():
            async with self.sessionmaker() as session:
                yield session

        app.dependency_overrides[get_db] = override_get_db
        self.client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")

    async def asyncTearDown(self):
        await self.client.aclose()
        app.dependency_overrides.clear()
        await self.engine.dispose()

    async def admin_headers(self, username: str = "admin", password: str = "correct-horse") -> dict:
        async with self.sessionmaker() as session:
            storage = DatabaseStorage(session)
            if await storage.get_admin_user(username) is None:
                await storage.create_admin_user(username, hash_password(password))
        token, _ = build_admin_token(username)
        return {"Authorization": f"Bearer {token}"}
