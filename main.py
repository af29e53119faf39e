import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import database
from config import settings
from api.admin import router as admin_router
from api.applications import router as applications_router
from api.branches import router as branches_router
from api.content import routers as content_routers
from api.error_handlers import register_error_handlers
from api.news import router as news_router
from api.page_sections import router as page_sections_router
from services.admin_auth import bootstrap_admin
from services.seed import seed_default_branch
from services.storage import DatabaseStorage
from utils.observability import setup_logging

logger = logging.getLogger(__name__)


async def _run_startup_tasks() -> None:
    """Seed the default branch and the configured admin, once per process start."""
    async with database.AsyncSessionLocal() as session:
        storage = DatabaseStorage(session)
        if settings.seed_default_branch:
            await seed_default_branch(storage)
        if settings.admin_username and settings.admin_password:
            if await bootstrap_admin(storage, settings.admin_username, settings.admin_password):
                logger.info("Bootstrapped admin account from configuration")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    if await database.init_db():
        await _run_startup_tasks()
    yield
    if database.engine is not None:
        await database.engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Lead capture and site content API for Lead City Microfinance Bank",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(applications_router)
app.include_router(branches_router)
app.include_router(news_router)
app.include_router(page_sections_router)
for content_router in content_routers:
    app.include_router(content_router)
app.include_router(admin_router)


@app.get("/health")
async def health():
    return {"status": "ok", "database": settings.has_database}
