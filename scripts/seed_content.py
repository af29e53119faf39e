"""
Seed the default branch plus sample FAQ items and news articles.
Run: python -m scripts.seed_content (from the project root, with DATABASE_URL set).
Every record goes through the same insert schemas the API uses.
"""
import asyncio
import os
import sys

# Add parent so we can import the app modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import database
from models import FaqItem, NewsArticle
from schemas import FaqItemCreate, NewsArticleCreate, validate
from services.seed import seed_default_branch
from services.storage import DatabaseStorage
from utils.observability import setup_logging

FAQ_ITEMS = [
    {
        "question": "What do I need to open a savings account?",
        "answer": "A valid means of identification, a passport photograph, proof of address and your BVN.",
        "category": "Accounts",
        "sortOrder": 0,
    },
    {
        "question": "How long does loan approval take?",
        "answer": "Most complete applications receive a decision within 48 working hours.",
        "category": "Loans",
        "sortOrder": 1,
    },
    {
        "question": "Can I open an account online?",
        "answer": "Yes. Fill the account opening form on this site and a relationship officer will contact you.",
        "category": "Accounts",
        "sortOrder": 2,
    },
]

NEWS_ARTICLES = [
    {
        "title": "Lead City MFB Launches New Digital Banking Platform",
        "slug": "digital-banking-platform-launch",
        "summary": "Customers now have 24/7 access to banking services with improved security features.",
        "content": "Lead City Microfinance Bank is proud to introduce our new digital banking platform, "
        "designed to provide seamless banking experiences for our valued customers.",
        "category": "Technology",
        "author": "Lead City MFB Team",
        "publishDate": "2024-07-20",
        "readTime": "3 min read",
        "featured": True,
    },
    {
        "title": "Financial Literacy Workshop for Students",
        "slug": "financial-literacy-workshop",
        "summary": "A free workshop on budgeting and saving for Lead City University students.",
        "content": "Our team will be on campus to share practical budgeting, saving and credit tips.",
        "category": "Education",
        "author": "Lead City MFB Team",
        "publishDate": "2024-07-15",
        "readTime": "2 min read",
    },
]


def _validated(schema, records):
    out = []
    for record in records:
        result = validate(schema, record)
        if not result.ok:
            raise SystemExit(f"Invalid seed record {record!r}: {[e.to_dict() for e in result.errors]}")
        out.append(result.value)
    return out


async def seed():
    if not await database.init_db():
        raise SystemExit("DATABASE_URL is not set.")
    async with database.AsyncSessionLocal() as session:
        storage = DatabaseStorage(session)
        if await seed_default_branch(storage):
            print("Seeded default branch")
        else:
            print("Branches already present, skipping")

        if await storage.count(FaqItem) == 0:
            for item in _validated(FaqItemCreate, FAQ_ITEMS):
                await storage.create(FaqItem, item.to_storage_dict())
            print(f"Seeded {len(FAQ_ITEMS)} FAQ items")
        else:
            print("FAQ items already present, skipping")

        for article in _validated(NewsArticleCreate, NEWS_ARTICLES):
            if await storage.get_news_article_by_slug(article.slug) is not None:
                print(f"News article {article.slug} already exists, skipping")
                continue
            await storage.create(NewsArticle, article.to_storage_dict())
            print(f"Seeded news article: {article.title}")
    print("Seed complete.")


if __name__ == "__main__":
    setup_logging()
    asyncio.run(seed())
