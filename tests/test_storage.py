"""
Storage facade behaviour against an in-memory SQLite database.
Run from the project root: python -m pytest tests/test_storage.py -v
"""
import unittest

from errors import NotFoundError, StorageUnavailableError
from models import AccountApplication, Branch, ContactMessage, FaqItem, NewsArticle, PageContentSection
from schemas import AccountApplicationCreate, FaqItemCreate, NewsArticleCreate, validate
from services.seed import DEFAULT_BRANCH, seed_default_branch
from tests.support import StorageTestCase, account_application_payload, faq_item_payload, news_article_payload
from utils.case import row_to_response


def _insertable(schema, payload):
    result = validate(schema, payload)
    assert result.ok, result.errors
    return result.value.to_storage_dict()


class TestCreateAndRead(StorageTestCase):
    async def test_create_assigns_id_status_and_timestamp(self):
        row = await self.storage.create(AccountApplication, _insertable(AccountApplicationCreate, account_application_payload()))
        self.assertIsInstance(row.id, int)
        self.assertGreater(row.id, 0)
        self.assertEqual(row.status, "pending")
        self.assertIsNotNone(row.created_at)
        self.assertEqual(row.initial_deposit, 1000)

    async def test_contact_message_default_status(self):
        row = await self.storage.create(
            ContactMessage,
            {"first_name": "Ada", "last_name": "Obi", "email": "a@b.c", "subject": "Hi", "message": "Hello"},
        )
        self.assertEqual(row.status, "new")

    async def test_get_after_create_matches_from_a_new_session(self):
        created = await self.storage.create(
            AccountApplication, _insertable(AccountApplicationCreate, account_application_payload())
        )
        fetched = await self.fresh_storage().get(AccountApplication, created.id)
        self.assertIsNot(fetched, created)
        self.assertEqual(row_to_response(fetched), row_to_response(created))

    async def test_list_is_stable_without_writes(self):
        for i in range(3):
            await self.storage.create(
                AccountApplication,
                _insertable(AccountApplicationCreate, account_application_payload(email=f"user{i}@example.com")),
            )
        first = [r.id for r in await self.storage.list_all(AccountApplication)]
        second = [r.id for r in await self.storage.list_all(AccountApplication)]
        self.assertEqual(first, second)
        self.assertEqual(len(first), 3)

    async def test_list_empty_table(self):
        self.assertEqual(await self.storage.list_all(ContactMessage), [])

    async def test_get_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            await self.storage.get(AccountApplication, 999)
        self.assertEqual(ctx.exception.message, "Account application not found")


class TestUpdateAndDelete(StorageTestCase):
    async def test_update_replaces_fields_and_bumps_updated_at(self):
        row = await self.storage.create(NewsArticle, _insertable(NewsArticleCreate, news_article_payload()))
        original_updated = row.updated_at
        changed = _insertable(NewsArticleCreate, news_article_payload(title="Revised", featured=True))
        updated = await self.storage.update(NewsArticle, row.id, changed)
        self.assertEqual(updated.id, row.id)
        self.assertEqual(updated.title, "Revised")
        self.assertTrue(updated.featured)
        self.assertGreaterEqual(updated.updated_at, original_updated)

    async def test_update_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            await self.storage.update(NewsArticle, 42, _insertable(NewsArticleCreate, news_article_payload()))

    async def test_delete_then_get_not_found(self):
        row = await self.storage.create(FaqItem, _insertable(FaqItemCreate, faq_item_payload()))
        await self.storage.delete(FaqItem, row.id)
        with self.assertRaises(NotFoundError):
            await self.fresh_storage().get(FaqItem, row.id)

    async def test_delete_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            await self.storage.delete(FaqItem, 123)
        with self.assertRaises(NotFoundError):
            await self.storage.get(FaqItem, 123)


class TestOrderingAndFilters(StorageTestCase):
    async def test_page_sections_ordered_by_order_index_per_page(self):
        for title, order_index, page in (("c", 2, "home"), ("a", 0, "home"), ("b", 1, "home"), ("x", 0, "about")):
            await self.storage.create(
                PageContentSection,
                {"page_id": page, "section_type": "text", "title": title, "content": "...", "order_index": order_index},
            )
        rows = await self.storage.list_page_content_sections("home")
        self.assertEqual([r.title for r in rows], ["a", "b", "c"])

    async def test_duplicate_order_index_is_allowed(self):
        for title in ("first", "second"):
            await self.storage.create(
                PageContentSection,
                {"page_id": "home", "section_type": "text", "title": title, "content": "...", "order_index": 1},
            )
        rows = await self.storage.list_page_content_sections("home")
        self.assertEqual([r.title for r in rows], ["first", "second"])

    async def test_list_content_hides_inactive_unless_asked(self):
        await self.storage.create(FaqItem, _insertable(FaqItemCreate, faq_item_payload(question="Later?", sortOrder=2)))
        await self.storage.create(FaqItem, _insertable(FaqItemCreate, faq_item_payload(question="First?", sortOrder=1)))
        await self.storage.create(FaqItem, _insertable(FaqItemCreate, faq_item_payload(question="Hidden?", isActive=False)))
        public = await self.storage.list_content(FaqItem)
        self.assertEqual([r.question for r in public], ["First?", "Later?"])
        everything = await self.storage.list_content(FaqItem, include_inactive=True)
        self.assertEqual([r.question for r in everything], ["Hidden?", "First?", "Later?"])

    async def test_news_category_filter_and_featured(self):
        await self.storage.create(NewsArticle, _insertable(NewsArticleCreate, news_article_payload(slug="a", category="Business")))
        await self.storage.create(
            NewsArticle,
            _insertable(NewsArticleCreate, news_article_payload(slug="b", category="Technology", featured=True)),
        )
        tech = await self.storage.list_news_articles("Technology")
        self.assertEqual([r.slug for r in tech], ["b"])
        self.assertEqual(len(await self.storage.list_news_articles("All")), 2)
        featured = await self.storage.get_featured_news_article()
        self.assertEqual(featured.slug, "b")
        self.assertEqual((await self.storage.get_news_article_by_slug("a")).category, "Business")
        self.assertIsNone(await self.storage.get_news_article_by_slug("missing"))

    async def test_no_featured_article(self):
        self.assertIsNone(await self.storage.get_featured_news_article())


class TestSeedingAndFailures(StorageTestCase):
    async def test_seed_default_branch_once(self):
        self.assertTrue(await seed_default_branch(self.storage))
        self.assertFalse(await seed_default_branch(self.storage))
        branches = await self.storage.list_branches()
        self.assertEqual(len(branches), 1)
        self.assertEqual(branches[0].name, "Lead City University Branch")

    async def test_list_branches_does_not_seed(self):
        self.assertEqual(await self.storage.list_branches(), [])
        self.assertEqual(await self.storage.count(Branch), 0)

    async def test_constraint_violation_surfaces_as_storage_unavailable(self):
        branch = {k: DEFAULT_BRANCH[k] for k in ("name", "address", "phone", "hours")}
        await self.storage.create(Branch, branch)
        with self.assertRaises(StorageUnavailableError):
            await self.storage.create(Branch, dict(branch))
        # The session is usable again after the rollback.
        self.assertEqual(await self.storage.count(Branch), 1)

    async def test_admin_users(self):
        self.assertEqual(await self.storage.count_admin_users(), 0)
        await self.storage.create_admin_user("admin", "hash")
        self.assertEqual((await self.storage.get_admin_user("admin")).password_hash, "hash")
        self.assertIsNone(await self.storage.get_admin_user("nobody"))


if __name__ == "__main__":
    unittest.main()
