"""
Admin setup, login and configuration bootstrap against an in-memory database.
Run from the project root: python -m pytest tests/test_admin_auth.py -v
"""
import unittest

from errors import AuthError, ConflictError
from schemas import AdminLogin, AdminSetup
from services.admin_auth import bootstrap_admin, login, setup_admin
from tests.support import StorageTestCase


class TestAdminAuth(StorageTestCase):
    async def test_setup_only_once(self):
        await setup_admin(self.storage, AdminSetup(username="admin", password="correct-horse"))
        with self.assertRaises(ConflictError):
            await setup_admin(self.storage, AdminSetup(username="other", password="another-pass"))

    async def test_login_same_error_for_unknown_user_and_bad_password(self):
        await setup_admin(self.storage, AdminSetup(username="admin", password="correct-horse"))
        with self.assertRaises(AuthError) as unknown:
            await login(self.storage, AdminLogin(username="ghost", password="correct-horse"))
        with self.assertRaises(AuthError) as wrong:
            await login(self.storage, AdminLogin(username="admin", password="nope"))
        self.assertEqual(unknown.exception.message, wrong.exception.message)
        ok = await login(self.storage, AdminLogin(username="admin", password="correct-horse"))
        self.assertTrue(ok["success"])

    async def test_bootstrap_creates_admin_once(self):
        self.assertTrue(await bootstrap_admin(self.storage, "admin", "correct-horse"))
        self.assertFalse(await bootstrap_admin(self.storage, "admin", "correct-horse"))
        self.assertEqual(await self.storage.count_admin_users(), 1)

    async def test_bootstrap_with_short_password_logs_and_skips(self):
        with self.assertLogs("services.admin_auth", level="ERROR") as logs:
            created = await bootstrap_admin(self.storage, "admin", "short")
        self.assertFalse(created)
        self.assertIn("password", logs.output[0])
        self.assertEqual(await self.storage.count_admin_users(), 0)


if __name__ == "__main__":
    unittest.main()
