"""Unit tests for sysapi.core.config.Settings validators."""

import unittest

from pydantic import ValidationError

from sysapi.core.config import Settings


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None, DATABASE_URL="sqlite://")
        self.assertEqual(settings.DB_POOL_SIZE, 3)
        self.assertEqual(settings.SYS_PREFIX, "/sys")
        self.assertEqual(settings.SESSION_COOKIE_NAME, "user_session")
        self.assertEqual(settings.ORIGINAL_URI_COOKIE_NAME, "original_request_cookie")

    def test_development_mode(self) -> None:
        self.assertTrue(Settings(_env_file=None, APP_ENV="dev").development_mode)
        self.assertFalse(Settings(_env_file=None, APP_ENV="prod").development_mode)

    def test_rejects_unknown_database_scheme(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="mysql://root@localhost/db")

    def test_accepts_postgres_driver_url(self) -> None:
        settings = Settings(
            _env_file=None, DATABASE_URL=" postgresql+psycopg2://u:p@db:5432/sysapi "
        )
        self.assertEqual(settings.DATABASE_URL, "postgresql+psycopg2://u:p@db:5432/sysapi")

    def test_pool_size_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DB_POOL_SIZE=0)

    def test_log_level_normalised(self) -> None:
        self.assertEqual(Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="chatty")

    def test_sys_prefix(self) -> None:
        self.assertEqual(Settings(_env_file=None, SYS_PREFIX="/admin/").SYS_PREFIX, "/admin")
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, SYS_PREFIX="sys")


if __name__ == "__main__":
    unittest.main()
