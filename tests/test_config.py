"""Settings validation: required DATABASE_URL and cross-field secret rules."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from fullbright.core.config import Settings
from tests.support import make_settings


class TestDatabaseUrl(unittest.TestCase):
    """DATABASE_URL is mandatory and must point at PostgreSQL."""

    def test_missing_is_an_error(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValidationError):
                Settings(_env_file=None, ADMIN_AUTH_ENABLED=False)

    def test_non_postgres_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="mysql://root@localhost/db")

    def test_blank_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="   ")

    def test_whitespace_stripped(self) -> None:
        settings = make_settings(DATABASE_URL="  postgresql://u:p@db:5432/fb  ")
        self.assertEqual(settings.DATABASE_URL, "postgresql://u:p@db:5432/fb")

    def test_read_from_environment(self) -> None:
        env = {
            "DATABASE_URL": "postgres://u:p@db/fb",
            "ADMIN_PASSWORD": "pw",
            "PORT": "8080",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.PORT, 8080)
        self.assertEqual(settings.ADMIN_PASSWORD.get_secret_value(), "pw")


class TestSecrets(unittest.TestCase):
    """Admin password and token secret are required only when their feature is on."""

    def test_admin_auth_without_password(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(ADMIN_AUTH_ENABLED=True, ADMIN_PASSWORD=None)

    def test_admin_auth_with_empty_password(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(ADMIN_AUTH_ENABLED=True, ADMIN_PASSWORD="")

    def test_open_admin_needs_no_password(self) -> None:
        settings = make_settings(ADMIN_AUTH_ENABLED=False, ADMIN_PASSWORD=None)
        self.assertFalse(settings.ADMIN_AUTH_ENABLED)

    def test_signed_scheme_requires_secret(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(TOKEN_SCHEME="signed")

    def test_unknown_scheme_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(TOKEN_SCHEME="rot13")


class TestMisc(unittest.TestCase):
    def test_port_range(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(PORT=70000)

    def test_defaults(self) -> None:
        settings = make_settings()
        self.assertEqual(settings.DEFAULT_ROLE, "USER")
        self.assertEqual(settings.TOKEN_PREFIX, "demo-token-")


if __name__ == "__main__":
    unittest.main()
