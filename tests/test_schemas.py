"""Unit tests for userauth.schemas.auth: email normalization shared by API and CLI."""

import unittest

from pydantic import ValidationError

from userauth.schemas.auth import CredentialsRequest, normalize_email


class TestNormalizeEmail(unittest.TestCase):
    def test_lowercases_domain_only(self) -> None:
        self.assertEqual(normalize_email("Admin@Example.COM"), "Admin@example.com")

    def test_strips_surrounding_whitespace(self) -> None:
        self.assertEqual(normalize_email("  a@b.com "), "a@b.com")

    def test_matches_request_schema(self) -> None:
        body = CredentialsRequest(email="a@B.com", password="pw")
        self.assertEqual(normalize_email("a@B.com"), body.email)

    def test_invalid_address_rejected(self) -> None:
        for value in ("", "   ", "not-an-email", "a@"):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    normalize_email(value)
