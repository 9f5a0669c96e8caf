"""
Unit tests for SensitiveDataSanitizer.
"""

import pytest

from helperkit.core.security import SensitiveDataSanitizer


class TestSanitizeHeaders:
    def test_provider_headers_redacted(self):
        headers = {
            "x-functions-key": "a",
            "X-API-Key": "b",
            "Authorization": "Bearer c",
            "Accept": "application/json",
        }

        sanitized = SensitiveDataSanitizer.sanitize_headers(headers)

        assert sanitized == {
            "x-functions-key": "[REDACTED]",
            "X-API-Key": "[REDACTED]",
            "Authorization": "[REDACTED]",
            "Accept": "application/json",
        }

    def test_extra_sensitive_names(self):
        sanitized = SensitiveDataSanitizer.sanitize_headers(
            {"X-Custom-Auth": "secret", "x-tenant": "acme"}, {"x-custom-auth"}
        )

        assert sanitized == {"X-Custom-Auth": "[REDACTED]", "x-tenant": "acme"}

    def test_input_not_modified(self):
        headers = {"Authorization": "Bearer c"}

        SensitiveDataSanitizer.sanitize_headers(headers)

        assert headers == {"Authorization": "Bearer c"}


class TestMaskCredential:
    @pytest.mark.parametrize(
        "credential,expected",
        [
            ("", "[empty]"),
            (None, "[empty]"),
            ("abc", "***"),
            ("abcd", "****"),
            ("abcdefgh", "****efgh"),
        ],
    )
    def test_mask(self, credential, expected):
        assert SensitiveDataSanitizer.mask_credential(credential) == expected

    def test_visible_chars(self):
        assert SensitiveDataSanitizer.mask_credential("abcdef", visible_chars=2) == "****ef"
