"""
Sensitive data sanitization.

Masks credentials and auth headers before they reach log output.
"""

from typing import Mapping, Dict, Set

from ...constants import AWS_AUTH_HEADER, AZURE_AUTH_HEADER, GCP_AUTH_HEADER


class SensitiveDataSanitizer:
    """Sanitize sensitive data from headers and credentials."""

    SENSITIVE_HEADER_KEYS: Set[str] = {
        AZURE_AUTH_HEADER,
        AWS_AUTH_HEADER,
        GCP_AUTH_HEADER.lower(),
        "x-apikey",
        "cookie",
        "set-cookie",
        "x-csrf-token",
        "proxy-authorization",
        "x-auth-token",
        "x-session-token",
    }

    @classmethod
    def sanitize_headers(
        cls, headers: Mapping[str, str], extra_sensitive: Set[str] = frozenset()
    ) -> Dict[str, str]:
        """Return a copy of ``headers`` with sensitive values redacted.

        ``extra_sensitive`` names additional headers to redact, such as a
        custom auth header configured at runtime.
        """
        sensitive = cls.SENSITIVE_HEADER_KEYS | {name.lower() for name in extra_sensitive}
        sanitized = {}
        for key, value in headers.items():
            if key.lower() in sensitive:
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = value
        return sanitized

    @staticmethod
    def mask_credential(credential: str, visible_chars: int = 4) -> str:
        """Mask a credential for display, keeping the last ``visible_chars`` characters."""
        if not credential:
            return "[empty]"

        if len(credential) <= visible_chars:
            return "*" * len(credential)

        return "*" * (len(credential) - visible_chars) + credential[-visible_chars:]
