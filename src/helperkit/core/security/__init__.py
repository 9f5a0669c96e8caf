"""Security helpers: secret masking and protected in-memory strings."""

from .sanitizer import SensitiveDataSanitizer
from .secure_string import SecureString, reveal

__all__ = ["SensitiveDataSanitizer", "SecureString", "reveal"]
