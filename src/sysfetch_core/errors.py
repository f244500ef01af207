"""
Exceptions raised while gathering system information.

Every failure aborts the whole gather; callers catch ``SysfetchError``.
"""

from __future__ import annotations


class SysfetchError(Exception):
    """Base class for all gather failures."""


class SourceReadError(SysfetchError):
    """A required OS source file could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed reading {path}: {reason}")


class MissingFieldError(SysfetchError):
    """A required key was absent or had no value."""

    def __init__(self, field: str, source: str):
        self.field = field
        self.source = source
        super().__init__(f"Missing '{field}' in {source}")


class IdentityError(SysfetchError):
    """The login name or a uname field could not be obtained as text."""


class ConversionError(SysfetchError, ValueError):
    """A numeric value could not be parsed or converted."""
