"""
app/core/exceptions.py

Custom exception hierarchy for the application.

Raising typed exceptions from services lets controllers catch specific
cases and return the correct HTTP status code without leaking internals.
"""


class AppBaseException(Exception):
    """Root exception — catch-all for any application-level error."""


# ── Caller errors (4xx) ────────────────────────────────────────────────────────

class ValidationError(AppBaseException):
    """Raised when required caller input is missing or blank."""


class NotFoundError(AppBaseException):
    """Raised when a referenced directory or category does not exist."""


# ── Contact ledger exceptions ──────────────────────────────────────────────────

class StorageError(AppBaseException):
    """Raised when the contact ledger cannot be read or written."""


class StorageReadError(StorageError):
    """Raised when an existing ledger file is unreadable or malformed."""


class StorageWriteError(StorageError):
    """Raised when the updated ledger could not be persisted."""


# ── Report catalogue exceptions ────────────────────────────────────────────────

class CatalogError(AppBaseException):
    """Raised when enumerating the report tree fails unexpectedly."""
