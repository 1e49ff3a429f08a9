"""
app/contact_store/base.py

Abstract interface for the contact ledger layer.

Design goals:
  - Services depend only on this interface, never on a concrete backend.
  - ContactRecord is the shared vocabulary between the store, the service
    and the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Mapping, Optional, Tuple

from app.core.exceptions import ValidationError

#: Fields the caller must supply, in ledger column order.
REQUIRED_FIELDS: Tuple[str, ...] = ("name", "email", "mobile")


# ── Shared data-transfer objects ──────────────────────────────────────────────

@dataclass(frozen=True)
class ContactRecord:
    """
    One row of the contact ledger.

    Attributes:
        name         : Submitted name, trimmed.
        email        : Submitted e-mail, trimmed. Not format-checked.
        mobile       : Submitted phone number, trimmed.
        submitted_at : Server-side UTC timestamp taken at append time.
        extra        : Values of columns added to the workbook by hand.
    """

    name: str
    email: str
    mobile: str
    submitted_at: datetime
    # Hand-added columns as (header, value) pairs; carried through rewrites
    # but not part of record identity.
    extra: Tuple[Tuple[str, object], ...] = field(default=(), compare=False)

    @property
    def date(self) -> str:
        """ISO-8601 text written to the ledger's ``date`` column."""
        return format_timestamp(self.submitted_at)


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as UTC ISO-8601 with millisecond precision and a Z suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def parse_timestamp(value: object) -> datetime:
    """
    Inverse of :func:`format_timestamp`.

    Also accepts native ``datetime`` cells, which appear when the workbook
    has been edited by hand in a spreadsheet program.

    Raises:
        ValueError: If ``value`` is neither a datetime nor ISO-8601 text.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"not a timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def validate_candidate(candidate: Mapping[str, Optional[str]]) -> Tuple[str, str, str]:
    """
    Check that every required field is present and non-blank.

    Returns:
        The trimmed ``(name, email, mobile)`` triple.

    Raises:
        ValidationError: If any field is missing, not text, or whitespace-only.
    """
    cleaned: List[str] = []
    missing: List[str] = []
    for field_name in REQUIRED_FIELDS:
        value = candidate.get(field_name)
        if not isinstance(value, str) or not value.strip():
            missing.append(field_name)
        else:
            cleaned.append(value.strip())

    if missing:
        raise ValidationError(f"All fields are required. Missing: {', '.join(missing)}.")

    name, email, mobile = cleaned
    return name, email, mobile


# ── Abstract base ──────────────────────────────────────────────────────────────

class ContactStore(ABC):
    """
    Contract every contact-ledger backend must fulfil.

    The ledger is append-only from the application's point of view: records
    are never mutated or deleted, duplicates are allowed, and insertion order
    is preserved.
    """

    @abstractmethod
    def load(self) -> List[ContactRecord]:
        """
        Return every record currently in the ledger, oldest first.

        A ledger that does not exist yet is an empty ledger, not an error.

        Raises:
            StorageReadError: If the ledger exists but cannot be parsed.
        """

    @abstractmethod
    def append(self, candidate: Mapping[str, Optional[str]]) -> ContactRecord:
        """
        Validate ``candidate``, stamp it and add it to the end of the ledger.

        Concurrent calls on the same store must all be persisted; none may
        overwrite another.

        Args:
            candidate: Mapping with ``name``, ``email`` and ``mobile`` keys.

        Returns:
            The record exactly as persisted, including its timestamp.

        Raises:
            ValidationError  : A required field is missing or blank. Raised
                               before the ledger is touched.
            StorageReadError : The existing ledger is unreadable.
            StorageWriteError: The updated ledger could not be written.
        """
