"""
app/services/contact_service.py

Orchestrates a contact submission:

    ContactRequest
      └─ ContactStore.append()   validate → load → append → persist
           └─ ContactRecord      (returned for acknowledgement)

The store is blocking file I/O, so it runs in a worker thread; the
store's own lock serialises concurrent submissions.  The store is
constructor-injected so tests can point it at a temp file or a mock;
the module-level singleton wires in the real workbook.
"""

from __future__ import annotations

import asyncio

from app.contact_store.base import ContactRecord, ContactStore, validate_candidate
from app.contact_store.excel_store import ExcelContactStore
from app.core.logger import get_logger
from app.models.contact_models import ContactRequest

logger = get_logger(__name__)


class ContactService:
    """Accepts contact submissions and appends them to the ledger."""

    def __init__(self, store: ContactStore | None = None) -> None:
        self._store: ContactStore = store or ExcelContactStore()

    async def submit(self, request: ContactRequest) -> ContactRecord:
        """
        Persist one contact submission.

        Failures are not retried; the caller resubmits.

        Raises:
            ValidationError  : A field is missing or blank (no I/O performed).
            StorageReadError : The existing ledger is unreadable.
            StorageWriteError: The ledger could not be written.
        """
        candidate = request.model_dump()
        # Fail fast on the event loop; the store re-checks under its contract.
        validate_candidate(candidate)

        record = await asyncio.to_thread(self._store.append, candidate)
        logger.info("Contact saved — submitted_at=%s", record.date)
        return record


# ── Module-level singleton ─────────────────────────────────────────────────────
# Controllers import this instance.  Tests construct ContactService directly
# with an injected store.

contact_service = ContactService()
