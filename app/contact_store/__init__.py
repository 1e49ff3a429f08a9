"""app/contact_store/__init__.py — public API of the contact_store package."""

from app.contact_store.base import ContactRecord, ContactStore
from app.contact_store.excel_store import ExcelContactStore

__all__ = [
    "ContactStore",
    "ContactRecord",
    "ExcelContactStore",
]
