"""
app/core/constants.py

Application-wide fixed constants.

These are business rules that are part of the system's contract and are
NOT configurable via environment variables.
"""

from typing import Tuple

# ── Report catalogue ───────────────────────────────────────────────────────────

#: Only PDF files are listed as reports (matched case-insensitively).
REPORT_EXTENSION: str = ".pdf"

# ── Contact ledger ─────────────────────────────────────────────────────────────

#: Name of the single worksheet the ledger is written to.
LEDGER_SHEET_NAME: str = "Contacts"

#: Header row of the ledger, in column order.
LEDGER_COLUMNS: Tuple[str, ...] = ("name", "email", "mobile", "date")

#: Acknowledgement returned to the client after a successful submission.
CONTACT_SAVED_MESSAGE: str = "Contact saved."
