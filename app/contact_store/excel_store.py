"""
app/contact_store/excel_store.py

openpyxl implementation of the ContactStore interface.

The ledger is a single .xlsx workbook with one sheet ("Contacts") and a
header row.  The format has no incremental-append primitive, so every
append re-reads the whole workbook and writes a fresh snapshot.  All
backend-specific details are contained here — the rest of the
application never imports from `openpyxl` directly.
"""

from __future__ import annotations

import os
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from openpyxl import Workbook, load_workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from app.contact_store.base import (
    REQUIRED_FIELDS,
    ContactRecord,
    ContactStore,
    format_timestamp,
    parse_timestamp,
    validate_candidate,
)
from app.core.config import settings
from app.core.constants import LEDGER_COLUMNS, LEDGER_SHEET_NAME
from app.core.exceptions import StorageReadError, StorageWriteError, ValidationError
from app.core.logger import get_logger

logger = get_logger(__name__)

#: Extensions the ledger may be saved under; a fresh Workbook is plain .xlsx.
SUPPORTED_SUFFIXES: Tuple[str, ...] = (".xlsx",)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _cell_text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


class ExcelContactStore(ContactStore):
    """
    ContactStore backed by an .xlsx workbook on local disk.

    Every ``append`` runs load → append → persist while holding a
    per-instance lock, so concurrent submissions handled by the same
    process are serialised and none is lost.  Only one instance should
    point at a given file; cross-process writers are not coordinated.

    Columns added to the sheet by hand are kept: their values ride along
    on each record and are written back after the four ledger columns.
    Text is always written as string cells, so a value such as
    ``=Sales Team`` is stored verbatim rather than as a formula.
    """

    def __init__(
        self,
        ledger_path: str | Path | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Args:
            ledger_path : Location of the workbook. Defaults to ``settings.ledger_path``.
            clock       : Zero-argument callable returning the current time.
                          Defaults to ``datetime.now(timezone.utc)``.

        Raises:
            ValueError: If the path does not name an .xlsx workbook.
        """
        self._path = Path(ledger_path or settings.ledger_path)
        if self._path.suffix.lower() not in SUPPORTED_SUFFIXES:
            raise ValueError(
                f"Ledger path '{self._path}' must end in one of: {', '.join(SUPPORTED_SUFFIXES)}"
            )
        self._clock = clock or _utc_now
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    # ── ContactStore interface ─────────────────────────────────────────────────

    def load(self) -> List[ContactRecord]:
        """Read every row of the ledger. Missing file → empty list."""
        records, _ = self._read()
        return records

    def append(self, candidate: Mapping[str, Optional[str]]) -> ContactRecord:
        """Validate, stamp and persist one record under the ledger lock."""
        name, email, mobile = validate_candidate(candidate)

        unstorable = [
            field_name
            for field_name, value in zip(REQUIRED_FIELDS, (name, email, mobile))
            if ILLEGAL_CHARACTERS_RE.search(value)
        ]
        if unstorable:
            raise ValidationError(
                f"Fields contain control characters that cannot be stored: {', '.join(unstorable)}."
            )

        with self._lock:
            records, extra_columns = self._read()
            if not records and not self._path.exists():
                logger.info("Ledger '%s' not found — creating a new one.", self._path)

            # Round-trip through the persisted text so the returned record
            # equals the row a later load() produces.
            record = ContactRecord(
                name=name,
                email=email,
                mobile=mobile,
                submitted_at=parse_timestamp(format_timestamp(self._clock())),
            )
            records.append(record)
            self._persist(records, extra_columns)

        logger.debug("Ledger '%s' now holds %d record(s).", self._path, len(records))
        return record

    # ── Internals ──────────────────────────────────────────────────────────────

    def _read(self) -> Tuple[List[ContactRecord], List[str]]:
        """Return the ledger's records and the names of any hand-added columns."""
        if not self._path.exists():
            return [], []

        try:
            workbook = load_workbook(self._path, read_only=True, data_only=True)
        except FileNotFoundError:
            return [], []
        except Exception as exc:
            raise StorageReadError(f"Ledger '{self._path}' could not be opened: {exc}") from exc

        try:
            if not workbook.worksheets:
                raise StorageReadError(f"Ledger '{self._path}' contains no worksheets.")
            rows = list(workbook.worksheets[0].iter_rows(values_only=True))
        except StorageReadError:
            raise
        except Exception as exc:
            raise StorageReadError(f"Ledger '{self._path}' could not be read: {exc}") from exc
        finally:
            workbook.close()

        return self._parse_rows(rows)

    def _parse_rows(self, rows: List[tuple]) -> Tuple[List[ContactRecord], List[str]]:
        """Map worksheet rows to records, locating columns by header name."""
        if not rows:
            raise StorageReadError(f"Ledger '{self._path}' has no header row.")

        header = [_cell_text(cell).lower() for cell in rows[0]]
        missing = [col for col in LEDGER_COLUMNS if col not in header]
        if missing:
            raise StorageReadError(
                f"Ledger '{self._path}' header is missing column(s): {', '.join(missing)}"
            )
        index: Dict[str, int] = {col: header.index(col) for col in LEDGER_COLUMNS}

        # Named columns beyond the ledger's own, in sheet order.  Unnamed
        # columns have nothing to write back under and are dropped.
        extra_index = [
            (_cell_text(rows[0][pos]), pos)
            for pos, name in enumerate(header)
            if name and pos not in index.values()
        ]

        records: List[ContactRecord] = []
        for line_no, row in enumerate(rows[1:], start=2):
            if row is None or all(cell is None or _cell_text(cell) == "" for cell in row):
                continue

            def cell(pos: int) -> object:
                return row[pos] if pos < len(row) else None

            try:
                submitted_at = parse_timestamp(cell(index["date"]))
            except ValueError as exc:
                raise StorageReadError(
                    f"Ledger '{self._path}' row {line_no} has an invalid date: {exc}"
                ) from exc

            records.append(
                ContactRecord(
                    name=_cell_text(cell(index["name"])),
                    email=_cell_text(cell(index["email"])),
                    mobile=_cell_text(cell(index["mobile"])),
                    submitted_at=submitted_at,
                    extra=tuple((title, cell(pos)) for title, pos in extra_index),
                )
            )
        return records, [title for title, _ in extra_index]

    def _build_workbook(self, records: List[ContactRecord], extra_columns: List[str]) -> Workbook:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = LEDGER_SHEET_NAME

        rows = [list(LEDGER_COLUMNS) + extra_columns]
        for record in records:
            extras = dict(record.extra)
            rows.append(
                [record.name, record.email, record.mobile, record.date]
                + [extras.get(title) for title in extra_columns]
            )

        for row in rows:
            sheet.append(row)
            # Text goes in as string cells; openpyxl would otherwise read
            # a leading "=" as a formula.
            for written in sheet[sheet.max_row]:
                if isinstance(written.value, str):
                    written.data_type = "s"
        return workbook

    def _persist(self, records: List[ContactRecord], extra_columns: List[str]) -> None:
        """
        Write a full snapshot of ``records`` and swap it into place.

        The workbook is saved to a temporary file beside the ledger, fsynced,
        then renamed over the ledger with ``os.replace``; a crash mid-write
        leaves the previous ledger intact.
        """
        tmp_name: Optional[str] = None
        try:
            workbook = self._build_workbook(records, extra_columns)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "wb") as fh:
                workbook.save(fh)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except Exception as exc:
            raise StorageWriteError(f"Ledger '{self._path}' could not be written: {exc}") from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("Could not remove temporary ledger file '%s'.", tmp_name)
