"""Read a ledger CSV export into a :class:`~transmailifier.models.Ledger`.

Mapping rules (per :class:`~transmailifier.ingest.profiles.Profile`):

- ``time``: date column parsed with ``profile.date_format``
- ``amount`` / ``state``: parsed with :func:`parse_amount`
- ``category``: trimmed; empty becomes ``None`` (uncategorized)
- ``payee`` / ``note``: whitespace collapsed, empty stays ``""``
- ``processed``: always ``False``; the store decides later

Rows where every cell is blank are skipped. Any other bad row fails the whole
read with a :class:`~transmailifier.errors.ReadError` naming the data row.
"""

from __future__ import annotations

import csv
import re
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from os import PathLike
from pathlib import Path
from typing import IO, Protocol

from ..errors import ReadError
from ..logging_setup import get_logger
from ..models import Ledger, Transaction
from .profiles import Profile, get_profile

_logger = get_logger("transmailifier.ingest.reader")


class LedgerReader(Protocol):
    def read(self, file: IO[str], profile_name: str) -> Ledger: ...


def _clean_text(value: str | None) -> str:
    if value is None:
        return ""
    return re.sub(r"\s+", " ", value).strip()


def parse_amount(raw: str | None, profile: Profile) -> Decimal:
    """Parse a money cell written in the profile's number style.

    Accepts a leading currency-free sign, accounting parentheses
    (``(12,50)`` is negative) and the profile's thousands separator.
    """

    s = (raw or "").strip().replace(" ", "").replace("\u00a0", "")
    if not s:
        raise ValueError("empty amount")
    negative = False
    if s.startswith("(") and s.endswith(")"):
        negative = True
        s = s[1:-1]
    if profile.thousands_separator:
        s = s.replace(profile.thousands_separator, "")
    if profile.decimal_separator != ".":
        s = s.replace(profile.decimal_separator, ".")
    try:
        value = Decimal(s)
    except InvalidOperation as e:
        raise ValueError(f"not a number: {raw!r}") from e
    if not value.is_finite():
        raise ValueError(f"not a number: {raw!r}")
    return -value if negative else value


def _parse_date(raw: str | None, profile: Profile) -> date:
    s = (raw or "").strip()
    if not s:
        raise ValueError("empty date")
    try:
        return datetime.strptime(s, profile.date_format).date()
    except ValueError as e:
        raise ValueError(f"date {s!r} does not match {profile.date_format!r}") from e


def _is_blank(row: Mapping[str, str | None]) -> bool:
    return all(not v.strip() for v in row.values() if isinstance(v, str))


def _to_transaction(row: Mapping[str, str | None], profile: Profile) -> Transaction:
    category = _clean_text(row.get(profile.category_column))
    return Transaction(
        time=_parse_date(row.get(profile.date_column), profile),
        amount=parse_amount(row.get(profile.amount_column), profile),
        state=parse_amount(row.get(profile.state_column), profile),
        category=category or None,
        payee=_clean_text(row.get(profile.payee_column)),
        note=_clean_text(row.get(profile.note_column)),
    )


def read_ledger(file: IO[str], profile_name: str) -> Ledger:
    """Parse an open CSV text stream with the named profile."""

    profile = get_profile(profile_name)
    try:
        reader = csv.DictReader(file, delimiter=profile.delimiter)
        headers = {h.strip() for h in (reader.fieldnames or []) if h}
        if not headers:
            raise ReadError("Ledger file appears to have no header row")
        missing = sorted(c for c in profile.required_columns if c not in headers)
        if missing:
            raise ReadError(
                f"Ledger header does not match profile {profile.name!r}. "
                "Missing columns: " + ", ".join(missing)
            )
        # Normalize header whitespace so lookups by profile column names work.
        reader.fieldnames = [h.strip() if h else h for h in reader.fieldnames or []]

        transactions: list[Transaction] = []
        for row_no, row in enumerate(reader, start=1):
            if _is_blank(row):
                continue
            try:
                transactions.append(_to_transaction(row, profile))
            except ValueError as e:
                raise ReadError(f"Row {row_no}: {e}") from e
    except csv.Error as e:
        raise ReadError(f"Failed to parse CSV: {e}") from e

    _logger.info("Read %d transactions with profile %s", len(transactions), profile.name)
    return Ledger(currency=profile.currency, transactions=transactions)


def load_ledger_file(path: str | PathLike[str], profile_name: str) -> Ledger:
    """Open ``path`` and read it with :func:`read_ledger`.

    Resolves the profile first so an unknown profile is reported even when the
    file is also missing.
    """

    get_profile(profile_name)
    p = Path(path)
    try:
        with p.open(encoding="utf-8-sig", newline="") as f:
            return read_ledger(f, profile_name)
    except FileNotFoundError as e:
        raise ReadError(f"File not found: {p}") from e
    except PermissionError as e:
        raise ReadError(f"Permission denied: {p}") from e
    except UnicodeDecodeError as e:
        raise ReadError(f"File is not valid UTF-8 text: {p}") from e
    except IsADirectoryError as e:
        raise ReadError(f"Not a file: {p}") from e
    except OSError as e:
        raise ReadError(f"Unable to read {p}: {e}") from e


class CsvLedgerReader:
    """:class:`LedgerReader` over :func:`read_ledger`."""

    def read(self, file: IO[str], profile_name: str) -> Ledger:
        return read_ledger(file, profile_name)


__all__ = ["CsvLedgerReader", "LedgerReader", "load_ledger_file", "parse_amount", "read_ledger"]
