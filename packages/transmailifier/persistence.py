# ruff: noqa: I001
"""Processed-flag store for transmailifier.

Ledger files carry no identifiers, so each line is identified by a
fingerprint over its canonical fields. A line is processed when its
fingerprint is present in ``tm_processed_transactions`` (model owned by
``libs/db``).

Scope:
- Look up which lines of a freshly read ledger were processed before.
- Record newly confirmed lines, all in one database transaction.
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable, Sequence
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from db.client import session_scope
from db.models.processing import TmProcessedTransaction
from .errors import CommitError, ReadError
from .logging_setup import get_logger
from .models import Ledger, Transaction

_logger = get_logger("transmailifier.persistence")

# Stay well below SQLite's bound-parameter limit for IN (...) lookups.
_LOOKUP_CHUNK = 500


def _decimal_2(value: Decimal) -> str:
    return f"{value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):.2f}"


def compute_fingerprint(tx: Transaction, *, profile: str) -> str:
    """Compute a stable SHA-256 fingerprint over canonical fields.

    Fields used: profile (lowercased), date (YYYY-MM-DD), amount and state
    (2dp strings), payee and note (trimmed). The category is left out so that
    categorizing a line later does not make it look new.
    """

    payload = {
        "profile": (profile or "").strip().lower(),
        "date": tx.time.isoformat(),
        "amount": _decimal_2(tx.amount),
        "state": _decimal_2(tx.state),
        "payee": tx.payee.strip(),
        "note": tx.note.strip(),
    }
    data = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


def _chunks(items: Sequence[str], size: int) -> Iterable[Sequence[str]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


class SqlProcessedStore:
    """Fingerprint store implementing the ``PersistenceCommitter`` protocol.

    Parameters
    ----------
    profile:
        Profile name mixed into fingerprints, so identical lines from two
        different exports stay distinct.
    database_url:
        SQLAlchemy URL; ``None`` falls back to ``DATABASE_URL``.
    """

    def __init__(self, *, profile: str, database_url: str | None = None) -> None:
        self.profile = profile
        self.database_url = database_url

    def _stored(self, session, fingerprints: Sequence[str]) -> set[str]:
        found: set[str] = set()
        for chunk in _chunks(list(fingerprints), _LOOKUP_CHUNK):
            stmt = select(TmProcessedTransaction.fingerprint_sha256).where(
                TmProcessedTransaction.fingerprint_sha256.in_(chunk)
            )
            found.update(session.scalars(stmt).all())
        return found

    def apply_processed_flags(self, ledger: Ledger) -> Ledger:
        """Return a copy of ``ledger`` with stored lines marked processed."""

        fps = [compute_fingerprint(tx, profile=self.profile) for tx in ledger]
        try:
            with session_scope(database_url=self.database_url) as session:
                stored = self._stored(session, fps)
        except (SQLAlchemyError, RuntimeError) as e:
            raise ReadError(f"Unable to load processed flags: {e}") from e

        transactions = [
            replace(tx, processed=True) if fp in stored and not tx.processed else tx
            for tx, fp in zip(ledger, fps, strict=True)
        ]
        _logger.info("%d of %d transactions already processed", len(stored), len(fps))
        return Ledger(currency=ledger.currency, transactions=transactions)

    def mark_processed(self, transactions: Sequence[Transaction]) -> int:
        """Store fingerprints for ``transactions`` in a single transaction.

        Fingerprints already present are skipped. Returns the number of
        transactions handed in. Any database failure rolls the whole batch
        back and raises :class:`CommitError`.
        """

        by_fp: dict[str, Transaction] = {}
        for tx in transactions:
            by_fp.setdefault(compute_fingerprint(tx, profile=self.profile), tx)
        if not by_fp:
            return 0

        try:
            with session_scope(database_url=self.database_url) as session:
                existing = self._stored(session, list(by_fp))
                rows = [
                    TmProcessedTransaction(
                        fingerprint_sha256=fp,
                        profile=self.profile,
                        tx_date=tx.time,
                        amount=tx.amount,
                        payee=tx.payee or None,
                    )
                    for fp, tx in by_fp.items()
                    if fp not in existing
                ]
                session.add_all(rows)
        except (SQLAlchemyError, RuntimeError) as e:
            _logger.error("Failed to store processed flags: %s", e)
            raise CommitError(f"Failed to store processed flags: {e}") from e

        _logger.info("Stored %d new fingerprints (%d already present)", len(rows), len(existing))
        return len(transactions)


__all__ = ["SqlProcessedStore", "compute_fingerprint"]
