"""Marking confirmed transactions as processed.

:func:`commit` is the single place where the ``processed`` flag changes. The
durable write is delegated to a :class:`PersistenceCommitter`; the in-memory
ledger is only updated once that write succeeded, so a failed commit leaves
the ledger exactly as it was.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .errors import CommitError
from .filters import unprocessed
from .logging_setup import get_logger
from .models import Ledger, Transaction

_logger = get_logger("transmailifier.processing")


class PersistenceCommitter(Protocol):
    def mark_processed(self, transactions: Sequence[Transaction]) -> int:
        """Durably record ``transactions`` as processed; return how many.

        Raises :class:`~transmailifier.errors.CommitError` when the store
        cannot be updated.
        """
        ...


def commit(ledger: Ledger, committer: PersistenceCommitter) -> int:
    """Mark every unprocessed transaction in ``ledger`` processed.

    Returns the number of transactions newly marked. Nothing is sent to the
    committer when there is nothing to mark.
    """

    pending = unprocessed(ledger)
    if not pending:
        return 0

    try:
        stored = committer.mark_processed(pending)
    except CommitError:
        raise
    except Exception as e:
        raise CommitError(f"failed to mark transactions processed: {e}") from e

    if stored != len(pending):
        _logger.warning(
            "Committer reported %d stored transactions for %d pending", stored, len(pending)
        )
    ledger.mark_processed_at(ledger.positions_of(pending))
    _logger.info("Marked %d transactions processed", len(pending))
    return len(pending)


__all__ = ["PersistenceCommitter", "commit"]
