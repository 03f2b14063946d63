"""Data models for ``transmailifier``.

A :class:`Ledger` is what the reader produces from one source file: an
ordered list of :class:`Transaction` records sharing a single currency. The
workflow treats both as read-only with one exception, the ``processed`` flag,
which only :func:`transmailifier.processing.commit` may flip.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Transaction:
    """One ledger line.

    ``state`` is the balance after this transaction was applied. It is a
    money value in the ledger currency and is displayed with the same
    formatter as ``amount``.
    """

    time: date
    amount: Decimal
    state: Decimal
    category: str | None
    payee: str
    note: str
    processed: bool = False

    def has_category(self) -> bool:
        return bool(self.category and self.category.strip())


@dataclass(slots=True)
class Ledger:
    """Ordered transactions (file order) denominated in ``currency``."""

    currency: str
    transactions: list[Transaction] = field(default_factory=list)

    def __post_init__(self) -> None:
        code = (self.currency or "").strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"currency must be a 3-letter ISO code; got {self.currency!r}")
        self.currency = code
        self.transactions = list(self.transactions)

    def __len__(self) -> int:
        return len(self.transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.transactions)

    def __getitem__(self, index: int) -> Transaction:
        return self.transactions[index]

    def mark_processed_at(self, positions: Iterable[int]) -> None:
        """Swap in ``processed=True`` copies at ``positions``.

        Records already processed are left as they are; the flag never goes
        back to ``False``.
        """
        for pos in positions:
            tx = self.transactions[pos]
            if not tx.processed:
                self.transactions[pos] = replace(tx, processed=True)

    def positions_of(self, subset: Sequence[Transaction]) -> list[int]:
        """Return ledger positions of ``subset`` items, matched by identity."""
        wanted = {id(tx) for tx in subset}
        return [i for i, tx in enumerate(self.transactions) if id(tx) in wanted]


__all__ = ["Transaction", "Ledger"]
