"""Triage filters: which transactions still need processing or a category."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Ledger, Transaction


def unprocessed(ledger: Ledger | Iterable[Transaction]) -> list[Transaction]:
    """Return transactions not yet marked processed, in ledger order."""
    return [tx for tx in ledger if not tx.processed]


def uncategorized(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Return transactions lacking a category, preserving input order."""
    return [tx for tx in transactions if not tx.has_category()]


__all__ = ["unprocessed", "uncategorized"]
