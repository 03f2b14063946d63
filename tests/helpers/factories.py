"""Small builders for ``Transaction``/``Ledger`` test data."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from transmailifier.models import Ledger, Transaction


def make_tx(
    day: int = 1,
    *,
    amount: str = "-10.00",
    state: str = "100.00",
    category: str | None = "Groceries",
    payee: str = "Konzum",
    note: str = "",
    processed: bool = False,
) -> Transaction:
    return Transaction(
        time=date(2024, 1, 1) + timedelta(days=day - 1),
        amount=Decimal(amount),
        state=Decimal(state),
        category=category,
        payee=payee,
        note=note,
        processed=processed,
    )


def make_ledger(*transactions: Transaction, currency: str = "EUR") -> Ledger:
    return Ledger(currency=currency, transactions=list(transactions))


def numbered_ledger(count: int, *, processed: bool = False) -> Ledger:
    """``count`` categorized transactions on consecutive days, payees P1..Pn."""
    return make_ledger(
        *(
            make_tx(i, payee=f"P{i}", state=f"{1000 - i}.00", processed=processed)
            for i in range(1, count + 1)
        )
    )
