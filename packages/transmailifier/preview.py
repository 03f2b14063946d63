"""Tabular previews of transactions shown before asking for confirmation.

Two previews exist. The uncategorized preview always shows every row so the
operator sees exactly what is about to go out without a category. The
unprocessed preview can be long, so only the most recent ``limit`` rows (the
tail of the ledger) are drawn, with a note saying so.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import DEFAULT_DISPLAY_LIMIT
from .formatting import AmountFormatter
from .models import Transaction
from .term_ui import InteractiveStyle

T = TypeVar("T")

# (header, min width, justify); Payee and Note grow freely.
_COLUMNS: tuple[tuple[str, int | None, str], ...] = (
    ("Date", 10, "left"),
    ("Amount", 15, "right"),
    ("New state", 15, "right"),
    ("Category", 20, "left"),
    ("Payee", None, "left"),
    ("Note", None, "left"),
)


def display_tail(items: Sequence[T], limit: int) -> tuple[list[T], bool]:
    """Return the last ``limit`` items and whether anything was cut off."""

    if limit < 1:
        raise ValueError(f"display limit must be at least 1; got {limit}")
    if len(items) <= limit:
        return list(items), False
    return list(items[-limit:]), True


def build_table(transactions: Sequence[Transaction], formatter: AmountFormatter) -> Table:
    table = Table(box=box.SQUARE, show_header=True, header_style="bold green")
    for header, width, justify in _COLUMNS:
        table.add_column(header, min_width=width, justify=justify, overflow="fold")
    for tx in transactions:
        table.add_row(
            tx.time.strftime("%Y-%m-%d"),
            formatter(tx.amount),
            # New state is a balance; shown with the amount formatter as well.
            formatter(tx.state),
            # Ledger text is shown verbatim, never parsed as console markup.
            Text(tx.category or ""),
            Text(tx.payee),
            Text(tx.note),
        )
    return table


def render_transactions(
    console: Console,
    transactions: Sequence[Transaction],
    formatter: AmountFormatter,
) -> None:
    console.print(build_table(transactions, formatter))


def preview_uncategorized(
    style: InteractiveStyle,
    console: Console,
    formatter: AmountFormatter,
    transactions: Sequence[Transaction],
) -> None:
    """Note and draw every uncategorized transaction; silent when there are none."""

    if not transactions:
        return
    style.note(f"Found {len(transactions)} uncategorized transactions")
    render_transactions(console, transactions, formatter)


def preview_unprocessed(
    style: InteractiveStyle,
    console: Console,
    formatter: AmountFormatter,
    transactions: Sequence[Transaction],
    *,
    limit: int = DEFAULT_DISPLAY_LIMIT,
) -> list[Transaction]:
    """Note the unprocessed count and draw the latest ``limit`` transactions.

    Returns the rows actually drawn.
    """

    style.note(f"Found {len(transactions)} new transactions")
    shown, truncated = display_tail(transactions, limit)
    if truncated:
        style.note(f"(displaying latest {limit} transactions)")
    render_transactions(console, shown, formatter)
    return shown


__all__ = [
    "build_table",
    "display_tail",
    "preview_uncategorized",
    "preview_unprocessed",
    "render_transactions",
]
