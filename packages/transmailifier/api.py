"""Public API for ``transmailifier``.

``process_ledger_file`` composes the pieces the CLI needs: read the ledger
with a profile, apply processed flags from the store, then run the
confirmation workflow. Every collaborator can be overridden, which is how the
tests drive the flow without a terminal.
"""

from __future__ import annotations

from os import PathLike

from rich.console import Console

from .config import DEFAULT_DISPLAY_LIMIT
from .formatting import AmountFormatter, currency_formatter
from .ingest.reader import load_ledger_file
from .persistence import SqlProcessedStore
from .term_ui import InteractiveStyle, TerminalStyle
from .workflows.process_flow import ConfirmationWorkflow, ProcessResult


def process_ledger_file(
    path: str | PathLike[str],
    profile: str,
    *,
    database_url: str | None = None,
    display_limit: int = DEFAULT_DISPLAY_LIMIT,
    style: InteractiveStyle | None = None,
    console: Console | None = None,
    store: SqlProcessedStore | None = None,
    formatter: AmountFormatter | None = None,
    decimal_separator: str = ",",
    thousands_separator: str = ".",
) -> ProcessResult:
    """Read ``path`` with ``profile``, preview, confirm, and commit.

    Parameters
    ----------
    style / console:
        Messaging/prompt implementation and the console tables go to. When
        only ``style`` is omitted a :class:`TerminalStyle` over ``console``
        is used; when both are omitted, one over stdout.
    store:
        Processed-flag store; defaults to :class:`SqlProcessedStore` for
        ``profile`` at ``database_url`` (``DATABASE_URL`` when ``None``).
    formatter:
        Money formatter; defaults to :func:`currency_formatter` for the ledger
        currency with the given separators.

    Raises
    ------
    ReadError
        The ledger could not be read or the store could not be queried.
    CommitError
        The operator confirmed but the processed flags could not be stored.
    """

    if style is None:
        terminal = TerminalStyle(console)
        style, console = terminal, terminal.console
    elif console is None:
        console = getattr(style, "console", None) or Console()
    if store is None:
        store = SqlProcessedStore(profile=profile, database_url=database_url)

    ledger = store.apply_processed_flags(load_ledger_file(path, profile))
    if formatter is None:
        formatter = currency_formatter(
            ledger.currency,
            decimal_separator=decimal_separator,
            thousands_separator=thousands_separator,
        )

    workflow = ConfirmationWorkflow(
        style=style,
        console=console,
        committer=store,
        formatter=formatter,
        display_limit=display_limit,
    )
    return workflow.run(ledger)


__all__ = ["process_ledger_file"]
