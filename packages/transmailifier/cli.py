# ruff: noqa: I001
"""CLI for the ``transmailifier`` package.

This module exposes a callable command handler (``cmd_process``) and a
Typer-based console interface. Environment variables (notably
``DATABASE_URL``) are loaded from a local ``.env`` using ``python-dotenv``
before delegating to command logic, which lives in ``transmailifier.api``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from .config import load_settings
from .errors import CommitError, ReadError
from .logging_setup import configure_logging, get_logger
from .term_ui import InteractiveStyle

_logger = get_logger("transmailifier.cli")


def cmd_process(
    profile: str,
    path: str,
    *,
    database_url: str | None = None,
    display_limit: int | None = None,
    style: InteractiveStyle | None = None,
) -> int:
    """Triage a ledger file, ask for confirmation, and mark it processed.

    Behavior
    --------
    - Reads ``path`` with the named ``profile`` and looks up which lines are
      already processed in the store at ``database_url`` (falls back to
      ``DATABASE_URL``).
    - Previews uncategorized and unprocessed transactions and asks twice
      before marking anything processed.

    Returns ``0`` when everything was already processed, when the operator
    declined either question, and after a successful commit. Read and commit
    failures are written to stderr and return ``1``.
    """

    # Settings come from the environment even when called without the Typer root.
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    settings = load_settings()

    from .api import process_ledger_file

    try:
        result = process_ledger_file(
            path,
            profile,
            database_url=database_url or settings.database_url,
            display_limit=display_limit or settings.display_limit,
            style=style,
            decimal_separator=settings.decimal_separator,
            thousands_separator=settings.thousands_separator,
        )
    except ReadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except CommitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _logger.info("Run finished: %s (%d processed)", result.outcome.value, result.processed_count)
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Preview unprocessed ledger transactions and mark them processed after "
        "confirmation. Loads DATABASE_URL from a local .env before running."
    ),
)


@app.command("process")
def process_cmd(
    profile: Annotated[str, typer.Argument(help="Processing profile to use (e.g., generic).")],
    path: Annotated[
        Path,
        typer.Argument(
            help="Ledger file to process.",
            dir_okay=False,
            file_okay=True,
            exists=False,  # the handler reports missing files itself
        ),
    ],
    *,
    database_url: str | None = typer.Option(
        None, help="Override DATABASE_URL (falls back to env var)."
    ),
    display_limit: int | None = typer.Option(
        None,
        min=1,
        help="How many of the latest unprocessed transactions to show (env TM_DISPLAY_LIMIT).",
    ),
) -> None:
    """Process a ledger and mark its new transactions as processed."""

    code = cmd_process(
        profile,
        str(path),
        database_url=database_url,
        display_limit=display_limit,
    )
    if code:
        raise typer.Exit(code)


@app.callback()
def _root(
    log_level: str | None = typer.Option(
        None, help="Log level (default: TRANSMAILIFIER_LOG_LEVEL or INFO)."
    ),
) -> None:
    """Load ``.env`` from the working directory and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(log_level)


if __name__ == "__main__":  # pragma: no cover
    app()
