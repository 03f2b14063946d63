"""Interactive triage-and-confirm flow for one ledger.

Sequence
--------
1. Compute the unprocessed transactions; stop with a success message when
   there are none (no prompts).
2. Show every uncategorized transaction among them and ask whether to go on
   with them. The question is skipped when all transactions have a category.
3. Show the (possibly truncated) unprocessed preview and ask whether to
   process them.
4. Only when both answers are yes, commit. Either "no" ends the run with a
   warning; that is a normal outcome, not an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich.console import Console

from ..config import DEFAULT_DISPLAY_LIMIT
from ..filters import uncategorized, unprocessed
from ..formatting import AmountFormatter
from ..logging_setup import get_logger
from ..models import Ledger
from ..preview import preview_uncategorized, preview_unprocessed
from ..processing import PersistenceCommitter, commit
from ..term_ui import InteractiveStyle

_logger = get_logger("transmailifier.workflows.process_flow")

ABORTED_MESSAGE = "Processing aborted."


class ProcessOutcome(Enum):
    NO_WORK = "no_work"
    ABORTED_UNCATEGORIZED = "aborted_uncategorized"
    ABORTED_PROCESS = "aborted_process"
    COMMITTED = "committed"


@dataclass(frozen=True, slots=True)
class ProcessResult:
    outcome: ProcessOutcome
    processed_count: int = 0


class ConfirmationWorkflow:
    """Drive the two confirmations that gate :func:`~transmailifier.processing.commit`.

    All collaborators are injected: ``style`` for messages and prompts,
    ``console`` for tables, ``committer`` for the durable write, and
    ``formatter`` for money columns. A workflow instance can be run several
    times; each :meth:`run` commits at most once.
    """

    def __init__(
        self,
        *,
        style: InteractiveStyle,
        console: Console,
        committer: PersistenceCommitter,
        formatter: AmountFormatter,
        display_limit: int = DEFAULT_DISPLAY_LIMIT,
    ) -> None:
        if display_limit < 1:
            raise ValueError(f"display_limit must be at least 1; got {display_limit}")
        self.style = style
        self.console = console
        self.committer = committer
        self.formatter = formatter
        self.display_limit = display_limit

    def run(self, ledger: Ledger) -> ProcessResult:
        pending = unprocessed(ledger)
        _logger.info("Ledger has %d transactions, %d unprocessed", len(ledger), len(pending))
        if not pending:
            self.style.success("All the transactions have already been processed.")
            return ProcessResult(ProcessOutcome.NO_WORK)

        missing_category = uncategorized(pending)
        preview_uncategorized(self.style, self.console, self.formatter, missing_category)

        if missing_category and not self.style.confirm(
            f"Proceed with {len(missing_category)} uncategorized transactions?"
        ):
            self.style.warning(ABORTED_MESSAGE)
            _logger.info("Aborted at the uncategorized confirmation")
            return ProcessResult(ProcessOutcome.ABORTED_UNCATEGORIZED)

        preview_unprocessed(
            self.style, self.console, self.formatter, pending, limit=self.display_limit
        )

        if not self.style.confirm(f"Process these {len(pending)} transactions?"):
            self.style.warning(ABORTED_MESSAGE)
            _logger.info("Aborted at the process confirmation")
            return ProcessResult(ProcessOutcome.ABORTED_PROCESS)

        count = commit(ledger, self.committer)
        self.style.success(f"Successfully processed {count} new transactions.")
        return ProcessResult(ProcessOutcome.COMMITTED, count)


__all__ = [
    "ABORTED_MESSAGE",
    "ConfirmationWorkflow",
    "ProcessOutcome",
    "ProcessResult",
]
