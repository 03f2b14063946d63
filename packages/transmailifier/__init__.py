"""Public interface for the ``transmailifier`` package.

This module only re-exports the API functions and public models/types that
make up the stable import surface.
"""

from .api import process_ledger_file
from .errors import CommitError, ReadError, TransmailifierError
from .filters import uncategorized, unprocessed
from .models import Ledger, Transaction
from .processing import commit
from .workflows.process_flow import ConfirmationWorkflow, ProcessOutcome, ProcessResult

__all__ = [
    # API
    "process_ledger_file",
    "commit",
    "unprocessed",
    "uncategorized",
    "ConfirmationWorkflow",
    # Models / types
    "Ledger",
    "Transaction",
    "ProcessOutcome",
    "ProcessResult",
    # Errors
    "TransmailifierError",
    "ReadError",
    "CommitError",
]
