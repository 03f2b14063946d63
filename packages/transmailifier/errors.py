"""Exception types raised across ``transmailifier``.

Only two failures are surfaced to the operator: the ledger could not be read
(:class:`ReadError`) or the processed flags could not be stored
(:class:`CommitError`). Declining a confirmation prompt is a normal outcome
and never raises.
"""

from __future__ import annotations


class TransmailifierError(Exception):
    """Base class for errors the CLI reports and exits non-zero on."""


class ReadError(TransmailifierError):
    """Ledger file missing, unreadable, malformed, or profile unknown."""


class CommitError(TransmailifierError):
    """The processed-flag store could not be updated."""


__all__ = ["TransmailifierError", "ReadError", "CommitError"]
