"""Shared SQLAlchemy models registry for the workspace database.

Currently includes the processed-flag store used by ``transmailifier``.
"""

from .processing import Base, TmProcessedTransaction

__all__ = [
    "Base",
    "TmProcessedTransaction",
]
