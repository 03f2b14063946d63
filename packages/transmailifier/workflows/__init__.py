"""Workflow orchestrators composed from the reader, previews and commit step."""

from .process_flow import ConfirmationWorkflow, ProcessOutcome, ProcessResult

__all__ = ["ConfirmationWorkflow", "ProcessOutcome", "ProcessResult"]
