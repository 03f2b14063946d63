"""Terminal UI helpers (rich output, prompt_toolkit prompts).

The workflow only talks to the small :class:`InteractiveStyle` protocol so it
can be driven by scripted answers in tests. :class:`TerminalStyle` is the
real implementation used by the CLI.
"""

from __future__ import annotations

from typing import Protocol

from prompt_toolkit import PromptSession
from prompt_toolkit.validation import ValidationError, Validator
from rich.console import Console
from rich.markup import escape

from .logging_setup import get_logger

_logger = get_logger("transmailifier.term_ui")

_YES = frozenset({"y", "yes"})
_NO = frozenset({"n", "no"})


class InteractiveStyle(Protocol):
    """Operator-facing messages plus a blocking yes/no gate."""

    def note(self, text: str) -> None: ...

    def warning(self, text: str) -> None: ...

    def success(self, text: str) -> None: ...

    def confirm(self, prompt: str) -> bool: ...


class _YesNoValidator(Validator):
    def validate(self, document) -> None:
        answer = document.text.strip().lower()
        if answer and answer not in _YES | _NO:
            raise ValidationError(message="Please answer yes or no.")


def prompt_yes_no(
    message: str,
    *,
    default: bool = True,
    session: PromptSession | None = None,
) -> bool:
    """Ask a yes/no question and return the answer.

    Enter on an empty buffer takes ``default``; anything other than
    ``y``/``yes``/``n``/``no`` (any case) keeps the prompt open with an error.
    Ctrl-C and Ctrl-D decline, since every question asked here guards an
    irreversible step.
    """

    suffix = " [Y/n] " if default else " [y/N] "
    sess: PromptSession = session if session is not None else PromptSession()
    try:
        answer = sess.prompt(
            message + suffix,
            validator=_YesNoValidator(),
            validate_while_typing=False,
        )
    except (EOFError, KeyboardInterrupt):
        _logger.info("Prompt interrupted; treating as 'no': %s", message)
        return False
    value = answer.strip().lower()
    if not value:
        return default
    return value in _YES


class TerminalStyle:
    """:class:`InteractiveStyle` backed by a ``rich`` console and prompt_toolkit.

    Parameters
    ----------
    console:
        Console used for messages and preview tables. Defaults to a new
        ``Console()`` on stdout.
    session:
        Optional ``PromptSession`` used for confirmations; tests pass one
        wired to a pipe input and ``DummyOutput``.
    default_answer:
        Value returned when the operator just presses Enter.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        session: PromptSession | None = None,
        default_answer: bool = True,
    ) -> None:
        self.console = console if console is not None else Console()
        self._session = session
        self._default_answer = default_answer

    def note(self, text: str) -> None:
        self.console.print(f"[yellow] ! [NOTE] {escape(text)}[/yellow]")
        self.console.print()

    def warning(self, text: str) -> None:
        self.console.print(f"[black on yellow] [WARNING] {escape(text)} [/black on yellow]")
        self.console.print()

    def success(self, text: str) -> None:
        self.console.print(f"[black on green] [OK] {escape(text)} [/black on green]")
        self.console.print()

    def confirm(self, prompt: str) -> bool:
        return prompt_yes_no(prompt, default=self._default_answer, session=self._session)


__all__ = ["InteractiveStyle", "TerminalStyle", "prompt_yes_no"]
