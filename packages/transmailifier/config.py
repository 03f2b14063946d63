"""Runtime settings resolved from the environment.

Entry points call ``load_dotenv`` first, so values may also come from a local
``.env``. Invalid values fall back to their defaults instead of
failing the run; a missing ``DATABASE_URL`` is only an error once the store is
actually used.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .logging_setup import get_logger

_logger = get_logger("transmailifier.config")

DEFAULT_DISPLAY_LIMIT = 10


@dataclass(frozen=True, slots=True)
class Settings:
    database_url: str | None = None
    display_limit: int = DEFAULT_DISPLAY_LIMIT
    decimal_separator: str = ","
    thousands_separator: str = "."


def _positive_int(raw: str | None, default: int) -> int:
    try:
        value = int(raw) if raw else None
    except ValueError:
        value = None
    if value is None or value <= 0:
        return default
    return value


def _separators(decimal_raw: str | None, thousands_raw: str | None) -> tuple[str, str]:
    decimal = decimal_raw or ","
    # An unset thousands separator pairs with the decimal one ("1.234,56" / "1,234.56").
    thousands = thousands_raw or ("," if decimal == "." else ".")
    if thousands == decimal:
        _logger.warning(
            "TM_DECIMAL_SEPARATOR and TM_THOUSANDS_SEPARATOR are both %r; using ',' and '.'",
            decimal,
        )
        return ",", "."
    return decimal, thousands


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``env`` (defaults to ``os.environ``)."""

    src = os.environ if env is None else env
    decimal_separator, thousands_separator = _separators(
        src.get("TM_DECIMAL_SEPARATOR"), src.get("TM_THOUSANDS_SEPARATOR")
    )
    return Settings(
        database_url=src.get("DATABASE_URL") or None,
        display_limit=_positive_int(src.get("TM_DISPLAY_LIMIT"), DEFAULT_DISPLAY_LIMIT),
        decimal_separator=decimal_separator,
        thousands_separator=thousands_separator,
    )


__all__ = ["DEFAULT_DISPLAY_LIMIT", "Settings", "load_settings"]
