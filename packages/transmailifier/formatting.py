"""Currency-aware amount formatting for previews.

The formatter is a plain ``Decimal -> str`` callable so the preview code does
not care how money is rendered. Defaults follow the Croatian convention the
tool was first used with (``-1.234,56 EUR``).
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, TypeAlias

AmountFormatter: TypeAlias = Callable[[Decimal], str]

_CENT = Decimal("0.01")


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"not a money amount: {value!r}") from e


def format_amount(
    value: Any,
    *,
    decimal_separator: str = ",",
    thousands_separator: str = ".",
) -> str:
    """Render ``value`` with two decimals and grouped thousands (no currency)."""

    d = _to_decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if d < 0 else ""
    whole, _, frac = f"{abs(d):.2f}".partition(".")
    groups: list[str] = []
    while len(whole) > 3:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    groups.insert(0, whole)
    return f"{sign}{thousands_separator.join(groups)}{decimal_separator}{frac}"


def currency_formatter(
    currency: str,
    *,
    decimal_separator: str = ",",
    thousands_separator: str = ".",
) -> AmountFormatter:
    """Return a formatter rendering amounts followed by the ISO ``currency`` code."""

    if decimal_separator == thousands_separator:
        raise ValueError("decimal and thousands separators must differ")
    code = currency.strip().upper()

    def _fmt(amount: Decimal) -> str:
        text = format_amount(
            amount,
            decimal_separator=decimal_separator,
            thousands_separator=thousands_separator,
        )
        return f"{text} {code}"

    return _fmt


__all__ = ["AmountFormatter", "currency_formatter", "format_amount"]
