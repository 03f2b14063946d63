"""Built-in field-mapping profiles for ledger CSV exports.

A profile names the CSV columns that feed each :class:`Transaction` field and
how dates and numbers are written in that export.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ReadError


@dataclass(frozen=True, slots=True)
class Profile:
    name: str
    currency: str
    date_column: str
    amount_column: str
    state_column: str
    category_column: str
    payee_column: str
    note_column: str
    date_format: str = "%Y-%m-%d"
    delimiter: str = ","
    decimal_separator: str = "."
    thousands_separator: str = ","

    @property
    def required_columns(self) -> tuple[str, ...]:
        return (
            self.date_column,
            self.amount_column,
            self.state_column,
            self.category_column,
            self.payee_column,
            self.note_column,
        )


PROFILES: dict[str, Profile] = {
    "generic": Profile(
        name="generic",
        currency="EUR",
        date_column="Date",
        amount_column="Amount",
        state_column="Balance",
        category_column="Category",
        payee_column="Payee",
        note_column="Note",
    ),
    # Croatian retail banking export: semicolon separated, 1.234,56 numbers.
    "erste": Profile(
        name="erste",
        currency="EUR",
        date_column="Datum",
        amount_column="Iznos",
        state_column="Stanje",
        category_column="Kategorija",
        payee_column="Primatelj",
        note_column="Opis",
        date_format="%d.%m.%Y",
        delimiter=";",
        decimal_separator=",",
        thousands_separator=".",
    ),
}


def get_profile(name: str) -> Profile:
    """Return the built-in profile called ``name`` (case-insensitive)."""

    key = (name or "").strip().lower()
    try:
        return PROFILES[key]
    except KeyError:
        known = ", ".join(sorted(PROFILES))
        raise ReadError(f"Unknown profile {name!r}. Known profiles: {known}") from None


__all__ = ["PROFILES", "Profile", "get_profile"]
