from decimal import Decimal

import pytest

from transmailifier.formatting import currency_formatter, format_amount


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("0"), "0,00"),
        (Decimal("5.005"), "5,01"),
        (Decimal("-999.99"), "-999,99"),
        (Decimal("1000"), "1.000,00"),
        (Decimal("-1234567.891"), "-1.234.567,89"),
    ],
)
def test_format_amount_croatian_style(value, expected):
    assert format_amount(value) == expected


def test_format_amount_custom_separators():
    assert format_amount(Decimal("1234.5"), decimal_separator=".", thousands_separator=",") == (
        "1,234.50"
    )


def test_currency_formatter_appends_code():
    fmt = currency_formatter("eur")
    assert fmt(Decimal("-42.1")) == "-42,10 EUR"


def test_currency_formatter_rejects_identical_separators():
    with pytest.raises(ValueError):
        currency_formatter("EUR", decimal_separator=".", thousands_separator=".")
