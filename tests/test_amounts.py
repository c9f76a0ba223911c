from decimal import Decimal

import pytest

from currency_converter.services.amounts import (
    AmountFormatError,
    normalize,
    parse_amount,
    validate_amount,
    validation_message,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1,00,000", "100000.00"),
        ("2 lakh", "200000.00"),
        ("1.5 crore", "15000000.00"),
        ("1,234.50", "1234.50"),
        ("2lakh", "200000.00"),
        ("3 Crores", "30000000.00"),
        ("500 rupees", "500.00"),
        ("  42 ", "42.00"),
        ("0.005", "0.01"),
    ],
)
def test_normalize(raw, expected):
    value = normalize(raw)
    assert value == Decimal(expected)
    assert str(value) == expected


@pytest.mark.parametrize("raw", ["abc", "", "5 million", "1.2.3", "lakh"])
def test_normalize_rejects_non_numbers(raw):
    with pytest.raises(AmountFormatError):
        normalize(raw)


@pytest.mark.parametrize(
    "raw,valid",
    [
        ("1,00,000", True),
        ("12,34,567.50", True),
        ("1,000", True),
        ("100000", True),
        ("2 lakh", True),
        ("2 LAKHS", True),
        ("1.5 crore", True),
        ("1,000 crore", True),
        ("100,000", False),
        ("12,3,45", False),
        ("1,00,00", False),
        ("2 million", False),
    ],
)
def test_inr_grammar(raw, valid):
    assert validate_amount(raw, "INR") is valid


@pytest.mark.parametrize(
    "raw,valid",
    [
        ("1,234.50", True),
        ("1,234,567", True),
        ("1234", True),
        ("0.99", True),
        ("12,3,45", False),
        ("1,00,000", False),
        ("1234,567", False),
        ("2 lakh", False),
    ],
)
def test_usd_grammar(raw, valid):
    assert validate_amount(raw, "USD") is valid


@pytest.mark.parametrize(
    "raw,valid",
    [("100", True), ("100.50", False), ("1,000", False), ("12,3,45", False), ("", False)],
)
def test_other_currencies_accept_digits_only(raw, valid):
    assert validate_amount(raw, "EUR") is valid


def test_grammar_lookup_is_case_insensitive():
    assert validate_amount("1,00,000", "inr")
    assert not validate_amount("1,00,000", "usd")


def test_validation_messages():
    assert "first comma" in validation_message("INR")
    assert "every 3 digits" in validation_message("USD")
    assert "EUR" in validation_message("eur")


def test_parse_amount_uses_from_currency_grammar():
    assert parse_amount("1,00,000", "INR") == Decimal("100000.00")
    with pytest.raises(AmountFormatError) as exc:
        parse_amount("1,00,000", "USD")
    assert exc.value.currency == "USD"
    assert exc.value.message == validation_message("USD")


def test_normalize_rejects_amounts_beyond_decimal_precision():
    with pytest.raises(AmountFormatError) as exc:
        normalize("1" * 27)
    assert "too large" in exc.value.message


def test_parse_amount_oversized_crore_keeps_currency():
    with pytest.raises(AmountFormatError) as exc:
        parse_amount("9" * 24 + " crore", "INR")
    assert exc.value.currency == "INR"
