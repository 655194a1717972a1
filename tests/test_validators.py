import logging
from decimal import Decimal

import pytest

from models.leave import Leave, with_computed_amounts
from utils.formatters import format_currency, format_plain_currency
from utils.validators import parse_int, parse_money


@pytest.mark.parametrize("raw, expected", [
    ("1,500.00", Decimal('1500.00')),
    (" 357.14 ", Decimal('357.14')),
    (12.5, Decimal('12.5')),
    ("", Decimal('0')),
    ("abc", Decimal('0')),
    ("NaN", Decimal('0')),
])
def test_parse_money(raw, expected):
    assert parse_money(raw) == expected


def test_parse_money_logs_fallback(caplog):
    with caplog.at_level(logging.WARNING):
        parse_money("twelve")

    assert "Invalid currency value" in caplog.text


@pytest.mark.parametrize("raw, expected", [("10001", 10001), (" 7 ", 7), ("7.5", 0), ("", 0)])
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


def test_currency_formatting():
    assert format_currency(Decimal('20296'), symbol="PHP ") == "PHP 20,296.00"
    assert format_plain_currency(Decimal('1234.567')) == "1,234.57"


def test_unknown_leave_type_has_no_amounts():
    leave = with_computed_amounts(Leave(1, "Sabbatical", "01/01/2023", "01/10/2023", "Rest"))

    assert leave.day_count() == 10
    assert leave.sick_leave_amount == leave.vacation_leave_amount == leave.emergency_leave_amount == Decimal('0')
