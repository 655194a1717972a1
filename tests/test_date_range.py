from datetime import date, timedelta

import pytest

from models.errors import InvalidMonth, InvalidRange
from models.payroll import DateRange


def test_contains_is_inclusive_at_both_ends():
    date_range = DateRange(date(2023, 3, 10), date(2023, 3, 20))

    day = date_range.start
    while day <= date_range.end:
        assert date_range.contains(day)
        day += timedelta(days=1)

    assert not date_range.contains(date_range.start - timedelta(days=1))
    assert not date_range.contains(date_range.end + timedelta(days=1))


def test_single_day_range():
    date_range = DateRange(date(2023, 5, 5), date(2023, 5, 5))

    assert date_range.contains(date(2023, 5, 5))
    assert date_range.day_count() == 1


def test_end_before_start_is_rejected():
    with pytest.raises(InvalidRange):
        DateRange(date(2023, 5, 6), date(2023, 5, 5))


def test_range_is_immutable():
    date_range = DateRange(date(2023, 5, 1), date(2023, 5, 2))

    with pytest.raises(AttributeError):
        date_range.end = date(2023, 4, 1)


def test_february_in_non_leap_year():
    date_range = DateRange.month_range(2, 2023)

    assert date_range.start == date(2023, 2, 1)
    assert date_range.end == date(2023, 2, 28)
    assert date_range.day_count() == 28


def test_february_in_leap_year():
    assert DateRange.month_range(2, 2024).day_count() == 29


def test_month_range_accepts_two_digit_string():
    date_range = DateRange.month_range("06", 2023)

    assert date_range == DateRange(date(2023, 6, 1), date(2023, 6, 30))


def test_month_range_defaults_to_current_year():
    assert DateRange.month_range(1).start.year == date.today().year


@pytest.mark.parametrize("month", [0, 13, -1, "abc", None])
def test_invalid_month(month):
    with pytest.raises(InvalidMonth):
        DateRange.month_range(month, 2023)


def test_from_endpoints_parses_month_day_strings():
    date_range = DateRange.from_endpoints("06/01", "06/15", year=2023)

    assert date_range == DateRange(date(2023, 6, 1), date(2023, 6, 15))
    assert date_range.day_count() == 15
    assert str(date_range) == "06/01-06/15"


def test_from_endpoints_accepts_dates():
    start, end = date(2023, 1, 30), date(2023, 2, 2)

    assert DateRange.from_endpoints(start, end).day_count() == 4


def test_from_endpoints_rejects_reversed_order():
    with pytest.raises(InvalidRange):
        DateRange.from_endpoints("06/15", "06/01", year=2023)


@pytest.mark.parametrize("bad", ["13/01", "06-01", "", "02/30"])
def test_from_endpoints_rejects_unparseable_dates(bad):
    with pytest.raises(InvalidRange):
        DateRange.from_endpoints(bad, "12/31", year=2023)
