from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional, Tuple, Union
import calendar

from models.errors import InvalidMonth, InvalidRange

DATE_PATTERN = "%m/%d"

@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date interval"""
    start: date
    end: date

    def __post_init__(self):
        if self.end < self.start:
            raise InvalidRange(
                f"End date {self.end.isoformat()} must be on or after the start date {self.start.isoformat()}."
            )

    def contains(self, day: date) -> bool:
        """Check if a date falls within the range (both ends inclusive)"""
        return self.start <= day <= self.end

    def day_count(self) -> int:
        """Number of days in the range, counting both endpoints"""
        return (self.end - self.start).days + 1

    @classmethod
    def month_range(cls, month: Union[int, str], year: Optional[int] = None) -> "DateRange":
        """Range covering the whole calendar month in the given (or current) year"""
        try:
            month_number = int(month)
        except (TypeError, ValueError):
            raise InvalidMonth(f"Invalid month: {month!r}")
        if not 1 <= month_number <= 12:
            raise InvalidMonth(f"Month must be between 1 and 12, got {month_number}")

        year = year or date.today().year
        last_day = calendar.monthrange(year, month_number)[1]
        return cls(date(year, month_number, 1), date(year, month_number, last_day))

    @classmethod
    def from_endpoints(cls, start: Union[date, str], end: Union[date, str],
                       year: Optional[int] = None) -> "DateRange":
        """Range between two dates; string endpoints use the MM/DD format"""
        year = year or date.today().year
        return cls(_resolve_date(start, year), _resolve_date(end, year))

    def __str__(self):
        return f"{self.start.strftime(DATE_PATTERN)}-{self.end.strftime(DATE_PATTERN)}"


def parse_month_day(value: str, year: int) -> date:
    """Parse an MM/DD string into a date in the given year"""
    return datetime.strptime(f"{value.strip()}/{year}", f"{DATE_PATTERN}/%Y").date()


def _resolve_date(value: Union[date, str], year: int) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_month_day(value, year)
    except (AttributeError, ValueError):
        raise InvalidRange(f"Invalid date {value!r}; expected MM/DD")


@dataclass(frozen=True)
class DeductionTier:
    """Compensation bracket with a fixed deduction amount"""
    lower_bound: Decimal
    upper_bound: Decimal
    amount: Decimal

    def covers(self, wage: Decimal) -> bool:
        return self.lower_bound <= wage <= self.upper_bound


@dataclass(frozen=True)
class WageBreakdown:
    """Complete wage computation result for one employee and period.

    Totals are derived from the component amounts at construction, so a
    breakdown is never partially populated.
    """
    gross_wage: Decimal
    social_insurance: Decimal
    health_insurance: Decimal
    housing_fund: Decimal
    withholding_tax: Decimal
    late_penalty: Decimal
    total_deductions: Decimal = field(init=False)
    net_wage: Decimal = field(init=False)

    LABELS = (
        "Gross Wage",
        "Social Insurance",
        "Health Insurance",
        "Housing Fund",
        "Withholding Tax",
        "Late Arrival Deduction",
        "Total Deductions",
        "Net Wage",
    )

    def __post_init__(self):
        total = (self.social_insurance + self.health_insurance + self.housing_fund
                 + self.withholding_tax + self.late_penalty)
        # frozen dataclass: derived fields go through object.__setattr__
        object.__setattr__(self, 'total_deductions', total)
        object.__setattr__(self, 'net_wage', max(self.gross_wage - total, Decimal('0')))

    def amounts(self) -> List[Decimal]:
        """The eight amounts in presentation order"""
        return [
            self.gross_wage,
            self.social_insurance,
            self.health_insurance,
            self.housing_fund,
            self.withholding_tax,
            self.late_penalty,
            self.total_deductions,
            self.net_wage,
        ]

    def as_rows(self) -> List[Tuple[str, Decimal]]:
        return list(zip(self.LABELS, self.amounts()))
