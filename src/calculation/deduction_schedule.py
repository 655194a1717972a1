import logging
import threading
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Callable, Iterable, List, Optional, Sequence

from models.errors import MalformedScheduleRow, ScheduleGapError
from models.payroll import DeductionTier
from utils.validators import validate_tier_bounds

logger = logging.getLogger(__name__)

EXPECTED_COLUMNS = 3
CENT = Decimal('0.01')

# Social insurance limits outside the tabulated compensation ranges
MIN_COMPENSATION_RANGE = Decimal('3250.00')
MAX_COMPENSATION_RANGE = Decimal('24750.00')
MIN_DEDUCTION = Decimal('135.00')
MAX_DEDUCTION = Decimal('1125.00')


def parse_tier_row(row: Sequence, line_number: Optional[int] = None) -> DeductionTier:
    """Convert one (lower, upper, amount) row into a tier"""
    location = f" (line {line_number})" if line_number is not None else ""
    if len(row) != EXPECTED_COLUMNS:
        raise MalformedScheduleRow(
            f"Invalid schedule format{location}: expected {EXPECTED_COLUMNS} columns "
            f"but got {len(row)} in row: {','.join(str(v) for v in row)}"
        )

    try:
        lower, upper, amount = (Decimal(str(value).replace(',', '').strip()) for value in row)
    except (InvalidOperation, ValueError):
        raise MalformedScheduleRow(
            f"Invalid number format in schedule{location}: {','.join(str(v) for v in row)}"
        )

    if not all(v.is_finite() for v in (lower, upper, amount)) or not validate_tier_bounds(lower, upper):
        raise MalformedScheduleRow(f"Invalid tier bounds{location}: {lower} - {upper}")

    return DeductionTier(lower_bound=lower, upper_bound=upper, amount=amount)


class DeductionSchedule:
    """Tiered deduction table with fixed amounts below and above the tabulated range"""

    def __init__(self, tiers: List[DeductionTier], floor_bound: Decimal, ceiling_bound: Decimal,
                 floor_amount: Decimal, ceiling_amount: Decimal):
        self._check_ordering(tiers)
        self.tiers = tuple(tiers)
        self.floor_bound = floor_bound
        self.ceiling_bound = ceiling_bound
        self.floor_amount = floor_amount
        self.ceiling_amount = ceiling_amount

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence], **limits) -> "DeductionSchedule":
        """Build a schedule from raw rows; any malformed row aborts the whole load"""
        tiers = [parse_tier_row(row, line_number) for line_number, row in enumerate(rows, start=1)]
        schedule = cls(tiers, **limits)
        logger.info("Loaded deduction schedule with %d tiers", len(tiers))
        return schedule

    def deduction_for(self, gross_wage: Decimal) -> Decimal:
        """Deduction amount for a gross wage.

        The floor and ceiling checks use the exact wage. The tier scan compares
        at cent precision; tiers are inclusive at both bounds and
        non-overlapping, so the first match is the only match.
        """
        gross_wage = Decimal(gross_wage)
        if gross_wage < self.floor_bound:
            return self.floor_amount
        if gross_wage > self.ceiling_bound:
            return self.ceiling_amount

        wage = gross_wage.quantize(CENT, rounding=ROUND_HALF_UP)

        for tier in self.tiers:
            if tier.covers(wage):
                return tier.amount

        raise ScheduleGapError(f"No deduction tier covers wage {wage}")

    @staticmethod
    def _check_ordering(tiers: List[DeductionTier]):
        for previous, current in zip(tiers, tiers[1:]):
            if current.lower_bound <= previous.upper_bound:
                raise MalformedScheduleRow(
                    f"Tier {current.lower_bound} - {current.upper_bound} overlaps or precedes "
                    f"tier {previous.lower_bound} - {previous.upper_bound}"
                )

    def __len__(self):
        return len(self.tiers)


def social_insurance_schedule(rows: Iterable[Sequence]) -> DeductionSchedule:
    """Social insurance schedule from (lower, upper, amount) rows"""
    return DeductionSchedule.from_rows(
        rows,
        floor_bound=MIN_COMPENSATION_RANGE,
        ceiling_bound=MAX_COMPENSATION_RANGE,
        floor_amount=MIN_DEDUCTION,
        ceiling_amount=MAX_DEDUCTION,
    )


class ScheduleCache:
    """Loads a schedule at most once and hands out the same instance afterwards"""

    def __init__(self, loader: Callable[[], DeductionSchedule]):
        self._loader = loader
        self._schedule: Optional[DeductionSchedule] = None
        self._lock = threading.Lock()

    def get(self) -> DeductionSchedule:
        if self._schedule is None:
            with self._lock:
                if self._schedule is None:
                    self._schedule = self._loader()
        return self._schedule

    @property
    def loaded(self) -> bool:
        return self._schedule is not None
