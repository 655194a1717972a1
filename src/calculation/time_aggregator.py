import logging
from typing import Iterable

from models.attendance import AttendanceRecord
from models.payroll import DateRange

logger = logging.getLogger(__name__)

ASSUMED_HOURS_PER_DAY = 9.0

class TimeAggregator:
    """Aggregate worked hours from attendance records"""

    def __init__(self, assumed_hours_per_day: float = ASSUMED_HOURS_PER_DAY):
        self.assumed_hours_per_day = assumed_hours_per_day

    def total_hours_worked(self, records: Iterable[AttendanceRecord], employee_id: int,
                           date_range: DateRange) -> float:
        """Sum fractional hours worked by the employee within the date range.

        A record whose time-out precedes its time-in contributes negative
        hours; raw records are trusted and the value is kept as-is.
        """
        total_hours = 0.0

        for record in records:
            if record.employee_id != employee_id:
                continue
            # Skip records outside the date range
            if not date_range.contains(record.date):
                continue
            total_hours += record.hours_worked()

        return total_hours

    def assumed_hours_worked(self, date_range: DateRange) -> float:
        """Baseline hours for the range when no attendance was recorded"""
        return self.assumed_hours_per_day * date_range.day_count()

    def hours_for_calculation(self, records: Iterable[AttendanceRecord], employee_id: int,
                              date_range: DateRange) -> float:
        """Actual hours if any were recorded, otherwise the assumed baseline"""
        total_hours = self.total_hours_worked(records, employee_id, date_range)
        if total_hours > 0:
            return total_hours

        assumed = self.assumed_hours_worked(date_range)
        logger.debug(
            "No positive attendance hours for employee %s in %s (%.2f), assuming %.2f hours",
            employee_id, date_range, total_hours, assumed
        )
        return assumed
