from datetime import time
from decimal import Decimal
from typing import Iterable

from models.attendance import AttendanceRecord
from models.payroll import DateRange

LATE_HOUR_START = 8
LATE_MINUTE_START = 11
MINUTES_IN_HOUR = 60
LATE_DEDUCTION_PER_MINUTE = Decimal('1.66')

class LatePenaltyCalculator:
    """Compute late arrival deductions against the daily 08:11 cutoff"""

    def __init__(self, deduction_per_minute: Decimal = LATE_DEDUCTION_PER_MINUTE):
        self.deduction_per_minute = deduction_per_minute

    @staticmethod
    def arrived_late(time_in: time) -> bool:
        hour, minute = time_in.hour, time_in.minute
        return hour > LATE_HOUR_START or (hour == LATE_HOUR_START and minute >= LATE_MINUTE_START)

    @staticmethod
    def late_minutes(time_in: time) -> int:
        """Minutes past the cutoff; only meaningful for late arrivals"""
        return (time_in.hour - LATE_HOUR_START) * MINUTES_IN_HOUR + (time_in.minute - LATE_MINUTE_START)

    def total_penalty(self, records: Iterable[AttendanceRecord], employee_id: int,
                      date_range: DateRange) -> Decimal:
        """Sum late arrival deductions for the employee within the date range"""
        total_deduction = Decimal('0')

        for record in records:
            if record.employee_id != employee_id or not date_range.contains(record.date):
                continue
            if self.arrived_late(record.time_in):
                total_deduction += self.late_minutes(record.time_in) * self.deduction_per_minute

        return total_deduction
