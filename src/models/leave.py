from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal

LEAVE_DATE_PATTERN = "%m/%d/%Y"

SICK_LEAVE = "Sick Leave"
VACATION_LEAVE = "Vacation Leave"
EMERGENCY_LEAVE = "Emergency Leave"

# Amount credited per day of leave, by leave type
LEAVE_DAILY_AMOUNTS = {
    SICK_LEAVE: Decimal('1500.00'),
    VACATION_LEAVE: Decimal('1500.00'),
    EMERGENCY_LEAVE: Decimal('500.00'),
}

@dataclass(frozen=True)
class Leave:
    """Leave application"""
    employee_number: int
    leave_type: str = "Unknown"
    start_date: str = "N/A"
    end_date: str = "N/A"
    reason: str = "No reason provided"
    sick_leave_amount: Decimal = Decimal('0')
    vacation_leave_amount: Decimal = Decimal('0')
    emergency_leave_amount: Decimal = Decimal('0')

    def day_count(self) -> int:
        """Days covered by the leave, both dates included"""
        start = datetime.strptime(self.start_date, LEAVE_DATE_PATTERN).date()
        end = datetime.strptime(self.end_date, LEAVE_DATE_PATTERN).date()
        return abs((end - start).days) + 1


def with_computed_amounts(leave: Leave) -> Leave:
    """Return a copy of the leave with amounts derived from its type and duration"""
    days = leave.day_count()
    amounts = {
        'sick_leave_amount': Decimal('0'),
        'vacation_leave_amount': Decimal('0'),
        'emergency_leave_amount': Decimal('0'),
    }
    daily_amount = LEAVE_DAILY_AMOUNTS.get(leave.leave_type)
    if daily_amount is not None:
        field_name = {
            SICK_LEAVE: 'sick_leave_amount',
            VACATION_LEAVE: 'vacation_leave_amount',
            EMERGENCY_LEAVE: 'emergency_leave_amount',
        }[leave.leave_type]
        amounts[field_name] = daily_amount * days
    return replace(leave, **amounts)
