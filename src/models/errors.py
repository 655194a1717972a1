class PayrollError(Exception):
    """Base class for payroll computation errors"""


class InvalidRange(PayrollError, ValueError):
    """Date range end precedes its start, or an endpoint cannot be parsed"""


class InvalidMonth(PayrollError, ValueError):
    """Month number outside 1-12"""


class EmployeeNotFound(PayrollError, LookupError):
    """No hourly rate on record for the employee"""

    def __init__(self, employee_id: int):
        super().__init__(f"Hourly rate not found for employee number: {employee_id}")
        self.employee_id = employee_id


class MalformedScheduleRow(PayrollError, ValueError):
    """Deduction-tier row is structurally invalid; the whole load is aborted"""


class ScheduleGapError(PayrollError, LookupError):
    """Wage falls inside the schedule's nominal range but matches no tier"""


class RowLengthError(PayrollError, ValueError):
    """Record row has the wrong number of fields"""

    def __init__(self, expected: int, row: list, line_number: int = None):
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(
            f"Invalid data length{location}: expected {expected} fields but got {len(row)} "
            f"in row: {','.join(str(v) for v in row)}"
        )
        self.expected = expected
        self.row = row
        self.line_number = line_number


class RecordParseError(PayrollError, ValueError):
    """Date or time field in a record cannot be parsed"""


class DuplicateLeaveError(PayrollError, ValueError):
    """A leave record already exists for the employee"""
