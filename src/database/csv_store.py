import csv
import logging
from datetime import date, datetime, time
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from models.attendance import AttendanceRecord
from models.employee import Employee
from models.errors import DuplicateLeaveError, EmployeeNotFound, RecordParseError, RowLengthError
from models.leave import Leave, with_computed_amounts
from models.payroll import parse_month_day
from utils.formatters import format_plain_currency
from utils.validators import parse_int, parse_money

logger = logging.getLogger(__name__)

BIRTHDATE_PATTERN = "%m/%d/%Y"
TIME_PATTERN = "%H:%M"

EMPLOYEE_HEADER = [
    "Employee #", "Last Name", "First Name", "Birthday", "Address", "Phone Number",
    "SSS #", "Philhealth #", "TIN #", "Pag-ibig #", "Status", "Position", "Immediate Supervisor",
    "Basic Salary", "Rice Subsidy", "Phone Allowance", "Clothing Allowance",
    "Gross Semi-monthly Rate", "Hourly Rate"
]

ATTENDANCE_HEADER = ["Employee #", "Last Name", "First Name", "Date", "Log In", "Log Out"]

LEAVE_HEADER = [
    "Employee Number", "Leave Type", "Start Date", "End Date", "Reason",
    "Sick Leave", "Vacation Leave", "Emergency Leave"
]


def _read_rows(path: Path, expected_length: int) -> Iterator[List[str]]:
    """Yield data rows after the header, rejecting rows of the wrong length"""
    with open(path, newline='', encoding='utf-8') as f:
        reader = csv.reader(f)
        next(reader, None)  # Skip header row
        for row in reader:
            if not row:
                continue
            if len(row) != expected_length:
                raise RowLengthError(expected_length, row, reader.line_num)
            yield row


def _write_rows(path: Path, header: Sequence[str], rows: List[Sequence[str]]):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(header)
        writer.writerows(rows)


class CsvEmployeeStore:
    """Employee records backed by a 19-column CSV file"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def read_employees(self) -> List[Employee]:
        """Read all employees; a row of the wrong length aborts the read"""
        return [self._employee_from_row(row) for row in _read_rows(self.path, len(EMPLOYEE_HEADER))]

    def write_employees(self, employees: List[Employee]):
        """Replace the file contents with the given employees"""
        _write_rows(self.path, EMPLOYEE_HEADER, [self._employee_to_row(e) for e in employees])

    def get_employee(self, employee_number: int) -> Optional[Employee]:
        return next((e for e in self.read_employees() if e.employee_number == employee_number), None)

    def lookup_hourly_rate(self, employee_number: int):
        """Hourly rate of the employee"""
        employee = self.get_employee(employee_number)
        if employee is None:
            raise EmployeeNotFound(employee_number)
        return employee.hourly_rate

    def _employee_from_row(self, data: List[str]) -> Employee:
        return Employee(
            employee_number=parse_int(data[0]),
            last_name=data[1],
            first_name=data[2],
            birthdate=self._parse_birthdate(data[3]),
            address=data[4],
            phone_number=data[5],
            sss_number=data[6],
            philhealth_number=data[7],
            tin=data[8],
            pagibig_number=data[9],
            status=data[10],
            position=data[11],
            immediate_supervisor=data[12],
            basic_salary=parse_money(data[13]),
            rice_subsidy=parse_money(data[14]),
            phone_allowance=parse_money(data[15]),
            clothing_allowance=parse_money(data[16]),
            gross_semimonthly_rate=parse_money(data[17]),
            hourly_rate=parse_money(data[18])
        )

    @staticmethod
    def _employee_to_row(employee: Employee) -> List[str]:
        return [
            str(employee.employee_number),
            employee.last_name,
            employee.first_name,
            employee.birthdate.strftime(BIRTHDATE_PATTERN) if employee.birthdate else "",
            employee.address,
            employee.phone_number,
            employee.sss_number,
            employee.philhealth_number,
            employee.tin,
            employee.pagibig_number,
            employee.status,
            employee.position,
            employee.immediate_supervisor,
            format_plain_currency(employee.basic_salary),
            format_plain_currency(employee.rice_subsidy),
            format_plain_currency(employee.phone_allowance),
            format_plain_currency(employee.clothing_allowance),
            format_plain_currency(employee.gross_semimonthly_rate),
            format_plain_currency(employee.hourly_rate)
        ]

    @staticmethod
    def _parse_birthdate(value: str) -> Optional[date]:
        value = value.strip()
        if not value:
            return None
        try:
            return datetime.strptime(value, BIRTHDATE_PATTERN).date()
        except ValueError:
            raise RecordParseError(f"Invalid birthdate {value!r}; expected MM/DD/YYYY")


class CsvAttendanceStore:
    """Attendance records backed by a CSV file with MM/DD dates and HH:MM times"""

    def __init__(self, path: Path, year: Optional[int] = None):
        self.path = Path(path)
        self.year = year or date.today().year

    def all_records(self) -> List[AttendanceRecord]:
        """All attendance records, for every employee, in file order"""
        records = []
        for row in _read_rows(self.path, len(ATTENDANCE_HEADER)):
            records.append(AttendanceRecord(
                employee_id=parse_int(row[0]),
                date=self._parse_date(row[3]),
                time_in=self._parse_time(row[4]),
                time_out=self._parse_time(row[5])
            ))
        logger.debug("Loaded %d attendance records from %s", len(records), self.path)
        return records

    def _parse_date(self, value: str) -> date:
        try:
            return parse_month_day(value, self.year)
        except ValueError:
            raise RecordParseError(f"Invalid attendance date {value!r}; expected MM/DD")

    @staticmethod
    def _parse_time(value: str) -> time:
        try:
            return datetime.strptime(value.strip(), TIME_PATTERN).time()
        except ValueError:
            raise RecordParseError(f"Invalid attendance time {value!r}; expected HH:MM")


class CsvLeaveStore:
    """Leave applications backed by a CSV file"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load_leave_applications(self) -> List[Leave]:
        """All leave applications; an absent file means none were saved yet"""
        if not self.path.exists():
            return []

        return [
            Leave(
                employee_number=parse_int(row[0]),
                leave_type=row[1],
                start_date=row[2],
                end_date=row[3],
                reason=row[4],
                sick_leave_amount=parse_money(row[5]),
                vacation_leave_amount=parse_money(row[6]),
                emergency_leave_amount=parse_money(row[7])
            )
            for row in _read_rows(self.path, len(LEAVE_HEADER))
        ]

    def leaves_for_employee(self, employee_number: int) -> List[Leave]:
        return [leave for leave in self.load_leave_applications()
                if leave.employee_number == employee_number]

    def save_leave_application(self, leave: Leave) -> Leave:
        """Compute leave amounts and append the application"""
        leaves = self.load_leave_applications()

        if any(existing.employee_number == leave.employee_number for existing in leaves):
            raise DuplicateLeaveError(f"Record already exists for employee number: {leave.employee_number}")

        try:
            leave = with_computed_amounts(leave)
        except ValueError:
            raise RecordParseError(
                f"Invalid leave dates {leave.start_date!r} - {leave.end_date!r}; expected MM/DD/YYYY"
            )
        leaves.append(leave)

        _write_rows(self.path, LEAVE_HEADER, [
            [
                str(l.employee_number),
                l.leave_type,
                l.start_date,
                l.end_date,
                l.reason,
                str(l.sick_leave_amount),
                str(l.vacation_leave_amount),
                str(l.emergency_leave_amount)
            ]
            for l in leaves
        ])
        logger.info("Saved %s for employee %s", leave.leave_type, leave.employee_number)
        return leave
