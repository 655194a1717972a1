from datetime import date, time
from decimal import Decimal
from pathlib import Path

import pytest

from calculation.deduction_schedule import social_insurance_schedule
from database.schedule_source import read_csv_rows
from models.attendance import AttendanceRecord
from models.errors import EmployeeNotFound

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class InMemoryEmployeeStore:
    """Employee store keyed by employee number"""

    def __init__(self, rates):
        self.rates = dict(rates)

    def lookup_hourly_rate(self, employee_id):
        if employee_id not in self.rates:
            raise EmployeeNotFound(employee_id)
        return self.rates[employee_id]


class InMemoryAttendanceStore:
    def __init__(self, records):
        self.records = list(records)
        self.calls = 0

    def all_records(self):
        self.calls += 1
        return list(self.records)


def attendance(employee_id, day, time_in, time_out):
    """Build a record from 'HH:MM' strings"""
    hour_in, minute_in = (int(v) for v in time_in.split(':'))
    hour_out, minute_out = (int(v) for v in time_out.split(':'))
    return AttendanceRecord(employee_id, day, time(hour_in, minute_in), time(hour_out, minute_out))


@pytest.fixture(scope="session")
def sss_rows():
    return read_csv_rows(DATA_DIR / "sss_deduction.csv")


@pytest.fixture
def social_insurance(sss_rows):
    return social_insurance_schedule(sss_rows)


@pytest.fixture
def june_records():
    return [
        attendance(10001, date(2023, 6, 1), "08:00", "17:00"),
        attendance(10001, date(2023, 6, 2), "08:30", "17:30"),
        attendance(10002, date(2023, 6, 2), "09:00", "18:00"),
        attendance(10001, date(2023, 6, 30), "08:11", "16:11"),
        attendance(10001, date(2023, 7, 1), "10:00", "19:00"),
    ]


@pytest.fixture
def employee_store():
    return InMemoryEmployeeStore({10001: Decimal('100'), 10002: Decimal('357.14')})
