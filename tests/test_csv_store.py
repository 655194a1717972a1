from datetime import date, time
from decimal import Decimal

import pytest

from database.csv_store import (
    ATTENDANCE_HEADER,
    EMPLOYEE_HEADER,
    CsvAttendanceStore,
    CsvEmployeeStore,
    CsvLeaveStore,
)
from models.employee import Employee
from models.errors import DuplicateLeaveError, EmployeeNotFound, RecordParseError, RowLengthError
from models.leave import Leave
from conftest import DATA_DIR


def write_csv(path, header, rows):
    lines = [",".join(header)] + [",".join(row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def employee_row(number, hourly_rate):
    return [str(number), "Doe", "Jane", "01/02/1990", "Somewhere", "555", "a", "b", "c", "d",
            "Regular", "Clerk", "Boss", "1000", "0", "0", "0", "500", hourly_rate]


# ========== Employee store ==========

def test_shipped_employee_file_is_readable():
    store = CsvEmployeeStore(DATA_DIR / "employee_information.csv")

    employees = store.read_employees()

    assert len(employees) == 4
    assert employees[0].employee_number == 10001
    assert employees[0].basic_salary == Decimal('90000.00')
    assert store.lookup_hourly_rate(10002) == Decimal('357.14')


def test_lookup_hourly_rate(tmp_path):
    store = CsvEmployeeStore(write_csv(tmp_path / "emp.csv", EMPLOYEE_HEADER, [employee_row(1, "125.50")]))

    assert store.lookup_hourly_rate(1) == Decimal('125.50')
    assert store.get_employee(1).birthdate == date(1990, 1, 2)


def test_lookup_unknown_employee(tmp_path):
    store = CsvEmployeeStore(write_csv(tmp_path / "emp.csv", EMPLOYEE_HEADER, [employee_row(1, "125.50")]))

    with pytest.raises(EmployeeNotFound):
        store.lookup_hourly_rate(2)


def test_unparseable_money_degrades_to_zero(tmp_path):
    store = CsvEmployeeStore(write_csv(tmp_path / "emp.csv", EMPLOYEE_HEADER, [employee_row(1, "n/a")]))

    assert store.lookup_hourly_rate(1) == Decimal('0')


def test_unparseable_employee_number_degrades_to_zero(tmp_path):
    store = CsvEmployeeStore(write_csv(tmp_path / "emp.csv", EMPLOYEE_HEADER, [employee_row("x1", "10")]))

    assert store.read_employees()[0].employee_number == 0


def test_short_employee_row_aborts_read(tmp_path):
    path = write_csv(tmp_path / "emp.csv", EMPLOYEE_HEADER, [employee_row(1, "10"), ["2", "Doe"]])

    with pytest.raises(RowLengthError):
        CsvEmployeeStore(path).read_employees()


def test_employee_write_then_read(tmp_path):
    store = CsvEmployeeStore(tmp_path / "out" / "emp.csv")
    employee = Employee(
        employee_number=42,
        last_name="Santos",
        first_name="Ana",
        birthdate=date(1991, 12, 1),
        address="12 Rizal St, Manila",
        basic_salary=Decimal('25000'),
        hourly_rate=Decimal('148.81'),
    )

    store.write_employees([employee])

    assert store.read_employees() == [
        Employee(
            employee_number=42,
            last_name="Santos",
            first_name="Ana",
            birthdate=date(1991, 12, 1),
            address="12 Rizal St, Manila",
            basic_salary=Decimal('25000.00'),
            rice_subsidy=Decimal('0.00'),
            phone_allowance=Decimal('0.00'),
            clothing_allowance=Decimal('0.00'),
            gross_semimonthly_rate=Decimal('0.00'),
            hourly_rate=Decimal('148.81'),
        )
    ]


# ========== Attendance store ==========

def test_attendance_records_in_file_order(tmp_path):
    path = write_csv(tmp_path / "att.csv", ATTENDANCE_HEADER, [
        ["2", "Doe", "Jane", "06/02", "8:59", "18:31"],
        ["1", "Roe", "Rick", "06/01", "08:05", "17:10"],
    ])

    records = CsvAttendanceStore(path, year=2023).all_records()

    assert [r.employee_id for r in records] == [2, 1]
    assert records[0].date == date(2023, 6, 2)
    assert records[0].time_in == time(8, 59)
    assert records[0].time_out == time(18, 31)


def test_attendance_row_length_error(tmp_path):
    path = write_csv(tmp_path / "att.csv", ATTENDANCE_HEADER, [
        ["1", "Roe", "Rick", "06/01", "08:05", "17:10"],
        ["1", "Roe", "Rick", "06/02", "08:05"],
    ])

    with pytest.raises(RowLengthError) as excinfo:
        CsvAttendanceStore(path, year=2023).all_records()

    assert excinfo.value.line_number == 3


@pytest.mark.parametrize("day, time_in", [("6-1", "08:00"), ("06/01", "8am"), ("02/30", "08:00")])
def test_attendance_unparseable_fields(tmp_path, day, time_in):
    path = write_csv(tmp_path / "att.csv", ATTENDANCE_HEADER, [["1", "Roe", "Rick", day, time_in, "17:00"]])

    with pytest.raises(RecordParseError):
        CsvAttendanceStore(path, year=2023).all_records()


def test_shipped_attendance_file_is_readable():
    records = CsvAttendanceStore(DATA_DIR / "employee_attendance.csv", year=2023).all_records()

    assert len(records) == 15
    assert {r.employee_id for r in records} == {10001, 10002, 10003}


# ========== Leave store ==========

def test_save_leave_computes_amounts(tmp_path):
    store = CsvLeaveStore(tmp_path / "leave.csv")

    saved = store.save_leave_application(
        Leave(10001, "Sick Leave", "06/01/2023", "06/03/2023", "Flu")
    )

    assert saved.sick_leave_amount == Decimal('4500.00')
    assert saved.vacation_leave_amount == Decimal('0')
    assert store.leaves_for_employee(10001) == [saved]
    assert store.leaves_for_employee(10002) == []


def test_emergency_leave_rate(tmp_path):
    store = CsvLeaveStore(tmp_path / "leave.csv")

    saved = store.save_leave_application(
        Leave(10002, "Emergency Leave", "06/05/2023", "06/04/2023", "Family")
    )

    assert saved.emergency_leave_amount == Decimal('1000.00')


def test_second_leave_for_same_employee_is_rejected(tmp_path):
    store = CsvLeaveStore(tmp_path / "leave.csv")
    store.save_leave_application(Leave(10001, "Vacation Leave", "06/01/2023", "06/01/2023", "Trip"))

    with pytest.raises(DuplicateLeaveError):
        store.save_leave_application(Leave(10001, "Sick Leave", "06/02/2023", "06/02/2023", "Flu"))

    assert len(store.load_leave_applications()) == 1


def test_leave_with_bad_dates(tmp_path):
    store = CsvLeaveStore(tmp_path / "leave.csv")

    with pytest.raises(RecordParseError):
        store.save_leave_application(Leave(10001, "Sick Leave", "2023-06-01", "06/02/2023", "Flu"))


def test_missing_leave_file_means_no_leaves(tmp_path):
    assert CsvLeaveStore(tmp_path / "absent.csv").load_leave_applications() == []
