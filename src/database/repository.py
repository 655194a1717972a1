from sqlalchemy.orm import Session
from typing import Iterable, List, Optional
from decimal import Decimal
from .models import EmployeeDB, AttendanceDB
from models.attendance import AttendanceRecord
from models.employee import Employee
from models.errors import EmployeeNotFound

class PayrollRepository:
    """Repository for employee and attendance data operations"""

    def __init__(self, db_session: Session):
        self.db = db_session

    # ========== Employee Operations ==========

    def save_employee(self, employee: Employee) -> EmployeeDB:
        """Save or update employee"""
        db_employee = self.db.get(EmployeeDB, employee.employee_number)
        if not db_employee:
            db_employee = EmployeeDB(employee_number=employee.employee_number)
            self.db.add(db_employee)

        for field_name in (
            'last_name', 'first_name', 'birthdate', 'address', 'phone_number',
            'sss_number', 'philhealth_number', 'tin', 'pagibig_number',
            'status', 'position', 'immediate_supervisor',
            'basic_salary', 'rice_subsidy', 'phone_allowance', 'clothing_allowance',
            'gross_semimonthly_rate', 'hourly_rate'
        ):
            setattr(db_employee, field_name, getattr(employee, field_name))

        self.db.commit()
        self.db.refresh(db_employee)
        return db_employee

    def get_employee(self, employee_number: int) -> Optional[Employee]:
        """Get employee by number"""
        db_employee = self.db.get(EmployeeDB, employee_number)
        return self._to_employee(db_employee) if db_employee else None

    def get_all_employees(self) -> List[Employee]:
        """Get all employees"""
        rows = self.db.query(EmployeeDB).order_by(EmployeeDB.employee_number).all()
        return [self._to_employee(row) for row in rows]

    def delete_employee(self, employee_number: int) -> bool:
        """Delete employee and their attendance records"""
        db_employee = self.db.get(EmployeeDB, employee_number)
        if not db_employee:
            return False
        self.db.delete(db_employee)
        self.db.commit()
        return True

    def lookup_hourly_rate(self, employee_number: int) -> Decimal:
        """Hourly rate of the employee"""
        hourly_rate = self.db.query(EmployeeDB.hourly_rate).filter_by(
            employee_number=employee_number
        ).scalar()
        if hourly_rate is None:
            raise EmployeeNotFound(employee_number)
        return Decimal(str(hourly_rate))

    # ========== Attendance Operations ==========

    def save_attendance_records(self, records: Iterable[AttendanceRecord]) -> int:
        """Append attendance records, preserving their order"""
        count = 0
        for record in records:
            self.db.add(AttendanceDB(
                employee_number=record.employee_id,
                work_date=record.date,
                time_in=record.time_in,
                time_out=record.time_out
            ))
            count += 1
        self.db.commit()
        return count

    def all_records(self) -> List[AttendanceRecord]:
        """All attendance records in insertion order"""
        rows = self.db.query(AttendanceDB).order_by(AttendanceDB.id).all()
        return [
            AttendanceRecord(
                employee_id=row.employee_number,
                date=row.work_date,
                time_in=row.time_in,
                time_out=row.time_out
            )
            for row in rows
        ]

    # ========== Helper Methods ==========

    def _to_employee(self, row: EmployeeDB) -> Employee:
        """Convert database row to domain model"""
        return Employee(
            employee_number=row.employee_number,
            last_name=row.last_name,
            first_name=row.first_name,
            birthdate=row.birthdate,
            address=row.address or "",
            phone_number=row.phone_number or "",
            sss_number=row.sss_number or "",
            philhealth_number=row.philhealth_number or "",
            tin=row.tin or "",
            pagibig_number=row.pagibig_number or "",
            status=row.status or "",
            position=row.position or "",
            immediate_supervisor=row.immediate_supervisor or "",
            basic_salary=self._money(row.basic_salary),
            rice_subsidy=self._money(row.rice_subsidy),
            phone_allowance=self._money(row.phone_allowance),
            clothing_allowance=self._money(row.clothing_allowance),
            gross_semimonthly_rate=self._money(row.gross_semimonthly_rate),
            hourly_rate=self._money(row.hourly_rate)
        )

    @staticmethod
    def _money(value) -> Decimal:
        return Decimal(str(value)) if value is not None else Decimal('0')
