from sqlalchemy import Column, Integer, String, Date, Time, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from .db import Base

class EmployeeDB(Base):
    """Employee database model"""
    __tablename__ = "employees"

    employee_number = Column(Integer, primary_key=True, autoincrement=False)
    last_name = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    birthdate = Column(Date)
    address = Column(String, default="")
    phone_number = Column(String, default="")

    # Government ids
    sss_number = Column(String, default="")
    philhealth_number = Column(String, default="")
    tin = Column(String, default="")
    pagibig_number = Column(String, default="")

    # Employment
    status = Column(String, default="")
    position = Column(String, default="")
    immediate_supervisor = Column(String, default="")

    # Compensation
    basic_salary = Column(Numeric(12, 2), default=0)
    rice_subsidy = Column(Numeric(12, 2), default=0)
    phone_allowance = Column(Numeric(12, 2), default=0)
    clothing_allowance = Column(Numeric(12, 2), default=0)
    gross_semimonthly_rate = Column(Numeric(12, 2), default=0)
    hourly_rate = Column(Numeric(12, 2), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    attendance_records = relationship("AttendanceDB", back_populates="employee",
                                      cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Employee(employee_number={self.employee_number}, name={self.first_name} {self.last_name})>"


class AttendanceDB(Base):
    """Attendance entry database model"""
    __tablename__ = "attendance_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_number = Column(Integer, ForeignKey('employees.employee_number'), nullable=False, index=True)
    work_date = Column(Date, nullable=False, index=True)
    time_in = Column(Time, nullable=False)
    time_out = Column(Time, nullable=False)

    # Relationships
    employee = relationship("EmployeeDB", back_populates="attendance_records")

    def __repr__(self):
        return f"<Attendance(employee={self.employee_number}, date={self.work_date}, in={self.time_in}, out={self.time_out})>"
