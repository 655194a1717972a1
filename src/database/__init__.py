from .db import engine, SessionLocal, Base, get_db, init_db
from .models import EmployeeDB, AttendanceDB
from .repository import PayrollRepository
from .csv_store import CsvEmployeeStore, CsvAttendanceStore, CsvLeaveStore
from .schedule_source import load_social_insurance_schedule, read_tier_rows

__all__ = [
    'engine',
    'SessionLocal',
    'Base',
    'get_db',
    'init_db',
    'EmployeeDB',
    'AttendanceDB',
    'PayrollRepository',
    'CsvEmployeeStore',
    'CsvAttendanceStore',
    'CsvLeaveStore',
    'load_social_insurance_schedule',
    'read_tier_rows'
]
