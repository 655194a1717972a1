import argparse
import logging
import sys
from contextlib import contextmanager
from datetime import date

from config.settings import (
    LOG_LEVEL, OUTPUT_DIR, EMPLOYEE_DATA_PATH, ATTENDANCE_DATA_PATH, SOCIAL_INSURANCE_TABLE_PATH
)
from calculation import ScheduleCache, WageCalculationPipeline
from database.csv_store import CsvAttendanceStore, CsvEmployeeStore
from database.schedule_source import load_social_insurance_schedule
from models.errors import PayrollError
from models.payroll import DateRange
from utils.formatters import format_currency

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

social_insurance_cache = ScheduleCache(lambda: load_social_insurance_schedule(SOCIAL_INSURANCE_TABLE_PATH))

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="payroll", description="Attendance-based wage calculator")
    parser.add_argument("--employee", type=int, required=True, help="Employee number")
    period = parser.add_mutually_exclusive_group(required=True)
    period.add_argument("--month", help="Month number (1-12)")
    period.add_argument("--start", help="Start date, MM/DD")
    parser.add_argument("--end", help="End date, MM/DD (with --start)")
    parser.add_argument("--year", type=int, default=date.today().year)
    parser.add_argument("--source", choices=["csv", "db"], default="csv",
                        help="Where employee and attendance records are read from")
    parser.add_argument("--payslip", action="store_true", help="Also write an Excel payslip")
    return parser

@contextmanager
def open_stores(source: str, year: int):
    """Employee and attendance stores for the selected source"""
    if source == "db":
        from database import db
        from database.repository import PayrollRepository
        db.init_db()
        session = db.SessionLocal()
        try:
            repo = PayrollRepository(session)
            yield repo, repo
        finally:
            session.close()
    else:
        yield CsvEmployeeStore(EMPLOYEE_DATA_PATH), CsvAttendanceStore(ATTENDANCE_DATA_PATH, year=year)

def resolve_range(args) -> DateRange:
    if args.month:
        return DateRange.month_range(args.month, args.year)
    if not args.end:
        raise SystemExit("--end is required with --start")
    return DateRange.from_endpoints(args.start, args.end, args.year)

def print_breakdown(employee_number: int, date_range: DateRange, breakdown):
    print("=" * 60)
    print(f"Employee #{employee_number}  Period {date_range}")
    print("=" * 60)
    for label, amount in breakdown.as_rows():
        print(f"{label:<28}{format_currency(amount):>20}")
    print("=" * 60)

def main(argv=None) -> int:
    """Main entry point for the wage calculator"""
    args = build_parser().parse_args(argv)

    try:
        date_range = resolve_range(args)
        with open_stores(args.source, args.year) as (employee_store, attendance_store):
            pipeline = WageCalculationPipeline(employee_store, attendance_store, social_insurance_cache.get())
            breakdown = pipeline.calculate_wage(args.employee, date_range)
            print_breakdown(args.employee, date_range, breakdown)

            if args.payslip:
                from processors.payslip_generator import PayslipGenerator
                employee = employee_store.get_employee(args.employee)
                filepath = PayslipGenerator(OUTPUT_DIR / "payslips").generate(employee, date_range, breakdown)
                print(f"Payslip saved to: {filepath}")
    except (PayrollError, OSError) as e:
        logger.error("Wage calculation failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
