import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Paths
DATA_DIR = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data")))
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(BASE_DIR / "output")))

# Record sources (CSV)
EMPLOYEE_DATA_PATH = Path(os.getenv("EMPLOYEE_DATA_PATH", str(DATA_DIR / "employee_information.csv")))
ATTENDANCE_DATA_PATH = Path(os.getenv("ATTENDANCE_DATA_PATH", str(DATA_DIR / "employee_attendance.csv")))
LEAVE_DATA_PATH = Path(os.getenv("LEAVE_DATA_PATH", str(DATA_DIR / "leave_balances.csv")))
SOCIAL_INSURANCE_TABLE_PATH = Path(os.getenv("SOCIAL_INSURANCE_TABLE_PATH", str(DATA_DIR / "sss_deduction.csv")))

# Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///data/payroll.db")

# Application settings
DEBUG = os.getenv("DEBUG", "False").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Display
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₱")
