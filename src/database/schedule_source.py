import csv
import logging
from pathlib import Path
from typing import List

import openpyxl

from calculation.deduction_schedule import DeductionSchedule, social_insurance_schedule

logger = logging.getLogger(__name__)

def read_csv_rows(path: Path) -> List[List[str]]:
    """Read tier rows from a CSV file, skipping the header"""
    with open(path, newline='', encoding='utf-8') as f:
        reader = csv.reader(f)
        next(reader, None)
        return [row for row in reader if row]

def read_xlsx_rows(path: Path) -> List[list]:
    """Read tier rows from the first sheet of an Excel workbook, skipping the header"""
    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.worksheets[0]
        rows = []
        for values in ws.iter_rows(min_row=2, values_only=True):
            # Trailing empty cells are padding, not fields
            values = list(values)
            while values and values[-1] is None:
                values.pop()
            if values:
                rows.append(values)
        return rows
    finally:
        wb.close()

def read_tier_rows(path: Path) -> list:
    path = Path(path)
    if path.suffix.lower() in ('.xlsx', '.xlsm'):
        return read_xlsx_rows(path)
    return read_csv_rows(path)

def load_social_insurance_schedule(path: Path) -> DeductionSchedule:
    """Load the social insurance tier table from a CSV or XLSX file"""
    logger.info("Loading social insurance schedule from %s", path)
    return social_insurance_schedule(read_tier_rows(path))
