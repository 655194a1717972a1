import openpyxl
from openpyxl.styles import Font, Border, Side
from pathlib import Path
from typing import Optional
from models.employee import Employee
from models.payroll import DateRange, WageBreakdown
from config.settings import OUTPUT_DIR, CURRENCY_SYMBOL
from utils.formatters import format_currency, format_month_day

MONEY_FORMAT = '#,##0.00'

class PayslipGenerator:
    """Generate individual payslip Excel files from a wage breakdown"""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = Path(output_dir) if output_dir else OUTPUT_DIR / "payslips"
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def generate(self, employee: Employee, date_range: DateRange, breakdown: WageBreakdown) -> str:
        """Generate payslip Excel file"""

        # Create workbook
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Payslip"

        # Set column widths
        ws.column_dimensions['A'].width = 28
        ws.column_dimensions['B'].width = 30

        # Define styles
        header_font = Font(bold=True, size=12)
        bold_font = Font(bold=True)
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        # Header section
        ws['A1'] = "PAYSLIP"
        ws['A1'].font = header_font

        ws['A2'] = "Employee #"
        ws['B2'] = employee.employee_number
        ws['A3'] = "Name"
        ws['B3'] = employee.full_name
        ws['A4'] = "Position"
        ws['B4'] = employee.position
        ws['A5'] = "Pay Period"
        ws['B5'] = f"{format_month_day(date_range.start)} - {format_month_day(date_range.end)}"
        ws['A6'] = "Hourly Rate"
        ws['B6'] = float(employee.hourly_rate)
        ws['B6'].number_format = MONEY_FORMAT

        # Breakdown table
        row = 8
        ws[f'A{row}'] = "Item"
        ws[f'B{row}'] = f"Amount ({CURRENCY_SYMBOL})"
        for cell in (f'A{row}', f'B{row}'):
            ws[cell].font = bold_font
            ws[cell].border = thin_border

        for label, amount in breakdown.as_rows():
            row += 1
            ws[f'A{row}'] = label
            ws[f'B{row}'] = float(amount)
            ws[f'B{row}'].number_format = MONEY_FORMAT
            ws[f'A{row}'].border = thin_border
            ws[f'B{row}'].border = thin_border

        # Net wage is the last row of the breakdown
        ws[f'A{row}'].font = Font(bold=True, size=14)
        ws[f'B{row}'].font = Font(bold=True, size=14)

        row += 2
        ws[f'A{row}'] = "Amount payable"
        ws[f'B{row}'] = format_currency(breakdown.net_wage)

        # Generate filename
        filename = (f"{employee.employee_number}_{date_range.start.strftime('%Y%m%d')}_"
                    f"{date_range.end.strftime('%Y%m%d')}_payslip.xlsx")
        filepath = self.output_dir / filename

        # Save workbook
        wb.save(filepath)

        return str(filepath)
