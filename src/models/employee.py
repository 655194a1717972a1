from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

@dataclass
class Employee:
    """Employee data model"""
    employee_number: int
    last_name: str
    first_name: str
    birthdate: Optional[date] = None
    address: str = ""
    phone_number: str = ""
    sss_number: str = ""
    philhealth_number: str = ""
    tin: str = ""
    pagibig_number: str = ""
    status: str = ""
    position: str = ""
    immediate_supervisor: str = ""
    basic_salary: Decimal = Decimal('0')
    rice_subsidy: Decimal = Decimal('0')
    phone_allowance: Decimal = Decimal('0')
    clothing_allowance: Decimal = Decimal('0')
    gross_semimonthly_rate: Decimal = Decimal('0')
    hourly_rate: Decimal = Decimal('0')

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self):
        return f"Employee({self.employee_number}, {self.full_name})"
