import logging
from decimal import Decimal
from typing import Optional

from calculation.contribution_rules import health_insurance_deduction, housing_fund_deduction
from calculation.deduction_schedule import DeductionSchedule
from calculation.late_penalty import LatePenaltyCalculator
from calculation.time_aggregator import TimeAggregator
from calculation.withholding_tax import WithholdingTaxCalculator
from models.payroll import DateRange, WageBreakdown

logger = logging.getLogger(__name__)

class WageCalculationPipeline:
    """Compute an employee's wage breakdown from attendance and statutory deductions.

    ``employee_store`` must provide ``lookup_hourly_rate(employee_id)``
    (raising ``EmployeeNotFound``) and ``attendance_store`` must provide
    ``all_records()``. The social insurance schedule is resolved by the
    caller and passed in, so repeated calculations share one loaded table.
    """

    def __init__(self, employee_store, attendance_store, social_insurance: DeductionSchedule,
                 time_aggregator: Optional[TimeAggregator] = None,
                 late_penalty_calculator: Optional[LatePenaltyCalculator] = None):
        self.employee_store = employee_store
        self.attendance_store = attendance_store
        self.social_insurance = social_insurance
        self.time_aggregator = time_aggregator or TimeAggregator()
        self.late_penalty_calculator = late_penalty_calculator or LatePenaltyCalculator()
        self.withholding_tax = WithholdingTaxCalculator(social_insurance)

    def calculate_wage(self, employee_id: int, date_range: DateRange) -> WageBreakdown:
        """Calculate the wage breakdown for an employee over a date range"""

        hourly_rate = self.employee_store.lookup_hourly_rate(employee_id)
        records = list(self.attendance_store.all_records())

        # Actual hours if recorded, otherwise assumed hours for the range
        hours = self.time_aggregator.hours_for_calculation(records, employee_id, date_range)
        gross_wage = hourly_rate * Decimal(str(hours))

        late_penalty = self.late_penalty_calculator.total_penalty(records, employee_id, date_range)

        # Every deduction is computed from the same gross wage
        breakdown = WageBreakdown(
            gross_wage=gross_wage,
            social_insurance=self.social_insurance.deduction_for(gross_wage),
            health_insurance=health_insurance_deduction(gross_wage),
            housing_fund=housing_fund_deduction(gross_wage),
            withholding_tax=self.withholding_tax.calculate(gross_wage),
            late_penalty=late_penalty,
        )

        logger.info(
            "Calculated wage for employee %s over %s: %.2f hours, gross %s, net %s",
            employee_id, date_range, hours, breakdown.gross_wage, breakdown.net_wage
        )
        return breakdown
