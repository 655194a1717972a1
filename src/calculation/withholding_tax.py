from decimal import Decimal
from typing import Tuple

from calculation.contribution_rules import health_insurance_deduction, housing_fund_deduction
from calculation.deduction_schedule import DeductionSchedule

# (taxable income threshold, rate), lowest threshold first
TAX_BRACKETS: Tuple[Tuple[Decimal, Decimal], ...] = (
    (Decimal('20832'), Decimal('0.20')),
    (Decimal('33333'), Decimal('0.25')),
    (Decimal('66667'), Decimal('0.30')),
    (Decimal('166667'), Decimal('0.32')),
    (Decimal('666667'), Decimal('0.35')),
)

class WithholdingTaxCalculator:
    """Calculate withholding tax from gross wage and statutory contributions.

    The rate of the highest bracket reached is applied to the whole taxable
    income; brackets are not graduated.
    """

    def __init__(self, social_insurance: DeductionSchedule,
                 brackets: Tuple[Tuple[Decimal, Decimal], ...] = TAX_BRACKETS):
        self.social_insurance = social_insurance
        self.brackets = brackets

    def calculate(self, gross_wage: Decimal) -> Decimal:
        """Withholding tax for the gross wage"""
        taxable_income = self.taxable_income(gross_wage)

        if taxable_income <= 0:
            return Decimal('0')

        return taxable_income * self.applicable_rate(taxable_income)

    def taxable_income(self, gross_wage: Decimal) -> Decimal:
        """Gross wage less social insurance, health insurance and housing fund, floored at zero"""
        contributions = (
            self.social_insurance.deduction_for(gross_wage)
            + health_insurance_deduction(gross_wage)
            + housing_fund_deduction(gross_wage)
        )
        return max(gross_wage - contributions, Decimal('0'))

    def applicable_rate(self, taxable_income: Decimal) -> Decimal:
        for threshold, rate in reversed(self.brackets):
            if taxable_income >= threshold:
                return rate
        return Decimal('0')
