from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

class ContributionKind(str, Enum):
    HEALTH_INSURANCE = "health_insurance"
    HOUSING_FUND = "housing_fund"


@dataclass(frozen=True)
class CappedPercentageRule:
    """Percentage-of-gross contribution with an optional floor, cap and employee share.

    ``rates`` is an ordered tuple of ``(wage_limit, rate)`` pairs: the first
    pair whose limit is ``None`` or at least the gross wage supplies the rate.
    """
    kind: ContributionKind
    rates: Tuple[Tuple[Optional[Decimal], Decimal], ...]
    minimum: Decimal = Decimal('0')
    maximum: Optional[Decimal] = None
    employee_share: Decimal = Decimal('1')

    def rate_for(self, gross_wage: Decimal) -> Decimal:
        for wage_limit, rate in self.rates:
            if wage_limit is None or gross_wage <= wage_limit:
                return rate
        return self.rates[-1][1]

    def premium(self, gross_wage: Decimal) -> Decimal:
        """Full contribution before the employee share is applied"""
        amount = gross_wage * self.rate_for(gross_wage)
        if self.maximum is not None:
            amount = min(amount, self.maximum)
        return max(amount, self.minimum)

    def compute_from_gross_wage(self, gross_wage: Decimal) -> Decimal:
        return self.premium(gross_wage) * self.employee_share


HEALTH_INSURANCE = CappedPercentageRule(
    kind=ContributionKind.HEALTH_INSURANCE,
    rates=((None, Decimal('0.03')),),
    minimum=Decimal('300'),
    maximum=Decimal('1800'),
    employee_share=Decimal('0.50'),
)

HOUSING_FUND = CappedPercentageRule(
    kind=ContributionKind.HOUSING_FUND,
    rates=((Decimal('1500'), Decimal('0.03')), (None, Decimal('0.04'))),
    maximum=Decimal('100'),
)


def health_insurance_deduction(gross_wage: Decimal) -> Decimal:
    """Employee half of the health insurance premium"""
    return HEALTH_INSURANCE.compute_from_gross_wage(gross_wage)


def housing_fund_deduction(gross_wage: Decimal) -> Decimal:
    """Housing fund contribution, 3% up to 1500 and 4% above, capped at 100"""
    return HOUSING_FUND.compute_from_gross_wage(gross_wage)
