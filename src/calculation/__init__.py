from .time_aggregator import TimeAggregator
from .late_penalty import LatePenaltyCalculator
from .deduction_schedule import DeductionSchedule, ScheduleCache, social_insurance_schedule
from .contribution_rules import (
    CappedPercentageRule,
    ContributionKind,
    HEALTH_INSURANCE,
    HOUSING_FUND,
    health_insurance_deduction,
    housing_fund_deduction
)
from .withholding_tax import WithholdingTaxCalculator
from .wage_pipeline import WageCalculationPipeline


__all__ = [
    'TimeAggregator',
    'LatePenaltyCalculator',
    'DeductionSchedule',
    'ScheduleCache',
    'social_insurance_schedule',
    'CappedPercentageRule',
    'ContributionKind',
    'HEALTH_INSURANCE',
    'HOUSING_FUND',
    'health_insurance_deduction',
    'housing_fund_deduction',
    'WithholdingTaxCalculator',
    'WageCalculationPipeline'
]
