import logging
from decimal import Decimal, InvalidOperation
from typing import Any

logger = logging.getLogger(__name__)

def parse_money(value: Any) -> Decimal:
    """Parse a currency field, falling back to zero when unparseable"""
    try:
        amount = Decimal(str(value).replace(',', '').strip())
    except (InvalidOperation, ValueError):
        amount = None
    if amount is None or not amount.is_finite():
        logger.warning("Invalid currency value %r, using 0", value)
        return Decimal('0')
    return amount

def parse_int(value: Any) -> int:
    """Parse an integer field, falling back to zero when unparseable"""
    try:
        return int(str(value).strip())
    except ValueError:
        logger.warning("Invalid integer value %r, using 0", value)
        return 0

def validate_tier_bounds(lower: Decimal, upper: Decimal) -> bool:
    """Tier bounds must be non-negative and ordered"""
    return Decimal('0') <= lower <= upper
