from decimal import Decimal
from datetime import date

from config.settings import CURRENCY_SYMBOL

def format_currency(amount: Decimal, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format currency amount"""
    return f"{symbol}{amount:,.2f}"

def format_plain_currency(amount: Decimal) -> str:
    """Format currency amount without a symbol"""
    return f"{amount:,.2f}"

def format_month_day(d: date) -> str:
    """Format date as MM/DD"""
    return d.strftime("%m/%d")

