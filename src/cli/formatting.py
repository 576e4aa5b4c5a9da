"""Currency display helpers for terminal output."""

from decimal import Decimal

from src.config import settings
from src.engine.amortization import round_currency


def format_currency(value: Decimal, symbol: str | None = None) -> str:
    """Render a value as grouped currency with two decimals, e.g. -$1,234.50."""
    if symbol is None:
        symbol = settings.currency_symbol
    amount = round_currency(Decimal(value))
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_percent(value: Decimal) -> str:
    """Annual rate percentage as entered, e.g. 6.5 -> '6.50%'."""
    return f"{Decimal(value):.2f}%"
