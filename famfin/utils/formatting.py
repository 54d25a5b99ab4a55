from decimal import Decimal

from famfin.core.config import CURRENCY_SYMBOL


def format_amount(amount: Decimal, symbol: str = CURRENCY_SYMBOL) -> str:
    return f"{symbol}{amount:,.2f}"
