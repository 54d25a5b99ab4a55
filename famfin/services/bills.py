from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, List, Optional

from famfin.constants.limits import BILL_TREND_MONTHS
from famfin.models.enums import PaymentStatus
from famfin.services.aggregation import (
    CategoryTotal,
    MonthlyExpensePoint,
    category_totals,
    trailing_month_series,
)
from famfin.services.records import ZERO, field_of, to_amount
from famfin.utils.dates import month_start, to_date


@dataclass(frozen=True)
class BillSummary:
    pending_amount: Decimal = ZERO
    paid_amount: Decimal = ZERO
    pending_count: int = 0
    current_month_total: Decimal = ZERO


@dataclass(frozen=True)
class BillAnalytics:
    category_breakdown: List[CategoryTotal] = field(default_factory=list)
    monthly_trend: List[MonthlyExpensePoint] = field(default_factory=list)
    current_month_bills: Decimal = ZERO
    current_month_expenses: Decimal = ZERO
    percentage_of_expenses: float = 0.0


def effective_status(bill: Any, today: Optional[date] = None) -> PaymentStatus:
    """A pending bill past its due date reads as overdue; the stored row is untouched."""
    today = today or date.today()
    status = PaymentStatus(field_of(bill, "payment_status"))
    if status == PaymentStatus.pending and to_date(field_of(bill, "due_date")) < today:
        return PaymentStatus.overdue
    return status


def _due_this_month_or_later(bills: Iterable[Any], today: date) -> List[Any]:
    start = month_start(today)
    return [b for b in bills if to_date(field_of(b, "due_date")) >= start]


def summarize_bills(bills: Iterable[Any], today: Optional[date] = None) -> BillSummary:
    today = today or date.today()
    bills = list(bills)
    pending_amount = paid_amount = ZERO
    pending_count = 0

    for bill in bills:
        amount = to_amount(field_of(bill, "amount"))
        status = effective_status(bill, today)
        if status in (PaymentStatus.pending, PaymentStatus.overdue):
            pending_amount += amount
            pending_count += 1
        elif status == PaymentStatus.paid:
            paid_amount += amount

    current_month_total = sum(
        (to_amount(field_of(b, "amount")) for b in _due_this_month_or_later(bills, today)), ZERO
    )
    return BillSummary(
        pending_amount=pending_amount,
        paid_amount=paid_amount,
        pending_count=pending_count,
        current_month_total=current_month_total,
    )


def analyze_bills(
    bills: Iterable[Any],
    current_month_expenses: Decimal,
    today: Optional[date] = None,
) -> BillAnalytics:
    today = today or date.today()
    bills = list(bills)

    breakdown = sorted(category_totals(bills), key=lambda c: c.total, reverse=True)
    trend = trailing_month_series(bills, "due_date", BILL_TREND_MONTHS, today)
    bills_this_month = sum(
        (to_amount(field_of(b, "amount")) for b in _due_this_month_or_later(bills, today)), ZERO
    )
    current_month_expenses = to_amount(current_month_expenses)
    percentage = (
        float(bills_this_month / current_month_expenses * 100) if current_month_expenses > 0 else 0.0
    )

    return BillAnalytics(
        category_breakdown=breakdown,
        monthly_trend=trend,
        current_month_bills=bills_this_month,
        current_month_expenses=current_month_expenses,
        percentage_of_expenses=percentage,
    )
