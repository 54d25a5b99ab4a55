# famfin/services/aggregation.py

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from famfin.constants.limits import RECENT_EXPENSES_LIMIT, TOP_CATEGORIES_LIMIT
from famfin.services.records import ZERO, field_of, label_of, to_amount
from famfin.utils.dates import month_bounds, month_label, shift_month, to_date


@dataclass(frozen=True)
class MonthlyExpensePoint:
    month: str
    total: Decimal


@dataclass(frozen=True)
class CategoryTotal:
    name: str
    total: Decimal


@dataclass(frozen=True)
class ComparisonResult:
    current_month_expenses: Decimal = ZERO
    last_month_expenses: Decimal = ZERO
    expense_difference: Decimal = ZERO
    expense_change_percent: float = 0.0


@dataclass(frozen=True)
class FinancialSummary:
    total_income: Decimal = ZERO
    total_expenses: Decimal = ZERO
    remaining_balance: Decimal = ZERO
    monthly_expenses: List[MonthlyExpensePoint] = field(default_factory=list)
    category_expenses: List[CategoryTotal] = field(default_factory=list)
    comparison: ComparisonResult = field(default_factory=ComparisonResult)
    top_categories: List[CategoryTotal] = field(default_factory=list)
    recent_expenses: List[Any] = field(default_factory=list)


def total_amount(records: Iterable[Any]) -> Decimal:
    return sum((to_amount(field_of(r, "amount")) for r in records), ZERO)


def monthly_expenses(expenses: Iterable[Any], date_field: str = "expense_date") -> List[MonthlyExpensePoint]:
    """Per-month totals, oldest month first. Months without records are skipped."""
    totals: Dict[Tuple[int, int], Decimal] = {}
    for expense in expenses:
        d = to_date(field_of(expense, date_field))
        key = (d.year, d.month)
        totals[key] = totals.get(key, ZERO) + to_amount(field_of(expense, "amount"))

    return [
        MonthlyExpensePoint(month=month_label(date(year, month, 1)), total=total)
        for (year, month), total in sorted(totals.items())
    ]


def trailing_month_series(
    records: Iterable[Any],
    date_field: str,
    months: int,
    today: Optional[date] = None,
) -> List[MonthlyExpensePoint]:
    """Totals for the last `months` calendar months, zero months included, oldest first."""
    today = today or date.today()
    window = [shift_month(today, -offset) for offset in range(months - 1, -1, -1)]
    totals: Dict[date, Decimal] = {start: ZERO for start in window}

    for record in records:
        start = to_date(field_of(record, date_field)).replace(day=1)
        if start in totals:
            totals[start] += to_amount(field_of(record, "amount"))

    return [MonthlyExpensePoint(month=month_label(start), total=totals[start]) for start in window]


def category_totals(records: Iterable[Any], category_field: str = "category") -> List[CategoryTotal]:
    """Per-category totals in order of first appearance."""
    totals: Dict[str, Decimal] = {}
    for record in records:
        name = label_of(field_of(record, category_field))
        totals[name] = totals.get(name, ZERO) + to_amount(field_of(record, "amount"))
    return [CategoryTotal(name=name, total=total) for name, total in totals.items()]


def top_categories(categories: Sequence[CategoryTotal], limit: int = TOP_CATEGORIES_LIMIT) -> List[CategoryTotal]:
    return sorted(categories, key=lambda c: c.total, reverse=True)[:limit]


def expenses_in_month(
    expenses: Iterable[Any],
    today: Optional[date] = None,
    offset: int = 0,
    date_field: str = "expense_date",
) -> List[Any]:
    start, end = month_bounds(today, offset)
    return [e for e in expenses if start <= to_date(field_of(e, date_field)) < end]


def current_month_category_spend(expenses: Iterable[Any], today: Optional[date] = None) -> Dict[str, Decimal]:
    return {c.name: c.total for c in category_totals(expenses_in_month(expenses, today))}


def change_percent(current: Decimal, previous: Decimal) -> float:
    if previous > 0:
        return float((current - previous) / previous * 100)
    return 100.0 if current > 0 else 0.0


def compare_months(expenses: Sequence[Any], today: Optional[date] = None) -> ComparisonResult:
    current = total_amount(expenses_in_month(expenses, today))
    previous = total_amount(expenses_in_month(expenses, today, offset=-1))
    return ComparisonResult(
        current_month_expenses=current,
        last_month_expenses=previous,
        expense_difference=current - previous,
        expense_change_percent=change_percent(current, previous),
    )


def summarize(expenses: Sequence[Any], income: Sequence[Any], today: Optional[date] = None) -> FinancialSummary:
    """Dashboard aggregates for one account (or one member's slice of it).

    `expenses` are expected newest first, the way the dashboard query orders
    them, so the leading records double as the recent-expenses list.
    """
    total_income = total_amount(income)
    total_expenses = total_amount(expenses)
    categories = category_totals(expenses)

    return FinancialSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        remaining_balance=total_income - total_expenses,
        monthly_expenses=monthly_expenses(expenses),
        category_expenses=categories,
        comparison=compare_months(expenses, today),
        top_categories=top_categories(categories),
        recent_expenses=list(expenses[:RECENT_EXPENSES_LIMIT]),
    )
