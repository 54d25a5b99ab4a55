from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional

from famfin.constants.limits import BUDGET_DANGER_THRESHOLD, BUDGET_WARNING_THRESHOLD
from famfin.models.enums import BudgetStatus
from famfin.services.records import ZERO, field_of, label_of, to_amount
from famfin.utils.formatting import format_amount

ON_TRACK_MESSAGE = (
    "Your spending is currently well within your set budgets for this month. "
    "Keep up the great work!"
)


@dataclass(frozen=True)
class BudgetUsage:
    category: str
    budgeted: Decimal
    spent: Decimal
    percentage: float
    status: BudgetStatus


@dataclass(frozen=True)
class BudgetAlert:
    status: BudgetStatus
    message: str
    usage: Optional[BudgetUsage] = None


def usage_percentage(spent: Decimal, budgeted: Decimal) -> float:
    # a zero cap is "no usable budget", never an automatic overrun
    if budgeted <= 0:
        return 0.0
    return float(spent / budgeted * 100)


def budget_status(percentage: float) -> BudgetStatus:
    if percentage >= BUDGET_DANGER_THRESHOLD:
        return BudgetStatus.danger
    if percentage >= BUDGET_WARNING_THRESHOLD:
        return BudgetStatus.warning
    return BudgetStatus.ok


def evaluate_budgets(budgets: Iterable[Any], spent_by_category: Mapping[str, Decimal]) -> List[BudgetUsage]:
    """One usage entry per budget; categories without a budget are left out."""
    usages = []
    for budget in budgets:
        category = label_of(field_of(budget, "category"))
        budgeted = to_amount(field_of(budget, "amount"))
        spent = spent_by_category.get(category, ZERO)
        percentage = usage_percentage(spent, budgeted)
        usages.append(BudgetUsage(
            category=category,
            budgeted=budgeted,
            spent=spent,
            percentage=percentage,
            status=budget_status(percentage),
        ))
    return usages


def alert_message(usage: BudgetUsage) -> str:
    if usage.status == BudgetStatus.danger:
        over = float((usage.spent - usage.budgeted) / usage.budgeted * 100)
        return f"You have exceeded your {usage.category} budget by {over:.0f}%! Consider cutting back."
    return (
        f"You've spent {usage.percentage:.1f}% of your {usage.category} budget "
        f"({format_amount(usage.spent)} / {format_amount(usage.budgeted)}) this month. Be mindful!"
    )


def select_alert(usages: List[BudgetUsage]) -> Optional[BudgetAlert]:
    """Most critical budget for the banner: danger first, then the highest percentage."""
    critical = [u for u in usages if u.percentage >= BUDGET_WARNING_THRESHOLD]
    if not critical:
        if usages:
            return BudgetAlert(status=BudgetStatus.ok, message=ON_TRACK_MESSAGE)
        return None

    top = min(critical, key=lambda u: (u.status != BudgetStatus.danger, -u.percentage))
    return BudgetAlert(status=top.status, message=alert_message(top), usage=top)
