from decimal import Decimal

import pytest

from famfin.models.enums import BudgetStatus
from famfin.services.budgets import (
    ON_TRACK_MESSAGE,
    BudgetUsage,
    budget_status,
    evaluate_budgets,
    select_alert,
)


def usage(category, budgeted, spent):
    [result] = evaluate_budgets([{"category": category, "amount": budgeted}], {category: Decimal(spent)})
    return result


@pytest.mark.parametrize(
    "spent, percentage, status",
    [
        (950, 95.0, BudgetStatus.warning),
        (1050, 105.0, BudgetStatus.danger),
        (500, 50.0, BudgetStatus.ok),
        (800, 80.0, BudgetStatus.warning),
        (1000, 100.0, BudgetStatus.danger),
    ],
)
def test_food_budget_statuses(spent, percentage, status):
    result = usage("Food", 1000, spent)
    assert result.percentage == pytest.approx(percentage)
    assert result.status == status


def test_zero_budget_is_ok():
    result = usage("Food", 0, 400)
    assert result.percentage == 0.0
    assert result.status == BudgetStatus.ok


def test_unbudgeted_categories_are_excluded():
    budgets = [{"category": "Food", "amount": "1000.00"}]
    usages = evaluate_budgets(budgets, {"Food": Decimal("10"), "Transport": Decimal("999")})
    assert [u.category for u in usages] == ["Food"]


def test_budget_without_spend_reports_zero():
    result = usage("Housing", 500, 0)
    assert result.spent == 0
    assert result.percentage == 0.0


def test_budget_status_thresholds():
    assert budget_status(79.99) == BudgetStatus.ok
    assert budget_status(80) == BudgetStatus.warning
    assert budget_status(99.9) == BudgetStatus.warning
    assert budget_status(100) == BudgetStatus.danger


def test_select_alert_prefers_danger_over_higher_warning():
    usages = [
        BudgetUsage("Food", Decimal("100"), Decimal("99"), 99.0, BudgetStatus.warning),
        BudgetUsage("Transport", Decimal("100"), Decimal("101"), 101.0, BudgetStatus.danger),
        BudgetUsage("Housing", Decimal("100"), Decimal("150"), 150.0, BudgetStatus.danger),
    ]
    alert = select_alert(usages)
    assert alert.status == BudgetStatus.danger
    assert alert.usage.category == "Housing"
    assert alert.message == "You have exceeded your Housing budget by 50%! Consider cutting back."


def test_select_alert_warning_message():
    alert = select_alert([usage("Food", 1000, 950)])
    assert alert.status == BudgetStatus.warning
    assert alert.message == (
        "You've spent 95.0% of your Food budget (₹950.00 / ₹1,000.00) this month. Be mindful!"
    )


def test_select_alert_on_track():
    alert = select_alert([usage("Food", 1000, 100), usage("Other", 0, 50)])
    assert alert.status == BudgetStatus.ok
    assert alert.usage is None
    assert alert.message == ON_TRACK_MESSAGE


def test_select_alert_without_budgets():
    assert select_alert([]) is None
