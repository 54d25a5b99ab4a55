# famfin/api/dashboard.py

from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session, func, select

from famfin.core.security import get_current_user
from famfin.database import get_session
from famfin.models.expense import Expense
from famfin.schemas.budget import BudgetAlertRead, BudgetUsageRead
from famfin.schemas.summary import FinancialSummaryResponse, ReminderResponse
from famfin.services.aggregation import current_month_category_spend, summarize
from famfin.services.budgets import evaluate_budgets, select_alert
from famfin.utils.dates import month_start
from famfin.utils.ownership import ensure_member
from famfin.utils.records import fetch_budgets, fetch_expenses, fetch_income

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def build_summary_response(
    session: Session,
    user_id: UUID,
    member_id: Optional[int] = None,
    today: Optional[date] = None,
) -> FinancialSummaryResponse:
    today = today or date.today()

    expenses = fetch_expenses(session, user_id, member_id=member_id)
    income = fetch_income(session, user_id, member_id=member_id)
    budgets = fetch_budgets(session, user_id, month=month_start(today))

    summary = summarize(expenses, income, today)
    usage = evaluate_budgets(budgets, current_month_category_spend(expenses, today))
    alert = select_alert(usage)

    response = FinancialSummaryResponse.model_validate(summary)
    response.budget_usage = [BudgetUsageRead.model_validate(u) for u in usage]
    response.budget_alert = BudgetAlertRead.model_validate(alert) if alert else None
    return response


@router.get("/summary", response_model=FinancialSummaryResponse)
def financial_summary(
    member_id: Optional[int] = Query(None, description="Restrict the figures to one family member"),
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    ensure_member(session, user_id, member_id)
    return build_summary_response(session, user_id, member_id)


@router.get("/reminder", response_model=ReminderResponse)
def daily_reminder(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    """True when nothing has been logged for today yet."""
    logged_today = session.exec(
        select(func.count(Expense.id)).where(
            Expense.user_id == user_id,
            Expense.expense_date == date.today(),
        )
    ).one()
    return ReminderResponse(needs_reminder=logged_today == 0)
