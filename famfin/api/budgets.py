import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from famfin.core.security import get_current_user
from famfin.database import get_session
from famfin.models.budget import Budget
from famfin.schemas.budget import BudgetAlertRead, BudgetCreate, BudgetRead, BudgetUpdate, BudgetUsageRead
from famfin.services.aggregation import current_month_category_spend
from famfin.services.budgets import evaluate_budgets, select_alert
from famfin.services.records import label_of
from famfin.utils.dates import month_bounds, month_start
from famfin.utils.ownership import get_owned_or_404
from famfin.utils.records import fetch_budgets, fetch_expenses

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/budgets", tags=["budgets"])


def _commit_budget(session: Session, budget: Budget) -> Budget:
    """Commits, turning the (user, category, month) unique violation into a 409."""
    category, month = label_of(budget.category), budget.month
    try:
        session.add(budget)
        session.commit()
    except IntegrityError:
        session.rollback()
        logger.info("Budget already exists for %s %s", category, month)
        raise HTTPException(
            status_code=409,
            detail=f"A budget for {category} in {month.strftime('%b %Y')} already exists.",
        )
    session.refresh(budget)
    return budget


def _current_usage(session: Session, user_id: UUID, today: date):
    start, end = month_bounds(today)
    expenses = fetch_expenses(session, user_id, start_date=start, end_date=end)
    budgets = fetch_budgets(session, user_id, month=start)
    return evaluate_budgets(budgets, current_month_category_spend(expenses, today))


@router.post("", response_model=BudgetRead)
@router.post("/", response_model=BudgetRead)
def create_budget(
    budget_data: BudgetCreate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    budget = Budget(
        category=budget_data.category,
        amount=budget_data.amount,
        month=month_start(budget_data.month),
        user_id=user_id,
    )
    return _commit_budget(session, budget)


@router.get("", response_model=List[BudgetRead])
@router.get("/", response_model=List[BudgetRead])
def list_budgets(
    month: Optional[date] = Query(None, description="Any day of the month to list"),
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    return fetch_budgets(session, user_id, month=month_start(month) if month else None)


@router.get("/usage", response_model=List[BudgetUsageRead])
def budget_usage(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    usages = _current_usage(session, user_id, date.today())
    return [BudgetUsageRead.model_validate(u) for u in usages]


@router.get("/alert", response_model=Optional[BudgetAlertRead])
def budget_alert(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    """Most critical budget this month, an on-track notice, or null when no budgets exist."""
    alert = select_alert(_current_usage(session, user_id, date.today()))
    return BudgetAlertRead.model_validate(alert) if alert else None


@router.put("/{budget_id}", response_model=BudgetRead)
def update_budget(
    budget_id: int,
    budget_data: BudgetUpdate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    budget = get_owned_or_404(session, Budget, budget_id, user_id, "Budget not found")
    changes = budget_data.model_dump(exclude_unset=True, exclude_none=True)
    if "month" in changes:
        changes["month"] = month_start(changes["month"])
    for key, value in changes.items():
        setattr(budget, key, value)
    return _commit_budget(session, budget)


@router.delete("/{budget_id}")
def delete_budget(
    budget_id: int,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    budget = get_owned_or_404(session, Budget, budget_id, user_id, "Budget not found")
    session.delete(budget)
    session.commit()
    return {"message": "Budget deleted"}
