from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from famfin.core.realtime import publish_change
from famfin.core.security import get_current_user
from famfin.database import get_session
from famfin.models.enums import ChangeType, TransactionKind
from famfin.models.expense import Expense
from famfin.schemas.expense import ExpenseCreate, ExpenseRead, ExpenseUpdate
from famfin.utils.ownership import ensure_member, get_owned_or_404
from famfin.utils.records import fetch_expenses

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.post("", response_model=ExpenseRead)
@router.post("/", response_model=ExpenseRead)
def create_expense(
    expense_data: ExpenseCreate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    ensure_member(session, user_id, expense_data.member_id)

    expense = Expense(**expense_data.model_dump(), user_id=user_id)
    session.add(expense)
    session.commit()
    session.refresh(expense)

    publish_change(user_id, ChangeType.insert, TransactionKind.expense, after=expense)
    return expense


@router.get("", response_model=List[ExpenseRead])
@router.get("/", response_model=List[ExpenseRead])
def list_expenses(
    member_id: Optional[int] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None, description="Exclusive upper bound"),
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    return fetch_expenses(session, user_id, member_id=member_id, start_date=start_date, end_date=end_date)


@router.get("/{expense_id}", response_model=ExpenseRead)
def get_expense(
    expense_id: int,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    return get_owned_or_404(session, Expense, expense_id, user_id, "Expense not found")


@router.put("/{expense_id}", response_model=ExpenseRead)
def update_expense(
    expense_id: int,
    expense_data: ExpenseUpdate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    expense = get_owned_or_404(session, Expense, expense_id, user_id, "Expense not found")
    changes = expense_data.model_dump(exclude_unset=True)
    if "member_id" in changes:
        ensure_member(session, user_id, changes["member_id"])

    before = expense.model_dump(mode="json")
    for key, value in changes.items():
        setattr(expense, key, value)

    session.add(expense)
    session.commit()
    session.refresh(expense)

    publish_change(user_id, ChangeType.update, TransactionKind.expense, before=before, after=expense)
    return expense


@router.delete("/{expense_id}")
def delete_expense(
    expense_id: int,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    expense = get_owned_or_404(session, Expense, expense_id, user_id, "Expense not found")
    before = expense.model_dump(mode="json")

    session.delete(expense)
    session.commit()

    publish_change(user_id, ChangeType.delete, TransactionKind.expense, before=before)
    return {"message": "Expense deleted"}
