from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from famfin.core.realtime import publish_change
from famfin.core.security import get_current_user
from famfin.database import get_session
from famfin.models.enums import ChangeType, TransactionKind
from famfin.models.income import Income
from famfin.schemas.income import IncomeCreate, IncomeRead, IncomeUpdate
from famfin.utils.ownership import ensure_member, get_owned_or_404
from famfin.utils.records import fetch_income

router = APIRouter(prefix="/income", tags=["income"])


@router.post("", response_model=IncomeRead)
@router.post("/", response_model=IncomeRead)
def create_income(
    income_data: IncomeCreate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    ensure_member(session, user_id, income_data.member_id)

    income = Income(**income_data.model_dump(), user_id=user_id)
    session.add(income)
    session.commit()
    session.refresh(income)

    publish_change(user_id, ChangeType.insert, TransactionKind.income, after=income)
    return income


@router.get("", response_model=List[IncomeRead])
@router.get("/", response_model=List[IncomeRead])
def list_income(
    member_id: Optional[int] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None, description="Exclusive upper bound"),
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    return fetch_income(session, user_id, member_id=member_id, start_date=start_date, end_date=end_date)


@router.get("/{income_id}", response_model=IncomeRead)
def get_income(
    income_id: int,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    return get_owned_or_404(session, Income, income_id, user_id, "Income record not found")


@router.put("/{income_id}", response_model=IncomeRead)
def update_income(
    income_id: int,
    income_data: IncomeUpdate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    income = get_owned_or_404(session, Income, income_id, user_id, "Income record not found")
    changes = income_data.model_dump(exclude_unset=True)
    if "member_id" in changes:
        ensure_member(session, user_id, changes["member_id"])

    before = income.model_dump(mode="json")
    for key, value in changes.items():
        setattr(income, key, value)

    session.add(income)
    session.commit()
    session.refresh(income)

    publish_change(user_id, ChangeType.update, TransactionKind.income, before=before, after=income)
    return income


@router.delete("/{income_id}")
def delete_income(
    income_id: int,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    income = get_owned_or_404(session, Income, income_id, user_id, "Income record not found")
    before = income.model_dump(mode="json")

    session.delete(income)
    session.commit()

    publish_change(user_id, ChangeType.delete, TransactionKind.income, before=before)
    return {"message": "Income record deleted"}
