from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import String, cast, or_
from sqlmodel import Session, col, select

from famfin.constants.limits import SEARCH_MIN_LENGTH, SEARCH_RESULTS_PER_KIND
from famfin.core.security import get_current_user
from famfin.database import get_session
from famfin.models.essential_bill import EssentialBill
from famfin.models.expense import Expense
from famfin.models.family_member import FamilyMember
from famfin.models.income import Income
from famfin.schemas.share import SearchResult
from famfin.services.records import label_of
from famfin.utils.formatting import format_amount

router = APIRouter(prefix="/search", tags=["search"])


@router.get("", response_model=List[SearchResult])
@router.get("/", response_model=List[SearchResult])
def global_search(
    q: str = Query("", description="Text to look for"),
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    term = q.strip()
    if len(term) < SEARCH_MIN_LENGTH:
        return []
    pattern = f"%{term}%"

    expenses = session.exec(
        select(Expense)
        .where(Expense.user_id == user_id)
        .where(or_(col(Expense.title).ilike(pattern), col(Expense.description).ilike(pattern)))
        .limit(SEARCH_RESULTS_PER_KIND)
    ).all()
    income = session.exec(
        select(Income)
        .where(Income.user_id == user_id)
        .where(or_(cast(Income.source, String).ilike(pattern), col(Income.description).ilike(pattern)))
        .limit(SEARCH_RESULTS_PER_KIND)
    ).all()
    bills = session.exec(
        select(EssentialBill)
        .where(EssentialBill.user_id == user_id)
        .where(or_(col(EssentialBill.title).ilike(pattern), col(EssentialBill.description).ilike(pattern)))
        .limit(SEARCH_RESULTS_PER_KIND)
    ).all()
    family = session.exec(
        select(FamilyMember)
        .where(FamilyMember.user_id == user_id)
        .where(or_(col(FamilyMember.name).ilike(pattern), col(FamilyMember.relation).ilike(pattern)))
        .limit(SEARCH_RESULTS_PER_KIND)
    ).all()

    results = [
        SearchResult(id=e.id, type="Expense", title=e.title,
                     description=f"{format_amount(e.amount)} on {e.expense_date}", url="/expenses")
        for e in expenses
    ]
    results += [
        SearchResult(id=i.id, type="Income", title=label_of(i.source),
                     description=f"{format_amount(i.amount)} on {i.date}", url="/income")
        for i in income
    ]
    results += [
        SearchResult(id=b.id, type="Bill", title=b.title,
                     description=f"Due {b.due_date} - {format_amount(b.amount)}", url="/bills")
        for b in bills
    ]
    results += [
        SearchResult(id=m.id, type="Family", title=m.name,
                     description=m.relation or "Family Member", url="/family")
        for m in family
    ]
    return results
