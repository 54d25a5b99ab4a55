# famfin/utils/records.py

from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlmodel import Session, select

from famfin.models.budget import Budget
from famfin.models.essential_bill import EssentialBill
from famfin.models.expense import Expense
from famfin.models.family_member import FamilyMember
from famfin.models.income import Income
from famfin.models.user import User


def fetch_expenses(
    session: Session,
    user_id: UUID,
    member_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    newest_first: bool = True,
) -> List[Expense]:
    """`end_date` is exclusive so month windows can be passed straight through."""
    query = select(Expense).where(Expense.user_id == user_id)
    if member_id is not None:
        query = query.where(Expense.member_id == member_id)
    if start_date:
        query = query.where(Expense.expense_date >= start_date)
    if end_date:
        query = query.where(Expense.expense_date < end_date)

    if newest_first:
        query = query.order_by(Expense.expense_date.desc(), Expense.id.desc())
    else:
        query = query.order_by(Expense.expense_date, Expense.id)
    return list(session.exec(query).all())


def fetch_income(
    session: Session,
    user_id: UUID,
    member_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> List[Income]:
    query = select(Income).where(Income.user_id == user_id)
    if member_id is not None:
        query = query.where(Income.member_id == member_id)
    if start_date:
        query = query.where(Income.date >= start_date)
    if end_date:
        query = query.where(Income.date < end_date)
    return list(session.exec(query.order_by(Income.date.desc(), Income.id.desc())).all())


def fetch_recent_expenses(session: Session, user_id: UUID, limit: int) -> List[Expense]:
    return list(session.exec(
        select(Expense)
        .where(Expense.user_id == user_id)
        .order_by(Expense.created_at.desc(), Expense.id.desc())
        .limit(limit)
    ).all())


def fetch_recent_income(session: Session, user_id: UUID, limit: int) -> List[Income]:
    return list(session.exec(
        select(Income)
        .where(Income.user_id == user_id)
        .order_by(Income.created_at.desc(), Income.id.desc())
        .limit(limit)
    ).all())


def fetch_bills(session: Session, user_id: UUID) -> List[EssentialBill]:
    return list(session.exec(
        select(EssentialBill)
        .where(EssentialBill.user_id == user_id)
        .order_by(EssentialBill.due_date)
    ).all())


def fetch_members(session: Session, user_id: UUID) -> List[FamilyMember]:
    return list(session.exec(
        select(FamilyMember)
        .where(FamilyMember.user_id == user_id)
        .order_by(FamilyMember.created_at, FamilyMember.id)
    ).all())


def fetch_budgets(session: Session, user_id: UUID, month: Optional[date] = None) -> List[Budget]:
    query = select(Budget).where(Budget.user_id == user_id)
    if month:
        query = query.where(Budget.month == month)
    return list(session.exec(query.order_by(Budget.month.desc(), Budget.id)).all())


def fetch_owner_name(session: Session, user_id: UUID, default: str = "You") -> str:
    user = session.get(User, user_id)
    if user and user.display_name:
        return user.display_name
    return default
