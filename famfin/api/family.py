# famfin/api/family.py

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from famfin.core.security import get_current_user
from famfin.database import get_session
from famfin.models.expense import Expense
from famfin.models.family_member import FamilyMember
from famfin.models.income import Income
from famfin.schemas.family_member import FamilyMemberCreate, FamilyMemberRead
from famfin.utils.ownership import get_owned_or_404
from famfin.utils.records import fetch_members

router = APIRouter(prefix="/family", tags=["family"])


@router.post("", response_model=FamilyMemberRead)
@router.post("/", response_model=FamilyMemberRead)
def create_member(
    member_data: FamilyMemberCreate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    member = FamilyMember(**member_data.model_dump(), user_id=user_id)
    session.add(member)
    session.commit()
    session.refresh(member)
    return member


@router.get("", response_model=List[FamilyMemberRead])
@router.get("/", response_model=List[FamilyMemberRead])
def list_members(
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    return fetch_members(session, user_id)


@router.put("/{member_id}", response_model=FamilyMemberRead)
def update_member(
    member_id: int,
    member_data: FamilyMemberCreate,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    member = get_owned_or_404(session, FamilyMember, member_id, user_id, "Family member not found")
    member.name = member_data.name
    member.relation = member_data.relation

    session.add(member)
    session.commit()
    session.refresh(member)
    return member


@router.delete("/{member_id}")
def delete_member(
    member_id: int,
    session: Session = Depends(get_session),
    user_id: UUID = Depends(get_current_user),
):
    """Removes the member; their transactions stay on the account, attributed to the owner."""
    member = get_owned_or_404(session, FamilyMember, member_id, user_id, "Family member not found")

    for model in (Expense, Income):
        records = session.exec(
            select(model).where(model.user_id == user_id, model.member_id == member_id)
        ).all()
        for record in records:
            record.member_id = None
            session.add(record)
    session.flush()

    session.delete(member)
    session.commit()
    return {"message": "Family member deleted"}
