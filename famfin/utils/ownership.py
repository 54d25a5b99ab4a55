from typing import Optional, Type, TypeVar
from uuid import UUID

from fastapi import HTTPException
from sqlmodel import Session, SQLModel, select

from famfin.models.family_member import FamilyMember

T = TypeVar("T", bound=SQLModel)


def get_owned_or_404(session: Session, model: Type[T], record_id: int, user_id: UUID, detail: str) -> T:
    record = session.exec(
        select(model).where(model.id == record_id, model.user_id == user_id)
    ).first()
    if not record:
        raise HTTPException(status_code=404, detail=detail)
    return record


def ensure_member(session: Session, user_id: UUID, member_id: Optional[int]) -> None:
    """Rejects member references that don't belong to the caller's family."""
    if member_id is None:
        return
    member = session.exec(
        select(FamilyMember).where(FamilyMember.id == member_id, FamilyMember.user_id == user_id)
    ).first()
    if not member:
        raise HTTPException(status_code=400, detail="Invalid family member")
