# famfin/models/family_member.py

from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4
from typing import Optional
from datetime import datetime

from famfin.utils.dates import utcnow


def new_share_id() -> str:
    return uuid4().hex


class FamilyMember(SQLModel, table=True):
    __tablename__ = "family_member"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    name: str
    relation: Optional[str] = None
    # opaque token for the read-only shared dashboard
    share_id: str = Field(default_factory=new_share_id, index=True, unique=True)
    created_at: datetime = Field(default_factory=utcnow)
