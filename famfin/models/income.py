import datetime as dt
from decimal import Decimal
from uuid import UUID
from sqlmodel import SQLModel, Field
from typing import Optional

from famfin.models.enums import IncomeSource
from famfin.utils.dates import utcnow


class Income(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    member_id: Optional[int] = Field(default=None, foreign_key="family_member.id")
    source: IncomeSource
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    date: dt.date = Field(index=True)
    description: Optional[str] = Field(default=None, max_length=255)
    created_at: dt.datetime = Field(default_factory=utcnow)
