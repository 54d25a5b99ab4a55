from decimal import Decimal
from uuid import UUID
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import date, datetime

from famfin.models.enums import ExpenseCategory, PaymentType
from famfin.utils.dates import utcnow


class Expense(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    # null member_id means the account owner logged it
    member_id: Optional[int] = Field(default=None, foreign_key="family_member.id")
    title: str
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    category: ExpenseCategory
    expense_date: date = Field(index=True)
    payment_type: Optional[PaymentType] = None
    description: Optional[str] = Field(default=None, max_length=255)
    created_at: datetime = Field(default_factory=utcnow)
