from decimal import Decimal
from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field
from uuid import UUID
from typing import Optional
from datetime import date, datetime

from famfin.models.enums import ExpenseCategory
from famfin.utils.dates import utcnow


class Budget(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("user_id", "category", "month", name="uq_budget_user_category_month"),
    )
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    category: ExpenseCategory
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    month: date  # always the first day of the month
    created_at: datetime = Field(default_factory=utcnow)
