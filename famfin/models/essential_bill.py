from decimal import Decimal
from uuid import UUID
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import date, datetime

from famfin.models.enums import BillCategory, PaymentStatus, Recurrence
from famfin.utils.dates import utcnow


class EssentialBill(SQLModel, table=True):
    __tablename__ = "essential_bill"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    title: str
    category: BillCategory
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    due_date: date
    payment_status: PaymentStatus = Field(default=PaymentStatus.pending)
    recurrence: Recurrence = Field(default=Recurrence.monthly)
    last_paid_date: Optional[date] = None
    bill_url: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=255)
    created_at: datetime = Field(default_factory=utcnow)
