from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime

from famfin.models.enums import BillCategory, PaymentStatus, Recurrence


class EssentialBillCreate(BaseModel):
    title: str = Field(min_length=1)
    category: BillCategory
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    due_date: date
    payment_status: PaymentStatus = PaymentStatus.pending
    recurrence: Recurrence = Recurrence.monthly
    last_paid_date: Optional[date] = None
    bill_url: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=255)


class EssentialBillUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    category: Optional[BillCategory] = None
    amount: Optional[Decimal] = Field(default=None, gt=0, max_digits=12, decimal_places=2)
    due_date: Optional[date] = None
    payment_status: Optional[PaymentStatus] = None
    recurrence: Optional[Recurrence] = None
    last_paid_date: Optional[date] = None
    bill_url: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=255)


class EssentialBillRead(EssentialBillCreate):
    id: int
    amount: float
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
