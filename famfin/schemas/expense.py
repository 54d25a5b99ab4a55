from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime

from famfin.models.enums import ExpenseCategory, PaymentType


class ExpenseCreate(BaseModel):
    title: str = Field(min_length=1)
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    category: ExpenseCategory
    expense_date: date
    payment_type: Optional[PaymentType] = None
    description: Optional[str] = Field(default=None, max_length=255)
    member_id: Optional[int] = None


class ExpenseUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    amount: Optional[Decimal] = Field(default=None, gt=0, max_digits=12, decimal_places=2)
    category: Optional[ExpenseCategory] = None
    expense_date: Optional[date] = None
    payment_type: Optional[PaymentType] = None
    description: Optional[str] = Field(default=None, max_length=255)
    member_id: Optional[int] = None


class ExpenseRead(BaseModel):
    id: int
    title: str
    amount: float
    category: ExpenseCategory
    expense_date: date
    payment_type: Optional[PaymentType] = None
    description: Optional[str] = None
    member_id: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
