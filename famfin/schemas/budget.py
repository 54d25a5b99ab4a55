from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime

from famfin.models.enums import BudgetStatus, ExpenseCategory


class BudgetCreate(BaseModel):
    category: ExpenseCategory
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    month: date


class BudgetUpdate(BaseModel):
    category: Optional[ExpenseCategory] = None
    amount: Optional[Decimal] = Field(default=None, gt=0, max_digits=12, decimal_places=2)
    month: Optional[date] = None


class BudgetRead(BaseModel):
    id: int
    category: ExpenseCategory
    amount: float
    month: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BudgetUsageRead(BaseModel):
    category: str
    budgeted: float
    spent: float
    percentage: float
    status: BudgetStatus

    model_config = ConfigDict(from_attributes=True)


class BudgetAlertRead(BaseModel):
    status: BudgetStatus
    message: str
    usage: Optional[BudgetUsageRead] = None

    model_config = ConfigDict(from_attributes=True)
