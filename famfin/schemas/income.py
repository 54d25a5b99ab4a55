import datetime as dt
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from famfin.models.enums import IncomeSource


class IncomeCreate(BaseModel):
    source: IncomeSource
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    date: dt.date
    description: Optional[str] = Field(default=None, max_length=255)
    member_id: Optional[int] = None


class IncomeUpdate(BaseModel):
    source: Optional[IncomeSource] = None
    amount: Optional[Decimal] = Field(default=None, gt=0, max_digits=12, decimal_places=2)
    date: Optional[dt.date] = None
    description: Optional[str] = Field(default=None, max_length=255)
    member_id: Optional[int] = None


class IncomeRead(BaseModel):
    id: int
    source: IncomeSource
    amount: float
    date: dt.date
    description: Optional[str] = None
    member_id: Optional[int] = None
    created_at: dt.datetime

    model_config = ConfigDict(from_attributes=True)
