# famfin/schemas/summary.py

from pydantic import BaseModel, ConfigDict
from typing import List, Optional

from famfin.schemas.budget import BudgetAlertRead, BudgetUsageRead
from famfin.schemas.expense import ExpenseRead


class MonthlyExpenseRead(BaseModel):
    month: str
    total: float

    model_config = ConfigDict(from_attributes=True)


class CategoryTotalRead(BaseModel):
    name: str
    total: float

    model_config = ConfigDict(from_attributes=True)


class ComparisonRead(BaseModel):
    current_month_expenses: float
    last_month_expenses: float
    expense_difference: float
    expense_change_percent: float

    model_config = ConfigDict(from_attributes=True)


class FinancialSummaryResponse(BaseModel):
    total_income: float
    total_expenses: float
    remaining_balance: float
    monthly_expenses: List[MonthlyExpenseRead]
    category_expenses: List[CategoryTotalRead]
    comparison: ComparisonRead
    top_categories: List[CategoryTotalRead]
    recent_expenses: List[ExpenseRead]
    budget_usage: List[BudgetUsageRead] = []
    budget_alert: Optional[BudgetAlertRead] = None

    model_config = ConfigDict(from_attributes=True)


class ReminderResponse(BaseModel):
    needs_reminder: bool


class BillSummaryRead(BaseModel):
    pending_amount: float
    paid_amount: float
    pending_count: int
    current_month_total: float

    model_config = ConfigDict(from_attributes=True)


class BillAnalyticsRead(BaseModel):
    category_breakdown: List[CategoryTotalRead]
    monthly_trend: List[MonthlyExpenseRead]
    current_month_bills: float
    current_month_expenses: float
    percentage_of_expenses: float

    model_config = ConfigDict(from_attributes=True)
