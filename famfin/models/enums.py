from enum import Enum


class TransactionKind(str, Enum):
    expense = "expense"
    income = "income"


class ChangeType(str, Enum):
    insert = "insert"
    update = "update"
    delete = "delete"


class ExpenseCategory(str, Enum):
    food = "Food"
    housing = "Housing"
    transport = "Transport"
    entertainment = "Entertainment"
    utilities = "Utilities"
    healthcare = "Healthcare"
    personal = "Personal"
    other = "Other"


class PaymentType(str, Enum):
    cash = "Cash"
    credit_card = "Credit Card"
    debit_card = "Debit Card"
    digital_wallet = "UPI/Digital Wallet"
    bank_transfer = "Bank Transfer"
    other = "Other"


class IncomeSource(str, Enum):
    salary = "Salary"
    freelance = "Freelance"
    investment = "Investment"
    gift = "Gift"
    other = "Other"


class BillCategory(str, Enum):
    electricity = "Electricity"
    rent = "Rent"
    water = "Water"
    gas = "Gas"
    medical = "Medical"
    grocery = "Grocery"
    fuel = "Fuel"
    education = "Education"
    internet = "Internet"
    other = "Other"


class PaymentStatus(str, Enum):
    pending = "Pending"
    paid = "Paid"
    overdue = "Overdue"


class Recurrence(str, Enum):
    monthly = "Monthly"
    quarterly = "Quarterly"
    annually = "Annually"
    none = "None"


class BudgetStatus(str, Enum):
    ok = "ok"
    warning = "warning"
    danger = "danger"
