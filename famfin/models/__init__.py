from famfin.models.user import User
from famfin.models.family_member import FamilyMember
from famfin.models.expense import Expense
from famfin.models.income import Income
from famfin.models.essential_bill import EssentialBill
from famfin.models.budget import Budget
from famfin.models.notification import Notification

__all__ = ["User", "FamilyMember", "Expense", "Income", "EssentialBill", "Budget", "Notification"]
