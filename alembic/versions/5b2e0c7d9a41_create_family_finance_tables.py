"""create family finance tables

Revision ID: 5b2e0c7d9a41
Revises:
Create Date: 2025-10-02 18:20:41.113402

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '5b2e0c7d9a41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# SQLModel persists enum member names
EXPENSE_CATEGORIES = (
    'food', 'housing', 'transport', 'entertainment', 'utilities', 'healthcare', 'personal', 'other',
)
expense_category = sa.Enum(*EXPENSE_CATEGORIES, name='expensecategory')
# budget.category shares the type created with the expense table
budget_category = postgresql.ENUM(*EXPENSE_CATEGORIES, name='expensecategory', create_type=False)
payment_type = sa.Enum(
    'cash', 'credit_card', 'debit_card', 'digital_wallet', 'bank_transfer', 'other',
    name='paymenttype',
)
income_source = sa.Enum('salary', 'freelance', 'investment', 'gift', 'other', name='incomesource')
bill_category = sa.Enum(
    'electricity', 'rent', 'water', 'gas', 'medical', 'grocery', 'fuel', 'education', 'internet', 'other',
    name='billcategory',
)
payment_status = sa.Enum('pending', 'paid', 'overdue', name='paymentstatus')
recurrence = sa.Enum('monthly', 'quarterly', 'annually', 'none', name='recurrence')


def upgrade() -> None:
    """Upgrade schema: users, family members and all money records."""
    op.create_table(
        'user',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('display_name', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_user_email', 'user', ['email'], unique=True)

    op.create_table(
        'family_member',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('relation', sa.String(), nullable=True),
        sa.Column('share_id', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_family_member_user_id', 'family_member', ['user_id'])
    op.create_index('ix_family_member_share_id', 'family_member', ['share_id'], unique=True)

    op.create_table(
        'expense',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('family_member.id'), nullable=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('category', expense_category, nullable=False),
        sa.Column('expense_date', sa.Date(), nullable=False),
        sa.Column('payment_type', payment_type, nullable=True),
        sa.Column('description', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_expense_user_id', 'expense', ['user_id'])
    op.create_index('ix_expense_expense_date', 'expense', ['expense_date'])

    op.create_table(
        'income',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('family_member.id'), nullable=True),
        sa.Column('source', income_source, nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_income_user_id', 'income', ['user_id'])
    op.create_index('ix_income_date', 'income', ['date'])

    op.create_table(
        'essential_bill',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('category', bill_category, nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('payment_status', payment_status, nullable=False),
        sa.Column('recurrence', recurrence, nullable=False),
        sa.Column('last_paid_date', sa.Date(), nullable=True),
        sa.Column('bill_url', sa.String(), nullable=True),
        sa.Column('description', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_essential_bill_user_id', 'essential_bill', ['user_id'])

    op.create_table(
        'budget',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('category', budget_category, nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('month', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('user_id', 'category', 'month', name='uq_budget_user_category_month'),
    )
    op.create_index('ix_budget_user_id', 'budget', ['user_id'])


def downgrade() -> None:
    """Downgrade schema: drop everything created above."""
    op.drop_table('budget')
    op.drop_table('essential_bill')
    op.drop_table('income')
    op.drop_table('expense')
    op.drop_table('family_member')
    op.drop_table('user')
    for enum_type in (recurrence, payment_status, bill_category, income_source, payment_type, expense_category):
        enum_type.drop(op.get_bind(), checkfirst=True)
