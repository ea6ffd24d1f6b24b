"""create projects, ledger transactions and company expenses

Revision ID: 4b1e7c2d9a10
Revises:
Create Date: 2026-03-02
"""

from alembic import op
import sqlalchemy as sa


revision = "4b1e7c2d9a10"
down_revision = None
branch_labels = None
depends_on = None

_FREQUENCY = sa.Enum(
    "ONE_TIME", "WEEKLY", "TWICE_MONTHLY", "MONTHLY", "QUARTERLY", "YEARLY",
    name="frequency",
)
_KIND = sa.Enum("PROJECT_EXPENSE", "GENERAL_EXPENSE", "INCOME", name="transactionkind")
_STATUS = sa.Enum("PENDING", "COMPLETED", name="transactionstatus")


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("code", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("receivable", sa.Numeric(14, 2), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("company_name", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_projects_created_at", "projects", ["created_at"], unique=False)

    op.create_table(
        "ledger_transactions",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("kind", _KIND, nullable=False),
        sa.Column("status", _STATUS, nullable=False),
        sa.Column("amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("occurred_on", sa.Date(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("category", sa.String(), nullable=True),
        sa.Column("project_id", sa.String(), nullable=True),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_ledger_kind_date", "ledger_transactions", ["kind", "occurred_on"], unique=False)

    op.create_table(
        "company_expenses",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("frequency", _FREQUENCY, nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=True),
        sa.Column("days_of_month", sa.String(length=64), nullable=True),
        sa.Column("month_of_year", sa.Integer(), nullable=True),
        sa.Column("specific_date", sa.Date(), nullable=True),
        sa.Column("start_of_payment", sa.Date(), nullable=True),
        sa.Column("end_of_payment", sa.Date(), nullable=True),
        sa.Column("category", sa.String(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_company_expenses_active", "company_expenses", ["is_active"], unique=False)


def downgrade() -> None:
    op.drop_index("idx_company_expenses_active", table_name="company_expenses")
    op.drop_table("company_expenses")
    op.drop_index("idx_ledger_kind_date", table_name="ledger_transactions")
    op.drop_table("ledger_transactions")
    op.drop_index("idx_projects_created_at", table_name="projects")
    op.drop_table("projects")
