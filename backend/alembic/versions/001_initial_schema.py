"""initial schema: sources, destinations, banks, transactions

Revision ID: 001
Revises: 
Create Date: 2026-10-19 09:00:00
"""

from alembic import op
import sqlalchemy as sa

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def _named_table(name: str) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime, nullable=False),
    )


def upgrade() -> None:
    _named_table("sources")
    op.create_index("idx_source_email", "sources", ["email"])
    _named_table("destinations")
    op.create_index("idx_destination_email", "destinations", ["email"])
    _named_table("banks")
    op.create_index("idx_bank_email", "banks", ["email"])

    op.create_table(
        "transactions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("kind", sa.Enum("INCOME", "EXPENSE", name="transactionkind"), nullable=False),
        sa.Column("amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("source_id", sa.String(36), sa.ForeignKey("sources.id"), nullable=True),
        sa.Column("destination_id", sa.String(36), sa.ForeignKey("destinations.id"), nullable=True),
        sa.Column("bank_id", sa.String(36), sa.ForeignKey("banks.id"), nullable=True),
        sa.Column("is_bank", sa.Boolean, nullable=False),
        sa.Column("created_at", sa.DateTime, nullable=False),
        sa.CheckConstraint("amount >= 0", name="ck_transaction_amount_non_negative"),
    )
    op.create_index("ix_transactions_date", "transactions", ["date"])
    op.create_index("idx_transaction_email_date", "transactions", ["email", "date"])
    op.create_index("idx_transaction_bank", "transactions", ["bank_id"])


def downgrade() -> None:
    op.drop_table("transactions")
    op.drop_table("banks")
    op.drop_table("destinations")
    op.drop_table("sources")
