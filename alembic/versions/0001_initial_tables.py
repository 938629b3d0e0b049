"""initial_tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("preferences", sa.JSON(), nullable=False),
        sa.Column("tax_settings", sa.JSON(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
        sa.UniqueConstraint("email", name=op.f("uq_users_email")),
    )

    op.create_table(
        "holdings",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", name=op.f("fk_holdings_user_id_users")), nullable=False),
        sa.Column("asset_id", sa.String(100), nullable=False),
        sa.Column("name", sa.String(255), nullable=False, server_default=""),
        sa.Column("asset_type", sa.String(30), nullable=False),
        sa.Column("currency", sa.String(10), nullable=False, server_default="USD"),
        sa.Column("risk_level", sa.String(10), nullable=True),
        sa.Column("value", sa.Numeric(20, 4), nullable=False),
        sa.Column("cost_basis", sa.Numeric(20, 4), nullable=False, server_default="0"),
        sa.Column("acquired_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_holdings")),
    )
    op.create_index("ix_holdings_user_id", "holdings", ["user_id"])

    op.create_table(
        "valuation_points",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", name=op.f("fk_valuation_points_user_id_users")), nullable=False),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
        sa.Column("total_value", sa.Numeric(20, 4), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_valuation_points")),
    )
    op.create_index("ix_valuation_points_user_id", "valuation_points", ["user_id"])
    op.create_index("ix_valuation_points_timestamp", "valuation_points", ["timestamp"])

    op.create_table(
        "profit_events",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", name=op.f("fk_profit_events_user_id_users")), nullable=False),
        sa.Column("asset_id", sa.String(100), nullable=True),
        sa.Column("asset_type", sa.String(30), nullable=False),
        sa.Column("profit_type", sa.String(30), nullable=False),
        sa.Column("gross_profit", sa.Numeric(20, 4), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_profit_events")),
    )
    op.create_index("ix_profit_events_user_id", "profit_events", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_profit_events_user_id", table_name="profit_events")
    op.drop_table("profit_events")
    op.drop_index("ix_valuation_points_timestamp", table_name="valuation_points")
    op.drop_index("ix_valuation_points_user_id", table_name="valuation_points")
    op.drop_table("valuation_points")
    op.drop_index("ix_holdings_user_id", table_name="holdings")
    op.drop_table("holdings")
    op.drop_table("users")
