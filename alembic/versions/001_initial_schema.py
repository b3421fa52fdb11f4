"""Initial schema - role, cost_center, app_user.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "role",
        sa.Column("id", sa.UUID(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
    )
    op.create_index("ix_role_name", "role", ["name"], unique=True)

    op.create_table(
        "cost_center",
        sa.Column("id", sa.UUID(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(255), nullable=False),
    )

    op.create_table(
        "app_user",
        sa.Column("id", sa.UUID(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id"), nullable=True),
        sa.Column("cost_center_id", sa.UUID(), sa.ForeignKey("cost_center.id", ondelete="SET NULL"), nullable=True),
        sa.Column("auth_user_id", sa.String(255), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_app_user_email", "app_user", ["email"], unique=True)
    op.create_index("ix_app_user_auth_user_id", "app_user", ["auth_user_id"], unique=True)

    op.execute("""
        INSERT INTO role (name, description) VALUES
        ('admin', 'Full access including master data'),
        ('asesor', 'Sales, customers and reports'),
        ('colaborador', 'Inventory management and movements')
    """)


def downgrade() -> None:
    op.drop_table("app_user")
    op.drop_table("cost_center")
    op.drop_table("role")
