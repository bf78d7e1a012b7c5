"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- ENUM types ---
    intern_role_enum = sa.Enum("intern", "admin", name="intern_role_enum")
    intern_role_enum.create(op.get_bind(), checkfirst=True)

    activity_category_enum = sa.Enum(
        "Learning", "Practice", "Assignment", "Project", "Research",
        name="activity_category_enum",
    )
    activity_category_enum.create(op.get_bind(), checkfirst=True)

    activity_source_enum = sa.Enum("form", "sheet", name="activity_source_enum")
    activity_source_enum.create(op.get_bind(), checkfirst=True)

    # --- interns ---
    op.create_table(
        "interns",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("intern_id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column(
            "role",
            sa.Enum("intern", "admin", name="intern_role_enum", create_type=False),
            nullable=False,
            server_default="intern",
        ),
        sa.Column("joining_date", sa.Date(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_interns_intern_id", "interns", ["intern_id"], unique=True)

    # --- activities ---
    op.create_table(
        "activities",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "intern_id",
            sa.String(64),
            sa.ForeignKey("interns.intern_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("day", sa.Date(), nullable=False),
        sa.Column("hours", sa.Numeric(5, 2), nullable=False, server_default="0"),
        sa.Column(
            "category",
            sa.Enum(
                "Learning", "Practice", "Assignment", "Project", "Research",
                name="activity_category_enum", create_type=False,
            ),
            nullable=False,
            server_default="Learning",
        ),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("proof_link", sa.String(1024), nullable=True),
        sa.Column(
            "source",
            sa.Enum("form", "sheet", name="activity_source_enum", create_type=False),
            nullable=False,
            server_default="form",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_activities_intern_id", "activities", ["intern_id"])
    op.create_index("ix_activities_day", "activities", ["day"])
    op.create_unique_constraint(
        "uq_activity_intern_day", "activities", ["intern_id", "day"]
    )


def downgrade() -> None:
    op.drop_constraint("uq_activity_intern_day", "activities", type_="unique")
    op.drop_index("ix_activities_day", table_name="activities")
    op.drop_index("ix_activities_intern_id", table_name="activities")
    op.drop_table("activities")
    op.drop_index("ix_interns_intern_id", table_name="interns")
    op.drop_table("interns")

    op.execute("DROP TYPE IF EXISTS activity_source_enum")
    op.execute("DROP TYPE IF EXISTS activity_category_enum")
    op.execute("DROP TYPE IF EXISTS intern_role_enum")
