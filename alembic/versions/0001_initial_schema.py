"""Initial committee governance schema.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

import sqlalchemy as sa
from alembic import op


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create reference, committee, slot, faculty and assignment tables."""
    op.create_table(
        "senate_division",
        sa.Column("senate_division_short_name", sa.String(32), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
    )

    op.create_table(
        "committee",
        sa.Column("committee_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("total_slots", sa.Integer, nullable=False, server_default="0"),
    )

    op.create_table(
        "committee_slots",
        sa.Column(
            "committee_id",
            sa.Integer,
            sa.ForeignKey("committee.committee_id"),
            primary_key=True,
        ),
        sa.Column(
            "senate_division_short_name",
            sa.String(32),
            sa.ForeignKey("senate_division.senate_division_short_name"),
            primary_key=True,
        ),
        sa.Column("slot_requirements", sa.Integer, nullable=False, server_default="0"),
        sa.CheckConstraint("slot_requirements >= 0", name="ck_committee_slots_non_negative"),
    )
    op.create_index(
        "ix_committee_slots_division", "committee_slots", ["senate_division_short_name"]
    )

    op.create_table(
        "department",
        sa.Column("department_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("description", sa.Text, nullable=True),
    )

    op.create_table(
        "faculty",
        sa.Column("email", sa.String(255), primary_key=True),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("job_title", sa.String(255), nullable=True),
        sa.Column("phone_num", sa.String(32), nullable=True),
        sa.Column(
            "senate_division_short_name",
            sa.String(32),
            sa.ForeignKey("senate_division.senate_division_short_name"),
            nullable=True,
        ),
    )

    op.create_table(
        "department_associations",
        sa.Column("email", sa.String(255), sa.ForeignKey("faculty.email"), primary_key=True),
        sa.Column(
            "department_id",
            sa.Integer,
            sa.ForeignKey("department.department_id"),
            primary_key=True,
        ),
    )

    op.create_table(
        "committee_assignment",
        sa.Column("email", sa.String(255), sa.ForeignKey("faculty.email"), primary_key=True),
        sa.Column(
            "committee_id",
            sa.Integer,
            sa.ForeignKey("committee.committee_id"),
            primary_key=True,
        ),
        sa.Column("start_date", sa.Date, nullable=False),
        sa.Column("end_date", sa.Date, nullable=False),
    )
    op.create_index(
        "ix_committee_assignment_committee", "committee_assignment", ["committee_id"]
    )


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_index("ix_committee_assignment_committee", table_name="committee_assignment")
    op.drop_table("committee_assignment")
    op.drop_table("department_associations")
    op.drop_table("faculty")
    op.drop_table("department")
    op.drop_index("ix_committee_slots_division", table_name="committee_slots")
    op.drop_table("committee_slots")
    op.drop_table("committee")
    op.drop_table("senate_division")
