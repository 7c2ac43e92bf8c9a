"""Create students table

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `students` table with the unique email constraint.
Rollback: downgrade() drops the table (all student data is lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the students table. Column docs live in rollcall/models/student.py."""
    op.create_table(
        "students",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            autoincrement=True,
            nullable=False,
            comment="Student identifier, server-assigned or client-supplied on create",
        ),
        sa.Column(
            "name",
            sa.String(255),
            nullable=False,
            comment="Full name",
        ),
        sa.Column(
            "email",
            sa.String(255),
            nullable=False,
            comment="Contact email, unique across all students",
        ),
        sa.Column(
            "dob",
            sa.Date(),
            nullable=False,
            comment="Date of birth",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_students_email"),
    )


def downgrade() -> None:
    op.drop_table("students")
