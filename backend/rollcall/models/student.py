"""
Rollcall Backend — Student SQLAlchemy Model
===========================================

What:  ORM model representing the `students` table.
Who:   Used by StudentService for CRUD operations and by Alembic for schema management.

Table Design:
    - id: BIGINT primary key (INTEGER on SQLite so rowid autoincrement applies).
      Assigned by the database unless the client supplies one on create.
    - email: UNIQUE (uq_students_email). The service checks first and
      reports 409; the constraint catches concurrent writers.
    - dob: DATE only, no time component.
    - age is not stored; it is derived from dob on every read.
"""

from datetime import date
from typing import Optional

from sqlalchemy import BigInteger, Date, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from rollcall.database import Base


def years_between(born: date, today: Optional[date] = None) -> int:
    """Whole years elapsed from `born` to `today` (default: current date)."""
    today = today or date.today()
    had_birthday = (today.month, today.day) >= (born.month, born.day)
    return today.year - born.year - (0 if had_birthday else 1)


class Student(Base):
    """
    A student record.

    Lifecycle:
        1. Created via POST /api/v1/student/
        2. name/email/dob changed via PUT /api/v1/student/{id}
        3. Removed via DELETE /api/v1/student/{id}
    """

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
        comment="Student identifier, server-assigned or client-supplied on create",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Full name",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Contact email, unique across all students",
    )

    dob: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Date of birth",
    )

    __table_args__ = (
        UniqueConstraint("email", name="uq_students_email"),
    )

    @property
    def age(self) -> int:
        """Age in whole years as of today."""
        return years_between(self.dob)

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, email='{self.email}')>"
