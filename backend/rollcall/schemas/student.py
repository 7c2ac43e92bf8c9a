"""
Rollcall Backend — Student Request/Response Schemas
===================================================

What:  Pydantic models defining the JSON contract of /api/v1/student.
How:   FastAPI validates request bodies against StudentCreate/StudentUpdate
       (422 on failure) and serializes StudentResponse for every read.

Wire format:
    {"id": 1, "name": "name1", "email": "email1@gmail.com", "dob": "2001-01-01", "age": 25}

    `age` is output only. Clients that send it back (e.g. by re-posting a
    fetched record) have it silently ignored, like any other unknown key.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def _not_in_future(v: Optional[date]) -> Optional[date]:
    if v is not None and v > date.today():
        raise ValueError("Date of birth cannot be in the future")
    return v


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class StudentCreate(BaseModel):
    """
    Body of POST /api/v1/student/.

    `id` is optional; when omitted the database assigns one.
    """
    id: Optional[int] = Field(default=None, ge=1, description="Client-supplied identifier")
    name: str = Field(min_length=1, max_length=255, description="Full name")
    email: str = Field(min_length=1, max_length=255, description="Unique email address")
    dob: date = Field(description="Date of birth (ISO 8601, YYYY-MM-DD)")

    model_config = {"str_strip_whitespace": True}

    @field_validator("dob")
    @classmethod
    def validate_dob(cls, v: date) -> date:
        return _not_in_future(v)


class StudentUpdate(BaseModel):
    """
    Body of PUT /api/v1/student/{id}.

    Every field is optional. Missing fields, and blank name or email
    values, leave the stored value unchanged. A body `id` is accepted
    for symmetry with StudentCreate but the path id always wins.
    """
    id: Optional[int] = Field(default=None, description="Ignored; the path id is authoritative")
    name: Optional[str] = Field(default=None, max_length=255, description="New full name")
    email: Optional[str] = Field(default=None, max_length=255, description="New email address")
    dob: Optional[date] = Field(default=None, description="New date of birth")

    model_config = {"str_strip_whitespace": True}

    @field_validator("dob")
    @classmethod
    def validate_dob(cls, v: Optional[date]) -> Optional[date]:
        return _not_in_future(v)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class StudentResponse(BaseModel):
    """Full representation of a student, returned by every read and write."""
    id: int = Field(description="Student identifier")
    name: str = Field(description="Full name")
    email: str = Field(description="Email address")
    dob: date = Field(description="Date of birth")
    age: int = Field(description="Age in whole years, computed from dob")

    model_config = {"from_attributes": True}
