"""
Rollcall Backend — Student Service (Business Logic)
===================================================

What:  All rules of the student resource: existence checks, email
       uniqueness, partial updates.
How:   Async SQLAlchemy queries on a session handed in by the caller.
       The service flushes; get_db_session() owns commit and rollback.
Who:   Called by the /api/v1/student route handlers.

Outcome mapping:
    unknown id                     → NotFoundError   (404)
    email owned by another student → ConflictError   (409)
    client-supplied id taken       → ConflictError   (409)
    UNIQUE violation on flush      → ConflictError   (409)
    any other SQLAlchemy failure   → DatabaseError   (500)

StudentService is stateless; every call receives its own session.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from rollcall.exceptions import ConflictError, DatabaseError, NotFoundError, RollcallError
from rollcall.models.student import Student
from rollcall.schemas.student import StudentCreate, StudentResponse, StudentUpdate

logger = logging.getLogger(__name__)

# Substrings naming each constraint in PostgreSQL and SQLite error text
EMAIL_CONSTRAINT_MARKERS = ("uq_students_email", "students.email")
ID_CONSTRAINT_MARKERS = ("students_pkey", "students.id")


def conflict_from_integrity_error(e: IntegrityError, email: Optional[str]) -> ConflictError:
    """Name the field whose constraint rejected the write, when the driver says so."""
    detail = str(e.orig)
    if any(marker in detail for marker in EMAIL_CONSTRAINT_MARKERS):
        return ConflictError(message=f"Email '{email}' is already taken", field="email")
    if any(marker in detail for marker in ID_CONSTRAINT_MARKERS):
        return ConflictError(message="Student ID is already taken", field="id")
    return ConflictError(message="The student conflicts with an existing record")


class StudentService:
    """
    Business logic layer for student operations.

    Responsibilities:
        - get_all_students(): every student, ordered by id
        - get_student_by_id(): single student with not-found handling
        - create_student(): insert with id and email uniqueness checks
        - update_student(): partial update with existence and email checks
        - delete_student_by_id(): delete with existence check
    """

    async def get_all_students(self, db: AsyncSession) -> List[StudentResponse]:
        """
        Return every student ordered by id. An empty table yields [].

        Raises:
            DatabaseError: Query execution failed
        """
        try:
            result = await db.execute(select(Student).order_by(Student.id))
            students = result.scalars().all()
            return [StudentResponse.model_validate(s) for s in students]
        except SQLAlchemyError as e:
            logger.error("Database error listing students: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve students. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_student_by_id(self, db: AsyncSession, student_id: int) -> StudentResponse:
        """
        Retrieve a single student by ID.

        Raises:
            NotFoundError: No student has this id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            student = await self._get_or_raise(db, student_id)
            return StudentResponse.model_validate(student)
        except RollcallError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error fetching student %s: %s", student_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the student. Please try again.",
                context={"student_id": student_id},
            )

    async def create_student(self, db: AsyncSession, payload: StudentCreate) -> StudentResponse:
        """
        Insert a new student.

        Checks, in order:
            1. A client-supplied id must not belong to an existing student
            2. The email must not belong to any existing student

        Args:
            db: Async database session
            payload: Validated request body

        Returns:
            StudentResponse for the stored row, including the assigned id

        Raises:
            ConflictError: id or email already taken (→ 409)
            DatabaseError: Insert failed for another reason (→ 500)
        """
        try:
            if payload.id is not None and await db.get(Student, payload.id) is not None:
                raise ConflictError(
                    message=f"Student with ID '{payload.id}' already exists",
                    field="id",
                )
            await self._ensure_email_free(db, payload.email)

            student = Student(
                name=payload.name,
                email=payload.email,
                dob=payload.dob,
            )
            if payload.id is not None:
                student.id = payload.id
            db.add(student)
            await db.flush()  # Assigns the id without committing

            logger.info("Student created: id=%s", student.id)
            return StudentResponse.model_validate(student)

        except RollcallError:
            raise
        except IntegrityError as e:
            logger.warning("Integrity error creating student: %s", str(e.orig))
            raise conflict_from_integrity_error(e, payload.email)
        except SQLAlchemyError as e:
            logger.error("Database error creating student: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the student. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def update_student(
        self,
        db: AsyncSession,
        student_id: int,
        payload: StudentUpdate,
    ) -> StudentResponse:
        """
        Apply a partial update to an existing student.

        Rules:
            - The student must exist; this is checked before anything else
            - name/email are applied only when non-blank and different
            - An email equal to the student's own current email is a no-op
            - An email owned by a different student is a conflict
            - dob is applied whenever present
            - payload.id is ignored

        Raises:
            NotFoundError: No student has this id (→ 404)
            ConflictError: New email belongs to another student (→ 409)
            DatabaseError: Update failed for another reason (→ 500)
        """
        try:
            student = await self._get_or_raise(db, student_id)

            if payload.email and payload.email != student.email:
                await self._ensure_email_free(db, payload.email, exclude_id=student_id)
                student.email = payload.email

            if payload.name and payload.name != student.name:
                student.name = payload.name

            if payload.dob is not None:
                student.dob = payload.dob

            await db.flush()
            logger.info("Student updated: id=%s", student_id)
            return StudentResponse.model_validate(student)

        except RollcallError:
            raise
        except IntegrityError as e:
            logger.warning("Integrity error updating student %s: %s", student_id, str(e.orig))
            raise conflict_from_integrity_error(e, payload.email)
        except SQLAlchemyError as e:
            logger.error("Database error updating student %s: %s", student_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the student. Please try again.",
                context={"student_id": student_id},
            )

    async def delete_student_by_id(self, db: AsyncSession, student_id: int) -> None:
        """
        Remove a student.

        Raises:
            NotFoundError: No student has this id (→ 404)
            DatabaseError: Delete failed (→ 500)
        """
        try:
            student = await self._get_or_raise(db, student_id)
            await db.delete(student)
            await db.flush()
            logger.info("Student deleted: id=%s", student_id)
        except RollcallError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error deleting student %s: %s", student_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the student. Please try again.",
                context={"student_id": student_id},
            )

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _get_or_raise(self, db: AsyncSession, student_id: int) -> Student:
        student = await db.get(Student, student_id)
        if student is None:
            raise NotFoundError(resource="student", resource_id=str(student_id))
        return student

    async def _ensure_email_free(
        self,
        db: AsyncSession,
        email: str,
        exclude_id: Optional[int] = None,
    ) -> None:
        """Raise ConflictError if a student other than `exclude_id` owns `email`."""
        query = select(Student.id).where(Student.email == email)
        if exclude_id is not None:
            query = query.where(Student.id != exclude_id)
        result = await db.execute(query.limit(1))
        if result.scalar_one_or_none() is not None:
            raise ConflictError(
                message=f"Email '{email}' is already taken",
                field="email",
            )


# ── Singleton Instance ────────────────────────────────────────────────────
student_service = StudentService()
