"""
Rollcall Backend — Student Route Handlers
=========================================

What:  CRUD endpoints under /api/v1/student.
How:   Extract path/body, delegate to StudentService, choose the status code.
       Error statuses (404, 409, 500) come from the global exception handlers.

Route Inventory:
    GET    /api/v1/student/              200 list | 204 when empty
    GET    /api/v1/student/{student_id}  200 | 404
    POST   /api/v1/student/              201 | 409
    PUT    /api/v1/student/{student_id}  200 | 404 | 409
    DELETE /api/v1/student/{student_id}  204 | 404
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from rollcall.database import get_db_session
from rollcall.schemas.common import ErrorResponse
from rollcall.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from rollcall.services.student_service import student_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/student", tags=["Students"])


@router.get(
    "/",
    response_model=List[StudentResponse],
    responses={
        200: {"description": "All students, ordered by id"},
        204: {"description": "No students stored"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all students",
)
async def list_students(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
):
    """
    Return every student.

    An empty (or absent) collection answers 204 with no body rather than
    200 with []. Existing clients depend on this; see DESIGN.md.
    """
    students = await student_service.get_all_students(db=db)
    if not students:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    response.headers["X-Total-Count"] = str(len(students))
    return students


@router.get(
    "/{student_id}",
    response_model=StudentResponse,
    responses={
        404: {"description": "Student not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single student by ID",
)
async def get_student(
    student_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> StudentResponse:
    return await student_service.get_student_by_id(db=db, student_id=student_id)


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_model=StudentResponse,
    responses={
        201: {"description": "Student created", "model": StudentResponse},
        409: {"description": "Email or id already taken", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a student",
)
async def create_student(
    payload: StudentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> StudentResponse:
    """Create a student. The stored record, with its id, is echoed back."""
    logger.info("Create student request: email=%s", payload.email)
    return await student_service.create_student(db=db, payload=payload)


@router.put(
    "/{student_id}",
    response_model=StudentResponse,
    responses={
        404: {"description": "Student not found", "model": ErrorResponse},
        409: {"description": "Email already taken", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update a student",
)
async def update_student(
    student_id: int,
    payload: StudentUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> StudentResponse:
    """
    Update name, email and/or dob of an existing student.

    Fields missing from the body keep their stored value. The id in the
    path is authoritative; an id in the body is ignored.
    """
    return await student_service.update_student(db=db, student_id=student_id, payload=payload)


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        404: {"description": "Student not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a student",
)
async def delete_student(
    student_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await student_service.delete_student_by_id(db=db, student_id=student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
