"""Routes for registering students and reporting hostel occupancy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse

from hostel.common import MessageResponse

from .models import HostelCounts, StudentCreate

if TYPE_CHECKING:
    from .queries import StudentQueries

LOGGER = logging.getLogger(__name__)

_DATABASE_ERROR_RESPONSE = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "model": MessageResponse,
        "description": "Database error",
    },
}


async def _add_student(
    student_queries: StudentQueries,
    student: StudentCreate,
) -> MessageResponse | JSONResponse:
    missing = student.missing_fields()
    if missing:
        LOGGER.debug("Rejected student with missing fields: %s", missing)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "All fields are required"},
        )

    await student_queries.add_student(student)
    LOGGER.info("Added student %s in room %s", student.roll_no, student.room_no)
    return MessageResponse(message="Student added successfully!")


def configure_student_router(
    router: APIRouter,
    student_queries: StudentQueries,
) -> APIRouter:
    """Configure the student records router.

    :param router: The APIRouter to configure
    :param student_queries: The StudentQueries instance for database operations
    :return: The configured APIRouter
    """

    @router.post(
        "/add-student",
        response_model=MessageResponse,
        responses={
            status.HTTP_400_BAD_REQUEST: {
                "model": MessageResponse,
                "description": "A field is missing or empty",
            },
            **_DATABASE_ERROR_RESPONSE,
        },
    )
    async def add_student(
        student: Annotated[StudentCreate, Body()] = StudentCreate(),  # noqa: B008
    ) -> MessageResponse | JSONResponse:
        return await _add_student(student_queries, student)

    @router.get(
        "/student-counts",
        response_model=HostelCounts,
        responses=_DATABASE_ERROR_RESPONSE,
    )
    async def student_counts() -> HostelCounts:
        return await student_queries.count_by_hostel()

    return router
