"""Student records and hostel occupancy."""

from .models import HostelCounts, StudentCreate
from .queries import StudentQueries
from .student_routes import configure_student_router

__all__ = [
    "HostelCounts",
    "StudentCreate",
    "StudentQueries",
    "configure_student_router",
]
