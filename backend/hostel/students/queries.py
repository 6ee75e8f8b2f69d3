"""Queries against the students table."""

import logging

import aiosqlite
from aiosqlite import Connection

from hostel.common import DatabaseError

from .models import HostelCounts, StudentCreate

LOGGER = logging.getLogger(__name__)


class StudentQueries:
    """Repository for student records."""

    CREATE_STUDENTS_TABLE = """
        CREATE TABLE IF NOT EXISTS students (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            roll_no TEXT NOT NULL UNIQUE,
            course TEXT NOT NULL,
            year TEXT NOT NULL,
            email TEXT NOT NULL,
            room_no TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """

    ADD_STUDENT = """
        INSERT INTO students (name, roll_no, course, year, email, room_no)
        VALUES (?, ?, ?, ?, ?, ?);
        """

    # LIKE is case-insensitive for ASCII in SQLite, so "w12" is Women too.
    COUNT_BY_HOSTEL = """
        SELECT
            CASE
                WHEN room_no LIKE 'W%' THEN 'Women'
                WHEN room_no LIKE 'M%' THEN 'Men'
                ELSE 'Unknown'
            END AS hostel,
            COUNT(*) AS count
        FROM students
        GROUP BY hostel;
        """

    def __init__(self, connection: Connection) -> None:
        self.connection = connection

    async def initialize_tables(self) -> None:
        """Create the students table if it does not exist."""
        await self.connection.execute(StudentQueries.CREATE_STUDENTS_TABLE)
        await self.connection.commit()

    async def add_student(self, student: StudentCreate) -> None:
        """Insert a student record.

        :param student: A student with every field present
        :raises DatabaseError: If the insert fails, e.g. on a duplicate roll number
        """
        try:
            await self.connection.execute(
                StudentQueries.ADD_STUDENT,
                student.column_values(),
            )
            await self.connection.commit()
        except aiosqlite.Error as e:
            await self.connection.rollback()
            LOGGER.error("Error inserting student %s: %s", student.roll_no, e)
            raise DatabaseError from e

    async def count_by_hostel(self) -> HostelCounts:
        """Count students per hostel, derived from the room number prefix.

        Rooms that belong to neither hostel are left out.

        :return: The number of students in each hostel
        :raises DatabaseError: If the query fails
        """
        try:
            async with self.connection.execute(
                StudentQueries.COUNT_BY_HOSTEL,
            ) as cursor:
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            LOGGER.error("Error fetching student counts: %s", e)
            raise DatabaseError from e

        counts = {hostel: count for hostel, count in rows}
        return HostelCounts(
            Women=counts.get("Women", 0),
            Men=counts.get("Men", 0),
        )
