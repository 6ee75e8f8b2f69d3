"""Exceptions shared by the database-backed modules."""


class DatabaseError(Exception):
    """Raised when a query against the application database fails."""

    status_code = 500
    message = "Database error"
