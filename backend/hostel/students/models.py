"""Models for student-related requests and responses."""

from pydantic import BaseModel

JsonScalar = str | int | float | bool | None


class StudentCreate(BaseModel):
    """Body of an add-student request.

    Every field is optional and accepts any JSON scalar, so that a missing
    field is reported with the same message as an empty one and values are
    stored as sent.
    """

    name: JsonScalar = None
    roll_no: JsonScalar = None
    course: JsonScalar = None
    year: JsonScalar = None
    email: JsonScalar = None
    room_no: JsonScalar = None

    def missing_fields(self) -> list[str]:
        """Return the names of fields that are absent, null or empty."""
        return [name for name, value in self if not value]

    def column_values(self) -> tuple[str, ...]:
        """Return the field values as text, in insert column order."""
        return tuple(str(value) for _, value in self)


class HostelCounts(BaseModel):
    """Number of students living in each hostel."""

    Women: int = 0
    Men: int = 0
