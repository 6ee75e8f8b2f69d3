"""Fundamental user data model for app."""

from dataclasses import dataclass
from enum import StrEnum


class Role(StrEnum):
    """Roles a credential record can be provisioned with."""

    ADMIN = "admin"
    STUDENT = "student"


class Destination(StrEnum):
    """Client views a user is redirected to after logging in."""

    ADMIN_VIEW = "admin.html"
    STUDENT_VIEW = "student.html"

    @classmethod
    def for_role(cls, role: str) -> "Destination":
        """Map a role to the view its users land on.

        Anything other than ``admin``, including unknown roles, goes to the
        student view.

        :param role: The role the user authenticated with
        :return: The destination view
        """
        if role == Role.ADMIN:
            return cls.ADMIN_VIEW
        return cls.STUDENT_VIEW


@dataclass(frozen=True)
class CredentialRecord:
    """A row of the users table."""

    username: str
    role: str
    password_hash: str
