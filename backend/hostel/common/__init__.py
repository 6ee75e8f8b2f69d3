"""Common data models and utilities for the application."""

from .errors import DatabaseError
from .models import MessageResponse
from .user import CredentialRecord, Destination, Role

__all__ = [
    "CredentialRecord",
    "DatabaseError",
    "Destination",
    "MessageResponse",
    "Role",
]
