"""Custom exceptions for the authentication flow.

Each exception carries the HTTP status and the message sent back to the
client, so the endpoint layer can translate them without inspecting types.
"""


class AuthError(Exception):
    """Base class for every way a login can fail."""

    status_code = 401
    message = "Authentication failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message is not None:
            self.message = message


class UserNotFoundError(AuthError):
    """Raised when no credential record matches the username and role."""

    message = "User not found"


class InvalidPasswordError(AuthError):
    """Raised when the password does not match the stored hash."""

    message = "Invalid password"


class DatabaseUnavailableError(AuthError):
    """Raised when the credential lookup itself could not be performed."""

    status_code = 500
    message = "Database connection failed"
