"""All authentication-related modules and routes."""

from .auth_routes import configure_auth_router
from .authenticator import Authenticator, CredentialStore
from .errors import (
    AuthError,
    DatabaseUnavailableError,
    InvalidPasswordError,
    UserNotFoundError,
)
from .queries import AuthQueries

__all__ = [
    "AuthError",
    "AuthQueries",
    "Authenticator",
    "CredentialStore",
    "DatabaseUnavailableError",
    "InvalidPasswordError",
    "UserNotFoundError",
    "configure_auth_router",
]
