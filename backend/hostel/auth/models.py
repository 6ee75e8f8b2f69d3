"""Models for auth-related requests and responses."""

from pydantic import BaseModel

from hostel.common import Destination


class LoginRequest(BaseModel):
    """Body of a login request.

    :param username: The username to log in as
    :param password: The plaintext password
    :param role: The role to log in with, ``admin`` or ``student``
    """

    username: str
    password: str
    role: str


class LoginResponse(BaseModel):
    """Response model for successful logins.

    :param redirect: The client view to redirect to
    """

    redirect: Destination
