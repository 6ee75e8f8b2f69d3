"""Credential checking and role routing for the login endpoint."""

import logging
from collections.abc import Callable
from typing import Protocol

from hostel.common import CredentialRecord, Destination

from .errors import InvalidPasswordError, UserNotFoundError
from .security import verify_password

LOGGER = logging.getLogger(__name__)


class CredentialStore(Protocol):
    """Anything that can look up a credential record by username and role."""

    async def find_credentials(
        self,
        username: str,
        role: str,
    ) -> CredentialRecord | None: ...


class Authenticator:
    """Checks a login attempt against the credential store.

    The store and the password verifier are injected, so either can be
    replaced with a test double.
    """

    def __init__(
        self,
        store: CredentialStore,
        verifier: Callable[[str, str], bool] = verify_password,
    ) -> None:
        """Create a new authenticator.

        :param store: Credential store to look users up in
        :param verifier: Function comparing a plaintext password to a stored hash
        """
        self.store = store
        self.verifier = verifier

    async def authenticate(
        self,
        username: str,
        password: str,
        role: str,
    ) -> Destination:
        """Authenticate a user and pick the view they are sent to.

        Username and role are looked up together, so a wrong role is
        indistinguishable from an unknown username.

        :param username: The username to log in as
        :param password: The plaintext password, never stored or logged
        :param role: The role the user is logging in with
        :return: The destination view for the role
        :raises DatabaseUnavailableError: If the store could not be queried
        :raises UserNotFoundError: If no record matches username and role
        :raises InvalidPasswordError: If the password does not match the hash
        """
        record = await self.store.find_credentials(username, role)

        if record is None:
            LOGGER.info("No user %s with role %s", username, role)
            raise UserNotFoundError

        if not self.verifier(password, record.password_hash):
            LOGGER.info("Invalid password for user %s", username)
            raise InvalidPasswordError

        LOGGER.info("%s %s logged in successfully", role, username)
        return Destination.for_role(role)
