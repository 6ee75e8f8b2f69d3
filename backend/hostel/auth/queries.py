"""All queries related to the users table.

Using the AuthQueries class as a repository for credential lookups and
provisioning.
"""

import logging

import aiosqlite
from aiosqlite import Connection

from hostel.common import CredentialRecord

from .errors import DatabaseUnavailableError

LOGGER = logging.getLogger(__name__)


class AuthQueries:
    """Repository for the credential store."""

    CREATE_USERS_TABLE = """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL,
            role TEXT NOT NULL,
            password_hash TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """

    # (username, role) is not unique in storage; the oldest row wins.
    GET_USER_BY_USERNAME_AND_ROLE = """
        SELECT username, role, password_hash FROM users
        WHERE username = ? AND role = ?
        ORDER BY id
        LIMIT 1;
        """

    ADD_USER = """
        INSERT INTO users (username, role, password_hash) VALUES (?, ?, ?);
        """

    def __init__(self, connection: Connection) -> None:
        self.connection = connection

    async def initialize_tables(self) -> None:
        """Create the users table if it does not exist.

        This method should be called during application startup.
        """
        await self.connection.execute(AuthQueries.CREATE_USERS_TABLE)
        await self.connection.commit()

    async def find_credentials(
        self,
        username: str,
        role: str,
    ) -> CredentialRecord | None:
        """Look up the credential record for a username and role.

        :param username: The username to match exactly
        :param role: The role to match exactly
        :return: The first matching record, or None if there is none
        :raises DatabaseUnavailableError: If the query cannot be executed
        """
        try:
            async with self.connection.execute(
                AuthQueries.GET_USER_BY_USERNAME_AND_ROLE,
                (username, role),
            ) as cursor:
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            LOGGER.error("Database error looking up credentials: %s", e)
            raise DatabaseUnavailableError from e

        if row is None:
            return None

        stored_username, stored_role, password_hash = row
        return CredentialRecord(
            username=stored_username,
            role=stored_role,
            password_hash=password_hash,
        )

    async def add_user(self, record: CredentialRecord) -> None:
        """Insert a credential record.

        :param record: The record to store; its hash must already be computed
        """
        try:
            await self.connection.execute(
                AuthQueries.ADD_USER,
                (record.username, record.role, record.password_hash),
            )
            await self.connection.commit()
        except aiosqlite.Error:
            await self.connection.rollback()
            LOGGER.exception("Error adding user %s", record.username)
            raise

