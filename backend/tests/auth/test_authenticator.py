"""Unit tests for the login flow, using an in-memory credential store."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from hostel.auth import (
    Authenticator,
    DatabaseUnavailableError,
    InvalidPasswordError,
    UserNotFoundError,
)
from hostel.common import CredentialRecord, Destination

from conftest import fast_hash


class InMemoryCredentialStore:
    """Credential store double backed by a list of records."""

    def __init__(self, records: list[CredentialRecord]) -> None:
        self.records = records
        self.lookups: list[tuple[str, str]] = []

    async def find_credentials(
        self,
        username: str,
        role: str,
    ) -> CredentialRecord | None:
        self.lookups.append((username, role))
        for record in self.records:
            if record.username == username and record.role == role:
                return record
        return None


@pytest.fixture
def store() -> InMemoryCredentialStore:
    """A store holding one admin and one student."""
    return InMemoryCredentialStore(
        [
            CredentialRecord("alice", "admin", fast_hash("secret")),
            CredentialRecord("sam", "student", fast_hash("hunter22")),
        ],
    )


@pytest.mark.asyncio
class TestAuthenticate:
    """Test suite for Authenticator.authenticate."""

    async def test_admin_gets_admin_view(self, store: InMemoryCredentialStore) -> None:
        """Test a correct admin login."""
        destination = await Authenticator(store).authenticate(
            "alice",
            "secret",
            "admin",
        )

        assert destination is Destination.ADMIN_VIEW
        assert store.lookups == [("alice", "admin")]

    async def test_student_gets_student_view(
        self,
        store: InMemoryCredentialStore,
    ) -> None:
        """Test a correct student login."""
        destination = await Authenticator(store).authenticate(
            "sam",
            "hunter22",
            "student",
        )

        assert destination is Destination.STUDENT_VIEW

    async def test_unrecognized_role_gets_student_view(self) -> None:
        """Test that a role outside admin/student still routes to students."""
        store = InMemoryCredentialStore(
            [CredentialRecord("wendy", "warden", fast_hash("keys"))],
        )

        destination = await Authenticator(store).authenticate("wendy", "keys", "warden")

        assert destination is Destination.STUDENT_VIEW

    async def test_wrong_password(self, store: InMemoryCredentialStore) -> None:
        """Test that a present user with a bad password is rejected."""
        with pytest.raises(InvalidPasswordError):
            await Authenticator(store).authenticate("alice", "wrong", "admin")

    async def test_unknown_user(self, store: InMemoryCredentialStore) -> None:
        """Test that an absent username is reported as not found."""
        with pytest.raises(UserNotFoundError):
            await Authenticator(store).authenticate("bob", "x", "admin")

    async def test_wrong_role_is_user_not_found(
        self,
        store: InMemoryCredentialStore,
    ) -> None:
        """Test that a correct password under the wrong role is not found."""
        with pytest.raises(UserNotFoundError):
            await Authenticator(store).authenticate("alice", "secret", "student")

    async def test_verifier_not_called_for_unknown_user(
        self,
        store: InMemoryCredentialStore,
    ) -> None:
        """Test that no hash comparison happens without a record."""
        verifier = MagicMock(return_value=True)

        with pytest.raises(UserNotFoundError):
            await Authenticator(store, verifier).authenticate("bob", "x", "admin")

        verifier.assert_not_called()

    async def test_injected_verifier_receives_stored_hash(
        self,
        store: InMemoryCredentialStore,
    ) -> None:
        """Test that the verifier compares the plaintext to the stored hash."""
        verifier = MagicMock(return_value=True)

        await Authenticator(store, verifier).authenticate("sam", "anything", "student")

        verifier.assert_called_once_with("anything", store.records[1].password_hash)

    async def test_database_unavailable_propagates(self) -> None:
        """Test that a store failure is never reported as an auth failure."""
        store = AsyncMock()
        store.find_credentials.side_effect = DatabaseUnavailableError
        verifier = MagicMock(return_value=False)

        with pytest.raises(DatabaseUnavailableError) as exc_info:
            await Authenticator(store, verifier).authenticate("alice", "x", "admin")

        assert not isinstance(exc_info.value, UserNotFoundError | InvalidPasswordError)
        verifier.assert_not_called()


def test_error_statuses_and_messages() -> None:
    """Test that each failure maps to a distinct response."""
    responses = {
        (error.status_code, error.message)
        for error in (
            UserNotFoundError(),
            InvalidPasswordError(),
            DatabaseUnavailableError(),
        )
    }

    assert responses == {
        (401, "User not found"),
        (401, "Invalid password"),
        (500, "Database connection failed"),
    }
