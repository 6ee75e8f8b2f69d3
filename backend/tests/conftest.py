"""Pytest configuration file for setting up test environment."""

import sqlite3
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from bcrypt import gensalt, hashpw
from fastapi.testclient import TestClient

# Add the backend directory to Python path so tests can import hostel
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from hostel import configure_fastapi_app  # noqa: E402
from hostel.auth import AuthQueries  # noqa: E402
from hostel.config import AppConfig  # noqa: E402

ADMIN_USERNAME = "alice"
ADMIN_PASSWORD = "secret"  # noqa: S105
STUDENT_USERNAME = "sam"
STUDENT_PASSWORD = "hunter22"  # noqa: S105


def fast_hash(password: str) -> str:
    """Hash with the cheapest bcrypt cost so tests stay quick."""
    return hashpw(password.encode(), gensalt(rounds=4)).decode()


def seed_users(db_path: str, users: list[tuple[str, str, str]]) -> None:
    """Create the users table and insert (username, role, password) rows."""
    with sqlite3.connect(db_path) as conn:
        conn.execute(AuthQueries.CREATE_USERS_TABLE)
        conn.executemany(
            AuthQueries.ADD_USER,
            [
                (username, role, fast_hash(password))
                for username, role, password in users
            ],
        )
    conn.close()


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """Path to a fresh SQLite database file."""
    return str(tmp_path / "hostel-test.db")


@pytest.fixture
def app_config(db_path: str, monkeypatch: pytest.MonkeyPatch) -> AppConfig:
    """Application configuration pointing at the temporary database."""
    monkeypatch.setenv("DB_PATH", db_path)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("DB_TIMEOUT", raising=False)
    return AppConfig()


@pytest.fixture
def client(app_config: AppConfig) -> Iterator[TestClient]:
    """Client for an app whose database holds one admin and one student."""
    seed_users(
        app_config.db_path,
        [
            (ADMIN_USERNAME, "admin", ADMIN_PASSWORD),
            (STUDENT_USERNAME, "student", STUDENT_PASSWORD),
        ],
    )
    with TestClient(configure_fastapi_app(app_config)) as test_client:
        yield test_client
