"""Command line entry point: run the API or provision a user."""

import argparse
import asyncio
import logging

import uvicorn
from aiosqlite import connect as aiosqlite_connect

from hostel import configure_fastapi_app
from hostel.auth import AuthQueries
from hostel.auth.security import hash_password, prompt_for_password
from hostel.common import CredentialRecord, Role
from hostel.config import AppConfig, configure_logging, load_config_from_env

LOGGER = logging.getLogger(__name__)


async def add_user(config: AppConfig, username: str, role: Role) -> None:
    """Prompt for a password and store a new credential record.

    :param config: Application configuration naming the database
    :param username: The username of the new record
    :param role: The role of the new record
    """
    password = prompt_for_password(username)
    record = CredentialRecord(
        username=username,
        role=role,
        password_hash=hash_password(password),
    )

    async with aiosqlite_connect(config.db_path, timeout=config.db_timeout) as db:
        auth_queries = AuthQueries(db)
        await auth_queries.initialize_tables()
        await auth_queries.add_user(record)

    LOGGER.info("Added %s user %s to %s", role, username, config.db_path)


def main() -> None:
    """Parse command line arguments and dispatch to a subcommand."""
    parser = argparse.ArgumentParser(
        description="Hostel management backend.",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="Path to the environment configuration file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API.")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to run the API on (defaults to PORT).",
    )
    serve_parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to run the API on (defaults to HOST).",
    )

    user_parser = subparsers.add_parser("add-user", help="Provision a login.")
    user_parser.add_argument("username", type=str, help="Username of the login.")
    user_parser.add_argument(
        "--role",
        type=Role,
        choices=list(Role),
        default=Role.STUDENT,
        help="Role of the login.",
    )

    args = parser.parse_args()

    config = load_config_from_env(args.env_file)
    configure_logging(config)

    if args.command == "add-user":
        asyncio.run(add_user(config, args.username, args.role))
        return

    app = configure_fastapi_app(config)
    host = args.host or config.host
    port = args.port or config.port
    LOGGER.info("Serving on http://%s:%s", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
