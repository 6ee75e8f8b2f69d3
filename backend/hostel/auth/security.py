"""Password hashing and verification.

Hashes are bcrypt strings, so the salt travels inside the stored hash.
"""

import getpass
import logging

from bcrypt import checkpw, gensalt, hashpw

LOGGER = logging.getLogger(__name__)

MINIMUM_PASSWORD_LENGTH = 8

# bcrypt only reads the first 72 bytes of a password.
BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh salt.

    :param password: The plaintext password
    :return: The bcrypt hash, decoded to text for storage
    """
    return hashpw(password.encode(), gensalt()).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Passwords longer than bcrypt reads are truncated to its limit before
    comparing. A hash bcrypt cannot parse never verifies.

    :param password: The plaintext password supplied by the client
    :param password_hash: The stored hash
    :return: True if the password matches, False otherwise
    """
    try:
        return checkpw(
            password.encode()[:BCRYPT_MAX_PASSWORD_BYTES],
            password_hash.encode(),
        )
    except ValueError:
        LOGGER.warning("Stored password hash is malformed")
        return False


def validate_password(password: str) -> str | None:
    """Validate a new password before it is hashed.

    :param password: The password to validate
    :return: An error message if the password is unacceptable, None otherwise
    """
    if len(password) < MINIMUM_PASSWORD_LENGTH:
        return f"Password must be at least {MINIMUM_PASSWORD_LENGTH} characters long"

    if len(password.encode()) > BCRYPT_MAX_PASSWORD_BYTES:
        return f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes long"

    return None


def prompt_for_password(username: str) -> str:
    """Prompt on the terminal for a new password, asking twice.

    :param username: The account the password is for, shown in the prompt
    :return: The confirmed plaintext password
    """
    password = None
    while not password:
        password = getpass.getpass(f"Password for {username}: ")
        error = validate_password(password)
        if error:
            LOGGER.error(error)
            password = None
            continue
        password_confirm = getpass.getpass("Re-enter password: ")
        if password != password_confirm:
            LOGGER.error("Passwords do not match. Please try again.")
            password = None
            continue
    return password
