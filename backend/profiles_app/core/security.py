"""
Password hashing utilities.
"""
from typing import Optional

from passlib.context import CryptContext
from passlib.exc import PasswordValueError

# bcrypt_sha256 for new hashes: it covers the whole password instead of
# bcrypt's first 72 bytes. Plain bcrypt and "plaintext" only verify older
# documents and are always flagged for re-hashing.
pwd_context = CryptContext(
    schemes=["bcrypt_sha256", "bcrypt", "plaintext"],
    deprecated=["bcrypt", "plaintext"],
)


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt over its SHA-256 digest.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a stored password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The stored value (bcrypt_sha256, bcrypt or legacy plaintext)

    Returns:
        True if password matches, False otherwise
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except PasswordValueError:
        # Legacy bcrypt hashes cannot hold passwords with NUL bytes
        return False


def verify_and_update_password(
    plain_password: str,
    hashed_password: str,
) -> tuple[bool, Optional[str]]:
    """
    Verify a password and report a replacement hash when the stored one is outdated.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The stored value (bcrypt_sha256, bcrypt or legacy plaintext)

    Returns:
        (valid, new_hash) where new_hash is None unless the stored value
        should be replaced
    """
    try:
        return pwd_context.verify_and_update(plain_password, hashed_password)
    except PasswordValueError:
        return False, None
