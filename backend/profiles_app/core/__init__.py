"""
Core module - password hashing and logging setup.
"""
from profiles_app.core.log import setup_logging
from profiles_app.core.security import (
    hash_password,
    verify_password,
    verify_and_update_password,
)

__all__ = [
    "setup_logging",
    "hash_password",
    "verify_password",
    "verify_and_update_password",
]
