"""
Profile store failures.

Each store operation reports database faults as one failure kind; the
driver error stays available as `__cause__`.
"""
from typing import Iterable, Optional


class ProfileStoreError(Exception):
    """Base class for profile store failures."""
    message = "Profile store error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class DuplicateCredentialError(ProfileStoreError):
    """Email and/or username already taken by another profile."""

    def __init__(self, fields: Iterable[str]):
        self.fields = tuple(fields)
        if set(self.fields) >= {"email", "username"}:
            message = "Both email and username already exist"
        elif "email" in self.fields:
            message = "Email already exists"
        else:
            message = "Username already exists"
        super().__init__(message)


class RegistrationError(ProfileStoreError):
    message = "Error registering the user"


class RetrievalError(ProfileStoreError):
    message = "Error retrieving users"


class UpdateError(ProfileStoreError):
    message = "Error updating the user"


class DeletionError(ProfileStoreError):
    message = "Error deleting the user"


class LoginError(ProfileStoreError):
    message = "Error during login"


class VerificationError(ProfileStoreError):
    message = "Error verifying credentials"


class UnknownProfileTypeError(ProfileStoreError):
    """Stored document carries a `type` tag with no matching model."""

    def __init__(self, profile_type: object):
        self.profile_type = profile_type
        super().__init__(f"Unknown profile type: {profile_type!r}")
