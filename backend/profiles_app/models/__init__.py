"""
Pydantic models for database documents.
"""
from profiles_app.models.profile import (
    Admin,
    AnyProfile,
    Gender,
    Profile,
    ProfileType,
    User,
    document_to_profile,
    profile_to_document,
)

__all__ = [
    "Admin",
    "AnyProfile",
    "Gender",
    "Profile",
    "ProfileType",
    "User",
    "document_to_profile",
    "profile_to_document",
]
