"""
Request/response schemas for the API.
"""
from profiles_app.schemas.profile import (
    DeleteResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    UpdateResponse,
    UserUpdate,
)

__all__ = [
    "DeleteResponse",
    "LoginRequest",
    "ProfileResponse",
    "RegisterRequest",
    "UpdateResponse",
    "UserUpdate",
]
