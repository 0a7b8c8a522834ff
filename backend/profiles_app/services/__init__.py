"""
Service layer for business logic.
"""
from profiles_app.services.profile_service import ProfileService

__all__ = [
    "ProfileService",
]
