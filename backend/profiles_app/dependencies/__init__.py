"""
Dependencies for dependency injection in routes.
"""
from profiles_app.dependencies.session import (
    get_context,
    get_current_profile,
    get_profile_service,
    require_admin,
    require_owner_or_admin,
)

__all__ = [
    "get_context",
    "get_current_profile",
    "get_profile_service",
    "require_admin",
    "require_owner_or_admin",
]
