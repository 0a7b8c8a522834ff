"""
Session dependencies for route protection.
"""
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from profiles_app.context import AppContext
from profiles_app.models.profile import Profile
from profiles_app.services.profile_service import ProfileService


def get_context(request: Request) -> AppContext:
    """Dependency to get the application context created by the lifespan."""
    return request.app.state.context


def get_profile_service(
    context: Annotated[AppContext, Depends(get_context)],
) -> ProfileService:
    """Dependency to get the ProfileService of the application context."""
    return context.profiles


def get_current_profile(
    context: Annotated[AppContext, Depends(get_context)],
) -> Profile:
    """
    Dependency to get the profile recorded by the last successful login.
    
    Raises:
        HTTPException 401: If nobody is logged in
    """
    profile = context.session.profile
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return profile


def require_admin(
    context: Annotated[AppContext, Depends(get_context)],
    current_profile: Annotated[Profile, Depends(get_current_profile)],
) -> Profile:
    """
    Dependency for admin-only routes.
    
    Raises:
        HTTPException 403: If the session profile is not an Admin
    """
    if not context.session.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )
    return current_profile


def require_owner_or_admin(
    user_id: str,
    context: Annotated[AppContext, Depends(get_context)],
    current_profile: Annotated[Profile, Depends(get_current_profile)],
) -> Profile:
    """
    Dependency for routes acting on `user_id`: the user themselves or an admin.
    
    Raises:
        HTTPException 403: If the session profile is neither
    """
    if current_profile.id != user_id and not context.session.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )
    return current_profile


# Type alias for cleaner route signatures
CurrentProfile = Annotated[Profile, Depends(get_current_profile)]
