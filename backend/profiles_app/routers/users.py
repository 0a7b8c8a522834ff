"""
User management router: listing, editing and deleting users.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from profiles_app.context import AppContext
from profiles_app.dependencies.session import (
    get_context,
    get_profile_service,
    require_admin,
    require_owner_or_admin,
)
from profiles_app.exceptions import ProfileStoreError
from profiles_app.models.profile import Profile
from profiles_app.schemas.profile import (
    DeleteResponse,
    ProfileResponse,
    UpdateResponse,
    UserUpdate,
)
from profiles_app.services.profile_service import ProfileService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=list[ProfileResponse],
    summary="List all users",
)
async def list_users(
    admin: Annotated[Profile, Depends(require_admin)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """List every User profile. Admin only."""
    try:
        users = await profile_service.get_users()
    except ProfileStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    return [ProfileResponse.from_profile(user) for user in users]


@router.put(
    "/{user_id}",
    response_model=UpdateResponse,
    summary="Update a user",
)
async def update_user(
    user_id: str,
    body: UserUpdate,
    current_profile: Annotated[Profile, Depends(require_owner_or_admin)],
    context: Annotated[AppContext, Depends(get_context)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """
    Update password, name, lastname, telephone, gender or card.
    
    Omitted fields keep their stored value. Returns whether anything changed.
    """
    try:
        user = await profile_service.get_user(user_id)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )
        
        updated = await profile_service.update_user(
            user.model_copy(update=body.model_dump(exclude_unset=True, exclude_none=True))
        )
        
        # Keep the session in sync when users edit themselves
        if updated and current_profile.id == user_id:
            refreshed = await profile_service.get_user(user_id)
            if refreshed is not None:
                context.session.set_profile(refreshed)
    except ProfileStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    
    return UpdateResponse(updated=updated)


@router.delete(
    "/{user_id}",
    response_model=DeleteResponse,
    summary="Delete a user",
)
async def delete_user(
    user_id: str,
    current_profile: Annotated[Profile, Depends(require_owner_or_admin)],
    context: Annotated[AppContext, Depends(get_context)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Delete a profile by id. Users may only delete their own account."""
    try:
        deleted = await profile_service.delete_user(user_id)
    except ProfileStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    
    if deleted and current_profile.id == user_id:
        context.session.clear()
    
    return DeleteResponse(deleted=deleted)
