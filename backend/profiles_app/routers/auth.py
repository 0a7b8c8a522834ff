"""
Authentication router for registration, login and logout.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from profiles_app.context import AppContext
from profiles_app.dependencies.session import (
    CurrentProfile,
    get_context,
    get_profile_service,
)
from profiles_app.exceptions import DuplicateCredentialError, ProfileStoreError
from profiles_app.schemas.profile import LoginRequest, ProfileResponse, RegisterRequest
from profiles_app.services.profile_service import ProfileService

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """
    Register a new user account.
    
    - **email** and **username** must not belong to any other profile
    - **password_confirm** must match **password**
    """
    if not body.passwords_match():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Passwords do not match",
        )
    
    try:
        user = await profile_service.register(body.to_user())
    except DuplicateCredentialError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except ProfileStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    
    return ProfileResponse.from_profile(user)


@router.post(
    "/login",
    response_model=ProfileResponse,
    summary="Login with email or username",
)
async def login(
    body: LoginRequest,
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """
    Authenticate with email or username and password.
    
    On success the profile becomes the current session profile.
    """
    try:
        profile = await profile_service.login(body.credential, body.password)
    except ProfileStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credential or password",
        )
    
    return ProfileResponse.from_profile(profile)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear the current session",
)
async def logout(context: Annotated[AppContext, Depends(get_context)]):
    context.session.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get current session profile",
)
async def get_current_profile_info(current_profile: CurrentProfile):
    """Get the profile of whoever is logged in."""
    return ProfileResponse.from_profile(current_profile)
