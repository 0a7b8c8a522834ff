"""
Profile request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.networks import validate_email

from profiles_app.models.profile import Gender, Profile, User


class RegisterRequest(BaseModel):
    """Registration request body."""
    email: str = Field(..., description="User email address")
    username: str = Field(..., min_length=1, description="Unique username")
    password: str = Field(..., min_length=1, description="User password")
    password_confirm: str = Field(..., description="Password confirmation")
    name: str = Field(..., description="First name")
    lastname: str = Field(..., description="Last name")
    telephone: str = Field(..., description="Contact telephone")
    gender: Gender = Field(..., description="User gender")
    card: str = Field(..., description="Card identifier")

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        """Reject malformed addresses but keep the email exactly as typed."""
        validate_email(value)
        return value

    def passwords_match(self) -> bool:
        """Check if password and confirmation match."""
        return self.password == self.password_confirm

    def to_user(self) -> User:
        return User(**self.model_dump(exclude={"password_confirm"}))


class LoginRequest(BaseModel):
    """Login request body."""
    credential: str = Field(..., min_length=1, description="Email address or username")
    password: str = Field(..., min_length=1, description="User password")


class UserUpdate(BaseModel):
    """User update request (email and username cannot change)."""
    password: Optional[str] = Field(None, min_length=1, description="New password")
    name: Optional[str] = Field(None, description="First name")
    lastname: Optional[str] = Field(None, description="Last name")
    telephone: Optional[str] = Field(None, description="Contact telephone")
    gender: Optional[Gender] = Field(None, description="User gender")
    card: Optional[str] = Field(None, description="Card identifier")


class ProfileResponse(BaseModel):
    """Profile information response (excludes the password)."""
    id: str = Field(..., description="Profile ID")
    type: str = Field(..., description="Profile type: User | Admin")
    email: str = Field(..., description="Email address")
    username: str = Field(..., description="Username")
    name: str = Field(..., description="First name")
    lastname: str = Field(..., description="Last name")
    telephone: str = Field(..., description="Contact telephone")
    gender: Optional[Gender] = Field(None, description="User gender (users only)")
    card: Optional[str] = Field(None, description="Card identifier (users only)")
    current_account: Optional[str] = Field(None, description="Current account (admins only)")

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileResponse":
        return cls(**profile.model_dump(exclude={"password"}))


class UpdateResponse(BaseModel):
    updated: bool = Field(..., description="Whether any field changed")


class DeleteResponse(BaseModel):
    deleted: bool = Field(..., description="Whether a profile was removed")
