"""
Profile models for the profiles collection.

Both variants live in the same collection and are told apart by the
`type` field of the stored document.
"""
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from profiles_app.database.databases.profiles_db import Fields
from profiles_app.exceptions import UnknownProfileTypeError


class ProfileType(str, Enum):
    """Discriminator values stored in `type`."""
    USER = "User"
    ADMIN = "Admin"


class Gender(str, Enum):
    """User gender."""
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class Profile(BaseModel):
    """
    Fields shared by every authenticated principal.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    # Stored as written; address format is checked on registration input
    email: str = Field(..., min_length=1, description="Unique email address")
    username: str = Field(..., min_length=1, description="Unique username")
    password: str = Field(..., min_length=1, description="Password (bcrypt hash once stored)")
    name: str = Field(..., description="First name")
    lastname: str = Field(..., description="Last name")
    telephone: str = Field(..., description="Contact telephone")

    class Config:
        populate_by_name = True
        use_enum_values = True


class User(Profile):
    """
    Regular user document.
    """
    type: Literal["User"] = ProfileType.USER.value
    gender: Gender = Field(..., description="User gender")
    card: str = Field(..., description="Card identifier")


class Admin(Profile):
    """
    Administrator document.
    """
    type: Literal["Admin"] = ProfileType.ADMIN.value
    current_account: str = Field(
        ...,
        alias="currentAccount",
        description="Current account reference",
    )


AnyProfile = Union[User, Admin]

PROFILE_MODELS: dict[str, type[Profile]] = {
    ProfileType.USER.value: User,
    ProfileType.ADMIN.value: Admin,
}


def profile_to_document(profile: Profile) -> dict:
    """Serialize a profile to a document, leaving `_id` to the database."""
    return profile.model_dump(mode="json", by_alias=True, exclude={"id"})


def document_to_profile(doc: dict) -> AnyProfile:
    """
    Build the profile variant named by the document's `type` tag.
    
    Raises:
        UnknownProfileTypeError: If the tag is missing or not a known variant
        pydantic.ValidationError: If the document does not fit the variant
    """
    profile_type = doc.get(Fields.TYPE)
    model = PROFILE_MODELS.get(profile_type)
    if model is None:
        raise UnknownProfileTypeError(profile_type)
    
    data = dict(doc)
    if data.get(Fields.ID) is not None:
        data[Fields.ID] = str(data[Fields.ID])
    return model.model_validate(data)
