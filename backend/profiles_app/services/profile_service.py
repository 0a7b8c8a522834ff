"""
Profile store: registration, login and user management on the profiles collection.
"""
import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError, PyMongoError

from profiles_app.core.security import (
    hash_password,
    verify_and_update_password,
    verify_password,
)
from profiles_app.database.databases import profiles_db
from profiles_app.database.databases.profiles_db import Fields, USER_MUTABLE_FIELDS
from profiles_app.exceptions import (
    DeletionError,
    DuplicateCredentialError,
    LoginError,
    RegistrationError,
    RetrievalError,
    UpdateError,
    VerificationError,
)
from profiles_app.models.profile import (
    AnyProfile,
    ProfileType,
    User,
    document_to_profile,
    profile_to_document,
)
from profiles_app.session import SessionHolder

logger = logging.getLogger(__name__)


def _parse_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Convert a string id to ObjectId, or None when it is not a valid id."""
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class ProfileService:
    """Service for profile persistence and authentication."""

    def __init__(self, db: AsyncIOMotorDatabase, session: SessionHolder):
        """Initialize with the profiles database and the session to fill on login."""
        self.db = db
        self.profiles = db[profiles_db.Collections.PROFILES]
        self.session = session

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    async def check_credentials_existence(self, email: str, username: str) -> dict[str, bool]:
        """
        Check independently whether an email and a username are already taken.

        Args:
            email: Email address to look up
            username: Username to look up

        Returns:
            dict with boolean entries "email" and "username"

        Raises:
            VerificationError: If the lookup fails
        """
        try:
            email_count = await self.profiles.count_documents({Fields.EMAIL: email})
            username_count = await self.profiles.count_documents({Fields.USERNAME: username})
        except PyMongoError as exc:
            logger.error("Credential verification failed: %s", exc)
            raise VerificationError() from exc

        return {
            "email": email_count > 0,
            "username": username_count > 0,
        }

    async def _duplicate_fields(self, user: User) -> list[str]:
        existing = await self.check_credentials_existence(user.email, user.username)
        return [field for field in ("email", "username") if existing[field]]

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    async def register(self, user: User) -> User:
        """
        Register a new user.

        Args:
            user: User to create; its password is given in plain text

        Returns:
            The stored user with its generated id and hashed password

        Raises:
            DuplicateCredentialError: If the email and/or username exist
            VerificationError: If the uniqueness check fails
            RegistrationError: If the insert fails
        """
        duplicates = await self._duplicate_fields(user)
        if duplicates:
            raise DuplicateCredentialError(duplicates)

        document = profile_to_document(user)
        document[Fields.TYPE] = ProfileType.USER.value
        document[Fields.PASSWORD] = hash_password(user.password)

        try:
            result = await self.profiles.insert_one(document)
        except DuplicateKeyError as exc:
            # Another registration took the credential after the check
            duplicates = await self._duplicate_fields(user)
            if not duplicates:
                logger.error("Duplicate key on insert with no visible conflict: %s", exc)
                raise RegistrationError() from exc
            raise DuplicateCredentialError(duplicates) from exc
        except PyMongoError as exc:
            logger.error("User registration failed: %s", exc)
            raise RegistrationError() from exc

        user_id = str(result.inserted_id)
        logger.info("Registered user '%s' (%s)", user.username, user_id)

        return user.model_copy(
            update={"id": user_id, "password": document[Fields.PASSWORD]}
        )

    # ------------------------------------------------------------------
    # Login
    # ------------------------------------------------------------------

    async def login(self, credential: str, password: str) -> Optional[AnyProfile]:
        """
        Authenticate by email or username and record the profile in the session.

        Args:
            credential: Email address or username
            password: Plain text password

        Returns:
            The User or Admin profile, or None if the credentials do not match

        Raises:
            LoginError: If the lookup fails or the stored document is unreadable
            UnknownProfileTypeError: If the document has an unknown `type` tag
        """
        profile = await self._login_profile(credential, password)

        if profile is not None:
            self.session.set_profile(profile)
            logger.info("Profile '%s' logged in as %s", profile.username, profile.type)
        else:
            logger.info("Failed login attempt")

        return profile

    async def _login_profile(self, credential: str, password: str) -> Optional[AnyProfile]:
        try:
            doc = await self.profiles.find_one({
                "$or": [
                    {Fields.EMAIL: credential},
                    {Fields.USERNAME: credential},
                ]
            })
        except PyMongoError as exc:
            logger.error("Login lookup failed: %s", exc)
            raise LoginError() from exc

        if doc is None:
            return None

        valid, new_hash = verify_and_update_password(password, doc.get(Fields.PASSWORD) or "")
        if not valid:
            return None

        if new_hash is not None:
            await self._replace_password_hash(doc[Fields.ID], new_hash)
            doc[Fields.PASSWORD] = new_hash

        try:
            return document_to_profile(doc)
        except ValidationError as exc:
            logger.error("Stored profile %s is invalid: %s", doc[Fields.ID], exc)
            raise LoginError() from exc

    async def _replace_password_hash(self, object_id: ObjectId, new_hash: str) -> None:
        """Store a fresh hash for a profile whose password format is outdated."""
        try:
            await self.profiles.update_one(
                {Fields.ID: object_id},
                {"$set": {Fields.PASSWORD: new_hash}},
            )
        except PyMongoError as exc:
            logger.error("Password re-hash failed for %s: %s", object_id, exc)
            raise LoginError() from exc
        logger.info("Upgraded stored password hash for %s", object_id)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def get_users(self) -> list[User]:
        """
        Get all documents tagged as User, in database order.

        Raises:
            RetrievalError: If the query fails or a document is unreadable
        """
        users = []

        try:
            async for doc in self.profiles.find({Fields.TYPE: ProfileType.USER.value}):
                users.append(document_to_profile(doc))
        except (PyMongoError, ValidationError) as exc:
            logger.error("Listing users failed: %s", exc)
            raise RetrievalError() from exc

        return users

    async def get_user(self, user_id: str) -> Optional[User]:
        """
        Get a single User by id.

        Returns:
            User model or None if not found

        Raises:
            RetrievalError: If the query fails or the document is unreadable
        """
        object_id = _parse_object_id(user_id)
        if object_id is None:
            return None

        try:
            doc = await self.profiles.find_one(
                {Fields.ID: object_id, Fields.TYPE: ProfileType.USER.value}
            )
            return document_to_profile(doc) if doc else None
        except (PyMongoError, ValidationError) as exc:
            logger.error("Fetching user %s failed: %s", user_id, exc)
            raise RetrievalError() from exc

    async def update_user(self, user: User) -> bool:
        """
        Update password, name, lastname, telephone, gender and card of a user.

        Email and username are never modified.

        Args:
            user: User carrying the id and the new values

        Returns:
            True if at least one field changed, False if the id is unknown
            or every value matches the stored one

        Raises:
            UpdateError: If the update fails
        """
        object_id = _parse_object_id(user.id)
        if object_id is None:
            return False

        try:
            current = await self.profiles.find_one({Fields.ID: object_id})
            if current is None:
                return False

            changes = self._changed_fields(current, user)
            if not changes:
                return False

            result = await self.profiles.update_one(
                {Fields.ID: object_id},
                {"$set": changes},
            )
        except PyMongoError as exc:
            logger.error("Updating user %s failed: %s", user.id, exc)
            raise UpdateError() from exc

        if result.modified_count > 0:
            logger.info("Updated user %s: %s", user.id, sorted(changes))
        return result.modified_count > 0

    @staticmethod
    def _changed_fields(current: dict, user: User) -> dict:
        """Return the mutable fields whose submitted value differs from the stored one."""
        submitted = profile_to_document(user)
        changes = {}

        for field in USER_MUTABLE_FIELDS:
            if field == Fields.PASSWORD:
                continue
            if current.get(field) != submitted[field]:
                changes[field] = submitted[field]

        stored_password = current.get(Fields.PASSWORD) or ""
        if user.password != stored_password and not verify_password(user.password, stored_password):
            changes[Fields.PASSWORD] = hash_password(user.password)

        return changes

    async def delete_user(self, user_id: str) -> bool:
        """
        Delete a profile by id.

        Returns:
            True if a document was removed, False if none matched

        Raises:
            DeletionError: If the delete fails
        """
        object_id = _parse_object_id(user_id)
        if object_id is None:
            return False

        try:
            result = await self.profiles.delete_one({Fields.ID: object_id})
        except PyMongoError as exc:
            logger.error("Deleting user %s failed: %s", user_id, exc)
            raise DeletionError() from exc

        if result.deleted_count > 0:
            logger.info("Deleted profile %s", user_id)
        return result.deleted_count > 0
