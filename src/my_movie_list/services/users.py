"""User registration, credentials, profile and moderation."""

import logging
import uuid
from datetime import UTC, datetime

from email_validator import EmailNotValidError
from email_validator import validate_email as check_email

from my_movie_list.schemas.user import UserPatch, UserRecord
from my_movie_list.services.errors import (
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
)
from my_movie_list.stores.base import UserStore
from my_movie_list.utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)

MIN_CREDENTIAL_LENGTH = 8


def validate_email(email: str) -> bool:
    """Return whether email is a syntactically valid address.

    Uses the same rules as the EmailStr fields on the request schemas.
    """
    try:
        check_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


class UserManager:
    """Account lifecycle for users.

    Deleting a user only removes the user record. Friend references,
    collaborator entries, likes and comment authorship elsewhere are left
    in place; readers skip references that no longer resolve.
    """

    def __init__(self, user_store: UserStore) -> None:
        self.users = user_store

    async def register(self, username: str, email: str, password: str) -> UserRecord:
        """Create a new account.

        Raises:
            InvalidArgumentError: If the email is malformed, or the username
                or password is shorter than MIN_CREDENTIAL_LENGTH.
            ConflictError: If the username or email is already registered.
        """
        if not validate_email(email):
            raise InvalidArgumentError("Email is not valid")

        if len(username) < MIN_CREDENTIAL_LENGTH or len(password) < MIN_CREDENTIAL_LENGTH:
            raise InvalidArgumentError("Username and Password must be longer than 7 characters")

        if await self.users.get_user_by_username(username):
            raise ConflictError("Username already exists")

        if await self.users.get_user_by_email(email):
            raise ConflictError("Email already exists")

        user = UserRecord(
            user_id=str(uuid.uuid4()),
            username=username,
            email=email,
            hashed_password=hash_password(password),
            created_at=datetime.now(UTC),
            collaborative_lists=[],
        )
        created = await self.users.create_user(user)
        logger.info("User successfully created: %s", username)
        return created

    async def authenticate(self, username: str, password: str) -> UserRecord:
        """Return the user matching the username (or email) and password."""
        user = await self.users.get_user_by_username(username)
        if user is None:
            user = await self.users.get_user_by_email(username)

        if user is None or not verify_password(password, user.hashed_password):
            raise AuthenticationError("Invalid username or password")

        if user.is_banned:
            raise ForbiddenError("User account is banned")

        return user

    async def get_user(self, user_id: str) -> UserRecord:
        user = await self.users.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User could not be found")
        return user

    async def change_password(self, user_id: str, password: str) -> None:
        await self.get_user(user_id)

        if len(password) < MIN_CREDENTIAL_LENGTH:
            raise InvalidArgumentError("Password must be longer than 7 characters")

        await self.users.update_user(user_id, UserPatch(hashed_password=hash_password(password)))
        logger.info("Password successfully changed: %s", user_id)

    async def update_profile(
        self,
        user_id: str,
        *,
        biography: str | None = None,
        preferred_genres: list[str] | None = None,
    ) -> UserRecord:
        user = await self.get_user(user_id)

        patch = UserPatch()
        if biography is not None:
            patch.biography = biography
        if preferred_genres is not None:
            patch.preferred_genres = preferred_genres
        if not patch.model_fields_set:
            return user

        updated = await self.users.update_user(user_id, patch)
        if updated is None:
            raise NotFoundError("User could not be found")
        logger.info("Profile updated: %s", user_id)
        return updated

    async def delete_user(self, user_id: str) -> None:
        await self.get_user(user_id)
        await self.users.delete_user(user_id)
        logger.info("User deleted: %s", user_id)

    async def set_banned(
        self, acting_user: UserRecord, target_user_id: str, banned: bool
    ) -> UserRecord:
        """Ban or unban a user. Admin only; admins cannot ban themselves."""
        if not acting_user.is_admin:
            raise ForbiddenError("Only admins can ban users")

        target = await self.get_user(target_user_id)
        if target.user_id == acting_user.user_id:
            raise InvalidArgumentError("Admins cannot ban themselves")

        updated = await self.users.update_user(target.user_id, UserPatch(is_banned=banned))
        if updated is None:
            raise NotFoundError("User could not be found")
        logger.info("User %s banned=%s by %s", target.user_id, banned, acting_user.user_id)
        return updated
