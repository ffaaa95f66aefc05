"""Pydantic schemas for user records and user API endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class FriendRef(BaseModel):
    """Reference to a befriended user as stored on the befriending user."""

    user_id: str = Field(description="Friend's user ID")
    username: str = Field(description="Friend's username at the time of befriending")


class UserRecord(BaseModel):
    """Full user record as held by the user store."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    username: str
    email: str
    hashed_password: str = Field(repr=False)
    is_admin: bool = False
    is_banned: bool = False
    created_at: datetime | None = None

    profile_picture: str = ""
    biography: str = ""
    preferred_genres: list[str] = Field(default_factory=list)

    friends: list[FriendRef] = Field(default_factory=list)
    collaborative_lists: list[str] | None = Field(default_factory=list)
    liked_lists: list[str] = Field(default_factory=list)
    recently_added: list[str] = Field(default_factory=list)

    @field_validator("preferred_genres", "friends", "liked_lists", "recently_added", mode="before")
    @classmethod
    def null_to_empty(cls, v: list | None) -> list:
        """Treat missing collections on older rows as empty."""
        return [] if v is None else v

    @field_validator("profile_picture", "biography", mode="before")
    @classmethod
    def null_to_blank(cls, v: str | None) -> str:
        """Treat missing profile text as blank."""
        return "" if v is None else v

    def is_friend(self, user_id: str) -> bool:
        """Return whether user_id appears in this user's friends."""
        return any(friend.user_id == user_id for friend in self.friends)


class UserPatch(BaseModel):
    """Partial update of the user fields this service is allowed to change.

    Only fields explicitly set are written.
    """

    hashed_password: str | None = None
    is_banned: bool | None = None
    profile_picture: str | None = None
    biography: str | None = None
    preferred_genres: list[str] | None = None
    friends: list[FriendRef] | None = None
    collaborative_lists: list[str] | None = None
    liked_lists: list[str] | None = None
    recently_added: list[str] | None = None


class UserCreate(BaseModel):
    """Schema for user registration."""

    username: str = Field(max_length=50, description="Unique username (more than 7 characters)")
    email: EmailStr = Field(description="Valid email address")
    password: str = Field(max_length=100, description="Password (more than 7 characters)")


class UserLogin(BaseModel):
    """Schema for user login request."""

    username: str = Field(description="Username or email")
    password: str = Field(description="Password")


class Token(BaseModel):
    """Schema for JWT token response."""

    access_token: str = Field(description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class UserResponse(BaseModel):
    """Response schema for user data (excludes password)."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str = Field(description="User ID")
    username: str = Field(description="Username")
    is_admin: bool = Field(description="Whether the user is an administrator")
    is_banned: bool = Field(description="Whether the user is banned")
    profile_picture: str = Field(description="Profile picture URL")
    biography: str = Field(description="Free-form biography")
    preferred_genres: list[str] = Field(description="Preferred genres")
    friends: list[FriendRef] = Field(description="Users this user has befriended")
    recently_added: list[str] = Field(description="Last titles this user added to a list")
    created_at: datetime | None = Field(default=None, description="When the user was created")


class FriendAdd(BaseModel):
    """Schema for adding a friend by username."""

    username: str = Field(min_length=1, description="Username of the user to befriend")


class FriendSummary(BaseModel):
    """Minimal user info for friend list display."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str = Field(description="User ID")
    username: str = Field(description="Username")
    profile_picture: str = Field(default="", description="Profile picture URL")


class PasswordChange(BaseModel):
    """Schema for changing the current user's password."""

    password: str = Field(max_length=100, description="New password (more than 7 characters)")


class ProfileUpdate(BaseModel):
    """Schema for updating profile fields."""

    biography: str | None = Field(default=None, max_length=500, description="Biography")
    preferred_genres: list[str] | None = Field(default=None, description="Preferred genres")


class BanUpdate(BaseModel):
    """Schema for banning or unbanning a user."""

    is_banned: bool = Field(description="New banned state")
