"""Pydantic schemas for watchlist records and watchlist API endpoints."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LikeAction(StrEnum):
    """Outcome of toggling a like."""

    LIKED = "liked"
    DISLIKED = "disliked"


class TitleAction(StrEnum):
    """Outcome of toggling a title."""

    ADDED = "added"
    REMOVED = "removed"


class Comment(BaseModel):
    """A comment on a watchlist."""

    comment_id: str = Field(description="Comment ID")
    user_id: str = Field(description="Author's user ID")
    username: str = Field(description="Author's username when posted")
    comment: str = Field(description="Comment text")
    date_posted: datetime = Field(description="When the comment was posted")


class WatchlistRecord(BaseModel):
    """Full watchlist record as held by the watchlist store."""

    model_config = ConfigDict(from_attributes=True)

    list_id: str = Field(description="Watchlist ID")
    user_id: str = Field(description="Owner's user ID")
    list_name: str = Field(description="List name, unique per owner")
    is_public: bool = Field(default=True, description="Whether anyone may view the list")
    created_at: datetime | None = Field(default=None, description="When the list was created")

    collaborators: list[str] = Field(default_factory=list, description="Collaborator user IDs")
    likes: list[str] = Field(default_factory=list, description="IDs of users who liked the list")
    titles: list[str] = Field(default_factory=list, description="Title IDs on the list")
    comments: list[Comment] = Field(default_factory=list, description="Comments, oldest first")

    @field_validator("collaborators", "likes", "titles", "comments", mode="before")
    @classmethod
    def null_to_empty(cls, v: list | None) -> list:
        """Treat missing collections on older rows as empty."""
        return [] if v is None else v


class WatchlistOverview(WatchlistRecord):
    """Watchlist record annotated with the owner's username."""

    username: str | None = Field(default=None, description="Owner's username, if the owner exists")


class WatchlistPatch(BaseModel):
    """Partial update of the watchlist fields this service is allowed to change.

    Only fields explicitly set are written.
    """

    list_name: str | None = None
    is_public: bool | None = None
    collaborators: list[str] | None = None
    likes: list[str] | None = None
    titles: list[str] | None = None
    comments: list[Comment] | None = None


class WatchlistCreate(BaseModel):
    """Schema for creating a watchlist."""

    list_name: str = Field(description="List name (1-30 characters, no spaces)")


class WatchlistUpdate(BaseModel):
    """Schema for renaming a watchlist or changing its visibility."""

    list_name: str | None = Field(default=None, description="New list name")
    is_public: bool | None = Field(default=None, description="New visibility")


class CommentCreate(BaseModel):
    """Schema for posting a comment."""

    comment: str = Field(max_length=1000, description="Comment text")


class CollaboratorAdd(BaseModel):
    """Schema for adding a collaborator."""

    user_id: str = Field(min_length=1, description="User ID of the friend to add")


class ActionResponse(BaseModel):
    """Response for toggle endpoints."""

    message: str = Field(description="Human readable outcome")
    action: str = Field(description="Machine readable outcome")
