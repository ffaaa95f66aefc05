"""Pydantic schemas for records and request/response validation."""

from my_movie_list.schemas.external import (
    WatchmodeSearchResponse,
    WatchmodeSearchResult,
    WatchmodeTitleDetails,
)
from my_movie_list.schemas.user import (
    BanUpdate,
    FriendAdd,
    FriendRef,
    FriendSummary,
    PasswordChange,
    ProfileUpdate,
    Token,
    UserCreate,
    UserLogin,
    UserPatch,
    UserRecord,
    UserResponse,
)
from my_movie_list.schemas.watchlist import (
    ActionResponse,
    CollaboratorAdd,
    Comment,
    CommentCreate,
    LikeAction,
    TitleAction,
    WatchlistCreate,
    WatchlistOverview,
    WatchlistPatch,
    WatchlistRecord,
    WatchlistUpdate,
)

__all__ = [
    # External API schemas
    "WatchmodeSearchResult",
    "WatchmodeSearchResponse",
    "WatchmodeTitleDetails",
    # User schemas
    "FriendRef",
    "UserRecord",
    "UserPatch",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "Token",
    "FriendAdd",
    "FriendSummary",
    "PasswordChange",
    "ProfileUpdate",
    "BanUpdate",
    # Watchlist schemas
    "LikeAction",
    "TitleAction",
    "Comment",
    "WatchlistRecord",
    "WatchlistOverview",
    "WatchlistPatch",
    "WatchlistCreate",
    "WatchlistUpdate",
    "CommentCreate",
    "CollaboratorAdd",
    "ActionResponse",
]
