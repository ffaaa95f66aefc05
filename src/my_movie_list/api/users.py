"""User, friend and moderation API endpoints."""

from fastapi import APIRouter, Depends, Response

from my_movie_list.api.dependencies import (
    get_friendship_manager,
    get_user_manager,
    get_watchlist_manager,
)
from my_movie_list.schemas.user import (
    BanUpdate,
    FriendAdd,
    FriendRef,
    FriendSummary,
    PasswordChange,
    ProfileUpdate,
    UserResponse,
)
from my_movie_list.schemas.watchlist import WatchlistRecord
from my_movie_list.services.friends import FriendshipManager
from my_movie_list.services.users import UserManager
from my_movie_list.services.watchlists import WatchlistManager
from my_movie_list.utils.security import AdminUser, CurrentUser

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me/friends", response_model=list[FriendSummary])
async def list_friends(
    current_user: CurrentUser,
    friends: FriendshipManager = Depends(get_friendship_manager),
) -> list[FriendSummary]:
    """List the current user's friends."""
    records = await friends.list_friends(current_user.user_id)
    return [FriendSummary.model_validate(friend) for friend in records]


@router.post("/me/friends", response_model=list[FriendRef], status_code=201)
async def add_friend(
    current_user: CurrentUser,
    friend_data: FriendAdd,
    friends: FriendshipManager = Depends(get_friendship_manager),
) -> list[FriendRef]:
    """Add a user to the current user's friends by username.

    Only the current user's friend list changes.
    """
    return await friends.add_friend(current_user.user_id, friend_data.username)


@router.patch("/me/profile", response_model=UserResponse)
async def update_profile(
    current_user: CurrentUser,
    profile: ProfileUpdate,
    users: UserManager = Depends(get_user_manager),
) -> UserResponse:
    """Update the current user's biography and preferred genres."""
    user = await users.update_profile(
        current_user.user_id,
        biography=profile.biography,
        preferred_genres=profile.preferred_genres,
    )
    return UserResponse.model_validate(user)


@router.put("/me/password", status_code=204)
async def change_password(
    current_user: CurrentUser,
    data: PasswordChange,
    users: UserManager = Depends(get_user_manager),
) -> Response:
    """Change the current user's password."""
    await users.change_password(current_user.user_id, data.password)
    return Response(status_code=204)


@router.delete("/me", status_code=204)
async def delete_account(
    current_user: CurrentUser,
    users: UserManager = Depends(get_user_manager),
) -> Response:
    """Delete the current user's account."""
    await users.delete_user(current_user.user_id)
    return Response(status_code=204)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    current_user: CurrentUser,  # noqa: ARG001 - Required for auth enforcement
    users: UserManager = Depends(get_user_manager),
) -> UserResponse:
    """Get a user's public profile."""
    return UserResponse.model_validate(await users.get_user(user_id))


@router.get("/{user_id}/watchlists", response_model=list[WatchlistRecord])
async def get_user_watchlists(
    user_id: str,
    current_user: CurrentUser,
    watchlists: WatchlistManager = Depends(get_watchlist_manager),
) -> list[WatchlistRecord]:
    """List a user's watchlists that the current user may view."""
    return await watchlists.get_user_watchlists(current_user, user_id)


@router.patch("/{user_id}/ban", response_model=UserResponse)
async def set_banned(
    user_id: str,
    current_user: AdminUser,
    data: BanUpdate,
    users: UserManager = Depends(get_user_manager),
) -> UserResponse:
    """Ban or unban a user. Admin only."""
    user = await users.set_banned(current_user, user_id, data.is_banned)
    return UserResponse.model_validate(user)
