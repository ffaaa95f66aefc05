"""Watchlist API endpoints."""

from fastapi import APIRouter, Depends, Response

from my_movie_list.api.dependencies import (
    get_collaboration_manager,
    get_engagement_manager,
    get_watchlist_manager,
)
from my_movie_list.schemas.watchlist import (
    ActionResponse,
    CollaboratorAdd,
    Comment,
    CommentCreate,
    WatchlistCreate,
    WatchlistOverview,
    WatchlistRecord,
    WatchlistUpdate,
)
from my_movie_list.services.access import can_delete_comment
from my_movie_list.services.collaboration import CollaborationManager
from my_movie_list.services.engagement import EngagementManager
from my_movie_list.services.errors import ForbiddenError
from my_movie_list.services.watchlists import WatchlistManager
from my_movie_list.utils.security import AdminUser, CurrentUser

router = APIRouter(prefix="/watchlists", tags=["watchlists"])


@router.post("", response_model=WatchlistRecord, status_code=201)
async def create_watchlist(
    current_user: CurrentUser,
    data: WatchlistCreate,
    watchlists: WatchlistManager = Depends(get_watchlist_manager),
) -> WatchlistRecord:
    """Create a public, empty watchlist owned by the current user."""
    return await watchlists.create_watchlist(current_user.user_id, data.list_name)


@router.get("/public", response_model=list[WatchlistOverview])
async def list_public_watchlists(
    current_user: CurrentUser,  # noqa: ARG001 - Required for auth enforcement
    watchlists: WatchlistManager = Depends(get_watchlist_manager),
) -> list[WatchlistOverview]:
    """List public watchlists, most liked first."""
    return await watchlists.get_public_watchlists()


@router.get("/all", response_model=list[WatchlistOverview])
async def list_all_watchlists(
    current_user: AdminUser,  # noqa: ARG001 - Required for admin enforcement
    watchlists: WatchlistManager = Depends(get_watchlist_manager),
) -> list[WatchlistOverview]:
    """List every watchlist, most liked first. Admin only."""
    return await watchlists.get_all_watchlists()


@router.get("/mine", response_model=list[WatchlistRecord])
async def list_my_watchlists(
    current_user: CurrentUser,
    watchlists: WatchlistManager = Depends(get_watchlist_manager),
) -> list[WatchlistRecord]:
    """List the current user's own watchlists."""
    return await watchlists.get_user_watchlists(current_user, current_user.user_id)


@router.get("/collaborative", response_model=list[WatchlistRecord])
async def list_collaborative_watchlists(
    current_user: CurrentUser,
    collaboration: CollaborationManager = Depends(get_collaboration_manager),
) -> list[WatchlistRecord]:
    """List the watchlists the current user collaborates on."""
    return await collaboration.get_collaborative_lists(current_user.user_id)


@router.get("/{list_id}", response_model=WatchlistRecord)
async def get_watchlist(
    list_id: str,
    current_user: CurrentUser,
    watchlists: WatchlistManager = Depends(get_watchlist_manager),
) -> WatchlistRecord:
    """Get a watchlist the current user may view."""
    return await watchlists.get_watchlist(current_user, list_id)


@router.put("/{list_id}", response_model=WatchlistRecord)
async def update_watchlist(
    list_id: str,
    current_user: CurrentUser,
    data: WatchlistUpdate,
    watchlists: WatchlistManager = Depends(get_watchlist_manager),
) -> WatchlistRecord:
    """Rename a watchlist or change its visibility. Owner only."""
    return await watchlists.update_watchlist(
        current_user,
        list_id,
        list_name=data.list_name,
        is_public=data.is_public,
    )


@router.patch("/{list_id}/likes", response_model=ActionResponse)
async def toggle_like(
    list_id: str,
    current_user: CurrentUser,
    engagement: EngagementManager = Depends(get_engagement_manager),
) -> ActionResponse:
    """Like a watchlist, or remove an existing like."""
    action = await engagement.toggle_like(current_user.user_id, list_id)
    return ActionResponse(message=f"List has been successfully {action}", action=action)


@router.patch("/{list_id}/titles/{title_id}", response_model=ActionResponse)
async def toggle_title(
    list_id: str,
    title_id: str,
    current_user: CurrentUser,
    engagement: EngagementManager = Depends(get_engagement_manager),
) -> ActionResponse:
    """Add a title to a watchlist, or remove it if already present."""
    action = await engagement.toggle_title(current_user.user_id, list_id, title_id)
    return ActionResponse(message=f"Title {title_id} {action}", action=action)


@router.post("/{list_id}/comments", response_model=Comment, status_code=201)
async def add_comment(
    list_id: str,
    current_user: CurrentUser,
    data: CommentCreate,
    engagement: EngagementManager = Depends(get_engagement_manager),
) -> Comment:
    """Comment on a watchlist."""
    return await engagement.add_comment(current_user, list_id, data.comment)


@router.delete("/{list_id}/comments/{comment_id}", status_code=204)
async def delete_comment(
    list_id: str,
    comment_id: str,
    current_user: CurrentUser,
    engagement: EngagementManager = Depends(get_engagement_manager),
) -> Response:
    """Delete a comment. Admin only."""
    if not can_delete_comment(current_user):
        raise ForbiddenError("Only admins can delete comments")
    await engagement.delete_comment(list_id, comment_id)
    return Response(status_code=204)


@router.post("/{list_id}/collaborators", response_model=WatchlistRecord)
async def add_collaborator(
    list_id: str,
    current_user: CurrentUser,
    data: CollaboratorAdd,
    collaboration: CollaborationManager = Depends(get_collaboration_manager),
) -> WatchlistRecord:
    """Add one of the owner's friends as a collaborator. Owner only."""
    return await collaboration.add_collaborator(current_user.user_id, list_id, data.user_id)


@router.delete("/{list_id}/collaborators/{user_id}", status_code=204)
async def remove_collaborator(
    list_id: str,
    user_id: str,
    current_user: CurrentUser,
    collaboration: CollaborationManager = Depends(get_collaboration_manager),
) -> Response:
    """Remove a collaborator. Allowed for the owner and for the collaborator themself."""
    await collaboration.remove_collaborator(current_user, list_id, user_id)
    return Response(status_code=204)
