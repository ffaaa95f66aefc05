"""Title metadata API endpoints backed by Watchmode."""

from fastapi import APIRouter, Depends, Query

from my_movie_list.schemas.external import WatchmodeSearchResponse, WatchmodeTitleDetails
from my_movie_list.services.watchmode import WatchmodeClient, get_watchmode_client
from my_movie_list.utils.security import CurrentUser

router = APIRouter(prefix="/titles", tags=["titles"])


@router.get("/search", response_model=WatchmodeSearchResponse)
async def search_titles(
    current_user: CurrentUser,  # noqa: ARG001 - Required for auth enforcement
    name: str = Query(..., min_length=1, description="Title name to search for"),
    watchmode_client: WatchmodeClient = Depends(get_watchmode_client),
) -> WatchmodeSearchResponse:
    """Search titles by name."""
    try:
        return await watchmode_client.search_titles(name)
    finally:
        await watchmode_client.close()


@router.get("/{title_id}", response_model=WatchmodeTitleDetails)
async def get_title(
    title_id: int,
    current_user: CurrentUser,  # noqa: ARG001 - Required for auth enforcement
    watchmode_client: WatchmodeClient = Depends(get_watchmode_client),
) -> WatchmodeTitleDetails:
    """Get title details.

    Raises:
        HTTPException 404: If the title is not found
    """
    try:
        return await watchmode_client.get_title(title_id)
    finally:
        await watchmode_client.close()
