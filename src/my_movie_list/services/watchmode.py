"""Watchmode API client for title metadata."""

from my_movie_list.config import get_settings
from my_movie_list.schemas.external import WatchmodeSearchResponse, WatchmodeTitleDetails
from my_movie_list.services.base import APINotFoundError, BaseAPIClient


class WatchmodeClient(BaseAPIClient):
    """Client for the Watchmode API.

    Title IDs stored on watchlists are Watchmode IDs. Authentication uses
    the ``apiKey`` query parameter.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the Watchmode client.

        Args:
            api_key: Watchmode API key. If not provided, uses settings.
            base_url: Watchmode base URL. If not provided, uses settings.
            timeout: Request timeout in seconds.
        """
        settings = get_settings()
        self._api_key = api_key or settings.watchmode_api_key
        base = base_url or settings.watchmode_base_url

        if not self._api_key:
            raise ValueError("Watchmode API key is required")

        super().__init__(base_url=base, timeout=timeout)

    @property
    def default_headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    @property
    def default_params(self) -> dict[str, str]:
        return {"apiKey": self._api_key}

    async def search_titles(self, name: str) -> WatchmodeSearchResponse:
        """Search titles by name."""
        params = {"search_field": "name", "search_value": name}
        data = await self.get("/search/", params=params)
        return WatchmodeSearchResponse.model_validate(data)

    async def get_title(self, title_id: str | int) -> WatchmodeTitleDetails:
        """Get details for a title.

        Raises:
            APINotFoundError: If the title is not found.
        """
        data = await self.get(f"/title/{title_id}/details/")
        return WatchmodeTitleDetails.model_validate(data)

    async def get_title_or_none(self, title_id: str | int) -> WatchmodeTitleDetails | None:
        """Get title details, returning None if not found."""
        try:
            return await self.get_title(title_id)
        except APINotFoundError:
            return None


async def get_watchmode_client() -> WatchmodeClient:
    """Factory function to create a Watchmode client.

    Can be used as a FastAPI dependency.
    """
    return WatchmodeClient()
