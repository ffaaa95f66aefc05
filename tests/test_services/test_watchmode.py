"""Tests for Watchmode API client."""

from datetime import date
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from my_movie_list.services.base import APIError, APINotFoundError, RateLimitError
from my_movie_list.services.watchmode import WatchmodeClient

# Sample test data
SAMPLE_SEARCH_RESPONSE = {
    "title_results": [
        {
            "resultType": "title",
            "id": 3173903,
            "name": "Breaking Bad",
            "type": "tv_series",
            "year": 2008,
            "imdb_id": "tt0903747",
            "tmdb_id": 1396,
            "tmdb_type": "tv",
        },
        {
            "resultType": "title",
            "id": 1616666,
            "name": "El Camino: A Breaking Bad Movie",
            "type": "movie",
            "year": 2019,
            "imdb_id": "tt9243946",
            "tmdb_id": 559969,
            "tmdb_type": "movie",
        },
    ],
    "people_results": [],
}

SAMPLE_TITLE_DETAILS = {
    "id": 3173903,
    "title": "Breaking Bad",
    "original_title": "Breaking Bad",
    "plot_overview": "A high school chemistry teacher turned meth maker...",
    "type": "tv_series",
    "runtime_minutes": 45,
    "year": 2008,
    "end_year": 2013,
    "release_date": "2008-01-20",
    "imdb_id": "tt0903747",
    "tmdb_id": 1396,
    "tmdb_type": "tv",
    "genre_names": ["Crime", "Drama"],
    "user_rating": 9.3,
    "critic_score": 91,
    "us_rating": "TV-MA",
    "poster": "https://cdn.watchmode.com/posters/03173903_poster_w185.jpg",
    "original_language": "en",
}


@pytest.fixture
def mock_settings():
    """Mock settings with test API key."""
    with patch("my_movie_list.services.watchmode.get_settings") as mock:
        mock.return_value.watchmode_api_key = "test-api-key"
        mock.return_value.watchmode_base_url = "https://api.watchmode.com/v1"
        yield mock


@pytest.fixture
def watchmode_client(mock_settings) -> WatchmodeClient:  # noqa: ARG001
    """Create a Watchmode client for testing."""
    return WatchmodeClient()


class TestWatchmodeClientInit:
    """Tests for Watchmode client initialization."""

    def test_init_with_api_key(self, mock_settings) -> None:  # noqa: ARG002
        """Test client initialization with explicit API key."""
        client = WatchmodeClient(api_key="custom-key")
        assert client._api_key == "custom-key"

    def test_init_with_custom_base_url(self, mock_settings) -> None:  # noqa: ARG002
        """Test client initialization with custom base URL."""
        client = WatchmodeClient(base_url="https://custom.api.com/")
        assert client.base_url == "https://custom.api.com"

    def test_init_without_api_key_raises(self) -> None:
        """Test that initialization without API key raises error."""
        with patch("my_movie_list.services.watchmode.get_settings") as mock:
            mock.return_value.watchmode_api_key = ""
            mock.return_value.watchmode_base_url = "https://api.watchmode.com/v1"
            with pytest.raises(ValueError, match="Watchmode API key is required"):
                WatchmodeClient()

    def test_api_key_sent_as_query_param(self, watchmode_client: WatchmodeClient) -> None:
        """Test that the API key travels in the query string, not a header."""
        assert watchmode_client.default_params == {"apiKey": "test-api-key"}
        assert "Authorization" not in watchmode_client.default_headers
        assert watchmode_client.default_headers["Accept"] == "application/json"


class TestSearchTitles:
    """Tests for title search."""

    async def test_search_titles_success(self, watchmode_client: WatchmodeClient) -> None:
        """Test successful title search."""
        mock_response = httpx.Response(200, json=SAMPLE_SEARCH_RESPONSE)

        with patch.object(watchmode_client, "_get_client") as mock_get_client:
            mock_client = AsyncMock()
            mock_client.request.return_value = mock_response
            mock_get_client.return_value = mock_client

            result = await watchmode_client.search_titles("Breaking Bad")

            assert len(result.title_results) == 2
            assert result.title_results[0].id == 3173903
            assert result.title_results[1].type == "movie"

            call_args = mock_client.request.call_args
            assert call_args.kwargs["url"] == "search/"
            assert call_args.kwargs["params"] == {
                "apiKey": "test-api-key",
                "search_field": "name",
                "search_value": "Breaking Bad",
            }

    async def test_search_titles_empty_results(self, watchmode_client: WatchmodeClient) -> None:
        """Test title search with no results."""
        mock_response = httpx.Response(200, json={"title_results": [], "people_results": []})

        with patch.object(watchmode_client, "_get_client") as mock_get_client:
            mock_client = AsyncMock()
            mock_client.request.return_value = mock_response
            mock_get_client.return_value = mock_client

            result = await watchmode_client.search_titles("NonexistentTitle12345")

            assert result.title_results == []


class TestGetTitle:
    """Tests for getting title details."""

    async def test_get_title_success(self, watchmode_client: WatchmodeClient) -> None:
        """Test successful title details fetch."""
        mock_response = httpx.Response(200, json=SAMPLE_TITLE_DETAILS)

        with patch.object(watchmode_client, "_get_client") as mock_get_client:
            mock_client = AsyncMock()
            mock_client.request.return_value = mock_response
            mock_get_client.return_value = mock_client

            result = await watchmode_client.get_title(3173903)

            assert result.id == 3173903
            assert result.title == "Breaking Bad"
            assert result.genre_names == ["Crime", "Drama"]
            assert result.release_date == date(2008, 1, 20)
            assert mock_client.request.call_args.kwargs["url"] == "title/3173903/details/"

    async def test_get_title_not_found(self, watchmode_client: WatchmodeClient) -> None:
        """Test title details fetch for a non-existent title."""
        mock_response = httpx.Response(404, json={"success": False})

        with patch.object(watchmode_client, "_get_client") as mock_get_client:
            mock_client = AsyncMock()
            mock_client.request.return_value = mock_response
            mock_get_client.return_value = mock_client

            with pytest.raises(APINotFoundError):
                await watchmode_client.get_title(99999999)

    async def test_get_title_or_none_returns_none(self, watchmode_client: WatchmodeClient) -> None:
        """Test get_title_or_none returns None for a non-existent title."""
        mock_response = httpx.Response(404, json={"success": False})

        with patch.object(watchmode_client, "_get_client") as mock_get_client:
            mock_client = AsyncMock()
            mock_client.request.return_value = mock_response
            mock_get_client.return_value = mock_client

            assert await watchmode_client.get_title_or_none(99999999) is None

    async def test_empty_release_date(self, watchmode_client: WatchmodeClient) -> None:
        """Test that an empty release date is read as missing."""
        mock_response = httpx.Response(200, json={**SAMPLE_TITLE_DETAILS, "release_date": ""})

        with patch.object(watchmode_client, "_get_client") as mock_get_client:
            mock_client = AsyncMock()
            mock_client.request.return_value = mock_response
            mock_get_client.return_value = mock_client

            result = await watchmode_client.get_title(3173903)

            assert result.release_date is None


class TestErrorHandling:
    """Tests for HTTP error handling."""

    async def test_rate_limit_error(self, watchmode_client: WatchmodeClient) -> None:
        """Test that rate limit response raises RateLimitError."""
        mock_response = httpx.Response(429, headers={"Retry-After": "30"}, json={})

        with patch.object(watchmode_client, "_get_client") as mock_get_client:
            mock_client = AsyncMock()
            mock_client.request.return_value = mock_response
            mock_get_client.return_value = mock_client

            with pytest.raises(RateLimitError) as exc_info:
                await watchmode_client.search_titles("test")

            assert exc_info.value.retry_after == 30

    async def test_server_error(self, watchmode_client: WatchmodeClient) -> None:
        """Test that other error statuses raise APIError."""
        mock_response = httpx.Response(401, json={"success": False, "statusMessage": "bad key"})

        with patch.object(watchmode_client, "_get_client") as mock_get_client:
            mock_client = AsyncMock()
            mock_client.request.return_value = mock_response
            mock_get_client.return_value = mock_client

            with pytest.raises(APIError) as exc_info:
                await watchmode_client.search_titles("test")

            assert exc_info.value.status_code == 401

    async def test_timeout(self, watchmode_client: WatchmodeClient) -> None:
        """Test that a timeout is wrapped in APIError."""
        with patch.object(watchmode_client, "_get_client") as mock_get_client:
            mock_client = AsyncMock()
            mock_client.request.side_effect = httpx.ReadTimeout("timed out")
            mock_get_client.return_value = mock_client

            with pytest.raises(APIError, match="timed out"):
                await watchmode_client.get_title(1)
