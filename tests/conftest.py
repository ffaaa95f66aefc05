"""Pytest fixtures and configuration."""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment variables before importing the app
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing-at-least-32-characters-long")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from my_movie_list.api.dependencies import get_watchlist_store
from my_movie_list.main import app
from my_movie_list.schemas.user import UserPatch, UserRecord
from my_movie_list.schemas.watchlist import WatchlistPatch, WatchlistRecord
from my_movie_list.stores.base import UserStore, WatchlistStore
from my_movie_list.utils.security import create_access_token, get_user_store


class InMemoryUserStore(UserStore):
    """User store double that hands out copies, like a real backing store."""

    def __init__(self) -> None:
        self.records: dict[str, UserRecord] = {}

    async def get_user_by_id(self, user_id: str) -> UserRecord | None:
        record = self.records.get(user_id)
        return record.model_copy(deep=True) if record else None

    async def get_user_by_username(self, username: str) -> UserRecord | None:
        for record in self.records.values():
            if record.username == username:
                return record.model_copy(deep=True)
        return None

    async def get_user_by_email(self, email: str) -> UserRecord | None:
        for record in self.records.values():
            if record.email == email:
                return record.model_copy(deep=True)
        return None

    async def create_user(self, user: UserRecord) -> UserRecord:
        self.records[user.user_id] = user.model_copy(deep=True)
        return user.model_copy(deep=True)

    async def update_user(self, user_id: str, patch: UserPatch) -> UserRecord | None:
        record = self.records.get(user_id)
        if record is None:
            return None
        data = {**record.model_dump(), **patch.model_dump(exclude_unset=True)}
        self.records[user_id] = UserRecord.model_validate(data)
        return self.records[user_id].model_copy(deep=True)

    async def delete_user(self, user_id: str) -> bool:
        return self.records.pop(user_id, None) is not None


class InMemoryWatchlistStore(WatchlistStore):
    """Watchlist store double that hands out copies, like a real backing store."""

    def __init__(self) -> None:
        self.records: dict[str, WatchlistRecord] = {}

    async def get_watchlist_by_id(self, list_id: str) -> WatchlistRecord | None:
        record = self.records.get(list_id)
        return record.model_copy(deep=True) if record else None

    async def get_watchlist_by_owner_and_name(
        self, user_id: str, list_name: str
    ) -> WatchlistRecord | None:
        for record in self.records.values():
            if record.user_id == user_id and record.list_name == list_name:
                return record.model_copy(deep=True)
        return None

    async def get_watchlists_by_owner(self, user_id: str) -> list[WatchlistRecord]:
        return [r.model_copy(deep=True) for r in self.records.values() if r.user_id == user_id]

    async def create_watchlist(self, watchlist: WatchlistRecord) -> WatchlistRecord:
        self.records[watchlist.list_id] = watchlist.model_copy(deep=True)
        return watchlist.model_copy(deep=True)

    async def update_watchlist(
        self, list_id: str, patch: WatchlistPatch
    ) -> WatchlistRecord | None:
        record = self.records.get(list_id)
        if record is None:
            return None
        data = {**record.model_dump(), **patch.model_dump(exclude_unset=True)}
        self.records[list_id] = WatchlistRecord.model_validate(data)
        return self.records[list_id].model_copy(deep=True)

    async def list_all_watchlists(self) -> list[WatchlistRecord]:
        return [r.model_copy(deep=True) for r in self.records.values()]


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend for tests."""
    return "asyncio"


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def watchlist_store() -> InMemoryWatchlistStore:
    return InMemoryWatchlistStore()


@pytest.fixture
def make_user(user_store: InMemoryUserStore) -> Callable[..., Awaitable[UserRecord]]:
    """Factory that stores a user named ``username`` with ID ``<username>-id``."""

    async def _make_user(username: str = "alice", **fields) -> UserRecord:
        fields.setdefault("hashed_password", "not-a-real-hash")
        user = UserRecord(
            user_id=f"{username}-id",
            username=username,
            email=f"{username}@example.com",
            **fields,
        )
        return await user_store.create_user(user)

    return _make_user


@pytest.fixture
def make_watchlist(
    watchlist_store: InMemoryWatchlistStore,
) -> Callable[..., Awaitable[WatchlistRecord]]:
    """Factory that stores a watchlist owned by ``owner``."""

    async def _make_watchlist(
        owner: UserRecord, list_name: str = "Favorites", **fields
    ) -> WatchlistRecord:
        watchlist = WatchlistRecord(
            list_id=f"{owner.username}-{list_name}",
            user_id=owner.user_id,
            list_name=list_name,
            **fields,
        )
        return await watchlist_store.create_watchlist(watchlist)

    return _make_watchlist


@pytest.fixture
def auth_headers() -> Callable[[UserRecord], dict[str, str]]:
    """Factory for bearer token headers for a user."""

    def _auth_headers(user: UserRecord) -> dict[str, str]:
        token = create_access_token(data={"sub": user.user_id})
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture
async def client(
    user_store: InMemoryUserStore, watchlist_store: InMemoryWatchlistStore
) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing FastAPI endpoints against in-memory stores."""
    app.dependency_overrides[get_user_store] = lambda: user_store
    app.dependency_overrides[get_watchlist_store] = lambda: watchlist_store

    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
