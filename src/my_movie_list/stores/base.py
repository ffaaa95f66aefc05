"""Abstract persistence interfaces for users and watchlists.

Managers only talk to these interfaces. Each write is an independent call:
nothing here spans the user and watchlist stores, so a cross-entity update
is two separate writes issued by the caller.
"""

from abc import ABC, abstractmethod

from my_movie_list.schemas.user import UserPatch, UserRecord
from my_movie_list.schemas.watchlist import WatchlistPatch, WatchlistRecord


class UserStore(ABC):
    """Persistence for user records."""

    @abstractmethod
    async def get_user_by_id(self, user_id: str) -> UserRecord | None:
        """Return the user with the given ID, or None."""
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, or None."""
        ...

    @abstractmethod
    async def get_user_by_email(self, email: str) -> UserRecord | None:
        """Return the user with the given email, or None."""
        ...

    @abstractmethod
    async def create_user(self, user: UserRecord) -> UserRecord:
        """Persist a new user record and return it as stored."""
        ...

    @abstractmethod
    async def update_user(self, user_id: str, patch: UserPatch) -> UserRecord | None:
        """Apply the fields set on patch. Returns None if the user is gone."""
        ...

    @abstractmethod
    async def delete_user(self, user_id: str) -> bool:
        """Delete the user. Returns False if there was nothing to delete."""
        ...


class WatchlistStore(ABC):
    """Persistence for watchlist records."""

    @abstractmethod
    async def get_watchlist_by_id(self, list_id: str) -> WatchlistRecord | None:
        """Return the watchlist with the given ID, or None."""
        ...

    @abstractmethod
    async def get_watchlist_by_owner_and_name(
        self, user_id: str, list_name: str
    ) -> WatchlistRecord | None:
        """Return the owner's watchlist with exactly this name, or None."""
        ...

    @abstractmethod
    async def get_watchlists_by_owner(self, user_id: str) -> list[WatchlistRecord]:
        """Return every watchlist owned by the user."""
        ...

    @abstractmethod
    async def create_watchlist(self, watchlist: WatchlistRecord) -> WatchlistRecord:
        """Persist a new watchlist record and return it as stored."""
        ...

    @abstractmethod
    async def update_watchlist(
        self, list_id: str, patch: WatchlistPatch
    ) -> WatchlistRecord | None:
        """Apply the fields set on patch. Returns None if the list is gone."""
        ...

    @abstractmethod
    async def list_all_watchlists(self) -> list[WatchlistRecord]:
        """Return every watchlist."""
        ...
