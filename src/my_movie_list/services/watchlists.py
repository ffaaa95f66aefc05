"""Watchlist creation, lookup and owner-only settings."""

import logging
import uuid
from datetime import UTC, datetime

from my_movie_list.schemas.user import UserRecord
from my_movie_list.schemas.watchlist import WatchlistOverview, WatchlistPatch, WatchlistRecord
from my_movie_list.services.access import can_rename_or_change_visibility, can_view
from my_movie_list.services.errors import (
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
)
from my_movie_list.stores.base import UserStore, WatchlistStore

logger = logging.getLogger(__name__)

MAX_LIST_NAME_LENGTH = 30


def validate_list_name(list_name: str) -> None:
    """Check the length and whitespace rules for list names.

    Raises:
        InvalidArgumentError: If the name is too short, too long or has spaces.
    """
    if not 1 <= len(list_name) <= MAX_LIST_NAME_LENGTH:
        raise InvalidArgumentError(
            f"listName must be between 1 and {MAX_LIST_NAME_LENGTH} characters long"
        )
    if any(ch.isspace() for ch in list_name):
        raise InvalidArgumentError("listName can not contain spaces!")


class WatchlistManager:
    """Creates watchlists and serves them to permitted viewers."""

    def __init__(self, user_store: UserStore, watchlist_store: WatchlistStore) -> None:
        self.users = user_store
        self.watchlists = watchlist_store

    async def create_watchlist(self, user_id: str, list_name: str) -> WatchlistRecord:
        """Create an empty public watchlist owned by user_id.

        Raises:
            InvalidArgumentError: If an argument is missing or the name is invalid.
            ConflictError: If the owner already has a list with this name.
        """
        if not user_id or not list_name:
            raise InvalidArgumentError("invalid data")
        validate_list_name(list_name)

        existing = await self.watchlists.get_watchlist_by_owner_and_name(user_id, list_name)
        if existing is not None:
            raise ConflictError("watchlist with that name already exists!")

        watchlist = WatchlistRecord(
            list_id=str(uuid.uuid4()),
            user_id=user_id,
            list_name=list_name,
            is_public=True,
            created_at=datetime.now(UTC),
        )
        created = await self.watchlists.create_watchlist(watchlist)
        logger.info("List successfully created: %s", list_name)
        return created

    async def get_watchlist(self, user: UserRecord | None, list_id: str) -> WatchlistRecord:
        """Return the watchlist if the user may view it."""
        if user is None or not list_id:
            raise InvalidArgumentError("bad data")

        watchlist = await self.watchlists.get_watchlist_by_id(list_id)
        if watchlist is None:
            raise NotFoundError("Watchlist doesn't exist!")

        if not can_view(user, watchlist):
            raise ForbiddenError("You do not have permission to view this watchlist")
        return watchlist

    async def update_watchlist(
        self,
        user: UserRecord,
        list_id: str,
        *,
        list_name: str | None = None,
        is_public: bool | None = None,
    ) -> WatchlistRecord:
        """Rename the list and/or change its visibility. Owner only.

        Keeping the current name is allowed; taking the name of another of
        the owner's lists is not.
        """
        if list_name is not None:
            if not list_name.strip():
                raise InvalidArgumentError("List name cannot be empty.")
            validate_list_name(list_name)
        if is_public is not None and not isinstance(is_public, bool):
            raise InvalidArgumentError("isPublic must be a boolean.")

        watchlist = await self.watchlists.get_watchlist_by_id(list_id)
        if watchlist is None:
            raise NotFoundError("WatchList not found")

        if not can_rename_or_change_visibility(user, watchlist):
            raise ForbiddenError("Unauthorized: You can only update your own watchlist.")

        patch = WatchlistPatch()
        if list_name is not None:
            existing = await self.watchlists.get_watchlist_by_owner_and_name(
                user.user_id, list_name
            )
            if existing is not None and existing.list_id != list_id:
                raise ConflictError("A watchlist with that name already exists!")
            patch.list_name = list_name
        if is_public is not None:
            patch.is_public = is_public

        updated = await self.watchlists.update_watchlist(list_id, patch)
        if updated is None:
            raise NotFoundError("WatchList not found")

        logger.info("Watchlist %s updated by owner %s", list_id, user.user_id)
        return updated

    async def get_user_watchlists(
        self, viewer: UserRecord | None, owner_id: str
    ) -> list[WatchlistRecord]:
        """Return the owner's lists that the viewer is allowed to see."""
        if not owner_id:
            raise InvalidArgumentError("bad data")

        lists = await self.watchlists.get_watchlists_by_owner(owner_id)
        return [w for w in lists if can_view(viewer, w)]

    async def get_all_watchlists(self) -> list[WatchlistOverview]:
        """Return every list, most liked first."""
        return await self._overviews(await self.watchlists.list_all_watchlists())

    async def get_public_watchlists(self) -> list[WatchlistOverview]:
        """Return public lists, most liked first."""
        lists = await self.watchlists.list_all_watchlists()
        return await self._overviews([w for w in lists if w.is_public])

    async def _overviews(self, lists: list[WatchlistRecord]) -> list[WatchlistOverview]:
        usernames: dict[str, str | None] = {}
        overviews = []
        for watchlist in sorted(lists, key=lambda w: len(w.likes), reverse=True):
            if watchlist.user_id not in usernames:
                owner = await self.users.get_user_by_id(watchlist.user_id)
                usernames[watchlist.user_id] = owner.username if owner else None
            overviews.append(
                WatchlistOverview(**watchlist.model_dump(), username=usernames[watchlist.user_id])
            )
        return overviews
