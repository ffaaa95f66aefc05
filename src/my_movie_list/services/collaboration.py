"""Collaborator membership on watchlists.

A collaborator appears twice: in the watchlist's ``collaborators`` and in
the user's ``collaborative_lists``. Both records are written here, one after
the other. If the second write fails the error propagates and the two
records disagree until the operation is retried.
"""

import logging

from my_movie_list.schemas.user import UserPatch, UserRecord
from my_movie_list.schemas.watchlist import WatchlistPatch, WatchlistRecord
from my_movie_list.services.access import is_owner
from my_movie_list.services.errors import (
    ConflictError,
    DataIntegrityError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
)
from my_movie_list.stores.base import UserStore, WatchlistStore

logger = logging.getLogger(__name__)


class CollaborationManager:
    """Grants and revokes collaborator rights."""

    def __init__(self, user_store: UserStore, watchlist_store: WatchlistStore) -> None:
        self.users = user_store
        self.watchlists = watchlist_store

    async def add_collaborator(
        self, owner_user_id: str, list_id: str, candidate_user_id: str
    ) -> WatchlistRecord:
        """Make a friend of the owner a collaborator on the owner's list.

        Checks run in this order: list exists, acting user exists, candidate
        exists, acting user owns the list, candidate is not the owner,
        candidate is in the owner's friends, candidate is not already a
        collaborator.

        Returns:
            The updated watchlist.
        """
        watchlist = await self.watchlists.get_watchlist_by_id(list_id)
        if watchlist is None:
            raise NotFoundError("Watchlist doesn't exist!")

        owner = await self.users.get_user_by_id(owner_user_id)
        if owner is None:
            raise NotFoundError("User could not be found")

        candidate = await self.users.get_user_by_id(candidate_user_id)
        if candidate is None:
            raise NotFoundError("User could not be found from collaborator ID")

        if not is_owner(owner.user_id, watchlist):
            raise ForbiddenError("User must be owner of the watchlist to add a collaborator")

        if candidate.user_id == watchlist.user_id:
            raise InvalidArgumentError(
                "Watchlist creator is already an implied collaborator, cannot add to list"
            )

        if not owner.is_friend(candidate.user_id):
            raise ForbiddenError("User must be a friend to become a collaborator")

        if candidate.user_id in watchlist.collaborators:
            raise ConflictError("User is already a collaborator")

        collaborators = [*watchlist.collaborators, candidate.user_id]
        collaborative_lists = [*(candidate.collaborative_lists or []), list_id]

        updated = await self.watchlists.update_watchlist(
            list_id, WatchlistPatch(collaborators=collaborators)
        )
        if updated is None:
            raise NotFoundError("Watchlist doesn't exist!")
        await self.users.update_user(
            candidate.user_id, UserPatch(collaborative_lists=collaborative_lists)
        )

        logger.info(
            "Watchlist %s and User %s updated to add collaborator", list_id, candidate.user_id
        )
        return updated

    async def remove_collaborator(
        self, acting_user: UserRecord | None, list_id: str | None, target_user_id: str | None
    ) -> None:
        """Remove target_user_id from the list's collaborators.

        The owner may remove anyone; a collaborator may remove themself.
        """
        if acting_user is None or not list_id or not target_user_id:
            raise InvalidArgumentError("Bad Data")

        target = await self.users.get_user_by_id(target_user_id)
        if target is None:
            raise NotFoundError("User not found")

        watchlist = await self.watchlists.get_watchlist_by_id(list_id)
        if watchlist is None:
            raise NotFoundError("Watchlist not found")

        if target_user_id not in watchlist.collaborators:
            raise InvalidArgumentError("User is not a collaborator of this watchlist!")

        if target.collaborative_lists is None:
            raise DataIntegrityError("user is missing collaborativeLists")

        if acting_user.user_id != target_user_id and not is_owner(acting_user.user_id, watchlist):
            raise ForbiddenError(
                "You do not have permission to remove this User from the watchlist"
            )

        collaborative_lists = [lid for lid in target.collaborative_lists if lid != list_id]
        collaborators = [uid for uid in watchlist.collaborators if uid != target_user_id]

        await self.users.update_user(
            target_user_id, UserPatch(collaborative_lists=collaborative_lists)
        )
        await self.watchlists.update_watchlist(list_id, WatchlistPatch(collaborators=collaborators))

        logger.info(
            "Watchlist %s and User successfully updated to remove collaborator: %s",
            list_id,
            target_user_id,
        )

    async def get_collaborative_lists(self, user_id: str) -> list[WatchlistRecord]:
        """Return the lists the user collaborates on.

        Lists that no longer exist are skipped.
        """
        if not user_id:
            raise InvalidArgumentError("bad data")

        user = await self.users.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        lists: list[WatchlistRecord] = []
        for list_id in user.collaborative_lists or []:
            watchlist = await self.watchlists.get_watchlist_by_id(list_id)
            if watchlist is None:
                logger.error("list %s not found", list_id)
                continue
            lists.append(watchlist)
        return lists
