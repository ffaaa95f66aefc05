"""Friend relation between users."""

import logging

from my_movie_list.schemas.user import FriendRef, UserPatch, UserRecord
from my_movie_list.services.errors import ConflictError, InvalidArgumentError, NotFoundError
from my_movie_list.stores.base import UserStore

logger = logging.getLogger(__name__)


class FriendshipManager:
    """Adds and resolves friends.

    Adding a friend only writes to the requester's record. The other user
    sees nothing until they add the requester back, and collaboration
    eligibility always reads the owner's side.
    """

    def __init__(self, user_store: UserStore) -> None:
        self.users = user_store

    async def add_friend(self, requester_id: str, friend_username: str) -> list[FriendRef]:
        """Add the user named friend_username to the requester's friends.

        Returns:
            The requester's updated friend list.

        Raises:
            NotFoundError: If the requester or the named user does not exist.
            InvalidArgumentError: If the requester names themself.
            ConflictError: If the named user is already a friend.
        """
        requester = await self.users.get_user_by_id(requester_id)
        if requester is None:
            raise NotFoundError("User could not be found")

        friend = await self.users.get_user_by_username(friend_username)
        if friend is None:
            raise NotFoundError(f"User {friend_username} could not be found")

        if friend.user_id == requester.user_id:
            raise InvalidArgumentError("You cannot add yourself as a friend")

        if requester.is_friend(friend.user_id):
            raise ConflictError(f"Already friends with {friend.username}")

        friends = [*requester.friends, FriendRef(user_id=friend.user_id, username=friend.username)]
        await self.users.update_user(requester.user_id, UserPatch(friends=friends))

        logger.info("User %s added friend %s", requester.user_id, friend.user_id)
        return friends

    async def list_friends(self, user_id: str) -> list[UserRecord]:
        """Resolve the user's friend references to user records.

        References to users that no longer exist are dropped from the stored
        friend list.

        Raises:
            NotFoundError: If the user does not exist.
        """
        user = await self.users.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User could not be found")

        resolved: list[UserRecord] = []
        kept: list[FriendRef] = []
        for ref in user.friends:
            friend = await self.users.get_user_by_id(ref.user_id)
            if friend is None:
                logger.info("Pruning deleted friend %s from user %s", ref.user_id, user_id)
                continue
            resolved.append(friend)
            kept.append(ref)

        if len(kept) != len(user.friends):
            await self.users.update_user(user_id, UserPatch(friends=kept))

        return resolved
