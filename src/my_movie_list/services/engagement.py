"""Likes, comments and title membership on watchlists."""

import logging
import uuid
from datetime import UTC, datetime

from my_movie_list.schemas.user import UserPatch, UserRecord
from my_movie_list.schemas.watchlist import (
    Comment,
    LikeAction,
    TitleAction,
    WatchlistPatch,
)
from my_movie_list.services.access import can_comment, can_modify_titles
from my_movie_list.services.errors import ForbiddenError, InvalidArgumentError, NotFoundError
from my_movie_list.stores.base import UserStore, WatchlistStore

logger = logging.getLogger(__name__)

# Number of titles kept in a user's recently_added history
RECENTLY_ADDED_LIMIT = 10


class EngagementManager:
    """Toggles state that users other than the owner can change."""

    def __init__(self, user_store: UserStore, watchlist_store: WatchlistStore) -> None:
        self.users = user_store
        self.watchlists = watchlist_store

    async def toggle_like(self, user_id: str, list_id: str) -> LikeAction:
        """Like the list, or remove the like if the user already liked it.

        The like is recorded on both the watchlist (``likes``) and the user
        (``liked_lists``).
        """
        user = await self.users.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User could not be found")

        watchlist = await self.watchlists.get_watchlist_by_id(list_id)
        if watchlist is None:
            raise NotFoundError("Watchlist could not be found")

        if user_id in watchlist.likes:
            likes = [uid for uid in watchlist.likes if uid != user_id]
            liked_lists = [lid for lid in user.liked_lists if lid != list_id]
            action = LikeAction.DISLIKED
        else:
            likes = [*watchlist.likes, user_id]
            liked_lists = [*user.liked_lists, list_id]
            action = LikeAction.LIKED

        await self.users.update_user(user_id, UserPatch(liked_lists=liked_lists))
        await self.watchlists.update_watchlist(list_id, WatchlistPatch(likes=likes))

        logger.info("Watchlist and User likes successfully updated: %s AND %s", list_id, user_id)
        return action

    async def toggle_title(self, user_id: str, list_id: str, title_id: str) -> TitleAction:
        """Add the title to the list, or remove it if already present.

        Additions are also appended to the acting user's recently_added,
        which keeps only the newest RECENTLY_ADDED_LIMIT entries.
        """
        if not title_id or not user_id or not list_id:
            raise InvalidArgumentError("TitleId, UserId and ListId must be provided.")

        watchlist = await self.watchlists.get_watchlist_by_id(list_id)
        if watchlist is None:
            raise NotFoundError("Watchlist doesn't exist!")

        user = await self.users.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User could not be found")

        if not can_modify_titles(user, watchlist):
            raise ForbiddenError(
                "User must be owner or collaborator on the watchlist to add a title"
            )

        if title_id in watchlist.titles:
            titles = [tid for tid in watchlist.titles if tid != title_id]
            await self.watchlists.update_watchlist(list_id, WatchlistPatch(titles=titles))
            logger.info("Title %s removed from watchlist %s by %s", title_id, list_id, user_id)
            return TitleAction.REMOVED

        titles = [*watchlist.titles, title_id]
        recently_added = [*user.recently_added, title_id][-RECENTLY_ADDED_LIMIT:]
        await self.watchlists.update_watchlist(list_id, WatchlistPatch(titles=titles))
        await self.users.update_user(user_id, UserPatch(recently_added=recently_added))

        logger.info("Title %s added to watchlist %s by %s", title_id, list_id, user_id)
        return TitleAction.ADDED

    async def add_comment(self, user: UserRecord, list_id: str, comment: str | None) -> Comment:
        """Append a comment by user to the list.

        The comment records the author's ID and current username.

        Raises:
            InvalidArgumentError: If the comment is blank.
            NotFoundError: If the list does not exist.
            ForbiddenError: If the list is private and the user is neither
                owner nor collaborator.
        """
        if not comment or not comment.strip():
            raise InvalidArgumentError("Comment cannot be empty.")

        watchlist = await self.watchlists.get_watchlist_by_id(list_id)
        if watchlist is None:
            raise NotFoundError("WatchList not found")

        if not can_comment(user, watchlist):
            raise ForbiddenError("Unauthorized: You cannot comment on this watchlist.")

        new_comment = Comment(
            comment_id=str(uuid.uuid4()),
            user_id=user.user_id,
            username=user.username,
            comment=comment,
            date_posted=datetime.now(UTC),
        )
        comments = [*watchlist.comments, new_comment]
        await self.watchlists.update_watchlist(list_id, WatchlistPatch(comments=comments))

        logger.info("Comment %s added to watchlist %s", new_comment.comment_id, list_id)
        return new_comment

    async def delete_comment(self, list_id: str, comment_id: str) -> None:
        """Remove a comment, keeping the rest in order.

        Callers must check can_delete_comment first.
        """
        watchlist = await self.watchlists.get_watchlist_by_id(list_id)
        if watchlist is None:
            raise NotFoundError("WatchList not found")

        comments = [c for c in watchlist.comments if c.comment_id != comment_id]
        if len(comments) == len(watchlist.comments):
            raise NotFoundError("Comment not found")

        await self.watchlists.update_watchlist(list_id, WatchlistPatch(comments=comments))
        logger.info("Comment %s deleted from watchlist %s", comment_id, list_id)
