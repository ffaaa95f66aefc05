"""FastAPI dependency providers for stores and managers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from my_movie_list.database import get_db
from my_movie_list.services.collaboration import CollaborationManager
from my_movie_list.services.engagement import EngagementManager
from my_movie_list.services.friends import FriendshipManager
from my_movie_list.services.users import UserManager
from my_movie_list.services.watchlists import WatchlistManager
from my_movie_list.stores.base import UserStore, WatchlistStore
from my_movie_list.stores.sql import SqlWatchlistStore
from my_movie_list.utils.security import get_user_store


async def get_watchlist_store(db: AsyncSession = Depends(get_db)) -> WatchlistStore:
    """Dependency that provides the watchlist store for the request session."""
    return SqlWatchlistStore(db)


async def get_user_manager(users: UserStore = Depends(get_user_store)) -> UserManager:
    return UserManager(users)


async def get_friendship_manager(users: UserStore = Depends(get_user_store)) -> FriendshipManager:
    return FriendshipManager(users)


async def get_watchlist_manager(
    users: UserStore = Depends(get_user_store),
    watchlists: WatchlistStore = Depends(get_watchlist_store),
) -> WatchlistManager:
    return WatchlistManager(users, watchlists)


async def get_collaboration_manager(
    users: UserStore = Depends(get_user_store),
    watchlists: WatchlistStore = Depends(get_watchlist_store),
) -> CollaborationManager:
    return CollaborationManager(users, watchlists)


async def get_engagement_manager(
    users: UserStore = Depends(get_user_store),
    watchlists: WatchlistStore = Depends(get_watchlist_store),
) -> EngagementManager:
    return EngagementManager(users, watchlists)
