"""Persistence layer for user and watchlist records."""

from my_movie_list.stores.base import UserStore, WatchlistStore
from my_movie_list.stores.sql import SqlUserStore, SqlWatchlistStore

__all__ = [
    "UserStore",
    "WatchlistStore",
    "SqlUserStore",
    "SqlWatchlistStore",
]
