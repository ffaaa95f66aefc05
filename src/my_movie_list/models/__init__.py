"""SQLAlchemy ORM models."""

from my_movie_list.models.user import User
from my_movie_list.models.watchlist import Watchlist

__all__ = [
    "User",
    "Watchlist",
]
