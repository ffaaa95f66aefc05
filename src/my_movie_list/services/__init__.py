"""Business logic and external API clients."""

from my_movie_list.services.base import (
    APIError,
    APINotFoundError,
    BaseAPIClient,
    RateLimitError,
)
from my_movie_list.services.collaboration import CollaborationManager
from my_movie_list.services.engagement import EngagementManager
from my_movie_list.services.errors import (
    AuthenticationError,
    ConflictError,
    DataIntegrityError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
    ServiceError,
)
from my_movie_list.services.friends import FriendshipManager
from my_movie_list.services.users import UserManager
from my_movie_list.services.watchlists import WatchlistManager
from my_movie_list.services.watchmode import WatchmodeClient, get_watchmode_client

__all__ = [
    "APIError",
    "APINotFoundError",
    "BaseAPIClient",
    "RateLimitError",
    "WatchmodeClient",
    "get_watchmode_client",
    "ServiceError",
    "InvalidArgumentError",
    "NotFoundError",
    "ForbiddenError",
    "ConflictError",
    "DataIntegrityError",
    "AuthenticationError",
    "FriendshipManager",
    "CollaborationManager",
    "EngagementManager",
    "WatchlistManager",
    "UserManager",
]
