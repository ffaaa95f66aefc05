"""Permission rules for watchlists.

Each rule is a plain predicate. Callers turn a False into a ForbiddenError;
a missing watchlist is reported separately as NotFound. Every can_* rule takes
the acting user record, or None for an anonymous caller.
"""

from my_movie_list.schemas.user import UserRecord
from my_movie_list.schemas.watchlist import WatchlistRecord


def is_owner(user_id: str | None, watchlist: WatchlistRecord) -> bool:
    """Return whether the user owns the watchlist."""
    return user_id is not None and user_id == watchlist.user_id


def is_owner_or_collaborator(user_id: str | None, watchlist: WatchlistRecord) -> bool:
    """Return whether the user owns or collaborates on the watchlist."""
    if user_id is None:
        return False
    return is_owner(user_id, watchlist) or user_id in watchlist.collaborators


def can_view(user: UserRecord | None, watchlist: WatchlistRecord) -> bool:
    """Public lists are visible to everyone; private ones to members and admins."""
    if watchlist.is_public:
        return True
    if user is None:
        return False
    return is_owner_or_collaborator(user.user_id, watchlist) or user.is_admin


def can_comment(user: UserRecord | None, watchlist: WatchlistRecord) -> bool:
    """Same shape as can_view, but admins get no bypass on private lists."""
    if watchlist.is_public:
        return True
    return user is not None and is_owner_or_collaborator(user.user_id, watchlist)


def can_modify_titles(user: UserRecord | None, watchlist: WatchlistRecord) -> bool:
    """Titles are editable by the owner and collaborators, even on public lists."""
    return user is not None and is_owner_or_collaborator(user.user_id, watchlist)


def can_delete_comment(user: UserRecord | None) -> bool:
    """Only admins may delete comments, on any list."""
    return user is not None and user.is_admin


def can_rename_or_change_visibility(
    user: UserRecord | None, watchlist: WatchlistRecord
) -> bool:
    """Only the owner may rename a list or change its visibility."""
    return user is not None and is_owner(user.user_id, watchlist)
