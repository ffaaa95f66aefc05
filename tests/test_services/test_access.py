"""Tests for watchlist permission rules."""

import pytest

from my_movie_list.schemas.user import UserRecord
from my_movie_list.schemas.watchlist import WatchlistRecord
from my_movie_list.services.access import (
    can_comment,
    can_delete_comment,
    can_modify_titles,
    can_rename_or_change_visibility,
    can_view,
)


def build_user(user_id: str, is_admin: bool = False) -> UserRecord:
    return UserRecord(
        user_id=user_id,
        username=user_id,
        email=f"{user_id}@example.com",
        hashed_password="x",
        is_admin=is_admin,
    )


def build_watchlist(is_public: bool) -> WatchlistRecord:
    return WatchlistRecord(
        list_id="list-1",
        user_id="owner",
        list_name="Favorites",
        is_public=is_public,
        collaborators=["collab"],
    )


OWNER = build_user("owner")
COLLABORATOR = build_user("collab")
STRANGER = build_user("stranger")
ADMIN = build_user("admin", is_admin=True)
ALL_USERS = [OWNER, COLLABORATOR, STRANGER, ADMIN]


class TestCanView:
    """Tests for view permission."""

    @pytest.mark.parametrize("user", [*ALL_USERS, None])
    def test_public_list_visible_to_everyone(self, user: UserRecord | None) -> None:
        """Test that any user, even anonymous, can view a public list."""
        assert can_view(user, build_watchlist(is_public=True)) is True

    @pytest.mark.parametrize(
        ("user", "expected"),
        [(OWNER, True), (COLLABORATOR, True), (ADMIN, True), (STRANGER, False), (None, False)],
    )
    def test_private_list_visibility(self, user: UserRecord | None, expected: bool) -> None:
        """Test that private lists are visible to owner, collaborators and admins only."""
        assert can_view(user, build_watchlist(is_public=False)) is expected


class TestCanComment:
    """Tests for comment permission."""

    @pytest.mark.parametrize("user", ALL_USERS)
    def test_public_list_open_for_comments(self, user: UserRecord) -> None:
        """Test that anyone can comment on a public list."""
        assert can_comment(user, build_watchlist(is_public=True)) is True

    @pytest.mark.parametrize(
        ("user", "expected"),
        [
            (OWNER, True),
            (COLLABORATOR, True),
            (STRANGER, False),
            (ADMIN, False),
            (None, False),
        ],
    )
    def test_private_list_comments(self, user: UserRecord | None, expected: bool) -> None:
        """Test that admins get no comment bypass on private lists."""
        assert can_comment(user, build_watchlist(is_public=False)) is expected


class TestCanModifyTitles:
    """Tests for title modification permission."""

    @pytest.mark.parametrize("is_public", [True, False])
    @pytest.mark.parametrize(
        ("user", "expected"),
        [(OWNER, True), (COLLABORATOR, True), (STRANGER, False), (ADMIN, False)],
    )
    def test_only_members_modify_titles(
        self, user: UserRecord, expected: bool, is_public: bool
    ) -> None:
        """Test that visibility does not open title editing to others."""
        assert can_modify_titles(user, build_watchlist(is_public)) is expected

    def test_missing_user_cannot_modify(self) -> None:
        """Test that an anonymous caller cannot modify titles."""
        assert can_modify_titles(None, build_watchlist(is_public=True)) is False


class TestOwnerAndAdminRules:
    """Tests for rename/visibility and comment deletion permissions."""

    @pytest.mark.parametrize(
        ("user", "expected"),
        [
            (OWNER, True),
            (COLLABORATOR, False),
            (STRANGER, False),
            (ADMIN, False),
            (None, False),
        ],
    )
    def test_only_owner_renames(self, user: UserRecord | None, expected: bool) -> None:
        """Test that renaming has no collaborator or admin bypass."""
        assert can_rename_or_change_visibility(user, build_watchlist(True)) is expected

    @pytest.mark.parametrize(
        ("user", "expected"),
        [(OWNER, False), (COLLABORATOR, False), (STRANGER, False), (ADMIN, True), (None, False)],
    )
    def test_only_admin_deletes_comments(self, user: UserRecord | None, expected: bool) -> None:
        """Test that comment deletion is admin only, even for the owner."""
        assert can_delete_comment(user) is expected
