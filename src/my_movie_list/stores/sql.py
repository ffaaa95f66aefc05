"""SQLAlchemy implementations of the user and watchlist stores."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from my_movie_list.models.user import User
from my_movie_list.models.watchlist import Watchlist
from my_movie_list.schemas.user import UserPatch, UserRecord
from my_movie_list.schemas.watchlist import WatchlistPatch, WatchlistRecord
from my_movie_list.stores.base import UserStore, WatchlistStore


def _to_columns(record: UserRecord | WatchlistRecord) -> dict[str, Any]:
    """Convert a record into ORM column values.

    JSON columns need plain values, so nested models are dumped in JSON mode
    while scalar columns keep their Python types.
    """
    data = record.model_dump()
    json_data = record.model_dump(mode="json")
    for field, value in data.items():
        if isinstance(value, list):
            data[field] = json_data[field]
    if data.get("created_at") is None:
        data.pop("created_at", None)
    return data


class SqlUserStore(UserStore):
    """User store backed by the ``users`` table.

    Every write commits on its own.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_user_by_id(self, user_id: str) -> UserRecord | None:
        user = await self._session.get(User, user_id)
        return UserRecord.model_validate(user) if user else None

    async def get_user_by_username(self, username: str) -> UserRecord | None:
        result = await self._session.execute(select(User).where(User.username == username))
        user = result.scalar_one_or_none()
        return UserRecord.model_validate(user) if user else None

    async def get_user_by_email(self, email: str) -> UserRecord | None:
        result = await self._session.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
        return UserRecord.model_validate(user) if user else None

    async def create_user(self, user: UserRecord) -> UserRecord:
        row = User(**_to_columns(user))
        self._session.add(row)
        await self._session.commit()
        await self._session.refresh(row)
        return UserRecord.model_validate(row)

    async def update_user(self, user_id: str, patch: UserPatch) -> UserRecord | None:
        row = await self._session.get(User, user_id)
        if row is None:
            return None
        for field, value in patch.model_dump(exclude_unset=True, mode="json").items():
            setattr(row, field, value)
        await self._session.commit()
        return UserRecord.model_validate(row)

    async def delete_user(self, user_id: str) -> bool:
        row = await self._session.get(User, user_id)
        if row is None:
            return False
        await self._session.delete(row)
        await self._session.commit()
        return True


class SqlWatchlistStore(WatchlistStore):
    """Watchlist store backed by the ``watchlists`` table.

    Every write commits on its own.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_watchlist_by_id(self, list_id: str) -> WatchlistRecord | None:
        watchlist = await self._session.get(Watchlist, list_id)
        return WatchlistRecord.model_validate(watchlist) if watchlist else None

    async def get_watchlist_by_owner_and_name(
        self, user_id: str, list_name: str
    ) -> WatchlistRecord | None:
        query = select(Watchlist).where(
            Watchlist.user_id == user_id,
            Watchlist.list_name == list_name,
        )
        result = await self._session.execute(query)
        watchlist = result.scalar_one_or_none()
        return WatchlistRecord.model_validate(watchlist) if watchlist else None

    async def get_watchlists_by_owner(self, user_id: str) -> list[WatchlistRecord]:
        query = (
            select(Watchlist)
            .where(Watchlist.user_id == user_id)
            .order_by(Watchlist.created_at, Watchlist.list_name)
        )
        result = await self._session.execute(query)
        return [WatchlistRecord.model_validate(w) for w in result.scalars().all()]

    async def create_watchlist(self, watchlist: WatchlistRecord) -> WatchlistRecord:
        row = Watchlist(**_to_columns(watchlist))
        self._session.add(row)
        await self._session.commit()
        await self._session.refresh(row)
        return WatchlistRecord.model_validate(row)

    async def update_watchlist(
        self, list_id: str, patch: WatchlistPatch
    ) -> WatchlistRecord | None:
        row = await self._session.get(Watchlist, list_id)
        if row is None:
            return None
        for field, value in patch.model_dump(exclude_unset=True, mode="json").items():
            setattr(row, field, value)
        await self._session.commit()
        return WatchlistRecord.model_validate(row)

    async def list_all_watchlists(self) -> list[WatchlistRecord]:
        result = await self._session.execute(select(Watchlist).order_by(Watchlist.created_at))
        return [WatchlistRecord.model_validate(w) for w in result.scalars().all()]
