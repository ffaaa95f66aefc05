"""Watchlist ORM model."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from my_movie_list.database import Base


class Watchlist(Base):
    """A named list of titles owned by one user."""

    __tablename__ = "watchlists"
    __table_args__ = (UniqueConstraint("user_id", "list_name", name="uq_owner_list_name"),)

    list_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    # No foreign key: deleting a user leaves their lists in place
    user_id: Mapped[str] = mapped_column(String(36), index=True)
    list_name: Mapped[str] = mapped_column(String(30))
    is_public: Mapped[bool] = mapped_column(default=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)

    collaborators: Mapped[list[str]] = mapped_column(JSON, default=list)
    likes: Mapped[list[str]] = mapped_column(JSON, default=list)
    titles: Mapped[list[str]] = mapped_column(JSON, default=list)
    comments: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
