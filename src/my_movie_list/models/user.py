"""User ORM model."""

from datetime import datetime

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from my_movie_list.database import Base


class User(Base):
    """User account with its social links.

    Friend, collaboration and like memberships are stored on the user row
    itself as JSON arrays; the watchlist rows hold the other half.
    """

    __tablename__ = "users"

    user_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255))
    is_admin: Mapped[bool] = mapped_column(default=False)
    is_banned: Mapped[bool] = mapped_column(default=False)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)

    # Profile
    profile_picture: Mapped[str] = mapped_column(String(500), default="")
    biography: Mapped[str] = mapped_column(Text, default="")
    preferred_genres: Mapped[list[str]] = mapped_column(JSON, default=list)

    # Social links
    friends: Mapped[list[dict[str, str]]] = mapped_column(JSON, default=list)
    # NULL on legacy rows created before collaboration existed
    collaborative_lists: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    liked_lists: Mapped[list[str]] = mapped_column(JSON, default=list)
    recently_added: Mapped[list[str]] = mapped_column(JSON, default=list)
