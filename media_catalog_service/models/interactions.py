"""Per-user interaction rows: ratings, favorites and watchlist entries."""
from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, Index, Integer, String, Text, UniqueConstraint

from media_catalog_service.models.base import Base
from media_catalog_service.models.content_ref import ContentKind, ContentRef


class InteractionMixin:
    """Columns shared by every per-user interaction table.

    Each table holds at most one row per (user, content item).
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), nullable=False)
    content_kind = Column(String(10), nullable=False)
    content_id = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    @property
    def ref(self) -> ContentRef:
        return ContentRef(ContentKind.parse(self.content_kind), self.content_id)


class UserRating(InteractionMixin, Base):
    """A user's 1-5 star rating of a content item."""
    __tablename__ = 'user_ratings'

    stars = Column(Integer, nullable=False)
    review = Column(Text, nullable=True)
    updated_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "content_kind", "content_id", name="uq_user_ratings_user_content"),
        Index("idx_user_ratings_user", "user_id"),
    )

    def __repr__(self):
        return f"<UserRating(user_id='{self.user_id}', content={self.ref}, stars={self.stars})>"


class UserFavorite(InteractionMixin, Base):
    """Marks a content item as one of the user's favorites."""
    __tablename__ = 'user_favorites'

    __table_args__ = (
        UniqueConstraint("user_id", "content_kind", "content_id", name="uq_user_favorites_user_content"),
        Index("idx_user_favorites_user", "user_id"),
    )

    def __repr__(self):
        return f"<UserFavorite(user_id='{self.user_id}', content={self.ref})>"


class WatchlistEntry(InteractionMixin, Base):
    """A content item on the user's watchlist."""
    __tablename__ = 'watchlist'

    __table_args__ = (
        UniqueConstraint("user_id", "content_kind", "content_id", name="uq_watchlist_user_content"),
        Index("idx_watchlist_user", "user_id"),
    )

    def __repr__(self):
        return f"<WatchlistEntry(user_id='{self.user_id}', content={self.ref})>"
