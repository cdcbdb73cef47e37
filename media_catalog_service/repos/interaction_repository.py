"""Repository for per-user ratings, favorites and watchlist entries."""

import logging
from datetime import UTC, datetime
from typing import List, Optional

from sqlalchemy import and_, asc
from sqlalchemy.orm import Session

from media_catalog_service.models import ContentRef, UserFavorite, UserRating, WatchlistEntry

logger = logging.getLogger(__name__)

InteractionModel = type[UserRating] | type[UserFavorite] | type[WatchlistEntry]


class InteractionRepository:
    """
    Repository for user interaction rows.

    Every table holds at most one row per user per content item.
    """

    def __init__(self, db: Session):
        self.db = db

    # noinspection PyTypeChecker
    def get_user_rows(self, model: InteractionModel, user_id: str) -> List:
        """
        Get all rows of one interaction table for a user.

        Args:
            model: UserRating, UserFavorite or WatchlistEntry
            user_id: User identifier

        Returns:
            Rows in insertion order
        """
        return (
            self.db.query(model)
            .filter(model.user_id == user_id)
            .order_by(asc(model.id))
            .all()
        )

    def get_user_row(self, model: InteractionModel, user_id: str, ref: ContentRef):
        """Get one user's row for a content item, or None."""
        return (
            self.db.query(model)
            .filter(
                and_(
                    model.user_id == user_id,
                    model.content_kind == ref.kind.value,
                    model.content_id == ref.id
                )
            )
            .first()
        )

    def upsert_rating(
            self,
            user_id: str,
            ref: ContentRef,
            stars: int,
            review: Optional[str] = None
    ) -> UserRating:
        """
        Store or update a user's rating of a content item.

        Args:
            user_id: User identifier
            ref: Rated content
            stars: Star rating
            review: Optional review text

        Returns:
            UserRating object
        """
        existing = self.get_user_row(UserRating, user_id, ref)

        if existing:
            existing.stars = stars  # type: ignore[assignment]
            existing.review = review  # type: ignore[assignment]
            existing.updated_at = datetime.now(UTC)  # type: ignore[assignment]
            rating = existing
        else:
            rating = UserRating(
                user_id=user_id,
                content_kind=ref.kind.value,
                content_id=ref.id,
                stars=stars,
                review=review,
                updated_at=datetime.now(UTC),
            )
            self.db.add(rating)

        self.db.commit()
        self.db.refresh(rating)

        return rating

    def add_entry(self, model: InteractionModel, user_id: str, ref: ContentRef) -> bool:
        """
        Add a presence row (favorite or watchlist entry).

        Args:
            model: UserFavorite or WatchlistEntry
            user_id: User identifier
            ref: Content to add

        Returns:
            True if added, False if it was already present
        """
        if self.get_user_row(model, user_id, ref) is not None:
            return False

        self.db.add(model(user_id=user_id, content_kind=ref.kind.value, content_id=ref.id))
        self.db.commit()
        return True

    def remove_entry(self, model: InteractionModel, user_id: str, ref: ContentRef) -> bool:
        """
        Delete a user's row for a content item.

        Returns:
            True if deleted, False if not found
        """
        count = (
            self.db.query(model)
            .filter(
                and_(
                    model.user_id == user_id,
                    model.content_kind == ref.kind.value,
                    model.content_id == ref.id
                )
            )
            .delete()
        )
        self.db.commit()

        return count > 0
