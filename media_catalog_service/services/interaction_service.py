"""Service for user ratings, favorites and watchlists."""
import logging
from typing import Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from media_catalog_service.errors import ContentNotFoundError, InvalidRatingError, UnauthenticatedError
from media_catalog_service.models import ContentRef, UserFavorite, UserRating, WatchlistEntry
from media_catalog_service.models.database import SessionLocal
from media_catalog_service.repos import ContentRepository, InteractionRepository

logger = logging.getLogger(__name__)

MIN_STARS = 1
MAX_STARS = 5


def _require_user(user_id: Optional[str], action: str) -> str:
    if not user_id:
        raise UnauthenticatedError(f"Must be logged in to {action}")
    return user_id


# noinspection PyMethodMayBeStatic
class InteractionService:
    """
    Service for per-user interactions with catalog content.
    Mutations require a user; reads fall back to empty results for anonymous callers.
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        self.session_factory = session_factory or SessionLocal

    def _ensure_content_exists(self, content_repo: ContentRepository, ref: ContentRef) -> None:
        if content_repo.get_content(ref) is None:
            raise ContentNotFoundError(f"Content {ref} not found")

    def rate_content(
            self,
            user_id: Optional[str],
            ref: ContentRef,
            stars: int,
            review: Optional[str] = None
    ) -> Dict:
        """
        Rate a content item. Rating it again replaces the previous rating.

        Args:
            user_id: Rating user
            ref: Rated content
            stars: 1 to 5
            review: Optional review text

        Returns:
            Dict describing the stored rating
        """
        user_id = _require_user(user_id, "rate content")
        if isinstance(stars, bool) or not isinstance(stars, int) or not MIN_STARS <= stars <= MAX_STARS:
            raise InvalidRatingError(f"stars must be an integer between {MIN_STARS} and {MAX_STARS}")
        if review is not None and not isinstance(review, str):
            raise InvalidRatingError("review must be a string")

        db = self.session_factory()
        try:
            self._ensure_content_exists(ContentRepository(db), ref)
            rating = InteractionRepository(db).upsert_rating(user_id, ref, stars, review)
            logger.info(f"User {user_id} rated {ref} {stars} stars")
            return {
                'kind': ref.kind.value,
                'content_id': ref.id,
                'stars': rating.stars,
                'review': rating.review,
            }
        finally:
            db.close()

    def _add(self, model, user_id: Optional[str], ref: ContentRef, action: str) -> bool:
        user_id = _require_user(user_id, action)

        db = self.session_factory()
        try:
            self._ensure_content_exists(ContentRepository(db), ref)
            return InteractionRepository(db).add_entry(model, user_id, ref)
        finally:
            db.close()

    def _remove(self, model, user_id: Optional[str], ref: ContentRef, action: str) -> bool:
        user_id = _require_user(user_id, action)

        db = self.session_factory()
        try:
            return InteractionRepository(db).remove_entry(model, user_id, ref)
        finally:
            db.close()

    def add_to_favorites(self, user_id: Optional[str], ref: ContentRef) -> bool:
        """Add to favorites. Returns False if it was already a favorite."""
        return self._add(UserFavorite, user_id, ref, "add favorites")

    def remove_from_favorites(self, user_id: Optional[str], ref: ContentRef) -> bool:
        """Remove from favorites. Returns False if it was not a favorite."""
        return self._remove(UserFavorite, user_id, ref, "remove favorites")

    def add_to_watchlist(self, user_id: Optional[str], ref: ContentRef) -> bool:
        """Add to the watchlist. Returns False if it was already listed."""
        return self._add(WatchlistEntry, user_id, ref, "add to watchlist")

    def remove_from_watchlist(self, user_id: Optional[str], ref: ContentRef) -> bool:
        """Remove from the watchlist. Returns False if it was not listed."""
        return self._remove(WatchlistEntry, user_id, ref, "remove from watchlist")

    def _list_with_content(self, model, user_id: Optional[str], annotate: Callable) -> List[Dict]:
        if not user_id:
            return []

        db = self.session_factory()
        try:
            content_repo = ContentRepository(db)
            results = []
            for row in InteractionRepository(db).get_user_rows(model, user_id):
                item = content_repo.get_content(row.ref)
                if item is None:
                    logger.warning(f"Skipping {model.__tablename__} row for missing content {row.ref}")
                    continue
                results.append({**item.to_dict(), **annotate(row)})
            return results
        finally:
            db.close()

    def get_user_ratings(self, user_id: Optional[str]) -> List[Dict]:
        """Get rated content with the user's stars and review."""
        return self._list_with_content(
            UserRating, user_id,
            lambda row: {'user_rating': row.stars, 'user_review': row.review}
        )

    def get_user_favorites(self, user_id: Optional[str]) -> List[Dict]:
        """Get the user's favorite content."""
        return self._list_with_content(UserFavorite, user_id, lambda row: {'is_favorite': True})

    def get_user_watchlist(self, user_id: Optional[str]) -> List[Dict]:
        """Get content on the user's watchlist."""
        return self._list_with_content(WatchlistEntry, user_id, lambda row: {'in_watchlist': True})

    def get_user_content_status(self, user_id: Optional[str], ref: ContentRef) -> Dict:
        """
        Get whether a user has favorited, watchlisted or rated an item.

        Returns:
            Dict with is_favorite, in_watchlist and user_rating (None if unrated)
        """
        if not user_id:
            return {'is_favorite': False, 'in_watchlist': False, 'user_rating': None}

        db = self.session_factory()
        try:
            repo = InteractionRepository(db)
            rating = repo.get_user_row(UserRating, user_id, ref)
            return {
                'is_favorite': repo.get_user_row(UserFavorite, user_id, ref) is not None,
                'in_watchlist': repo.get_user_row(WatchlistEntry, user_id, ref) is not None,
                'user_rating': rating.stars if rating is not None else None,
            }
        finally:
            db.close()
