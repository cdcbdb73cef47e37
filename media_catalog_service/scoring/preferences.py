"""Derive a user's preferred genres from their rating history."""
import logging
from typing import Callable, Iterable, Optional, Set

from media_catalog_service.config import get_preference_min_stars
from media_catalog_service.models import ContentRef

logger = logging.getLogger(__name__)


class PreferenceExtractor:
    """Collect the genres of content a user rated highly."""

    def __init__(self, min_stars: Optional[int] = None):
        """
        Args:
            min_stars: Lowest star rating that counts as a preference
                (None = PREFERENCE_MIN_STARS from config)
        """
        self.min_stars = min_stars if min_stars is not None else get_preference_min_stars()

    def extract(
        self,
        ratings: Iterable,
        fetch_content: Callable[[ContentRef], object]
    ) -> Set[str]:
        """
        Union the genres of every highly rated item.

        Ratings pointing at content that no longer exists are skipped.

        Args:
            ratings: Rating rows with ``stars`` and ``ref``
            fetch_content: Looks up a content item by reference, None if absent

        Returns:
            Set of preferred genres, possibly empty
        """
        preferred: Set[str] = set()

        for rating in ratings:
            if rating.stars < self.min_stars:
                continue

            content = fetch_content(rating.ref)
            if content is None:
                logger.debug(f"Skipping rating for missing content {rating.ref}")
                continue

            preferred.update(getattr(content, 'genres', None) or ())

        return preferred
