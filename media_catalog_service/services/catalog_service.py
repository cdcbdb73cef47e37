"""Service for browsing and searching the catalog."""
import logging
from typing import Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from media_catalog_service.config import get_catalog_page_size
from media_catalog_service.models import ContentRef, kinds_for_type
from media_catalog_service.models.database import SessionLocal
from media_catalog_service.repos import ContentRepository
from media_catalog_service.utils.pagination import paginate

logger = logging.getLogger(__name__)

SEARCH_LIMIT_PER_KIND = 10

# sort_by -> (key, reverse)
SORT_OPTIONS = {
    'rating': (lambda item: item.rating or 0.0, True),
    'year': (lambda item: item.release_year or 0, True),
    'title': (lambda item: (item.title or "").casefold(), False),
}


def sort_content(items: List, sort_by: str = 'rating') -> List:
    """
    Sort content items by a catalog sort key.

    The sort is stable, so items with equal keys keep their input order.

    Args:
        items: Content items
        sort_by: 'rating' (highest first), 'year' (newest first) or 'title' (A-Z)

    Returns:
        New sorted list
    """
    if sort_by not in SORT_OPTIONS:
        raise ValueError(f"sort_by must be one of {sorted(SORT_OPTIONS)}, got {sort_by!r}")

    key, reverse = SORT_OPTIONS[sort_by]
    return sorted(items, key=key, reverse=reverse)


class CatalogService:
    """
    Service for catalog queries.
    Every call reads the catalog fresh; there is no snapshot between pages.
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        self.session_factory = session_factory or SessionLocal

    def get_all_content(
            self,
            content_type: str = 'all',
            genre: Optional[str] = None,
            sort_by: str = 'rating',
            cursor: Optional[str] = None,
            num_items: Optional[int] = None
    ) -> Dict:
        """
        Get one page of catalog content.

        Args:
            content_type: 'movie', 'tv' or 'all'
            genre: Only include items carrying this genre
            sort_by: 'rating', 'year' or 'title'
            cursor: continue_cursor from the previous page, None for the first
            num_items: Page size (None = CATALOG_PAGE_SIZE)

        Returns:
            Dict with page (content dicts), is_done and continue_cursor
        """
        kinds = kinds_for_type(content_type)
        if num_items is None:
            num_items = get_catalog_page_size()

        db = self.session_factory()
        try:
            repo = ContentRepository(db)

            content = []
            for kind in kinds:
                items = repo.scan(kind)
                if genre:
                    items = [item for item in items if genre in item.genre_set]
                content.extend(items)

            result = paginate(sort_content(content, sort_by), cursor, num_items)
            result['page'] = [item.to_dict() for item in result['page']]
            return result
        finally:
            db.close()

    def search_content(self, query: str, content_type: str = 'all') -> List[Dict]:
        """
        Search titles across the catalog.

        Args:
            query: Title text to match (case-insensitive substring)
            content_type: 'movie', 'tv' or 'all'

        Returns:
            Up to 10 matches per kind, sorted by rating
        """
        kinds = kinds_for_type(content_type)
        query = (query or "").strip()
        if not query:
            return []

        db = self.session_factory()
        try:
            repo = ContentRepository(db)

            results = []
            for kind in kinds:
                results.extend(repo.search_by_title(kind, query, limit=SEARCH_LIMIT_PER_KIND))

            return [item.to_dict() for item in sort_content(results, 'rating')]
        finally:
            db.close()

    def get_content(self, ref: ContentRef) -> Optional[Dict]:
        """Get a single content item, or None if it does not exist."""
        db = self.session_factory()
        try:
            item = ContentRepository(db).get_content(ref)
            return item.to_dict() if item is not None else None
        finally:
            db.close()

    def get_top_rated(self, content_type: str = 'all', limit: int = 10) -> List[Dict]:
        """
        Get the highest rated content.

        Args:
            content_type: 'movie', 'tv' or 'all'
            limit: Maximum number of items

        Returns:
            Content dicts sorted by rating, movies first on ties
        """
        kinds = kinds_for_type(content_type)

        db = self.session_factory()
        try:
            items = ContentRepository(db).get_top_rated(kinds, limit)
            return [item.to_dict() for item in items]
        finally:
            db.close()

    def get_genres(self) -> List[str]:
        """Get every genre used in the catalog, sorted."""
        db = self.session_factory()
        try:
            return ContentRepository(db).get_genres()
        finally:
            db.close()
