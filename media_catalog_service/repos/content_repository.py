"""Repository for reading and seeding catalog content."""

import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy import asc, desc
from sqlalchemy.orm import Session

from media_catalog_service.models import ContentKind, ContentRef, model_for_kind
from media_catalog_service.models.content import Movie, TvShow

logger = logging.getLogger(__name__)

# Secondary indexes available for ordered scans
INDEXED_COLUMNS = {
    'rating': 'rating',
    'year': 'release_year',
}

ContentItem = Movie | TvShow


class ContentRepository:
    """
    Repository for catalog content (movies and TV shows).
    """

    def __init__(self, db: Session):
        self.db = db

    def get_content(self, ref: ContentRef) -> Optional[ContentItem]:
        """
        Get a content item by reference.

        Args:
            ref: Kind and id of the item

        Returns:
            The item, or None if it does not exist
        """
        model = model_for_kind(ref.kind)
        return self.db.get(model, ref.id)

    # noinspection PyTypeChecker
    def scan(self, kind: ContentKind) -> List[ContentItem]:
        """Get every item of one kind, in store order (by id)."""
        model = model_for_kind(kind)
        return self.db.query(model).order_by(asc(model.id)).all()

    # noinspection PyTypeChecker
    def scan_by_index(
            self,
            kind: ContentKind,
            index_name: str,
            order: str = "desc",
            limit: Optional[int] = None
    ) -> List[ContentItem]:
        """
        Get items of one kind ordered by a secondary index.

        Items with equal index values keep store order.

        Args:
            kind: Content kind to scan
            index_name: 'rating' or 'year'
            order: 'asc' or 'desc'
            limit: Optional maximum number of items

        Returns:
            List of content items
        """
        if index_name not in INDEXED_COLUMNS:
            raise ValueError(f"Unknown index: {index_name!r}")
        if order not in ("asc", "desc"):
            raise ValueError(f"Unknown order: {order!r}")

        model = model_for_kind(kind)
        column = getattr(model, INDEXED_COLUMNS[index_name])
        direction = desc if order == "desc" else asc

        query = self.db.query(model).order_by(direction(column), asc(model.id))
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_top_rated(self, kinds: Iterable[ContentKind], limit: int) -> List[ContentItem]:
        """
        Get the highest rated items across several kinds.

        Takes the top ``limit`` of each kind from the rating index, then merges
        them in the given kind order and re-sorts by rating. The sort is
        stable, so ties keep kind order and then index order.

        Args:
            kinds: Kinds to include, in tie-break order
            limit: Maximum number of items to return

        Returns:
            List of content items sorted by rating descending
        """
        if limit <= 0:
            return []

        merged: List[ContentItem] = []
        for kind in kinds:
            merged.extend(self.scan_by_index(kind, 'rating', 'desc', limit=limit))

        merged.sort(key=lambda item: item.rating or 0.0, reverse=True)
        return merged[:limit]

    # noinspection PyTypeChecker
    def search_by_title(self, kind: ContentKind, query: str, limit: int = 10) -> List[ContentItem]:
        """
        Case-insensitive title substring search within one kind.

        Args:
            kind: Content kind to search
            query: Text to look for in titles
            limit: Maximum number of matches

        Returns:
            Matching items in store order
        """
        model = model_for_kind(kind)
        return (
            self.db.query(model)
            .filter(model.title.ilike(f"%{query}%"))
            .order_by(asc(model.id))
            .limit(limit)
            .all()
        )

    def get_genres(self) -> List[str]:
        """Get sorted distinct genres across all content."""
        genres = set()
        for kind in ContentKind:
            model = model_for_kind(kind)
            for (item_genres,) in self.db.query(model.genres).all():
                genres.update(item_genres or [])
        return sorted(genres)

    def count_content(self, kind: Optional[ContentKind] = None) -> int:
        """
        Count content items.

        Args:
            kind: If provided, count only this kind. Otherwise count all.

        Returns:
            Number of items
        """
        kinds = [kind] if kind is not None else list(ContentKind)
        return sum(self.db.query(model_for_kind(k)).count() for k in kinds)

    def bulk_store_content(
            self,
            kind: ContentKind,
            items: List[Dict],
            batch_size: int = 100
    ) -> int:
        """
        Insert many items of one kind.

        Args:
            kind: Content kind of every item
            items: List of dicts matching the table's columns
            batch_size: Batch size for inserts

        Returns:
            Number of items stored
        """
        model = model_for_kind(kind)
        columns = set(model.__table__.columns.keys())

        records = []
        for item in items:
            unknown = set(item) - columns
            if unknown:
                raise ValueError(f"Unknown {kind.value} fields: {sorted(unknown)}")
            records.append(model(**item))

        count = 0
        for i in range(0, len(records), batch_size):
            batch = records[i:i + batch_size]
            self.db.add_all(batch)
            self.db.commit()
            count += len(batch)

        logger.info(f"✓ Stored {count} {kind.value} records")
        return count
