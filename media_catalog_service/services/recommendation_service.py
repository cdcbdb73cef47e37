"""Service for personalized recommendations and similar content."""
import logging
from typing import Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from media_catalog_service.config import get_recommendation_limit, get_similar_content_limit
from media_catalog_service.models import ContentKind, ContentRef, UserFavorite, UserRating
from media_catalog_service.models.database import SessionLocal
from media_catalog_service.repos import ContentRepository, InteractionRepository
from media_catalog_service.scoring import ContentScorer, PreferenceExtractor

logger = logging.getLogger(__name__)


def _resolve_limit(limit: Optional[int], default: int) -> int:
    if limit is None:
        return default
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return limit


class RecommendationService:
    """
    Service for content recommendations.
    Scores are computed from the live catalog on every call; nothing is cached.
    """

    def __init__(
            self,
            session_factory: Optional[Callable[[], Session]] = None,
            scorer: Optional[ContentScorer] = None,
            preference_extractor: Optional[PreferenceExtractor] = None
    ):
        """
        Initialize the recommendation service.

        Args:
            session_factory: Creates a database session per call (default: SessionLocal)
            scorer: Content scorer (default weights if None)
            preference_extractor: Preferred-genre extractor (config threshold if None)
        """
        self.session_factory = session_factory or SessionLocal
        self.scorer = scorer or ContentScorer()
        self.preference_extractor = preference_extractor or PreferenceExtractor()

    def get_recommendations(self, user_id: Optional[str], limit: Optional[int] = None) -> List[Dict]:
        """
        Get recommendations for a user.

        Anonymous callers get the top rated content across movies and shows.
        Signed-in users get unseen content scored by rating plus a bonus for
        each genre they have rated highly before.

        Args:
            user_id: Identity provider user id, or None for anonymous
            limit: Number of recommendations (None = RECOMMENDATION_LIMIT)

        Returns:
            List of content dicts with recommendation_score
        """
        limit = _resolve_limit(limit, get_recommendation_limit())

        db = self.session_factory()
        try:
            content_repo = ContentRepository(db)

            if not user_id:
                top_rated = content_repo.get_top_rated(list(ContentKind), limit)
                return [
                    {**item.to_dict(), 'recommendation_score': float(item.rating)}
                    for item in top_rated
                ]

            interaction_repo = InteractionRepository(db)
            ratings = interaction_repo.get_user_rows(UserRating, user_id)
            favorites = interaction_repo.get_user_rows(UserFavorite, user_id)

            preferred_genres = self.preference_extractor.extract(ratings, content_repo.get_content)
            logger.info(f"User {user_id}: {len(ratings)} ratings, preferred genres {sorted(preferred_genres)}")

            excluded = {row.ref for row in ratings} | {row.ref for row in favorites}

            candidates = []
            for kind in ContentKind:
                candidates.extend(
                    item for item in content_repo.scan(kind)
                    if item.ref not in excluded
                )

            scored = self.scorer.score_recommendations(candidates, preferred_genres)
            ranked = self.scorer.rank(scored, limit)

            return [
                {**item.to_dict(), 'recommendation_score': score}
                for item, score in ranked
            ]
        finally:
            db.close()

    def get_similar_content(self, ref: ContentRef, limit: Optional[int] = None) -> List[Dict]:
        """
        Get content of the same kind most similar to a reference item.

        Args:
            ref: Reference item
            limit: Number of results (None = SIMILAR_CONTENT_LIMIT)

        Returns:
            List of content dicts with similarity_score; empty if the
            reference does not exist
        """
        limit = _resolve_limit(limit, get_similar_content_limit())

        db = self.session_factory()
        try:
            content_repo = ContentRepository(db)

            reference = content_repo.get_content(ref)
            if reference is None:
                logger.warning(f"Content {ref} not found, no similar content")
                return []

            candidates = [item for item in content_repo.scan(ref.kind) if item.id != ref.id]

            scored = self.scorer.score_similar(candidates, reference)
            ranked = self.scorer.rank(scored, limit)

            return [
                {**item.to_dict(), 'similarity_score': score}
                for item, score in ranked
            ]
        finally:
            db.close()
