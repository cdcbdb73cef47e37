"""Score catalog content for recommendations and similarity."""
import logging
from typing import Iterable, List, Optional, Set, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _genres(item) -> Set[str]:
    return set(getattr(item, 'genres', None) or ())


def _rating(item) -> float:
    return float(getattr(item, 'rating', None) or 0.0)


class ContentScorer:
    """Compute recommendation and similarity scores for content items."""

    def __init__(
        self,
        genre_bonus: float = 0.5,
        shared_genre_weight: float = 2.0,
        rating_gap_penalty: float = 0.5
    ):
        """
        Initialize content scorer.

        Args:
            genre_bonus: Added to an item's rating per genre it shares with the user's preferences
            shared_genre_weight: Similarity gained per genre two items share
            rating_gap_penalty: Similarity lost per point of rating difference
        """
        if genre_bonus < 0:
            raise ValueError("genre_bonus must be non-negative")
        self.genre_bonus = genre_bonus
        self.shared_genre_weight = shared_genre_weight
        self.rating_gap_penalty = rating_gap_penalty

    def recommendation_score(self, content, preferred_genres: Iterable[str]) -> float:
        """
        Score an item for a user with the given preferred genres.

        The score is the item's rating plus a bonus per preferred genre it
        carries, so it is never below the rating itself.

        Args:
            content: Item with ``rating`` and ``genres``
            preferred_genres: Genres derived from the user's ratings

        Returns:
            Recommendation score
        """
        overlap = len(_genres(content) & set(preferred_genres))
        return _rating(content) + self.genre_bonus * overlap

    def similarity_score(self, candidate, reference) -> float:
        """
        Score how similar a candidate is to a reference item.

        Shared genres raise the score; rating distance lowers it. The score
        is symmetric in its two arguments.

        Args:
            candidate: Item with ``rating`` and ``genres``
            reference: Item with ``rating`` and ``genres``

        Returns:
            Similarity score
        """
        shared = len(_genres(candidate) & _genres(reference))
        rating_gap = abs(_rating(candidate) - _rating(reference))
        return self.shared_genre_weight * shared - self.rating_gap_penalty * rating_gap

    def score_recommendations(
        self,
        candidates: Iterable[T],
        preferred_genres: Iterable[str]
    ) -> List[Tuple[T, float]]:
        """Pair every candidate with its recommendation score, keeping input order."""
        preferred = set(preferred_genres)
        return [(item, self.recommendation_score(item, preferred)) for item in candidates]

    def score_similar(self, candidates: Iterable[T], reference) -> List[Tuple[T, float]]:
        """Pair every candidate with its similarity to the reference, keeping input order."""
        return [(item, self.similarity_score(item, reference)) for item in candidates]

    @staticmethod
    def rank(scored: Iterable[Tuple[T, float]], limit: Optional[int] = None) -> List[Tuple[T, float]]:
        """
        Sort scored items by score, highest first.

        The sort is stable: items with equal scores keep their input order.

        Args:
            scored: (item, score) pairs
            limit: Optional maximum number of results

        Returns:
            Sorted (item, score) pairs
        """
        ranked = sorted(scored, key=lambda pair: pair[1], reverse=True)
        if limit is not None:
            ranked = ranked[:limit]
        return ranked
