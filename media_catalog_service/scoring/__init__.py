"""Recommendation and similarity scoring"""

from media_catalog_service.scoring.preferences import PreferenceExtractor
from media_catalog_service.scoring.scorer import ContentScorer

__all__ = ["ContentScorer", "PreferenceExtractor"]
