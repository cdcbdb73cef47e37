"""Service classes"""

from .catalog_service import CatalogService
from .interaction_service import InteractionService
from .recommendation_service import RecommendationService

__all__ = ["CatalogService", "InteractionService", "RecommendationService"]
