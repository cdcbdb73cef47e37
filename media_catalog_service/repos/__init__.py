"""Repository classes"""

from media_catalog_service.repos.content_repository import ContentRepository
from media_catalog_service.repos.interaction_repository import InteractionRepository

__all__ = [
    "ContentRepository",
    "InteractionRepository",
]
