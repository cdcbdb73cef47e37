"""SQLAlchemy models"""

from media_catalog_service.models.base import Base
from media_catalog_service.models.content import Movie, TvShow, model_for_kind
from media_catalog_service.models.content_ref import ContentKind, ContentRef, kinds_for_type
from media_catalog_service.models.interactions import UserFavorite, UserRating, WatchlistEntry

__all__ = [
    "Base",
    "ContentKind",
    "ContentRef",
    "Movie",
    "TvShow",
    "UserFavorite",
    "UserRating",
    "WatchlistEntry",
    "kinds_for_type",
    "model_for_kind",
]
