"""Catalog content tables: movies and TV shows"""
from sqlalchemy import JSON, Column, Float, Index, Integer, String, Text

from media_catalog_service.models.base import Base
from media_catalog_service.models.content_ref import ContentKind, ContentRef

TV_SHOW_STATUSES = ("ongoing", "completed", "cancelled")


class ContentMixin:
    """Columns shared by every kind of content."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    genres = Column(JSON, nullable=True)
    release_year = Column(Integer, nullable=False)
    rating = Column(Float, nullable=False)  # out of 10
    poster_url = Column(String(500), nullable=True)
    cast = Column(JSON, nullable=True)

    # Set by each concrete table
    kind = None

    @property
    def ref(self) -> ContentRef:
        return ContentRef(self.kind, self.id)

    @property
    def genre_set(self) -> frozenset[str]:
        """Genres as a set; missing genres are empty."""
        return frozenset(self.genres or ())

    def _base_dict(self) -> dict:
        return {
            'id': self.id,
            'kind': self.kind.value,
            'title': self.title,
            'description': self.description,
            'genres': list(self.genres or []),
            'release_year': self.release_year,
            'rating': self.rating,
            'poster_url': self.poster_url,
            'cast': list(self.cast or []),
        }


class Movie(ContentMixin, Base):
    """A movie in the catalog."""
    __tablename__ = 'movies'

    kind = ContentKind.MOVIE

    director = Column(String(255), nullable=True)
    duration = Column(Integer, nullable=True)  # minutes

    __table_args__ = (
        Index("idx_movies_rating", "rating"),
        Index("idx_movies_release_year", "release_year"),
    )

    def to_dict(self) -> dict:
        data = self._base_dict()
        data.update({
            'director': self.director,
            'duration': self.duration,
        })
        return data

    def __repr__(self):
        return f"<Movie(id={self.id}, title='{self.title}')>"


class TvShow(ContentMixin, Base):
    """A TV show in the catalog."""
    __tablename__ = 'tv_shows'

    kind = ContentKind.TV

    creator = Column(String(255), nullable=True)
    seasons = Column(Integer, nullable=True)
    status = Column(String(20), nullable=True)  # one of TV_SHOW_STATUSES

    __table_args__ = (
        Index("idx_tv_shows_rating", "rating"),
        Index("idx_tv_shows_release_year", "release_year"),
        Index("idx_tv_shows_status", "status"),
    )

    def to_dict(self) -> dict:
        data = self._base_dict()
        data.update({
            'creator': self.creator,
            'seasons': self.seasons,
            'status': self.status,
        })
        return data

    def __repr__(self):
        return f"<TvShow(id={self.id}, title='{self.title}')>"


CONTENT_MODELS = {
    ContentKind.MOVIE: Movie,
    ContentKind.TV: TvShow,
}


def model_for_kind(kind: ContentKind) -> type[Movie] | type[TvShow]:
    """Get the table model holding content of the given kind."""
    return CONTENT_MODELS[ContentKind.parse(kind)]
