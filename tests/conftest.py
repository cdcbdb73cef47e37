"""Shared test fixtures and configuration for pytest."""
import os

# The session module builds its engine at import time
os.environ.setdefault('DATABASE_URL', 'sqlite:///:memory:')

import pytest
from typing import Dict, List
from unittest.mock import Mock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from media_catalog_service.models.base import Base
from media_catalog_service.models import (
    Movie,
    TvShow,
    UserFavorite,
    UserRating,
    WatchlistEntry,
)


# ===== Database Fixtures =====

@pytest.fixture(scope="function")
def test_db_engine(tmp_path):
    """Create a file-backed SQLite database engine for testing.

    A file lets the fixture session and per-call service sessions share data.
    """
    engine = create_engine(f"sqlite:///{tmp_path / 'catalog.db'}", echo=False)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_db_engine):
    """Session factory handed to services under test."""
    return sessionmaker(bind=test_db_engine, expire_on_commit=False)


@pytest.fixture(scope="function")
def test_db_session(session_factory):
    """Create a database session for testing."""
    session = session_factory()
    yield session
    session.close()


# ===== Sample Data Fixtures =====

@pytest.fixture
def sample_movies_data() -> List[Dict]:
    """Sample movie rows for testing."""
    return [
        {
            'title': 'The Shawshank Redemption',
            'description': 'Two imprisoned men bond over a number of years.',
            'genres': ['Drama', 'Crime'],
            'release_year': 1994,
            'rating': 9.3,
            'director': 'Frank Darabont',
            'cast': ['Tim Robbins', 'Morgan Freeman'],
            'duration': 142
        },
        {
            'title': 'Inception',
            'description': 'A thief plants an idea through shared dreams.',
            'genres': ['Action', 'Sci-Fi', 'Thriller'],
            'release_year': 2010,
            'rating': 8.8,
            'director': 'Christopher Nolan',
            'cast': ['Leonardo DiCaprio'],
            'duration': 148
        },
        {
            'title': 'Forrest Gump',
            'description': 'A kind man drifts through decades of history.',
            'genres': ['Drama', 'Romance'],
            'release_year': 1994,
            'rating': 8.8,
            'director': 'Robert Zemeckis',
            'cast': ['Tom Hanks'],
            'duration': 142
        }
    ]


@pytest.fixture
def sample_tv_shows_data() -> List[Dict]:
    """Sample TV show rows for testing."""
    return [
        {
            'title': 'Breaking Bad',
            'description': 'A chemistry teacher turns to cooking meth.',
            'genres': ['Crime', 'Drama', 'Thriller'],
            'release_year': 2008,
            'rating': 9.5,
            'creator': 'Vince Gilligan',
            'cast': ['Bryan Cranston', 'Aaron Paul'],
            'seasons': 5,
            'status': 'completed'
        },
        {
            'title': 'The Office',
            'description': 'A mockumentary about office workers.',
            'genres': ['Comedy'],
            'release_year': 2005,
            'rating': 8.9,
            'creator': 'Greg Daniels',
            'cast': ['Steve Carell'],
            'seasons': 9,
            'status': 'completed'
        },
        {
            'title': 'Stranger Things',
            'description': 'A small town uncovers secret experiments.',
            'genres': ['Drama', 'Fantasy', 'Horror'],
            'release_year': 2016,
            'rating': 8.7,
            'creator': 'The Duffer Brothers',
            'cast': ['Millie Bobby Brown'],
            'seasons': 4,
            'status': 'ongoing'
        }
    ]


@pytest.fixture
def sample_catalog(test_db_session, sample_movies_data, sample_tv_shows_data) -> Dict[str, List]:
    """Create sample movies and TV shows in the test database.

    Movies get ids 1-3 and shows get ids 1-3, so ids collide across kinds.
    """
    movies = [Movie(**data) for data in sample_movies_data]
    tv_shows = [TvShow(**data) for data in sample_tv_shows_data]

    test_db_session.add_all(movies)
    test_db_session.add_all(tv_shows)
    test_db_session.commit()

    return {'movies': movies, 'tv_shows': tv_shows}


@pytest.fixture
def add_rating(test_db_session):
    """Insert a rating row directly."""
    def _add(user_id, ref, stars, review=None):
        row = UserRating(
            user_id=user_id,
            content_kind=ref.kind.value,
            content_id=ref.id,
            stars=stars,
            review=review
        )
        test_db_session.add(row)
        test_db_session.commit()
        return row
    return _add


@pytest.fixture
def add_favorite(test_db_session):
    """Insert a favorite row directly."""
    def _add(user_id, ref):
        row = UserFavorite(user_id=user_id, content_kind=ref.kind.value, content_id=ref.id)
        test_db_session.add(row)
        test_db_session.commit()
        return row
    return _add


@pytest.fixture
def add_watchlist_entry(test_db_session):
    """Insert a watchlist row directly."""
    def _add(user_id, ref):
        row = WatchlistEntry(user_id=user_id, content_kind=ref.kind.value, content_id=ref.id)
        test_db_session.add(row)
        test_db_session.commit()
        return row
    return _add


# ===== Repository Fixtures =====

@pytest.fixture
def content_repository(test_db_session):
    """Create ContentRepository with test database session."""
    from media_catalog_service.repos import ContentRepository
    return ContentRepository(test_db_session)


@pytest.fixture
def interaction_repository(test_db_session):
    """Create InteractionRepository with test database session."""
    from media_catalog_service.repos import InteractionRepository
    return InteractionRepository(test_db_session)


# ===== Service Fixtures =====

@pytest.fixture
def recommendation_service(session_factory):
    """RecommendationService bound to the test database."""
    from media_catalog_service.services import RecommendationService
    from media_catalog_service.scoring import PreferenceExtractor
    return RecommendationService(
        session_factory=session_factory,
        preference_extractor=PreferenceExtractor(min_stars=4)
    )


@pytest.fixture
def catalog_service(session_factory):
    """CatalogService bound to the test database."""
    from media_catalog_service.services import CatalogService
    return CatalogService(session_factory=session_factory)


@pytest.fixture
def interaction_service(session_factory):
    """InteractionService bound to the test database."""
    from media_catalog_service.services import InteractionService
    return InteractionService(session_factory=session_factory)


# ===== Configuration Fixtures =====

@pytest.fixture
def mock_config(monkeypatch):
    """Mock configuration values."""
    monkeypatch.setenv('DATABASE_URL', 'sqlite:///:memory:')
    monkeypatch.setenv('RECOMMENDATION_LIMIT', '10')
    monkeypatch.setenv('SIMILAR_CONTENT_LIMIT', '6')
    monkeypatch.setenv('CATALOG_PAGE_SIZE', '20')
    monkeypatch.setenv('PREFERENCE_MIN_STARS', '4')


# ===== Azure Functions Fixtures =====

@pytest.fixture
def mock_http_request():
    """Mock Azure Functions HttpRequest."""
    mock_req = Mock()
    mock_req.route_params = {}
    mock_req.params = {}
    mock_req.headers = {}
    mock_req.get_json.return_value = {}
    return mock_req
