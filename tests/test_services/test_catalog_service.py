"""Unit tests for CatalogService."""
import pytest

from media_catalog_service.errors import InvalidCursorError
from media_catalog_service.models import ContentRef, Movie
from media_catalog_service.services.catalog_service import CatalogService, sort_content


def titles(items):
    return [item['title'] for item in items]


class TestSortContent:
    """Tests for sort_content function."""

    def test_unknown_sort_raises(self):
        with pytest.raises(ValueError, match="sort_by must be one of"):
            sort_content([], 'popularity')

    def test_title_sort_is_case_insensitive(self):
        items = [
            Movie(title='zeta', release_year=2000, rating=1.0),
            Movie(title='Alpha', release_year=2000, rating=1.0),
            Movie(title='beta', release_year=2000, rating=1.0),
        ]

        assert [m.title for m in sort_content(items, 'title')] == ['Alpha', 'beta', 'zeta']


class TestGetAllContent:
    """Tests for get_all_content method."""

    def test_first_page_sorted_by_rating(self, catalog_service, sample_catalog):
        # Act
        result = catalog_service.get_all_content(num_items=4)

        # Assert
        assert titles(result['page']) == [
            'Breaking Bad', 'The Shawshank Redemption', 'The Office', 'Inception'
        ]
        assert result['is_done'] is False
        assert result['continue_cursor'] == '4'

    def test_second_page_is_done(self, catalog_service, sample_catalog):
        # Act
        result = catalog_service.get_all_content(cursor='4', num_items=4)

        # Assert
        assert titles(result['page']) == ['Forrest Gump', 'Stranger Things']
        assert result['is_done'] is True
        assert result['continue_cursor'] is None

    def test_pages_cover_catalog_exactly_once(self, catalog_service, sample_catalog):
        # Arrange
        full = titles(catalog_service.get_all_content(sort_by='title', num_items=50)['page'])
        collected = []
        cursor = None

        # Act
        while True:
            result = catalog_service.get_all_content(sort_by='title', cursor=cursor, num_items=4)
            collected.extend(titles(result['page']))
            if result['is_done']:
                break
            cursor = result['continue_cursor']

        # Assert
        assert collected == full
        assert len(set(collected)) == 6

    def test_filter_by_type_and_sort_by_year(self, catalog_service, sample_catalog):
        """Test that 1994 ties keep store order."""
        # Act
        result = catalog_service.get_all_content(content_type='movie', sort_by='year', num_items=10)

        # Assert
        assert titles(result['page']) == ['Inception', 'The Shawshank Redemption', 'Forrest Gump']

    def test_sort_by_title(self, catalog_service, sample_catalog):
        result = catalog_service.get_all_content(sort_by='title', num_items=10)

        assert titles(result['page']) == [
            'Breaking Bad', 'Forrest Gump', 'Inception',
            'Stranger Things', 'The Office', 'The Shawshank Redemption'
        ]

    def test_filter_by_genre(self, catalog_service, sample_catalog):
        # Act
        result = catalog_service.get_all_content(genre='Drama', num_items=10)

        # Assert
        assert titles(result['page']) == [
            'Breaking Bad', 'The Shawshank Redemption', 'Forrest Gump', 'Stranger Things'
        ]

    def test_genre_must_match_exactly(self, catalog_service, sample_catalog):
        result = catalog_service.get_all_content(genre='Dram', num_items=10)

        assert result == {'page': [], 'is_done': True, 'continue_cursor': None}

    def test_reads_catalog_fresh_on_every_call(self, catalog_service, sample_catalog, test_db_session):
        # Arrange
        catalog_service.get_all_content(num_items=2)
        test_db_session.add(Movie(title='Perfect', release_year=2024, rating=10.0, genres=['Drama']))
        test_db_session.commit()

        # Act
        result = catalog_service.get_all_content(num_items=2)

        # Assert
        assert titles(result['page'])[0] == 'Perfect'

    def test_default_page_size_from_config(self, catalog_service, sample_catalog, monkeypatch):
        monkeypatch.setenv('CATALOG_PAGE_SIZE', '5')

        result = catalog_service.get_all_content()

        assert len(result['page']) == 5
        assert result['continue_cursor'] == '5'

    def test_invalid_cursor_raises(self, catalog_service, sample_catalog):
        with pytest.raises(InvalidCursorError):
            catalog_service.get_all_content(cursor='abc')

    def test_invalid_type_raises(self, catalog_service):
        with pytest.raises(ValueError):
            catalog_service.get_all_content(content_type='podcast')

    def test_invalid_sort_raises(self, catalog_service, sample_catalog):
        with pytest.raises(ValueError):
            catalog_service.get_all_content(sort_by='popularity')


class TestSearchContent:
    """Tests for search_content method."""

    def test_matches_titles_across_kinds_sorted_by_rating(self, catalog_service, sample_catalog):
        result = catalog_service.search_content('the')

        assert titles(result) == ['The Shawshank Redemption', 'The Office']

    def test_filter_by_type(self, catalog_service, sample_catalog):
        result = catalog_service.search_content('the', content_type='tv')

        assert titles(result) == ['The Office']

    def test_blank_query_returns_empty(self, catalog_service, sample_catalog):
        assert catalog_service.search_content('   ') == []


class TestGetContent:
    """Tests for get_content method."""

    def test_existing(self, catalog_service, sample_catalog):
        result = catalog_service.get_content(ContentRef.show(2))

        assert result['title'] == 'The Office'
        assert result['kind'] == 'tv'

    def test_missing(self, catalog_service, sample_catalog):
        assert catalog_service.get_content(ContentRef.show(42)) is None


class TestGetTopRated:
    """Tests for get_top_rated method."""

    def test_top_rated_shows(self, catalog_service, sample_catalog):
        result = catalog_service.get_top_rated(content_type='tv', limit=2)

        assert titles(result) == ['Breaking Bad', 'The Office']

    def test_top_rated_all(self, catalog_service, sample_catalog):
        result = catalog_service.get_top_rated(limit=2)

        assert titles(result) == ['Breaking Bad', 'The Shawshank Redemption']


class TestGetGenres:
    """Tests for get_genres method."""

    def test_get_genres(self, catalog_service, sample_catalog):
        result = catalog_service.get_genres()

        assert 'Comedy' in result
        assert result == sorted(result)


class TestCatalogServiceInit:
    """Tests for CatalogService initialization."""

    def test_custom_session_factory(self, session_factory):
        service = CatalogService(session_factory=session_factory)

        assert service.session_factory is session_factory
