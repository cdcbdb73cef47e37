"""Catalog browsing and search endpoints."""
import azure.functions as func
import logging

from media_catalog_service.blueprints.http_utils import (
    error_response,
    handle_errors,
    json_response,
    parse_content_ref,
    parse_limit,
)
from media_catalog_service.services import CatalogService

bp = func.Blueprint()

catalog_service = CatalogService()

logger = logging.getLogger(__name__)


@bp.route(route="content", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def get_all_content(req: func.HttpRequest) -> func.HttpResponse:
    """
    Browse the catalog one page at a time.

    Query Parameters:
        - type: movie, tv or all (default: all)
        - genre: Only items with this genre
        - sort_by: rating, year or title (default: rating)
        - cursor: continue_cursor from the previous page
        - num_items: Page size (default: 20, max: 50)
    """
    result = catalog_service.get_all_content(
        content_type=req.params.get('type') or 'all',
        genre=req.params.get('genre') or None,
        sort_by=req.params.get('sort_by') or 'rating',
        cursor=req.params.get('cursor') or None,
        num_items=parse_limit(req, 'num_items')
    )
    return json_response(result)


@bp.route(route="content/search", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def search_content(req: func.HttpRequest) -> func.HttpResponse:
    """
    Search content by title.

    Query Parameters:
        - q: Title text (required)
        - type: movie, tv or all (default: all)
    """
    query = (req.params.get('q') or '').strip()
    if not query:
        return error_response("q is required", 400)

    results = catalog_service.search_content(query, content_type=req.params.get('type') or 'all')
    return json_response({"query": query, "count": len(results), "results": results})


@bp.route(route="content/top-rated", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def get_top_rated(req: func.HttpRequest) -> func.HttpResponse:
    """
    Get the highest rated content.

    Query Parameters:
        - type: movie, tv or all (default: all)
        - limit: Number of items (default: 10, max: 50)
    """
    limit = parse_limit(req) or 10
    results = catalog_service.get_top_rated(content_type=req.params.get('type') or 'all', limit=limit)
    return json_response({"count": len(results), "results": results})


# noinspection PyUnusedLocal
@bp.route(route="content/genres", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def get_genres(req: func.HttpRequest) -> func.HttpResponse:
    """Get every genre in the catalog."""
    return json_response({"genres": catalog_service.get_genres()})


@bp.route(route="content/{kind}/{content_id}", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def get_content_by_id(req: func.HttpRequest) -> func.HttpResponse:
    """Get a single movie or TV show."""
    ref = parse_content_ref(req)

    content = catalog_service.get_content(ref)
    if content is None:
        return error_response(f"Content {ref} not found", 404, "not_found")

    return json_response(content)
