"""Rating, favorite and watchlist endpoints."""
import azure.functions as func
import logging

from media_catalog_service.blueprints.http_utils import (
    error_response,
    get_user_id,
    handle_errors,
    json_response,
    parse_content_ref,
)
from media_catalog_service.services import InteractionService

bp = func.Blueprint()

interaction_service = InteractionService()

logger = logging.getLogger(__name__)


@bp.route(route="content/{kind}/{content_id}/rating", methods=["PUT"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def rate_content(req: func.HttpRequest) -> func.HttpResponse:
    """
    Rate a movie or TV show.

    Body:
        - stars: 1 to 5 (required)
        - review: Optional review text
    """
    ref = parse_content_ref(req)

    try:
        body = req.get_json()
    except ValueError:
        return error_response("Request body must be JSON", 400)

    if not isinstance(body, dict) or 'stars' not in body:
        return error_response("stars is required", 400)

    rating = interaction_service.rate_content(
        get_user_id(req), ref, body['stars'], review=body.get('review')
    )
    return json_response(rating)


@bp.route(route="content/{kind}/{content_id}/favorite", methods=["PUT"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def add_to_favorites(req: func.HttpRequest) -> func.HttpResponse:
    """Add a movie or TV show to the caller's favorites."""
    ref = parse_content_ref(req)
    added = interaction_service.add_to_favorites(get_user_id(req), ref)
    return json_response({"is_favorite": True, "changed": added})


@bp.route(route="content/{kind}/{content_id}/favorite", methods=["DELETE"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def remove_from_favorites(req: func.HttpRequest) -> func.HttpResponse:
    """Remove a movie or TV show from the caller's favorites."""
    ref = parse_content_ref(req)
    removed = interaction_service.remove_from_favorites(get_user_id(req), ref)
    return json_response({"is_favorite": False, "changed": removed})


@bp.route(route="content/{kind}/{content_id}/watchlist", methods=["PUT"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def add_to_watchlist(req: func.HttpRequest) -> func.HttpResponse:
    """Add a movie or TV show to the caller's watchlist."""
    ref = parse_content_ref(req)
    added = interaction_service.add_to_watchlist(get_user_id(req), ref)
    return json_response({"in_watchlist": True, "changed": added})


@bp.route(route="content/{kind}/{content_id}/watchlist", methods=["DELETE"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def remove_from_watchlist(req: func.HttpRequest) -> func.HttpResponse:
    """Remove a movie or TV show from the caller's watchlist."""
    ref = parse_content_ref(req)
    removed = interaction_service.remove_from_watchlist(get_user_id(req), ref)
    return json_response({"in_watchlist": False, "changed": removed})


@bp.route(route="content/{kind}/{content_id}/status", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def get_content_status(req: func.HttpRequest) -> func.HttpResponse:
    """Get whether the caller has favorited, watchlisted or rated an item."""
    ref = parse_content_ref(req)
    return json_response(interaction_service.get_user_content_status(get_user_id(req), ref))


@bp.route(route="me/ratings", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def get_user_ratings(req: func.HttpRequest) -> func.HttpResponse:
    """Get content the caller has rated."""
    return json_response({"ratings": interaction_service.get_user_ratings(get_user_id(req))})


@bp.route(route="me/favorites", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def get_user_favorites(req: func.HttpRequest) -> func.HttpResponse:
    """Get the caller's favorites."""
    return json_response({"favorites": interaction_service.get_user_favorites(get_user_id(req))})


@bp.route(route="me/watchlist", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def get_user_watchlist(req: func.HttpRequest) -> func.HttpResponse:
    """Get the caller's watchlist."""
    return json_response({"watchlist": interaction_service.get_user_watchlist(get_user_id(req))})
