"""Recommendation and similar-content endpoints."""
import azure.functions as func
import logging

from media_catalog_service.blueprints.http_utils import (
    get_user_id,
    handle_errors,
    json_response,
    parse_content_ref,
    parse_limit,
)
from media_catalog_service.services import RecommendationService

# Initialize blueprint
bp = func.Blueprint()

# Initialize service (singleton pattern)
recommendation_service = RecommendationService()

logger = logging.getLogger(__name__)


@bp.route(route="recommendations", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def get_recommendations(req: func.HttpRequest) -> func.HttpResponse:
    """
    Get recommendations for the caller.

    Anonymous callers get the top rated content.

    Query Parameters:
        - limit: Number of recommendations (default: 10, max: 50)
    """
    user_id = get_user_id(req)
    limit = parse_limit(req)

    recommendations = recommendation_service.get_recommendations(user_id=user_id, limit=limit)

    return json_response({
        "personalized": user_id is not None,
        "count": len(recommendations),
        "recommendations": recommendations
    })


@bp.route(route="content/{kind}/{content_id}/similar", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def get_similar_content(req: func.HttpRequest) -> func.HttpResponse:
    """
    Get content of the same kind similar to the given item.

    Query Parameters:
        - limit: Number of results (default: 6, max: 50)
    """
    ref = parse_content_ref(req)
    limit = parse_limit(req)

    similar = recommendation_service.get_similar_content(ref, limit=limit)

    return json_response({
        "kind": ref.kind.value,
        "content_id": ref.id,
        "count": len(similar),
        "similar": similar
    })


# noinspection PyUnusedLocal
@bp.route(route="health", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def health_check(req: func.HttpRequest) -> func.HttpResponse:
    """Health check endpoint."""
    return json_response({
        "status": "healthy",
        "service": "media-catalog-service",
        "version": "1.0.0"
    })
