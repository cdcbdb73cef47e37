"""Helpers shared by the HTTP blueprints."""
import functools
import json
import logging
from typing import Any, Callable, Optional

import azure.functions as func

from media_catalog_service.errors import CatalogError
from media_catalog_service.models import ContentRef

logger = logging.getLogger(__name__)

# Set by App Service authentication for signed-in callers
USER_ID_HEADER = "x-ms-client-principal-id"

MAX_LIMIT = 50


def json_response(body: Any, status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(body, default=str),
        status_code=status_code,
        mimetype="application/json"
    )


def error_response(message: str, status_code: int, code: Optional[str] = None) -> func.HttpResponse:
    body = {"error": message}
    if code:
        body["code"] = code
    return json_response(body, status_code)


def get_user_id(req: func.HttpRequest) -> Optional[str]:
    """Get the signed-in user's id, or None for anonymous callers."""
    user_id = (req.headers or {}).get(USER_ID_HEADER)
    return user_id.strip() if user_id and user_id.strip() else None


def parse_limit(req: func.HttpRequest, name: str = "limit") -> Optional[int]:
    """
    Parse an optional 1..MAX_LIMIT integer query parameter.

    Raises:
        ValueError: If present but not an integer in range
    """
    raw = req.params.get(name)
    if raw is None or raw == "":
        return None

    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer") from None

    if value < 1 or value > MAX_LIMIT:
        raise ValueError(f"{name} must be between 1 and {MAX_LIMIT}")
    return value


def parse_content_ref(req: func.HttpRequest) -> ContentRef:
    """
    Build a content reference from the kind and content_id route params.

    Raises:
        ValueError: If either is missing or invalid
    """
    kind = req.route_params.get('kind')
    content_id = req.route_params.get('content_id')
    if not kind or not content_id:
        raise ValueError("kind and content_id are required")
    return ContentRef.parse(kind, content_id)


def handle_errors(handler: Callable[[func.HttpRequest], func.HttpResponse]):
    """Translate exceptions raised by a handler into JSON error responses."""

    @functools.wraps(handler)
    def wrapper(req: func.HttpRequest) -> func.HttpResponse:
        try:
            return handler(req)
        except CatalogError as e:
            return error_response(str(e), e.status, e.code)
        except ValueError as e:
            return error_response(str(e), 400)
        except Exception as e:
            logger.error(f"Error in {handler.__name__}: {str(e)}", exc_info=True)
            return error_response("Internal server error", 500)

    return wrapper
