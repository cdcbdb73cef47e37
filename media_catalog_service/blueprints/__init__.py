"""Azure Functions HTTP blueprints"""

from media_catalog_service.blueprints.catalog_bp import bp as catalog_bp
from media_catalog_service.blueprints.interactions_bp import bp as interactions_bp
from media_catalog_service.blueprints.recommendations_bp import bp as recommendations_bp

__all__ = ["catalog_bp", "interactions_bp", "recommendations_bp"]
