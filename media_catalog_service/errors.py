"""Domain errors raised by the catalog services."""


class CatalogError(Exception):
    code: str = "catalog_error"
    status: int = 400

    def __init__(self, message: str = "", *, code: str | None = None, status: int | None = None):
        super().__init__(message or self.__class__.__name__)
        if code:
            self.code = code
        if status:
            self.status = status


class UnauthenticatedError(CatalogError):
    code = "unauthenticated"
    status = 401


class ContentNotFoundError(CatalogError):
    code = "not_found"
    status = 404


class InvalidCursorError(CatalogError):
    code = "invalid_cursor"
    status = 400


class InvalidRatingError(CatalogError):
    code = "invalid_rating"
    status = 422
