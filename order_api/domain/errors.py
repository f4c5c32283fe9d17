# order_api/domain/errors.py


class ServiceError(Exception):
    """Bazowy blad domenowy. Kazdy ma staly status HTTP i statyczny komunikat."""

    status_code = 500
    detail = "Something unexpected happened. Please retry"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class Unauthorized(ServiceError):
    status_code = 401
    detail = "Provide proper access token"


class NotFound(ServiceError):
    status_code = 404
    detail = "Resource not found"


class Conflict(ServiceError):
    status_code = 409
    detail = "User with email already present"


class Forbidden(ServiceError):
    status_code = 403
    detail = "email and/or password not correct."


class InvalidOrder(ServiceError):
    status_code = 422
    detail = "Order must contain at least one item"


class InternalError(ServiceError):
    pass


class TokenError(Exception):
    """Token nie przeszedl weryfikacji (podpis, format albo wygasniecie)."""
