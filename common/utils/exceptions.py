"""
HTTP exceptions carrying localizable error codes.

Each exception's code is a key under the locale document's `api.errors`
section. The message is English and only used for logs and as the
fallback when no localized body can be built.

Example:
    from common.utils import NotFoundException

    @app.get("/subscriptions/{id}")
    async def get_subscription(id: str):
        raise NotFoundException("Subscription not found", code="subscriptionNotFound")
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base API exception.

    Subclasses set the default status and code; either can be overridden
    per raise.
    """

    default_status: int = 500
    default_code: str = "serverError"
    default_message: str = "Server error"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        status_code: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Args:
            message: English fallback message
            code: Error code, a key under api.errors
            details: Extra context for logs, never sent to clients
            status_code: Overrides the class default status
            headers: Extra response headers
        """
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details

        super().__init__(
            status_code=status_code or self.default_status,
            detail={"message": self.message, "code": self.code},
            headers=headers,
        )


class UnauthorizedException(APIException):
    """401 - missing or invalid credentials."""
    default_status = 401
    default_code = "unauthorized"
    default_message = "Unauthorized"


class NotFoundException(APIException):
    """404 - resource or locale does not exist."""
    default_status = 404
    default_code = "notFound"
    default_message = "Not found"


class RateLimitException(APIException):
    """429 - too many requests; carries the Retry-After seconds."""
    default_status = 429
    default_code = "rateLimited"
    default_message = "Too many requests"

    def __init__(self, retry_after: int, message: Optional[str] = None):
        self.retry_after = retry_after
        super().__init__(message, headers={"Retry-After": str(retry_after)})


class InternalServerException(APIException):
    """500 - unexpected server error."""
