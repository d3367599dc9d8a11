"""
Utilities module - Common helpers for API responses and exceptions.
"""

from common.utils.responses import (
    success_response,
    error_response,
    validation_error_response,
    utc_timestamp,
)
from common.utils.exceptions import (
    APIException,
    UnauthorizedException,
    NotFoundException,
    RateLimitException,
    InternalServerException,
)

__all__ = [
    "success_response",
    "error_response",
    "validation_error_response",
    "utc_timestamp",
    "APIException",
    "UnauthorizedException",
    "NotFoundException",
    "RateLimitException",
    "InternalServerException",
]
