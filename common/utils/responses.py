"""
Standard API response helpers.

Provides consistent response bodies for success and error cases. Every
body carries an ISO 8601 UTC timestamp.

Example:
    from common.utils import success_response, error_response

    body = success_response({"id": "abc"}, message="Registered successfully")
    body = error_response("Not found", code="notFound")
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def utc_timestamp() -> str:
    """Current time as an ISO 8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def success_response(
    data: Any = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a standard success response.

    Args:
        data: The response data (can be dict, list, or any serializable type)
        message: Human-readable success message

    Returns:
        Dictionary with success=True, message, data and timestamp
    """
    return {
        "success": True,
        "message": message,
        "data": data,
        "timestamp": utc_timestamp(),
    }


def error_response(
    message: str,
    code: Optional[str] = None,
    retry_after: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Create a standard error response.

    Args:
        message: Human-readable error message
        code: Machine-readable error code (e.g., "emailExists")
        retry_after: Seconds until the client may retry (rate limits)

    Returns:
        Dictionary with success=False and error info
    """
    response: Dict[str, Any] = {
        "success": False,
        "error": message,
        "errorCode": code,
    }

    if retry_after is not None:
        response["retryAfter"] = retry_after

    response["timestamp"] = utc_timestamp()
    return response


def validation_error_response(
    message: str,
    validation_errors: Dict[str, List[str]],
) -> Dict[str, Any]:
    """
    Create a validation error response.

    Args:
        message: Human-readable summary
        validation_errors: Field name -> list of messages

    Returns:
        Dictionary with success=False and per-field errors
    """
    return {
        "success": False,
        "error": message,
        "validationErrors": validation_errors,
        "timestamp": utc_timestamp(),
    }
