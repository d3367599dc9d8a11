"""
Locale middleware for request-scoped locale negotiation.

Attaches the negotiated locale and a bound response builder to requests.
"""

import logging
from typing import Callable

from fastapi import Request

from astropal.responses import LocalizedApiResponses

logger = logging.getLogger(__name__)


class LocaleMiddleware:
    """
    FastAPI middleware for request-scoped localization.
    Attaches request.state.locale and request.state.responder to all requests.
    """

    def __init__(self, get_responses: Callable[[], LocalizedApiResponses]):
        """
        Initialize LocaleMiddleware.

        Args:
            get_responses: Returns the response builder; resolved per request
                because services are created during application startup
        """
        self._get_responses = get_responses

    async def __call__(self, request: Request, call_next: Callable):
        """
        Middleware function that attaches the locale to the request.

        Attaches:
            - request.state.locale: negotiated locale code
            - request.state.responder: LocaleResponder bound to that locale
        """
        responses = self._get_responses()
        locale = responses.extract_locale_from_request(request)
        request.state.locale = locale
        request.state.responder = responses.bind(locale)

        response = await call_next(request)
        if "content-language" not in response.headers:
            response.headers["Content-Language"] = locale
        return response
