"""
Localized API responses.

Builds JSON responses whose user-facing messages come from the locale
document's `api` and `validation` sections. Builders never raise: if a
message cannot be produced the response falls back to a fixed English
body with the same shape.

Example:
    responses = LocalizedApiResponses(locale_service)
    return await responses.build_error_response("emailExists", "es-ES")
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from fastapi.responses import JSONResponse
from starlette.requests import Request

from common.utils import (
    error_response,
    success_response,
    validation_error_response,
)
from config.i18n_config import (
    DEFAULT_ERROR_STATUS,
    ERROR_STATUS_CODES,
    FALLBACK_ERROR_MESSAGE,
    FALLBACK_RATE_LIMIT_MESSAGE,
    FALLBACK_SUCCESS_MESSAGE,
    FALLBACK_VALIDATION_MESSAGE,
)
from astropal.locale import LocaleService

logger = logging.getLogger(__name__)

ACCEPT_LANGUAGE_HEADER = "Accept-Language"
USER_LOCALE_HEADER = "X-User-Locale"

# Fallback bodies are fixed English copy
FALLBACK_HEADERS = {"Content-Language": "en"}


def get_error_status_code(error_type: str) -> int:
    """HTTP status for an api.errors code; unknown codes are 500."""
    return ERROR_STATUS_CODES.get(error_type, DEFAULT_ERROR_STATUS)


def parse_accept_language(header: str) -> List[str]:
    """
    Language tags of an Accept-Language header, most preferred first.

    "es-ES,es;q=0.9,en;q=0.8" -> ["es-ES", "es", "en"]
    Entries with equal weight keep their header order.
    """
    weighted: List[Tuple[float, str]] = []
    for entry in header.split(","):
        parts = entry.strip().split(";")
        tag = parts[0].strip()
        if not tag or tag == "*":
            continue
        quality = 1.0
        for param in parts[1:]:
            name, _, value = param.strip().partition("=")
            if name.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality > 0:
            weighted.append((quality, tag))
    weighted.sort(key=lambda item: item[0], reverse=True)
    return [tag for _, tag in weighted]


class LocaleResponder:
    """Response builders bound to one request's locale."""

    def __init__(self, responses: "LocalizedApiResponses", locale: str):
        self._responses = responses
        self.locale = locale

    async def error(self, error_type: str, variables: Optional[Dict[str, Any]] = None) -> JSONResponse:
        return await self._responses.build_error_response(error_type, self.locale, variables)

    async def success(
        self,
        success_type: str,
        data: Any = None,
        variables: Optional[Dict[str, Any]] = None,
    ) -> JSONResponse:
        return await self._responses.build_success_response(
            success_type, data, self.locale, variables
        )

    async def validation_error(self, field_errors: Dict[str, List[str]]) -> JSONResponse:
        return await self._responses.build_validation_error_response(field_errors, self.locale)

    async def rate_limit(self, retry_after: int) -> JSONResponse:
        return await self._responses.build_rate_limit_response(retry_after, self.locale)


class LocalizedApiResponses:
    """Builds localized success, error, validation and rate-limit responses."""

    def __init__(self, locale_service: LocaleService):
        self._locale_service = locale_service

    @property
    def locale_service(self) -> LocaleService:
        return self._locale_service

    def bind(self, locale: str) -> LocaleResponder:
        return LocaleResponder(self, locale)

    async def build_error_response(
        self,
        error_type: str,
        locale: Optional[str] = None,
        variables: Optional[Dict[str, Any]] = None,
    ) -> JSONResponse:
        """
        Error body {success: false, error, errorCode, timestamp}.

        Status comes from the error status table.
        """
        try:
            document = await self._locale_service.load_locale(locale)
            message = self._locale_service.get_token(
                document, f"api.errors.{error_type}", variables
            )
            logger.warning(f"API error response: {error_type} (locale={document.locale})")
            return JSONResponse(
                status_code=get_error_status_code(error_type),
                content=error_response(message, code=error_type),
                headers={"Content-Language": document.locale},
            )
        except Exception as e:
            logger.error(
                f"Failed to build localized error response: {error_type} "
                f"(locale={locale}): {e}"
            )
            return JSONResponse(
                status_code=500,
                content=error_response(FALLBACK_ERROR_MESSAGE, code=error_type),
                headers=FALLBACK_HEADERS,
            )

    async def build_success_response(
        self,
        success_type: str,
        data: Any = None,
        locale: Optional[str] = None,
        variables: Optional[Dict[str, Any]] = None,
    ) -> JSONResponse:
        """Success body {success: true, message, data, timestamp}, status 200."""
        try:
            document = await self._locale_service.load_locale(locale)
            message = self._locale_service.get_token(
                document, f"api.success.{success_type}", variables
            )
            logger.info(f"API success response: {success_type} (locale={document.locale})")
            return JSONResponse(
                status_code=200,
                content=success_response(data, message=message),
                headers={"Content-Language": document.locale},
            )
        except Exception as e:
            logger.error(
                f"Failed to build localized success response: {success_type} "
                f"(locale={locale}): {e}"
            )
            return JSONResponse(
                status_code=200,
                content=success_response(data, message=FALLBACK_SUCCESS_MESSAGE),
                headers=FALLBACK_HEADERS,
            )

    async def build_validation_error_response(
        self,
        field_errors: Mapping[str, List[str]],
        locale: Optional[str] = None,
    ) -> JSONResponse:
        """
        Validation body {success: false, error, validationErrors, timestamp}, status 400.

        Each error key is looked up as `validation.{field}.{key}` first and
        `validation.{key}` second.
        """
        try:
            document = await self._locale_service.load_locale(locale)
            localized: Dict[str, List[str]] = {}
            for field, keys in field_errors.items():
                messages = []
                for key in keys:
                    specific = self._locale_service.resolve_token(
                        document, f"validation.{field}.{key}"
                    )
                    if specific.found:
                        messages.append(specific.value)
                    else:
                        messages.append(
                            self._locale_service.get_token(document, f"validation.{key}")
                        )
                localized[field] = messages

            message = self._locale_service.get_token(document, "api.errors.invalidInput")
            logger.warning(
                f"Validation error response: {len(field_errors)} field(s) "
                f"(locale={document.locale})"
            )
            return JSONResponse(
                status_code=400,
                content=validation_error_response(message, localized),
                headers={"Content-Language": document.locale},
            )
        except Exception as e:
            logger.error(f"Failed to build localized validation response (locale={locale}): {e}")
            return JSONResponse(
                status_code=400,
                content=validation_error_response(
                    FALLBACK_VALIDATION_MESSAGE, {k: list(v) for k, v in field_errors.items()}
                ),
                headers=FALLBACK_HEADERS,
            )

    async def build_rate_limit_response(
        self,
        retry_after: int,
        locale: Optional[str] = None,
    ) -> JSONResponse:
        """Rate-limit error body plus retryAfter, status 429 with Retry-After."""
        try:
            document = await self._locale_service.load_locale(locale)
            message = self._locale_service.get_token(document, "api.errors.rateLimited")
            logger.warning(f"Rate limit response: retry after {retry_after}s (locale={document.locale})")
            return JSONResponse(
                status_code=429,
                content=error_response(message, code="rateLimited", retry_after=retry_after),
                headers={
                    "Content-Language": document.locale,
                    "Retry-After": str(retry_after),
                },
            )
        except Exception as e:
            logger.error(f"Failed to build localized rate limit response (locale={locale}): {e}")
            return JSONResponse(
                status_code=429,
                content=error_response(
                    FALLBACK_RATE_LIMIT_MESSAGE, code="rateLimited", retry_after=retry_after
                ),
                headers={**FALLBACK_HEADERS, "Retry-After": str(retry_after)},
            )

    def extract_locale_from_request(self, request: Request) -> str:
        """
        Negotiate the response locale for a request.

        Priority:
            1. Accept-Language (full tag or primary language match)
            2. X-User-Locale (exact supported locale)
            3. Default locale
        """
        supported = self._locale_service.get_supported_locales()

        accept_language = request.headers.get(ACCEPT_LANGUAGE_HEADER)
        if accept_language:
            matched = self.match_accept_language(accept_language, supported)
            if matched:
                return matched

        user_locale = request.headers.get(USER_LOCALE_HEADER)
        if user_locale and self._locale_service.is_valid_locale(user_locale):
            return user_locale

        return self._locale_service.default_locale

    @staticmethod
    def match_accept_language(header: str, supported: List[str]) -> Optional[str]:
        by_tag = {locale.lower(): locale for locale in supported}
        by_language: Dict[str, str] = {}
        for locale in supported:
            by_language.setdefault(locale.split("-")[0].lower(), locale)

        for tag in parse_accept_language(header):
            tag = tag.lower()
            if tag in by_tag:
                return by_tag[tag]
            language = tag.split("-")[0]
            if language in by_language:
                return by_language[language]
        return None
