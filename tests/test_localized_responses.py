"""Unit tests for LocalizedApiResponses."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from astropal.responses import (
    LocalizedApiResponses,
    get_error_status_code,
    parse_accept_language,
)


@pytest.fixture
def responses(locale_service):
    return LocalizedApiResponses(locale_service)


def body(response):
    return json.loads(response.body)


def make_request(headers):
    request = MagicMock()
    request.headers = headers
    return request


# ─────────────────────────────────────────────────────────────────
# Status table
# ─────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("code,status", [
    ("notFound", 404),
    ("unauthorized", 401),
    ("rateLimited", 429),
    ("invalidInput", 400),
    ("serverError", 500),
    ("emailExists", 409),
    ("invalidEmail", 400),
    ("invalidDate", 400),
    ("invalidLocation", 400),
    ("trialExpired", 403),
    ("paymentFailed", 402),
    ("subscriptionNotFound", 404),
    ("somethingElse", 500),
])
def test_error_status_codes(code, status):
    assert get_error_status_code(code) == status


# ─────────────────────────────────────────────────────────────────
# Builders
# ─────────────────────────────────────────────────────────────────


class TestErrorResponse:
    @pytest.mark.asyncio
    async def test_localized_error(self, responses):
        response = await responses.build_error_response("emailExists", "es-ES")
        data = body(response)

        assert response.status_code == 409
        assert response.headers["content-language"] == "es-ES"
        assert data["success"] is False
        assert data["error"] == "Ya existe una cuenta con este correo"
        assert data["errorCode"] == "emailExists"
        assert data["timestamp"].endswith("Z")

    @pytest.mark.asyncio
    async def test_unknown_code_renders_placeholder(self, responses):
        response = await responses.build_error_response("mystery", "en-US")
        assert response.status_code == 500
        assert body(response)["error"] == "[api.errors.mystery]"

    @pytest.mark.asyncio
    async def test_content_language_is_served_document(self, en_us_data):
        from common.storage import InMemoryKVStore
        from astropal.locale import LocaleService

        service = LocaleService(InMemoryKVStore({"i18n:en-US:astropal": en_us_data}))
        response = await LocalizedApiResponses(service).build_error_response("notFound", "es-ES")
        assert response.headers["content-language"] == "en-US"

    @pytest.mark.asyncio
    async def test_builder_failure_returns_fallback_body(self, locale_service):
        locale_service.load_locale = AsyncMock(side_effect=RuntimeError("boom"))
        response = await LocalizedApiResponses(locale_service).build_error_response("notFound", "es-ES")

        assert response.status_code == 500
        assert response.headers["content-language"] == "en"
        assert body(response)["error"] == "An error occurred"
        assert body(response)["errorCode"] == "notFound"


class TestSuccessResponse:
    @pytest.mark.asyncio
    async def test_localized_success(self, responses):
        response = await responses.build_success_response("updated", {"id": 1}, "es-ES")
        data = body(response)

        assert response.status_code == 200
        assert response.headers["content-language"] == "es-ES"
        assert data == {
            "success": True,
            "message": "Sus preferencias han sido actualizadas",
            "data": {"id": 1},
            "timestamp": data["timestamp"],
        }

    @pytest.mark.asyncio
    async def test_builder_failure_returns_fallback_body(self, locale_service):
        locale_service.load_locale = AsyncMock(side_effect=RuntimeError("boom"))
        response = await LocalizedApiResponses(locale_service).build_success_response("updated", [1])
        assert response.status_code == 200
        assert body(response)["message"] == "Operation successful"
        assert body(response)["data"] == [1]


class TestValidationErrorResponse:
    @pytest.mark.asyncio
    async def test_field_specific_then_generic(self, responses):
        response = await responses.build_validation_error_response(
            {"focusAreas": ["max", "required"], "email": ["email"]}, "en-US"
        )
        data = body(response)

        assert response.status_code == 400
        assert data["error"] == "The submitted data is invalid"
        assert data["validationErrors"] == {
            "focusAreas": [
                "Please select at most three focus areas",
                "This field is required",
            ],
            "email": ["Please enter a valid email address"],
        }

    @pytest.mark.asyncio
    async def test_unknown_key_renders_placeholder(self, responses):
        response = await responses.build_validation_error_response({"name": ["weird"]}, "en-US")
        assert body(response)["validationErrors"] == {"name": ["[validation.weird]"]}

    @pytest.mark.asyncio
    async def test_bracketed_field_message_is_kept(self, en_us_data):
        from common.storage import InMemoryKVStore
        from astropal.locale import LocaleService

        en_us_data["validation"]["email"] = {"required": "[beta] Email is required"}
        service = LocaleService(InMemoryKVStore({"i18n:en-US:astropal": en_us_data}))

        response = await LocalizedApiResponses(service).build_validation_error_response(
            {"email": ["required"]}, "en-US"
        )
        assert body(response)["validationErrors"] == {"email": ["[beta] Email is required"]}

    @pytest.mark.asyncio
    async def test_builder_failure_returns_raw_keys(self, locale_service):
        locale_service.load_locale = AsyncMock(side_effect=RuntimeError("boom"))
        response = await LocalizedApiResponses(locale_service).build_validation_error_response(
            {"email": ["email"]}
        )
        assert response.status_code == 400
        assert body(response)["error"] == "Validation failed"
        assert body(response)["validationErrors"] == {"email": ["email"]}


class TestRateLimitResponse:
    @pytest.mark.asyncio
    async def test_rate_limit(self, responses):
        response = await responses.build_rate_limit_response(60, "es-ES")
        data = body(response)

        assert response.status_code == 429
        assert response.headers["retry-after"] == "60"
        assert response.headers["content-language"] == "es-ES"
        assert data["retryAfter"] == 60
        assert data["errorCode"] == "rateLimited"
        assert data["error"] == "Demasiadas solicitudes. Inténtelo de nuevo más tarde."

    @pytest.mark.asyncio
    async def test_builder_failure_keeps_retry_after(self, locale_service):
        locale_service.load_locale = AsyncMock(side_effect=RuntimeError("boom"))
        response = await LocalizedApiResponses(locale_service).build_rate_limit_response(30)
        assert response.status_code == 429
        assert response.headers["retry-after"] == "30"
        assert body(response)["error"] == "Too many requests"


class TestBoundResponder:
    @pytest.mark.asyncio
    async def test_bind_uses_locale(self, responses):
        responder = responses.bind("es-ES")
        response = await responder.error("notFound")
        assert responder.locale == "es-ES"
        assert body(response)["error"] == "No se encontró el recurso solicitado"

        response = await responder.rate_limit(5)
        assert response.status_code == 429


# ─────────────────────────────────────────────────────────────────
# Locale negotiation
# ─────────────────────────────────────────────────────────────────


class TestExtractLocale:
    def test_accept_language_primary_match(self, responses):
        request = make_request({"Accept-Language": "es-MX,es;q=0.9,en;q=0.8"})
        assert responses.extract_locale_from_request(request) == "es-ES"

    def test_accept_language_exact_match(self, responses):
        request = make_request({"Accept-Language": "en-US"})
        assert responses.extract_locale_from_request(request) == "en-US"

    def test_accept_language_respects_quality(self, responses):
        request = make_request({"Accept-Language": "fr;q=0.9,es;q=0.5,en;q=0.7"})
        assert responses.extract_locale_from_request(request) == "en-US"

    def test_substring_es_is_not_a_match(self, responses):
        request = make_request({"Accept-Language": "fr-FR,des;q=0.5"})
        assert responses.extract_locale_from_request(request) == "en-US"

    def test_user_locale_header(self, responses):
        request = make_request({"X-User-Locale": "es-ES"})
        assert responses.extract_locale_from_request(request) == "es-ES"

    def test_unsupported_user_locale_header(self, responses):
        request = make_request({"X-User-Locale": "de-DE"})
        assert responses.extract_locale_from_request(request) == "en-US"

    def test_default(self, responses):
        assert responses.extract_locale_from_request(make_request({})) == "en-US"


def test_parse_accept_language():
    assert parse_accept_language("es-ES,es;q=0.9,en;q=0.8,*;q=0.1") == ["es-ES", "es", "en"]
    assert parse_accept_language("en;q=0") == []
