"""
API tests for the Astropal FastAPI application.

Services are initialized directly with an in-memory locale store; the
client is used without entering the lifespan so startup does not replace
them.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from api import api_exception_handler, app, rate_limit_handler, validation_field_errors
from common.utils import NotFoundException, RateLimitException
from astropal.config import Settings
from astropal.dependencies import get_locale_service, init_services

ADMIN_TOKEN = "admin-secret"
SPANISH = {"Accept-Language": "es-ES,es;q=0.9"}


def make_settings(**overrides):
    values = {
        "ADMIN_TOKEN": ADMIN_TOKEN,
        "LOCALE_STORE": "memory",
        "AI_PROVIDER": "xai",
        "XAI_API_KEY": None,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def client(memory_store):
    init_services(make_settings(), store=memory_store)
    return TestClient(app)


@pytest.fixture
def provider():
    provider = MagicMock()
    provider.chat = AsyncMock(return_value="Hoy las estrellas te invitan a descansar.")
    provider.resolve_model.side_effect = lambda requested: requested or "grok-3-mini"
    return provider


@pytest.fixture
def generating_client(memory_store, provider):
    init_services(make_settings(), store=memory_store, ai_provider=provider)
    return TestClient(app)


@pytest.fixture
def compose_body():
    return {
        "user": {
            "perspective": "calm",
            "tier": "free",
            "birthLocation": "Madrid, Spain",
            "timezone": "Europe/Madrid",
            "focusAreas": ["wellness"],
        },
        "ephemeris": {
            "date": "2026-10-17",
            "sunPosition": {"sign": "Libra", "degree": 24.5},
            "moonPosition": {"sign": "Taurus", "degree": 12.0, "phase": "Full Moon"},
            "majorAspects": [
                {"planet1": "Sun", "planet2": "Moon", "aspect": "opposition", "orb": 1.2},
            ],
            "retrogradePlanets": [],
        },
    }


# ─────────────────────────────────────────────────────────────────
# Health and middleware
# ─────────────────────────────────────────────────────────────────


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "ok"
        assert response.headers["content-language"] == "en-US"

    def test_content_language_follows_accept_language(self, client):
        response = client.get("/health", headers=SPANISH)
        assert response.headers["content-language"] == "es-ES"

    def test_fallback_body_is_labelled_english(self, client):
        get_locale_service().load_locale = AsyncMock(side_effect=RuntimeError("store offline"))

        response = client.get("/api/v1/i18n/locales", headers=SPANISH)

        assert response.status_code == 200
        assert response.json()["message"] == "Operation successful"
        assert response.headers["content-language"] == "en"


# ─────────────────────────────────────────────────────────────────
# i18n router
# ─────────────────────────────────────────────────────────────────


class TestI18nRouter:
    def test_locales(self, client):
        response = client.get("/api/v1/i18n/locales", headers=SPANISH)
        data = response.json()

        assert response.status_code == 200
        assert data["message"] == "Obtenido correctamente"
        assert data["data"] == {"locales": ["en-US", "es-ES"], "default": "en-US"}

    def test_perspectives(self, client):
        data = client.get("/api/v1/i18n/perspectives").json()["data"]
        assert data["default"] == "calm"
        assert set(data["perspectives"]) == {"calm", "knowledge", "success", "evidence"}
        assert data["perspectives"]["calm"]["weight"] == 0.7

    def test_token_found(self, client):
        response = client.get("/api/v1/i18n/tokens", params={"path": "common.yes"}, headers=SPANISH)
        data = response.json()["data"]

        assert response.headers["content-language"] == "es-ES"
        assert data == {
            "path": "common.yes",
            "found": True,
            "value": "Sí",
            "locale": "es-ES",
            "source": "requested",
        }

    def test_token_missing(self, client):
        data = client.get(
            "/api/v1/i18n/tokens", params={"path": "common.nope", "locale": "en-US"}
        ).json()["data"]
        assert data["found"] is False
        assert data["value"] == "[common.nope]"

    def test_token_unsupported_locale(self, client):
        response = client.get(
            "/api/v1/i18n/tokens", params={"path": "common.yes", "locale": "de-DE"}
        )
        assert response.status_code == 404
        assert response.json()["errorCode"] == "notFound"

    def test_subject(self, client):
        response = client.get("/api/v1/i18n/subjects/weekly", headers=SPANISH)
        assert response.json()["data"] == {
            "templateType": "weekly",
            "subject": "Tu semana entre las estrellas",
        }

    def test_subject_placeholders_are_rendered(self, client):
        subject = client.get("/api/v1/i18n/subjects/daily_morning").json()["data"]["subject"]
        assert subject.startswith("Your cosmic forecast for ")
        assert "{{" not in subject

    def test_subject_when_locale_cannot_load(self, client):
        get_locale_service().load_locale = AsyncMock(side_effect=RuntimeError("store offline"))

        response = client.get("/api/v1/i18n/subjects/weekly", headers=SPANISH)
        data = response.json()

        assert response.status_code == 200
        assert data["message"] == "Operation successful"
        assert data["data"]["subject"] == "Your Cosmic Update"

    def test_email_copy(self, client):
        response = client.get(
            "/api/v1/i18n/emails/weekly",
            params={"perspective": "knowledge", "name": "Ana"},
            headers=SPANISH,
        )
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["templateType"] == "weekly"
        assert data["locale"] == "es-ES"
        assert data["subject"] == "Tu semana entre las estrellas"
        assert data["greeting"] in ("¡Buenos días, Ana!", "¡Buenas noches, Ana!")
        assert data["upgradeProButton"] == "Mejorar a Pro"
        assert data["perspectiveName"] == "Conocimiento"

    def test_email_copy_rejects_negative_days(self, client):
        response = client.get("/api/v1/i18n/emails/trial_ending", params={"days": -1})
        assert response.status_code == 400

    def test_clear_cache_requires_token(self, client):
        response = client.delete("/api/v1/i18n/cache", headers=SPANISH)
        assert response.status_code == 401
        assert response.json()["error"] == "No tiene autorización para realizar esta acción"

        response = client.delete("/api/v1/i18n/cache", headers={"X-Admin-Token": "wrong"})
        assert response.status_code == 401

    def test_clear_cache(self, client):
        client.get("/api/v1/i18n/tokens", params={"path": "common.yes"})
        assert len(get_locale_service().cache) == 1

        response = client.delete("/api/v1/i18n/cache", headers={"X-Admin-Token": ADMIN_TOKEN})

        assert response.status_code == 200
        assert response.json()["data"] == {"cleared": 1}
        assert len(get_locale_service().cache) == 0


# ─────────────────────────────────────────────────────────────────
# Prompts router
# ─────────────────────────────────────────────────────────────────


class TestPromptsRouter:
    def test_compose_localized_from_request_locale(self, client, compose_body):
        response = client.post("/api/v1/prompts/compose", json=compose_body, headers=SPANISH)
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["templateId"] == "calm-daily-free"
        assert data["locale"] == "es-ES"
        assert data["model"] == "grok-3-mini"
        assert data["maxTokens"] == 400
        assert data["systemPrompt"].startswith("Eres Astropal")
        assert "Moon in Tauro (Luna Llena)" in data["userPrompt"]

    def test_compose_subscriber_locale_wins(self, client, compose_body):
        compose_body["user"]["locale"] = "en-US"
        data = client.post("/api/v1/prompts/compose", json=compose_body, headers=SPANISH).json()["data"]
        assert data["locale"] == "en-US"

    def test_compose_unlocalized(self, client, compose_body):
        compose_body["localized"] = False
        data = client.post("/api/v1/prompts/compose", json=compose_body).json()["data"]
        assert data["locale"] is None
        assert "Date: 2026-10-17" in data["userPrompt"]

    def test_compose_without_template(self, client, compose_body):
        compose_body["user"]["perspective"] = "knowledge"
        response = client.post("/api/v1/prompts/compose", json=compose_body, headers=SPANISH)
        assert response.status_code == 500
        assert response.json()["errorCode"] == "serverError"
        assert response.json()["error"] == "Algo salió mal de nuestro lado. Inténtelo de nuevo."

    def test_compose_validation_errors(self, client, compose_body):
        del compose_body["user"]["perspective"]
        compose_body["user"]["focusAreas"] = ["love", "career", "wellness", "spiritual"]

        response = client.post("/api/v1/prompts/compose", json=compose_body)
        data = response.json()

        assert response.status_code == 400
        assert data["validationErrors"] == {
            "perspective": ["This field is required"],
            "focusAreas": ["Please select at most three focus areas"],
        }

    def test_perspective(self, client):
        response = client.post("/api/v1/prompts/perspective", json={
            "basePrompt": "Write today's message.",
            "perspective": "evidence",
        }, headers=SPANISH)
        data = response.json()["data"]

        assert data["locale"] == "es-ES"
        assert data["prompt"].startswith("Write today's message.\n\nCRITICAL PERSPECTIVE INSTRUCTIONS:")
        assert "70% influence" in data["prompt"]


# ─────────────────────────────────────────────────────────────────
# Content router
# ─────────────────────────────────────────────────────────────────


class TestContentRouter:
    def test_generate_without_provider(self, client, compose_body):
        response = client.post("/api/v1/content/generate", json=compose_body)
        assert response.status_code == 500
        assert response.json()["errorCode"] == "serverError"

    def test_generate(self, generating_client, provider, compose_body):
        response = generating_client.post("/api/v1/content/generate", json=compose_body, headers=SPANISH)
        data = response.json()

        assert response.status_code == 200
        assert data["message"] == "Contenido generado"
        assert data["data"]["content"] == "Hoy las estrellas te invitan a descansar."
        assert data["data"]["templateId"] == "calm-daily-free"
        assert data["data"]["locale"] == "es-ES"
        assert provider.chat.await_args.kwargs["temperature"] == 0.7

    def test_generate_provider_failure(self, generating_client, provider, compose_body):
        provider.chat.side_effect = RuntimeError("upstream timeout")
        response = generating_client.post("/api/v1/content/generate", json=compose_body)
        assert response.status_code == 500
        assert response.json()["errorCode"] == "serverError"


# ─────────────────────────────────────────────────────────────────
# Validation error mapping
# ─────────────────────────────────────────────────────────────────


def test_validation_field_errors_groups_by_field():
    exc = MagicMock()
    exc.errors.return_value = [
        {"loc": ("body", "user", "focusAreas"), "type": "too_long"},
        {"loc": ("body", "ephemeris", "majorAspects", 0, "planet1"), "type": "missing"},
        {"loc": ("body", "ephemeris", "date"), "type": "string_pattern_mismatch"},
        {"loc": ("body", "user", "focusAreas"), "type": "too_long"},
        {"loc": ("query", "path"), "type": "string_too_short"},
    ]

    assert validation_field_errors(exc) == {
        "focusAreas": ["maxItems"],
        "planet1": ["required"],
        "date": ["pattern"],
        "path": ["minLength"],
    }


# ─────────────────────────────────────────────────────────────────
# Exception handlers
# ─────────────────────────────────────────────────────────────────


def request_in(locale):
    request = MagicMock()
    request.state.locale = locale
    return request


class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_rate_limit_handler(self, client):
        response = await rate_limit_handler(request_in("es-ES"), RateLimitException(30))

        assert response.status_code == 429
        assert response.headers["retry-after"] == "30"
        assert response.headers["content-language"] == "es-ES"

    @pytest.mark.asyncio
    async def test_api_exception_uses_error_code(self, client):
        exc = NotFoundException("Subscription not found", code="subscriptionNotFound")
        response = await api_exception_handler(request_in("en-US"), exc)

        assert response.status_code == 404
        assert b"subscriptionNotFound" in response.body
