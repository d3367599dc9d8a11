"""
Service dependencies.

Creates the service graph once at startup and hands instances to routers
and middleware. Tests call init_services with their own store and
provider.
"""

import logging
from typing import Optional

from common.ai import AIProvider, ClaudeProvider, XAIProvider
from common.storage import (
    CloudflareKVStore,
    DirectoryKVStore,
    InMemoryKVStore,
    KeyValueStore,
)
from astropal.config import Settings
from astropal.locale import LocaleCache, LocaleService
from astropal.prompts import LocalizedPromptComposer, PromptComposer
from astropal.responses import LocalizedApiResponses
from astropal.services import ContentGenerator

logger = logging.getLogger(__name__)


_settings: Optional[Settings] = None
_locale_store: Optional[KeyValueStore] = None
_locale_service: Optional[LocaleService] = None
_prompt_composer: Optional[PromptComposer] = None
_localized_composer: Optional[LocalizedPromptComposer] = None
_api_responses: Optional[LocalizedApiResponses] = None
_ai_provider: Optional[AIProvider] = None
_content_generator: Optional[ContentGenerator] = None


def create_locale_store(settings: Settings) -> KeyValueStore:
    """Build the locale store selected by LOCALE_STORE."""
    mode = settings.LOCALE_STORE.lower()
    if mode == "cloudflare":
        return CloudflareKVStore(
            account_id=settings.CLOUDFLARE_ACCOUNT_ID,
            namespace_id=settings.CLOUDFLARE_KV_NAMESPACE_ID,
            api_token=settings.CLOUDFLARE_API_TOKEN,
        )
    if mode == "memory":
        return InMemoryKVStore()
    return DirectoryKVStore(settings.LOCALES_DIR, brand=settings.BRAND)


def create_ai_provider(settings: Settings) -> Optional[AIProvider]:
    """Build the configured AI provider, or None without credentials."""
    provider = settings.AI_PROVIDER.lower()
    if provider == "claude":
        if not settings.CLAUDE_API_KEY:
            return None
        return ClaudeProvider(api_key=settings.CLAUDE_API_KEY, model=settings.CLAUDE_MODEL)
    if provider == "xai":
        if not settings.XAI_API_KEY:
            return None
        return XAIProvider(
            api_key=settings.XAI_API_KEY,
            model=settings.XAI_MODEL,
            base_url=settings.XAI_BASE_URL,
        )
    logger.warning(f"Unknown AI_PROVIDER '{settings.AI_PROVIDER}', content generation disabled")
    return None


def init_services(
    settings: Settings,
    store: Optional[KeyValueStore] = None,
    ai_provider: Optional[AIProvider] = None,
) -> None:
    """
    Initialize all services.

    Called once at application startup.

    Args:
        settings: Application settings
        store: Locale store override (tests)
        ai_provider: AI provider override (tests)
    """
    global _settings, _locale_store, _locale_service, _prompt_composer, _localized_composer
    global _api_responses, _ai_provider, _content_generator

    _settings = settings
    _locale_store = store if store is not None else create_locale_store(settings)

    _locale_service = LocaleService(
        store=_locale_store,
        brand=settings.BRAND,
        default_locale=settings.DEFAULT_LOCALE,
        supported_locales=settings.get_supported_locales(),
        cache=LocaleCache(),
    )

    _prompt_composer = PromptComposer()
    _localized_composer = LocalizedPromptComposer(_locale_service, _prompt_composer)
    _api_responses = LocalizedApiResponses(_locale_service)

    _ai_provider = ai_provider if ai_provider is not None else create_ai_provider(settings)
    _content_generator = (
        ContentGenerator(_localized_composer, _ai_provider) if _ai_provider is not None else None
    )

    logger.info(
        f"Services initialized (store={type(_locale_store).__name__}, "
        f"brand={settings.BRAND}, ai_provider="
        f"{type(_ai_provider).__name__ if _ai_provider else 'none'})"
    )


def get_settings() -> Settings:
    """Get the settings the services were initialized with."""
    if _settings is None:
        raise RuntimeError("Services not initialized. Call init_services first.")
    return _settings


def get_locale_store() -> KeyValueStore:
    """Get locale store instance."""
    if _locale_store is None:
        raise RuntimeError("Services not initialized. Call init_services first.")
    return _locale_store


def get_locale_service() -> LocaleService:
    """Get locale service instance."""
    if _locale_service is None:
        raise RuntimeError("Services not initialized. Call init_services first.")
    return _locale_service


def get_prompt_composer() -> PromptComposer:
    if _prompt_composer is None:
        raise RuntimeError("Services not initialized. Call init_services first.")
    return _prompt_composer


def get_localized_prompt_composer() -> LocalizedPromptComposer:
    if _localized_composer is None:
        raise RuntimeError("Services not initialized. Call init_services first.")
    return _localized_composer


def get_api_responses() -> LocalizedApiResponses:
    """Get localized response builder."""
    if _api_responses is None:
        raise RuntimeError("Services not initialized. Call init_services first.")
    return _api_responses


def get_content_generator() -> Optional[ContentGenerator]:
    """Content generator, or None when no AI provider is configured."""
    if _locale_service is None:
        raise RuntimeError("Services not initialized. Call init_services first.")
    return _content_generator
