"""
Locale service.

Resolves a (locale, brand) pair to a locale document with caching and a
fallback chain, and provides token lookup with variable interpolation.

Fallback order is data, not control flow:

    fallback_chain("es-ES") -> ["es-ES", "en-US"]
    fallback_chain("fr-FR") -> ["en-US"]          # unsupported locale

The chain is walked in order; when every candidate is missing, or the
store fails, the hardcoded minimal document is served. Nothing here raises
to the caller for locale-resolution reasons.
"""

import logging
from datetime import date as date_type, datetime
from typing import Any, Dict, List, Optional, Sequence

from babel.core import UnknownLocaleError
from babel.dates import format_date

from common.i18n import Found, TokenResult, interpolate
from common.storage import KeyValueStore
from config.i18n_config import (
    CULTURAL_CONTEXT,
    DEFAULT_BRAND,
    DEFAULT_EMAIL_VARIABLES,
    DEFAULT_LOCALE,
    EVENING_GREETING_HOUR,
    FALLBACK_SUBJECT,
    LOCALE_KEY_TEMPLATE,
    SUPPORTED_LOCALES,
)
from astropal.locale.document import (
    DocumentSource,
    LocaleDocument,
    build_minimal_document,
)
from astropal.locale.perspectives import (
    SUPPORTED_PERSPECTIVES,
    get_profile,
    get_user_perspective,
    is_valid_perspective,
)

logger = logging.getLogger(__name__)


class LocaleCache:
    """
    In-memory cache of loaded locale documents, keyed "locale:brand".

    Owned by exactly one LocaleService. Entries are whole documents and are
    replaced, never patched.
    """

    def __init__(self):
        self._documents: Dict[str, LocaleDocument] = {}

    @staticmethod
    def key(locale: str, brand: str) -> str:
        return f"{locale}:{brand}"

    def get(self, key: str) -> Optional[LocaleDocument]:
        return self._documents.get(key)

    def set(self, key: str, document: LocaleDocument) -> None:
        self._documents[key] = document

    def clear(self) -> None:
        self._documents.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._documents

    def __len__(self) -> int:
        return len(self._documents)


class LocaleService:
    """
    Loads locale documents from a key-value store.
    Supports fallback to the default locale and a minimal built-in document.
    """

    def __init__(
        self,
        store: KeyValueStore,
        brand: str = DEFAULT_BRAND,
        default_locale: str = DEFAULT_LOCALE,
        supported_locales: Optional[Sequence[str]] = None,
        cache: Optional[LocaleCache] = None,
    ):
        """
        Initialize LocaleService.

        Args:
            store: Key-value store holding one JSON document per locale/brand
            brand: Brand suffix of store keys
            default_locale: Locale used when the requested one is unavailable
            supported_locales: Locales accepted from callers
            cache: Document cache; a private one is created if omitted
        """
        self._store = store
        self._brand = brand
        self._default_locale = default_locale
        self._supported_locales = list(supported_locales or SUPPORTED_LOCALES)
        if default_locale not in self._supported_locales:
            self._supported_locales.insert(0, default_locale)
        self._cache = cache if cache is not None else LocaleCache()

    @property
    def brand(self) -> str:
        return self._brand

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def cache(self) -> LocaleCache:
        return self._cache

    # ─────────────────────────────────────────────────────────────────
    # Loading
    # ─────────────────────────────────────────────────────────────────

    def fallback_chain(self, locale: Optional[str]) -> List[str]:
        """
        Ordered locales to try for a request.

        Unsupported locales are treated as absent and skipped.
        """
        chain: List[str] = []
        if self.is_valid_locale(locale):
            chain.append(locale)
        if self._default_locale not in chain:
            chain.append(self._default_locale)
        return chain

    async def load_locale(self, locale: Optional[str]) -> LocaleDocument:
        """
        Load a locale document, walking the fallback chain.

        Args:
            locale: Requested locale code (e.g., 'es-ES')

        Returns:
            The requested document, the default locale's document, or the
            minimal built-in document, in that order of preference
        """
        if not self.is_valid_locale(locale):
            logger.warning(
                f"Unsupported locale '{locale}' requested, "
                f"using {self._default_locale}"
            )

        for candidate in self.fallback_chain(locale):
            source = (
                DocumentSource.REQUESTED if candidate == locale else DocumentSource.DEFAULT
            )
            cache_key = LocaleCache.key(candidate, self._brand)

            cached = self._cache.get(cache_key)
            if cached is not None:
                logger.debug(f"Locale cache hit: {cache_key}")
                return cached.with_source(source)

            store_key = LOCALE_KEY_TEMPLATE.format(locale=candidate, brand=self._brand)
            try:
                data = await self._store.get(store_key, "json")
            except Exception as e:
                logger.error(
                    f"Failed to load locale {candidate} (brand={self._brand}, "
                    f"key={store_key}): {e}"
                )
                return self._minimal_fallback()

            if data is None:
                logger.warning(
                    f"Locale {candidate} not found in store (key={store_key}), "
                    f"falling back"
                )
                continue

            if not isinstance(data, dict):
                logger.error(
                    f"Malformed locale document for {candidate} (key={store_key}): "
                    f"expected an object, got {type(data).__name__}"
                )
                return self._minimal_fallback()

            document = LocaleDocument(candidate, self._brand, data)
            self._cache.set(cache_key, document)
            logger.debug(f"Locale loaded from store: {store_key}")
            return document.with_source(source)

        logger.error(
            f"Default locale {self._default_locale} not found in store "
            f"(brand={self._brand}), serving minimal fallback"
        )
        return self._minimal_fallback()

    def _minimal_fallback(self) -> LocaleDocument:
        return build_minimal_document(self._default_locale, self._brand)

    def clear_cache(self) -> None:
        """Drop every cached document."""
        self._cache.clear()
        logger.info("Locale cache cleared")

    # ─────────────────────────────────────────────────────────────────
    # Tokens
    # ─────────────────────────────────────────────────────────────────

    def resolve_token(
        self,
        document: LocaleDocument,
        path: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> TokenResult:
        """
        Look up a token and interpolate variables.

        Returns:
            Found with the interpolated text, or Missing
        """
        result = document.resolve(path)
        if isinstance(result, Found) and variables:
            return Found(result.path, interpolate(result.value, variables))
        return result

    def get_token(
        self,
        document: LocaleDocument,
        path: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Get a localized string by dot-notation path.

        Args:
            document: Loaded locale document
            path: Dot notation key (e.g., 'ui.signup.email')
            variables: Values for {{varName}} placeholders

        Returns:
            Translated string, or "[path]" when the key is missing
        """
        result = self.resolve_token(document, path, variables)
        if not result.found:
            logger.warning(f"Missing i18n token: {path} (locale={document.locale})")
        return result.render()

    # ─────────────────────────────────────────────────────────────────
    # Perspectives and formatting
    # ─────────────────────────────────────────────────────────────────

    def apply_perspective_to_prompt(
        self,
        base_prompt: str,
        perspective: str,
        locale: Optional[str] = None,
    ) -> str:
        """
        Append perspective instructions to a prompt.

        The block states how strongly the perspective should weigh on the
        output and adds a one-line cultural hint for the locale.
        """
        if not is_valid_perspective(perspective):
            logger.warning(
                f"Unknown perspective '{perspective}', "
                f"using {get_user_perspective(perspective)}"
            )

        profile = get_profile(perspective)
        cultural_context = CULTURAL_CONTEXT.get(
            locale or self._default_locale, CULTURAL_CONTEXT[DEFAULT_LOCALE]
        )

        logger.debug(
            f"Applying perspective {perspective} to prompt "
            f"(locale={locale}, weight={profile.weight})"
        )

        return (
            f"{base_prompt}\n"
            f"\n"
            f"CRITICAL PERSPECTIVE INSTRUCTIONS:\n"
            f"Apply the following perspective with {profile.influence_percent}% influence:\n"
            f"- Tone: {profile.tone}\n"
            f"- Focus Areas: {profile.focus}\n"
            f"- Writing Style: {profile.style}\n"
            f"- Natural Keywords: {', '.join(profile.keywords)}\n"
            f"- Cultural Context: {cultural_context}\n"
            f"\n"
            f"The remaining {profile.remaining_percent}% should maintain general "
            f"astrological guidance.\n"
            f"Ensure the content feels authentic and not forced."
        )

    def format_date(self, value: date_type, locale: Optional[str]) -> str:
        """
        Long, locale-aware date (e.g., 'Saturday, October 17, 2026').

        Falls back to a plain 'Sat Oct 17 2026' form if formatting fails.
        """
        try:
            return format_date(value, format="full", locale=(locale or "").replace("-", "_"))
        except (UnknownLocaleError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Date formatting failed for locale {locale}, using fallback: {e}")
            return value.strftime("%a %b %d %Y")

    def format_month(self, value: date_type, locale: Optional[str]) -> str:
        """Month name in the locale (e.g., 'octubre')."""
        try:
            return format_date(value, format="MMMM", locale=(locale or "").replace("-", "_"))
        except (UnknownLocaleError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Month formatting failed for locale {locale}, using fallback: {e}")
            return value.strftime("%B")

    # ─────────────────────────────────────────────────────────────────
    # Email copy
    # ─────────────────────────────────────────────────────────────────

    def email_variables(
        self,
        locale: Optional[str],
        overrides: Optional[Dict[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """
        Placeholder values for email subjects and greetings.

        date and month are rendered for the locale; days, tier and name have
        generic defaults. Overrides set to None keep the default.
        """
        now = now or datetime.now()
        locale = self.get_user_locale(locale)

        variables: Dict[str, Any] = {
            "date": self.format_date(now.date(), locale),
            "month": self.format_month(now.date(), locale),
            **DEFAULT_EMAIL_VARIABLES,
        }
        for name, value in (overrides or {}).items():
            if value is not None:
                variables[name] = value
        return variables

    async def get_localized_subject(
        self,
        locale: Optional[str],
        template_type: str,
        perspective: str,
        variables: Optional[Dict[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> str:
        """
        Email subject for a template type.

        Falls back to the default locale when the subject is missing or its
        document cannot be loaded, then to a generic subject.
        """
        variables = self.email_variables(locale, variables, now)

        tried = set()
        for candidate in self.fallback_chain(locale):
            try:
                document = await self.load_locale(candidate)
            except Exception as e:
                logger.error(
                    f"Failed to load locale {candidate} for email subject "
                    f"'{template_type}': {e}"
                )
                continue

            if document.locale in tried:
                continue
            tried.add(document.locale)

            result = self.resolve_token(
                document, f"email.subjects.{template_type}", variables
            )
            if result.found:
                logger.debug(
                    f"Localized subject generated: {template_type} "
                    f"(locale={document.locale}, perspective={perspective})"
                )
                return result.value

            logger.warning(
                f"Email subject '{template_type}' missing for {document.locale}"
            )

        return FALLBACK_SUBJECT

    async def build_email_copy(
        self,
        locale: Optional[str],
        template_type: str,
        perspective: str,
        variables: Optional[Dict[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> Dict[str, str]:
        """
        Subject and shared body copy for one email.

        Args:
            locale: Subscriber locale
            template_type: Email type (e.g., 'daily_morning')
            perspective: Subscriber perspective; unknown values use calm
            variables: Placeholder overrides (name, days, tier, ...)
            now: Send time; picks the morning or evening greeting

        Returns:
            Rendered copy keyed by template slot, plus the locale it came from
        """
        now = now or datetime.now()
        variables = self.email_variables(locale, variables, now)
        subject = await self.get_localized_subject(
            locale, template_type, perspective, variables, now
        )

        try:
            document = await self.load_locale(locale)
        except Exception as e:
            logger.error(f"Failed to load locale {locale} for email copy: {e}")
            document = self._minimal_fallback()

        perspective = get_user_perspective(perspective)
        greeting = "greeting_morning" if now.hour < EVENING_GREETING_HOUR else "greeting_evening"

        return {
            "locale": document.locale,
            "subject": subject,
            "greeting": self.get_token(
                document, f"email.templates.{greeting}", {"name": variables["name"]}
            ),
            "closing": self.get_token(document, "email.templates.closing"),
            "signature": self.get_token(document, "email.templates.signature"),
            "unsubscribeText": self.get_token(document, "email.templates.unsubscribe_text"),
            "upgradeBasicButton": self.get_token(document, "email.buttons.upgrade_basic"),
            "upgradeProButton": self.get_token(document, "email.buttons.upgrade_pro"),
            "perspectiveName": self.get_token(document, f"perspectives.{perspective}.name"),
            "perspectiveDescription": self.get_token(
                document, f"perspectives.{perspective}.description"
            ),
        }

    # ─────────────────────────────────────────────────────────────────
    # Supported values
    # ─────────────────────────────────────────────────────────────────

    def is_valid_locale(self, locale: Optional[str]) -> bool:
        return locale in self._supported_locales

    def is_valid_perspective(self, perspective: Optional[str]) -> bool:
        return is_valid_perspective(perspective)

    def get_supported_locales(self) -> List[str]:
        return list(self._supported_locales)

    def get_supported_perspectives(self) -> List[str]:
        return list(SUPPORTED_PERSPECTIVES)

    def get_user_locale(self, locale: Optional[str]) -> str:
        """Normalize a stored preference to a supported locale."""
        return locale if self.is_valid_locale(locale) else self._default_locale

    def get_user_perspective(self, perspective: Optional[str]) -> str:
        return get_user_perspective(perspective)
