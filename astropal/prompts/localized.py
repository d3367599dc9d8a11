"""
Localized prompt composer.

Builds prompts whose system text, tier preamble and variable values come
from the subscriber's locale document, and whose base prompt carries the
perspective weighting block.
"""

import logging
from datetime import date as date_type
from typing import Dict, List, Optional

from common.i18n import Found
from config.i18n_config import PROMPT_CULTURAL_GUIDELINES, DEFAULT_LOCALE
from astropal.locale import LocaleDocument, LocaleService
from astropal.prompts.catalog import FALLBACK_TIER
from astropal.prompts.composer import (
    DEFAULT_PRIMARY_FOCUS,
    DEFAULT_RISING_SIGN,
    PromptComposer,
    focus_keywords,
    format_aspects,
)
from astropal.prompts.types import (
    ComposedPrompt,
    EphemerisContext,
    PromptTemplate,
    UserContext,
)
from astropal.prompts.vocabulary import Vocabulary, get_vocabulary

logger = logging.getLogger(__name__)

SYSTEM_PROMPT_PARTS = ("core", "principles", "guidelines", "restrictions")
GENERIC_TIER_PROMPT = "Generate a personalized astrological message."


class LocalizedPromptComposer:
    """
    Composes prompts in the subscriber's language.

    Attempts the subscriber's locale, then the default locale. If both
    attempts fail the unlocalized PromptComposer result is returned.
    """

    def __init__(
        self,
        locale_service: LocaleService,
        composer: Optional[PromptComposer] = None,
    ):
        self._locale_service = locale_service
        self._composer = composer or PromptComposer()

    @property
    def composer(self) -> PromptComposer:
        return self._composer

    async def build_localized_prompt(
        self,
        user: UserContext,
        ephemeris: EphemerisContext,
        news_context: Optional[str] = None,
        content_type: str = "daily",
    ) -> Optional[ComposedPrompt]:
        """
        Compose a localized prompt for a subscriber.

        Returns:
            ComposedPrompt tagged with the locale of the document used,
            or None when no template matches
        """
        template = self._composer.find_template(user.tier, user.perspective, content_type)
        if template is None:
            logger.error(
                f"No prompt template for localized prompt (tier={user.tier}, "
                f"perspective={user.perspective}, locale={user.locale})"
            )
            return None

        attempts = [user.locale]
        if user.locale != self._locale_service.default_locale:
            attempts.append(self._locale_service.default_locale)

        for locale in attempts:
            try:
                return await self._compose(
                    template, locale, user, ephemeris, news_context, content_type
                )
            except Exception as e:
                logger.error(
                    f"Failed to build localized prompt (locale={locale}, "
                    f"perspective={user.perspective}): {e}"
                )

        logger.warning(
            f"Falling back to unlocalized prompt (locale={user.locale}, "
            f"template={template.id})"
        )
        return self._composer.build_prompt(user, ephemeris, news_context, content_type)

    async def _compose(
        self,
        template: PromptTemplate,
        locale: str,
        user: UserContext,
        ephemeris: EphemerisContext,
        news_context: Optional[str],
        content_type: str,
    ) -> ComposedPrompt:
        document = await self._locale_service.load_locale(locale)

        system_prompt = self.build_system_prompt(document, template)

        weighted_base = self._locale_service.apply_perspective_to_prompt(
            template.base_prompt, user.perspective, document.locale
        )
        tier_prompt = self._tier_prompt(document, content_type, user.tier)
        variables = self.build_variables(document, user, ephemeris, news_context)
        user_prompt = self._composer.inject_variables(
            f"{tier_prompt}\n\n{weighted_base}", variables
        )

        logger.info(
            f"Localized prompt generated: {template.id} "
            f"(perspective={user.perspective}, tier={user.tier}, "
            f"locale={document.locale}, source={document.source.value})"
        )

        return ComposedPrompt(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            template=template,
            locale=document.locale,
        )

    def build_system_prompt(self, document: LocaleDocument, template: PromptTemplate) -> str:
        """Localized system prompt, or the template's own when the document has none."""
        parts = []
        for part in SYSTEM_PROMPT_PARTS:
            result = document.resolve(f"prompts.system.{template.perspective}.{part}")
            if isinstance(result, Found):
                parts.append(result.value)

        if not parts:
            logger.warning(
                f"No localized system prompt for {template.perspective} "
                f"(locale={document.locale}), using template system prompt"
            )
            return template.system_prompt

        guidelines = PROMPT_CULTURAL_GUIDELINES.get(
            document.locale, PROMPT_CULTURAL_GUIDELINES[DEFAULT_LOCALE]
        )
        parts.append(f"CULTURAL CONTEXT: {guidelines}")
        return "\n\n".join(parts)

    def build_variables(
        self,
        document: LocaleDocument,
        user: UserContext,
        ephemeris: EphemerisContext,
        news_context: Optional[str] = None,
    ) -> Dict[str, str]:
        vocabulary = get_vocabulary(document.locale)
        focus = user.focus_areas

        primary_focus = (
            self._focus_area_name(document, focus[0])
            if focus
            else self._text(document, "prompts.variables.focusAreas", DEFAULT_PRIMARY_FOCUS)
        )
        rising_sign = (
            vocabulary.sign(user.rising_sign)
            if user.rising_sign
            else self._text(document, "prompts.variables.risingSign", DEFAULT_RISING_SIGN)
        )

        return {
            "date": self._format_date(ephemeris.date, document.locale),
            "sunSign": vocabulary.sign(ephemeris.sun_position.sign),
            "sunDegree": f"{ephemeris.sun_position.degree:.1f}",
            "moonSign": vocabulary.sign(ephemeris.moon_position.sign),
            "moonDegree": f"{ephemeris.moon_position.degree:.1f}",
            "moonPhase": vocabulary.moon_phase(ephemeris.moon_position.phase),
            "primaryFocus": primary_focus,
            "secondaryFocus": (
                self._focus_area_name(document, focus[1]) if len(focus) > 1 else ""
            ),
            "majorAspects": format_aspects(
                ephemeris.major_aspects, vocabulary.aspects, vocabulary.no_aspects
            ),
            "retrogradePlanets": self._retrogrades(ephemeris.retrograde_planets, vocabulary),
            "birthLocation": user.birth_location,
            "timezone": user.timezone,
            "focusKeywords": ", ".join(vocabulary.translate_keywords(focus_keywords(focus))),
            "newsContext": news_context or vocabulary.news_context,
            "risingSign": rising_sign,
        }

    def _tier_prompt(self, document: LocaleDocument, content_type: str, tier: str) -> str:
        for path in (
            f"prompts.base.{content_type}.{tier}",
            f"prompts.base.{content_type}.{FALLBACK_TIER}",
        ):
            result = document.resolve(path)
            if isinstance(result, Found):
                return result.value
        return GENERIC_TIER_PROMPT

    def _format_date(self, value: str, locale: str) -> str:
        try:
            parsed = date_type.fromisoformat(value[:10])
        except (TypeError, ValueError):
            logger.warning(f"Unparseable ephemeris date '{value}', using as-is")
            return value
        return self._locale_service.format_date(parsed, locale)

    @staticmethod
    def _focus_area_name(document: LocaleDocument, area: str) -> str:
        result = document.resolve(f"focus_areas.{area}")
        return result.value if isinstance(result, Found) else area

    @staticmethod
    def _text(document: LocaleDocument, path: str, default: str) -> str:
        result = document.resolve(path)
        return result.value if isinstance(result, Found) else default

    @staticmethod
    def _retrogrades(planets: List[str], vocabulary: Vocabulary) -> str:
        return ", ".join(planets) if planets else vocabulary.no_retrogrades
