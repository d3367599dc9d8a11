"""
Prompt composer.

Selects a template from the catalog and fills its placeholders from the
subscriber's context and the day's ephemeris.
"""

import logging
from typing import Dict, List, Optional, Sequence

from common.i18n import find_unresolved, interpolate
from astropal.prompts.catalog import (
    FALLBACK_TIER,
    FOCUS_AREA_KEYWORDS,
    PROMPT_TEMPLATES,
)
from astropal.prompts.types import (
    Aspect,
    ComposedPrompt,
    EphemerisContext,
    PromptTemplate,
    UserContext,
)

logger = logging.getLogger(__name__)

MAX_ASPECTS = 3
MAX_FOCUS_KEYWORDS = 6

DEFAULT_PRIMARY_FOCUS = "general guidance"
DEFAULT_RISING_SIGN = "Unknown"
NO_ASPECTS_TEXT = "Gentle cosmic harmony"
NO_RETROGRADES_TEXT = "No retrograde planets"
DEFAULT_NEWS_CONTEXT = "Current cosmic energy reflects in global events"


def template_id(perspective: str, content_type: str, tier: str) -> str:
    return f"{perspective}-{content_type}-{tier}"


class PromptComposer:
    """Builds unlocalized prompts from the template catalog."""

    def __init__(self, templates: Optional[Sequence[PromptTemplate]] = None):
        self._templates: Dict[str, PromptTemplate] = {
            t.id: t for t in (templates if templates is not None else PROMPT_TEMPLATES)
        }

    def find_template(
        self,
        tier: str,
        perspective: str,
        content_type: str = "daily",
    ) -> Optional[PromptTemplate]:
        """
        Find the template for a tier/perspective/content type.

        Falls back to the free tier of the same perspective and content type.
        Returns None (and logs an error) when neither exists.
        """
        requested_id = template_id(perspective, content_type, tier)
        template = self._templates.get(requested_id)
        if template is not None:
            return template

        fallback_id = template_id(perspective, content_type, FALLBACK_TIER)
        fallback = self._templates.get(fallback_id)
        if fallback is not None:
            logger.warning(
                f"Using fallback prompt template {fallback_id} "
                f"(requested {requested_id})"
            )
            return fallback

        logger.error(
            f"No prompt template found (tier={tier}, perspective={perspective}, "
            f"content_type={content_type})"
        )
        return None

    def build_prompt(
        self,
        user: UserContext,
        ephemeris: EphemerisContext,
        news_context: Optional[str] = None,
        content_type: str = "daily",
    ) -> Optional[ComposedPrompt]:
        """
        Compose a system/user prompt pair for a subscriber.

        Args:
            user: Subscriber context
            ephemeris: Astronomical snapshot for the day
            news_context: Optional world-events summary
            content_type: "daily", "weekly" or "monthly"

        Returns:
            ComposedPrompt, or None when no template matches
        """
        template = self.find_template(user.tier, user.perspective, content_type)
        if template is None:
            return None

        variables = self.build_variables(user, ephemeris, news_context)
        user_prompt = self.inject_variables(template.base_prompt, variables)

        logger.info(
            f"Prompt generated: {template.id} (perspective={user.perspective}, "
            f"tier={user.tier}, focus_areas={len(user.focus_areas)}, "
            f"variables={len(variables)})"
        )

        return ComposedPrompt(
            system_prompt=template.system_prompt,
            user_prompt=user_prompt,
            template=template,
        )

    def build_variables(
        self,
        user: UserContext,
        ephemeris: EphemerisContext,
        news_context: Optional[str] = None,
    ) -> Dict[str, str]:
        focus = user.focus_areas
        return {
            "date": ephemeris.date,
            "sunSign": ephemeris.sun_position.sign,
            "sunDegree": f"{ephemeris.sun_position.degree:.1f}",
            "moonSign": ephemeris.moon_position.sign,
            "moonDegree": f"{ephemeris.moon_position.degree:.1f}",
            "moonPhase": ephemeris.moon_position.phase,
            "primaryFocus": focus[0] if focus else DEFAULT_PRIMARY_FOCUS,
            "secondaryFocus": focus[1] if len(focus) > 1 else "",
            "majorAspects": format_aspects(ephemeris.major_aspects),
            "retrogradePlanets": (
                ", ".join(ephemeris.retrograde_planets) or NO_RETROGRADES_TEXT
            ),
            "birthLocation": user.birth_location,
            "timezone": user.timezone,
            "focusKeywords": ", ".join(focus_keywords(focus)),
            "newsContext": news_context or DEFAULT_NEWS_CONTEXT,
            "risingSign": user.rising_sign or DEFAULT_RISING_SIGN,
        }

    def inject_variables(self, template: str, variables: Dict[str, str]) -> str:
        """Substitute {{name}} placeholders and warn about leftovers."""
        result = interpolate(template, variables)
        unresolved = find_unresolved(result)
        if unresolved:
            logger.warning(f"Unresolved placeholders in prompt: {unresolved}")
        return result

    def get_all_templates(self) -> List[PromptTemplate]:
        return list(self._templates.values())

    def get_template_by_id(self, id: str) -> Optional[PromptTemplate]:
        return self._templates.get(id)


def focus_keywords(focus_areas: Sequence[str]) -> List[str]:
    """First keywords of the subscriber's focus areas, in focus order."""
    keywords: List[str] = []
    for area in focus_areas:
        keywords.extend(FOCUS_AREA_KEYWORDS.get(area, []))
    return keywords[:MAX_FOCUS_KEYWORDS]


def format_aspects(
    aspects: Sequence[Aspect],
    aspect_names: Optional[Dict[str, str]] = None,
    empty_text: str = NO_ASPECTS_TEXT,
) -> str:
    """Render up to three aspects as "Sun-Moon trine, ..."."""
    if not aspects:
        return empty_text
    names = aspect_names or {}
    return ", ".join(
        f"{a.planet1}-{a.planet2} {names.get(a.aspect, a.aspect)}"
        for a in aspects[:MAX_ASPECTS]
    )
