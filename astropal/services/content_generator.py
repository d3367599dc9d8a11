"""
Content generation.

Sends a localized prompt to the configured AI provider using the model
settings of the selected template.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from common.ai import AIProvider
from astropal.prompts import (
    ComposedPrompt,
    EphemerisContext,
    LocalizedPromptComposer,
    UserContext,
)

logger = logging.getLogger(__name__)


@dataclass
class GeneratedContent:
    """Provider output for one composed prompt."""
    content: str
    template_id: str
    model: str
    perspective: str
    tier: str
    locale: Optional[str]
    generated_at: datetime


class ContentGenerator:
    """Composes a prompt and asks the AI provider for the content."""

    def __init__(self, composer: LocalizedPromptComposer, provider: AIProvider):
        self._composer = composer
        self._provider = provider

    async def generate(
        self,
        user: UserContext,
        ephemeris: EphemerisContext,
        news_context: Optional[str] = None,
    ) -> Optional[GeneratedContent]:
        """
        Generate content for a subscriber.

        Returns:
            GeneratedContent, or None when no prompt template matches.
            Provider errors propagate.
        """
        prompt = await self._composer.build_localized_prompt(user, ephemeris, news_context)
        if prompt is None:
            logger.error(
                f"Content generation skipped, no prompt (tier={user.tier}, "
                f"perspective={user.perspective})"
            )
            return None

        return await self.generate_from_prompt(prompt, user)

    async def generate_from_prompt(
        self,
        prompt: ComposedPrompt,
        user: UserContext,
    ) -> GeneratedContent:
        config = prompt.template.model_config
        model = self._provider.resolve_model(config.model)

        logger.info(
            f"Generating content: {prompt.template.id} (model={model}, "
            f"locale={prompt.locale}, max_tokens={config.max_tokens})"
        )

        text = await self._provider.chat(
            message=prompt.user_prompt,
            system_prompt=prompt.system_prompt,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            model=config.model,
        )

        return GeneratedContent(
            content=text,
            template_id=prompt.template.id,
            model=model,
            perspective=user.perspective,
            tier=user.tier,
            locale=prompt.locale,
            generated_at=datetime.now(timezone.utc),
        )
