"""
Anthropic Claude AI provider implementation.

Provides chat completions using the Anthropic API.

Example:
    from common.ai import ClaudeProvider

    claude = ClaudeProvider(api_key="your-api-key")
    response = await claude.chat(
        message="Write today's cosmic forecast.",
        system_prompt="You are Astropal, an astrological guide."
    )
"""

import logging
from typing import Any, Dict, Optional

from anthropic import AsyncAnthropic

from common.ai.base import AIProvider

logger = logging.getLogger(__name__)

DEFAULT_CLAUDE_MODEL = "claude-sonnet-4-5-20250929"


class ClaudeProvider(AIProvider):
    """
    Anthropic Claude AI provider.

    Template model names outside the claude-* family are replaced by the
    configured model.
    """

    model_prefixes = ("claude-",)

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_CLAUDE_MODEL,
        max_retries: int = 3,
        timeout: float = 60.0,
    ):
        """
        Initialize Claude provider.

        Args:
            api_key: Anthropic API key
            model: Model used whenever a template names a non-Claude model
            max_retries: Number of retries for failed requests
            timeout: Request timeout in seconds
        """
        super().__init__(model)
        self.client = AsyncAnthropic(
            api_key=api_key,
            max_retries=max_retries,
            timeout=timeout,
        )

    async def chat(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        model: Optional[str] = None,
    ) -> str:
        """Send message and get response from Claude."""
        params: Dict[str, Any] = {
            "model": self.resolve_model(model),
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": message}],
        }

        if system_prompt:
            params["system"] = system_prompt

        response = await self.client.messages.create(**params)

        if response.usage:
            logger.debug(
                f"Claude message used {response.usage.input_tokens}+"
                f"{response.usage.output_tokens} tokens (model={params['model']})"
            )

        return "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        )
