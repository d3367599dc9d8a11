"""
xAI Grok provider implementation.

xAI exposes an OpenAI-compatible chat completions API, so this provider
uses the OpenAI async client pointed at the xAI base URL.

Example:
    from common.ai import XAIProvider

    grok = XAIProvider(api_key="your-api-key")
    response = await grok.chat(
        message="Write today's cosmic forecast.",
        system_prompt="You are Astropal, an astrological guide.",
        model="grok-3-mini",
    )
"""

import logging
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI

from common.ai.base import AIProvider

logger = logging.getLogger(__name__)

XAI_API_URL = "https://api.x.ai/v1"


class XAIProvider(AIProvider):
    """
    xAI Grok provider.

    Serves every grok-* model named in the prompt catalog.
    """

    model_prefixes = ("grok-",)

    def __init__(
        self,
        api_key: str,
        model: str = "grok-3-mini",
        base_url: str = XAI_API_URL,
        max_retries: int = 2,
        timeout: float = 25.0,
    ):
        """
        Initialize xAI provider.

        Args:
            api_key: xAI API key
            model: Default model when a template names none (default: grok-3-mini)
            base_url: OpenAI-compatible API base URL
            max_retries: Number of retries for failed requests
            timeout: Request timeout in seconds
        """
        super().__init__(model)
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
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
        """Send message and get response from Grok."""
        messages: List[Dict[str, str]] = []

        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})

        messages.append({"role": "user", "content": message})

        params: Dict[str, Any] = {
            "model": self.resolve_model(model),
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        response = await self.client.chat.completions.create(**params)

        if response.usage:
            logger.debug(
                f"xAI completion used {response.usage.total_tokens} tokens "
                f"(model={params['model']})"
            )

        return response.choices[0].message.content or ""
