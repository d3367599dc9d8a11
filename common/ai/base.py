"""
Abstract AI provider interface.

Defines the contract that all generative text providers must implement.
This allows swapping between different AI services (xAI Grok, Claude)
without changing application code.

Example:
    from common.ai import AIProvider, XAIProvider, ClaudeProvider

    def get_ai_provider(settings) -> AIProvider:
        if settings.AI_PROVIDER == "claude":
            return ClaudeProvider(api_key=settings.CLAUDE_API_KEY)
        return XAIProvider(api_key=settings.XAI_API_KEY)
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple


class AIProvider(ABC):
    """
    Abstract AI provider interface.

    Implement this for different LLM services.
    """

    # Model name prefixes this provider can serve; other names fall back
    # to the provider's configured default model.
    model_prefixes: Tuple[str, ...] = ()

    def __init__(self, model: str):
        self.model = model

    def resolve_model(self, requested: Optional[str]) -> str:
        """
        Pick the model to call for a requested model name.

        Args:
            requested: Model name from a prompt template, if any

        Returns:
            The requested model when this provider serves it, else the default
        """
        if requested and requested.startswith(self.model_prefixes):
            return requested
        return self.model

    @abstractmethod
    async def chat(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        model: Optional[str] = None,
    ) -> str:
        """
        Send a message and get a response.

        Args:
            message: The user prompt
            system_prompt: Optional system instructions
            max_tokens: Maximum tokens in the response
            temperature: Sampling temperature (0-1)
            model: Requested model name (see resolve_model)

        Returns:
            The AI's response text
        """
        pass

    async def health_check(self) -> bool:
        """
        Check if the AI service is available.

        Returns:
            True if the service is healthy and responding
        """
        try:
            await self.chat("test", max_tokens=5)
            return True
        except Exception:
            return False
