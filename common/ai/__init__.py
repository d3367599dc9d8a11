"""
AI module - Pluggable AI providers (xAI Grok, Claude).
"""

from common.ai.base import AIProvider
from common.ai.claude import ClaudeProvider
from common.ai.xai import XAIProvider

__all__ = ["AIProvider", "ClaudeProvider", "XAIProvider"]
