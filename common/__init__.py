"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across projects:

- storage: Key-value store contract (memory, directory, Cloudflare KV)
- i18n: Token lookup and placeholder interpolation
- ai: Pluggable AI providers (xAI Grok, Claude)
- utils: Standard responses and exceptions
- config: Base settings class
"""

from common.storage import (
    CloudflareKVStore,
    DirectoryKVStore,
    InMemoryKVStore,
    KeyValueStore,
    StoreError,
)
from common.ai import AIProvider, ClaudeProvider, XAIProvider
from common.i18n import Found, Missing, TokenResult, interpolate, resolve
from common.utils import (
    success_response,
    error_response,
    APIException,
    UnauthorizedException,
    NotFoundException,
    RateLimitException,
)
from common.config import BaseAppSettings

__all__ = [
    # Storage
    "CloudflareKVStore",
    "DirectoryKVStore",
    "InMemoryKVStore",
    "KeyValueStore",
    "StoreError",
    # AI
    "AIProvider",
    "ClaudeProvider",
    "XAIProvider",
    # i18n
    "Found",
    "Missing",
    "TokenResult",
    "interpolate",
    "resolve",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "UnauthorizedException",
    "NotFoundException",
    "RateLimitException",
    # Config
    "BaseAppSettings",
]
