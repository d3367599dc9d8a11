"""
Astropal application settings.

Extends the base settings with locale store and AI provider configuration.
"""

import os
from typing import List, Optional
from common.config import BaseAppSettings

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Settings(BaseAppSettings):
    """Astropal-specific settings."""

    # ==========================================================================
    # Locale Store
    # ==========================================================================
    # "file" reads locales/{locale}.json, "memory" starts empty,
    # "cloudflare" reads the KV namespace over the REST API
    LOCALE_STORE: str = "file"
    LOCALES_DIR: str = os.path.join(PROJECT_ROOT, "locales")

    # Cloudflare KV
    CLOUDFLARE_ACCOUNT_ID: Optional[str] = None
    CLOUDFLARE_API_TOKEN: Optional[str] = None
    CLOUDFLARE_KV_NAMESPACE_ID: Optional[str] = None

    # ==========================================================================
    # AI Providers
    # ==========================================================================
    AI_PROVIDER: str = "xai"  # xai, claude

    # xAI Grok (OpenAI-compatible API)
    XAI_API_KEY: Optional[str] = None
    XAI_BASE_URL: str = "https://api.x.ai/v1"
    XAI_MODEL: str = "grok-3-mini"

    # Anthropic Claude
    CLAUDE_API_KEY: Optional[str] = None
    CLAUDE_MODEL: str = "claude-sonnet-4-5-20250929"

    def uses_cloudflare(self) -> bool:
        return self.LOCALE_STORE.lower() == "cloudflare"

    def get_missing_settings(self) -> List[str]:
        errors = super().get_missing_settings()

        if self.LOCALE_STORE.lower() not in ("file", "memory", "cloudflare"):
            errors.append(f"LOCALE_STORE must be file, memory or cloudflare (got {self.LOCALE_STORE})")

        if self.uses_cloudflare():
            for name in ("CLOUDFLARE_ACCOUNT_ID", "CLOUDFLARE_API_TOKEN", "CLOUDFLARE_KV_NAMESPACE_ID"):
                if not getattr(self, name):
                    errors.append(f"{name} is required when LOCALE_STORE=cloudflare")

        provider = self.AI_PROVIDER.lower()
        if provider == "xai" and not self.XAI_API_KEY:
            errors.append("XAI_API_KEY is required when AI_PROVIDER=xai")
        elif provider == "claude" and not self.CLAUDE_API_KEY:
            errors.append("CLAUDE_API_KEY is required when AI_PROVIDER=claude")
        elif provider not in ("xai", "claude"):
            errors.append(f"AI_PROVIDER must be xai or claude (got {self.AI_PROVIDER})")

        return errors


# Global settings instance
settings = Settings()
