"""
Shared environment settings.

Server, CORS, locale and admin options read from the environment (and
.env) by pydantic-settings. Applications subclass BaseAppSettings and add
their own fields.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        # App-specific settings
        XAI_API_KEY: str = ""

    settings = Settings()
    print(settings.DEFAULT_LOCALE)
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """Settings shared by every service built on the common package."""

    # ==========================================================================
    # Server Settings
    # ==========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production
    LOG_LEVEL: str = "INFO"

    # CORS Settings
    CORS_ORIGINS: str = "*"  # Comma-separated origins or "*"
    CORS_ALLOW_CREDENTIALS: bool = True

    # ==========================================================================
    # Internationalization
    # ==========================================================================
    DEFAULT_LOCALE: str = "en-US"
    SUPPORTED_LOCALES: str = "en-US,es-ES"  # Comma-separated
    BRAND: str = "astropal"

    # ==========================================================================
    # Administration
    # ==========================================================================
    ADMIN_TOKEN: Optional[str] = None

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow app-specific settings
        case_sensitive=True,
    )

    def get_cors_origins(self) -> List[str]:
        """CORS_ORIGINS as a list; "*" stays a single wildcard."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def get_supported_locales(self) -> List[str]:
        """Parse SUPPORTED_LOCALES into a list, default locale first."""
        locales = [loc.strip() for loc in self.SUPPORTED_LOCALES.split(",") if loc.strip()]
        if self.DEFAULT_LOCALE not in locales:
            locales.insert(0, self.DEFAULT_LOCALE)
        return locales

    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    def get_missing_settings(self) -> List[str]:
        """
        List configuration problems. Subclasses extend this.

        Returns:
            Human-readable descriptions of missing settings
        """
        errors = []
        if self.is_production() and not self.ADMIN_TOKEN:
            errors.append("ADMIN_TOKEN is required in production")
        return errors

    def validate_required(self) -> None:
        """
        Fail fast on misconfiguration.

        Raises:
            ValueError: Listing every problem found
        """
        errors = self.get_missing_settings()
        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
