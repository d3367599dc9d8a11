"""
Configuration module - Fixed localization and prompt constants.
"""

from config.i18n_config import (
    SUPPORTED_LOCALES,
    DEFAULT_LOCALE,
    DEFAULT_BRAND,
    ERROR_STATUS_CODES,
    REQUIRED_SECTIONS,
)

__all__ = [
    "SUPPORTED_LOCALES",
    "DEFAULT_LOCALE",
    "DEFAULT_BRAND",
    "ERROR_STATUS_CODES",
    "REQUIRED_SECTIONS",
]
