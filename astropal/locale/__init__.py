"""
Locale System

Locale document loading with fallback, token lookup, perspective
weighting and document validation.
"""

from astropal.locale.document import DocumentSource, LocaleDocument, build_minimal_document
from astropal.locale.perspectives import (
    DEFAULT_PERSPECTIVE,
    PERSPECTIVE_PROFILES,
    SUPPORTED_PERSPECTIVES,
    PerspectiveProfile,
    get_user_perspective,
)
from astropal.locale.service import LocaleCache, LocaleService
from astropal.locale.validation import ValidationReport, validate_locale_data

__all__ = [
    "DocumentSource",
    "LocaleDocument",
    "build_minimal_document",
    "DEFAULT_PERSPECTIVE",
    "PERSPECTIVE_PROFILES",
    "SUPPORTED_PERSPECTIVES",
    "PerspectiveProfile",
    "get_user_perspective",
    "LocaleCache",
    "LocaleService",
    "ValidationReport",
    "validate_locale_data",
]
