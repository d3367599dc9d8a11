"""
Locale documents.

A locale document is the full translation/content catalog for one
(locale, brand) pair. Documents are authored offline, uploaded whole and
read-only at request time.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from common.i18n import TokenResult, resolve


class DocumentSource(str, Enum):
    """Where a served document came from in the fallback chain."""
    REQUESTED = "requested"
    DEFAULT = "default"
    MINIMAL = "minimal"


@dataclass(frozen=True)
class LocaleDocument:
    """A loaded locale document plus the context it was served for."""
    locale: str
    brand: str
    data: Dict[str, Any] = field(repr=False)
    source: DocumentSource = DocumentSource.REQUESTED

    @property
    def is_fallback(self) -> bool:
        return self.source is not DocumentSource.REQUESTED

    def section(self, name: str) -> Dict[str, Any]:
        value = self.data.get(name)
        return value if isinstance(value, dict) else {}

    def resolve(self, path: str) -> TokenResult:
        return resolve(self.data, path)

    def with_source(self, source: DocumentSource) -> "LocaleDocument":
        return LocaleDocument(self.locale, self.brand, self.data, source)


def build_minimal_document(locale: str, brand: str) -> LocaleDocument:
    """
    Hardcoded English document served when nothing can be loaded.

    Covers every required section. Prompt fragments and UI copy are left
    empty so they resolve as missing and callers use their own defaults.
    """
    return LocaleDocument(
        locale=locale,
        brand=brand,
        source=DocumentSource.MINIMAL,
        data=_minimal_data(brand),
    )


def _empty_system_prompt() -> Dict[str, str]:
    return {"core": "", "principles": "", "guidelines": "", "restrictions": ""}


def _minimal_data(brand: Optional[str]) -> Dict[str, Any]:
    name = (brand or "astropal").capitalize()
    return {
        "email": {
            "subjects": {
                "welcome": f"Welcome to {name}",
                "daily_morning": "Your Daily Cosmic Forecast",
                "daily_evening": "Evening Cosmic Reflection",
                "weekly": "Your Weekly Cosmic Overview",
                "monthly": "Monthly Cosmic Insights",
                "trial_ending": "Your trial ends soon",
                "trial_expired": "Continue your cosmic journey",
                "upgrade_confirmation": f"Welcome to {name} Premium",
                "upgrade_reminder": "Enhance your cosmic insights",
                "payment_failed": "Payment failed - Update your method",
                "cancellation": "Subscription cancelled",
            },
            "templates": {
                "greeting_morning": "Good morning, {{name}}!",
                "greeting_evening": "Good evening, {{name}}!",
                "closing": "Until the stars align again",
                "signature": f"The {name} Team",
                "unsubscribe_text": "Unsubscribe from these emails",
                "footer_disclaimer": f"This email was sent by {name}",
            },
            "buttons": {
                "upgrade_basic": "Upgrade to Basic",
                "upgrade_pro": "Upgrade to Pro",
                "unsubscribe": "Unsubscribe",
                "change_perspective": "Change Perspective",
                "update_preferences": "Update Preferences",
            },
        },
        "perspectives": {
            "calm": {
                "name": "Calm",
                "description": "Peaceful guidance",
                "short_description": "Peace",
                "prompt_tone": "gentle, nurturing, peaceful",
                "prompt_focus": "inner harmony, meditation, balance",
                "prompt_keywords": ["peace", "serenity", "mindfulness", "tranquility"],
            },
            "knowledge": {
                "name": "Knowledge",
                "description": "Educational insights",
                "short_description": "Learn",
                "prompt_tone": "informative, educational, curious",
                "prompt_focus": "learning, understanding, wisdom",
                "prompt_keywords": ["discover", "understand", "explore", "learn"],
            },
            "success": {
                "name": "Success",
                "description": "Achievement focus",
                "short_description": "Achieve",
                "prompt_tone": "motivational, action-oriented, confident",
                "prompt_focus": "achievement, goals, progress",
                "prompt_keywords": ["achieve", "succeed", "accomplish", "excel"],
            },
            "evidence": {
                "name": "Evidence",
                "description": "Scientific approach",
                "short_description": "Science",
                "prompt_tone": "factual, scientific, objective",
                "prompt_focus": "astronomical events, data, observations",
                "prompt_keywords": ["data", "observation", "phenomenon", "measurement"],
            },
        },
        "formats": {
            "date_format": "MMMM d, yyyy",
            "currency": "USD",
            "timezone_display": "UTC",
            "number_format": "en-US",
        },
        "ui": {
            "hero": {"mission": "", "title": "", "description": "", "cta": ""},
            "features": {"sectionTitle": "", "title": "", "description": "", "features": []},
            "signup": {
                "email": "",
                "dateOfBirth": "",
                "birthLocation": "",
                "birthTime": "",
                "timezone": "",
                "perspective": "",
                "focusAreas": "",
                "referralCode": "",
                "submit": "",
                "submitting": "",
                "tooltips": {
                    "email": "",
                    "dateOfBirth": "",
                    "birthLocation": "",
                    "birthTime": "",
                    "perspective": "",
                    "focusAreas": "",
                },
            },
            "pricing": {
                "sectionTitle": "",
                "title": "",
                "description": "",
                "loading": "",
                "error": "",
                "selectPlan": "",
                "monthly": "",
                "annually": "",
                "tiers": {
                    tier: {"name": "", "description": "", "features": []}
                    for tier in ("free", "basic", "pro")
                },
            },
            "referral": {"title": "", "description": "", "bonusDays": ""},
            "verify": {
                "verifying": "",
                "success": "",
                "successMessage": "",
                "redirecting": "",
                "error": "",
                "goHome": "",
            },
            "legal": {"terms": "", "privacy": "", "disclaimer": ""},
        },
        "api": {
            "errors": {
                "generic": "An error occurred",
                "notFound": "Not found",
                "unauthorized": "Unauthorized",
                "rateLimited": "Too many requests",
                "invalidInput": "Invalid input",
                "serverError": "Server error",
                "emailExists": "Email already exists",
                "invalidEmail": "Invalid email",
                "invalidDate": "Invalid date",
                "invalidLocation": "Invalid location",
                "trialExpired": "Trial expired",
                "paymentFailed": "Payment failed",
                "subscriptionNotFound": "Subscription not found",
            },
            "success": {
                "registered": "Registered successfully",
                "verified": "Verified successfully",
                "updated": "Updated successfully",
                "cancelled": "Cancelled successfully",
                "upgraded": "Upgraded successfully",
                "retrieved": "Retrieved successfully",
                "composed": "Prompt composed",
                "generated": "Content generated",
                "cacheCleared": "Cache cleared",
            },
        },
        "validation": {
            "required": "This field is required",
            "email": "Invalid email",
            "date": "Invalid date",
            "minLength": "Too short",
            "maxLength": "Too long",
            "pattern": "Invalid format",
            "minItems": "Select at least {{min}}",
            "maxItems": "Select at most {{max}}",
            "birthDate": {
                "future": "Cannot be in future",
                "tooYoung": "Must be 13+",
                "tooOld": "Invalid age",
            },
            "birthLocation": {
                "format": "Use City, Country format",
                "invalid": "Invalid location",
            },
            "focusAreas": {"min": "Select at least 1", "max": "Select at most 3"},
        },
        "prompts": {
            "system": {
                "calm": _empty_system_prompt(),
                "knowledge": _empty_system_prompt(),
                "success": _empty_system_prompt(),
                "evidence": _empty_system_prompt(),
            },
            "base": {
                "daily": {"free": "", "basic": "", "pro": ""},
                "weekly": "",
                "monthly": "",
            },
            "variables": {
                "date": "",
                "sunSign": "",
                "moonSign": "",
                "moonPhase": "",
                "risingSign": "",
                "birthLocation": "",
                "focusAreas": "",
            },
        },
        "common": {
            "loading": "Loading...",
            "error": "Error",
            "retry": "Retry",
            "success": "Success",
            "cancel": "Cancel",
            "confirm": "Confirm",
            "save": "Save",
            "update": "Update",
            "delete": "Delete",
            "back": "Back",
            "next": "Next",
            "yes": "Yes",
            "no": "No",
            "or": "or",
            "and": "and",
        },
        "focus_areas": {
            "relationships": "Relationships",
            "career": "Career",
            "wellness": "Wellness",
            "social": "Social",
            "spiritual": "Spiritual",
            "evidence-based": "Evidence-based",
        },
    }
