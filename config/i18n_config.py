"""
Localization configuration constants.

These are fixed values that don't change per environment.
Environment-specific values (brand, store credentials) are loaded from env vars.
"""

# Supported locales, default first
SUPPORTED_LOCALES = ["en-US", "es-ES"]
DEFAULT_LOCALE = "en-US"
DEFAULT_BRAND = "astropal"

# Store key for one locale document
LOCALE_KEY_TEMPLATE = "i18n:{locale}:{brand}"

# One-line cultural context appended to perspective instructions
CULTURAL_CONTEXT = {
    "en-US": "American cultural context, direct communication style",
    "es-ES": (
        "Spanish cultural context, warm and personal communication, "
        "formal 'usted' for respectful tone"
    ),
}

# Cultural guideline line appended to localized system prompts
PROMPT_CULTURAL_GUIDELINES = {
    "en-US": (
        "Use direct, clear communication style typical of American culture. "
        "Be encouraging and positive."
    ),
    "es-ES": (
        "Use warm, personal communication style with appropriate formality. "
        "Include cultural references to Spanish and Latin American traditions "
        "when relevant."
    ),
}

# api.errors code -> HTTP status
ERROR_STATUS_CODES = {
    "notFound": 404,
    "unauthorized": 401,
    "rateLimited": 429,
    "invalidInput": 400,
    "serverError": 500,
    "emailExists": 409,
    "invalidEmail": 400,
    "invalidDate": 400,
    "invalidLocation": 400,
    "trialExpired": 403,
    "paymentFailed": 402,
    "subscriptionNotFound": 404,
}
DEFAULT_ERROR_STATUS = 500

# Top-level sections every locale document carries
REQUIRED_SECTIONS = [
    "email",
    "perspectives",
    "formats",
    "ui",
    "api",
    "validation",
    "prompts",
    "common",
    "focus_areas",
]

REQUIRED_EMAIL_SUBJECTS = [
    "welcome",
    "daily_morning",
    "daily_evening",
    "weekly",
    "monthly",
    "trial_ending",
    "trial_expired",
    "upgrade_confirmation",
    "upgrade_reminder",
]

# Ultimate fallbacks when nothing can be loaded
FALLBACK_SUBJECT = "Your Cosmic Update"
FALLBACK_ERROR_MESSAGE = "An error occurred"
FALLBACK_SUCCESS_MESSAGE = "Operation successful"
FALLBACK_VALIDATION_MESSAGE = "Validation failed"
FALLBACK_RATE_LIMIT_MESSAGE = "Too many requests"

# Subject placeholder values used when the caller supplies none
DEFAULT_EMAIL_VARIABLES = {
    "days": "2",
    "tier": "Pro",
    "name": "Friend",
}

# Greetings switch from morning to evening at this hour
EVENING_GREETING_HOUR = 12
