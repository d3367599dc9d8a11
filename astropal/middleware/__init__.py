"""
Middleware module.

Exports:
    - LocaleMiddleware: Request-scoped locale negotiation
"""

from astropal.middleware.locale import LocaleMiddleware

__all__ = [
    "LocaleMiddleware",
]
