"""
i18n module - Token lookup and placeholder interpolation.
"""

from common.i18n.lookup import (
    Found,
    Missing,
    TokenResult,
    find_unresolved,
    get_nested,
    interpolate,
    placeholder,
    resolve,
)

__all__ = [
    "Found",
    "Missing",
    "TokenResult",
    "find_unresolved",
    "get_nested",
    "interpolate",
    "placeholder",
    "resolve",
]
