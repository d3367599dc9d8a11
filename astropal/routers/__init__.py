"""
Astropal API Routers.

All routers are imported here for easy access.
"""

from astropal.routers.i18n import router as i18n_router
from astropal.routers.prompts import router as prompts_router
from astropal.routers.content import router as content_router

__all__ = [
    "i18n_router",
    "prompts_router",
    "content_router",
]
