"""
FastAPI router for i18n endpoints.

Provides locale and perspective listing, token lookup, localized email
subjects and copy, and locale cache administration.
"""

import hmac
import logging
from typing import Annotated, Any, Dict, Optional

from fastapi import APIRouter, Depends, Header, Query, Request

from common.utils import NotFoundException, UnauthorizedException
from astropal.config import Settings
from astropal.dependencies import get_api_responses, get_locale_service, get_settings
from astropal.locale import PERSPECTIVE_PROFILES, LocaleService
from astropal.locale.perspectives import DEFAULT_PERSPECTIVE
from astropal.responses import LocalizedApiResponses

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/i18n", tags=["i18n"])


@router.get("/locales")
async def get_locales(
    request: Request,
    locale_service: Annotated[LocaleService, Depends(get_locale_service)],
):
    """Get supported locales and the default locale."""
    return await request.state.responder.success("retrieved", {
        "locales": locale_service.get_supported_locales(),
        "default": locale_service.default_locale,
    })


@router.get("/perspectives")
async def get_perspectives(request: Request):
    """Get perspective profiles with their influence weights."""
    return await request.state.responder.success("retrieved", {
        "default": DEFAULT_PERSPECTIVE,
        "perspectives": {
            name: {
                "tone": profile.tone,
                "focus": profile.focus,
                "style": profile.style,
                "keywords": list(profile.keywords),
                "weight": profile.weight,
            }
            for name, profile in PERSPECTIVE_PROFILES.items()
        },
    })


@router.get("/tokens")
async def get_token(
    request: Request,
    locale_service: Annotated[LocaleService, Depends(get_locale_service)],
    responses: Annotated[LocalizedApiResponses, Depends(get_api_responses)],
    path: str = Query(..., min_length=1),
    locale: Optional[str] = Query(None),
):
    """
    Resolve a token by dot-notation path.

    Uses the request locale unless one is given explicitly. Missing tokens
    are reported with found=false and their bracketed placeholder.
    """
    if locale is not None and not locale_service.is_valid_locale(locale):
        raise NotFoundException(f"Unsupported locale: {locale}")

    document = await locale_service.load_locale(locale or request.state.locale)
    result = locale_service.resolve_token(document, path)

    return await responses.build_success_response(
        "retrieved",
        {
            "path": path,
            "found": result.found,
            "value": result.render(),
            "locale": document.locale,
            "source": document.source.value,
        },
        document.locale,
    )


def email_overrides(
    name: Optional[str] = Query(None, max_length=100),
    days: Optional[int] = Query(None, ge=0),
    tier: Optional[str] = Query(None, max_length=20),
) -> Dict[str, Any]:
    """Placeholder overrides taken from the query string."""
    return {"name": name, "days": days, "tier": tier}


@router.get("/subjects/{template_type}")
async def get_subject(
    template_type: str,
    request: Request,
    locale_service: Annotated[LocaleService, Depends(get_locale_service)],
    overrides: Annotated[Dict[str, Any], Depends(email_overrides)],
    perspective: str = Query(DEFAULT_PERSPECTIVE),
):
    """
    Get the localized email subject for a template type.

    {{date}} and {{month}} render for the request locale; name, days and
    tier can be supplied as query parameters.
    """
    subject = await locale_service.get_localized_subject(
        request.state.locale, template_type, perspective, overrides
    )
    return await request.state.responder.success("retrieved", {
        "templateType": template_type,
        "subject": subject,
    })


@router.get("/emails/{template_type}")
async def get_email_copy(
    template_type: str,
    request: Request,
    locale_service: Annotated[LocaleService, Depends(get_locale_service)],
    overrides: Annotated[Dict[str, Any], Depends(email_overrides)],
    perspective: str = Query(DEFAULT_PERSPECTIVE),
):
    """Get the subject, greeting, sign-off, buttons and perspective copy for an email."""
    email = await locale_service.build_email_copy(
        request.state.locale, template_type, perspective, overrides
    )
    return await request.state.responder.success("retrieved", {
        "templateType": template_type,
        **email,
    })


@router.delete("/cache")
async def clear_cache(
    request: Request,
    locale_service: Annotated[LocaleService, Depends(get_locale_service)],
    settings: Annotated[Settings, Depends(get_settings)],
    x_admin_token: Annotated[Optional[str], Header()] = None,
):
    """
    Clear the locale cache so the next request refetches from the store.

    Requires the X-Admin-Token header.
    """
    expected = settings.ADMIN_TOKEN
    if not expected or not x_admin_token or not hmac.compare_digest(x_admin_token, expected):
        logger.warning("Rejected locale cache clear: invalid admin token")
        raise UnauthorizedException("Invalid admin token")

    cleared = len(locale_service.cache)
    locale_service.clear_cache()
    return await request.state.responder.success("cacheCleared", {"cleared": cleared})
