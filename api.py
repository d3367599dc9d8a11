"""
Astropal FastAPI Application

Main entry point for the Astropal localization and content API.
"""

import logging
from contextlib import asynccontextmanager
from typing import Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Common library imports
from common.utils import APIException, RateLimitException

# App-specific imports
from astropal.config import settings
from astropal.dependencies import get_api_responses, init_services
from astropal.middleware import LocaleMiddleware

# Import routers
from astropal.routers import content_router, i18n_router, prompts_router


logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# pydantic error type -> validation.* key
VALIDATION_KEYS = {
    "missing": "required",
    "string_too_short": "minLength",
    "string_too_long": "maxLength",
    "too_short": "minItems",
    "too_long": "maxItems",
    "string_pattern_mismatch": "pattern",
    "date_from_datetime_parsing": "date",
    "date_parsing": "date",
}
DEFAULT_VALIDATION_KEY = "pattern"

REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Initializes the locale store, locale service and AI provider.
    """
    logger.info("Starting Astropal API...")

    for problem in settings.get_missing_settings():
        logger.warning(f"Configuration: {problem}")

    init_services(settings)
    logger.info("Astropal API started successfully!")

    yield

    logger.info("Astropal API shut down complete.")


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Astropal API",
    description="Localization and content composition for personalized astrology newsletters",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# Middleware
# =============================================================================
app.middleware("http")(LocaleMiddleware(get_api_responses))

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================
def request_locale(request: Request) -> str:
    return getattr(request.state, "locale", None) or settings.DEFAULT_LOCALE


@app.exception_handler(RateLimitException)
async def rate_limit_handler(request: Request, exc: RateLimitException):
    return await get_api_responses().build_rate_limit_response(
        exc.retry_after, request_locale(request)
    )


@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.details})")
    return await get_api_responses().build_error_response(exc.code, request_locale(request))


def validation_field_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    """Group pydantic errors by field name as validation.* keys."""
    field_errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if not isinstance(part, int)]
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        field = loc[-1] if loc else "request"
        key = VALIDATION_KEYS.get(error.get("type", ""), DEFAULT_VALIDATION_KEY)
        keys = field_errors.setdefault(field, [])
        if key not in keys:
            keys.append(key)
    return field_errors


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return await get_api_responses().build_validation_error_response(
        validation_field_errors(exc), request_locale(request)
    )


# =============================================================================
# Include Routers (all under /api/v1 prefix)
# =============================================================================
API_PREFIX = "/api/v1"

app.include_router(i18n_router, prefix=API_PREFIX, tags=["i18n"])
app.include_router(prompts_router, prefix=API_PREFIX, tags=["Prompts"])
app.include_router(content_router, prefix=API_PREFIX, tags=["Content"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health(request: Request):
    """
    Health check endpoint.

    Returns the status of the API and its locale store.
    """
    return await request.state.responder.success("retrieved", {
        "status": "ok",
        "version": "1.0.0",
        "localeStore": settings.LOCALE_STORE,
        "brand": settings.BRAND,
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
