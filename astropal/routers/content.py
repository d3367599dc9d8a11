"""
FastAPI router for content generation.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Request

from common.utils import InternalServerException
from astropal.dependencies import get_content_generator
from astropal.schemas import GeneratedContentData, GenerateRequest
from astropal.services import ContentGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/content", tags=["content"])


@router.post("/generate")
async def generate_content(
    body: GenerateRequest,
    request: Request,
    generator: Annotated[Optional[ContentGenerator], Depends(get_content_generator)],
):
    """
    Generate content for a subscriber with the configured AI provider.

    Fails with serverError when no provider is configured, no template
    matches or the provider call fails.
    """
    if generator is None:
        raise InternalServerException("AI provider not configured")

    user = body.user.to_context(request.state.locale)
    try:
        result = await generator.generate(user, body.ephemeris.to_context(), body.newsContext)
    except Exception as e:
        logger.error(f"Content generation failed (perspective={user.perspective}, tier={user.tier}): {e}")
        raise InternalServerException("Content generation failed", details=str(e))

    if result is None:
        raise InternalServerException(f"No prompt template for {user.perspective}/{user.tier}")

    return await request.state.responder.success("generated", GeneratedContentData(
        templateId=result.template_id,
        model=result.model,
        perspective=result.perspective,
        tier=result.tier,
        locale=result.locale,
        content=result.content,
        generatedAt=result.generated_at.isoformat(),
    ).model_dump())
