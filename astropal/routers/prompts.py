"""
FastAPI router for prompt composition endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from common.utils import InternalServerException
from astropal.dependencies import (
    get_locale_service,
    get_localized_prompt_composer,
    get_prompt_composer,
)
from astropal.locale import LocaleService
from astropal.prompts import ComposedPrompt, LocalizedPromptComposer, PromptComposer
from astropal.schemas import ComposedPromptData, ComposeRequest, PerspectiveRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prompts", tags=["prompts"])


def prompt_data(prompt: ComposedPrompt) -> dict:
    config = prompt.template.model_config
    return ComposedPromptData(
        templateId=prompt.template.id,
        locale=prompt.locale,
        systemPrompt=prompt.system_prompt,
        userPrompt=prompt.user_prompt,
        model=config.model,
        temperature=config.temperature,
        maxTokens=config.max_tokens,
    ).model_dump()


@router.post("/compose")
async def compose_prompt(
    body: ComposeRequest,
    request: Request,
    composer: Annotated[PromptComposer, Depends(get_prompt_composer)],
    localized_composer: Annotated[LocalizedPromptComposer, Depends(get_localized_prompt_composer)],
):
    """
    Compose a prompt for a subscriber and the day's ephemeris.

    Localized by default; the subscriber's locale falls back to the
    request locale.
    """
    user = body.user.to_context(request.state.locale)
    ephemeris = body.ephemeris.to_context()

    if body.localized:
        prompt = await localized_composer.build_localized_prompt(
            user, ephemeris, body.newsContext, body.contentType
        )
    else:
        prompt = composer.build_prompt(user, ephemeris, body.newsContext, body.contentType)

    if prompt is None:
        raise InternalServerException(
            f"No prompt template for {user.perspective}/{body.contentType}/{user.tier}"
        )

    return await request.state.responder.success("composed", prompt_data(prompt))


@router.post("/perspective")
async def apply_perspective(
    body: PerspectiveRequest,
    request: Request,
    locale_service: Annotated[LocaleService, Depends(get_locale_service)],
):
    """Append perspective weighting instructions to a prompt."""
    locale = body.locale or request.state.locale
    prompt = locale_service.apply_perspective_to_prompt(body.basePrompt, body.perspective, locale)
    return await request.state.responder.success("composed", {
        "perspective": body.perspective,
        "locale": locale,
        "prompt": prompt,
    })
