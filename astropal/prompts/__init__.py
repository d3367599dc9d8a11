"""
Prompt composition: template catalog, base composer and localized composer.
"""

from astropal.prompts.catalog import FOCUS_AREA_KEYWORDS, PROMPT_TEMPLATES
from astropal.prompts.composer import PromptComposer
from astropal.prompts.localized import LocalizedPromptComposer
from astropal.prompts.types import (
    Aspect,
    ComposedPrompt,
    EphemerisContext,
    ModelConfig,
    MoonPosition,
    PromptTemplate,
    SunPosition,
    UserContext,
)
from astropal.prompts.vocabulary import Vocabulary, get_vocabulary

__all__ = [
    "FOCUS_AREA_KEYWORDS",
    "PROMPT_TEMPLATES",
    "PromptComposer",
    "LocalizedPromptComposer",
    "Aspect",
    "ComposedPrompt",
    "EphemerisContext",
    "ModelConfig",
    "MoonPosition",
    "PromptTemplate",
    "SunPosition",
    "UserContext",
    "Vocabulary",
    "get_vocabulary",
]
