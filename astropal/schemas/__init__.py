"""
Request/response schemas.
"""

from astropal.schemas.prompts import (
    AspectPayload,
    ComposedPromptData,
    ComposeRequest,
    EphemerisPayload,
    GeneratedContentData,
    GenerateRequest,
    MoonPositionPayload,
    PerspectiveRequest,
    SunPositionPayload,
    UserPayload,
)

__all__ = [
    "AspectPayload",
    "ComposedPromptData",
    "ComposeRequest",
    "EphemerisPayload",
    "GeneratedContentData",
    "GenerateRequest",
    "MoonPositionPayload",
    "PerspectiveRequest",
    "SunPositionPayload",
    "UserPayload",
]
