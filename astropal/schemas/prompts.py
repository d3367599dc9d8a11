"""
Pydantic models for prompt and content request validation.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from astropal.prompts import (
    Aspect,
    EphemerisContext,
    MoonPosition,
    SunPosition,
    UserContext,
)


# =============================================================================
# Shared Payloads
# =============================================================================

class UserPayload(BaseModel):
    perspective: str = Field(..., min_length=1)
    tier: str = Field(..., min_length=1)
    birthLocation: str = Field(..., min_length=1)
    timezone: str = Field(..., min_length=1)
    focusAreas: List[str] = Field(default_factory=list, max_length=3)
    sunSign: Optional[str] = None
    risingSign: Optional[str] = None
    locale: Optional[str] = None

    def to_context(self, default_locale: str) -> UserContext:
        return UserContext(
            perspective=self.perspective,
            tier=self.tier,
            birth_location=self.birthLocation,
            timezone=self.timezone,
            focus_areas=list(self.focusAreas),
            sun_sign=self.sunSign,
            rising_sign=self.risingSign,
            locale=self.locale or default_locale,
        )


class SunPositionPayload(BaseModel):
    sign: str
    degree: float = Field(..., ge=0, lt=360)


class MoonPositionPayload(BaseModel):
    sign: str
    degree: float = Field(..., ge=0, lt=360)
    phase: str


class AspectPayload(BaseModel):
    planet1: str
    planet2: str
    aspect: str
    orb: float = 0.0


class EphemerisPayload(BaseModel):
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}")
    sunPosition: SunPositionPayload
    moonPosition: MoonPositionPayload
    majorAspects: List[AspectPayload] = Field(default_factory=list)
    retrogradePlanets: List[str] = Field(default_factory=list)

    def to_context(self) -> EphemerisContext:
        return EphemerisContext(
            date=self.date,
            sun_position=SunPosition(self.sunPosition.sign, self.sunPosition.degree),
            moon_position=MoonPosition(
                self.moonPosition.sign, self.moonPosition.degree, self.moonPosition.phase
            ),
            major_aspects=[
                Aspect(a.planet1, a.planet2, a.aspect, a.orb) for a in self.majorAspects
            ],
            retrograde_planets=list(self.retrogradePlanets),
        )


# =============================================================================
# Request Schemas
# =============================================================================

class ComposeRequest(BaseModel):
    """POST /api/v1/prompts/compose"""
    user: UserPayload
    ephemeris: EphemerisPayload
    newsContext: Optional[str] = None
    contentType: str = "daily"
    localized: bool = True


class PerspectiveRequest(BaseModel):
    """POST /api/v1/prompts/perspective"""
    basePrompt: str = Field(..., min_length=1)
    perspective: str = Field(..., min_length=1)
    locale: Optional[str] = None


class GenerateRequest(BaseModel):
    """POST /api/v1/content/generate"""
    user: UserPayload
    ephemeris: EphemerisPayload
    newsContext: Optional[str] = None


# =============================================================================
# Response Schemas (used inside success_response data)
# =============================================================================

class ComposedPromptData(BaseModel):
    templateId: str
    locale: Optional[str]
    systemPrompt: str
    userPrompt: str
    model: str
    temperature: float
    maxTokens: int


class GeneratedContentData(BaseModel):
    templateId: str
    model: str
    perspective: str
    tier: str
    locale: Optional[str]
    content: str
    generatedAt: str
