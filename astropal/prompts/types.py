"""
Type definitions for prompt composition.

Contains dataclasses shared by the prompt catalog and composers.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class ModelConfig:
    """Generation settings for a template."""
    model: str
    temperature: float
    max_tokens: int


@dataclass(frozen=True)
class PromptTemplate:
    """A system/base prompt pair for one (tier, perspective, content type)."""
    id: str
    tier: str  # "free" | "basic" | "pro"
    perspective: str  # "calm" | "knowledge" | "success" | "evidence"
    content_type: str  # "daily" | "weekly" | "monthly"
    system_prompt: str
    base_prompt: str
    focus_weights: Dict[str, float]
    model_config: ModelConfig


@dataclass
class UserContext:
    """Subscriber facts used to personalize a prompt."""
    perspective: str
    tier: str
    birth_location: str
    timezone: str
    focus_areas: List[str] = field(default_factory=list)
    sun_sign: Optional[str] = None
    rising_sign: Optional[str] = None
    locale: str = "en-US"


@dataclass
class SunPosition:
    sign: str
    degree: float


@dataclass
class MoonPosition:
    sign: str
    degree: float
    phase: str


@dataclass
class Aspect:
    planet1: str
    planet2: str
    aspect: str  # "conjunction" | "opposition" | "trine" | "square" | "sextile"
    orb: float = 0.0


@dataclass
class EphemerisContext:
    """Astronomical snapshot for one date. Treated as opaque input."""
    date: str  # ISO date, e.g. "2026-10-17"
    sun_position: SunPosition
    moon_position: MoonPosition
    major_aspects: List[Aspect] = field(default_factory=list)
    retrograde_planets: List[str] = field(default_factory=list)


@dataclass
class ComposedPrompt:
    """A ready-to-send instruction pair."""
    system_prompt: str
    user_prompt: str
    template: PromptTemplate
    locale: Optional[str] = None  # None when composed without localization
