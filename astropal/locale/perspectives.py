"""
Perspective profiles.

A perspective biases generated text toward a tone, focus and style. The
table is compiled in; it is not stored with the locale documents.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class PerspectiveProfile:
    """Tone/focus/style metadata for one perspective."""
    tone: str
    focus: str
    style: str
    keywords: Tuple[str, ...]
    weight: float  # influence in [0, 1]

    @property
    def influence_percent(self) -> int:
        return round(self.weight * 100)

    @property
    def remaining_percent(self) -> int:
        return 100 - self.influence_percent


PERSPECTIVE_PROFILES: Dict[str, PerspectiveProfile] = {
    "calm": PerspectiveProfile(
        tone="gentle, reassuring, peaceful",
        focus="inner harmony, meditation, balance",
        style="soft, flowing, contemplative",
        keywords=("peace", "serenity", "mindfulness", "tranquility"),
        weight=0.7,
    ),
    "knowledge": PerspectiveProfile(
        tone="informative, educational, curious",
        focus="learning, understanding, wisdom",
        style="detailed, analytical, exploratory",
        keywords=("discover", "understand", "explore", "learn"),
        weight=0.7,
    ),
    "success": PerspectiveProfile(
        tone="motivational, action-oriented, confident",
        focus="achievement, goals, progress",
        style="direct, energetic, ambitious",
        keywords=("achieve", "succeed", "accomplish", "excel"),
        weight=0.7,
    ),
    "evidence": PerspectiveProfile(
        tone="factual, scientific, objective",
        focus="astronomical events, data, observations",
        style="precise, technical, informative",
        keywords=("data", "observation", "phenomenon", "measurement"),
        weight=0.7,
    ),
}

SUPPORTED_PERSPECTIVES: List[str] = list(PERSPECTIVE_PROFILES)
DEFAULT_PERSPECTIVE = "calm"


def is_valid_perspective(perspective: Optional[str]) -> bool:
    return perspective in PERSPECTIVE_PROFILES


def get_user_perspective(perspective: Optional[str]) -> str:
    """Normalize a stored preference to a supported perspective."""
    if is_valid_perspective(perspective):
        return perspective
    return DEFAULT_PERSPECTIVE


def get_profile(perspective: Optional[str]) -> PerspectiveProfile:
    return PERSPECTIVE_PROFILES[get_user_perspective(perspective)]
