"""
Astrological vocabulary per locale.

Ephemeris data and focus keywords arrive in English; localized prompts
translate them through these tables. Locales without a table use the
English terms unchanged.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from astropal.prompts.composer import (
    DEFAULT_NEWS_CONTEXT,
    NO_ASPECTS_TEXT,
    NO_RETROGRADES_TEXT,
)


@dataclass(frozen=True)
class Vocabulary:
    zodiac_signs: Dict[str, str] = field(default_factory=dict)
    moon_phases: Dict[str, str] = field(default_factory=dict)
    aspects: Dict[str, str] = field(default_factory=dict)
    keywords: Dict[str, str] = field(default_factory=dict)
    no_aspects: str = NO_ASPECTS_TEXT
    no_retrogrades: str = NO_RETROGRADES_TEXT
    news_context: str = DEFAULT_NEWS_CONTEXT

    def sign(self, name: str) -> str:
        return self.zodiac_signs.get(name, name)

    def moon_phase(self, name: str) -> str:
        return self.moon_phases.get(name, name)

    def translate_keywords(self, words: Iterable[str]) -> List[str]:
        return [self.keywords.get(w, w) for w in words]


ENGLISH = Vocabulary()

SPANISH = Vocabulary(
    zodiac_signs={
        "Aries": "Aries",
        "Taurus": "Tauro",
        "Gemini": "Géminis",
        "Cancer": "Cáncer",
        "Leo": "Leo",
        "Virgo": "Virgo",
        "Libra": "Libra",
        "Scorpio": "Escorpio",
        "Sagittarius": "Sagitario",
        "Capricorn": "Capricornio",
        "Aquarius": "Acuario",
        "Pisces": "Piscis",
    },
    moon_phases={
        "New Moon": "Luna Nueva",
        "Waxing Crescent": "Luna Creciente",
        "First Quarter": "Cuarto Creciente",
        "Waxing Gibbous": "Luna Gibosa Creciente",
        "Full Moon": "Luna Llena",
        "Waning Gibbous": "Luna Gibosa Menguante",
        "Last Quarter": "Cuarto Menguante",
        "Waning Crescent": "Luna Menguante",
    },
    aspects={
        "conjunction": "conjunción",
        "opposition": "oposición",
        "trine": "trígono",
        "square": "cuadratura",
        "sextile": "sextil",
    },
    keywords={
        # relationships
        "connection": "conexión",
        "communication": "comunicación",
        "partnership": "asociación",
        "love": "amor",
        "harmony": "armonía",
        "understanding": "comprensión",
        # career
        "achievement": "logro",
        "leadership": "liderazgo",
        "growth": "crecimiento",
        "opportunity": "oportunidad",
        "success": "éxito",
        "progress": "progreso",
        # wellness
        "balance": "equilibrio",
        "health": "salud",
        "energy": "energía",
        "vitality": "vitalidad",
        "peace": "paz",
        "healing": "sanación",
        # social
        "community": "comunidad",
        "friendship": "amistad",
        "networking": "conexiones",
        "collaboration": "colaboración",
        "influence": "influencia",
        # spiritual
        "wisdom": "sabiduría",
        "intuition": "intuición",
        "purpose": "propósito",
        "meaning": "significado",
        "awakening": "despertar",
        "transformation": "transformación",
        # evidence-based
        "research": "investigación",
        "facts": "hechos",
        "analysis": "análisis",
        "patterns": "patrones",
        "logic": "lógica",
    },
    no_aspects="Armonía cósmica suave",
    no_retrogrades="Ningún planeta retrógrado",
    news_context="La energía cósmica actual se refleja en los eventos globales",
)

VOCABULARIES: Dict[str, Vocabulary] = {
    "en-US": ENGLISH,
    "es-ES": SPANISH,
}


def get_vocabulary(locale: str) -> Vocabulary:
    return VOCABULARIES.get(locale, ENGLISH)
