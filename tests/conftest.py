"""Shared test fixtures for Astropal backend tests."""

import copy
import json
import os

import pytest

from common.storage import InMemoryKVStore
from astropal.locale import LocaleCache, LocaleService
from astropal.prompts import (
    Aspect,
    EphemerisContext,
    MoonPosition,
    SunPosition,
    UserContext,
)

LOCALES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "locales")


def _load(locale):
    with open(os.path.join(LOCALES_DIR, f"{locale}.json"), encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def locales_dir():
    return LOCALES_DIR


@pytest.fixture
def en_us_data():
    return _load("en-US")


@pytest.fixture
def es_es_data():
    return _load("es-ES")


@pytest.fixture
def memory_store(en_us_data, es_es_data):
    return InMemoryKVStore({
        "i18n:en-US:astropal": en_us_data,
        "i18n:es-ES:astropal": es_es_data,
    })


@pytest.fixture
def locale_service(memory_store):
    return LocaleService(memory_store, brand="astropal", cache=LocaleCache())


@pytest.fixture
def sample_user():
    return UserContext(
        perspective="calm",
        tier="free",
        birth_location="Madrid, Spain",
        timezone="Europe/Madrid",
        focus_areas=["wellness", "spiritual"],
        sun_sign="Libra",
        locale="en-US",
    )


@pytest.fixture
def spanish_user(sample_user):
    user = copy.copy(sample_user)
    user.locale = "es-ES"
    user.focus_areas = list(sample_user.focus_areas)
    return user


@pytest.fixture
def sample_ephemeris():
    return EphemerisContext(
        date="2026-10-17",
        sun_position=SunPosition(sign="Libra", degree=24.5),
        moon_position=MoonPosition(sign="Taurus", degree=12.0, phase="Full Moon"),
        major_aspects=[
            Aspect("Sun", "Moon", "opposition", 1.2),
            Aspect("Venus", "Mars", "trine", 2.0),
            Aspect("Mercury", "Saturn", "square", 0.5),
            Aspect("Jupiter", "Neptune", "sextile", 3.1),
        ],
        retrograde_planets=["Mercury"],
    )
