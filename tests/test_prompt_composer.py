"""Unit tests for the prompt catalog and PromptComposer."""

import logging
from dataclasses import replace

import pytest

from astropal.prompts import (
    FOCUS_AREA_KEYWORDS,
    PROMPT_TEMPLATES,
    ModelConfig,
    PromptComposer,
    PromptTemplate,
)
from common.i18n import find_unresolved


@pytest.fixture
def composer():
    return PromptComposer()


# ─────────────────────────────────────────────────────────────────
# Catalog
# ─────────────────────────────────────────────────────────────────


class TestCatalog:
    def test_template_ids(self, composer):
        ids = [t.id for t in composer.get_all_templates()]
        assert ids == [
            "calm-daily-free",
            "calm-daily-pro",
            "knowledge-daily-basic",
            "success-daily-pro",
            "evidence-daily-basic",
        ]

    def test_ids_follow_naming(self):
        for template in PROMPT_TEMPLATES:
            assert template.id == f"{template.perspective}-{template.content_type}-{template.tier}"

    def test_model_config(self, composer):
        template = composer.get_template_by_id("success-daily-pro")
        assert template.model_config == ModelConfig("grok-3-plus", 0.7, 750)
        assert composer.get_template_by_id("nope") is None

    def test_focus_area_keywords(self):
        assert set(FOCUS_AREA_KEYWORDS) == {
            "relationships", "career", "wellness", "social", "spiritual", "evidence-based"
        }
        assert all(len(words) == 6 for words in FOCUS_AREA_KEYWORDS.values())


# ─────────────────────────────────────────────────────────────────
# find_template
# ─────────────────────────────────────────────────────────────────


class TestFindTemplate:
    def test_exact_match(self, composer):
        assert composer.find_template("pro", "calm").id == "calm-daily-pro"

    def test_falls_back_to_free_tier(self, composer, caplog):
        with caplog.at_level(logging.WARNING):
            template = composer.find_template("basic", "calm")
        assert template.id == "calm-daily-free"
        assert "Using fallback prompt template calm-daily-free" in caplog.text

    def test_no_template_returns_none(self, composer, caplog):
        with caplog.at_level(logging.ERROR):
            assert composer.find_template("free", "success") is None
        assert "No prompt template found" in caplog.text

    def test_unknown_content_type(self, composer):
        assert composer.find_template("free", "calm", "weekly") is None


# ─────────────────────────────────────────────────────────────────
# build_prompt
# ─────────────────────────────────────────────────────────────────


class TestBuildPrompt:
    def test_fills_variables(self, composer, sample_user, sample_ephemeris):
        prompt = composer.build_prompt(sample_user, sample_ephemeris)

        assert prompt.template.id == "calm-daily-free"
        assert prompt.locale is None
        assert prompt.system_prompt == prompt.template.system_prompt
        assert "Date: 2026-10-17" in prompt.user_prompt
        assert "Sun in Libra at 24.5°" in prompt.user_prompt
        assert "Moon in Taurus (Full Moon)" in prompt.user_prompt
        assert "Focus area: wellness" in prompt.user_prompt
        assert "born in Madrid, Spain" in prompt.user_prompt
        assert find_unresolved(prompt.user_prompt) == []

    def test_top_three_aspects(self, composer, sample_user, sample_ephemeris):
        prompt = composer.build_prompt(sample_user, sample_ephemeris)
        assert "Sun-Moon opposition, Venus-Mars trine, Mercury-Saturn square" in prompt.user_prompt
        assert "Jupiter" not in prompt.user_prompt

    def test_first_six_focus_keywords(self, composer, sample_user, sample_ephemeris):
        variables = composer.build_variables(sample_user, sample_ephemeris)
        assert variables["focusKeywords"] == "balance, health, energy, vitality, peace, healing"

    def test_defaults(self, composer, sample_user, sample_ephemeris):
        sample_user.focus_areas = []
        ephemeris = replace(sample_ephemeris, major_aspects=[], retrograde_planets=[])

        variables = composer.build_variables(sample_user, ephemeris)

        assert variables["primaryFocus"] == "general guidance"
        assert variables["secondaryFocus"] == ""
        assert variables["majorAspects"] == "Gentle cosmic harmony"
        assert variables["retrogradePlanets"] == "No retrograde planets"
        assert variables["focusKeywords"] == ""
        assert variables["newsContext"] == "Current cosmic energy reflects in global events"
        assert variables["risingSign"] == "Unknown"

    def test_news_context_and_rising_sign(self, composer, sample_user, sample_ephemeris):
        sample_user.tier = "pro"
        sample_user.rising_sign = "Leo"
        prompt = composer.build_prompt(sample_user, sample_ephemeris, news_context="Markets rallied")
        assert "World context: Markets rallied" in prompt.user_prompt
        assert "Rising sign: Leo" in prompt.user_prompt
        assert "Retrograde planets: Mercury" in prompt.user_prompt

    def test_missing_template_returns_none(self, composer, sample_user, sample_ephemeris):
        sample_user.perspective = "evidence"
        sample_user.tier = "pro"
        assert composer.build_prompt(sample_user, sample_ephemeris) is None


class TestInjectVariables:
    def test_warns_on_unresolved_placeholders(self, sample_user, sample_ephemeris, caplog):
        template = PromptTemplate(
            id="calm-daily-free",
            tier="free",
            perspective="calm",
            content_type="daily",
            system_prompt="system",
            base_prompt="Sun {{sunSign}}, lucky number {{luckyNumber}}",
            focus_weights={},
            model_config=ModelConfig("grok-3-mini", 0.7, 400),
        )
        composer = PromptComposer([template])

        with caplog.at_level(logging.WARNING):
            prompt = composer.build_prompt(sample_user, sample_ephemeris)

        assert prompt.user_prompt == "Sun Libra, lucky number {{luckyNumber}}"
        assert "{{luckyNumber}}" in caplog.text

    def test_values_containing_braces_are_not_reexpanded(self, composer):
        result = composer.inject_variables("{{a}}", {"a": "{{b}}", "b": "x"})
        assert result == "{{b}}"
