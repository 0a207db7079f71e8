"""Tests for team_fit/team_analyzer.py."""

import logging

import pytest

from team_fit.ai_service import (
    FALLBACK_RECOMMENDATIONS,
    LLMNarrator,
    NarrativeOutcome,
)
from team_fit.mbti_types import TeamMember
from team_fit.team_analyzer import analyze_team


class LowRandom:
    def randrange(self, start, stop):
        return start


class FailingNarrator:
    def generate(self, requirements, members):
        return NarrativeOutcome.failure("service unavailable")


class ScriptedLLM:
    def __init__(self, reply):
        self.reply = reply

    def call(self, messages):
        return self.reply


REQUIREMENTS = ["Python", "React"]
TEAM = [
    TeamMember(id="1", name="A", mbti="ENFP", skills_extracted="Python, Django"),
    TeamMember(id="2", name="B", mbti="INTJ", skills_extracted="React"),
]


class TestAnalyzeTeam:
    def test_empty_team_rejected(self):
        with pytest.raises(ValueError, match="팀원"):
            analyze_team(REQUIREMENTS, [])

    def test_scores_with_generator(self):
        result = analyze_team(REQUIREMENTS, TEAM, rng=LowRandom())
        assert result.team_chemistry_score == 90
        assert result.domain_coverage_score == 100
        # 100 - 10
        assert result.technical_coverage_score == 90
        # (90 + 100 + 90 + 75) / 4 = 88.75
        assert result.overall_fit_score == 89
        assert result.narrative_source == "generator"

    def test_heatmap_reuses_scores(self):
        result = analyze_team(REQUIREMENTS, TEAM, rng=LowRandom())
        assert result.visualization_data.coverage_heatmap.coverage_scores == [90, 100, 75, 90, 70, 80]

    def test_llm_score_feeds_overall(self):
        llm = ScriptedLLM('{"overall_score": 95, "recommendations": "r", "study_materials": "s"}')
        result = analyze_team(REQUIREMENTS, TEAM, narrator=LLMNarrator(llm), rng=LowRandom())
        # (90 + 100 + 90 + 95) / 4 = 93.75
        assert result.overall_fit_score == 94
        assert result.narrative_source == "llm"
        assert result.recommendations == "r"

    def test_failed_narrative_uses_fallback(self, caplog):
        with caplog.at_level(logging.WARNING, logger="team_fit.team_analyzer"):
            result = analyze_team(REQUIREMENTS, TEAM, narrator=FailingNarrator(), rng=LowRandom())
        assert result.narrative_source == "fallback"
        assert result.recommendations == FALLBACK_RECOMMENDATIONS
        assert result.overall_fit_score == 89
        assert "service unavailable" in caplog.text

    def test_no_requirements(self):
        result = analyze_team([], TEAM, rng=LowRandom())
        assert result.domain_coverage_score == 100

    def test_accepts_rows(self):
        rows = [m.model_dump() for m in TEAM]
        result = analyze_team(REQUIREMENTS, rows, rng=LowRandom())
        assert result.team_chemistry_score == 90

    def test_solo_member(self):
        result = analyze_team(["Python"], TEAM[:1], rng=LowRandom())
        assert result.team_chemistry_score == 80
        assert result.visualization_data.mbti_compatibility.edges == []

    def test_scores_in_range_with_default_random(self):
        result = analyze_team(REQUIREMENTS, TEAM)
        for score in (
            result.team_chemistry_score,
            result.domain_coverage_score,
            result.technical_coverage_score,
            result.overall_fit_score,
        ):
            assert 0 <= score <= 100

    def test_long_name_and_role_rows(self):
        rows = [
            {"name": "N" * 51, "role": "디지털 전환 및 ESG 전략 총괄 " * 8, "mbti": "ENFP", "skills_extracted": "Python"},
            {"name": "B", "role": "데이터", "mbti": "INTJ", "skills_extracted": "React"},
        ]
        result = analyze_team(REQUIREMENTS, rows, rng=LowRandom())
        assert result.team_chemistry_score == 90
        assert result.domain_coverage_score == 100
