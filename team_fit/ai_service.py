"""Narrative and RFP analysis services backed by an LLM, with deterministic fallbacks.

Narrators never raise: they return a ``NarrativeOutcome`` tagged as success or
failure, and the caller decides what to substitute on failure.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import json
import logging
import re
from typing import Any, Literal, Protocol

from pydantic import BaseModel, Field

from team_fit.engine.compatibility import team_chemistry
from team_fit.engine.coverage import collect_team_skills, uncovered_requirements
from team_fit.engine.requirements import requirements_from_text
from team_fit.engine.scores import FALLBACK_NARRATIVE_SCORE, clamp_score
from team_fit.mbti_types import (
    MBTI_GROUP_NAMES,
    MemberLike,
    TeamMember,
    coerce_members,
    mbti_group,
)


logger = logging.getLogger(__name__)

NarrativeSource = Literal["llm", "generator", "fallback"]

FALLBACK_RECOMMENDATIONS = "상세 분석을 위해 더 많은 정보가 필요합니다."
FALLBACK_STUDY_MATERIALS = "프로젝트 관련 기초 자료 학습을 권장합니다."

_SYSTEM_PROMPT = (
    "You are a helpful AI assistant that analyzes project requirements and team "
    "capabilities. Always respond in Korean and provide JSON formatted responses "
    "when requested."
)

_RFP_SUMMARY_CHARS = 200


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class Narrative(BaseModel):
    """Free-text team-fit narrative plus its self-assessed score."""

    overall_score: int = Field(ge=0, le=100)
    recommendations: str
    study_materials: str


class NarrativeOutcome(BaseModel):
    """Tagged result of a narrative request."""

    ok: bool
    narrative: Narrative | None = None
    source: NarrativeSource = "llm"
    error: str = ""

    @classmethod
    def success(cls, narrative: Narrative, source: NarrativeSource) -> NarrativeOutcome:
        return cls(ok=True, narrative=narrative, source=source)

    @classmethod
    def failure(cls, error: str) -> NarrativeOutcome:
        return cls(ok=False, source="fallback", error=error)


class RfpAnalysis(BaseModel):
    """Summary and requirement list extracted from RFP text."""

    summary: str
    requirements: list[str] = Field(default_factory=list)
    source: Literal["llm", "keywords"] = "keywords"


FALLBACK_NARRATIVE = Narrative(
    overall_score=FALLBACK_NARRATIVE_SCORE,
    recommendations=FALLBACK_RECOMMENDATIONS,
    study_materials=FALLBACK_STUDY_MATERIALS,
)


class Narrator(Protocol):
    def generate(
        self,
        requirements: Sequence[str],
        members: Iterable[MemberLike],
    ) -> NarrativeOutcome: ...


class TextLLM(Protocol):
    """The slice of ``crewai.LLM`` these services use."""

    def call(self, messages: Any) -> Any: ...


def resolve_narrative(outcome: NarrativeOutcome) -> tuple[Narrative, NarrativeSource]:
    """Narrative to use for *outcome*; failures get the fixed fallback."""
    if outcome.ok and outcome.narrative is not None:
        return outcome.narrative, outcome.source
    return FALLBACK_NARRATIVE, "fallback"


# ---------------------------------------------------------------------------
# JSON extraction
# ---------------------------------------------------------------------------
def extract_json_object(raw_text: str) -> dict | None:
    """Pull the first JSON object out of an LLM reply.

    Handles markdown code fences and prose around the object. Returns None if
    nothing parses.
    """
    json_match = re.search(r"```(?:json)?\s*(\{.*\})\s*```", raw_text, re.DOTALL)
    json_str = json_match.group(1) if json_match else raw_text.strip()

    if not json_str.startswith("{"):
        brace_start = json_str.find("{")
        brace_end = json_str.rfind("}")
        if brace_start >= 0 and brace_end > brace_start:
            json_str = json_str[brace_start : brace_end + 1]

    try:
        data = json.loads(json_str)
    except json.JSONDecodeError:
        logger.warning("Failed to parse LLM JSON: %s...", raw_text[:200])
        return None
    return data if isinstance(data, dict) else None


def parse_narrative(raw_text: str) -> Narrative | None:
    data = extract_json_object(raw_text)
    if data is None:
        return None
    try:
        score = int(data.get("overall_score") or 0)
    except (TypeError, ValueError):
        score = 0
    return Narrative(
        overall_score=clamp_score(score),
        recommendations=str(data.get("recommendations") or "분석 권장사항 생성 필요"),
        study_materials=str(data.get("study_materials") or "학습 자료 생성 필요"),
    )


# ---------------------------------------------------------------------------
# Narrators
# ---------------------------------------------------------------------------
class LLMNarrator:
    """Asks the LLM for a team-fit assessment and parses its JSON reply."""

    def __init__(self, llm: TextLLM):
        self.llm = llm

    def generate(
        self,
        requirements: Sequence[str],
        members: Iterable[MemberLike],
    ) -> NarrativeOutcome:
        prompt = build_team_fit_prompt(requirements, coerce_members(members))
        try:
            raw = self.llm.call(_messages(prompt))
        except Exception as e:
            logger.warning("Team-fit narrative call failed: %s", e)
            return NarrativeOutcome.failure(f"LLM call failed: {e}")

        narrative = parse_narrative(str(raw or ""))
        if narrative is None:
            return NarrativeOutcome.failure("LLM reply was not valid JSON")
        return NarrativeOutcome.success(narrative, "llm")


class GeneratorNarrator:
    """Deterministic narrative built from coverage gaps and the team's MBTI mix."""

    def generate(
        self,
        requirements: Sequence[str],
        members: Iterable[MemberLike],
    ) -> NarrativeOutcome:
        team = coerce_members(members)
        gaps = uncovered_requirements(requirements, collect_team_skills(team))

        recs: list[str] = []
        if gaps:
            recs.append(f"보완이 필요한 요구사항: {', '.join(gaps)}.")
            recs.append("해당 영역 경험이 있는 인력 보강 또는 외부 전문가 자문을 권장합니다.")
        else:
            recs.append("팀 역량이 프로젝트 요구사항을 전반적으로 충족합니다.")
        recs.extend(_team_mix_notes(team))

        if gaps:
            study = "\n".join(f"- {gap}: 관련 사례 연구 및 실무 교육 과정" for gap in gaps)
        else:
            study = "프로젝트 관련 최신 트렌드 학습과 도메인 지식 심화를 권장합니다."

        return NarrativeOutcome.success(
            Narrative(
                overall_score=FALLBACK_NARRATIVE_SCORE,
                recommendations="\n".join(recs),
                study_materials=study,
            ),
            "generator",
        )


def _team_mix_notes(team: list[TeamMember]) -> list[str]:
    notes: list[str] = []
    typed = [m for m in team if m.normalized_mbti]
    if len(typed) < len(team):
        notes.append("MBTI 정보가 없는 팀원이 있어 케미스트리 분석이 제한적입니다.")
    if typed:
        groups = {mbti_group(m.mbti) for m in typed}
        missing = [MBTI_GROUP_NAMES[g] for g in MBTI_GROUP_NAMES if g not in groups]
        if missing and len(typed) >= 2:
            notes.append(f"팀에 {', '.join(missing)} 성향이 없어 관점 다양성을 보완하면 좋습니다.")
    if len(team) >= 2 and team_chemistry(team) < 70:
        notes.append("팀 케미스트리가 낮은 편이므로 정기적인 소통 채널을 마련하세요.")
    return notes


# ---------------------------------------------------------------------------
# RFP analysis
# ---------------------------------------------------------------------------
class RfpAnalyzer:
    """Summarizes RFP text and extracts requirements.

    Uses the LLM when one is given; otherwise, or on any failure, falls back
    to keyword topic extraction.
    """

    def __init__(self, llm: TextLLM | None = None):
        self.llm = llm

    def analyze(self, rfp_text: str) -> RfpAnalysis:
        if self.llm is not None:
            result = self._analyze_with_llm(rfp_text)
            if result is not None:
                return result
        return keyword_rfp_analysis(rfp_text)

    def _analyze_with_llm(self, rfp_text: str) -> RfpAnalysis | None:
        try:
            raw = self.llm.call(_messages(build_rfp_prompt(rfp_text)))
        except Exception as e:
            logger.warning("RFP analysis call failed: %s", e)
            return None

        data = extract_json_object(str(raw or ""))
        if data is None:
            return None
        requirements = [
            str(item).strip()
            for item in [*_as_list(data.get("requirements")), *_as_list(data.get("required_skills"))]
            if str(item).strip()
        ]
        if not requirements:
            requirements = requirements_from_text(rfp_text)
        summary = str(data.get("summary") or "").strip() or _truncate_summary(rfp_text)
        return RfpAnalysis(summary=summary, requirements=requirements, source="llm")


def keyword_rfp_analysis(rfp_text: str) -> RfpAnalysis:
    return RfpAnalysis(
        summary=_truncate_summary(rfp_text),
        requirements=requirements_from_text(rfp_text),
        source="keywords",
    )


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _truncate_summary(text: str) -> str:
    return text[:_RFP_SUMMARY_CHARS] + "..."


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------
def _messages(prompt: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": _SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]


def build_team_fit_prompt(requirements: Sequence[str], team: list[TeamMember]) -> str:
    roster = "\n".join(
        f"{m.name} ({m.role}{', ' + m.mbti if m.mbti else ''}): {m.skills_extracted or ''}"
        for m in team
    )
    return f"""프로젝트 요구사항과 팀 구성을 분석해서 적합도를 평가해주세요:

프로젝트 요구사항:
{', '.join(requirements)}

팀 구성:
{roster}

다음 기준으로 평가해주세요:
1. 전체 적합도 (0-100점)
2. 개선 권장사항
3. 추천 학습 자료

JSON 형태로 응답해주세요:
{{
  "overall_score": 85,
  "recommendations": "상세 권장사항...",
  "study_materials": "추천 학습 자료 리스트..."
}}"""


def build_rfp_prompt(rfp_text: str) -> str:
    return f"""다음 RFP 문서를 분석해서 다음과 같이 응답해주세요:

1. 프로젝트 요약 (3-5줄)
2. 핵심 요구사항 (목록 형태)
3. 필요한 역할/스킬 (목록 형태)

RFP 내용:
{rfp_text}

JSON 형태로 응답해주세요:
{{
  "summary": "프로젝트 요약...",
  "requirements": ["요구사항1", "요구사항2"],
  "required_skills": ["스킬1", "스킬2"]
}}"""
