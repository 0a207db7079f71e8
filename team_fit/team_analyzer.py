"""Team-fit analysis: runs every engine step for one project and team.

Chemistry and coverage are computed independently, combined with the
narrative score, and turned into chart payloads.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging

from pydantic import BaseModel, Field

from team_fit.ai_service import (
    GeneratorNarrator,
    Narrator,
    NarrativeSource,
    resolve_narrative,
)
from team_fit.engine.compatibility import team_chemistry
from team_fit.engine.coverage import (
    calculate_coverage,
    collect_team_skills,
    technical_coverage,
)
from team_fit.engine.random_source import RandomSource, default_random_source
from team_fit.engine.scores import overall_score
from team_fit.engine.visualization import (
    ComponentScores,
    VisualizationPayload,
    build_visualization,
)
from team_fit.mbti_types import MemberLike, coerce_members


logger = logging.getLogger(__name__)


class AnalysisResult(BaseModel):
    """Scores, narrative and chart data for one analysis request."""

    team_chemistry_score: int = Field(ge=0, le=100)
    domain_coverage_score: int = Field(ge=0, le=100)
    technical_coverage_score: int = Field(ge=0, le=100)
    overall_fit_score: int = Field(ge=0, le=100)
    recommendations: str
    study_materials: str
    narrative_source: NarrativeSource
    visualization_data: VisualizationPayload


def analyze_team(
    requirements: Sequence[str],
    members: Iterable[MemberLike],
    narrator: Narrator | None = None,
    rng: RandomSource | None = None,
) -> AnalysisResult:
    """Run a full team-fit analysis.

    Args:
        requirements: Project requirement phrases (already normalized).
        members: Team roster; models or persistence rows.
        narrator: Narrative collaborator. Defaults to the deterministic
            generator when no LLM is wired in.
        rng: Random source for the filler values.

    Raises:
        ValueError: If the team has no members.
    """
    team = coerce_members(members)
    if not team:
        raise ValueError("분석할 팀원이 없습니다.")

    source = rng if rng is not None else default_random_source()
    active_narrator = narrator if narrator is not None else GeneratorNarrator()

    chemistry = team_chemistry(team)
    domain = calculate_coverage(requirements, collect_team_skills(team))
    technical = technical_coverage(domain, source)

    outcome = active_narrator.generate(requirements, team)
    if not outcome.ok:
        logger.warning("Narrative unavailable, using fallback: %s", outcome.error)
    narrative, narrative_source = resolve_narrative(outcome)

    overall = overall_score(chemistry, domain, technical, narrative.overall_score)

    visualization = build_visualization(
        requirements,
        team,
        ComponentScores(chemistry=chemistry, domain=domain, technical=technical),
        source,
    )

    logger.info(
        "Team analysis: members=%d requirements=%d chemistry=%d domain=%d technical=%d overall=%d",
        len(team), len(requirements), chemistry, domain, technical, overall,
    )
    return AnalysisResult(
        team_chemistry_score=chemistry,
        domain_coverage_score=domain,
        technical_coverage_score=technical,
        overall_fit_score=overall,
        recommendations=narrative.recommendations,
        study_materials=narrative.study_materials,
        narrative_source=narrative_source,
        visualization_data=visualization,
    )
