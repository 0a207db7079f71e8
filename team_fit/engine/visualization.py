"""Chart-ready payloads: capability radar, MBTI compatibility network, coverage heatmap.

Radar values and three heatmap axes are filler drawn from a random source;
the system does not measure those dimensions. Everything derived from the
computed scores and from the compatibility table is deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from pydantic import BaseModel, Field

from team_fit.engine.compatibility import calculate_mbti_compatibility
from team_fit.engine.random_source import RandomSource, default_random_source
from team_fit.engine.scores import clamp_score
from team_fit.mbti_types import MemberLike, coerce_members


RADAR_LABELS: tuple[str, ...] = (
    "AI/ML", "웹개발", "모바일", "클라우드", "데이터베이스", "보안", "UI/UX", "프로젝트관리",
)
HEATMAP_CATEGORIES: tuple[str, ...] = (
    "기술 역량", "도메인 지식", "프로젝트 경험", "팀워크", "리더십", "커뮤니케이션",
)

UNKNOWN_NAME = "Unknown"
UNKNOWN_MBTI = "XXXX"

# Half-open ranges for filler values, as passed to randrange().
_RADAR_PROJECT_RANGE = (60, 100)
_RADAR_TEAM_OFFSET = (-15, 15)
_EXPERIENCE_RANGE = (75, 95)
_LEADERSHIP_RANGE = (70, 95)
_COMMUNICATION_RANGE = (80, 95)


# ---------------------------------------------------------------------------
# Payload models
# ---------------------------------------------------------------------------
class ComponentScores(BaseModel):
    """Computed scores the visualization is built from."""

    chemistry: int = Field(ge=0, le=100)
    domain: int = Field(ge=0, le=100)
    technical: int = Field(ge=0, le=100)


class RadarChart(BaseModel):
    labels: list[str]
    project_requirements: list[int]
    team_capabilities: list[int]


class NetworkNode(BaseModel):
    id: str
    name: str
    mbti: str


class NetworkEdge(BaseModel):
    source: str
    target: str
    compatibility: float = Field(ge=0.0, le=1.0)


class CompatibilityNetwork(BaseModel):
    nodes: list[NetworkNode] = Field(default_factory=list)
    edges: list[NetworkEdge] = Field(default_factory=list)


class CoverageHeatmap(BaseModel):
    categories: list[str]
    coverage_scores: list[int]


class VisualizationPayload(BaseModel):
    """Full chart payload; serializes with the keys the dashboard expects."""

    radar_chart: RadarChart
    mbti_compatibility: CompatibilityNetwork
    coverage_heatmap: CoverageHeatmap


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def build_visualization(
    requirements: Sequence[str],
    members: Iterable[MemberLike],
    scores: ComponentScores | Mapping[str, int],
    rng: RandomSource | None = None,
) -> VisualizationPayload:
    """Assemble radar, network and heatmap data for one analysis.

    *requirements* is accepted for the per-axis radar scoring that does not
    exist yet; the radar currently uses filler values.
    """
    source = rng if rng is not None else default_random_source()
    component = scores if isinstance(scores, ComponentScores) else ComponentScores(**scores)

    return VisualizationPayload(
        radar_chart=build_radar(source),
        mbti_compatibility=build_network(members),
        coverage_heatmap=build_heatmap(component, source),
    )


def build_radar(rng: RandomSource) -> RadarChart:
    project = [rng.randrange(*_RADAR_PROJECT_RANGE) for _ in RADAR_LABELS]
    team = [min(value + rng.randrange(*_RADAR_TEAM_OFFSET), 100) for value in project]
    return RadarChart(
        labels=list(RADAR_LABELS),
        project_requirements=project,
        team_capabilities=team,
    )


def build_network(members: Iterable[MemberLike]) -> CompatibilityNetwork:
    """One node per member and one edge per pair, weighted by MBTI compatibility."""
    nodes = [
        NetworkNode(
            id=m.name or UNKNOWN_NAME,
            name=m.name or UNKNOWN_NAME,
            mbti=m.mbti or UNKNOWN_MBTI,
        )
        for m in coerce_members(members)
    ]
    edges = [
        NetworkEdge(
            source=na.id,
            target=nb.id,
            compatibility=calculate_mbti_compatibility(na.mbti, nb.mbti),
        )
        for i, na in enumerate(nodes)
        for nb in nodes[i + 1:]
    ]
    return CompatibilityNetwork(nodes=nodes, edges=edges)


def build_heatmap(scores: ComponentScores, rng: RandomSource) -> CoverageHeatmap:
    values = [
        scores.technical,
        scores.domain,
        rng.randrange(*_EXPERIENCE_RANGE),
        scores.chemistry,
        rng.randrange(*_LEADERSHIP_RANGE),
        rng.randrange(*_COMMUNICATION_RANGE),
    ]
    return CoverageHeatmap(
        categories=list(HEATMAP_CATEGORIES),
        coverage_scores=[clamp_score(v) for v in values],
    )
