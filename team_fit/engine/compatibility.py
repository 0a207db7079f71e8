"""MBTI compatibility scoring between team members.

All functions are *pure*: no side effects, no I/O.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from team_fit.engine.scores import round_half_up
from team_fit.mbti_types import (
    MemberLike,
    coerce_members,
    lookup_table_compatibility,
    normalize_mbti,
)


NEUTRAL_COMPATIBILITY = 0.75
SOLO_TEAM_CHEMISTRY = 80
NO_MBTI_CHEMISTRY = 75


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class PairCompatibility(BaseModel):
    """Compatibility for a single member ↔ member pair."""

    member_a_id: str
    member_b_id: str
    member_a_name: str
    member_b_name: str
    compatibility: float = Field(ge=0.0, le=1.0)
    detail: str = ""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def calculate_mbti_compatibility(a: str | None, b: str | None) -> float:
    """Return compatibility (0-1) for two MBTI codes.

    Missing or malformed codes get the neutral default. Pairs absent from the
    table fall back to a trait-letter heuristic.
    """
    code_a = normalize_mbti(a)
    code_b = normalize_mbti(b)
    if code_a is None or code_b is None:
        return NEUTRAL_COMPATIBILITY

    table_value = lookup_table_compatibility(code_a, code_b)
    if table_value is not None:
        return table_value
    return _trait_heuristic(code_a, code_b)


def team_chemistry(members: Iterable[MemberLike]) -> int:
    """Average pairwise MBTI compatibility as a 0-100 score.

    Only pairs where both members have an MBTI contribute, and the mean is
    taken over those pairs alone.
    """
    team = coerce_members(members)
    if len(team) < 2:
        return SOLO_TEAM_CHEMISTRY

    total = 0.0
    pair_count = 0
    for i, ma in enumerate(team):
        for mb in team[i + 1:]:
            if _has_mbti(ma.mbti) and _has_mbti(mb.mbti):
                total += calculate_mbti_compatibility(ma.mbti, mb.mbti)
                pair_count += 1

    if pair_count == 0:
        return NO_MBTI_CHEMISTRY
    return round_half_up(total / pair_count * 100)


# ---------------------------------------------------------------------------
# Batch helpers
# ---------------------------------------------------------------------------
def peer_compatibility_matrix(members: Iterable[MemberLike]) -> list[PairCompatibility]:
    """Compatibility for every pair with valid MBTIs (upper-triangle only)."""
    resolved = [m for m in coerce_members(members) if m.normalized_mbti]
    results: list[PairCompatibility] = []
    for i, ma in enumerate(resolved):
        for mb in resolved[i + 1:]:
            value = calculate_mbti_compatibility(ma.mbti, mb.mbti)
            results.append(PairCompatibility(
                member_a_id=ma.id,
                member_b_id=mb.id,
                member_a_name=ma.name,
                member_b_name=mb.name,
                compatibility=value,
                detail=_pair_detail(value),
            ))
    return results


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _has_mbti(code: str | None) -> bool:
    return bool(code and code.strip())


def _trait_heuristic(a: str, b: str) -> float:
    score = 0.5
    # Thinking / Feeling
    if a[2] == b[2]:
        score += 0.2
    # Extraversion / Introversion, complementary
    if a[0] != b[0]:
        score += 0.1
    # Judging / Perceiving
    if a[3] == b[3]:
        score += 0.15
    return min(score, 1.0)


def _pair_detail(value: float) -> str:
    if value >= 0.85:
        return "상호 보완성이 높아 협업이 매우 원활함"
    if value >= 0.7:
        return "대체로 잘 맞으며 가끔 의견 차이가 있음"
    if value >= 0.55:
        return "업무 스타일 차이로 소통에 주의가 필요함"
    return "성향 차이가 커서 협업 시 추가 조율이 필요함"
