"""MBTI type definitions and the team member model used by the scoring engine.

Defines the 16 MBTI codes, the four temperament groups, the static pairwise
compatibility table, and the ``TeamMember`` model read by every engine module.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import re
from types import MappingProxyType
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# MBTI codes
# ---------------------------------------------------------------------------
MbtiGroup = Literal["analyst", "diplomat", "sentinel", "explorer"]

_MBTI_PATTERN = re.compile(r"^[EI][SN][TF][JP]$")

MBTI_TYPES: tuple[str, ...] = tuple(
    f"{ei}{sn}{tf}{jp}"
    for ei in "EI"
    for sn in "SN"
    for tf in "TF"
    for jp in "JP"
)

MBTI_GROUPS: Mapping[MbtiGroup, frozenset[str]] = MappingProxyType({
    "analyst": frozenset({"INTJ", "INTP", "ENTJ", "ENTP"}),
    "diplomat": frozenset({"INFJ", "INFP", "ENFJ", "ENFP"}),
    "sentinel": frozenset({"ISTJ", "ISFJ", "ESTJ", "ESFJ"}),
    "explorer": frozenset({"ISTP", "ISFP", "ESTP", "ESFP"}),
})

MBTI_GROUP_NAMES: Mapping[MbtiGroup, str] = MappingProxyType({
    "analyst": "분석가형",
    "diplomat": "외교관형",
    "sentinel": "관리자형",
    "explorer": "탐험가형",
})


def normalize_mbti(code: str | None) -> str | None:
    """Return the upper-cased 4-letter code, or ``None`` if it is not a valid MBTI."""
    if not code:
        return None
    cleaned = code.strip().upper()
    return cleaned if _MBTI_PATTERN.match(cleaned) else None


def is_valid_mbti(code: str | None) -> bool:
    return normalize_mbti(code) is not None


def mbti_group(code: str | None) -> MbtiGroup:
    """Temperament group for *code*; unknown codes fall into ``analyst``."""
    normalized = normalize_mbti(code)
    for group, members in MBTI_GROUPS.items():
        if normalized in members:
            return group
    return "analyst"


# ---------------------------------------------------------------------------
# Compatibility table
# ---------------------------------------------------------------------------
# Ordered pairs; lookups check (a, b) and then (b, a). No pair appears in both
# orders with different values, so resolution is symmetric.
MBTI_COMPATIBILITY: Mapping[str, Mapping[str, float]] = MappingProxyType({
    code: MappingProxyType(partners)
    for code, partners in {
        "ENFP": {"INTJ": 0.9, "INFJ": 0.8, "ENFJ": 0.7, "ENTP": 0.8},
        "INTJ": {"ENFP": 0.9, "ENTP": 0.8, "INFP": 0.7, "ENTJ": 0.7},
        "INFP": {"ENFJ": 0.9, "INTJ": 0.7, "ENTP": 0.6, "INFJ": 0.8},
        "ENTP": {"INTJ": 0.8, "INFJ": 0.7, "ENFP": 0.8, "ENTJ": 0.7},
        "ENFJ": {"INFP": 0.9, "ISFP": 0.8, "ENFP": 0.7, "INTJ": 0.6},
        "INFJ": {"ENTP": 0.7, "ENFP": 0.8, "INFP": 0.8, "INTJ": 0.7},
        "ENTJ": {"INTP": 0.8, "INTJ": 0.7, "ENTP": 0.7, "INFJ": 0.6},
        "INTP": {"ENTJ": 0.8, "ENTP": 0.9, "INFJ": 0.7, "INTJ": 0.8},
        "ESTJ": {"ISFP": 0.7, "ISTP": 0.6, "INFP": 0.5, "INTP": 0.6},
        "ISTJ": {"ESFP": 0.7, "ENFP": 0.6, "ESTP": 0.6, "ISFP": 0.7},
        "ESFJ": {"ISFP": 0.8, "INFP": 0.7, "ISTP": 0.6, "ESTP": 0.7},
        "ISFJ": {"ESFP": 0.8, "ENFP": 0.7, "ESTP": 0.7, "ESFJ": 0.8},
        "ESTP": {"ISFJ": 0.7, "ESFJ": 0.7, "ISTJ": 0.6, "ISFP": 0.8},
        "ISTP": {"ESFJ": 0.6, "ESTJ": 0.6, "ENFJ": 0.5, "ESTP": 0.7},
        "ESFP": {"ISTJ": 0.7, "ISFJ": 0.8, "INFJ": 0.6, "INTJ": 0.5},
        "ISFP": {"ENFJ": 0.8, "ESFJ": 0.8, "ESTJ": 0.7, "ESTP": 0.8},
    }.items()
})


def lookup_table_compatibility(a: str, b: str) -> float | None:
    """Table value for the pair in either order, or ``None`` when absent."""
    direct = MBTI_COMPATIBILITY.get(a, {}).get(b)
    if direct is not None:
        return direct
    return MBTI_COMPATIBILITY.get(b, {}).get(a)


# ---------------------------------------------------------------------------
# Team member
# ---------------------------------------------------------------------------
class TeamMember(BaseModel):
    """A team member as seen by the scoring engine (read-only)."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str = ""
    role: str = ""
    mbti: str | None = None
    skills_extracted: str | None = None
    experience_summary: str | None = None

    @classmethod
    def from_any(cls, data: TeamMember | Mapping[str, Any]) -> TeamMember:
        """Coerce a model or a persistence-layer row into a ``TeamMember``."""
        if isinstance(data, TeamMember):
            return data
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            role=str(data.get("role") or ""),
            mbti=data.get("mbti") or None,
            skills_extracted=data.get("skills_extracted") or None,
            experience_summary=data.get("experience_summary") or None,
        )

    @property
    def normalized_mbti(self) -> str | None:
        return normalize_mbti(self.mbti)

    def skill_tokens(self) -> list[str]:
        """Comma-separated skills as stripped, non-blank tokens."""
        if not self.skills_extracted:
            return []
        return [s.strip() for s in self.skills_extracted.split(",") if s.strip()]


MemberLike = TeamMember | Mapping[str, Any]


def coerce_members(members: Iterable[MemberLike]) -> list[TeamMember]:
    return [TeamMember.from_any(m) for m in members]
