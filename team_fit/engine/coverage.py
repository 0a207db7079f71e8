"""Domain / technical coverage scoring of requirements against team skills.

All functions are *pure* except ``technical_coverage``, which draws from the
supplied random source.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from team_fit.engine.random_source import RandomSource, default_random_source
from team_fit.engine.scores import clamp_score, round_half_up
from team_fit.mbti_types import MemberLike, coerce_members


# ---------------------------------------------------------------------------
# Category → synonym table
# ---------------------------------------------------------------------------
SKILL_CATEGORIES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "ai": ("python", "tensorflow", "pytorch", "machine learning", "nlp", "deep learning"),
    "frontend": ("react", "vue", "angular", "javascript", "typescript", "html", "css"),
    "backend": ("node.js", "express", "django", "flask", "spring", "api"),
    "database": ("postgresql", "mysql", "mongodb", "sql", "nosql", "redis"),
    "cloud": ("aws", "azure", "gcp", "docker", "kubernetes", "serverless"),
    "mobile": ("react native", "flutter", "ios", "android", "kotlin", "swift"),
})

# Offset range applied to domain coverage when no independent technical
# signal exists: randrange(-10, 10) → [-10, +9].
_TECHNICAL_OFFSET = (-10, 10)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def calculate_coverage(requirements: Sequence[str], skills: Iterable[str]) -> int:
    """Percentage (0-100) of *requirements* covered by at least one skill.

    An empty requirement list is fully covered. Matching is case-insensitive
    substring containment in either direction, or a shared entry in
    ``SKILL_CATEGORIES``.
    """
    if not requirements:
        return 100

    normalized_reqs = [r.lower() for r in requirements]
    normalized_skills = [s.strip().lower() for s in skills if s and s.strip()]

    covered = sum(
        1
        for req in normalized_reqs
        if any(_skill_covers(req, skill) for skill in normalized_skills)
    )
    return round_half_up(covered / len(normalized_reqs) * 100)


def uncovered_requirements(requirements: Sequence[str], skills: Iterable[str]) -> list[str]:
    """Requirements (original casing) that no skill covers."""
    normalized_skills = [s.strip().lower() for s in skills if s and s.strip()]
    return [
        req for req in requirements
        if not any(_skill_covers(req.lower(), skill) for skill in normalized_skills)
    ]


def collect_team_skills(members: Iterable[MemberLike]) -> list[str]:
    """Pool every member's comma-separated skills into one token list."""
    skills: list[str] = []
    for member in coerce_members(members):
        skills.extend(member.skill_tokens())
    return skills


def technical_coverage(domain_coverage: int, rng: RandomSource | None = None) -> int:
    """Approximate technical coverage: domain coverage plus a small random offset.

    There is no independent technical signal, so this is a perturbation of
    the domain score, clamped to 0-100.
    """
    source = rng if rng is not None else default_random_source()
    return clamp_score(domain_coverage + source.randrange(*_TECHNICAL_OFFSET))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _skill_covers(requirement: str, skill: str) -> bool:
    if skill in requirement or requirement in skill:
        return True
    return _is_related_skill(requirement, skill)


def _is_related_skill(requirement: str, skill: str) -> bool:
    for category, synonyms in SKILL_CATEGORIES.items():
        if category in requirement and any(s in skill for s in synonyms):
            return True
        if category in skill and any(s in requirement for s in synonyms):
            return True
    return False
