"""Team-fit advisory library: MBTI chemistry, requirement coverage and chart data."""

from .mbti_types import MBTI_TYPES, TeamMember, normalize_mbti
from .team_analyzer import AnalysisResult, analyze_team

__all__ = [
    "MBTI_TYPES",
    "AnalysisResult",
    "TeamMember",
    "analyze_team",
    "normalize_mbti",
]
