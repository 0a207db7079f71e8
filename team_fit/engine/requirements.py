"""Keyword-driven topic extraction and canonical requirement generation.

RFP text is scanned against a fixed, ordered list of regex rules. Each matched
topic maps to a list of consulting requirement phrases. All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import re
from types import MappingProxyType


# ---------------------------------------------------------------------------
# Topic rules (order matters: it fixes the order of extracted topics)
# ---------------------------------------------------------------------------
_TOPIC_RULES: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE), topic)
    for pattern, topic in (
        (r"디지털\s*(전환|혁신)|digital\s+transformation|industry\s*4\.0|스마트\s*팩토리|(?<![a-z])dx(?![a-z])",
         "디지털 전환"),
        (r"(?<![a-z])esg(?![a-z])|지속\s*가능\s*경영|탄소\s*중립|지배\s*구조|sustainability",
         "ESG 경영"),
        (r"스타트업|start-?up|투자\s*유치|시리즈\s*[a-c](?![a-z])|series\s*[a-c](?![a-z])|(?<![a-z])ir\s*(자료|전략)",
         "스타트업 성장"),
        (r"(?<![a-z])ai(?![a-z])|인공\s*지능|머신\s*러닝|machine\s+learning|딥\s*러닝|빅\s*데이터|데이터\s*(분석|기반)",
         "AI·데이터"),
        (r"프로세스\s*(혁신|최적화|개선|분석)|업무\s*(효율|최적화)|리엔지니어링|(?<![a-z])bpr(?![a-z])",
         "프로세스 혁신"),
        (r"변화\s*관리|조직\s*(변화|문화|개편|진단|구조)|change\s+management",
         "조직·변화관리"),
        (r"핀테크|fintech|금융|블록체인|결제",
         "금융·핀테크"),
        (r"글로벌\s*(진출|표준|시장)|해외\s*(시장|진출)|현지화|global\s+expansion",
         "글로벌 진출"),
        (r"클라우드|cloud|(?<![a-z])(aws|azure|gcp)(?![a-z])|쿠버네티스|kubernetes|IT\s*인프라",
         "클라우드·IT 인프라"),
        (r"마케팅|marketing|브랜드|고객\s*경험|(?<![a-z])cx(?![a-z])",
         "마케팅·고객경험"),
    )
)


# ---------------------------------------------------------------------------
# Topic → canonical requirements
# ---------------------------------------------------------------------------
TOPIC_REQUIREMENTS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "디지털 전환": ("디지털 전환", "Industry 4.0", "프로세스 최적화", "데이터 분석", "변화관리"),
    "ESG 경영": ("ESG 경영", "지속가능경영", "탄소중립", "지배구조", "이해관계자 관리", "성과관리"),
    "스타트업 성장": ("스타트업 전략", "투자유치", "비즈니스 모델", "재무모델링", "IR 전략"),
    "AI·데이터": ("AI 전략", "데이터 분석", "머신러닝", "데이터 시각화"),
    "프로세스 혁신": ("프로세스 최적화", "업무 효율화", "성과관리", "품질관리"),
    "조직·변화관리": ("변화관리", "조직 컨설팅", "교육 프로그램 설계", "커뮤니케이션 전략"),
    "금융·핀테크": ("금융업 도메인", "핀테크", "금융 규제", "리스크 관리"),
    "글로벌 진출": ("글로벌 진출", "시장분석", "현지화 전략", "파트너십"),
    "클라우드·IT 인프라": ("클라우드 전환", "IT 인프라 설계", "보안", "시스템 통합"),
    "마케팅·고객경험": ("마케팅 전략", "고객 경험 설계", "브랜드 전략", "시장분석"),
})

TOPIC_LABELS: tuple[str, ...] = tuple(topic for _, topic in _TOPIC_RULES)

FALLBACK_REQUIREMENTS: tuple[str, ...] = (
    "기술 스택 분석",
    "도메인 지식 요구",
    "프로젝트 관리 역량",
    "커뮤니케이션 스킬",
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def extract_topics(text: str | None) -> list[str]:
    """Return topic labels whose pattern matches anywhere in *text*.

    The result has no duplicates and follows rule order. Empty or
    non-matching text yields ``[]``.
    """
    if not text:
        return []
    return [topic for pattern, topic in _TOPIC_RULES if pattern.search(text)]


def requirements_for(topics: Iterable[str]) -> list[str]:
    """Canonical requirement phrases for *topics*, de-duplicated in order.

    Never returns an empty list: with no known topics the generic consulting
    fallback is used.
    """
    seen: set[str] = set()
    result: list[str] = []
    for topic in topics:
        for phrase in TOPIC_REQUIREMENTS.get(topic, ()):
            if phrase not in seen:
                seen.add(phrase)
                result.append(phrase)
    return result if result else list(FALLBACK_REQUIREMENTS)


def requirements_from_text(text: str | None) -> list[str]:
    """Shortcut for ``requirements_for(extract_topics(text))``."""
    return requirements_for(extract_topics(text))
