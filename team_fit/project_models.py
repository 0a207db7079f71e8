"""Pydantic models for consulting projects, their members and stored analyses."""

from __future__ import annotations

from datetime import datetime, timezone
import json

from pydantic import BaseModel, Field

from team_fit.mbti_types import TeamMember


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class Project(BaseModel):
    """A consulting project with optional RFP text and extracted requirements."""

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=200)
    client_company: str | None = None
    rfp_content: str | None = None
    rfp_summary: str | None = None
    # JSON array text or comma-separated text, as written by the RFP analyzer
    requirements_analysis: str | None = None
    created_at: str = Field(default_factory=now_iso)
    updated_at: str = Field(default_factory=now_iso)

    @property
    def requirements(self) -> list[str]:
        return parse_requirements(self.requirements_analysis)


class ProjectMember(TeamMember):
    """A team member row bound to a project.

    Name and role carry the entry-form limits; the engine accepts any length.
    """

    name: str = Field(..., min_length=1, max_length=50)
    role: str = Field(default="", max_length=100)
    project_id: int = Field(..., ge=1)
    created_at: str = Field(default_factory=now_iso)


class AnalysisRecord(BaseModel):
    """One persisted analysis run; a project keeps every run as history."""

    id: int = Field(..., ge=1)
    project_id: int = Field(..., ge=1)
    team_chemistry_score: int = Field(ge=0, le=100)
    domain_coverage_score: int = Field(ge=0, le=100)
    technical_coverage_score: int = Field(ge=0, le=100)
    overall_fit_score: int = Field(ge=0, le=100)
    recommendations: str = ""
    study_materials: str = ""
    narrative_source: str = ""
    created_at: str = Field(default_factory=now_iso)


def parse_requirements(raw: str | None) -> list[str]:
    """Normalize stored requirement text into a list of phrases.

    Accepts a JSON array or comma-separated text. Blank entries are dropped.
    """
    if not raw or not raw.strip():
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        data = None
    if isinstance(data, list):
        items = [str(item) for item in data]
    else:
        items = raw.split(",")
    return [item.strip() for item in items if item.strip()]


def dump_requirements(requirements: list[str]) -> str:
    return json.dumps(requirements, ensure_ascii=False)
