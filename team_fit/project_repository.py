"""Repository for projects, team members and analysis history (JSON file)."""

from __future__ import annotations

from collections.abc import Iterable
import json
import logging
import os
from pathlib import Path
import threading

from pydantic import BaseModel, Field

from team_fit.project_models import (
    AnalysisRecord,
    Project,
    ProjectMember,
    dump_requirements,
    now_iso,
)
from team_fit.team_analyzer import AnalysisResult


logger = logging.getLogger(__name__)

_DEFAULT_PATH = "team_fit_data.json"


def default_data_path() -> str:
    return os.getenv("TEAM_FIT_DATA_PATH", "") or _DEFAULT_PATH


class RepositoryData(BaseModel):
    """Everything the repository persists."""

    version: str = "1.0"
    projects: list[Project] = Field(default_factory=list)
    members: list[ProjectMember] = Field(default_factory=list)
    analyses: list[AnalysisRecord] = Field(default_factory=list)


class ProjectRepository:
    """Thread-safe persistence layer for projects, members and analyses."""

    def __init__(self, data_path: str | None = None) -> None:
        self._path = Path(data_path or default_data_path())
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    def create_project(
        self,
        name: str,
        client_company: str | None = None,
        rfp_content: str | None = None,
    ) -> Project:
        with self._lock:
            data = self._read()
            project = Project(
                id=_next_id(p.id for p in data.projects),
                name=name,
                client_company=client_company or None,
                rfp_content=rfp_content or None,
            )
            data.projects.append(project)
            self._atomic_write(data)
        logger.info("Project created: id=%d name=%s", project.id, project.name)
        return project

    def get_project(self, project_id: int) -> Project | None:
        with self._lock:
            data = self._read()
        return next((p for p in data.projects if p.id == project_id), None)

    def list_projects(self) -> list[Project]:
        """All projects, newest first."""
        with self._lock:
            data = self._read()
        return sorted(data.projects, key=lambda p: (p.created_at, p.id), reverse=True)

    def update_project_analysis(
        self,
        project_id: int,
        rfp_summary: str,
        requirements: list[str],
    ) -> Project:
        """Store the RFP summary and requirement list on a project."""
        with self._lock:
            data = self._read()
            idx = _project_index(data.projects, project_id)
            updated = data.projects[idx].model_copy(update={
                "rfp_summary": rfp_summary,
                "requirements_analysis": dump_requirements(requirements),
                "updated_at": now_iso(),
            })
            data.projects[idx] = updated
            self._atomic_write(data)
        return updated

    def delete_project(self, project_id: int) -> None:
        """Remove a project together with its members and analyses."""
        with self._lock:
            data = self._read()
            _project_index(data.projects, project_id)
            data.projects = [p for p in data.projects if p.id != project_id]
            data.members = [m for m in data.members if m.project_id != project_id]
            data.analyses = [a for a in data.analyses if a.project_id != project_id]
            self._atomic_write(data)

    # ------------------------------------------------------------------
    # Members
    # ------------------------------------------------------------------
    def add_member(
        self,
        project_id: int,
        name: str,
        role: str,
        mbti: str | None = None,
        skills_extracted: str | None = None,
        experience_summary: str | None = None,
    ) -> ProjectMember:
        with self._lock:
            data = self._read()
            _project_index(data.projects, project_id)
            member = ProjectMember(
                id=str(_next_id(int(m.id) for m in data.members)),
                project_id=project_id,
                name=name,
                role=role,
                mbti=mbti or None,
                skills_extracted=skills_extracted or None,
                experience_summary=experience_summary or None,
            )
            data.members.append(member)
            self._atomic_write(data)
        return member

    def list_members(self, project_id: int) -> list[ProjectMember]:
        """Members of a project in insertion order."""
        with self._lock:
            data = self._read()
        return [m for m in data.members if m.project_id == project_id]

    def remove_member(self, member_id: str) -> None:
        with self._lock:
            data = self._read()
            if not any(m.id == member_id for m in data.members):
                raise ValueError(f"Member with id '{member_id}' not found")
            data.members = [m for m in data.members if m.id != member_id]
            self._atomic_write(data)

    # ------------------------------------------------------------------
    # Analyses
    # ------------------------------------------------------------------
    def save_analysis(self, project_id: int, result: AnalysisResult) -> AnalysisRecord:
        with self._lock:
            data = self._read()
            _project_index(data.projects, project_id)
            record = AnalysisRecord(
                id=_next_id(a.id for a in data.analyses),
                project_id=project_id,
                team_chemistry_score=result.team_chemistry_score,
                domain_coverage_score=result.domain_coverage_score,
                technical_coverage_score=result.technical_coverage_score,
                overall_fit_score=result.overall_fit_score,
                recommendations=result.recommendations,
                study_materials=result.study_materials,
                narrative_source=result.narrative_source,
            )
            data.analyses.append(record)
            self._atomic_write(data)
        return record

    def analysis_history(self, project_id: int) -> list[AnalysisRecord]:
        """All analyses of a project, oldest first."""
        with self._lock:
            data = self._read()
        return [a for a in data.analyses if a.project_id == project_id]

    def latest_analysis(self, project_id: int) -> AnalysisRecord | None:
        history = self.analysis_history(project_id)
        return history[-1] if history else None

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Remove the data file if it exists."""
        with self._lock:
            if self._path.exists():
                self._path.unlink()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _read(self) -> RepositoryData:
        if not self._path.exists():
            return RepositoryData()
        try:
            with open(self._path, encoding="utf-8") as fh:
                raw = json.load(fh)
            return RepositoryData(**raw)
        except Exception as exc:
            raise ValueError(f"Failed to load team-fit data: {exc}") from exc

    def _atomic_write(self, data: RepositoryData) -> None:
        tmp = self._path.with_suffix(".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as fh:
                json.dump(data.model_dump(), fh, indent=2, ensure_ascii=False)
            tmp.replace(self._path)
        except Exception as exc:
            if tmp.exists():
                tmp.unlink()
            raise ValueError(f"Failed to save team-fit data: {exc}") from exc


def _next_id(existing: Iterable[int]) -> int:
    return max(existing, default=0) + 1


def _project_index(projects: list[Project], project_id: int) -> int:
    idx = next((i for i, p in enumerate(projects) if p.id == project_id), None)
    if idx is None:
        raise ValueError(f"Project with id '{project_id}' not found")
    return idx
