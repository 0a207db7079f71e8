"""Tests for team_fit/demo_data.py."""

import pytest

from team_fit.demo_data import DEMO_PROJECTS, seed_demo_data
from team_fit.engine.coverage import calculate_coverage, collect_team_skills
from team_fit.mbti_types import is_valid_mbti
from team_fit.project_repository import ProjectRepository


@pytest.fixture
def repo(tmp_path):
    return ProjectRepository(data_path=str(tmp_path / "demo.json"))


class TestDemoProjects:
    def test_three_projects(self):
        assert len(DEMO_PROJECTS) == 3

    def test_four_members_each_with_valid_mbti(self):
        for demo in DEMO_PROJECTS:
            assert len(demo.members) == 4
            assert all(is_valid_mbti(m.mbti) for m in demo.members)

    def test_teams_cover_some_requirements(self):
        for demo in DEMO_PROJECTS:
            coverage = calculate_coverage(demo.requirements, collect_team_skills(demo.members))
            assert coverage > 0


class TestSeedDemoData:
    def test_creates_projects_and_members(self, repo):
        created = seed_demo_data(repo)
        assert len(created) == 3
        assert len(repo.list_projects()) == 3
        for project, demo in zip(created, DEMO_PROJECTS):
            stored = repo.get_project(project.id)
            assert stored.requirements == demo.requirements
            assert stored.rfp_summary.endswith("...")
            assert [m.name for m in repo.list_members(project.id)] == [m.name for m in demo.members]

    def test_seeding_twice_appends(self, repo):
        seed_demo_data(repo)
        seed_demo_data(repo)
        assert len(repo.list_projects()) == 6
