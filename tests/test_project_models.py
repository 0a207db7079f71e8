"""Tests for team_fit/project_models.py."""

from pydantic import ValidationError
import pytest

from team_fit.project_models import (
    Project,
    ProjectMember,
    dump_requirements,
    parse_requirements,
)


class TestParseRequirements:
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty(self, raw):
        assert parse_requirements(raw) == []

    def test_json_array(self):
        assert parse_requirements('["ESG 경영", " 탄소중립 ", ""]') == ["ESG 경영", "탄소중립"]

    def test_comma_separated(self):
        assert parse_requirements("ESG 경영, 탄소중립,, 지배구조") == ["ESG 경영", "탄소중립", "지배구조"]

    def test_json_non_list_treated_as_text(self):
        assert parse_requirements("42") == ["42"]

    def test_dump_keeps_korean(self):
        raw = dump_requirements(["디지털 전환"])
        assert "디지털 전환" in raw
        assert parse_requirements(raw) == ["디지털 전환"]


class TestProject:
    def test_requirements_property(self):
        project = Project(id=1, name="ESG", requirements_analysis='["a", "b"]')
        assert project.requirements == ["a", "b"]

    def test_no_requirements(self):
        assert Project(id=1, name="ESG").requirements == []

    def test_id_must_be_positive(self):
        with pytest.raises(ValidationError):
            Project(id=0, name="ESG")

    def test_name_required(self):
        with pytest.raises(ValidationError):
            Project(id=1, name="")

    def test_timestamps_set(self):
        project = Project(id=1, name="ESG")
        assert project.created_at
        assert project.updated_at


class TestProjectMember:
    def test_is_team_member(self):
        member = ProjectMember(id="1", project_id=1, name="A", role="PM", mbti="enfp")
        assert member.normalized_mbti == "ENFP"
        assert member.created_at

    def test_project_id_required(self):
        with pytest.raises(ValidationError):
            ProjectMember(id="1", name="A")

    def test_name_length_limit(self):
        with pytest.raises(ValidationError):
            ProjectMember(id="1", project_id=1, name="x" * 51)

    def test_role_length_limit(self):
        with pytest.raises(ValidationError):
            ProjectMember(id="1", project_id=1, name="A", role="r" * 101)

    def test_name_required(self):
        with pytest.raises(ValidationError):
            ProjectMember(id="1", project_id=1, name="")
