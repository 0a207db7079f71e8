"""Tests for team_fit/charts.py."""

from team_fit.charts import (
    compatibility_matrix_figure,
    heatmap_figure,
    network_figure,
    radar_figure,
    score_color,
    score_gauge,
)
from team_fit.engine.visualization import (
    ComponentScores,
    build_visualization,
)
from team_fit.mbti_types import TeamMember


class LowRandom:
    def randrange(self, start, stop):
        return start


def _payload():
    team = [
        TeamMember(name="A", mbti="ENFP"),
        TeamMember(name="B", mbti="INTJ"),
        TeamMember(name="C", mbti="ISTJ"),
    ]
    return build_visualization([], team, ComponentScores(chemistry=80, domain=60, technical=55), LowRandom())


class TestScoreColor:
    def test_thresholds(self):
        assert score_color(85) == "#4CAF50"
        assert score_color(60) == "#FFC107"
        assert score_color(59) == "#F44336"


class TestRadarFigure:
    def test_two_closed_traces(self):
        fig = radar_figure(_payload().radar_chart)
        assert len(fig.data) == 2
        trace = fig.data[0]
        assert len(trace.r) == 9
        assert trace.theta[0] == trace.theta[-1]
        assert list(fig.layout.polar.radialaxis.range) == [0, 100]


class TestNetworkFigure:
    def test_edges_then_nodes(self):
        fig = network_figure(_payload().mbti_compatibility)
        # 3 edges + 1 node trace
        assert len(fig.data) == 4
        nodes = fig.data[-1]
        assert len(nodes.x) == 3
        assert "A<br>ENFP" in nodes.text

    def test_empty_network(self):
        fig = network_figure(build_visualization([], [], ComponentScores(chemistry=80, domain=0, technical=0)).mbti_compatibility)
        assert len(fig.data) == 1


class TestMatrixFigure:
    def test_symmetric_matrix(self):
        fig = compatibility_matrix_figure(_payload().mbti_compatibility)
        z = [list(row) for row in fig.data[0].z]
        assert z[0][1] == z[1][0] == 90
        assert z[0][0] == 100


class TestHeatmapFigure:
    def test_single_row(self):
        fig = heatmap_figure(_payload().coverage_heatmap)
        assert list(fig.data[0].z[0]) == [55, 60, 75, 80, 70, 80]
        assert len(fig.data[0].x) == 6


class TestScoreGauge:
    def test_value_and_title(self):
        fig = score_gauge(72, "종합 적합도")
        assert fig.data[0].value == 72
        assert fig.data[0].title.text == "종합 적합도"
        assert fig.data[0].gauge.bar.color == "#FFC107"
