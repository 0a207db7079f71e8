"""Plotly figures for the visualization payload.

Pure builders: each takes payload models and returns a ``go.Figure`` for the
dashboard to render.
"""

from __future__ import annotations

import math

import plotly.graph_objects as go  # type: ignore[import-untyped]

from team_fit.engine.visualization import (
    CompatibilityNetwork,
    CoverageHeatmap,
    RadarChart,
)
from team_fit.mbti_types import MBTI_GROUP_NAMES, mbti_group


_GROUP_COLORS: dict[str, str] = {
    "analyst": "#8E44AD",
    "diplomat": "#27AE60",
    "sentinel": "#2980B9",
    "explorer": "#F39C12",
}


def score_color(score: float) -> str:
    if score >= 80:
        return "#4CAF50"
    if score >= 60:
        return "#FFC107"
    return "#F44336"


def radar_figure(radar: RadarChart) -> go.Figure:
    """Project requirement vs. team capability per domain axis."""
    theta = [*radar.labels, radar.labels[0]]
    fig = go.Figure()
    fig.add_trace(go.Scatterpolar(
        r=[*radar.project_requirements, radar.project_requirements[0]],
        theta=theta,
        fill="toself",
        name="프로젝트 요구사항",
    ))
    fig.add_trace(go.Scatterpolar(
        r=[*radar.team_capabilities, radar.team_capabilities[0]],
        theta=theta,
        fill="toself",
        name="팀 역량",
    ))
    fig.update_layout(
        polar={"radialaxis": {"visible": True, "range": [0, 100]}},
        title="역량 레이더",
        height=420,
    )
    return fig


def network_figure(network: CompatibilityNetwork) -> go.Figure:
    """Members on a circle, edges coloured and labelled by MBTI compatibility."""
    n = len(network.nodes)
    positions = {
        node.id: (math.cos(2 * math.pi * i / n), math.sin(2 * math.pi * i / n))
        for i, node in enumerate(network.nodes)
    } if n else {}

    fig = go.Figure()
    for edge in network.edges:
        (x0, y0), (x1, y1) = positions[edge.source], positions[edge.target]
        fig.add_trace(go.Scatter(
            x=[x0, x1],
            y=[y0, y1],
            mode="lines",
            line={"width": 1 + edge.compatibility * 4, "color": score_color(edge.compatibility * 100)},
            hoverinfo="text",
            text=f"{edge.source} ↔ {edge.target}: {edge.compatibility:.2f}",
            showlegend=False,
        ))

    fig.add_trace(go.Scatter(
        x=[positions[node.id][0] for node in network.nodes],
        y=[positions[node.id][1] for node in network.nodes],
        mode="markers+text",
        text=[f"{node.name}<br>{node.mbti}" for node in network.nodes],
        textposition="top center",
        marker={
            "size": 28,
            "color": [_GROUP_COLORS[mbti_group(node.mbti)] for node in network.nodes],
        },
        hovertext=[MBTI_GROUP_NAMES[mbti_group(node.mbti)] for node in network.nodes],
        showlegend=False,
    ))
    fig.update_layout(
        title="MBTI 궁합 네트워크",
        xaxis={"visible": False},
        yaxis={"visible": False, "scaleanchor": "x"},
        height=420,
    )
    return fig


def compatibility_matrix_figure(network: CompatibilityNetwork) -> go.Figure:
    """Symmetric member × member compatibility heatmap (0-100)."""
    names = [node.id for node in network.nodes]
    idx = {name: i for i, name in enumerate(names)}
    matrix = [[100 if i == j else 0 for j in range(len(names))] for i in range(len(names))]
    for edge in network.edges:
        i, j = idx[edge.source], idx[edge.target]
        value = round(edge.compatibility * 100)
        matrix[i][j] = value
        matrix[j][i] = value

    fig = go.Figure(go.Heatmap(
        z=matrix,
        x=names,
        y=names,
        colorscale="RdYlGn",
        zmin=0,
        zmax=100,
        text=matrix,
        texttemplate="%{text}",
    ))
    fig.update_layout(title="팀원 간 궁합 매트릭스", height=400)
    return fig


def heatmap_figure(heatmap: CoverageHeatmap) -> go.Figure:
    """Single-row heatmap of coverage per capability category."""
    fig = go.Figure(go.Heatmap(
        z=[heatmap.coverage_scores],
        x=heatmap.categories,
        y=["팀"],
        colorscale="RdYlGn",
        zmin=0,
        zmax=100,
        text=[heatmap.coverage_scores],
        texttemplate="%{text}",
    ))
    fig.update_layout(title="역량 커버리지 히트맵", height=250)
    return fig


def score_gauge(score: int, title: str) -> go.Figure:
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=score,
        title={"text": title},
        gauge={
            "axis": {"range": [0, 100]},
            "bar": {"color": score_color(score)},
            "steps": [
                {"range": [0, 60], "color": "#ffebee"},
                {"range": [60, 80], "color": "#fff8e1"},
                {"range": [80, 100], "color": "#e8f5e9"},
            ],
        },
    ))
    fig.update_layout(height=260)
    return fig
