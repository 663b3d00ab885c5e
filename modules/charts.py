#!/usr/bin/env python3
"""Plotly figures for the simulator page."""

from __future__ import annotations

from typing import Dict, List, Tuple

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from scoring_engine import PILLAR_LABELS, PILLAR_SHORT_LABELS, PILLARS, SUB_CRITERIA_LABELS, SUB_CRITERIA_WEIGHTS, round1
from snapshot_history import Snapshot, history_frame

YOU_COLOR = "#2e8b57"
COMPETITOR_COLOR = "#d64541"
MARGIN = {"l": 10, "r": 10, "t": 10, "b": 10}


def gauge_figure(probability: float) -> go.Figure:
    pct = max(0.0, min(1.0, probability)) * 100
    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=pct,
            number={"suffix": "%", "valueformat": ".0f"},
            gauge={
                "axis": {"range": [0, 100]},
                "bar": {"color": YOU_COLOR if pct >= 50 else COMPETITOR_COLOR},
                "steps": [
                    {"range": [0, 35], "color": "#ffc7ce"},
                    {"range": [35, 65], "color": "#ffeb9c"},
                    {"range": [65, 100], "color": "#c6efce"},
                ],
                "threshold": {"line": {"color": "#000000", "width": 3}, "value": 50},
            },
        )
    )
    fig.update_layout(height=240, margin={"l": 20, "r": 20, "t": 20, "b": 10})
    return fig


def radar_figure(you_pillars: Dict[str, float], competitor_pillars: Dict[str, float]) -> go.Figure:
    labels = [PILLAR_SHORT_LABELS[p] for p in PILLARS]
    fig = go.Figure()
    for name, pillars, color in (
        ("You", you_pillars, YOU_COLOR),
        ("Competitor", competitor_pillars, COMPETITOR_COLOR),
    ):
        values = [round1(pillars[p]) for p in PILLARS]
        fig.add_trace(
            go.Scatterpolar(
                r=values + values[:1],
                theta=labels + labels[:1],
                name=name,
                fill="toself",
                opacity=0.6,
                line={"color": color, "width": 2},
            )
        )
    fig.update_layout(
        height=340,
        polar={"radialaxis": {"range": [0, 10], "visible": True}},
        legend={"orientation": "h"},
        margin={"l": 30, "r": 30, "t": 30, "b": 10},
    )
    return fig


def gap_bar_figure(gaps: Dict[str, float]) -> go.Figure:
    df = pd.DataFrame(
        [{"Pillar": PILLAR_SHORT_LABELS[p], "Gap": round1(gaps[p])} for p in PILLARS]
    )
    fig = px.bar(
        df,
        x="Pillar",
        y="Gap",
        text=df["Gap"].map(lambda x: f"{x:+.1f}"),
        color="Gap",
        color_continuous_scale=[(0.0, COMPETITOR_COLOR), (0.5, "#f39c12"), (1.0, YOU_COLOR)],
        range_color=[-10, 10],
    )
    fig.update_layout(height=260, coloraxis_showscale=False, margin=MARGIN, yaxis={"range": [-10, 10]})
    fig.update_traces(textposition="outside", hovertemplate="%{x}: %{y:+.1f}<extra></extra>")
    return fig


def sensitivity_figure(sweep: List[Tuple[int, int]], pillar: str) -> go.Figure:
    lever = SUB_CRITERIA_LABELS[next(iter(SUB_CRITERIA_WEIGHTS[pillar]))]
    df = pd.DataFrame(sweep, columns=["Offset", "Probability (%)"])
    fig = px.line(df, x="Offset", y="Probability (%)", markers=True)
    fig.update_layout(
        height=240,
        margin=MARGIN,
        xaxis_title=f"{PILLAR_LABELS[pillar]}: {lever} +/−",
        yaxis={"range": [0, 100], "ticksuffix": "%"},
    )
    fig.update_traces(line={"color": YOU_COLOR, "width": 2}, hovertemplate="%{x:+d}: %{y}%<extra></extra>")
    return fig


def trend_figure(history: List[Snapshot]) -> go.Figure:
    df = history_frame(history)
    fig = px.line(df, x="Snapshot", y="Probability (%)")
    fig.update_layout(height=240, margin=MARGIN, yaxis={"range": [0, 100], "ticksuffix": "%"})
    fig.update_traces(line={"width": 2}, hovertemplate="%{x}: %{y}%<extra></extra>")
    return fig
