"""
Chart builder tests.
"""

import pytest

from conftest import uniform_scores
from modules.charts import gap_bar_figure, gauge_figure, radar_figure, sensitivity_figure, trend_figure
from scoring_engine import DEFAULT_WEIGHTS, run_simulation
from snapshot_history import Snapshot


@pytest.fixture
def result():
    return run_simulation(DEFAULT_WEIGHTS, uniform_scores(6.0), uniform_scores(5.0))


def test_gauge_shows_percentage(result):
    fig = gauge_figure(result.probability)
    assert fig.data[0].value == pytest.approx(result.probability * 100)
    assert gauge_figure(1.5).data[0].value == 100


def test_radar_has_closed_trace_per_entity(result):
    fig = radar_figure(result.you_pillars, result.competitor_pillars)
    assert [trace.name for trace in fig.data] == ["You", "Competitor"]
    you = fig.data[0]
    assert len(you.r) == 6
    assert you.theta[0] == you.theta[-1] == "Product"
    assert list(fig.data[1].r) == [5.0] * 6


def test_gap_bars_follow_pillar_order(result):
    fig = gap_bar_figure(result.pillar_gaps)
    assert list(fig.data[0].x) == ["Product", "Ops/CS", "Sales", "Pioneering", "Marketing"]
    assert list(fig.data[0].y) == [1.0] * 5


def test_sensitivity_axis(result):
    fig = sensitivity_figure(result.sensitivity, "ops")
    assert list(fig.data[0].x) == list(range(-6, 7))
    assert "Onboarding Speed/Clarity" in fig.layout.xaxis.title.text


def test_trend_uses_snapshot_labels():
    fig = trend_figure([Snapshot("a", 10), Snapshot("b", 30)])
    assert list(fig.data[0].x) == ["a", "b"]
    assert list(fig.data[0].y) == [10, 30]
