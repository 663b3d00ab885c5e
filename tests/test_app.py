"""
Page-level tests driven through Streamlit's AppTest harness.
"""

import json
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from modules.session import score_key, weight_key
from scoring_engine import PILLARS

APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")


@pytest.fixture
def app(history_file):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_defaults_render_even_match(app):
    assert app.session_state["history"] == []
    assert any("+0.0%" in md.value for md in app.markdown)
    assert len(app.slider) == 2 * 20 + 5 + 3


def test_save_snapshot_persists(app, history_file):
    app.button(key="save_snapshot").click().run()

    history = app.session_state["history"]
    assert len(history) == 1
    # equal scores at maturity 6: 1 / (1 + e^1.76)
    assert history[0].percent == 15
    assert json.loads(history_file.read_text(encoding="utf-8"))[0]["p"] == 15


def test_snapshot_reflects_slider_changes(app):
    for item in ("onboarding", "supportSLA", "retention", "quality"):
        app.slider(key=score_key("you", "ops", item)).set_value(10.0)
    app.run()
    app.button(key="save_snapshot").click().run()

    assert not app.exception
    assert app.session_state["history"][0].percent > 15


def test_clear_history(app, history_file):
    app.button(key="save_snapshot").click().run()
    app.button(key="clear_history").click().run()

    assert app.session_state["history"] == []
    assert json.loads(history_file.read_text(encoding="utf-8")) == []


def test_weight_edit_renormalizes(app):
    app.slider(key=weight_key("marketing")).set_value(0.7).run()

    weights = [app.session_state[weight_key(pillar)] for pillar in PILLARS]
    assert sum(weights) == pytest.approx(1.0)
    assert app.session_state[weight_key("marketing")] == pytest.approx(0.7 / 1.6)


def test_history_loaded_on_first_run(history_file):
    history_file.write_text(json.dumps([{"t": "01/03/2026, 09:30:00", "p": 42}]), encoding="utf-8")
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()

    assert not at.exception
    assert [s.percent for s in at.session_state["history"]] == [42]
