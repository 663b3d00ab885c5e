#!/usr/bin/env python3
"""Streamlit Competitor Displacement Simulator."""

from __future__ import annotations

import logging

import streamlit as st

from modules import charts
from modules.model_settings import render as render_model_settings
from modules.pillar_editor import render as render_pillar_editor
from modules.session import init_session_state, scores_from_state, weights_from_state
from modules.weights_editor import render as render_weights_editor
from scoring_engine import PILLAR_LABELS, PILLAR_SHORT_LABELS, PILLARS, SimulationResult, round1, run_simulation
from snapshot_history import clear_history, history_frame, save_snapshot

logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="Competitor Displacement Simulator",
    layout="wide",
    initial_sidebar_state="expanded",
)


def on_save_snapshot(probability: float) -> None:
    st.session_state["history"] = save_snapshot(st.session_state["history"], probability)


def on_clear_history() -> None:
    st.session_state["history"] = clear_history()


def display_header(result: SimulationResult) -> None:
    left, right = st.columns([2, 1])
    with left:
        st.title("Competitor Displacement Simulator")
        st.markdown(
            "Model your position vs. a rival across 5 pillars. Tune weights, market maturity and more. "
            "Save snapshots to track strategy impact over time."
        )
    with right:
        st.markdown("**Probability to Displace**")
        st.plotly_chart(charts.gauge_figure(result.probability), use_container_width=True)
        delta_color = "#2e8b57" if result.you_score >= result.competitor_score else "#d64541"
        sign = "+" if result.advantage_pct >= 0 else ""
        st.markdown(
            f'Advantage Δ (score): <span style="font-weight:700;color:{delta_color};">'
            f"{sign}{result.advantage_pct}%</span>",
            unsafe_allow_html=True,
        )


def display_scores(result: SimulationResult) -> None:
    rows = [
        {
            "Pillar": PILLAR_SHORT_LABELS[p],
            "You": f"{round1(result.you_pillars[p]):.1f}",
            "Competitor": f"{round1(result.competitor_pillars[p]):.1f}",
        }
        for p in PILLARS
    ]
    rows.append(
        {
            "Pillar": "Aggregate (0-1)",
            "You": f"{result.you_score:.3f}",
            "Competitor": f"{result.competitor_score:.3f}",
        }
    )
    st.dataframe(rows, use_container_width=True, hide_index=True)
    st.caption(f"Required advantage θ at this maturity: {result.threshold * 100:.1f}%")


def simulator_page() -> None:
    init_session_state()

    result = run_simulation(
        weights_from_state(),
        scores_from_state("you"),
        scores_from_state("comp"),
        maturity=st.session_state["maturity"],
        k=st.session_state["steepness"],
        shock=st.session_state["shock"],
        sensitivity_pillar=st.session_state["sensitivity_pillar"],
    )

    display_header(result)

    main_col, side_col = st.columns([2, 1])
    with main_col:
        with st.container(border=True):
            settings_col, weights_col = st.columns(2)
            with settings_col:
                render_model_settings()
                save_col, clear_col = st.columns(2)
                save_col.button(
                    "Save Snapshot",
                    key="save_snapshot",
                    on_click=on_save_snapshot,
                    args=(result.probability,),
                    use_container_width=True,
                )
                clear_col.button(
                    "Clear",
                    key="clear_history",
                    on_click=on_clear_history,
                    use_container_width=True,
                )
            with weights_col:
                render_weights_editor()

        you_tab, comp_tab = st.tabs(["Your Inputs", "Competitor Inputs"])
        with you_tab:
            render_pillar_editor("you")
        with comp_tab:
            render_pillar_editor("comp")

    with side_col:
        st.markdown("### Pillar Scores")
        display_scores(result)

        st.markdown("### Score Shapes (Radar)")
        st.plotly_chart(charts.radar_figure(result.you_pillars, result.competitor_pillars), use_container_width=True)

        st.markdown("### Pillar Gaps (You − Competitor)")
        st.plotly_chart(charts.gap_bar_figure(result.pillar_gaps), use_container_width=True)

        st.markdown("### Sensitivity (What if you improve one lever?)")
        pillar = st.session_state["sensitivity_pillar"]
        st.plotly_chart(charts.sensitivity_figure(result.sensitivity, pillar), use_container_width=True)
        st.caption(f"Sweeps the first sub-factor of {PILLAR_LABELS[pillar]} from −6 to +6 points.")

        st.markdown("### Probability Trend (Snapshots)")
        history = st.session_state["history"]
        if not history:
            st.info("No snapshots yet. Click Save Snapshot after a change to start a history.")
        else:
            st.plotly_chart(charts.trend_figure(history), use_container_width=True)
            st.dataframe(history_frame(history), use_container_width=True, hide_index=True)

    st.caption(
        "Notes: (1) All score sliders are 0–10. (2) Pillar and sub-factor weights reflect typical impact "
        "patterns in B2B services: product reliability and operational excellence dominate retention and "
        "word-of-mouth, which drive displacement more than top-of-funnel spend alone."
    )
    logger.debug("Recomputed probability %.4f", result.probability)


if __name__ == "__main__":
    simulator_page()
