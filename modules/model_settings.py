#!/usr/bin/env python3
"""Market dynamics and model parameter inputs."""

from __future__ import annotations

import streamlit as st

from scoring_engine import PILLAR_LABELS, PILLARS


def render() -> None:
    st.markdown("#### Market Dynamics & Model Settings")
    st.slider("Market maturity (harder flip)", min_value=0.0, max_value=10.0, step=0.5, key="maturity")
    st.slider("Model steepness (k)", min_value=0.0, max_value=10.0, step=0.5, key="steepness")
    st.slider("External shock", min_value=-0.2, max_value=0.2, step=0.01, key="shock")
    st.caption(
        "Shock simulates regulation, macro events or a PR blow (+ helps you, − helps the rival). "
        "It shifts the advantage before conversion."
    )
    st.selectbox(
        "Sensitivity lever (first sub-factor of pillar)",
        PILLARS,
        format_func=lambda pillar: PILLAR_LABELS[pillar],
        key="sensitivity_pillar",
    )
