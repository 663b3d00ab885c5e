#!/usr/bin/env python3
"""Pillar weights editor."""

from __future__ import annotations

import streamlit as st

from modules.session import renormalize_weights, weight_key, weights_from_state
from scoring_engine import PILLAR_LABELS, PILLARS


def render() -> None:
    st.markdown("#### Pillar Weights (Importance)")
    st.caption(
        "Product & Ops/CS highest, then Sales & Pioneering, then Marketing. "
        "Weights auto-normalize to sum 1.00 after every edit."
    )
    for pillar in PILLARS:
        st.slider(
            f"{PILLAR_LABELS[pillar]} (w)",
            min_value=0.0,
            max_value=1.0,
            step=0.01,
            key=weight_key(pillar),
            on_change=renormalize_weights,
            args=(pillar,),
        )
    st.caption(f"Current sum: {sum(weights_from_state().values()):.2f}")
