#!/usr/bin/env python3
"""Session state for the simulator page."""

from __future__ import annotations

from typing import Dict

import streamlit as st

from scoring_engine import (
    DEFAULT_MATURITY,
    DEFAULT_SENSITIVITY_PILLAR,
    DEFAULT_SHOCK,
    DEFAULT_STEEPNESS,
    DEFAULT_WEIGHTS,
    PILLARS,
    SUB_CRITERIA_WEIGHTS,
    Scores,
    default_scores,
    update_weight,
)
from snapshot_history import load_history

ENTITIES = {"you": "You", "comp": "Competitor"}


def score_key(entity: str, pillar: str, item: str) -> str:
    return f"{entity}__{pillar}__{item}"


def weight_key(pillar: str) -> str:
    return f"weight__{pillar}"


def init_session_state() -> None:
    # Widgets are key-only; these are their initial values.
    for entity in ENTITIES:
        for pillar, items in default_scores().items():
            for item, value in items.items():
                st.session_state.setdefault(score_key(entity, pillar, item), value)
    for pillar, weight in DEFAULT_WEIGHTS.items():
        st.session_state.setdefault(weight_key(pillar), weight)
    st.session_state.setdefault("maturity", DEFAULT_MATURITY)
    st.session_state.setdefault("steepness", DEFAULT_STEEPNESS)
    st.session_state.setdefault("shock", DEFAULT_SHOCK)
    st.session_state.setdefault("sensitivity_pillar", DEFAULT_SENSITIVITY_PILLAR)
    if "history" not in st.session_state:
        st.session_state["history"] = load_history()


def scores_from_state(entity: str) -> Scores:
    return {
        pillar: {item: float(st.session_state[score_key(entity, pillar, item)]) for item in SUB_CRITERIA_WEIGHTS[pillar]}
        for pillar in PILLARS
    }


def weights_from_state() -> Dict[str, float]:
    return {pillar: float(st.session_state[weight_key(pillar)]) for pillar in PILLARS}


def renormalize_weights(edited_pillar: str) -> None:
    """on_change callback: keep the five weight sliders summing to 1."""
    current = weights_from_state()
    normalized = update_weight(current, edited_pillar, current[edited_pillar])
    for pillar, value in normalized.items():
        st.session_state[weight_key(pillar)] = value
