#!/usr/bin/env python3
"""Sub-criterion sliders for one entity."""

from __future__ import annotations

import streamlit as st

from modules.session import ENTITIES, score_key
from scoring_engine import PILLAR_LABELS, PILLARS, SUB_CRITERIA_LABELS, SUB_CRITERIA_WEIGHTS, pillar_score, round1


def render(entity: str) -> None:
    who = ENTITIES[entity]
    for pillar in PILLARS:
        with st.expander(f"{PILLAR_LABELS[pillar]} — {who}", expanded=pillar in {"product", "ops"}):
            values = {}
            for item in SUB_CRITERIA_WEIGHTS[pillar]:
                values[item] = st.slider(
                    SUB_CRITERIA_LABELS[item],
                    min_value=0.0,
                    max_value=10.0,
                    step=0.5,
                    key=score_key(entity, pillar, item),
                )
            st.caption(f"Pillar score: {round1(pillar_score(pillar, values))} / 10")
