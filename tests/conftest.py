"""
Shared test fixtures.
"""

import pytest

from scoring_engine import PILLARS, SUB_CRITERIA_WEIGHTS
from snapshot_history import HISTORY_ENV_VAR


def uniform_scores(level: float) -> dict:
    return {pillar: {item: level for item in SUB_CRITERIA_WEIGHTS[pillar]} for pillar in PILLARS}


@pytest.fixture
def history_file(tmp_path, monkeypatch):
    """Point snapshot persistence at a throwaway file."""
    path = tmp_path / "history.json"
    monkeypatch.setenv(HISTORY_ENV_VAR, str(path))
    return path
