#!/usr/bin/env python3
"""Snapshot history: capped probability log persisted to a local JSON file."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import json
import logging
import os
from typing import Dict, List, Optional

import pandas as pd

from scoring_engine import round_half_up

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 100
HISTORY_ENV_VAR = "DISPLACEMENT_HISTORY_FILE"
DEFAULT_HISTORY_FILE = os.path.join(os.path.dirname(__file__), "displacement_history.json")
TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"


@dataclass(frozen=True)
class Snapshot:
    label: str
    percent: int

    def to_record(self) -> Dict[str, object]:
        return {"t": self.label, "p": self.percent}

    @classmethod
    def from_record(cls, record: object) -> Optional["Snapshot"]:
        if not isinstance(record, dict):
            return None
        label = record.get("t")
        percent = record.get("p")
        if not isinstance(label, str) or isinstance(percent, bool) or not isinstance(percent, (int, float)):
            return None
        return cls(label=label, percent=int(clamp_percent(percent)))


def clamp_percent(value: float) -> float:
    return max(0, min(100, value))


def history_file_path() -> str:
    return os.getenv(HISTORY_ENV_VAR, "").strip() or DEFAULT_HISTORY_FILE


def format_timestamp(moment: Optional[datetime] = None) -> str:
    return (moment or datetime.now()).strftime(TIMESTAMP_FORMAT)


def make_snapshot(probability: float, moment: Optional[datetime] = None) -> Snapshot:
    percent = int(round_half_up(probability * 100))
    return Snapshot(label=format_timestamp(moment), percent=int(clamp_percent(percent)))


def append_snapshot(
    history: List[Snapshot],
    snapshot: Snapshot,
    limit: int = HISTORY_LIMIT,
) -> List[Snapshot]:
    """New history with ``snapshot`` appended, oldest entries dropped past ``limit``."""
    return (list(history) + [snapshot])[-limit:]


def load_history(path: Optional[str] = None) -> List[Snapshot]:
    path = path or history_file_path()
    if not os.path.exists(path):
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            persisted = json.load(f)
    except Exception as exc:
        logger.warning("Could not read snapshot history from %s: %s", path, exc)
        return []
    if not isinstance(persisted, list):
        logger.warning("Ignoring snapshot history in %s: expected a list", path)
        return []

    history: List[Snapshot] = []
    for record in persisted:
        snapshot = Snapshot.from_record(record)
        if snapshot is not None:
            history.append(snapshot)
    logger.debug("Loaded %d snapshots from %s", len(history), path)
    return history[-HISTORY_LIMIT:]


def persist_history(history: List[Snapshot], path: Optional[str] = None) -> None:
    path = path or history_file_path()
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump([snapshot.to_record() for snapshot in history], f, indent=2)
    except Exception as exc:
        logger.warning("Could not write snapshot history to %s: %s", path, exc)


def save_snapshot(
    history: List[Snapshot],
    probability: float,
    path: Optional[str] = None,
    moment: Optional[datetime] = None,
) -> List[Snapshot]:
    snapshot = make_snapshot(probability, moment)
    updated = append_snapshot(history, snapshot)
    persist_history(updated, path)
    logger.info("Saved snapshot %s at %d%%", snapshot.label, snapshot.percent)
    return updated


def clear_history(path: Optional[str] = None) -> List[Snapshot]:
    persist_history([], path)
    logger.info("Cleared snapshot history")
    return []


def history_frame(history: List[Snapshot]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Snapshot": snapshot.label, "Probability (%)": snapshot.percent} for snapshot in history],
        columns=["Snapshot", "Probability (%)"],
    )
