#!/usr/bin/env python3
"""Pure displacement scoring logic shared by the app and its charts."""

from __future__ import annotations

import copy
from dataclasses import dataclass
import math
from typing import Dict, Iterable, List, Optional, Tuple

PILLARS = ["product", "ops", "sales", "pioneering", "marketing"]

PILLAR_LABELS = {
    "product": "Product",
    "ops": "Operations & Customer Service",
    "sales": "Sales",
    "pioneering": "Pioneering",
    "marketing": "Marketing",
}

PILLAR_SHORT_LABELS = {
    "product": "Product",
    "ops": "Ops/CS",
    "sales": "Sales",
    "pioneering": "Pioneering",
    "marketing": "Marketing",
}

# Strategic importance: Product & Ops/CS highest, then Sales & Pioneering, then Marketing.
DEFAULT_WEIGHTS: Dict[str, float] = {
    "product": 0.30,
    "ops": 0.30,
    "sales": 0.18,
    "pioneering": 0.12,
    "marketing": 0.10,
}

# Insertion order matters: the first key of each pillar drives the sensitivity sweep.
SUB_CRITERIA_WEIGHTS: Dict[str, Dict[str, float]] = {
    "product": {"pmf": 0.30, "reliability": 0.20, "ux": 0.20, "featureParity": 0.20, "dataSecurity": 0.10},
    "ops": {"onboarding": 0.25, "supportSLA": 0.25, "retention": 0.25, "quality": 0.25},
    "sales": {"coverage": 0.30, "conversion": 0.30, "expansion": 0.20, "unitEconomics": 0.20},
    "pioneering": {"firstMover": 0.30, "networkEffects": 0.40, "brandAuthority": 0.30},
    "marketing": {"reach": 0.30, "targeting": 0.30, "costEfficiency": 0.25, "community": 0.15},
}

SUB_CRITERIA_LABELS: Dict[str, str] = {
    "pmf": "Product–Market Fit",
    "reliability": "Reliability/Uptime",
    "ux": "UX & Usability",
    "featureParity": "Core Feature Parity/Edge",
    "dataSecurity": "Data & Security/Compliance",
    "onboarding": "Onboarding Speed/Clarity",
    "supportSLA": "Support SLA & Resolution",
    "retention": "Retention/Churn Control",
    "quality": "Ops Quality/Field Execution",
    "coverage": "Territory Coverage/Activity",
    "conversion": "Conversion & Win Rate",
    "expansion": "Expansion/ARPA Growth",
    "unitEconomics": "CAC Payback/Unit Econ.",
    "firstMover": "First-Mover/Timing Edge",
    "networkEffects": "Network Effects/Lock-in",
    "brandAuthority": "Category Authority/PR",
    "reach": "Reach/Share of Voice",
    "targeting": "Targeting/Creative Fit",
    "costEfficiency": "Cost Efficiency (CAC)",
    "community": "Community/Influencer Leverage",
}

DEFAULT_PILLAR_LEVELS = {
    "product": 6.0,
    "ops": 6.0,
    "sales": 5.0,
    "pioneering": 5.0,
    "marketing": 5.0,
}

DEFAULT_MATURITY = 6.0
DEFAULT_STEEPNESS = 8.0
DEFAULT_SHOCK = 0.0
DEFAULT_SENSITIVITY_PILLAR = "ops"
SENSITIVITY_OFFSETS = list(range(-6, 7))

THRESHOLD_FLOOR = 0.10
THRESHOLD_SPAN = 0.20

Scores = Dict[str, Dict[str, float]]


@dataclass
class SimulationResult:
    you_pillars: Dict[str, float]
    competitor_pillars: Dict[str, float]
    you_score: float
    competitor_score: float
    threshold: float
    probability: float
    advantage_pct: float
    pillar_gaps: Dict[str, float]
    sensitivity: List[Tuple[int, int]]


def clamp(value: float, lo: float = 0.0, hi: float = 10.0) -> float:
    return max(lo, min(hi, value))


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round1(value: float) -> float:
    return round_half_up(value, 1)


def default_scores() -> Scores:
    return {
        pillar: {key: DEFAULT_PILLAR_LEVELS[pillar] for key in SUB_CRITERIA_WEIGHTS[pillar]}
        for pillar in PILLARS
    }


def pillar_score(pillar: str, values: Dict[str, float]) -> float:
    """Weighted sum of a pillar's sub-criteria; missing keys count as 0.

    Inputs are not clamped here, the sliders bound them to 0-10.
    """
    total = 0.0
    for key, weight in SUB_CRITERIA_WEIGHTS[pillar].items():
        total += values.get(key, 0.0) * weight
    return total


def pillar_scores(scores: Scores) -> Dict[str, float]:
    return {pillar: pillar_score(pillar, scores.get(pillar, {})) for pillar in PILLARS}


def aggregate_score(weights: Dict[str, float], scores: Scores) -> float:
    """Weighted pillar total rescaled from 0-10 to 0-1 and clamped."""
    total = sum(weights.get(pillar, 0.0) * value for pillar, value in pillar_scores(scores).items())
    return clamp01(total / 10.0)


def normalize_weights(weights: Dict[str, float]) -> Dict[str, float]:
    cleaned = {pillar: max(0.0, float(weights.get(pillar, 0.0))) for pillar in PILLARS}
    total = sum(cleaned.values())
    if total <= 0:
        return {pillar: 1.0 / len(PILLARS) for pillar in PILLARS}
    return {pillar: value / total for pillar, value in cleaned.items()}


def update_weight(weights: Dict[str, float], pillar: str, value: float) -> Dict[str, float]:
    if pillar not in PILLARS:
        raise KeyError(pillar)
    edited = dict(weights)
    edited[pillar] = value
    return normalize_weights(edited)


def maturity_to_threshold(maturity: float) -> float:
    """Minimum advantage needed for a 50% chance; mature markets are harder to flip."""
    return THRESHOLD_FLOOR + THRESHOLD_SPAN * (maturity / 10.0)


def logistic(x: float) -> float:
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def displacement_probability(
    you_score: float,
    competitor_score: float,
    maturity: float = DEFAULT_MATURITY,
    k: float = DEFAULT_STEEPNESS,
    shock: float = DEFAULT_SHOCK,
) -> float:
    delta = you_score - competitor_score + shock
    theta = maturity_to_threshold(maturity)
    z = k * (delta - theta)
    return clamp01(logistic(z))


def advantage_delta_pct(you_score: float, competitor_score: float) -> float:
    return round_half_up((you_score - competitor_score) * 100.0, 1)


def pillar_gaps(you_pillars: Dict[str, float], competitor_pillars: Dict[str, float]) -> Dict[str, float]:
    return {pillar: you_pillars[pillar] - competitor_pillars[pillar] for pillar in PILLARS}


def sensitivity_sweep(
    weights: Dict[str, float],
    you_scores: Scores,
    competitor_scores: Scores,
    pillar: str = DEFAULT_SENSITIVITY_PILLAR,
    maturity: float = DEFAULT_MATURITY,
    k: float = DEFAULT_STEEPNESS,
    shock: float = DEFAULT_SHOCK,
    offsets: Optional[Iterable[int]] = None,
) -> List[Tuple[int, int]]:
    """Probability (%) as You's first sub-criterion of ``pillar`` moves by each offset."""
    try:
        lever = next(iter(SUB_CRITERIA_WEIGHTS[pillar]))
    except KeyError as exc:
        raise ValueError(f"Unknown pillar for sensitivity sweep: {pillar!r}") from exc

    competitor_score = aggregate_score(weights, competitor_scores)
    base = you_scores.get(pillar, {}).get(lever, 0.0)
    points: List[Tuple[int, int]] = []
    for offset in SENSITIVITY_OFFSETS if offsets is None else offsets:
        trial = copy.deepcopy(you_scores)
        trial.setdefault(pillar, {})[lever] = clamp(base + offset)
        probability = displacement_probability(
            aggregate_score(weights, trial),
            competitor_score,
            maturity=maturity,
            k=k,
            shock=shock,
        )
        points.append((offset, int(round_half_up(probability * 100))))
    return points


def run_simulation(
    weights: Dict[str, float],
    you_scores: Scores,
    competitor_scores: Scores,
    maturity: float = DEFAULT_MATURITY,
    k: float = DEFAULT_STEEPNESS,
    shock: float = DEFAULT_SHOCK,
    sensitivity_pillar: str = DEFAULT_SENSITIVITY_PILLAR,
) -> SimulationResult:
    you_pillars = pillar_scores(you_scores)
    competitor_pillars = pillar_scores(competitor_scores)
    you_score = aggregate_score(weights, you_scores)
    competitor_score = aggregate_score(weights, competitor_scores)
    probability = displacement_probability(you_score, competitor_score, maturity=maturity, k=k, shock=shock)

    return SimulationResult(
        you_pillars=you_pillars,
        competitor_pillars=competitor_pillars,
        you_score=you_score,
        competitor_score=competitor_score,
        threshold=maturity_to_threshold(maturity),
        probability=probability,
        advantage_pct=advantage_delta_pct(you_score, competitor_score),
        pillar_gaps=pillar_gaps(you_pillars, competitor_pillars),
        sensitivity=sensitivity_sweep(
            weights,
            you_scores,
            competitor_scores,
            pillar=sensitivity_pillar,
            maturity=maturity,
            k=k,
            shock=shock,
        ),
    )
