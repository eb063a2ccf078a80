"""Water quality index from raw water quality readings."""

import logging
from collections.abc import Callable, Sequence
from types import MappingProxyType

import numpy as np

from marine_impact.common.math_utils import round_half_up
from marine_impact.models.domain import WaterQualityParameter

logger = logging.getLogger(__name__)


def _dissolved_oxygen_score(value: float) -> int:
    if value >= 6.0:
        return 100
    if value >= 4.0:
        return 70
    if value >= 2.0:
        return 40
    return 10


def _ph_score(value: float) -> int:
    if 7.8 <= value <= 8.3:
        return 100
    if 7.5 <= value <= 8.5:
        return 80
    if 7.0 <= value <= 9.0:
        return 60
    return 20


def _upper_limit_score(limits: tuple[float, float, float]) -> Callable[[float], int]:
    """Score a pollutant-style metric where lower is better."""
    excellent, good, fair = limits

    def score(value: float) -> int:
        if value <= excellent:
            return 100
        if value <= good:
            return 80
        if value <= fair:
            return 60
        return 30

    return score


# Sub-score functions keyed by lowercase metric name
METRIC_SCORERS: MappingProxyType[str, Callable[[float], int]] = MappingProxyType(
    {
        "dissolved oxygen": _dissolved_oxygen_score,  # mg/L
        "ph": _ph_score,
        "turbidity": _upper_limit_score((2.0, 5.0, 10.0)),  # NTU
        "nitrates": _upper_limit_score((0.5, 1.0, 2.0)),  # mg/L
        "phosphates": _upper_limit_score((0.05, 0.1, 0.2)),  # mg/L
    }
)

STATUS_SCORES = MappingProxyType(
    {
        "excellent": 100,
        "good": 80,
        "fair": 60,
        "poor": 30,
    }
)

UNKNOWN_STATUS_SCORE = 50


def parameter_score(parameter: WaterQualityParameter) -> int:
    """Score a single reading from 0 to 100.

    Recognised metrics (dissolved oxygen, pH, turbidity, nitrates,
    phosphates) are scored against their threshold table. Anything else, or
    a recognised metric without a value, falls back to its categorical
    status: excellent 100, good 80, fair 60, poor 30, otherwise 50.
    """
    scorer = METRIC_SCORERS.get(parameter.name.strip().lower())
    if scorer is not None and parameter.value is not None:
        return scorer(parameter.value)

    status = (parameter.status or "").strip().lower()
    return STATUS_SCORES.get(status, UNKNOWN_STATUS_SCORE)


def quality_index(parameters: Sequence[WaterQualityParameter] | None) -> int:
    """Calculate the overall water quality index.

    Args:
        parameters: Water quality readings

    Returns:
        Mean of all sub-scores rounded to the nearest integer with halves
        rounded up (0-100), 0 when no readings are supplied.
    """
    if not parameters:
        return 0

    scores = [parameter_score(p) for p in parameters]
    logger.debug(f"Water quality sub-scores: {scores}")

    return int(round_half_up(np.mean(scores)))
