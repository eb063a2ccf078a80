"""Biodiversity metrics from species occurrence records.

Computes Shannon and Simpson diversity, sampling-adjusted richness and
functional group coverage for a list of species observations.
"""

import math
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from marine_impact.common.math_utils import round_half_up
from marine_impact.config import CONSTANTS
from marine_impact.models.domain import BiodiversityIndices, SpeciesObservation

# Largest reportable Simpson index at 2 decimal places
MAX_SIMPSON_INDEX = 0.99

# Marine functional groups keyed to representative genera
FUNCTIONAL_GROUPS = MappingProxyType(
    {
        "filter_feeders": ("Mytilus", "Balanus", "Ciona", "Ascidian"),
        "grazers": ("Patella", "Littorina", "Paracentrotus"),
        "predators": ("Octopus", "Cancer", "Maja"),
        "primary_producers": ("Posidonia", "Ulva", "Cystoseira"),
        "detritivores": ("Nereis", "Capitella"),
        "planktivores": ("Diplodus", "Chromis", "Atherina"),
    }
)


def _proportions(observations: Sequence[SpeciesObservation]) -> list[float]:
    total = sum(obs.count for obs in observations)
    if total == 0:
        return [0.0 for _ in observations]
    return [obs.count / total for obs in observations]


def _suitability_weight(
    observation: SpeciesObservation, suitability: Mapping[str, float] | None
) -> float:
    if suitability and observation.scientific_name in suitability:
        weight = suitability[observation.scientific_name]
    elif observation.habitat_suitability is not None:
        weight = observation.habitat_suitability
    else:
        weight = 1.0
    return min(max(weight, 0.0), 1.0)


def shannon_index(
    observations: Sequence[SpeciesObservation],
    suitability: Mapping[str, float] | None = None,
) -> float:
    """Calculate the Shannon-Weaver diversity index.

    Each species' proportion of the total count is optionally weighted by a
    habitat suitability in [0, 1], taken from ``suitability`` (keyed by
    scientific name) or the observation's own habitat_suitability.

    Formula:
        p_i = count_i / sum(count) * suitability_i
        H = -sum(p_i * ln(p_i)) over p_i > 0

    Args:
        observations: Species observations
        suitability: Optional suitability weights by scientific name

    Returns:
        Shannon index rounded to 2 decimal places, 0.0 for no observations.
    """
    if not observations:
        return 0.0

    index = 0.0
    for observation, proportion in zip(observations, _proportions(observations), strict=True):
        weighted = proportion * _suitability_weight(observation, suitability)
        if weighted > 0:
            index -= weighted * math.log(weighted)

    return round_half_up(index, CONSTANTS.INDEX_DECIMALS)


def simpson_index(observations: Sequence[SpeciesObservation]) -> float:
    """Calculate Simpson's diversity index (1 - sum(p²)).

    The probability that two randomly chosen individuals belong to different
    species.

    Returns:
        Simpson index rounded to 2 decimal places and capped at 0.99, so very
        rich communities never report 1.0. Returns 0.0 for no observations.
    """
    if not observations:
        return 0.0

    dominance = sum(p * p for p in _proportions(observations))
    # All-zero counts leave no proportions
    if dominance == 0:
        return 0.0
    return min(round_half_up(1 - dominance, CONSTANTS.INDEX_DECIMALS), MAX_SIMPSON_INDEX)


def richness(observations: Sequence[SpeciesObservation], sampling_effort: float = 1.0) -> int:
    """Species richness adjusted for sampling effort.

    Rounded with halves up. Effort above 1.0 does not inflate richness.
    """
    adjusted = len(observations) * min(sampling_effort, 1.0)
    return max(int(round_half_up(adjusted)), 0)


def functional_groups_present(observations: Sequence[SpeciesObservation]) -> set[str]:
    """Functional groups represented by at least one observed genus."""
    present = set()
    for observation in observations:
        genus = observation.genus
        for group, genera in FUNCTIONAL_GROUPS.items():
            if any(g in genus for g in genera):
                present.add(group)
    return present


def functional_diversity(observations: Sequence[SpeciesObservation]) -> float:
    """Proportion of the six marine functional groups represented.

    A group counts as present when any of its listed genera is contained in
    an observation's genus (first token of the scientific name).

    Returns:
        Functional diversity in [0, 1], rounded to 2 decimal places.
    """
    if not observations:
        return 0.0

    present = functional_groups_present(observations)
    return round_half_up(len(present) / len(FUNCTIONAL_GROUPS), CONSTANTS.INDEX_DECIMALS)


def summarize(
    observations: Sequence[SpeciesObservation],
    sampling_effort: float = 1.0,
    suitability: Mapping[str, float] | None = None,
) -> BiodiversityIndices:
    """Compute all biodiversity metrics for a species list."""
    return BiodiversityIndices(
        shannon=shannon_index(observations, suitability),
        simpson=simpson_index(observations),
        richness=richness(observations, sampling_effort),
        functional_diversity=functional_diversity(observations),
    )
