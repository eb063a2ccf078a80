"""Climate change risk scoring from site climate projections.

Accumulates risk points from independent exposure conditions (thermal
anomaly, sea level rise, acidification, marine heatwaves), buckets the total
into a risk level and derives mitigation recommendations from the triggered
factors.
"""

import logging

from marine_impact.models.domain import ClimateProjection, ClimateRiskAssessment
from marine_impact.models.enums import RiskLevel

logger = logging.getLogger(__name__)

MAX_RISK_SCORE = 100


class RiskFactors:
    """Risk factor descriptions reported by the assessor."""

    SEVERE_THERMAL = "Severe thermal stress risk"
    MODERATE_THERMAL = "Moderate thermal stress risk"
    HIGH_SEA_LEVEL = "High sea level rise impact"
    MODERATE_SEA_LEVEL = "Moderate sea level rise impact"
    SEVERE_ACIDIFICATION = "Severe acidification threat to calcifiers"
    MODERATE_ACIDIFICATION = "Moderate acidification risk"
    FREQUENT_HEATWAVES = "Frequent marine heatwaves"


HIGH_RISK_RECOMMENDATIONS = (
    "Implement adaptive management protocols",
    "Design for higher thermal tolerance species",
    "Plan for structure reinforcement against sea level rise",
)

# Mitigations added when a specific factor is triggered
FACTOR_RECOMMENDATIONS = (
    (
        RiskFactors.SEVERE_THERMAL,
        (
            "Select thermally resilient species for bio-enhancement",
            "Consider deeper water placement if feasible",
        ),
    ),
    (
        RiskFactors.SEVERE_ACIDIFICATION,
        (
            "Prioritize non-calcifying species in design",
            "Monitor carbonate chemistry regularly",
        ),
    ),
)


def risk_level(score: int) -> RiskLevel:
    """Bucket a risk score: >50 high, >25 medium, otherwise low."""
    if score > 50:
        return RiskLevel.HIGH
    if score > 25:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def mitigation_recommendations(level: RiskLevel, factors: list[str]) -> list[str]:
    """Derive mitigation recommendations from risk level and triggered factors."""
    recommendations: list[str] = []

    if level == RiskLevel.HIGH:
        recommendations.extend(HIGH_RISK_RECOMMENDATIONS)

    for factor, mitigations in FACTOR_RECOMMENDATIONS:
        if factor in factors:
            recommendations.extend(mitigations)

    return recommendations


def assess_climate_risk(climate: ClimateProjection | None) -> ClimateRiskAssessment:
    """Score climate change exposure for a project site.

    Points (each condition independent and cumulative):
        sst_anomaly > 2.0 -> +30, > 1.0 -> +15
        sea_level_rise_rate > 5.0 -> +25, > 3.0 -> +10
        acidification < -0.3 -> +20, < -0.1 -> +10
        heatwaves_annual > 4 -> +15

    Args:
        climate: Climate projection (a neutral projection when None)

    Returns:
        ClimateRiskAssessment with score capped at 100.
    """
    climate = climate or ClimateProjection()
    events = climate.extreme_events
    acidification = climate.projections_2050.acidification

    score = 0
    factors: list[str] = []

    if climate.sst_anomaly > 2.0:
        score += 30
        factors.append(RiskFactors.SEVERE_THERMAL)
    elif climate.sst_anomaly > 1.0:
        score += 15
        factors.append(RiskFactors.MODERATE_THERMAL)

    if events.sea_level_rise_rate > 5.0:
        score += 25
        factors.append(RiskFactors.HIGH_SEA_LEVEL)
    elif events.sea_level_rise_rate > 3.0:
        score += 10
        factors.append(RiskFactors.MODERATE_SEA_LEVEL)

    if acidification < -0.3:
        score += 20
        factors.append(RiskFactors.SEVERE_ACIDIFICATION)
    elif acidification < -0.1:
        score += 10
        factors.append(RiskFactors.MODERATE_ACIDIFICATION)

    if events.heatwaves_annual > 4:
        score += 15
        factors.append(RiskFactors.FREQUENT_HEATWAVES)

    score = min(score, MAX_RISK_SCORE)
    level = risk_level(score)
    logger.debug(f"Climate risk score {score} ({level.value}): {factors}")

    return ClimateRiskAssessment(
        score=score,
        level=level,
        factors=factors,
        recommendations=mitigation_recommendations(level, factors),
    )
