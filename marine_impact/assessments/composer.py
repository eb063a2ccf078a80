"""Composite impact scoring and insight generation.

Fans out to the leaf scoring models (carbon, biodiversity, water quality,
climate) and folds their outputs into a single 0-100 score and a set of
categorised insights.
"""

import logging
from collections.abc import Sequence

from marine_impact.calculators.biodiversity import shannon_index
from marine_impact.calculators.carbon import estimate_sequestration
from marine_impact.calculators.climate import assess_climate_risk
from marine_impact.calculators.water_quality import quality_index
from marine_impact.common.math_utils import round_half_up
from marine_impact.config import DEFAULT_SCORING, ScoringConfig
from marine_impact.models.domain import (
    BiodiversitySurvey,
    ClimateProjection,
    EnvironmentalSnapshot,
    ImpactInsights,
    ImpactMetrics,
    ImpactResult,
    ProjectDesign,
    WaterQualityParameter,
)
from marine_impact.models.enums import RiskLevel

logger = logging.getLogger(__name__)


def _clamp_score(value: float) -> int:
    """Round half up and clamp to [0, 100]."""
    return min(max(int(round_half_up(value)), 0), 100)


def goal_alignment_bonus(project: ProjectDesign, config: ScoringConfig = DEFAULT_SCORING) -> float:
    """Sum of bonus points for each matched primary goal."""
    return sum(bonus for goal, bonus in config.goal_bonuses.items() if project.has_goal(goal))


def calculate_overall_score(
    project: ProjectDesign,
    environment: EnvironmentalSnapshot | None = None,  # noqa: ARG001
    biodiversity: BiodiversitySurvey | None = None,
    water_quality: Sequence[WaterQualityParameter] | None = None,
    climate: ClimateProjection | None = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> int:
    """Calculate the composite ecological impact score.

    Each adjustment is applied only when its input dataset is supplied.

    Formula:
        score = base (70)
        score += (min(shannon / 3.0 * 100, 100) - 70) * 0.30
        score += (water_quality_index - 70) * 0.25
        score -= climate_risk_score * 0.20
        score += sum(goal bonuses) * 0.25
        score = clamp(round(score), 0, 100)

    Args:
        project: Project design
        environment: Ambient conditions (not used by the score itself)
        biodiversity: Species survey
        water_quality: Water quality readings
        climate: Climate projection
        config: Scoring weights

    Returns:
        Integer score in [0, 100].
    """
    score = config.base_score

    if biodiversity is not None:
        shannon = shannon_index(biodiversity.species_list)
        biodiversity_score = min((shannon / config.shannon_reference) * 100, 100)
        score += (biodiversity_score - config.neutral_sub_score) * config.biodiversity_weight

    if water_quality is not None:
        water_score = quality_index(water_quality)
        score += (water_score - config.neutral_sub_score) * config.water_quality_weight

    if climate is not None:
        climate_risk = assess_climate_risk(climate)
        score -= climate_risk.score * config.climate_penalty_weight

    score += goal_alignment_bonus(project, config) * config.goal_alignment_weight

    return _clamp_score(score)


def calculate_metrics(
    project: ProjectDesign,
    environment: EnvironmentalSnapshot | None = None,
    biodiversity: BiodiversitySurvey | None = None,
    water_quality: Sequence[WaterQualityParameter] | None = None,
    climate: ClimateProjection | None = None,
) -> ImpactMetrics:
    """Compute the four headline sub-metrics.

    Missing datasets give a 0 metric (or no climate assessment).
    """
    return ImpactMetrics(
        carbon_sequestration=estimate_sequestration(project, environment),
        shannon_diversity=shannon_index(biodiversity.species_list) if biodiversity else 0.0,
        water_quality_index=quality_index(water_quality) if water_quality is not None else 0,
        climate_risk=assess_climate_risk(climate) if climate is not None else None,
    )


def generate_insights(
    project: ProjectDesign,
    environment: EnvironmentalSnapshot | None = None,
    biodiversity: BiodiversitySurvey | None = None,
    water_quality: Sequence[WaterQualityParameter] | None = None,
    climate: ClimateProjection | None = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> ImpactInsights:
    """Derive opportunities, risks and recommendations from the sub-metrics.

    Rules are independent and appended in evaluation order. No deduplication
    is performed.

    Note: the high-biodiversity opportunity reads the survey's own
    diversity_index, not the Shannon index computed from its species list.

    Args:
        project: Project design
        environment: Ambient conditions
        biodiversity: Species survey
        water_quality: Water quality readings
        climate: Climate projection
        config: Scoring configuration holding the insight thresholds

    Returns:
        ImpactInsights with the metrics the rules were evaluated against.
    """
    thresholds = config.insights
    metrics = calculate_metrics(project, environment, biodiversity, water_quality, climate)

    opportunities: list[str] = []
    risks: list[str] = []
    recommendations: list[str] = []

    # Opportunities
    if (
        biodiversity is not None
        and biodiversity.diversity_index is not None
        and biodiversity.diversity_index > thresholds.diversity_index_opportunity
    ):
        opportunities.append("High biodiversity area provides excellent foundation for enhancement")

    if metrics.carbon_sequestration > thresholds.carbon_opportunity_tonnes:
        opportunities.append(
            f"Significant carbon sequestration potential: "
            f"{metrics.carbon_sequestration} tonnes CO₂/year"
        )

    if (
        water_quality is not None
        and metrics.water_quality_index > thresholds.water_quality_opportunity
    ):
        opportunities.append("Excellent water quality supports healthy ecosystem development")

    # Risks
    climate_risk = metrics.climate_risk
    if climate_risk is not None and climate_risk.level == RiskLevel.HIGH:
        risks.append("High climate risk requires adaptive management strategies")
        risks.extend(climate_risk.factors)

    if (
        biodiversity is not None
        and biodiversity.threatened_species > thresholds.threatened_species_risk
    ):
        risks.append(
            f"{biodiversity.threatened_species} threatened species present - "
            f"enhanced monitoring required"
        )

    # Recommendations
    if climate_risk is not None:
        recommendations.extend(climate_risk.recommendations)

    if project.structure_type == "Artificial Reef" and biodiversity is not None:
        recommendations.append(
            "Consider multi-level structure design to maximize habitat complexity"
        )

    if metrics.water_quality_index < thresholds.water_quality_recommendation:
        recommendations.append(
            "Address water quality issues before construction to optimize ecological outcomes"
        )

    return ImpactInsights(
        opportunities=opportunities,
        risks=risks,
        recommendations=recommendations,
        metrics=metrics,
    )


def compose(
    project: ProjectDesign,
    environment: EnvironmentalSnapshot | None = None,
    biodiversity: BiodiversitySurvey | None = None,
    water_quality: Sequence[WaterQualityParameter] | None = None,
    climate: ClimateProjection | None = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> ImpactResult:
    """Build the complete impact result: score plus insights."""
    score = calculate_overall_score(
        project, environment, biodiversity, water_quality, climate, config
    )
    insights = generate_insights(project, environment, biodiversity, water_quality, climate, config)

    logger.info(
        f"Impact score {score} for {project.structure_type or 'unspecified structure'}: "
        f"{len(insights.opportunities)} opportunities, {len(insights.risks)} risks, "
        f"{len(insights.recommendations)} recommendations"
    )

    return ImpactResult(
        score=score,
        metrics=insights.metrics,
        opportunities=insights.opportunities,
        risks=insights.risks,
        recommendations=insights.recommendations,
    )
