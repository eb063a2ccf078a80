"""Domain models for marine ecological impact assessment."""

from marine_impact.models.domain import (
    BiodiversityIndices,
    BiodiversitySurvey,
    ClimateProjection,
    ClimateProjections2050,
    ClimateRiskAssessment,
    ComplianceAssessment,
    EnvironmentalSnapshot,
    ExtremeEvents,
    ImpactInsights,
    ImpactMetrics,
    ImpactResult,
    ProjectDesign,
    SpeciesObservation,
    WaterQualityParameter,
)

__all__ = [
    "ProjectDesign",
    "EnvironmentalSnapshot",
    "SpeciesObservation",
    "BiodiversitySurvey",
    "BiodiversityIndices",
    "WaterQualityParameter",
    "ExtremeEvents",
    "ClimateProjections2050",
    "ClimateProjection",
    "ClimateRiskAssessment",
    "ComplianceAssessment",
    "ImpactMetrics",
    "ImpactInsights",
    "ImpactResult",
]
