"""Scoring models for marine ecological impact assessment.

This package contains pure functions over immutable inputs and static lookup
tables. All calculators are stateless and never raise for missing or unknown
domain data.
"""

from marine_impact.calculators.biodiversity import (
    functional_diversity,
    richness,
    shannon_index,
    simpson_index,
)
from marine_impact.calculators.carbon import estimate_sequestration
from marine_impact.calculators.climate import assess_climate_risk
from marine_impact.calculators.compliance import assess_compliance, required_checklist
from marine_impact.calculators.water_quality import quality_index

__all__ = [
    "estimate_sequestration",
    "shannon_index",
    "simpson_index",
    "richness",
    "functional_diversity",
    "quality_index",
    "assess_climate_risk",
    "required_checklist",
    "assess_compliance",
]
