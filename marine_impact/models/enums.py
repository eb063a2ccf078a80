"""Categorical values used across the impact models.

String-valued so they serialise unchanged into JSON results.
"""

from enum import Enum


class NutrientLevel(str, Enum):
    """Ambient nutrient loading categories."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    EUTROPHIC = "eutrophic"


class RiskLevel(str, Enum):
    """Climate risk buckets."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ComplianceStatus(str, Enum):
    """Resolved status of a single regulatory requirement."""

    COMPLIANT = "compliant"
    REVIEW_NEEDED = "review_needed"
    ASSESSMENT_REQUIRED = "assessment_required"
    FULL_EIA_REQUIRED = "full_eia_required"
    SCREENING_REQUIRED = "screening_required"
    PENDING_REVIEW = "pending_review"


class ProjectCategory(str, Enum):
    """Regulatory category a structure type falls under."""

    MARINE = "Marine"
    COASTAL = "Coastal"


class AssessmentType(str, Enum):
    """Types of assessments supported by the runner."""

    IMPACT = "impact"
    COMPLIANCE = "compliance"
