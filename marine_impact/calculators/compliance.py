"""Regulatory compliance checklist for marine infrastructure projects.

Maps a jurisdiction and structure type to the regulatory requirements that
apply, then resolves each requirement to a status using simple heuristics
over the project design.
"""

import logging
from types import MappingProxyType

from marine_impact.config import DEFAULT_COMPLIANCE, ComplianceConfig
from marine_impact.models.domain import ComplianceAssessment, ProjectDesign
from marine_impact.models.enums import ComplianceStatus, ProjectCategory

logger = logging.getLogger(__name__)

GENERIC_REQUIREMENTS = ("general_environmental_assessment",)

# Requirement keys by jurisdiction then project category
REGULATORY_FRAMEWORKS = MappingProxyType(
    {
        "EU": MappingProxyType(
            {
                ProjectCategory.MARINE: (
                    "biodiversity_net_gain",
                    "natura2000_assessment",
                    "msfd_compliance",
                    "habitat_directive",
                ),
                ProjectCategory.COASTAL: ("eia_required", "wfd_compliance", "coastal_directive"),
            }
        ),
        "US": MappingProxyType(
            {
                ProjectCategory.MARINE: (
                    "nepa_compliance",
                    "esa_consultation",
                    "msa_requirements",
                    "cwa_permits",
                ),
                ProjectCategory.COASTAL: (
                    "czma_consistency",
                    "state_coastal_permits",
                    "usace_permits",
                ),
            }
        ),
        "ISRAEL": MappingProxyType(
            {
                ProjectCategory.MARINE: (
                    "environmental_impact_assessment",
                    "coastal_protection_law",
                    "nature_reserves_law",
                ),
                ProjectCategory.COASTAL: (
                    "planning_building_law",
                    "water_law",
                    "marine_environment_protection",
                ),
            }
        ),
        "CYPRUS": MappingProxyType(
            {
                ProjectCategory.MARINE: (
                    "eu_directives",
                    "national_biodiversity_strategy",
                    "marine_protected_areas",
                ),
                ProjectCategory.COASTAL: ("coastal_zone_management", "eia_regulations"),
            }
        ),
    }
)

MARINE_STRUCTURES = frozenset({"Artificial Reef", "Breakwater", "Offshore Platform"})
COASTAL_STRUCTURES = frozenset({"Seawall", "Jetty", "Pier", "Coastal Protection"})


def categorize_project(structure_type: str) -> ProjectCategory:
    """Bucket a structure type as Marine or Coastal (Marine when unknown)."""
    if structure_type in MARINE_STRUCTURES:
        return ProjectCategory.MARINE
    if structure_type in COASTAL_STRUCTURES:
        return ProjectCategory.COASTAL
    return ProjectCategory.MARINE


def supported_jurisdictions() -> list[str]:
    return list(REGULATORY_FRAMEWORKS)


def required_checklist(jurisdiction: str, structure_type: str) -> list[str]:
    """Regulatory requirement keys for a project.

    Jurisdictions are matched case-insensitively. Unknown jurisdictions fall
    back to a single general environmental assessment.

    Args:
        jurisdiction: Jurisdiction code (e.g. "EU", "US")
        structure_type: Project structure type

    Returns:
        Requirement keys in checklist order.
    """
    framework = REGULATORY_FRAMEWORKS.get(jurisdiction.strip().upper())
    if framework is None:
        logger.info(f"No regulatory framework for jurisdiction '{jurisdiction}', using generic")
        return list(GENERIC_REQUIREMENTS)

    category = categorize_project(structure_type)
    return list(framework.get(category, GENERIC_REQUIREMENTS))


def requirement_status(
    requirement: str,
    project: ProjectDesign,
    config: ComplianceConfig = DEFAULT_COMPLIANCE,
) -> ComplianceStatus:
    """Resolve one requirement against the project design.

    Rules:
        biodiversity_net_gain: compliant if the project targets
            "Biodiversity Enhancement", otherwise review_needed
        natura2000_assessment: always assessment_required (needs site data)
        eia_required: full_eia_required above the EIA volume threshold,
            otherwise screening_required
        anything else: pending_review
    """
    if requirement == "biodiversity_net_gain":
        if project.has_goal("Biodiversity Enhancement"):
            return ComplianceStatus.COMPLIANT
        return ComplianceStatus.REVIEW_NEEDED

    if requirement == "natura2000_assessment":
        return ComplianceStatus.ASSESSMENT_REQUIRED

    if requirement == "eia_required":
        if project.volume_m3 > config.eia_volume_threshold_m3:
            return ComplianceStatus.FULL_EIA_REQUIRED
        return ComplianceStatus.SCREENING_REQUIRED

    return ComplianceStatus.PENDING_REVIEW


def assess_compliance(
    project: ProjectDesign,
    jurisdiction: str | None = None,
    config: ComplianceConfig = DEFAULT_COMPLIANCE,
) -> ComplianceAssessment:
    """Evaluate the regulatory checklist for a project.

    Args:
        project: Project design
        jurisdiction: Jurisdiction code, the configured default when None
        config: Compliance configuration

    Returns:
        ComplianceAssessment, overall compliant only when every requirement is.
    """
    jurisdiction = jurisdiction or config.default_jurisdiction
    requirements = required_checklist(jurisdiction, project.structure_type)
    status = {req: requirement_status(req, project, config) for req in requirements}

    if all(s == ComplianceStatus.COMPLIANT for s in status.values()):
        overall = ComplianceStatus.COMPLIANT
    else:
        overall = ComplianceStatus.REVIEW_NEEDED

    return ComplianceAssessment(
        jurisdiction=jurisdiction,
        requirements=requirements,
        status=status,
        overall_compliance=overall,
    )
