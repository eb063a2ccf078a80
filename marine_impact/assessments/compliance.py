"""Regulatory compliance assessment."""

import logging

from marine_impact.calculators.compliance import assess_compliance
from marine_impact.config import ComplianceConfig
from marine_impact.models.domain import ComplianceAssessment
from marine_impact.models.request import AssessmentRequest

logger = logging.getLogger(__name__)


class ComplianceCheck:
    """Evaluates the regulatory checklist for a project's jurisdiction."""

    def __init__(self, request: AssessmentRequest, config: ComplianceConfig | None = None):
        self.request = request
        self.config = config or ComplianceConfig()

    def run(self) -> ComplianceAssessment:
        jurisdiction = self.request.jurisdiction or self.config.default_jurisdiction
        logger.info(f"Running compliance check for jurisdiction {jurisdiction}")

        assessment = assess_compliance(self.request.project, jurisdiction, self.config)

        logger.info(
            f"Compliance check complete: {len(assessment.requirements)} requirement(s), "
            f"overall {assessment.overall_compliance.value}"
        )
        return assessment
