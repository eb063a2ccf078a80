"""Assessment endpoints.

Run the scoring models in-process and return JSON results:
- POST /assessment/impact:  Composite impact score, metrics and insights
- POST /assessment/compliance: Regulatory checklist evaluation
- GET  /assessment/compliance/{jurisdiction}/checklist: Requirement keys only
"""

import logging

from fastapi import APIRouter, HTTPException

from marine_impact.calculators.compliance import categorize_project, required_checklist
from marine_impact.common.tracing import assessment_context
from marine_impact.models.domain import ComplianceAssessment, ImpactResult
from marine_impact.models.enums import AssessmentType
from marine_impact.models.request import AssessmentRequest
from marine_impact.runner.runner import run_assessment

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assessment")


def _run(assessment_type: AssessmentType, request: AssessmentRequest):
    try:
        with assessment_context(assessment_type.value, request.project.structure_type):
            return run_assessment(assessment_type.value, request)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValueError as e:
        logger.exception(f"{assessment_type.value} assessment failed: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.post("/impact", response_model=ImpactResult)
def assess_impact(request: AssessmentRequest):
    """Run the ecological impact assessment for a project.

    Args:
        request: Project design and already-resolved environmental datasets

    Returns:
        ImpactResult with score, metrics (camelCase keys) and insights

    Raises:
        HTTPException 500: If the assessment fails
    """
    return _run(AssessmentType.IMPACT, request)


@router.post("/compliance", response_model=ComplianceAssessment)
def assess_compliance(request: AssessmentRequest):
    """Evaluate the regulatory checklist for a project.

    Uses request.jurisdiction, or the configured default jurisdiction.
    """
    return _run(AssessmentType.COMPLIANCE, request)


@router.get("/compliance/{jurisdiction}/checklist")
def compliance_checklist(jurisdiction: str, structure_type: str = ""):
    """List the requirement keys for a jurisdiction and structure type."""
    return {
        "jurisdiction": jurisdiction,
        "category": categorize_project(structure_type).value,
        "requirements": required_checklist(jurisdiction, structure_type),
    }
