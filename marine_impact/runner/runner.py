"""Assessment execution

This module provides a runner for pluggable assessments.
"""

import logging

from pydantic import BaseModel

from marine_impact.assessments.compliance import ComplianceCheck
from marine_impact.assessments.impact import ImpactAssessment
from marine_impact.models.request import AssessmentRequest

logger = logging.getLogger(__name__)


ASSESSMENT_TYPES: dict[str, type] = {
    "compliance": ComplianceCheck,
    "impact": ImpactAssessment,
}


def run_assessment(assessment_type: str, request: AssessmentRequest) -> BaseModel:
    """Run an assessment and return its result model.

    This is the main entry point for executing assessments. It looks up the
    assessment class, instantiates it, and executes it.

    Args:
        assessment_type: Assessment identifier ("impact" or "compliance")
        request: Project design and environmental datasets

    Returns:
        The assessment's result model, e.g. ImpactResult for "impact" and
        ComplianceAssessment for "compliance".

    Raises:
        KeyError: If assessment type is not registered
        ValueError: If assessment.run() fails or returns invalid data
    """
    logger.info(f"Running assessment: {assessment_type}")

    assessment_class = ASSESSMENT_TYPES.get(assessment_type)
    if assessment_class is None:
        msg = f"Assessment type {assessment_type} not supported"
        raise KeyError(msg)

    logger.info(f"Instantiating {assessment_class.__name__}")
    try:
        assessment = assessment_class(request)
    except Exception as e:
        logger.error(f"Assessment instantiation failed: {e}")
        msg = f"Failed to instantiate assessment '{assessment_type}'"
        raise ValueError(msg) from e

    logger.info(f"Executing {assessment_type}.run()")
    try:
        result = assessment.run()
    except Exception as e:
        logger.error(f"Assessment execution failed: {e}")
        msg = f"Assessment '{assessment_type}' execution failed"
        raise ValueError(msg) from e

    if not isinstance(result, BaseModel):
        msg = (
            f"Assessment '{assessment_type}'.run() must return a pydantic model, "
            f"got {type(result).__name__}"
        )
        raise ValueError(msg)

    logger.info(f"Assessment returned {type(result).__name__}")

    return result
