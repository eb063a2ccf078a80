"""Ecological impact assessment.

This module implements the composite impact assessment as a runnable
assessment. It owns no scoring logic itself: the composer folds the leaf
calculators into the result.
"""

import logging
import time

from marine_impact.assessments.composer import compose
from marine_impact.config import ScoringConfig
from marine_impact.models.domain import ImpactResult
from marine_impact.models.request import AssessmentRequest

logger = logging.getLogger(__name__)


class ImpactAssessment:
    """Ecological impact assessment for a proposed marine structure.

    This assessment evaluates a project design against already-resolved
    environmental data by:
    - Estimating carbon sequestration of colonising biomass
    - Scoring biodiversity, water quality and climate exposure
    - Blending the sub-scores with goal alignment into a 0-100 score
    - Deriving opportunities, risks and recommendations
    """

    def __init__(self, request: AssessmentRequest, config: ScoringConfig | None = None):
        """Initialize impact assessment.

        Args:
            request: Project design and environmental datasets
            config: Scoring weights (environment-driven defaults when None)
        """
        self.request = request
        self.config = config or ScoringConfig()

    def run(self) -> ImpactResult:
        """Run the impact assessment.

        Returns:
            ImpactResult with score, metrics and insights.
        """
        logger.info("Running ecological impact assessment")
        t0 = time.perf_counter()

        request = self.request
        result = compose(
            project=request.project,
            environment=request.environment,
            biodiversity=request.biodiversity,
            water_quality=request.water_quality,
            climate=request.climate,
            config=self.config,
        )

        logger.info(f"[timing] compose: {time.perf_counter() - t0:.3f}s")
        return result
