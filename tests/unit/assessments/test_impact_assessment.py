"""Unit tests for the ImpactAssessment runnable."""

import logging

import pytest

from marine_impact.assessments.composer import compose
from marine_impact.assessments.impact import ImpactAssessment
from marine_impact.config import ScoringConfig
from marine_impact.models import ImpactResult, ProjectDesign
from marine_impact.models.request import AssessmentRequest
from tests.utils import load_request


@pytest.fixture
def kelp_request() -> AssessmentRequest:
    return load_request("kelp_breakwater")


def test_run_returns_impact_result(kelp_request):
    result = ImpactAssessment(kelp_request).run()

    assert isinstance(result, ImpactResult)
    assert result.score == 67
    assert result.metrics.water_quality_index == 100
    assert result.metrics.climate_risk_level == "low"


def test_run_matches_composer(kelp_request):
    result = ImpactAssessment(kelp_request).run()

    assert result == compose(
        project=kelp_request.project,
        environment=kelp_request.environment,
        biodiversity=kelp_request.biodiversity,
        water_quality=kelp_request.water_quality,
        climate=kelp_request.climate,
    )


def test_custom_config_changes_score(kelp_request):
    default = ImpactAssessment(kelp_request).run()
    lowered = ImpactAssessment(kelp_request, ScoringConfig(base_score=50)).run()

    assert lowered.score == default.score - 20


def test_project_only_request():
    request = AssessmentRequest(project=ProjectDesign(structure_type="Seawall"))

    result = ImpactAssessment(request).run()

    assert result.score == 70
    assert result.metrics.carbon_sequestration == 0
    assert result.metrics.climate_risk is None


def test_run_logs_timing(kelp_request, caplog):
    with caplog.at_level(logging.INFO, logger="marine_impact.assessments.impact"):
        ImpactAssessment(kelp_request).run()

    assert any(r.message.startswith("[timing] compose:") for r in caplog.records)
