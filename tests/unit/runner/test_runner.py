"""Unit tests for assessment runner."""

from unittest.mock import Mock

import pytest

from marine_impact.models import ComplianceAssessment, ImpactResult, ProjectDesign
from marine_impact.models.request import AssessmentRequest
from marine_impact.runner import runner
from marine_impact.runner.runner import run_assessment
from tests.utils import load_request


@pytest.fixture
def sample_request():
    """Create a minimal assessment request."""
    return AssessmentRequest(
        project=ProjectDesign(structure_type="Artificial Reef", length=4, width=4, height=2)
    )


def test_registry_contains_impact_and_compliance():
    assert set(runner.ASSESSMENT_TYPES) == {"impact", "compliance"}


def test_run_assessment_successful_execution(sample_request):
    """Test successful assessment class instantiation and execution."""
    expected = ComplianceAssessment(
        jurisdiction="EU",
        requirements=[],
        status={},
        overall_compliance="compliant",
    )
    mock_instance = Mock()
    mock_instance.run = Mock(return_value=expected)

    MockAssessmentClass = Mock(return_value=mock_instance, __name__="TestAssessment")

    # Patch the registry to include our mock
    original_registry = runner.ASSESSMENT_TYPES.copy()
    runner.ASSESSMENT_TYPES["test_assessment"] = MockAssessmentClass

    try:
        result = run_assessment("test_assessment", sample_request)

        # Verify class was instantiated with the request
        assert MockAssessmentClass.call_count == 1
        assert MockAssessmentClass.call_args[0][0] is sample_request

        # Verify run() was called once
        assert mock_instance.run.call_count == 1

        assert result is expected
    finally:
        # Restore original registry
        runner.ASSESSMENT_TYPES = original_registry


def test_run_assessment_not_in_registry(sample_request):
    """Test error when assessment type is not registered."""
    with pytest.raises(KeyError) as exc_info:
        run_assessment("nonexistent", sample_request)

    assert "Assessment type nonexistent not supported" in str(exc_info.value)


def test_run_assessment_returns_non_model(sample_request):
    """Test error when assessment.run() returns something other than a model."""
    mock_instance = Mock()
    mock_instance.run = Mock(return_value={"score": 70})
    MockAssessmentClass = Mock(return_value=mock_instance, __name__="BadReturnAssessment")

    original_registry = runner.ASSESSMENT_TYPES.copy()
    runner.ASSESSMENT_TYPES["bad_return"] = MockAssessmentClass

    try:
        with pytest.raises(ValueError) as exc_info:
            run_assessment("bad_return", sample_request)

        assert "must return a pydantic model" in str(exc_info.value)
        assert "dict" in str(exc_info.value)
    finally:
        runner.ASSESSMENT_TYPES = original_registry


def test_run_assessment_execution_raises_exception(sample_request):
    """Test error handling when assessment.run() raises exception."""
    mock_instance = Mock()
    mock_instance.run = Mock(side_effect=ZeroDivisionError("Calculation error"))
    MockAssessmentClass = Mock(return_value=mock_instance, __name__="FailingAssessment")

    original_registry = runner.ASSESSMENT_TYPES.copy()
    runner.ASSESSMENT_TYPES["failing"] = MockAssessmentClass

    try:
        with pytest.raises(ValueError) as exc_info:
            run_assessment("failing", sample_request)

        assert "execution failed" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)
    finally:
        runner.ASSESSMENT_TYPES = original_registry


def test_run_assessment_instantiation_raises_exception(sample_request):
    """Test error handling when the assessment cannot be constructed."""
    MockAssessmentClass = Mock(side_effect=TypeError("bad args"), __name__="BrokenAssessment")

    original_registry = runner.ASSESSMENT_TYPES.copy()
    runner.ASSESSMENT_TYPES["broken"] = MockAssessmentClass

    try:
        with pytest.raises(ValueError) as exc_info:
            run_assessment("broken", sample_request)

        assert "Failed to instantiate assessment 'broken'" in str(exc_info.value)
    finally:
        runner.ASSESSMENT_TYPES = original_registry


def test_run_impact_assessment_end_to_end():
    """Test the registered impact assessment against a stored request."""
    result = run_assessment("impact", load_request("kelp_breakwater"))

    assert isinstance(result, ImpactResult)
    assert 0 <= result.score <= 100


def test_run_compliance_assessment_end_to_end():
    """Test the registered compliance assessment against a stored request."""
    result = run_assessment("compliance", load_request("kelp_breakwater"))

    assert isinstance(result, ComplianceAssessment)
    assert result.jurisdiction == "EU"
