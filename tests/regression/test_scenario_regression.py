"""Regression tests comparing stored scenarios against known-good baselines.

The baseline JSON files in tests/data/expected were derived by hand from the
scoring rules and are considered the source of truth. Update them only when
a scoring rule deliberately changes.
"""

import pytest

from marine_impact.outputs import CSVOutputStrategy
from marine_impact.runner.runner import run_assessment
from tests.utils import load_request

# Mark all tests in this module as regression tests
pytestmark = pytest.mark.regression

SCENARIOS = ["kelp_breakwater"]


@pytest.mark.parametrize("scenario", SCENARIOS)
def test_regression_impact_assessment(scenario, load_baseline, tolerance):
    """Impact result for a stored request matches its baseline."""
    expected = load_baseline(scenario)["impact"]

    result = run_assessment("impact", load_request(scenario))
    actual = result.model_dump(by_alias=True, mode="json")

    assert actual["score"] == expected["score"]

    metrics, expected_metrics = actual["metrics"], expected["metrics"]
    assert metrics["carbonSequestration"] == pytest.approx(
        expected_metrics["carbonSequestration"], abs=tolerance["carbon"]
    )
    assert metrics["shannonDiversity"] == pytest.approx(
        expected_metrics["shannonDiversity"], abs=tolerance["index"]
    )
    assert metrics["waterQualityIndex"] == expected_metrics["waterQualityIndex"]
    assert metrics["climateRisk"] == expected_metrics["climateRisk"]

    # Opportunity text may embed computed values, so compare by prefix
    assert len(actual["opportunities"]) == len(expected["opportunities"])
    for text, prefix in zip(actual["opportunities"], expected["opportunities"], strict=True):
        assert text.startswith(prefix)

    assert actual["risks"] == expected["risks"]
    assert actual["recommendations"] == expected["recommendations"]


@pytest.mark.parametrize("scenario", SCENARIOS)
def test_regression_compliance_check(scenario, load_baseline):
    """Compliance checklist for a stored request matches its baseline."""
    expected = load_baseline(scenario)["compliance"]

    result = run_assessment("compliance", load_request(scenario))

    assert result.model_dump(by_alias=True, mode="json") == expected


@pytest.mark.parametrize("scenario", SCENARIOS)
def test_regression_csv_output(scenario, load_baseline, tmp_path):
    """CSV export of a stored scenario carries the baseline headline values."""
    expected = load_baseline(scenario)["impact"]
    result = run_assessment("impact", load_request(scenario))

    output_path = CSVOutputStrategy().write([result], tmp_path / "results.csv", labels=[scenario])

    lines = output_path.read_text().splitlines()
    assert len(lines) == 2
    assert lines[1].startswith(f"{scenario},{expected['score']},")
