"""Unit tests for the assess_project development script."""

import json

import pandas as pd
import pytest
from typer.testing import CliRunner

from scripts.assess_project import app
from tests.utils import DATA_DIR

KELP_REQUEST = DATA_DIR / "requests" / "kelp_breakwater.json"


@pytest.fixture
def runner():
    return CliRunner()


def test_impact_assessment_prints_json(runner):
    result = runner.invoke(app, [str(KELP_REQUEST)])

    assert result.exit_code == 0
    body = json.loads(result.stdout)
    assert body["score"] == 67
    assert "carbonSequestration" in body["metrics"]


def test_compliance_assessment_with_jurisdiction_override(runner):
    result = runner.invoke(app, [str(KELP_REQUEST), "--type", "compliance", "-j", "CYPRUS"])

    assert result.exit_code == 0
    body = json.loads(result.stdout)
    assert body["jurisdiction"] == "CYPRUS"
    assert body["requirements"][0] == "eu_directives"


def test_csv_output(runner, tmp_path):
    csv_path = tmp_path / "impact.csv"

    result = runner.invoke(app, [str(KELP_REQUEST), "--csv", str(csv_path)])

    assert result.exit_code == 0
    df = pd.read_csv(csv_path)
    assert df.loc[0, "Project"] == "kelp_breakwater"
    assert df.loc[0, "Score"] == 67


def test_csv_output_rejected_for_compliance(runner, tmp_path):
    csv_path = tmp_path / "compliance.csv"

    result = runner.invoke(
        app, [str(KELP_REQUEST), "--type", "compliance", "--csv", str(csv_path)]
    )

    assert result.exit_code == 1
    assert not csv_path.exists()


def test_invalid_json_exits_with_error(runner, tmp_path):
    request_file = tmp_path / "broken.json"
    request_file.write_text("{not json")

    assert runner.invoke(app, [str(request_file)]).exit_code == 1


def test_invalid_request_exits_with_error(runner, tmp_path):
    request_file = tmp_path / "invalid.json"
    request_file.write_text(json.dumps({"project": {"length": -1}}))

    assert runner.invoke(app, [str(request_file)]).exit_code == 1


def test_assessment_failure_exits_with_error(runner, mocker):
    mocker.patch(
        "scripts.assess_project.run_assessment",
        side_effect=ValueError("Assessment 'impact' execution failed"),
    )

    assert runner.invoke(app, [str(KELP_REQUEST)]).exit_code == 1
