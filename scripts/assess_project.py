#!/usr/bin/env python

"""Run an assessment from a JSON request file for local development.

The request file holds the same body the API accepts on
POST /assessment/impact: a "project" object plus optional "environment",
"biodiversity", "water_quality", "climate" and "jurisdiction".

Usage:
    uv run python scripts/assess_project.py <request.json>
    uv run python scripts/assess_project.py request.json --type compliance
    uv run python scripts/assess_project.py request.json --csv results/impact.csv
    uv run python scripts/assess_project.py --help
"""

import json
import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from marine_impact.models.domain import ImpactResult
from marine_impact.models.enums import AssessmentType
from marine_impact.models.request import AssessmentRequest
from marine_impact.outputs.csv import CSVOutputStrategy
from marine_impact.runner.runner import run_assessment

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="Run marine impact assessments from JSON request files")


@app.command()
def assess(
    request_file: Path = typer.Argument(
        ...,
        help="Path to JSON assessment request",
        exists=True,
    ),
    assessment_type: AssessmentType = typer.Option(
        AssessmentType.IMPACT,
        "--type",
        "-t",
        help="Assessment to run",
    ),
    jurisdiction: str = typer.Option(
        None,
        "--jurisdiction",
        "-j",
        help="Override the request's jurisdiction",
    ),
    csv_path: Path = typer.Option(
        None,
        "--csv",
        help="Also write the impact result to this CSV file",
    ),
):
    """Run an assessment and print the result as JSON."""
    logger.info(f"Request file: {request_file}")
    logger.info(f"Assessment type: {assessment_type.value}")

    try:
        payload = json.loads(request_file.read_text())
        if jurisdiction:
            payload["jurisdiction"] = jurisdiction
        request = AssessmentRequest.model_validate(payload)
    except json.JSONDecodeError as e:
        logger.error(f"Request file is not valid JSON: {e}")
        raise typer.Exit(1)
    except ValidationError as e:
        logger.error(f"Invalid assessment request: {e}")
        raise typer.Exit(1)

    try:
        result = run_assessment(assessment_type.value, request)
    except (KeyError, ValueError) as e:
        logger.error(f"Assessment failed: {e}")
        raise typer.Exit(1)

    typer.echo(result.model_dump_json(by_alias=True, indent=2))

    if csv_path is not None:
        if not isinstance(result, ImpactResult):
            logger.error("CSV output is only available for impact assessments")
            raise typer.Exit(1)
        written = CSVOutputStrategy().write([result], csv_path, labels=[request_file.stem])
        logger.info(f"✓ Wrote {written}")


if __name__ == "__main__":
    app()
