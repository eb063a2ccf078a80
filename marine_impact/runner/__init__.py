"""Assessment execution infrastructure.

This package provides the simple runner for executing assessments:
- run_assessment(): Main entry point for running any registered assessment type

Assessments follow a simple pattern:
- Constructor: __init__(request)
- Run method: run() -> pydantic result model
"""

from marine_impact.runner.runner import run_assessment

__all__ = [
    "run_assessment",
]
