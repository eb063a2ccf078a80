"""Base output strategy interface for impact assessment results."""

from pathlib import Path
from typing import Protocol

from marine_impact.models.domain import ImpactResult


class OutputStrategy(Protocol):
    """Protocol for output strategies that serialize impact results.

    Output strategies are separate from assessments: assessments return
    ImpactResult models and the caller decides when and where to write them.
    """

    def write(self, results: list[ImpactResult], output_path: Path) -> Path:
        """Write impact results to a file.

        Args:
            results: Impact results (domain models)
            output_path: Path where output file should be written

        Returns:
            Path to the written output file

        Raises:
            IOError: If writing fails
            ValueError: If results cannot be serialized
        """
        ...
