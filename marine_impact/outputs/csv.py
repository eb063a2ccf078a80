"""CSV output strategy for impact assessment results.

Flattens each ImpactResult into one row: score, headline metrics, climate
risk summary and the insight lists joined with " | ".
"""

from pathlib import Path

import pandas as pd

from marine_impact.models.domain import ImpactResult

LIST_SEPARATOR = " | "


class CSVOutputStrategy:
    """Writes impact results to CSV, one row per result.

    The Project column carries an optional label per result so several
    design variants can be compared side by side.
    """

    COLUMNS = [
        "Project",
        "Score",
        "Carbon_Sequestration_t_yr",
        "Shannon_Diversity",
        "Water_Quality_Index",
        "Climate_Risk_Score",
        "Climate_Risk_Level",
        "Opportunities",
        "Risks",
        "Recommendations",
    ]

    def write(
        self,
        results: list[ImpactResult],
        output_path: Path,
        labels: list[str] | None = None,
    ) -> Path:
        """Write impact results to CSV file.

        Args:
            results: Impact results (domain models)
            output_path: Path where CSV file should be written
            labels: Optional label per result (defaults to its 1-based position)

        Returns:
            Path to the written CSV file

        Raises:
            ValueError: If results is empty or labels do not match results
        """
        if not results:
            raise ValueError("Cannot write CSV: results list is empty")

        if labels is None:
            labels = [str(i) for i in range(1, len(results) + 1)]
        if len(labels) != len(results):
            msg = f"Got {len(labels)} labels for {len(results)} results"
            raise ValueError(msg)

        rows = [self._result_to_row(r, label) for r, label in zip(results, labels, strict=True)]

        df = pd.DataFrame(rows)
        df = df[self.COLUMNS]

        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, index=False)

        return output_path

    def _result_to_row(self, result: ImpactResult, label: str) -> dict:
        metrics = result.metrics
        climate = metrics.climate_risk
        return {
            "Project": label,
            "Score": result.score,
            "Carbon_Sequestration_t_yr": metrics.carbon_sequestration,
            "Shannon_Diversity": metrics.shannon_diversity,
            "Water_Quality_Index": metrics.water_quality_index,
            "Climate_Risk_Score": climate.score if climate is not None else None,
            "Climate_Risk_Level": metrics.climate_risk_level,
            "Opportunities": LIST_SEPARATOR.join(result.opportunities),
            "Risks": LIST_SEPARATOR.join(result.risks),
            "Recommendations": LIST_SEPARATOR.join(result.recommendations),
        }
