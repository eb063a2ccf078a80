"""Output strategies for impact assessment results."""

from marine_impact.outputs.base import OutputStrategy
from marine_impact.outputs.csv import CSVOutputStrategy

__all__ = ["OutputStrategy", "CSVOutputStrategy"]
