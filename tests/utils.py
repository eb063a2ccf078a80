import json
from pathlib import Path

from marine_impact.models.domain import (
    BiodiversitySurvey,
    ClimateProjection,
    ClimateProjections2050,
    ExtremeEvents,
    SpeciesObservation,
    WaterQualityParameter,
)
from marine_impact.models.request import AssessmentRequest

DATA_DIR = Path(__file__).parent / "data"


def species(*entries: tuple[str, int]) -> list[SpeciesObservation]:
    """Build species observations from (scientific_name, count) pairs."""
    return [SpeciesObservation(scientific_name=name, count=count) for name, count in entries]


def survey(
    *entries: tuple[str, int],
    diversity_index: float | None = None,
    threatened_species: int = 0,
) -> BiodiversitySurvey:
    return BiodiversitySurvey(
        species_list=species(*entries),
        diversity_index=diversity_index,
        threatened_species=threatened_species,
    )


def readings(**values: float) -> list[WaterQualityParameter]:
    """Build water quality readings from keyword values (underscores become spaces)."""
    return [
        WaterQualityParameter(name=name.replace("_", " "), value=value)
        for name, value in values.items()
    ]


def climate(
    sst_anomaly: float = 0.0,
    sea_level_rise_rate: float = 0.0,
    heatwaves_annual: int = 0,
    acidification: float = 0.0,
) -> ClimateProjection:
    return ClimateProjection(
        sst_anomaly=sst_anomaly,
        extreme_events=ExtremeEvents(
            heatwaves_annual=heatwaves_annual,
            sea_level_rise_rate=sea_level_rise_rate,
        ),
        projections_2050=ClimateProjections2050(acidification=acidification),
    )


def severe_climate() -> ClimateProjection:
    """Projection triggering every risk factor (score 90, high)."""
    return climate(
        sst_anomaly=2.5,
        sea_level_rise_rate=6.0,
        heatwaves_annual=5,
        acidification=-0.4,
    )


def load_request(name: str) -> AssessmentRequest:
    """Load an assessment request from tests/data/requests."""
    path = DATA_DIR / "requests" / f"{name}.json"
    return AssessmentRequest.model_validate(json.loads(path.read_text()))
