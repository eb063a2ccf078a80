"""Assessment request schema shared by the runner, API and scripts."""

from pydantic import BaseModel, Field

from marine_impact.models.domain import (
    BiodiversitySurvey,
    ClimateProjection,
    EnvironmentalSnapshot,
    ProjectDesign,
    WaterQualityParameter,
)


class AssessmentRequest(BaseModel):
    """Inputs for an impact or compliance assessment.

    Environmental datasets are resolved upstream and may each be absent; the
    scoring models substitute neutral defaults for missing data.

    Attributes:
        project: Project design parameters
        environment: Ambient ocean conditions
        biodiversity: Species occurrence survey
        water_quality: Water quality readings
        climate: Climate projections
        jurisdiction: Jurisdiction for the compliance checklist (configured
            default when omitted)
    """

    project: ProjectDesign = Field(..., description="Project design parameters")
    environment: EnvironmentalSnapshot | None = Field(default=None)
    biodiversity: BiodiversitySurvey | None = Field(default=None)
    water_quality: list[WaterQualityParameter] | None = Field(default=None)
    climate: ClimateProjection | None = Field(default=None)
    jurisdiction: str | None = Field(default=None, description="Jurisdiction code")

    model_config = {
        "json_schema_extra": {
            "example": {
                "project": {
                    "structure_type": "Breakwater",
                    "habitat_types": ["Kelp/Algae Forests"],
                    "length": 10,
                    "width": 5,
                    "height": 3,
                    "water_depth": 10,
                    "primary_goals": ["Biodiversity Enhancement"],
                },
                "environment": {
                    "temperature": 22,
                    "salinity": 38,
                    "nutrient_level": "moderate",
                    "depth": 10,
                },
                "biodiversity": {
                    "species_list": [
                        {"scientific_name": "Mytilus galloprovincialis", "count": 12},
                        {"scientific_name": "Diplodus sargus", "count": 4},
                    ],
                    "diversity_index": 7.2,
                    "threatened_species": 1,
                },
                "water_quality": [
                    {"name": "pH", "value": 8.1},
                    {"name": "Dissolved Oxygen", "value": 6.4},
                ],
                "climate": {
                    "sst_anomaly": 1.2,
                    "extreme_events": {"heatwaves_annual": 3, "sea_level_rise_rate": 3.4},
                    "projections_2050": {"acidification": -0.15},
                },
                "jurisdiction": "EU",
            }
        }
    }
