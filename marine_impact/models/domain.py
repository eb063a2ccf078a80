"""Core domain models for marine ecological impact assessment.

These models represent the inputs and outputs of the scoring models as
immutable value objects. Every optional field carries its neutral default in
the signature, so absent upstream data resolves here rather than inside the
calculators.

Includes models for:
- Project design and ambient environment inputs
- Species, water quality and climate observations
- Climate risk, compliance and composite impact results
"""

from pydantic import BaseModel, ConfigDict, Field

from marine_impact.config import DEFAULT_ENVIRONMENT
from marine_impact.models.enums import ComplianceStatus, RiskLevel


class ProjectDesign(BaseModel):
    """A proposed marine infrastructure project.

    Dimensions left as None are treated as zero, which yields no
    sequestration contribution.

    Attributes:
        structure_type: Structure kind (e.g. "Breakwater", "Artificial Reef")
        habitat_types: Target habitats, empty means a single default bucket
        length: Structure length in metres
        width: Structure width in metres
        height: Structure height in metres
        water_depth: Installation depth in metres (None defers to the environment)
        primary_goals: Stated project goals
    """

    model_config = ConfigDict(frozen=True)

    structure_type: str = Field(default="", description="Structure type")
    habitat_types: list[str] = Field(default_factory=list, description="Target habitat types")
    length: float | None = Field(default=None, ge=0, description="Length (metres)")
    width: float | None = Field(default=None, ge=0, description="Width (metres)")
    height: float | None = Field(default=None, ge=0, description="Height (metres)")
    water_depth: float | None = Field(default=None, ge=0, description="Water depth (metres)")
    primary_goals: list[str] = Field(default_factory=list, description="Primary project goals")

    @property
    def dimensions(self) -> tuple[float, float, float]:
        """Length, width and height with missing values as 0.0."""
        return (self.length or 0.0, self.width or 0.0, self.height or 0.0)

    @property
    def footprint_m2(self) -> float:
        length, width, _ = self.dimensions
        return length * width

    @property
    def volume_m3(self) -> float:
        length, width, height = self.dimensions
        return length * width * height

    def has_goal(self, goal: str) -> bool:
        return goal in self.primary_goals


class EnvironmentalSnapshot(BaseModel):
    """Ambient ocean conditions at the project site.

    Attributes:
        temperature: Sea surface temperature (°C)
        salinity: Salinity (PSU)
        nutrient_level: low, moderate, high or eutrophic
        depth: Water depth (metres)
    """

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(default=DEFAULT_ENVIRONMENT.temperature_c)
    salinity: float = Field(default=DEFAULT_ENVIRONMENT.salinity_psu)
    nutrient_level: str = Field(default=DEFAULT_ENVIRONMENT.nutrient_level)
    depth: float = Field(default=DEFAULT_ENVIRONMENT.depth_m, ge=0)


class SpeciesObservation(BaseModel):
    """Occurrence record for one species.

    Attributes:
        scientific_name: Binomial name ("Genus species")
        count: Number of individuals observed
        habitat_suitability: Optional weight in [0, 1] applied to the species'
            proportion in the Shannon index
    """

    model_config = ConfigDict(frozen=True)

    scientific_name: str
    count: int = Field(default=1, ge=0)
    habitat_suitability: float | None = Field(default=None, ge=0, le=1)

    @property
    def genus(self) -> str:
        parts = self.scientific_name.split(" ")
        return parts[0]


class BiodiversitySurvey(BaseModel):
    """Species occurrence data for the project site.

    Attributes:
        species_list: Observed species
        diversity_index: Diversity index reported by the upstream data source.
            Kept separate from the Shannon index computed from species_list.
        threatened_species: Number of threatened species recorded at the site
    """

    model_config = ConfigDict(frozen=True)

    species_list: list[SpeciesObservation] = Field(default_factory=list)
    diversity_index: float | None = Field(default=None, ge=0)
    threatened_species: int = Field(default=0, ge=0)


class WaterQualityParameter(BaseModel):
    """A single water quality reading.

    Attributes:
        name: Metric name, matched case-insensitively
        value: Measured value
        status: Categorical status used when the metric is not recognised
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: float | None = None
    status: str | None = None


class ExtremeEvents(BaseModel):
    model_config = ConfigDict(frozen=True)

    heatwaves_annual: int = Field(default=0, ge=0, description="Marine heatwaves per year")
    sea_level_rise_rate: float = Field(default=0.0, description="Sea level rise (mm/year)")


class ClimateProjections2050(BaseModel):
    model_config = ConfigDict(frozen=True)

    acidification: float = Field(default=0.0, description="Projected change in pH")


class ClimateProjection(BaseModel):
    """Climate change projections for the project site.

    Attributes:
        sst_anomaly: Sea surface temperature anomaly (°C)
        extreme_events: Heatwave frequency and sea level rise rate
        projections_2050: Mid-century ocean chemistry projections
    """

    model_config = ConfigDict(frozen=True)

    sst_anomaly: float = Field(default=0.0)
    extreme_events: ExtremeEvents = Field(default_factory=ExtremeEvents)
    projections_2050: ClimateProjections2050 = Field(default_factory=ClimateProjections2050)


class BiodiversityIndices(BaseModel):
    """Diversity metrics computed from a species list."""

    model_config = ConfigDict(frozen=True)

    shannon: float = Field(ge=0)
    simpson: float = Field(ge=0, le=1)
    richness: int = Field(ge=0)
    functional_diversity: float = Field(ge=0, le=1)


class ClimateRiskAssessment(BaseModel):
    """Climate exposure score with triggered factors and mitigations."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    level: RiskLevel
    factors: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class ComplianceAssessment(BaseModel):
    """Regulatory checklist evaluation for a project in one jurisdiction.

    Attributes:
        jurisdiction: Jurisdiction the checklist was drawn from
        requirements: Requirement keys in checklist order
        status: Resolved status per requirement key
        overall_compliance: compliant only when every requirement is compliant
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    jurisdiction: str
    requirements: list[str]
    status: dict[str, ComplianceStatus]
    overall_compliance: ComplianceStatus = Field(alias="overallCompliance")

    def is_compliant(self) -> bool:
        return self.overall_compliance == ComplianceStatus.COMPLIANT


class ImpactMetrics(BaseModel):
    """Key sub-metrics behind an impact result.

    climate_risk is None when no climate data was supplied.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    carbon_sequestration: float = Field(
        ge=0, alias="carbonSequestration", description="Tonnes/year"
    )
    shannon_diversity: float = Field(ge=0, alias="shannonDiversity")
    water_quality_index: int = Field(ge=0, le=100, alias="waterQualityIndex")
    climate_risk: ClimateRiskAssessment | None = Field(default=None, alias="climateRisk")

    @property
    def climate_risk_level(self) -> str:
        """Climate risk level, "unknown" when no climate data was assessed."""
        if self.climate_risk is None:
            return "unknown"
        return self.climate_risk.level.value


class ImpactInsights(BaseModel):
    """Categorised insight strings in rule evaluation order."""

    model_config = ConfigDict(frozen=True)

    opportunities: list[str] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    metrics: ImpactMetrics


class ImpactResult(BaseModel):
    """Complete impact assessment result for a project.

    Attributes:
        score: Composite impact score (0-100)
        metrics: Sub-metrics the score and insights were derived from
        opportunities: Positive findings
        risks: Negative findings
        recommendations: Suggested actions
    """

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    metrics: ImpactMetrics
    opportunities: list[str] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
