"""Configuration and constants for the Marine Ecological Impact Engine.

This module defines the tunable business rules and the fixed constants used
by the impact scoring models.

Includes configuration for:
- Neutral environmental defaults (EnvironmentDefaults with ENV_ prefix)
- Composite score weighting (ScoringConfig with SCORE_ prefix)
- Insight rule thresholds (InsightThresholds with INSIGHT_ prefix)
- Compliance checks (ComplianceConfig with COMPLIANCE_ prefix)
- HTTP API server (ApiServerConfig with API_ prefix)

Configuration can be overridden via:
1. Environment variables (e.g., SCORE_BASE_SCORE=65, ENV_TEMPERATURE_C=18)
2. .env file in the current directory
3. Default values in code

Lookup tables (biomass densities, functional groups, regulatory frameworks)
are NOT configuration: they live beside their calculators as immutable data.
"""

from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class PhysicalConstants:
    """Fixed conversion factors used in impact calculations.

    These are NOT configurable. All attributes are immutable (frozen=True
    prevents modification).
    """

    # kgC/m²/yr over a footprint in m² -> tonnes/yr as reported by the model
    SEQUESTRATION_TONNES_FACTOR: float = 0.1

    # Surface-area-to-volume scaling exponent for the complexity ratio
    COMPLEXITY_VOLUME_EXPONENT: float = 2 / 3

    # Number of decimal places kept on reported indices
    INDEX_DECIMALS: int = 2


# Module-level singleton for physical constants
CONSTANTS = PhysicalConstants()


class EnvironmentDefaults(BaseSettings):
    """Neutral ambient conditions used when no environmental data is supplied.

    Can be overridden via environment variables with ENV_ prefix:
    - ENV_TEMPERATURE_C
    - ENV_SALINITY_PSU
    - ENV_DEPTH_M
    - ENV_NUTRIENT_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="ENV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    temperature_c: float = Field(default=22.0, description="Sea surface temperature (°C)")
    salinity_psu: float = Field(default=38.0, description="Salinity (PSU)")
    depth_m: float = Field(default=10.0, ge=0, description="Water depth (metres)")
    nutrient_level: str = Field(default="moderate", description="Nutrient loading category")


DEFAULT_ENVIRONMENT = EnvironmentDefaults()


class InsightThresholds(BaseSettings):
    """Thresholds for the insight rules appended to an impact result.

    Can be overridden via environment variables with INSIGHT_ prefix.

    Attributes:
        diversity_index_opportunity: Survey diversity index above which the
            site counts as a high-biodiversity foundation
        carbon_opportunity_tonnes: Sequestration above which carbon is
            reported as an opportunity (tonnes/year)
        water_quality_opportunity: Water quality index above which water
            quality is reported as an opportunity
        water_quality_recommendation: Water quality index below which a
            remediation recommendation is added
        threatened_species_risk: Threatened species count above which
            enhanced monitoring is flagged as a risk
    """

    model_config = SettingsConfigDict(
        env_prefix="INSIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    diversity_index_opportunity: float = Field(default=7.0)
    carbon_opportunity_tonnes: float = Field(default=50.0)
    water_quality_opportunity: int = Field(default=80, ge=0, le=100)
    water_quality_recommendation: int = Field(default=60, ge=0, le=100)
    threatened_species_risk: int = Field(default=2, ge=0)


class ScoringConfig(BaseSettings):
    """Weights for the composite 0-100 impact score.

    Can be overridden via environment variables with SCORE_ prefix:
    - SCORE_BASE_SCORE
    - SCORE_BIODIVERSITY_WEIGHT
    - SCORE_WATER_QUALITY_WEIGHT
    - SCORE_CLIMATE_PENALTY_WEIGHT
    - SCORE_GOAL_ALIGNMENT_WEIGHT
    - INSIGHT_* variables for nested insight thresholds

    Attributes:
        base_score: Starting score before adjustments
        neutral_sub_score: Sub-score at which a component neither adds nor
            subtracts from the base
        shannon_reference: Shannon index mapped to a biodiversity sub-score of 100
        biodiversity_weight: Weight of the biodiversity adjustment
        water_quality_weight: Weight of the water quality adjustment
        climate_penalty_weight: Weight of the climate risk penalty
        goal_alignment_weight: Weight of the summed goal alignment bonus
        goal_bonuses: Bonus points per matched primary goal
        insights: Insight rule thresholds
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_score: float = Field(default=70.0, ge=0, le=100)
    neutral_sub_score: float = Field(default=70.0, ge=0, le=100)
    shannon_reference: float = Field(default=3.0, gt=0)
    biodiversity_weight: float = Field(default=0.30, ge=0)
    water_quality_weight: float = Field(default=0.25, ge=0)
    climate_penalty_weight: float = Field(default=0.20, ge=0)
    goal_alignment_weight: float = Field(default=0.25, ge=0)
    goal_bonuses: dict[str, float] = Field(
        default_factory=lambda: {
            "Biodiversity Enhancement": 10.0,
            "Carbon Sequestration": 5.0,
            "Fish Habitat Creation": 8.0,
            "Coral Restoration": 12.0,
        },
        description="Bonus points per matched primary goal",
    )
    insights: InsightThresholds = Field(
        default_factory=InsightThresholds, description="Insight rule thresholds"
    )


DEFAULT_SCORING = ScoringConfig()


class ComplianceConfig(BaseSettings):
    """Configuration for the regulatory compliance checklist.

    Can be overridden via environment variables with COMPLIANCE_ prefix:
    - COMPLIANCE_DEFAULT_JURISDICTION
    - COMPLIANCE_EIA_VOLUME_THRESHOLD_M3
    """

    model_config = SettingsConfigDict(
        env_prefix="COMPLIANCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_jurisdiction: str = Field(default="EU", description="Jurisdiction when none given")
    eia_volume_threshold_m3: float = Field(
        default=1000.0,
        ge=0,
        description="Structure volume above which a full EIA is required (m³)",
    )


DEFAULT_COMPLIANCE = ComplianceConfig()


class ApiServerConfig(BaseSettings):
    """Configuration for the HTTP API server.

    Can be overridden via environment variables with API_ prefix:
    - API_HOST (default: 0.0.0.0)
    - API_PORT (default: 8085)
    - API_LOG_LEVEL (default: INFO)
    - API_LOG_CONFIG (default: logging.json in containers, else logging-dev.json)
    """

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Interface the API server binds to")
    port: int = Field(default=8085, ge=1, le=65535, description="Port for the API server")
    log_level: str = Field(default="INFO", description="Root log level")
    log_config: str | None = Field(default=None, description="Path to a dictConfig JSON file")
