"""Unit tests for configuration."""


def test_default_scoring_values():
    """Test default scoring configuration values."""
    from marine_impact.config import DEFAULT_SCORING

    assert DEFAULT_SCORING.base_score == 70.0
    assert DEFAULT_SCORING.biodiversity_weight == 0.30
    assert DEFAULT_SCORING.water_quality_weight == 0.25
    assert DEFAULT_SCORING.climate_penalty_weight == 0.20
    assert DEFAULT_SCORING.goal_alignment_weight == 0.25
    assert DEFAULT_SCORING.goal_bonuses["Coral Restoration"] == 12.0
    assert DEFAULT_SCORING.insights.carbon_opportunity_tonnes == 50.0


def test_scoring_config_from_environment(monkeypatch):
    """Test SCORE_ and INSIGHT_ environment overrides."""
    from marine_impact.config import ScoringConfig

    monkeypatch.setenv("SCORE_BASE_SCORE", "65")
    monkeypatch.setenv("INSIGHT_THREATENED_SPECIES_RISK", "5")

    config = ScoringConfig()

    assert config.base_score == 65.0
    assert config.insights.threatened_species_risk == 5


def test_environment_defaults_from_environment(monkeypatch):
    from marine_impact.config import EnvironmentDefaults

    monkeypatch.setenv("ENV_TEMPERATURE_C", "18.5")
    monkeypatch.setenv("ENV_NUTRIENT_LEVEL", "high")

    defaults = EnvironmentDefaults()

    assert defaults.temperature_c == 18.5
    assert defaults.nutrient_level == "high"
    assert defaults.depth_m == 10.0


def test_compliance_config_from_environment(monkeypatch):
    from marine_impact.config import ComplianceConfig

    monkeypatch.setenv("COMPLIANCE_DEFAULT_JURISDICTION", "CYPRUS")

    assert ComplianceConfig().default_jurisdiction == "CYPRUS"
    assert ComplianceConfig().eia_volume_threshold_m3 == 1000.0


def test_api_server_config_defaults():
    from marine_impact.config import ApiServerConfig

    config = ApiServerConfig()
    assert config.port == 8085


def test_physical_constants_are_frozen():
    """Test CONSTANTS cannot be modified."""
    import dataclasses

    import pytest

    from marine_impact.config import CONSTANTS

    assert CONSTANTS.SEQUESTRATION_TONNES_FACTOR == 0.1
    with pytest.raises(dataclasses.FrozenInstanceError):
        CONSTANTS.INDEX_DECIMALS = 3
