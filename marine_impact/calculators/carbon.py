"""Carbon sequestration estimates for colonised marine structures.

Estimates the annual carbon captured by organisms colonising a structure from
habitat type, structure geometry and ambient growing conditions.
"""

from types import MappingProxyType

from marine_impact.common.math_utils import round_half_up
from marine_impact.config import CONSTANTS
from marine_impact.models.domain import EnvironmentalSnapshot, ProjectDesign
from marine_impact.models.enums import NutrientLevel

DEFAULT_KEY = "default"

# kgC/m²/yr by habitat then structure type
BIOMASS_DENSITY_TABLE = MappingProxyType(
    {
        "Kelp/Algae Forests": MappingProxyType(
            {"Breakwater": 15.2, "Artificial Reef": 18.7, "Seawall": 8.3, DEFAULT_KEY: 12.1}
        ),
        "Subtidal Rocky Reef": MappingProxyType(
            {"Breakwater": 8.9, "Artificial Reef": 12.4, "Seawall": 6.2, DEFAULT_KEY: 8.8}
        ),
        "Filter Feeder Communities": MappingProxyType(
            {"Breakwater": 6.7, "Artificial Reef": 9.1, "Seawall": 4.8, DEFAULT_KEY: 6.9}
        ),
        DEFAULT_KEY: MappingProxyType({DEFAULT_KEY: 5.5}),
    }
)

STRUCTURE_COMPLEXITY_MULTIPLIERS = MappingProxyType(
    {
        "Artificial Reef": 2.3,
        "Breakwater": 1.4,
        "Pier": 1.1,
        "Seawall": 0.8,
        DEFAULT_KEY: 1.0,
    }
)

NUTRIENT_FACTORS = MappingProxyType(
    {
        NutrientLevel.LOW.value: 0.7,
        NutrientLevel.MODERATE.value: 1.0,
        NutrientLevel.HIGH.value: 1.3,
        NutrientLevel.EUTROPHIC.value: 0.8,
    }
)


def biomass_density(habitat_type: str, structure_type: str) -> float:
    """Look up colonising biomass density for a habitat on a structure type.

    Unknown structure types fall back to the habitat's default entry and
    unknown habitats fall back to the global default (5.5 kgC/m²/yr).

    Args:
        habitat_type: Habitat type (e.g. "Kelp/Algae Forests")
        structure_type: Structure type (e.g. "Breakwater")

    Returns:
        Biomass density in kgC/m²/yr.
    """
    habitat_row = BIOMASS_DENSITY_TABLE.get(habitat_type, BIOMASS_DENSITY_TABLE[DEFAULT_KEY])
    return habitat_row.get(structure_type, habitat_row[DEFAULT_KEY])


def _temperature_factor(temperature: float) -> float:
    if temperature < 12:
        return 0.3
    if temperature < 16:
        return 0.6
    if temperature <= 26:
        return 1.0
    if temperature <= 30:
        return 0.7
    return 0.4


def _salinity_factor(salinity: float) -> float:
    if salinity < 30:
        return 0.5
    if salinity > 42:
        return 0.6
    return 1.0


def _depth_factor(depth: float) -> float:
    # Deepest band first
    if depth > 60:
        return 0.1
    if depth > 40:
        return 0.4
    if depth > 20:
        return 0.7
    return 1.0


def growth_modifier(
    temperature: float,
    salinity: float,
    depth: float,
    nutrients: str = NutrientLevel.MODERATE.value,
) -> float:
    """Combine ambient conditions into a multiplicative growth factor.

    Product of four independent piecewise factors:
        temperature: <12 -> 0.3, <16 -> 0.6, <=26 -> 1.0, <=30 -> 0.7, else 0.4
        salinity: <30 -> 0.5, >42 -> 0.6, else 1.0
        depth: >60 -> 0.1, >40 -> 0.4, >20 -> 0.7, else 1.0
        nutrients: low 0.7, moderate 1.0, high 1.3, eutrophic 0.8, other 1.0

    Args:
        temperature: Sea surface temperature (°C)
        salinity: Salinity (PSU)
        depth: Water depth (metres)
        nutrients: Nutrient loading category

    Returns:
        Growth modifier, always positive.
    """
    nutrient_factor = NUTRIENT_FACTORS.get(nutrients.strip().lower(), 1.0)
    return (
        _temperature_factor(temperature)
        * _salinity_factor(salinity)
        * _depth_factor(depth)
        * nutrient_factor
    )


def surface_complexity(structure_type: str, length: float, width: float, height: float) -> float:
    """Surface complexity factor of a box-shaped structure.

    Formula:
        volume = l * w * h
        surface_area = 2 * (l*w + l*h + w*h)
        complexity = surface_area / volume^(2/3) * type_multiplier

    A zero volume returns 1.0 rather than dividing by zero.

    Args:
        structure_type: Structure type selecting the multiplier
        length: Length (metres)
        width: Width (metres)
        height: Height (metres)

    Returns:
        Complexity factor.
    """
    volume = length * width * height
    if volume == 0:
        return 1.0

    surface_area = 2 * (length * width + length * height + width * height)
    base_complexity = surface_area / volume ** CONSTANTS.COMPLEXITY_VOLUME_EXPONENT

    multiplier = STRUCTURE_COMPLEXITY_MULTIPLIERS.get(
        structure_type, STRUCTURE_COMPLEXITY_MULTIPLIERS[DEFAULT_KEY]
    )
    return base_complexity * multiplier


def estimate_sequestration(
    project: ProjectDesign,
    environment: EnvironmentalSnapshot | None = None,
) -> float:
    """Estimate annual carbon sequestration potential of a project.

    For each habitat type (a single "default" habitat when none are given):
        sequestration += density * growth * complexity * (length * width) * 0.1

    Growth depth comes from the project's water depth, or the environment's
    depth when the project does not state one.

    Args:
        project: Project design
        environment: Ambient conditions (neutral defaults when None)

    Returns:
        Sequestration in tonnes/year, rounded to 2 decimal places.
    """
    environment = environment or EnvironmentalSnapshot()
    habitat_types = project.habitat_types or [DEFAULT_KEY]
    length, width, height = project.dimensions
    depth = project.water_depth if project.water_depth is not None else environment.depth

    modifier = growth_modifier(
        environment.temperature,
        environment.salinity,
        depth,
        environment.nutrient_level,
    )
    complexity = surface_complexity(project.structure_type, length, width, height)
    footprint = project.footprint_m2

    total = 0.0
    for habitat_type in habitat_types:
        density = biomass_density(habitat_type, project.structure_type)
        total += density * modifier * complexity * footprint * CONSTANTS.SEQUESTRATION_TONNES_FACTOR

    # Round to 2 decimal places
    return round_half_up(total, CONSTANTS.INDEX_DECIMALS)
