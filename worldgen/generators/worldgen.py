"""Mainworld generation.

Turns a stream of dice draws into a World. The steps run in a fixed order and
each consumes its own draws, so the same stream always yields the same world:

1. Orbit roll and mainworld type (two flux draws)
2. Starport
3. Naval base, then scout base
4. Size
5. Orbit placement
6. Atmosphere
7. Hydrographics
8. Population
9. Population digit
10. Government
11. Law level
12. Tech level
13. Travel zone
"""

import logging

from worldgen.dice.types import Rollable
from worldgen.generators.types import (
    Base,
    CloseSatellite,
    FarSatellite,
    MainWorldType,
    Planet,
    RuleTableError,
    Starport,
    TravelZone,
    World,
)
from worldgen.generators.uwp import world_uwp

logger = logging.getLogger(__name__)


# Indexed by 2D6-2
STARPORT_DISTRIBUTION: tuple[Starport, ...] = (
    Starport.A,
    Starport.A,
    Starport.A,
    Starport.B,
    Starport.B,
    Starport.C,
    Starport.C,
    Starport.D,
    Starport.E,
    Starport.E,
    Starport.X,
)

# Highest 2D6 roll that still places a base, by starport
NAVAL_BASE_THRESHOLDS: dict[Starport, int] = {
    Starport.A: 6,
    Starport.B: 5,
}
SCOUT_BASE_THRESHOLDS: dict[Starport, int] = {
    Starport.A: 4,
    Starport.B: 5,
    Starport.C: 6,
    Starport.D: 7,
}

# Atmospheres that dry out hydrographics
HARSH_ATMOSPHERES = frozenset({0, 1, 2, 10, 11, 12, 13, 14, 15})


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def generate_mainworld(rng: Rollable, hz_variance: int, habitable_zone: int) -> World:
    """Generate a mainworld.

    Args:
        rng: Source of dice draws. Advanced by every step below, in order.
        hz_variance: Offset of the mainworld's orbit from the habitable zone.
        habitable_zone: Orbit index of the system's habitable zone.

    Returns:
        A fully populated World.
    """
    orbit_roll = rng.flux(0)
    mainworld_type_roll = rng.flux(0)
    mainworld_type = roll_mainworld_type(mainworld_type_roll, orbit_roll)

    port = roll_starport(rng.roll(2, 6, -2))

    naval_roll = rng.roll(2, 6, 0)
    scout_roll = rng.roll(2, 6, 0)
    bases = roll_bases(port, naval_roll, scout_roll)

    size = rng.roll(2, 6, -2)
    if size == 10:
        size = rng.roll(1, 6, 9)

    # Asteroid belts are placed as planetoid belts and ignore the HZ variance
    if size == 0:
        orbit = max(0, rng.roll(2, 6, -1 + habitable_zone))
    else:
        orbit = max(0, habitable_zone + hz_variance)

    if size == 0:
        atmosphere = 0
    else:
        atmosphere = _clamp(rng.flux(size), 0, 15)

    if size in (0, 1):
        hydrographics = 0
    elif atmosphere in HARSH_ATMOSPHERES:
        hydrographics = _clamp(rng.flux(atmosphere - 4), 0, 10)
    else:
        hydrographics = _clamp(rng.flux(atmosphere), 0, 10)

    population = rng.roll(2, 6, -2)
    if population == 10:
        population = rng.roll(2, 6, 3)

    if population == 0:
        population_digit = 0
        government = 0
        law = 0
    else:
        population_digit = rng.roll(1, 9, 0)
        government = _clamp(rng.flux(population), 0, 15)
        law = _clamp(rng.flux(government), 0, 18)

    modifier = tech_mod(port, size, atmosphere, hydrographics, population, government)
    tech = _clamp(rng.roll(1, 6, modifier), 0, 33)

    world = World(
        mainworld_type=mainworld_type,
        hz_variance=hz_variance,
        orbit=orbit,
        port=port,
        bases=bases,
        size=size,
        atmosphere=atmosphere,
        hydrographics=hydrographics,
        population=population,
        population_digit=population_digit,
        government=government,
        law=law,
        tech=tech,
        travel_zone=travel_zone(port, government, law),
    )
    logger.debug(f"Generated mainworld {world_uwp(world)} ({world.travel_zone.value})")
    return world


def roll_mainworld_type(flux: int, orbit_roll: int) -> MainWorldType:
    """Map the type flux to a mainworld type, placing satellites by orbit roll."""
    close_orbit = _clamp(orbit_roll + 6, 1, 11)
    far_orbit = close_orbit + 13
    if flux in (-5, -4):
        return FarSatellite(orbit=far_orbit)
    if flux == -3:
        return CloseSatellite(orbit=close_orbit)
    return Planet()


def roll_starport(roll: int) -> Starport:
    """Look up a 2D6-2 roll in the starport distribution.

    Raises:
        RuleTableError: If the roll is outside 0-10.
    """
    if not 0 <= roll < len(STARPORT_DISTRIBUTION):
        raise RuleTableError(f"Starport roll out of range: {roll}")
    return STARPORT_DISTRIBUTION[roll]


def roll_bases(port: Starport, naval_roll: int, scout_roll: int) -> tuple[Base, ...]:
    """Decide which bases a port supports from two independent 2D6 rolls."""
    bases: list[Base] = []
    if port in NAVAL_BASE_THRESHOLDS and naval_roll <= NAVAL_BASE_THRESHOLDS[port]:
        bases.append(Base.NAVAL)
    if port in SCOUT_BASE_THRESHOLDS and scout_roll <= SCOUT_BASE_THRESHOLDS[port]:
        bases.append(Base.SCOUT)
    return tuple(bases)


def travel_zone(port: Starport, government: int, law: int) -> TravelZone:
    """Classify a world; a missing starport always means Red."""
    total = government + law
    if port == Starport.X or 22 <= total <= 32:
        return TravelZone.RED
    if total in (20, 21):
        return TravelZone.AMBER
    return TravelZone.GREEN


# =============================================================================
# Tech Level Modifiers
# =============================================================================


def tech_mod(
    port: Starport,
    size: int,
    atmosphere: int,
    hydrographics: int,
    population: int,
    government: int,
) -> int:
    """Sum the tech level modifiers of all six tables."""
    return (
        port_tech(port)
        + size_tech(size)
        + atmosphere_tech(atmosphere)
        + hydrographics_tech(hydrographics)
        + population_tech(population)
        + government_tech(government)
    )


def port_tech(port: Starport) -> int:
    if port == Starport.A:
        return 6
    if port == Starport.B:
        return 4
    if port == Starport.C:
        return 2
    if port == Starport.F:
        return 1
    if port == Starport.X:
        return -4
    return 0


def size_tech(size: int) -> int:
    if 0 <= size <= 1:
        return 2
    if 2 <= size <= 4:
        return 1
    return 0


def atmosphere_tech(atmosphere: int) -> int:
    if 0 <= atmosphere <= 3 or 10 <= atmosphere <= 15:
        return 1
    return 0


def hydrographics_tech(hydrographics: int) -> int:
    if hydrographics == 9:
        return 1
    if hydrographics == 10:
        return 2
    return 0


def population_tech(population: int) -> int:
    if 1 <= population <= 5:
        return 1
    if population == 9:
        return 2
    if 10 <= population <= 15:
        return 4
    return 0


def government_tech(government: int) -> int:
    """Only governments 0, 5 and 13 shift tech level."""
    if government in (0, 5):
        return 1
    if government == 13:
        return -2
    return 0
