"""Star system and mainworld generators.

Usage:
    >>> from worldgen.dice import DiceRoller
    >>> from worldgen.generators import generate_system
    >>> system = generate_system(DiceRoller(seed=1))
    >>> system.mainworld.tech >= 0
    True
"""

import logging
import math

from worldgen.dice.types import Rollable
from worldgen.generators.stargen import generate_stars
from worldgen.generators.types import (
    Base,
    CloseSatellite,
    FarSatellite,
    LuminosityClass,
    MainWorldType,
    Planet,
    RuleTableError,
    SpectralClass,
    Star,
    StarPosition,
    Starport,
    System,
    TravelZone,
    World,
)
from worldgen.generators.uwp import system_summary
from worldgen.generators.worldgen import generate_mainworld

logger = logging.getLogger(__name__)

DEFAULT_HABITABLE_ZONE = 3
DEFAULT_HZ_VARIANCE = 0


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def generate_system(
    rng: Rollable,
    habitable_zone: int = DEFAULT_HABITABLE_ZONE,
    hz_variance: int = DEFAULT_HZ_VARIANCE,
) -> System:
    """Generate a star system around its mainworld.

    Stars are drawn first, then the mainworld, then belts and gas giants.

    Args:
        rng: Source of dice draws.
        habitable_zone: Orbit index of the habitable zone.
        hz_variance: Offset of the mainworld from the habitable zone.

    Returns:
        A fully populated System.
    """
    stars = generate_stars(rng)
    mainworld = generate_mainworld(rng, hz_variance, habitable_zone)

    belts = max(0, rng.roll(1, 6, -3))
    gas_giants = max(0, _round_half_away(rng.roll(2, 6, 0) / 2 - 2))

    system = System(
        stars=stars,
        mainworld=mainworld,
        belts=belts,
        gas_giants=gas_giants,
    )
    logger.debug(f"Generated system {system_summary(system)}")
    return system


__all__ = [
    # Generators
    "generate_system",
    "generate_mainworld",
    "generate_stars",
    "DEFAULT_HABITABLE_ZONE",
    "DEFAULT_HZ_VARIANCE",
    # Records
    "Base",
    "CloseSatellite",
    "FarSatellite",
    "LuminosityClass",
    "MainWorldType",
    "Planet",
    "RuleTableError",
    "SpectralClass",
    "Star",
    "StarPosition",
    "Starport",
    "System",
    "TravelZone",
    "World",
]
