"""Universal World Profile formatting.

Renders generated records in the usual survey notation:

    B674786-9  NS  A  612  G2 V

UWP digits use extended hex (eHex): 0-9, then A-Z skipping I and O so that
they are never mistaken for 1 and 0.
"""

from worldgen.generators.types import (
    Base,
    Star,
    System,
    TravelZone,
    World,
)

EHEX_DIGITS = "0123456789ABCDEFGHJKLMNPQRSTUVWXYZ"

BASE_CODES: dict[Base, str] = {
    Base.NAVAL: "N",
    Base.SCOUT: "S",
}

ZONE_CODES: dict[TravelZone, str] = {
    TravelZone.GREEN: "",
    TravelZone.AMBER: "A",
    TravelZone.RED: "R",
}


def to_ehex(value: int) -> str:
    """Encode 0-33 as a single eHex digit.

    Raises:
        ValueError: If the value has no eHex digit.

    Examples:
        >>> to_ehex(9)
        '9'
        >>> to_ehex(18)
        'J'
    """
    if not 0 <= value < len(EHEX_DIGITS):
        raise ValueError(f"No eHex digit for {value}")
    return EHEX_DIGITS[value]


def world_uwp(world: World) -> str:
    """Format a world as a UWP string such as ``B674786-9``."""
    return (
        f"{world.port.value}{to_ehex(world.size)}{to_ehex(world.atmosphere)}"
        f"{to_ehex(world.hydrographics)}{to_ehex(world.population)}"
        f"{to_ehex(world.government)}{to_ehex(world.law)}-{to_ehex(world.tech)}"
    )


def bases_code(bases: tuple[Base, ...]) -> str:
    """Naval first, then scout; empty when there are no bases."""
    return "".join(BASE_CODES[base] for base in Base if base in bases)


def zone_code(zone: TravelZone) -> str:
    return ZONE_CODES[zone]


def star_code(star: Star) -> str:
    """Format a star as ``G2 V``; brown dwarfs are just ``BD``."""
    if star.is_brown_dwarf:
        return star.spectral.value
    return f"{star.spectral.value}{star.decimal} {star.size.value}"


def pbg_code(system: System) -> str:
    """Population digit, belts and gas giants as three eHex digits."""
    return (
        f"{to_ehex(system.mainworld.population_digit)}"
        f"{to_ehex(system.belts)}{to_ehex(system.gas_giants)}"
    )


def system_summary(system: System) -> str:
    """One survey line for a system."""
    world = system.mainworld
    fields = [
        world_uwp(world),
        bases_code(world.bases) or "-",
        zone_code(world.travel_zone) or "-",
        pbg_code(system),
        " ".join(star_code(star) for star in system.stars),
    ]
    return "  ".join(fields)
