"""Star generation.

Builds the primary star and any companions of a system from flux draws.

Draw order:
1. Primary spectral flux
2. Primary decimal and size (skipped for brown dwarfs)
3. For each companion position (close, near, far): a presence flux, and for a
   present companion its spectral roll, decimal and size
"""

import logging

from worldgen.dice.types import Rollable
from worldgen.generators.types import (
    LuminosityClass,
    SpectralClass,
    Star,
    StarPosition,
)

logger = logging.getLogger(__name__)


# Spectral class by flux. Companions add 1D6-1 to the primary's flux, so the
# table runs past the +5 a plain flux can reach.
SPECTRAL_TABLE: dict[int, SpectralClass] = {
    -6: SpectralClass.B,
    -5: SpectralClass.A,
    -4: SpectralClass.A,
    -3: SpectralClass.F,
    -2: SpectralClass.F,
    -1: SpectralClass.G,
    0: SpectralClass.G,
    1: SpectralClass.K,
    2: SpectralClass.K,
    3: SpectralClass.M,
    4: SpectralClass.M,
    5: SpectralClass.M,
    6: SpectralClass.BD,
    7: SpectralClass.BD,
    8: SpectralClass.BD,
}
SPECTRAL_FLUX_MIN = min(SPECTRAL_TABLE)
SPECTRAL_FLUX_MAX = max(SPECTRAL_TABLE)

COMPANION_POSITIONS = (StarPosition.CLOSE, StarPosition.NEAR, StarPosition.FAR)

# Presence flux at or above this places a companion
COMPANION_THRESHOLD = 3

# M dwarfs are never giants
DWARF_ONLY = frozenset({SpectralClass.M})


def size_for_flux(flux: int, spectral: SpectralClass) -> LuminosityClass:
    """Look up a luminosity class for a size flux."""
    if flux <= -5:
        size = LuminosityClass.II
    elif flux == -4:
        size = LuminosityClass.III
    elif flux == -3:
        size = LuminosityClass.IV
    elif flux <= 3:
        size = LuminosityClass.V
    else:
        size = LuminosityClass.VI

    if spectral in DWARF_ONLY and size in (LuminosityClass.II, LuminosityClass.III):
        return LuminosityClass.V
    return size


def spectral_for_flux(flux: int) -> SpectralClass:
    """Look up a spectral class, pinning the flux to the table's rows."""
    flux = max(SPECTRAL_FLUX_MIN, min(flux, SPECTRAL_FLUX_MAX))
    return SPECTRAL_TABLE[flux]


def _build_star(rng: Rollable, position: StarPosition, spectral_flux: int) -> Star:
    spectral = spectral_for_flux(spectral_flux)
    if spectral == SpectralClass.BD:
        return Star(position=position, spectral=spectral)

    decimal = rng.roll(1, 10, -1)
    size = size_for_flux(rng.flux(0), spectral)
    return Star(position=position, spectral=spectral, decimal=decimal, size=size)


def generate_stars(rng: Rollable) -> tuple[Star, ...]:
    """Generate the stars of a system, primary first.

    Args:
        rng: Source of dice draws.

    Returns:
        The primary followed by companions in close, near, far order.
    """
    primary_flux = rng.flux(0)
    stars = [_build_star(rng, StarPosition.PRIMARY, primary_flux)]

    for position in COMPANION_POSITIONS:
        if rng.flux(0) < COMPANION_THRESHOLD:
            continue
        companion_flux = primary_flux + rng.roll(1, 6, -1)
        stars.append(_build_star(rng, position, companion_flux))

    logger.debug(
        f"Generated {len(stars)} star(s): "
        + ", ".join(f"{s.position.value} {s.spectral.value}" for s in stars)
    )
    return tuple(stars)
