"""Records produced by the system and mainworld generators.

All records are frozen pydantic models: every generation call builds them
fresh and hands them back by value. Field constraints mirror the clamped
ranges of the rule tables, so a record that fails validation points at a bug
in a generator rather than at bad input.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RuleTableError(LookupError):
    """A roll fell outside the rows of a rule table.

    The dice primitives make this unreachable; raising it means a generator or
    a random source broke its contract.
    """

    pass


# =============================================================================
# Enums
# =============================================================================


class Starport(str, Enum):
    """Starport classes, best first."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    # Spaceport class; known to the tech table, never rolled for a mainworld
    F = "F"
    X = "X"  # No starport


class Base(str, Enum):
    """Bases that may be present at a mainworld."""

    NAVAL = "naval"
    SCOUT = "scout"


class TravelZone(str, Enum):
    """Travel advisory for a world."""

    GREEN = "green"  # Unrestricted
    AMBER = "amber"  # Caution
    RED = "red"  # Restricted


class StarPosition(str, Enum):
    """Position of a star within its system."""

    PRIMARY = "primary"
    CLOSE = "close"
    NEAR = "near"
    FAR = "far"


class SpectralClass(str, Enum):
    """Spectral class of a star, hottest first."""

    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"
    BD = "BD"  # Brown dwarf


class LuminosityClass(str, Enum):
    """Luminosity (size) class of a star."""

    IA = "Ia"
    IB = "Ib"
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"
    VI = "VI"
    D = "D"


# =============================================================================
# Mainworld Type
# =============================================================================


class Planet(BaseModel):
    """The mainworld is itself a planet in the primary orbital sequence."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["planet"] = "planet"


class CloseSatellite(BaseModel):
    """The mainworld is a satellite in a close orbit around a planet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["close_satellite"] = "close_satellite"
    orbit: int = Field(ge=1, le=11)


class FarSatellite(BaseModel):
    """The mainworld is a satellite in a far orbit around a planet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["far_satellite"] = "far_satellite"
    orbit: int = Field(ge=14, le=24)


MainWorldType = Annotated[
    Union[Planet, CloseSatellite, FarSatellite],
    Field(discriminator="kind"),
]


# =============================================================================
# Records
# =============================================================================


class World(BaseModel):
    """A generated mainworld."""

    model_config = ConfigDict(frozen=True)

    mainworld_type: MainWorldType
    hz_variance: int
    orbit: int = Field(ge=0)
    port: Starport
    bases: tuple[Base, ...] = ()

    # Size 10 rerolls as 1D6+9, which can reach 15
    size: int = Field(ge=0, le=15)
    atmosphere: int = Field(ge=0, le=15)
    hydrographics: int = Field(ge=0, le=10)
    population: int = Field(ge=0, le=15)
    population_digit: int = Field(ge=0, le=9)
    government: int = Field(ge=0, le=15)
    law: int = Field(ge=0, le=18)
    tech: int = Field(ge=0, le=33)
    travel_zone: TravelZone

    @field_validator("bases")
    @classmethod
    def bases_are_unique(cls, value: tuple[Base, ...]) -> tuple[Base, ...]:
        if len(set(value)) != len(value):
            raise ValueError(f"Duplicate bases: {[b.value for b in value]}")
        return value

    @model_validator(mode="after")
    def check_zero_propagation(self) -> "World":
        """An asteroid has no air or water; an empty world has no society."""
        if self.size == 0 and (self.atmosphere or self.hydrographics):
            raise ValueError("Asteroid belt worlds must have atmosphere 0 and hydrographics 0")
        if self.population == 0 and (self.population_digit or self.government or self.law):
            raise ValueError(
                "Unpopulated worlds must have population digit, government and law 0"
            )
        return self

    @property
    def is_asteroid(self) -> bool:
        return self.size == 0

    @property
    def has_naval_base(self) -> bool:
        return Base.NAVAL in self.bases

    @property
    def has_scout_base(self) -> bool:
        return Base.SCOUT in self.bases


class Star(BaseModel):
    """A star in a generated system.

    Attributes:
        position: Where the star sits in the system.
        spectral: Spectral class.
        decimal: Spectral decimal 0-9, None for brown dwarfs.
        size: Luminosity class, None for brown dwarfs.
    """

    model_config = ConfigDict(frozen=True)

    position: StarPosition
    spectral: SpectralClass
    decimal: int | None = Field(default=None, ge=0, le=9)
    size: LuminosityClass | None = None

    @property
    def is_brown_dwarf(self) -> bool:
        return self.spectral == SpectralClass.BD


class System(BaseModel):
    """A generated star system."""

    model_config = ConfigDict(frozen=True)

    stars: tuple[Star, ...] = Field(min_length=1)
    mainworld: World
    belts: int = Field(ge=0)
    gas_giants: int = Field(ge=0)

    @property
    def primary(self) -> Star:
        return self.stars[0]
