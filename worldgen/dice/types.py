"""Dice system type definitions.

Immutable dataclasses for dice expressions and roll results.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class DiceError(ValueError):
    """Error raised for a dice definition that cannot be rolled."""

    pass


@runtime_checkable
class Rollable(Protocol):
    """A source of dice draws.

    World generation is expressed only in terms of these two operations, so any
    object providing them (a seeded roller, a scripted test source) can drive
    the generators. Every die drawn advances the source exactly once; the
    order of calls is part of the contract.
    """

    def roll(self, count: int, sides: int, modifier: int = 0) -> int:
        """Sum of ``count`` dice with ``sides`` faces, plus ``modifier``."""
        ...

    def flux(self, modifier: int = 0) -> int:
        """One d6 minus another d6, plus ``modifier`` (range -5..+5 shifted)."""
        ...


@dataclass(frozen=True)
class DiceExpression:
    """A dice expression like 2D6-2.

    Attributes:
        num_dice: Number of dice to roll.
        die_size: Size of each die (e.g., 6 for d6, 9 for the population digit).
        modifier: Flat modifier to add to the total.
    """

    num_dice: int
    die_size: int
    modifier: int = 0

    def __str__(self) -> str:
        if self.modifier:
            return f"{self.num_dice}D{self.die_size}{self.modifier:+d}"
        return f"{self.num_dice}D{self.die_size}"


@dataclass(frozen=True)
class RollResult:
    """Result of rolling dice.

    Attributes:
        expression: The dice expression that was rolled.
        individual_rolls: Tuple of each die's result.
        modifier: The modifier applied.
        total: Sum of rolls plus modifier.
    """

    expression: DiceExpression
    individual_rolls: tuple[int, ...]
    modifier: int
    total: int

    @property
    def natural(self) -> int:
        """Sum of the faces before the modifier is applied."""
        return sum(self.individual_rolls)
