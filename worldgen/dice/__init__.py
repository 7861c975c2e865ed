"""Dice system for world generation.

Provides the Rollable capability and a seeded roller.

Usage:
    >>> from worldgen.dice import DiceRoller
    >>> roller = DiceRoller(seed=7)
    >>> size = roller.roll(2, 6, -2)
    >>> atmosphere = roller.flux(size)
"""

# Types
from worldgen.dice.types import (
    DiceError,
    DiceExpression,
    Rollable,
    RollResult,
)

# Roller
from worldgen.dice.roller import DiceRoller

__all__ = [
    # Types
    "DiceError",
    "DiceExpression",
    "Rollable",
    "RollResult",
    # Roller
    "DiceRoller",
]
