"""Core dice rolling engine.

Provides the seeded ``DiceRoller`` that implements the ``Rollable`` capability
consumed by the world and star generators.

Two primitives are exposed:
- roll: sum of N dice plus a modifier (2D6-2, 1D6+9, 1D9 ...)
- flux: 1D6 - 1D6 plus a modifier, a symmetric variance draw
"""

import random
from typing import Protocol

from worldgen.dice.types import DiceError, DiceExpression, RollResult


class RandomSource(Protocol):
    """The part of ``random.Random`` the roller relies on."""

    def randint(self, a: int, b: int) -> int: ...


# Flux is always the difference of two six-sided dice
FLUX_DIE = DiceExpression(num_dice=1, die_size=6, modifier=0)


class DiceRoller:
    """Rolls dice from a private random stream.

    A roller owns its stream: two rollers built from the same seed produce the
    same draws in the same order. Sharing one roller between threads needs
    external serialization, since draw order is observable in the results.

    Examples:
        >>> roller = DiceRoller(seed=42)
        >>> 0 <= roller.roll(2, 6, -2) <= 10
        True
        >>> -5 <= roller.flux() <= 5
        True
    """

    def __init__(
        self,
        seed: int | None = None,
        source: RandomSource | None = None,
    ):
        """Initialize the roller.

        Args:
            seed: Seed for a fresh ``random.Random`` stream. Ignored when
                ``source`` is given.
            source: Existing object exposing ``randint(a, b)``, used as is.
        """
        self.seed = seed if source is None else None
        self._source: RandomSource = source if source is not None else random.Random(seed)

    def roll_dice(self, expression: DiceExpression) -> RollResult:
        """Roll dice according to the expression.

        Args:
            expression: The dice expression to roll.

        Returns:
            RollResult with individual rolls and total.

        Raises:
            DiceError: If the expression has no dice or no faces.
        """
        if expression.num_dice < 1:
            raise DiceError(f"Number of dice must be at least 1, got {expression.num_dice}")
        if expression.die_size < 1:
            raise DiceError(f"Die size must be at least 1, got {expression.die_size}")

        rolls = tuple(
            self._source.randint(1, expression.die_size) for _ in range(expression.num_dice)
        )
        total = sum(rolls) + expression.modifier

        return RollResult(
            expression=expression,
            individual_rolls=rolls,
            modifier=expression.modifier,
            total=total,
        )

    def roll(self, count: int, sides: int, modifier: int = 0) -> int:
        """Roll ``count`` dice of ``sides`` faces and add ``modifier``."""
        expression = DiceExpression(num_dice=count, die_size=sides, modifier=modifier)
        return self.roll_dice(expression).total

    def flux(self, modifier: int = 0) -> int:
        """Roll 1D6 - 1D6 and add ``modifier``.

        The first die is drawn before the second.
        """
        first = self.roll_dice(FLUX_DIE).total
        second = self.roll_dice(FLUX_DIE).total
        return first - second + modifier
