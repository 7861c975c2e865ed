"""Tests for dice roller."""

import random

import pytest
from unittest.mock import patch

from worldgen.dice.roller import DiceRoller
from worldgen.dice.types import DiceError, DiceExpression, Rollable, RollResult
from tests.factories import scripted_roller


class TestRollDice:
    """Tests for DiceRoller.roll_dice."""

    def test_roll_returns_roll_result(self, roller):
        """Test that roll_dice returns a RollResult."""
        expr = DiceExpression(num_dice=2, die_size=6)
        result = roller.roll_dice(expr)
        assert isinstance(result, RollResult)
        assert result.expression == expr

    def test_roll_individual_rolls_correct_count(self, roller):
        """Test that we get the right number of individual rolls."""
        expr = DiceExpression(num_dice=4, die_size=6)
        result = roller.roll_dice(expr)
        assert len(result.individual_rolls) == 4

    def test_roll_values_in_range(self, roller):
        """Test that rolled values are within die range."""
        expr = DiceExpression(num_dice=50, die_size=9)
        result = roller.roll_dice(expr)
        for value in result.individual_rolls:
            assert 1 <= value <= 9

    def test_roll_total_calculated_correctly(self):
        """Test that total = sum of rolls + modifier."""
        dice, _ = scripted_roller([4, 5])
        result = dice.roll_dice(DiceExpression(num_dice=2, die_size=6, modifier=-2))
        assert result.individual_rolls == (4, 5)
        assert result.total == 7
        assert result.natural == 9

    def test_zero_dice_rejected(self, roller):
        """Test that an expression without dice cannot be rolled."""
        with pytest.raises(DiceError, match="at least 1"):
            roller.roll_dice(DiceExpression(num_dice=0, die_size=6))

    def test_zero_sides_rejected(self, roller):
        """Test that a die without faces cannot be rolled."""
        with pytest.raises(DiceError, match="Die size"):
            roller.roll(1, 0)

    def test_dice_error_is_value_error(self):
        """DiceError should be catchable as ValueError."""
        assert issubclass(DiceError, ValueError)


class TestRoll:
    """Tests for the roll primitive."""

    def test_roll_sums_dice_and_modifier(self):
        """2D6-2 with faces 3 and 4 is 5."""
        dice, source = scripted_roller([3, 4])
        assert dice.roll(2, 6, -2) == 5
        assert source.calls == [(1, 6), (1, 6)]

    def test_roll_draws_one_value_per_die(self):
        """Each die advances the source once."""
        dice, source = scripted_roller([1, 2, 3, 4, 5])
        dice.roll(5, 6, 0)
        assert len(source.calls) == 5
        assert source.remaining == 0

    def test_roll_uses_die_size(self):
        """The population digit is drawn on a nine-sided die."""
        dice, source = scripted_roller([9])
        assert dice.roll(1, 9, 0) == 9
        assert source.calls == [(1, 9)]

    def test_default_modifier_is_zero(self):
        dice, _ = scripted_roller([6])
        assert dice.roll(1, 6) == 6

    def test_roll_range(self, roller):
        """2D6-2 always lands in 0-10."""
        for _ in range(200):
            assert 0 <= roller.roll(2, 6, -2) <= 10


class TestFlux:
    """Tests for the flux primitive."""

    def test_flux_is_first_die_minus_second(self):
        """Flux subtracts the second d6 from the first."""
        dice, _ = scripted_roller([2, 6])
        assert dice.flux() == -4

    def test_flux_applies_modifier(self):
        dice, _ = scripted_roller([6, 1])
        assert dice.flux(7) == 12

    def test_flux_draws_two_d6(self):
        dice, source = scripted_roller([3, 3])
        dice.flux(0)
        assert source.calls == [(1, 6), (1, 6)]

    def test_flux_range(self, roller):
        """Unmodified flux lands in -5..+5."""
        values = {roller.flux() for _ in range(500)}
        assert min(values) >= -5
        assert max(values) <= 5


class TestDeterminism:
    """Tests for seeded streams."""

    def test_same_seed_same_draws(self):
        """Two rollers with one seed draw the same sequence."""
        first = DiceRoller(seed=99)
        second = DiceRoller(seed=99)
        assert [first.roll(2, 6) for _ in range(20)] == [second.roll(2, 6) for _ in range(20)]
        assert [first.flux() for _ in range(20)] == [second.flux() for _ in range(20)]

    def test_seed_is_exposed(self):
        assert DiceRoller(seed=5).seed == 5
        assert DiceRoller().seed is None

    def test_source_overrides_seed(self):
        """An explicit source wins over a seed."""
        dice = DiceRoller(seed=5, source=random.Random(1))
        assert dice.seed is None

    @patch("worldgen.dice.roller.random.Random")
    def test_seed_builds_random_stream(self, mock_random):
        """A seed is passed to random.Random."""
        mock_random.return_value.randint.return_value = 4
        dice = DiceRoller(seed=77)
        mock_random.assert_called_once_with(77)
        assert dice.roll(1, 6) == 4


class TestRollableProtocol:
    """Tests for the Rollable capability."""

    def test_dice_roller_is_rollable(self, roller):
        assert isinstance(roller, Rollable)

    def test_object_without_flux_is_not_rollable(self):
        class OnlyRoll:
            def roll(self, count, sides, modifier=0):
                return count

        assert not isinstance(OnlyRoll(), Rollable)
