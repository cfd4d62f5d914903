"""Tests for the seeded random source."""

from __future__ import annotations

import pytest

from cave_crawler.core.exceptions import GenerationError
from cave_crawler.engine.dice import DiceRoller


class TestDiceRoller:
    """Tests for the DiceRoller class."""

    def test_same_seed_same_sequence(self) -> None:
        first = DiceRoller(seed=7)
        second = DiceRoller(seed=7)

        assert [first.roll_range(0, 1000) for _ in range(20)] == [
            second.roll_range(0, 1000) for _ in range(20)
        ]

    def test_seed_property(self) -> None:
        assert DiceRoller(seed=9).seed == 9
        assert DiceRoller().seed is None

    def test_roll_range_is_half_open(self, dice_roller: DiceRoller) -> None:
        rolls = {dice_roller.roll_range(1, 4) for _ in range(200)}
        assert rolls == {1, 2, 3}

    def test_single_value_range(self, dice_roller: DiceRoller) -> None:
        assert dice_roller.roll_range(5, 6) == 5

    @pytest.mark.parametrize(("low", "high"), [(3, 3), (5, 2)])
    def test_empty_range(self, dice_roller: DiceRoller, low: int, high: int) -> None:
        with pytest.raises(GenerationError) as exc_info:
            dice_roller.roll_range(low, high)

        assert exc_info.value.details == {"low": low, "high": high}

    def test_roll_float_bounds(self, dice_roller: DiceRoller) -> None:
        for _ in range(200):
            assert 0.0 <= dice_roller.roll_float(0.0, 500.0) < 500.0

    def test_roll_float_empty(self, dice_roller: DiceRoller) -> None:
        with pytest.raises(GenerationError):
            dice_roller.roll_float(1.0, 1.0)


class TestChances:
    """Tests for probability rolls."""

    def test_certain_and_impossible(self, dice_roller: DiceRoller) -> None:
        assert all(dice_roller.roll_chance(1.0) for _ in range(100))
        assert not any(dice_roller.roll_chance(0.0) for _ in range(100))

    def test_out_of_range_is_clamped(self, dice_roller: DiceRoller) -> None:
        assert dice_roller.roll_chance(7.5)
        assert not dice_roller.roll_chance(-2.0)

    def test_coin_flip_both_sides(self, dice_roller: DiceRoller) -> None:
        flips = {dice_roller.coin_flip() for _ in range(100)}
        assert flips == {True, False}


class TestSelection:
    """Tests for choose, sample and shuffle."""

    def test_choose(self, dice_roller: DiceRoller) -> None:
        assert dice_roller.choose(["only"]) == "only"

    def test_choose_empty(self, dice_roller: DiceRoller) -> None:
        with pytest.raises(GenerationError):
            dice_roller.choose([])

    def test_sample_distinct(self, dice_roller: DiceRoller) -> None:
        picked = dice_roller.sample(["a", "b", "c", "d"], 3)

        assert len(picked) == 3
        assert len(set(picked)) == 3

    def test_sample_capped_at_population(self, dice_roller: DiceRoller) -> None:
        assert sorted(dice_roller.sample(["a", "b"], 4)) == ["a", "b"]

    def test_shuffle_in_place(self, dice_roller: DiceRoller) -> None:
        items = list(range(10))
        dice_roller.shuffle(items)

        assert sorted(items) == list(range(10))
