"""
Petals Around the Rose - Engine Tests

Tests for the PetalsEngine facade.
"""

import random

import pytest
from petals.engine.base import DiceRoll, InvalidInput, RollStrategy, ScoringResult
from petals.engine.encoding import encode
from petals.engine.petals import PetalsEngine
from petals.engine.renderer import render


# === Roll Dice ===


class TestRollDice:
    """Tests for PetalsEngine.roll_dice()."""

    def test_returns_dice_roll(self):
        roll = PetalsEngine.roll_dice(random.Random(1))
        assert isinstance(roll, DiceRoll)

    def test_default_five_dice(self):
        assert len(PetalsEngine.roll_dice(random.Random(1))) == 5

    def test_custom_count(self):
        assert len(PetalsEngine.roll_dice(random.Random(1), num_dice=12)) == 12

    def test_scripted_values(self, scripted_rng):
        roll = PetalsEngine.roll_dice(scripted_rng(draws=[2, 4, 2, 4, 0]))
        assert roll.values == (3, 5, 3, 5, 1)

    def test_single_draw(self, scripted_rng):
        rng = scripted_rng(words=[7 | (2 << 3)])
        roll = PetalsEngine.roll_dice(rng, num_dice=2, strategy=RollStrategy.SINGLE_DRAW)
        assert roll.values == (6, 3)

    def test_too_many_dice(self):
        with pytest.raises(InvalidInput):
            PetalsEngine.roll_dice(random.Random(1), num_dice=22)


# === Calculate Score ===


class TestCalculateScore:
    """Tests for PetalsEngine.calculate_score()."""

    def test_returns_scoring_result(self):
        assert isinstance(PetalsEngine.calculate_score((1, 2)), ScoringResult)

    def test_known_rolls(self, petals_rolls):
        for name, (faces, expected) in petals_rolls.items():
            assert PetalsEngine.calculate_score(faces).points == expected, name

    def test_breakdown_lists_roses(self):
        result = PetalsEngine.calculate_score((3, 2, 1, 5))
        assert [(b.index, b.face, b.petals) for b in result.breakdown] == [
            (0, 3, 2), (2, 1, 0), (3, 5, 4),
        ]
        assert result.rose_count == 3
        assert result.points == 6

    def test_no_roses(self):
        result = PetalsEngine.calculate_score((2, 4, 6))
        assert result.breakdown == ()
        assert result.rose_count == 0
        assert result.points == 0

    def test_accepts_dice_roll_object(self):
        result = PetalsEngine.calculate_score(DiceRoll(values=(5, 5)))
        assert result.points == 8

    def test_rejects_bad_face(self):
        with pytest.raises(InvalidInput):
            PetalsEngine.calculate_score((3, 9))


# === Render ===


class TestRender:
    """Tests for PetalsEngine.render()."""

    def test_matches_encoded_render(self):
        faces = (6, 5, 4, 3, 2, 1)
        assert PetalsEngine.render(faces) == render(encode(faces), 6, 5)

    def test_dice_roll_and_tuple_agree(self):
        faces = (1, 3, 5)
        assert PetalsEngine.render(DiceRoll(values=faces), 2) == PetalsEngine.render(faces, 2)

    def test_empty_roll_rejected(self):
        with pytest.raises(InvalidInput):
            PetalsEngine.render(())
