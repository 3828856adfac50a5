"""
Petals Around the Rose - Game Engine

Roll a handful of dice, show them, and announce how many petals sit
around the roses. Players watch the answers and try to work out the rule.

All methods are stateless class methods operating on immutable data.
"""

import random

from petals.engine.base import (
    DEFAULT_DICE_COUNT,
    DEFAULT_DICE_PER_ROW,
    DiceRoll,
    RollStrategy,
    ScoringBreakdown,
    ScoringResult,
)
from petals.engine.renderer import render
from petals.engine.roller import roll
from petals.engine.scorer import petals_for_face, score


class PetalsEngine:
    """
    Stateless engine for Petals Around the Rose.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    NUM_DICE = DEFAULT_DICE_COUNT
    DICE_PER_ROW = DEFAULT_DICE_PER_ROW

    @classmethod
    def roll_dice(
        cls,
        rng: random.Random,
        num_dice: int | None = None,
        strategy: RollStrategy = RollStrategy.INDEPENDENT,
    ) -> DiceRoll:
        """Roll a fresh set of dice.

        Args:
            rng: Random source to draw from
            num_dice: Number of dice (defaults to NUM_DICE)
            strategy: How randomness is mapped onto dice

        Returns:
            DiceRoll with one value (1-6) per die
        """
        count = cls.NUM_DICE if num_dice is None else num_dice
        return DiceRoll.from_encoded(roll(count, rng, strategy), count)

    @classmethod
    def render(
        cls,
        dice: DiceRoll | tuple[int, ...],
        dice_per_row: int | None = None,
    ) -> str:
        """Draw the dice as ASCII art.

        Args:
            dice: A DiceRoll or tuple of dice values
            dice_per_row: Layout width (defaults to DICE_PER_ROW)
        """
        if not isinstance(dice, DiceRoll):
            dice = DiceRoll.from_sequence(dice)
        per_row = cls.DICE_PER_ROW if dice_per_row is None else dice_per_row
        return render(dice.encoded, len(dice), per_row)

    @classmethod
    def calculate_score(cls, dice: DiceRoll | tuple[int, ...]) -> ScoringResult:
        """Count the petals around the roses.

        Args:
            dice: A DiceRoll or tuple of dice values

        Returns:
            ScoringResult with the answer and a per-die breakdown
        """
        if not isinstance(dice, DiceRoll):
            dice = DiceRoll.from_sequence(dice)

        breakdown = tuple(
            ScoringBreakdown(index=i, face=face, petals=petals_for_face(face))
            for i, face in enumerate(dice.values)
            if face % 2
        )
        return ScoringResult(
            points=score(dice.encoded, len(dice)),
            breakdown=breakdown,
            rose_count=len(breakdown),
        )
