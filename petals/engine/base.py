"""
Petals Around the Rose - Game Engine Base Classes

This module defines the foundational data structures, constants and
exceptions used throughout the game engine. All classes are immutable
(frozen dataclasses) so a roll can be handed to the renderer and the
scorer without either of them being able to change it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


BITS_PER_DIE = 3
DIE_MASK = (1 << BITS_PER_DIE) - 1
MAX_DICE = 21            # 21 dice x 3 bits = 63 bits
DIE_SIDES = 6
DEFAULT_DICE_COUNT = 5
DEFAULT_DICE_PER_ROW = 5
ENCODED_LIMIT = 1 << 64

# Packed die results, BITS_PER_DIE bits per die, least significant die first.
EncodedRoll = int


class PetalsError(Exception):
    """Base class for all game engine errors."""


class InvalidInput(PetalsError, ValueError):
    """A die count, face value, index or layout width is out of range."""


class RandomSourceError(PetalsError, RuntimeError):
    """The random source could not supply usable values."""


class RollStrategy(Enum):
    """How the roller turns randomness into an encoded roll."""
    INDEPENDENT = "independent"   # one uniform draw per die
    SINGLE_DRAW = "single_draw"   # one wide word, 3-bit windows mod 6


@dataclass(frozen=True)
class ScoringBreakdown:
    """
    Petals contributed by a single die.

    Attributes:
        index: Position of the die in the roll
        face: Face value shown
        petals: Petals around the rose on this face
    """
    index: int
    face: int
    petals: int


@dataclass(frozen=True)
class ScoringResult:
    """
    Complete scoring result for a roll.

    Attributes:
        points: The answer (total petals)
        breakdown: One entry per die showing a rose
        rose_count: Number of dice with a centre pip
    """
    points: int
    breakdown: tuple[ScoringBreakdown, ...]
    rose_count: int

    def __str__(self) -> str:
        return f"The answer is: {self.points}"


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a roll of six-sided dice.

    The tuple of faces is the working model; ``encoded`` gives the packed
    form used when a roll is passed around as a single integer.

    Attributes:
        values: Tuple of dice face values
    """
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate dice values are within valid range."""
        from petals.engine.validators import validate_dice_values

        validate_dice_values(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    @property
    def encoded(self) -> EncodedRoll:
        """Packed form of this roll."""
        from petals.engine.encoding import encode

        return encode(self.values)

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceRoll":
        """Create a DiceRoll from any sequence type."""
        return cls(values=tuple(values))

    @classmethod
    def from_encoded(cls, encoded: EncodedRoll, count: int) -> "DiceRoll":
        """Unpack the first ``count`` dice of an encoded roll."""
        from petals.engine.encoding import decode

        return cls(values=decode(encoded, count))
