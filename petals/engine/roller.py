"""
Petals Around the Rose - Roller

Produces a fresh encoded roll from an injected random source.

Two strategies are available:

- ``RollStrategy.INDEPENDENT`` draws one uniform value in [0, 5] per die.
  Every die is independent and every face is equally likely.
- ``RollStrategy.SINGLE_DRAW`` draws one 63-bit random word and reads die
  ``i`` as ``((word >> 3i) % 6) + 1``, with no mask, which is how the
  classic console game rolled its dice. Each die depends on every bit above
  its own window, so neighbouring dice are correlated: die ``i`` modulo 3
  is fixed by its own three bits and die ``i + 1``. Die 20 sees only the
  top three bits and shows faces 1 and 2 twice as often as the others.
"""

import logging
import random
import time

from petals.engine.base import (
    BITS_PER_DIE,
    DIE_SIDES,
    MAX_DICE,
    EncodedRoll,
    RandomSourceError,
    RollStrategy,
)
from petals.engine.encoding import encode
from petals.engine.validators import validate_dice_count

logger = logging.getLogger(__name__)

WORD_BITS = BITS_PER_DIE * MAX_DICE


def make_rng(seed: int | None = None) -> random.Random:
    """Build the random source for a game session.

    Args:
        seed: Fixed seed for reproducible games. When None the generator is
            seeded from the current time.
    """
    if seed is None:
        seed = time.time_ns()
    logger.debug("Seeding random source with %d", seed)
    return random.Random(seed)


def _draw_independent(count: int, rng: random.Random) -> EncodedRoll:
    faces = []
    for _ in range(count):
        value = rng.randrange(DIE_SIDES)
        if not isinstance(value, int) or not (0 <= value < DIE_SIDES):
            raise RandomSourceError(
                f"Random source returned {value!r}, expected an integer in [0, {DIE_SIDES - 1}]."
            )
        faces.append(value + 1)
    return encode(faces)


def _draw_single(count: int, rng: random.Random) -> EncodedRoll:
    word = rng.getrandbits(WORD_BITS)
    if not isinstance(word, int) or not (0 <= word < (1 << WORD_BITS)):
        raise RandomSourceError(
            f"Random source returned {word!r}, expected a {WORD_BITS}-bit unsigned integer."
        )
    faces = [((word >> (BITS_PER_DIE * i)) % DIE_SIDES) + 1 for i in range(count)]
    return encode(faces)


def roll(
    count: int,
    rng: random.Random,
    strategy: RollStrategy = RollStrategy.INDEPENDENT,
) -> EncodedRoll:
    """Roll ``count`` six-sided dice.

    Args:
        count: Number of dice (0-21)
        rng: Random source with the ``random.Random`` interface
        strategy: How randomness is mapped onto dice

    Returns:
        A new encoded roll

    Raises:
        InvalidInput: If count is out of range
        RandomSourceError: If the random source returns unusable values
    """
    validate_dice_count(count, min_count=0)
    if count == 0:
        return 0

    if strategy is RollStrategy.SINGLE_DRAW:
        encoded = _draw_single(count, rng)
    else:
        encoded = _draw_independent(count, rng)

    logger.debug("Rolled %d dice (%s): %#x", count, strategy.value, encoded)
    return encoded
