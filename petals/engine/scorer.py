"""
Petals Around the Rose - Scorer

The answer is the number of petals around the rose. Only odd faces have
a centre pip (the rose); the other pips on those faces are its petals:

    1 -> 0, 3 -> 2, 5 -> 4, even faces -> 0

Per die that is ``(face - 1) * (face % 2)``.
"""

from typing import Sequence

from petals.engine.base import EncodedRoll
from petals.engine.encoding import extract
from petals.engine.validators import validate_dice_count, validate_dice_values


def petals_for_face(face: int) -> int:
    """Petals around the rose shown by a single face."""
    return (face - 1) * (face % 2)


def score(encoded: EncodedRoll, count: int) -> int:
    """Compute the answer for the first ``count`` dice of an encoded roll.

    Raises:
        InvalidInput: If count is not in [0, 21]
    """
    validate_dice_count(count, min_count=0)
    return sum(petals_for_face(extract(encoded, i)) for i in range(count))


def score_faces(faces: Sequence[int]) -> int:
    """Compute the answer for a plain sequence of faces."""
    return sum(petals_for_face(face) for face in validate_dice_values(faces))
