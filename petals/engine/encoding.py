"""
Petals Around the Rose - Roll Encoding

Packs die faces into a single integer, three bits per die, and reads
them back. Die ``i`` lives in bits ``[3i, 3i + 3)``. Its field is read
modulo 6, so any bit pattern decodes to valid faces: 6 and 7 read as
faces 1 and 2. Higher dice never leak into lower ones.
"""

from typing import Sequence

from petals.engine.base import BITS_PER_DIE, DIE_MASK, DIE_SIDES, EncodedRoll
from petals.engine.validators import (
    validate_dice_count,
    validate_dice_values,
    validate_die_index,
    validate_encoded,
)


def encode(faces: Sequence[int]) -> EncodedRoll:
    """Pack a sequence of faces (1-6) into an encoded roll.

    Raises:
        InvalidInput: If a face is out of range or there are more than 21
    """
    encoded = 0
    for i, face in enumerate(validate_dice_values(faces)):
        encoded |= ((face - 1) % DIE_SIDES) << (BITS_PER_DIE * i)
    return encoded


def extract(encoded: EncodedRoll, index: int) -> int:
    """Read the face of die ``index`` from an encoded roll.

    Indices past the active die count still decode; unused zero bits read
    as a 1.
    """
    validate_encoded(encoded)
    validate_die_index(index)
    return (((encoded >> (BITS_PER_DIE * index)) & DIE_MASK) % DIE_SIDES) + 1


def decode(encoded: EncodedRoll, count: int) -> tuple[int, ...]:
    """Unpack the first ``count`` faces of an encoded roll."""
    validate_dice_count(count, min_count=0)
    return tuple(extract(encoded, i) for i in range(count))
