"""
Petals Around the Rose - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive InvalidInput exceptions.
Nothing is ever clamped into range.
"""

from typing import Sequence

from petals.engine.base import (
    DIE_SIDES,
    ENCODED_LIMIT,
    MAX_DICE,
    EncodedRoll,
    InvalidInput,
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_dice_count(count: int, min_count: int = 1) -> int:
    """
    Validate the number of dice in play.

    Args:
        count: Number of dice
        min_count: Smallest count accepted (0 where an empty roll is meaningful)

    Returns:
        Validated count

    Raises:
        InvalidInput: If count is not in [min_count, MAX_DICE]
    """
    if not _is_int(count):
        raise InvalidInput(f"Dice count must be an integer, got {type(count).__name__}.")

    if not (min_count <= count <= MAX_DICE):
        raise InvalidInput(
            f"Dice count must be between {min_count} and {MAX_DICE}, got {count}."
        )

    return count


def validate_dice_values(values: Sequence[int], max_count: int = MAX_DICE) -> tuple[int, ...]:
    """
    Validate and normalize dice face values.

    Args:
        values: Sequence of face values to validate
        max_count: Maximum number of dice allowed

    Returns:
        Validated values as a tuple

    Raises:
        InvalidInput: If there are too many values or any face is out of range
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count > max_count:
        raise InvalidInput(f"At most {max_count} dice allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        if not _is_int(value):
            raise InvalidInput(
                f"Die value at index {i} must be an integer, got {type(value).__name__}."
            )
        if not (1 <= value <= DIE_SIDES):
            raise InvalidInput(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_SIDES}."
            )

    return values_tuple


def validate_dice_per_row(per_row: int) -> int:
    """
    Validate the layout width of the renderer.

    Raises:
        InvalidInput: If per_row is not a positive integer
    """
    if not _is_int(per_row):
        raise InvalidInput(f"Dice per row must be an integer, got {type(per_row).__name__}.")

    if per_row <= 0:
        raise InvalidInput(f"Dice per row must be positive, got {per_row}.")

    return per_row


def validate_encoded(encoded: EncodedRoll) -> EncodedRoll:
    """Validate that an encoded roll fits an unsigned 64-bit word."""
    if not _is_int(encoded):
        raise InvalidInput(f"Encoded roll must be an integer, got {type(encoded).__name__}.")

    if not (0 <= encoded < ENCODED_LIMIT):
        raise InvalidInput(f"Encoded roll must fit in 64 unsigned bits, got {encoded}.")

    return encoded


def validate_die_index(index: int) -> int:
    """Validate the position of a die inside an encoded roll."""
    if not _is_int(index):
        raise InvalidInput(f"Die index must be an integer, got {type(index).__name__}.")

    if not (0 <= index < MAX_DICE):
        raise InvalidInput(
            f"Die index {index} is out of range. Must be between 0 and {MAX_DICE - 1}."
        )

    return index
