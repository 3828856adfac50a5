"""
Petals Around the Rose - Dice Renderer

Draws dice as ASCII art, side by side in rows. The puzzle is all about
pattern recognition, so each die shows its pips on a 3x3 grid with the
numeric face printed underneath:

     -------      -------
    | *     |    | *   * |
    |   *   |    |   *   |
    |     * |    | *   * |
     -------      -------
        3            5
"""

from typing import Iterator

from petals.engine.base import DEFAULT_DICE_PER_ROW, EncodedRoll
from petals.engine.encoding import decode
from petals.engine.validators import validate_dice_count, validate_dice_per_row


PIP = "*"
BLANK = " "
CELL_GAP = "    "
BORDER = " -------" + BLANK + CELL_GAP

# Filled positions on the 3x3 grid for each face.
PIP_LAYOUT: dict[int, frozenset[str]] = {
    1: frozenset({"center"}),
    2: frozenset({"top_left", "bottom_right"}),
    3: frozenset({"top_left", "center", "bottom_right"}),
    4: frozenset({"top_left", "top_right", "bottom_left", "bottom_right"}),
    5: frozenset({"top_left", "top_right", "center", "bottom_left", "bottom_right"}),
    6: frozenset({
        "top_left", "top_right",
        "middle_left", "middle_right",
        "bottom_left", "bottom_right",
    }),
}


def _mark(face: int, position: str) -> str:
    return PIP if position in PIP_LAYOUT[face] else BLANK


def render_face(face: int) -> tuple[str, ...]:
    """Render a single die as five art lines, each one cell wide.

    Args:
        face: Face value (1-6)

    Returns:
        Top border, three pip lines and bottom border
    """
    top = f"| {_mark(face, 'top_left')}   {_mark(face, 'top_right')} |{CELL_GAP}"
    middle = (
        f"| {_mark(face, 'middle_left')} {_mark(face, 'center')} "
        f"{_mark(face, 'middle_right')} |{CELL_GAP}"
    )
    bottom = f"| {_mark(face, 'bottom_left')}   {_mark(face, 'bottom_right')} |{CELL_GAP}"
    return (BORDER, top, middle, bottom, BORDER)


def _value_cell(face: int) -> str:
    return f"{face:5d}" + BLANK * (len(BORDER) - 5)


def render_lines(
    encoded: EncodedRoll,
    count: int,
    dice_per_row: int = DEFAULT_DICE_PER_ROW,
) -> Iterator[str]:
    """Lazily yield the output lines for ``count`` dice.

    Each row of at most ``dice_per_row`` dice starts with a blank line,
    followed by the five art lines, the face values, and a closing blank
    line. Trailing whitespace is stripped.

    Raises:
        InvalidInput: If count is not in [1, 21] or dice_per_row < 1
    """
    validate_dice_count(count)
    validate_dice_per_row(dice_per_row)
    faces = decode(encoded, count)

    for start in range(0, count, dice_per_row):
        group = faces[start:start + dice_per_row]
        art = [render_face(face) for face in group]

        yield ""
        for cells in zip(*art):
            yield "".join(cells).rstrip()
        yield "".join(_value_cell(face) for face in group).rstrip()
        yield ""


def render(
    encoded: EncodedRoll,
    count: int,
    dice_per_row: int = DEFAULT_DICE_PER_ROW,
) -> str:
    """Render ``count`` dice as a single multi-line string."""
    return "\n".join(render_lines(encoded, count, dice_per_row))
