"""Console driver - banner, prompts and the round loop."""

from __future__ import annotations

import logging
import random
from typing import Callable

from petals.config.settings import Settings
from petals.engine.petals import PetalsEngine
from petals.engine.roller import make_rng

logger = logging.getLogger(__name__)

ROLL = "y"  # any other reply to "play again" quits

_RULE = "=" * 67

_RULES = """\
{rule}

Welcome to Petals Around the Rose. In this game you will be shown
the result of {count} die rolls. You will then be shown an "answer".
Your goal is to figure out why the answer is correct for the given
configuration of die rolls.

Good luck!!!

{rule}
"""


class Console:
    """Line-based prompt/response channel between the game and a player.

    Args:
        read_line: Called with a prompt, returns the reply without the
            newline. Raises EOFError when input is exhausted.
        write: Called with each block of text to show.
    """

    def __init__(
        self,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._read_line = read_line
        self._write = write

    def ask(self, prompt: str) -> str | None:
        """Prompt for a line of input. Returns None at end of input."""
        try:
            return self._read_line(prompt)
        except EOFError:
            logger.debug("End of input at prompt %r", prompt)
            return None

    def say(self, text: str = "") -> None:
        self._write(text)


def rules_banner(dice_count: int) -> str:
    """Welcome text explaining how to play."""
    return _RULES.format(rule=_RULE, count=dice_count)


def wants_another_round(reply: str | None) -> bool:
    return reply is not None and reply.strip()[:1].lower() == ROLL


def play_round(console: Console, rng: random.Random, settings: Settings) -> int:
    """Play a single round: roll, show the dice, then reveal the answer.

    Returns:
        The answer for this round
    """
    dice = PetalsEngine.roll_dice(rng, settings.dice_count, settings.roll_strategy)

    console.say(PetalsEngine.render(dice, settings.dice_per_row))
    console.ask("Press Enter to reveal answer ")

    result = PetalsEngine.calculate_score(dice)
    logger.debug("Roll %s: %d rose(s), %d petal(s)", dice.values, result.rose_count, result.points)
    console.say(f"The answer is: {result.points} -- but why???\n")
    return result.points


def run_game(
    console: Console,
    settings: Settings,
    rng: random.Random | None = None,
) -> int:
    """Play rounds until the player declines another.

    Args:
        console: Where prompts and dice are shown
        settings: Dice count, layout and randomness options
        rng: Random source; built from ``settings.rng_seed`` when omitted

    Returns:
        Number of rounds played
    """
    if rng is None:
        rng = make_rng(settings.rng_seed)

    console.say(rules_banner(settings.dice_count))
    if console.ask("Press Enter to begin") is None:
        return 0

    rounds = 0
    while True:
        play_round(console, rng, settings)
        rounds += 1
        if not wants_another_round(console.ask("Play again? y/n: ")):
            break

    logger.info("Game over after %d round(s)", rounds)
    return rounds
