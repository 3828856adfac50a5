"""Petals Around the Rose - Console Application Entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from petals.config.logging import configure_logging
from petals.config.settings import Settings, get_settings
from petals.engine.base import MAX_DICE, RollStrategy
from petals.ui.console import Console, run_game

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="petals",
        description="Petals Around the Rose: work out why the answer is what it is.",
    )
    parser.add_argument("--dice", dest="dice_count", type=int, default=None,
                        help=f"Number of dice to roll (1-{MAX_DICE}, default 5)")
    parser.add_argument("--per-row", dest="dice_per_row", type=int, default=None,
                        help="Dice drawn per console row (default 5)")
    parser.add_argument("--seed", dest="rng_seed", type=int, default=None,
                        help="Seed for a reproducible game (default: current time)")
    parser.add_argument("--strategy", dest="roll_strategy", default=None,
                        choices=[s.value for s in RollStrategy],
                        help="How dice are drawn from the random source")
    parser.add_argument("--log-level", dest="log_level", default=None,
                        help="Logging level written to stderr (default WARNING)")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with any command line overrides applied."""
    overrides = {key: value for key, value in vars(args).items() if value is not None}
    if not overrides:
        return get_settings()
    return Settings(**overrides)


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)
        configure_logging(settings.log_level)
    except (ValidationError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logger.info(
        "Starting game: %d dice, %d per row, %s strategy",
        settings.dice_count, settings.dice_per_row, settings.roll_strategy.value,
    )

    try:
        run_game(console or Console(), settings)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    except Exception:
        logger.exception("Game aborted")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
