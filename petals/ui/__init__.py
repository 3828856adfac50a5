"""
Petals Around the Rose Console UI.

Prompts, rules banner and the play-again loop around the engine.
"""

from petals.ui.console import Console, play_round, rules_banner, run_game

__all__ = ["Console", "play_round", "rules_banner", "run_game"]
