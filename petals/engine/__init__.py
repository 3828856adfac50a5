"""
Petals Around the Rose Game Engine.

Pure Python game logic with zero console dependencies.
Handles dice encoding, rolling, rendering and scoring.
"""

from petals.engine.base import (
    MAX_DICE,
    DiceRoll,
    EncodedRoll,
    InvalidInput,
    PetalsError,
    RandomSourceError,
    RollStrategy,
    ScoringBreakdown,
    ScoringResult,
)
from petals.engine.encoding import decode, encode, extract
from petals.engine.petals import PetalsEngine
from petals.engine.renderer import render, render_lines
from petals.engine.roller import make_rng, roll
from petals.engine.scorer import score

__all__ = [
    # Data Classes
    "DiceRoll",
    "EncodedRoll",
    "ScoringBreakdown",
    "ScoringResult",
    # Enums and constants
    "MAX_DICE",
    "RollStrategy",
    # Errors
    "InvalidInput",
    "PetalsError",
    "RandomSourceError",
    # Core operations
    "decode",
    "encode",
    "extract",
    "make_rng",
    "render",
    "render_lines",
    "roll",
    "score",
    # Engine
    "PetalsEngine",
]
