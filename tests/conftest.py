"""
Petals Around the Rose - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import pytest


class ScriptedRandom:
    """Random source that replays fixed values.

    ``draws`` feed ``randrange`` (one per die), ``words`` feed ``getrandbits``.
    Running out of values raises StopIteration, which a test will notice.
    """

    def __init__(self, draws=(), words=()):
        self._draws = iter(draws)
        self._words = iter(words)
        self.calls = 0

    def randrange(self, stop):
        self.calls += 1
        return next(self._draws)

    def getrandbits(self, k):
        self.calls += 1
        return next(self._words)


@pytest.fixture
def scripted_rng():
    """Factory for random sources with a fixed sequence of draws."""
    return ScriptedRandom


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def petals_rolls() -> dict[str, tuple[tuple[int, ...], int]]:
    """
    Roll patterns with their expected answers.

    Returns:
        Dict mapping name to (dice_values, expected_petals)
    """
    return {
        "all_twos": ((2, 2, 2, 2, 2), 0),
        "all_sixes": ((6, 6, 6, 6, 6), 0),
        "all_fives": ((5, 5, 5, 5, 5), 20),
        "all_threes": ((3, 3, 3, 3, 3), 10),
        "all_ones": ((1, 1, 1, 1, 1), 0),
        "mixed_roses": ((3, 5, 3, 5, 1), 12),
        "one_of_each": ((1, 2, 3, 4, 5), 6),
        "straight_high": ((2, 3, 4, 5, 6), 6),
        "single_five": ((5,), 4),
        "empty": ((), 0),
    }


# =============================================================================
# CONSOLE FIXTURES
# =============================================================================

class ScriptedConsoleIO:
    """Feeds scripted replies to a Console and records everything shown."""

    def __init__(self, replies=()):
        self._replies = list(replies)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read_line(self, prompt):
        self.prompts.append(prompt)
        if not self._replies:
            raise EOFError
        reply = self._replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    def write(self, text):
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def console_io():
    """Factory for scripted console input/output."""
    return ScriptedConsoleIO


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Keep the developer's PETALS_* variables and cached settings out of tests."""
    from petals.config.settings import get_settings

    for name in ("DICE_COUNT", "DICE_PER_ROW", "RNG_SEED", "ROLL_STRATEGY", "LOG_LEVEL"):
        monkeypatch.delenv(f"PETALS_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
