# -----------------------------------------------------------------------------
#  base.py
#  Evaluator protocol and token helpers shared by all rule sets
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Protocol, runtime_checkable

FIZZ = "Fizz"
BUZZ = "Buzz"
BOOM = "Boom"
BANG = "Bang"
CRASH = "Crash"


@runtime_checkable
class Evaluator(Protocol):
    """Maps a number to a label, or None when the rule does not apply."""

    def evaluate(self, number: int) -> str | None: ...


def divisor_tokens(number: int, table: tuple[tuple[int, str], ...]) -> list[str]:
    """Tokens of `table` whose divisor divides number, in table order."""
    return [tok for d, tok in table if number % d == 0]


def join_tokens(tokens: list[str]) -> str | None:
    """Concatenate tokens; None when the buffer is empty (never "")."""
    if not tokens:
        return None
    return "".join(tokens)
