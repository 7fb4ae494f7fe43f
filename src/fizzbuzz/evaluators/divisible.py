# -----------------------------------------------------------------------------
#  divisible.py
#  Divisibility based rule sets
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field

from fizzbuzz.evaluators.base import BANG, BOOM, BUZZ, CRASH, FIZZ, divisor_tokens, join_tokens

CATEGORY = "Divisibility"

# (divisor, token), applied in this order
STANDARD_DIVISORS: tuple[tuple[int, str], ...] = ((3, FIZZ), (5, BUZZ))
EXTRA_DIVISORS: tuple[tuple[int, str], ...] = ((7, BOOM), (11, BANG), (13, CRASH))


@dataclass(frozen=True)
class DivisibleEvaluator:
    """The standard game: Fizz for multiples of 3, Buzz for multiples of 5."""

    def tokens(self, number: int) -> list[str]:
        return divisor_tokens(number, STANDARD_DIVISORS)

    def evaluate(self, number: int) -> str | None:
        return join_tokens(self.tokens(number))


@dataclass(frozen=True)
class ExtendedDivisibleEvaluator:
    """
    The standard game followed by Boom (7), Bang (11) and Crash (13).
    The standard tokens come from the held DivisibleEvaluator and always
    precede the extra ones, e.g. 15015 -> FizzBuzzBoomBangCrash.
    """
    base: DivisibleEvaluator = field(default_factory=DivisibleEvaluator)

    def evaluate(self, number: int) -> str | None:
        tokens = self.base.tokens(number)
        tokens += divisor_tokens(number, EXTRA_DIVISORS)
        return join_tokens(tokens)
