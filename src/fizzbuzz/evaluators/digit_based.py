# -----------------------------------------------------------------------------
#  digit_based.py
#  Digit based rule set
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass

from fizzbuzz.evaluators.base import BUZZ, FIZZ, join_tokens
from fizzbuzz.utility import digits

CATEGORY = "Digit-based"

_DIGIT_TOKENS: dict[int, str] = {3: FIZZ, 5: BUZZ}


@dataclass(frozen=True)
class DigitEvaluator:
    """
    One token per occurrence of a 3 (Fizz) or 5 (Buzz), read left to right:
    532 -> BuzzFizz, 325395 -> FizzBuzzFizzBuzz.
    """

    def tokens(self, number: int) -> list[str]:
        return [_DIGIT_TOKENS[d] for d in digits(number) if d in _DIGIT_TOKENS]

    def evaluate(self, number: int) -> str | None:
        return join_tokens(self.tokens(number))
