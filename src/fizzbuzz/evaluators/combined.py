# -----------------------------------------------------------------------------
#  combined.py
#  Divisible-or-digits rule set
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass

from fizzbuzz.evaluators.base import join_tokens
from fizzbuzz.evaluators.digit_based import DigitEvaluator
from fizzbuzz.evaluators.divisible import DivisibleEvaluator

CATEGORY = "Combined"


@dataclass(frozen=True)
class DivisibleOrDigitsEvaluator:
    divisible: DivisibleEvaluator
    digit: DigitEvaluator

    def evaluate(self, number: int) -> str | None:
        # divisibility tokens first: 30 -> Fizz+Buzz then Fizz for the '3'
        parts = [self.divisible.evaluate(number), self.digit.evaluate(number)]
        return join_tokens([p for p in parts if p is not None])
