from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from fizzbuzz.evaluators import Evaluator
from fizzbuzz.registry import RuleSet, select
from fizzbuzz.utility import decimal_text


@dataclass(frozen=True)
class Engine:
    """
    Plays single rounds with one evaluator.
    get_text() never returns None or "": when the evaluator has no label
    the decimal text of the number is used instead, at any size.
    """
    evaluator: Evaluator

    def get_text(self, number: int) -> str:
        label = self.evaluator.evaluate(number)
        if label is None:
            return decimal_text(number)
        return label

    def play(self, numbers: Iterable[int]) -> Iterator[str]:
        """Yield one label per number, lazily."""
        for n in numbers:
            yield self.get_text(n)


def create(rule_set: RuleSet) -> Engine:
    return Engine(select(rule_set))
