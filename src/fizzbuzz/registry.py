# src/fizzbuzz/registry.py
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from fizzbuzz.evaluators import (
    DigitEvaluator,
    DivisibleEvaluator,
    DivisibleOrDigitsEvaluator,
    Evaluator,
    ExtendedDivisibleEvaluator,
)
from fizzbuzz.evaluators import combined, digit_based, divisible
from fizzbuzz.utility import UserInputError, _token


class RuleSet(Enum):
    DIVISIBLE = "divisible"
    EXTENDED_DIVISIBLE = "extended-divisible"
    DIGITS = "digits"
    DIVISIBLE_OR_DIGITS = "divisible-or-digits"

    @property
    def description(self) -> str:
        return RULES[self].description

    @property
    def category(self) -> str:
        return RULES[self].category


@dataclass(frozen=True)
class RuleInfo:
    factory: Callable[[], Evaluator]
    category: str
    description: str
    legacy_name: str                     # CamelCase alias, e.g. FizzBuzzDigits


# --------------------- Lookup table (immutable) ---------------------------

RULES: dict[RuleSet, RuleInfo] = {
    RuleSet.DIVISIBLE: RuleInfo(
        factory=DivisibleEvaluator,
        category=divisible.CATEGORY,
        description="The standard game - Fizz for multiples of 3, Buzz for multiples of 5.",
        legacy_name="FizzBuzzDivisible",
    ),
    RuleSet.EXTENDED_DIVISIBLE: RuleInfo(
        factory=ExtendedDivisibleEvaluator,
        category=divisible.CATEGORY,
        description="The standard game plus Boom (7), Bang (11) and Crash (13).",
        legacy_name="FizzBuzzBoomBangCrashDivisible",
    ),
    RuleSet.DIGITS: RuleInfo(
        factory=DigitEvaluator,
        category=digit_based.CATEGORY,
        description="Fizz for every digit 3, Buzz for every digit 5.",
        legacy_name="FizzBuzzDigits",
    ),
    RuleSet.DIVISIBLE_OR_DIGITS: RuleInfo(
        factory=lambda: DivisibleOrDigitsEvaluator(DivisibleEvaluator(), DigitEvaluator()),
        category=combined.CATEGORY,
        description="Divisibility tokens followed by digit tokens.",
        legacy_name="FizzBuzzDivisibleOrDigits",
    ),
}


def select(rule_set: RuleSet) -> Evaluator:
    """Return a freshly wired evaluator for rule_set; ValueError for anything else."""
    if not isinstance(rule_set, RuleSet):
        raise ValueError(f"{rule_set!r} is not a handled rule set")
    return RULES[rule_set].factory()


# ---------- Name lookup (user input) --------------------------------------

def _key(name: str) -> str:
    return _token(name).replace("_", "")


def _aliases() -> dict[str, RuleSet]:
    out: dict[str, RuleSet] = {}
    for rs, info in RULES.items():
        for name in (rs.value, rs.name, info.legacy_name):
            out[_key(name)] = rs
    return out


_ALIASES = _aliases()


def parse_rule_set(name: str) -> RuleSet:
    """
    Resolve user text to a RuleSet. Accepts the value ('divisible-or-digits'),
    the member name ('DIVISIBLE_OR_DIGITS') or the legacy CamelCase name
    ('FizzBuzzDivisibleOrDigits'), case-insensitively.
    """
    s = (name or "").strip()
    # separators are ignored so CamelCase legacy names match too
    rs = _ALIASES.get(_key(s))
    if rs is None:
        known = ", ".join(r.value for r in RuleSet)
        raise UserInputError(f"Unknown rule set '{s}'. Available: {known}.")
    return rs
