# tests/test_fizzbuzz.py
"""
Tests for the rule set evaluators, the selector and the engine.

Run: pytest -v
"""

from __future__ import annotations

import dataclasses
import itertools
import threading
from collections.abc import Iterator

import pytest

from fizzbuzz import (
    DigitEvaluator,
    DivisibleEvaluator,
    DivisibleOrDigitsEvaluator,
    Engine,
    Evaluator,
    ExtendedDivisibleEvaluator,
    RuleSet,
    UserInputError,
    create,
    digits,
    parse_rule_set,
    select,
)
from fizzbuzz.utility import decimal_text

# ---------- fixtures ----------------------------------------------------------


@pytest.fixture(scope="module")
def combined():
    return DivisibleOrDigitsEvaluator(DivisibleEvaluator(), DigitEvaluator())


@pytest.fixture(params=list(RuleSet), ids=lambda rs: rs.value)
def engine(request):
    return create(request.param)


# ---------- digit extraction --------------------------------------------------

DIGIT_CASES = [
    (0,      [0]),
    (7,      [7]),
    (532,    [5, 3, 2]),
    (325395, [3, 2, 5, 3, 9, 5]),
    (1000,   [1, 0, 0, 0]),
    (-53,    [5, 3]),
]


@pytest.mark.parametrize("n,expected", DIGIT_CASES)
def test_digits(n, expected):
    assert digits(n) == expected


# ---------- evaluators --------------------------------------------------------

DIVISIBLE_CASES = [
    (12, "Fizz"),
    (10, "Buzz"),
    (15, "FizzBuzz"),
    (14, None),
]

EXTENDED_CASES = [
    (28,    "Boom"),
    (33,    "FizzBang"),
    (65,    "BuzzCrash"),
    (64,    None),
    (15,    "FizzBuzz"),
    (15015, "FizzBuzzBoomBangCrash"),   # 3*5*7*11*13
    (1001,  "BoomBangCrash"),           # 7*11*13
]

DIGIT_EVAL_CASES = [
    (13,     "Fizz"),
    (51,     "Buzz"),
    (365,    "FizzBuzz"),
    (532,    "BuzzFizz"),
    (325395, "FizzBuzzFizzBuzz"),
    (91,     None),
    (0,      None),
]

COMBINED_CASES = [
    (12,    "Fizz"),
    (10,    "Buzz"),
    (13,    "Fizz"),
    (53,    "BuzzFizz"),
    (30,    "FizzBuzzFizz"),
    (51435, "FizzBuzzBuzzFizzBuzz"),
    (92,    None),
]


@pytest.mark.parametrize("n,expected", DIVISIBLE_CASES)
def test_divisible_evaluator(n, expected):
    assert DivisibleEvaluator().evaluate(n) == expected


@pytest.mark.parametrize("n,expected", EXTENDED_CASES)
def test_extended_divisible_evaluator(n, expected):
    assert ExtendedDivisibleEvaluator().evaluate(n) == expected


@pytest.mark.parametrize("n,expected", DIGIT_EVAL_CASES)
def test_digit_evaluator(n, expected):
    assert DigitEvaluator().evaluate(n) == expected


@pytest.mark.parametrize("n,expected", COMBINED_CASES)
def test_divisible_or_digits_evaluator(combined, n, expected):
    assert combined.evaluate(n) == expected


def test_no_match_is_none_not_empty_string():
    for ev in (DivisibleEvaluator(), ExtendedDivisibleEvaluator(), DigitEvaluator()):
        assert ev.evaluate(1) is None


def test_extended_reuses_held_divisible_evaluator():
    ev = ExtendedDivisibleEvaluator()
    assert isinstance(ev.base, DivisibleEvaluator)
    for n in range(1, 200):
        base = ev.base.evaluate(n) or ""
        assert (ev.evaluate(n) or "").startswith(base)


def test_evaluators_are_immutable(combined):
    with pytest.raises(dataclasses.FrozenInstanceError):
        combined.digit = DigitEvaluator()
    with pytest.raises(dataclasses.FrozenInstanceError):
        ExtendedDivisibleEvaluator().base = DivisibleEvaluator()


def test_repeated_evaluation_is_stable(combined):
    first = [combined.evaluate(n) for n in range(1, 300)]
    again = [combined.evaluate(n) for n in range(1, 300)]
    assert first == again


def test_negative_numbers():
    assert DivisibleEvaluator().evaluate(-15) == "FizzBuzz"
    assert DigitEvaluator().evaluate(-53) == "BuzzFizz"
    assert create(RuleSet.DIVISIBLE).get_text(-14) == "-14"


def test_zero_is_divisible_by_everything():
    assert ExtendedDivisibleEvaluator().evaluate(0) == "FizzBuzzBoomBangCrash"
    assert create(RuleSet.DIGITS).get_text(0) == "0"


# ---------- selector ----------------------------------------------------------

SELECT_CASES = [
    (RuleSet.DIVISIBLE,           DivisibleEvaluator),
    (RuleSet.EXTENDED_DIVISIBLE,  ExtendedDivisibleEvaluator),
    (RuleSet.DIGITS,              DigitEvaluator),
    (RuleSet.DIVISIBLE_OR_DIGITS, DivisibleOrDigitsEvaluator),
]


@pytest.mark.parametrize("rule_set,cls", SELECT_CASES)
def test_select_returns_matching_evaluator(rule_set, cls):
    ev = select(rule_set)
    assert type(ev) is cls
    assert isinstance(ev, Evaluator)


def test_select_wires_combined_parts():
    ev = select(RuleSet.DIVISIBLE_OR_DIGITS)
    assert isinstance(ev.divisible, DivisibleEvaluator)
    assert isinstance(ev.digit, DigitEvaluator)


@pytest.mark.parametrize("bad", ["digits", "DIGITS", 0, None, 3.5])
def test_select_rejects_non_members(bad):
    with pytest.raises(ValueError):
        select(bad)


PARSE_CASES = [
    ("divisible",                       RuleSet.DIVISIBLE),
    ("EXTENDED_DIVISIBLE",              RuleSet.EXTENDED_DIVISIBLE),
    ("Divisible Or Digits",             RuleSet.DIVISIBLE_OR_DIGITS),
    ("FizzBuzzDivisible",               RuleSet.DIVISIBLE),
    ("FizzBuzzBoomBangCrashDivisible",  RuleSet.EXTENDED_DIVISIBLE),
    ("FizzBuzzDigits",                  RuleSet.DIGITS),
    ("fizzbuzzdivisibleordigits",       RuleSet.DIVISIBLE_OR_DIGITS),
    ("  digits\n",                      RuleSet.DIGITS),
]


@pytest.mark.parametrize("name,expected", PARSE_CASES)
def test_parse_rule_set(name, expected):
    assert parse_rule_set(name) is expected


@pytest.mark.parametrize("name", ["", "fizz", "divisible-or"])
def test_parse_rule_set_unknown(name):
    with pytest.raises(UserInputError, match="Unknown rule set"):
        parse_rule_set(name)


def test_every_rule_set_has_description():
    for rs in RuleSet:
        assert rs.description
        assert rs.category


# ---------- engine ------------------------------------------------------------

def test_engine_divisible_smoke():
    assert create(RuleSet.DIVISIBLE).get_text(5) == "Buzz"


def test_engine_combined_falls_back_to_number():
    assert create(RuleSet.DIVISIBLE_OR_DIGITS).get_text(92) == "92"


@pytest.mark.parametrize("n,expected", DIVISIBLE_CASES)
def test_engine_divisible(n, expected):
    assert create(RuleSet.DIVISIBLE).get_text(n) == (expected or str(n))


def test_engine_text_never_empty(engine):
    for n in range(-50, 500):
        text = engine.get_text(n)
        assert text
        assert text.isascii()


def test_engine_play():
    engine = create(RuleSet.DIVISIBLE)
    assert list(engine.play(range(1, 16))) == [
        "1", "2", "Fizz", "4", "Buzz", "Fizz", "7", "8",
        "Fizz", "Buzz", "11", "Fizz", "13", "14", "FizzBuzz",
    ]


def test_engine_accepts_any_evaluator():
    class Always:
        def evaluate(self, number):
            return "X"

    assert Engine(Always()).get_text(14) == "X"


def test_engine_shared_across_threads():
    engine = create(RuleSet.EXTENDED_DIVISIBLE)
    expected = [engine.get_text(n) for n in range(1, 1000)]
    results: list[list[str]] = [[] for _ in range(4)]

    def work(i: int) -> None:
        results[i] = [engine.get_text(n) for n in range(1, 1000)]

    threads = [threading.Thread(target=work, args=(i,)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert all(r == expected for r in results)


def test_engine_play_is_lazy():
    labels = create(RuleSet.DIGITS).play(itertools.count(1))
    assert isinstance(labels, Iterator)
    assert list(itertools.islice(labels, 5)) == ["1", "2", "Fizz", "4", "Buzz"]


# ---------- integers beyond the int-to-str digit limit -------------------------

HUGE = 10**5000 + 1     # neither a multiple of 3 nor of 5


def test_decimal_text_matches_str():
    for n in range(-120, 121):
        assert decimal_text(n) == str(n)


def test_engine_fallback_for_huge_numbers():
    assert create(RuleSet.DIVISIBLE).get_text(HUGE) == "1" + "0" * 4999 + "1"
    assert create(RuleSet.DIGITS).get_text(-HUGE) == "-1" + "0" * 4999 + "1"


def test_evaluators_on_huge_numbers():
    assert create(RuleSet.DIGITS).get_text(HUGE + 2) == "Fizz"
    assert create(RuleSet.DIVISIBLE).get_text(HUGE - 1) == "Buzz"
