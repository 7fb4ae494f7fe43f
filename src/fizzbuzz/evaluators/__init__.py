from __future__ import annotations

from .base import Evaluator
from .combined import DivisibleOrDigitsEvaluator
from .digit_based import DigitEvaluator
from .divisible import DivisibleEvaluator, ExtendedDivisibleEvaluator

__all__ = [
    "DigitEvaluator",
    "DivisibleEvaluator",
    "DivisibleOrDigitsEvaluator",
    "Evaluator",
    "ExtendedDivisibleEvaluator",
]
