from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("fizzbuzz-engine")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .engine import Engine, create
from .evaluators import (
    DigitEvaluator,
    DivisibleEvaluator,
    DivisibleOrDigitsEvaluator,
    Evaluator,
    ExtendedDivisibleEvaluator,
)
from .registry import RuleSet, parse_rule_set, select
from .utility import UserInputError, digits

__all__ = [
    "DigitEvaluator",
    "DivisibleEvaluator",
    "DivisibleOrDigitsEvaluator",
    "Engine",
    "Evaluator",
    "ExtendedDivisibleEvaluator",
    "RuleSet",
    "UserInputError",
    "__version__",
    "create",
    "digits",
    "parse_rule_set",
    "select",
]
