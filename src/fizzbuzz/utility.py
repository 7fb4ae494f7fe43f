# -----------------------------------------------------------------------------
#  Utility functions
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
import shutil

from sympy.ntheory.digits import digits as _sympy_digits

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")
INT_RE = re.compile(r"[+-]?[0-9]+")


class UserInputError(Exception):
    pass


def _token(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9]+", "_", name).upper().strip("_")


def digits(n: int) -> list[int]:
    """
    Return the base-10 digits of n, most significant first.
    The sign is ignored: digits(-53) == [5, 3]; digits(0) == [0].
    """
    # sympy prefixes the base (negated for negative n); drop it
    return list(_sympy_digits(abs(int(n)), 10)[1:])


def decimal_text(n: int) -> str:
    """str(n) without the interpreter's int-to-str digit limit."""
    sign = "-" if n < 0 else ""
    return sign + "".join(map(str, digits(n)))


def _clean_int(text: str) -> str:
    return (text or "").strip().replace(",", "").replace("_", "")


def looks_like_int(text: str) -> bool:
    return INT_RE.fullmatch(_clean_int(text)) is not None


def parse_int(text: str) -> int:
    """
    Parse a decimal integer typed by the user.
    Accepts surrounding whitespace, a leading sign and '_' or ',' separators.
    Raises UserInputError for anything else, including integers longer than
    the interpreter's str-to-int digit limit.
    """
    s = _clean_int(text)
    if not INT_RE.fullmatch(s):
        raise UserInputError(f"Invalid input: '{(text or '').strip()}' is not an integer.")
    try:
        return int(s)
    except ValueError:
        raise UserInputError(
            f"Invalid input: integer has too many digits ({len(s.lstrip('+-'))})."
        ) from None


def strip_ansi(s: str | None) -> str:
    """Return s with ANSI escape sequences removed."""
    return "" if s is None else ANSI_RE.sub("", s)


def get_terminal_width(default: int = 80) -> int:
    try:
        return shutil.get_terminal_size((default, 24)).columns
    except Exception:
        return default
