# src/fizzbuzz/cli.py

"""
FizzBuzz engine - command line driver

Description:
    Plays rounds of a Fizz Buzz game under a selectable rule set and prints
    one label per number. Without numbers on the command line, reads the
    rule set name and then the number from standard input, one per line.

usage: see fizzbuzz -h
"""

from __future__ import annotations

import argparse
import os
import sys
import textwrap
from itertools import chain

from colorama import Fore, Style
from colorama import init as colorama_init

from fizzbuzz import __version__ as _ver
from fizzbuzz.config import load_settings
from fizzbuzz.engine import Engine, create
from fizzbuzz.output_manager import OutputManager
from fizzbuzz.registry import RULES, RuleSet, parse_rule_set
from fizzbuzz.runtime import APPLY, CFG
from fizzbuzz.runtime import current as _rt_current
from fizzbuzz.runtime import reset as _rt_reset
from fizzbuzz.utility import (
    UserInputError,
    decimal_text,
    get_terminal_width,
    looks_like_int,
    parse_int,
)


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    prefix = f"{Fore.RED}Error:{Style.RESET_ALL}"
    if not (msg.startswith("Invalid input:") or msg.startswith("Error:")):
        msg = f"{prefix} {msg}"
    print(msg, file=sys.stderr)


def _debug(msg: str) -> None:
    if _rt_current().debug:
        print(f"{Style.DIM}[debug]{Style.RESET_ALL} {msg}", file=sys.stderr)


def _resolve_inputs(items: list[str]) -> tuple[str | None, list[int]]:
    """Return (rule_set_name, numbers) from the positionals.

    Rules:
      - a leading non-numeric item is the rule set name
      - every remaining item must be an integer
    """
    if not items:
        return None, []
    name = None
    rest = items
    if not looks_like_int(items[0]):
        name, rest = items[0], items[1:]
    return name, [parse_int(s) for s in rest]


def _read_stdin_line(what: str) -> str:
    line = sys.stdin.readline()
    if not line:
        raise UserInputError(f"expected {what} on standard input.")
    return line.strip()


def _resolve_range(values: list[str] | None) -> range:
    if not values:
        return range(0)
    start, stop = (parse_int(v) for v in values)
    if start > stop:
        raise UserInputError(f"empty range: {decimal_text(start)} > {decimal_text(stop)}.")
    return range(start, stop + 1)


def show_rule_sets() -> None:
    width = max(40, get_terminal_width())
    print(f"{Fore.YELLOW}Available rule sets: {len(RuleSet)}{Style.RESET_ALL}")
    print()
    last_cat = None
    for rs in RuleSet:
        info = RULES[rs]
        if info.category != last_cat:
            last_cat = info.category
            print(f"{Fore.CYAN}{info.category}:{Style.RESET_ALL}")
        desc = info.description
        room = width - 27
        if len(desc) > room > 10:
            desc = desc[: room - 1] + "…"
        print(f"  {Fore.GREEN}{rs.value:<22}{Style.RESET_ALL} — {desc}")


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:

    epilog = textwrap.dedent("""\
    commands:
      list
          List all available rule sets.

    rule sets may be given by value (divisible-or-digits), by name
    (DIVISIBLE_OR_DIGITS) or by legacy name (FizzBuzzDivisibleOrDigits).
    """)

    p = argparse.ArgumentParser(
        prog="fizzbuzz",
        description="FizzBuzz engine — label numbers under a selectable rule set",
        usage=(
            "fizzbuzz [rule_set] [integer ...] [--range START END] [--config PATH]\n"
            "                [--output OUTPUT] [--quiet] [--debug]\n"
            "       fizzbuzz list\n"
            "       fizzbuzz -h | --help\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    p.add_argument("items", nargs="*", metavar="[rule_set] integer",
                   help="optional rule set name followed by integers to label")
    p.add_argument("--range", nargs=2, metavar=("START", "END"), default=None,
                   help="Label every integer from START to END inclusive")
    p.add_argument("--config", default=None, help="Settings file (default: $FIZZBUZZ_HOME/settings.toml)")
    p.add_argument("--output", default=None, help="Append results to a file (also prints unless --quiet)")
    p.add_argument("--quiet", action="store_true", help="Do not print results to the screen")
    p.add_argument("--debug", action="store_true", help="Show selection and configuration trace info")
    p.add_argument("--version", action="version", version=f"%(prog)s {_ver}")

    return p


def main(argv=None) -> int:
    """Thin wrapper: catch friendly errors, hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except UserInputError as e:
        _print_user_error(str(e))
        return 2
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        debug = ("--debug" in (argv if argv is not None else sys.argv)) or _rt_current().debug
        if debug:
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


# ---- main ----
def _main_impl(argv=None) -> int:

    colorama_init(autoreset=True)

    parser = _build_parser()
    args = parser.parse_args(argv)
    rt = _rt_reset()
    rt.debug = bool(args.debug)

    if args.items[:1] == ["list"]:
        show_rule_sets()
        return 0

    try:
        settings = load_settings(args.config)
    except FileNotFoundError as e:
        raise UserInputError(str(e)) from None
    APPLY(settings)
    _debug(f"profile: {rt.profile_name} ({settings._source or 'built-in defaults'})")

    name, numbers = _resolve_inputs(args.items)
    span = _resolve_range(args.range)

    # stdin protocol: rule set line, then number line
    from_stdin = not numbers and args.range is None
    if name is None and from_stdin:
        name = _read_stdin_line("a rule set name")
    if name is None:
        name = str(CFG("GAME.RULE_SET", RuleSet.DIVISIBLE.value))
    rule_set = parse_rule_set(name)
    if from_stdin:
        numbers = [parse_int(_read_stdin_line("an integer"))]

    engine: Engine = create(rule_set)
    _debug(f"rule set: {rule_set.value} -> {engine.evaluator!r}")

    # --- output routing: --output, then profile OUTPUT_FILE, then $OUTPUT_PATH ---
    target = args.output or CFG("OUTPUT.OUTPUT_FILE", "") or os.environ.get("OUTPUT_PATH") or None
    try:
        om = OutputManager(output_file=target, quiet=args.quiet)
    except ValueError as e:
        print(f"Fatal error in --output: {e}", file=sys.stderr)
        return 1
    _debug(f"output: {om.path or 'screen only'}")

    for text in engine.play(chain(numbers, span)):
        om.write(text)
    return 0
