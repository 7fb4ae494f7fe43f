from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib as toml
except ImportError:
    import tomli as toml  # type: ignore

from fizzbuzz.utility import UserInputError

DEFAULTS: dict[str, dict[str, Any]] = {
    "GAME": {"RULE_SET": "divisible"},
    "OUTPUT": {"OUTPUT_FILE": ""},
    "BEHAVIOUR": {"DEBUG": False},
}


@dataclass
class Settings:
    """
    Wrap the merged TOML dict (defaults overlaid with the file's sections).
    .as_dict() feeds runtime.apply().
    """
    data: dict[str, Any] = field(default_factory=dict)
    name: str = "default"
    _source: Path | None = None

    def as_dict(self) -> dict[str, Any]:
        return self.data


# --- Paths -----------------------------------------------------------------

def workspace_dir() -> Path:
    env = os.environ.get("FIZZBUZZ_HOME")
    if env:
        return Path(env).expanduser().resolve()
    return (Path.home() / ".fizzbuzz").resolve()


def default_settings_path() -> Path:
    return workspace_dir() / "settings.toml"


# --- I/O -------------------------------------------------------------------

def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return toml.load(f)
    except toml.TOMLDecodeError as e:
        lineno = getattr(e, "lineno", None)
        colno = getattr(e, "colno", None)
        msg = getattr(e, "msg", str(e))
        where = []
        if lineno is not None:
            where.append(f"line {lineno}")
        if colno is not None:
            where.append(f"column {colno}")
        loc = f" (at {', '.join(where)})" if where else ""
        # No traceback chaining
        raise UserInputError(f"reading {path.name}: {msg}{loc}.") from None


def _merge(raw: dict[str, Any]) -> dict[str, Any]:
    data: dict[str, Any] = {sec: dict(vals) for sec, vals in DEFAULTS.items()}
    for sec, vals in raw.items():
        if isinstance(vals, dict) and isinstance(data.get(sec), dict):
            data[sec].update(vals)
        else:
            data[sec] = vals
    return data


# --- Public API ------------------------------------------------------------

def load_settings(path: str | Path | None = None) -> Settings:
    """
    Load settings from `path`, or from <workspace>/settings.toml when no path
    is given. A missing default file means built-in defaults; a missing
    explicit file is an error.
    """
    if path is None:
        p = default_settings_path()
        if not p.exists():
            return Settings(data=_merge({}))
    else:
        p = Path(path).expanduser()
        if not p.exists():
            raise FileNotFoundError(f"Settings file not found: {p}")

    raw = _load_toml(p)
    return Settings(data=_merge(raw), name=p.stem, _source=p)
