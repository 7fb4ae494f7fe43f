# output_manager.py

import os

from fizzbuzz.config import workspace_dir
from fizzbuzz.utility import strip_ansi


def resolve_output_path(path: str, workspace_root: str) -> str:
    """
    Resolve user-provided output path.

    Rules:
    - '~' expanded to user home
    - Absolute paths unchanged
    - Relative paths are relative to workspace_root
    """
    if not path:
        raise ValueError("Output path is empty")

    path = os.path.expanduser(path)

    if os.path.isabs(path):
        return os.path.normpath(path)

    return os.path.normpath(os.path.join(workspace_root, path))


class OutputManager:
    """
    Handles all printing/output, to screen and/or an append-only text file.
    Nothing is buffered: each write goes straight to its targets.

    Usage:
        om = OutputManager(output_file="results/all.txt")
        om.write("FizzBuzz")   # prints and appends (ANSI stripped)
    """

    def __init__(self, output_file: str | None = None, quiet: bool = False):
        """
        Parameters:
            output_file:
                None or ""       => screen only
                path/to/file.txt => append every line to this file
            quiet: if True, no output to screen (only to file)
        """
        self.quiet = quiet
        self.output_file = output_file or ""
        self.path: str | None = None

        if self.output_file:
            if self.output_file.endswith(("/", os.sep)):
                raise ValueError(f"Output target must be a file, not a directory: {self.output_file}")
            path = resolve_output_path(self.output_file, str(workspace_dir()))

            # Ensure parent folder exists (workspace-relative paths like "logs/out.txt")
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            self.path = path

    def write(self, *args, sep: str = " ", end: str = "\n") -> None:
        """Write to screen and file (if configured)."""
        text = sep.join(str(a) for a in args) + end

        if not self.quiet:
            print(text, end="")

        if self.path:
            with open(self.path, "a", encoding="utf-8") as fh:
                fh.write(strip_ansi(text))
