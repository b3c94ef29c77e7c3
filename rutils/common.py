"""Pieces shared by the commands: errors, overwrite modes and the overwrite prompt."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO


class CommandError(Exception):
    """A failure that a command reports on stderr before exiting."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message


class OverwriteMode(enum.Enum):
    """What to do when the target of a copy or move already exists."""

    DEFAULT = "default"
    FORCE = "force"
    INTERACTIVE = "interactive"
    NO_CLOBBER = "no-clobber"


# Checked in this order, so a later letter overrides an earlier one.
_MODE_FLAGS = (
    ("f", OverwriteMode.FORCE),
    ("i", OverwriteMode.INTERACTIVE),
    ("n", OverwriteMode.NO_CLOBBER),
)


@dataclass(frozen=True)
class OverwriteArgs:
    """Parsed command line of a two-operand copy or move command."""

    source: str
    target: str
    mode: OverwriteMode = OverwriteMode.DEFAULT
    verbose: bool = False


def parse_overwrite_args(program: str, argv: Iterable[str], allowed: str) -> OverwriteArgs:
    """Parse option letters from ``allowed`` and exactly two file operands."""
    mode = OverwriteMode.DEFAULT
    verbose = False
    files: list[str] = []

    for arg in argv:
        if not arg.startswith("-"):
            files.append(arg)
            continue
        invalid = next((c for c in arg[1:] if c not in allowed), None)
        if invalid is not None:
            raise CommandError(f"{program}: error: invalid option -- '{invalid}'")
        for letter, flag_mode in _MODE_FLAGS:
            if letter in allowed and letter in arg:
                mode = flag_mode
        if "v" in allowed and "v" in arg:
            verbose = True

    if len(files) != 2:
        raise CommandError(
            f"{program}: error: missing file operands (expected 2, got {len(files)})"
        )
    source, target = files
    return OverwriteArgs(source=source, target=target, mode=mode, verbose=verbose)


def ask_overwrite(
    program: str,
    target: str,
    stdin: TextIO | None = None,
    stderr: TextIO | None = None,
) -> bool:
    """Prompt on stderr and return True if the reply starts with 'y' or 'Y'."""
    stdin = sys.stdin if stdin is None else stdin
    stderr = sys.stderr if stderr is None else stderr
    stderr.write(f"{program}: overwrite {target}? ")
    stderr.flush()
    response = stdin.readline()
    return response.lstrip().lower().startswith("y")