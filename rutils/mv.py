"""Move or rename a file or directory, with overwrite control."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from rutils.common import CommandError, OverwriteMode, ask_overwrite, parse_overwrite_args

PROGRAM = "rmv"


def move(
    source: str,
    target: str,
    mode: OverwriteMode = OverwriteMode.DEFAULT,
    ask: Callable[[str], bool] | None = None,
) -> bool:
    """Rename ``source`` to ``target``; return True if the move happened.

    ``ask`` is called with the target path in interactive mode and decides
    whether an existing target is replaced.
    """
    source_path = Path(source)
    target_path = Path(target)

    try:
        source_path.stat()
    except OSError:
        raise CommandError(
            f"{PROGRAM}: error: cannot stat '{source}': No such file or directory"
        ) from None
    if source == target:
        raise CommandError(f"{PROGRAM}: error: '{source}' and '{target}' are the same file")

    if target_path.exists():
        if mode is OverwriteMode.NO_CLOBBER:
            return False
        if mode is OverwriteMode.INTERACTIVE:
            confirm = ask if ask is not None else (lambda path: ask_overwrite(PROGRAM, path))
            if not confirm(target):
                return False

    try:
        os.replace(source_path, target_path)
    except OSError as exc:
        raise CommandError(
            f"{PROGRAM}: error: failed to move '{source}' to '{target}': "
            f"{exc.strerror or exc}"
        ) from exc
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        parsed = parse_overwrite_args(PROGRAM, args, "fin")
        move(parsed.source, parsed.target, parsed.mode)
    except CommandError as exc:
        print(exc, file=sys.stderr)
        return exc.status
    return 0


if __name__ == "__main__":
    sys.exit(main())