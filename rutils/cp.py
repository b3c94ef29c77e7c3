"""Copy one regular file to a target path, with overwrite control."""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from rutils.common import CommandError, OverwriteMode, ask_overwrite, parse_overwrite_args

PROGRAM = "rcp"
_PANIC_STATUS = 101


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def copy(
    source: str,
    target: str,
    mode: OverwriteMode = OverwriteMode.DEFAULT,
    verbose: bool = False,
    ask: Callable[[str], bool] | None = None,
) -> bool:
    """Copy ``source`` to ``target``; return True if a copy was made.

    ``ask`` is called with the target path in interactive mode and decides
    whether an existing target is overwritten.
    """
    source_path = Path(source)
    target_path = Path(target)

    if not source_path.is_file():
        raise CommandError(
            f"{PROGRAM}: error: '{source}: No such file or directory or not a regular file"
        )
    if source == target:
        raise CommandError(f"{PROGRAM}: error: '{source}' and '{target}' are the same file")

    if target_path.exists():
        if target_path.is_dir():
            raise CommandError(f"{PROGRAM}: error: {target}: is a directory")
        if mode is OverwriteMode.NO_CLOBBER:
            if verbose:
                print(f"{PROGRAM}: {target}: not overwritten")
            return False
        if mode is OverwriteMode.INTERACTIVE:
            confirm = ask if ask is not None else (lambda path: ask_overwrite(PROGRAM, path))
            if not confirm(target):
                return False
        elif mode is OverwriteMode.FORCE:
            try:
                os.remove(target_path)
            except OSError as exc:
                raise CommandError(
                    f"{PROGRAM}: cannot remove {target}: {_reason(exc)}",
                    status=_PANIC_STATUS,
                ) from exc

    if verbose:
        print(f"{source} -> {target}")
    try:
        shutil.copy(source_path, target_path)
    except OSError as exc:
        raise CommandError(
            f"{PROGRAM}: error: failed to copy {source} to {target}: {_reason(exc)}"
        ) from exc
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        parsed = parse_overwrite_args(PROGRAM, args, "finv")
        copy(parsed.source, parsed.target, parsed.mode, parsed.verbose)
    except CommandError as exc:
        sys.stdout.flush()
        print(exc, file=sys.stderr)
        return exc.status
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())