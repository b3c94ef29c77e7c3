"""Print a single argument, with ``-n`` to suppress the trailing newline."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from rutils.common import CommandError


def render(argv: Sequence[str]) -> str:
    """Return the text to print for the given arguments."""
    if len(argv) > 2:
        raise CommandError("Too many arguments were provided")
    if len(argv) == 2:
        flag, text = argv
        if flag != "-n":
            raise CommandError(f"{flag} is not a valid flag")
        return text
    if len(argv) == 1 and argv[0] != "-n":
        return argv[0] + "\n"
    return ""


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        text = render(args)
    except CommandError as exc:
        print(f'Error: "{exc}"', file=sys.stderr)
        return exc.status
    sys.stdout.write(text)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())