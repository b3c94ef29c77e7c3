"""Print the first lines of files or standard input."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from itertools import islice
from typing import BinaryIO, TextIO

from rutils.common import CommandError

PROGRAM = "rhead"
DEFAULT_LINE_COUNT = 10
_COUNT_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_COUNT = 2**64 - 1
_UTF8_ERROR = "stream did not contain valid UTF-8"


@dataclass
class HeadOptions:
    """Line count and inputs for a head run."""

    count: int = DEFAULT_LINE_COUNT
    files: list[str] = field(default_factory=list)


def _parse_count(text: str) -> int:
    if _COUNT_PATTERN.fullmatch(text):
        count = int(text)
        if 0 < count <= _MAX_COUNT:
            return count
    raise CommandError(f"{PROGRAM}: error: invalid line count: '{text}'")


def parse_args(argv: Iterable[str]) -> HeadOptions:
    """Parse ``-n COUNT`` and file paths."""
    options = HeadOptions()
    args = iter(argv)
    for arg in args:
        if arg == "-n":
            value = next(args, None)
            if value is None:
                raise CommandError(f"{PROGRAM}: error: option requires an argument -- 'n'")
            options.count = _parse_count(value)
        elif arg.startswith("-") and len(arg) > 1:
            raise CommandError(f"{PROGRAM}: error: invalid option -- '{arg[1:]}'")
        else:
            options.files.append(arg)
    return options


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def head_lines(lines: Iterable[str], count: int) -> Iterator[str]:
    """Yield at most ``count`` lines, without line endings, reading no further."""
    for line in islice(lines, count):
        yield _strip_eol(line)


def _decoded(stream: BinaryIO) -> Iterator[str]:
    for raw in stream:
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            raise CommandError(_UTF8_ERROR) from None


def _emit(stream: BinaryIO, name: str, count: int, out: TextIO) -> None:
    try:
        for line in head_lines(_decoded(stream), count):
            out.write(line + "\n")
    except (CommandError, OSError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        raise CommandError(f"{PROGRAM}: error reading from {name}: {reason}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    try:
        options = parse_args(args)
        if not options.files:
            _emit(sys.stdin.buffer, "stdin", options.count, out)
        headers = len(options.files) > 1
        for index, path in enumerate(options.files):
            if headers and index > 0:
                out.write("\n")
            try:
                stream = open(path, "rb")
            except OSError as exc:
                raise CommandError(f"{PROGRAM}: {path}: {exc.strerror or exc}") from exc
            with stream:
                if headers:
                    out.write(f"==> {path} <==\n")
                _emit(stream, path, options.count, out)
    except CommandError as exc:
        out.flush()
        print(exc, file=sys.stderr)
        return exc.status
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())