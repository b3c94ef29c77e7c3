"""Concatenate files to standard output, optionally numbering and squeezing lines."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import BinaryIO, TextIO

from rutils.common import CommandError

PROGRAM = "rcat"
_UTF8_ERROR = "stream did not contain valid UTF-8"


@dataclass
class CatOptions:
    """Options and inputs for a cat run."""

    number_all: bool = False
    number_non_blank: bool = False
    squeeze_blank: bool = False
    files: list[str] = field(default_factory=list)


def parse_args(argv: Iterable[str]) -> CatOptions:
    """Parse flags ``-n``, ``-b``, ``-s`` (combinable) and file paths."""
    options = CatOptions()
    for arg in argv:
        if arg.startswith("-") and len(arg) > 1:
            for letter in arg[1:]:
                if letter == "n":
                    options.number_all = True
                elif letter == "b":
                    options.number_non_blank = True
                elif letter == "s":
                    options.squeeze_blank = True
                else:
                    raise CommandError(
                        f"{PROGRAM}: invalid option -- '{letter}'\n"
                        f"Try '{PROGRAM} --help' for more information."
                    )
        else:
            options.files.append(arg)
    if options.number_all:
        options.number_non_blank = False
    return options


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def render_lines(lines: Iterable[str], options: CatOptions) -> Iterator[str]:
    """Yield output lines, without line endings, for one input source."""
    number = 1
    previous_blank = False
    for raw in lines:
        line = _strip_eol(raw)
        blank = not line.strip()
        if options.squeeze_blank and blank and previous_blank:
            continue
        if options.number_all or (options.number_non_blank and not blank):
            yield f"{number:6}\t{line}"
            number += 1
        else:
            yield line
        previous_blank = blank


def _decoded(stream: BinaryIO) -> Iterator[str]:
    for raw in stream:
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            raise CommandError(_UTF8_ERROR) from None


def _emit(stream: BinaryIO, name: str, options: CatOptions, out: TextIO) -> None:
    try:
        for line in render_lines(_decoded(stream), options):
            out.write(line + "\n")
    except (CommandError, OSError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        raise CommandError(
            f"{PROGRAM}: error reading from {name}: {reason}\n{PROGRAM}: error: {reason}"
        ) from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    try:
        options = parse_args(args)
        for path in options.files or ["-"]:
            if path == "-":
                _emit(sys.stdin.buffer, "stdin", options, out)
                continue
            try:
                stream = open(path, "rb")
            except OSError as exc:
                reason = exc.strerror or str(exc)
                raise CommandError(
                    f"{PROGRAM}: {path}: {reason}\n{PROGRAM}: error: {reason}"
                ) from exc
            with stream:
                _emit(stream, path, options, out)
    except CommandError as exc:
        out.flush()
        print(exc, file=sys.stderr)
        return exc.status
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())