# rutils

Small, dependency-free versions of five everyday file and text commands:
`rcat`, `rcp`, `recho`, `rhead` and `rmv`.

## Installation

```
pip install .
```

This installs the five commands as console scripts.

## Commands

### rcat

Print files, or standard input when no file is given. `-` stands for
standard input.

```
rcat [-n] [-b] [-s] [FILE...]
```

- `-n` number every output line
- `-b` number non-blank lines only (ignored when `-n` is also given)
- `-s` squeeze runs of blank lines into one

Flags can be combined, as in `rcat -ns notes.txt`. Numbers are right-aligned
in six columns and followed by a tab. A line counts as blank when it holds
nothing but whitespace. Numbering and squeezing start afresh for each input.
Input must be UTF-8; a file that cannot be opened or read stops the command.

### rhead

Print the first lines of each file (10 by default), or of standard input
when no file is given.

```
rhead [-n COUNT] [FILE...]
```

`COUNT` must be a positive whole number. With more than one file, each is
preceded by a `==> FILE <==` header and separated from the previous one by
an empty line. Any other option is an error.

### recho

```
recho [TEXT]
recho -n TEXT
```

Prints its single argument followed by a newline; with `-n` the newline is
left out. With no argument, or only `-n`, nothing is printed. More than two
arguments, or a first argument other than `-n` when there are two, is an
error, reported as `Error: "..."`.

### rcp

Copy one regular file to another path.

```
rcp [-f | -i | -n] [-v] SOURCE TARGET
```

- `-f` remove an existing target before copying
- `-i` ask on standard error before overwriting; a reply starting with `y`
  or `Y` goes ahead
- `-n` never overwrite an existing target
- `-v` print `SOURCE -> TARGET`, or `rcp: TARGET: not overwritten` when `-n`
  keeps an existing target

The source must be a regular file, the two paths must differ, and an
existing target must not be a directory. Letters may be combined, as in
`-fv`; when several mode letters are given, `-n` beats `-i`, which beats
`-f`.

### rmv

Move or rename a file or directory.

```
rmv [-f | -i | -n] SOURCE TARGET
```

- `-f` replace an existing target without asking (the same as giving no flag)
- `-i` ask on standard error before replacing an existing target
- `-n` leave an existing target alone and exit successfully

The move is a rename, so source and target must be on the same file system.

## Exit status

All commands print a message to standard error and exit with status 1 on
failure. The one exception is `rcp -f` when the existing target cannot be
removed, which exits with status 101.

## Using the library

Each command is also a module with a `main(argv=None)` function that
returns the exit status:

```python
from rutils import cat

status = cat.main(["-n", "notes.txt"])
```

The work behind the commands is available on its own:

- `rutils.cat.parse_args(argv)` returns a `CatOptions`;
  `rutils.cat.render_lines(lines, options)` yields the output lines for one
  input, without line endings.
- `rutils.head.parse_args(argv)` returns a `HeadOptions`;
  `rutils.head.head_lines(lines, count)` yields at most `count` lines.
- `rutils.echo.render(argv)` returns the text `recho` would print.
- `rutils.cp.copy(source, target, mode, verbose, ask)` and
  `rutils.mv.move(source, target, mode, ask)` return `True` when the file was
  copied or moved. `mode` is an `OverwriteMode` (`DEFAULT`, `FORCE`,
  `INTERACTIVE`, `NO_CLOBBER`), and `ask` is an optional callable that gets
  the target path in interactive mode and returns whether to overwrite.
- `rutils.common.parse_overwrite_args(program, argv, allowed)` parses the
  options and two operands of `rcp` and `rmv` into an `OverwriteArgs`;
  `rutils.common.ask_overwrite(program, target, stdin, stderr)` is the
  default prompt.

Failures are raised as `rutils.common.CommandError`, whose `message` is the
text the commands print and whose `status` is the exit status.

```python
from rutils.common import OverwriteMode
from rutils.cp import copy

copy("a.txt", "b.txt", OverwriteMode.INTERACTIVE, ask=lambda path: True)
```

## What is not included

There is no `--help` option, and the commands take only the flags listed
above. `rcp` and `rmv` handle exactly one source and one target; copying
into a directory, several sources, or recursive copies are not supported.

## Running the tests

```
pip install .[test]
pytest
```