import io
import itertools
import sys

import pytest

from rutils.common import CommandError
from rutils.head import DEFAULT_LINE_COUNT, HeadOptions, head_lines, main, parse_args


def _stdin(data: bytes):
    return io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")


def test_defaults():
    assert parse_args([]) == HeadOptions(count=DEFAULT_LINE_COUNT, files=[])
    assert DEFAULT_LINE_COUNT == 10


def test_count_and_files():
    assert parse_args(["-n", "3", "a", "b"]) == HeadOptions(count=3, files=["a", "b"])


def test_count_with_plus_sign():
    assert parse_args(["-n", "+5"]).count == 5


def test_lone_dash_is_a_file():
    assert parse_args(["-"]).files == ["-"]


@pytest.mark.parametrize("value", ["0", "abc", "-3", " 3", "1_0", "3.5", ""])
def test_invalid_count(value):
    with pytest.raises(CommandError) as info:
        parse_args(["-n", value])
    assert str(info.value) == f"rhead: error: invalid line count: '{value}'"


def test_missing_count():
    with pytest.raises(CommandError) as info:
        parse_args(["a", "-n"])
    assert str(info.value) == "rhead: error: option requires an argument -- 'n'"


def test_unknown_option():
    with pytest.raises(CommandError) as info:
        parse_args(["-cx"])
    assert str(info.value) == "rhead: error: invalid option -- 'cx'"


def test_head_lines_takes_prefix():
    lines = [f"line{i}\n" for i in range(5)]
    assert list(head_lines(lines, 2)) == ["line0", "line1"]


def test_head_lines_shorter_input():
    assert list(head_lines(["a\r\n", "b"], 10)) == ["a", "b"]


def test_head_lines_is_lazy():
    endless = (f"{n}\n" for n in itertools.count())
    result = list(head_lines(endless, 3))
    assert len(result) == 3
    assert result[0] == "0"


def test_main_single_file_default_count(tmp_path, capsys):
    path = tmp_path / "many.txt"
    path.write_text("".join(f"row {i}\n" for i in range(15)))
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"row {i}" for i in range(DEFAULT_LINE_COUNT)]


def test_main_multiple_files_have_headers(tmp_path, capsys):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("1\n2\n3\n")
    second.write_text("x\n")
    assert main(["-n", "2", str(first), str(second)]) == 0
    expected = f"==> {first} <==\n1\n2\n\n==> {second} <==\nx\n"
    assert capsys.readouterr().out == expected


def test_main_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", _stdin(b"p\nq\nr\n"))
    assert main(["-n", "2"]) == 0
    assert capsys.readouterr().out == "p\nq\n"


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nothing.txt"
    assert main([str(missing)]) == 1
    assert capsys.readouterr().err.startswith(f"rhead: {missing}: ")


def test_main_invalid_utf8(tmp_path, capsys):
    bad = tmp_path / "bad.bin"
    bad.write_bytes(b"fine\n\xff\n")
    assert main([str(bad)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "fine\n"
    assert f"rhead: error reading from {bad}" in captured.err


def test_main_bad_option(capsys):
    assert main(["-z"]) == 1
    assert "invalid option -- 'z'" in capsys.readouterr().err