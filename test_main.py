import os
import tempfile
from unittest import mock

import pytest

import main
from main import parse_args, parse_delimiter
from record_source import MalformedRecordError


@pytest.mark.parametrize(
    "value, expected",
    [
        (",", ","),
        (";", ";"),
        ("\\t", "\t"),
        ("tab", "\t"),
        ("TAB", "\t"),
        ("pipe", "|"),
        ("\t", "\t"),
    ],
)
def test_parse_delimiter(value, expected):
    assert parse_delimiter(value) == expected


@pytest.mark.parametrize("value", ["", ",,", '"', "abc"])
def test_parse_delimiter_rejects(value):
    with pytest.raises(Exception):
        parse_delimiter(value)


def test_parse_args_defaults():
    args = parse_args(["data.csv"])
    assert args.path == "data.csv"
    assert args.delimiter == ","
    assert args.line == 0
    assert args.buffer_size is None


def test_parse_args_clamps_negative_line():
    args = parse_args(["-l", "-20", "-d", "tab", "-b", "64", "data.tsv"])
    assert args.line == 0
    assert args.delimiter == "\t"
    assert args.buffer_size == 64


def test_parse_args_requires_path():
    with pytest.raises(SystemExit) as exc:
        parse_args([])
    assert exc.value.code == 2


def test_bad_buffer_size_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        parse_args(["-b", "1", "data.csv"])
    assert exc.value.code == 2


def test_missing_file_exits_before_curses(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        with mock.patch("main.setup_logging"), mock.patch("curses.wrapper") as wrapper:
            rc = main.main([os.path.join(tmp, "missing.csv")])
    assert rc == 1
    assert not wrapper.called
    assert "no such file" in capsys.readouterr().err


def test_fatal_source_error_is_reported_after_terminal_restored(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "bad.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write("a,b\n1,2,3\n")
        error = MalformedRecordError("Malformed record", path, 1)
        with mock.patch("main.setup_logging"), mock.patch(
            "curses.wrapper", side_effect=error
        ):
            rc = main.main([path])
    assert rc == 1
    assert "tabpeek: error: Malformed record" in capsys.readouterr().err


def test_clean_quit_returns_zero():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "ok.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write("a\n1\n")
        with mock.patch("main.setup_logging"), mock.patch("curses.wrapper") as wrapper:
            rc = main.main([path, "-b", "32"])
    assert rc == 0
    assert wrapper.called
