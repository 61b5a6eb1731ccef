import io

import pytest

from textbench.cli import hello, main
from textbench.counting import word_count
from textbench.filters import detab
from textbench.lines import longest_line
from textbench.tables import fahrenheit_table


def run(monkeypatch, capsys, argv, stdin=""):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_hello_value():
    assert hello() == "hello, world"


def test_hello_command(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["hello"])
    assert (status, out) == (0, "hello, world\n")


def test_eof_command(monkeypatch, capsys):
    status, out, _ = run(monkeypatch, capsys, ["eof"])
    assert (status, out) == (0, "-1\n")


def test_copy_round_trip(monkeypatch, capsys):
    text = "one\ttwo  three\n"
    status, out, _ = run(monkeypatch, capsys, ["copy"], text)
    assert status == 0
    assert out == text


def test_wc_matches_library(monkeypatch, capsys):
    text = "the quick brown\nfox jumps\n"
    _, out, _ = run(monkeypatch, capsys, ["wc"], text)
    assert out == word_count(text).report()


def test_detab_uses_tabsize(monkeypatch, capsys):
    text = "a\tb\n\tc\n"
    _, out, _ = run(monkeypatch, capsys, ["detab", "--tabsize", "8"], text)
    assert out == detab(text, 8)
    assert "\t" not in out


def test_longest_line(monkeypatch, capsys):
    text = "short\nthe longest line\nmid line\n"
    _, out, _ = run(monkeypatch, capsys, ["longest"], text)
    assert out == longest_line(io.StringIO(text))
    assert out == "the longest line\n"


def test_fahrenheit_table(monkeypatch, capsys):
    _, out, _ = run(monkeypatch, capsys, ["fahrenheit"])
    assert out.splitlines() == fahrenheit_table()


def test_lint_accepts_balanced(monkeypatch, capsys):
    status, _, err = run(monkeypatch, capsys, ["lint"], "int main() { return 0; }\n")
    assert status == 0
    assert err == ""


def test_lint_rejects_stray_closing(monkeypatch, capsys):
    source = "#include <stdio.h>\n\nint main() { return 0; }\n)\n"
    status, _, err = run(monkeypatch, capsys, ["lint"], source)
    assert status == 1
    assert "unmatched token )" in err


def test_invalid_tabsize_reports_error(monkeypatch, capsys):
    status, out, err = run(monkeypatch, capsys, ["entab", "--tabsize", "0"], "a  b\n")
    assert status == 1
    assert out == ""
    assert "tabsize" in err


def test_missing_command_exits(monkeypatch, capsys):
    with pytest.raises(SystemExit) as info:
        run(monkeypatch, capsys, [])
    assert info.value.code == 2