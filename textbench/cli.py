"""Command line entry point running the text tools over standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from textbench.counting import (
    count_chars,
    count_lines,
    count_whitespace,
    digit_stats,
    word_count,
)
from textbench.csource import LintError, check_brackets, uncomment
from textbench.filters import (
    copy_text,
    detab,
    entab,
    escape_visible,
    one_word_per_line,
    squeeze_blanks,
)
from textbench.fold import fold_text
from textbench.histogram import (
    frequency_histogram,
    horizontal_histogram,
    vertical_histogram,
    word_lengths,
)
from textbench.lines import (
    lines_at_least,
    longest_line,
    read_lines,
    reverse_lines,
    strip_trailing,
)
from textbench.tables import (
    celsius_table,
    fahrenheit_table,
    limits_report,
    power_table,
    repeat_line,
)

EOF = -1
GREETING = "hello, world"

_TEXT_FILTERS: dict[str, Callable[[str], str]] = {
    "copy": copy_text,
    "squeeze": squeeze_blanks,
    "escape": escape_visible,
    "words": one_word_per_line,
    "uncomment": uncomment,
    "chars": lambda text: f"{count_chars(text)}\n",
    "lines": lambda text: f"{count_lines(text)}\n",
    "blanks": lambda text: count_whitespace(text).report(),
    "wc": lambda text: word_count(text).report(),
    "digits": lambda text: digit_stats(text).report(),
    "frequencies": frequency_histogram,
}

_TABLES: dict[str, Callable[[], list[str]]] = {
    "celsius": celsius_table,
    "fahrenheit": fahrenheit_table,
    "power": power_table,
    "limits": limits_report,
}


def hello() -> str:
    """Return the classic greeting."""
    return GREETING


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textbench", description="Small text tools reading standard input."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("hello", help="print a greeting")
    commands.add_parser("eof", help="print the end-of-input marker value")
    for name in _TEXT_FILTERS:
        commands.add_parser(name)
    for name in _TABLES:
        commands.add_parser(name)
    commands.add_parser("repeat")
    commands.add_parser("lint", help="check bracket balance of C source")
    for name in ("longest", "trailing", "reverse"):
        commands.add_parser(name)

    for name, default in (("detab", 4), ("entab", 2)):
        sub = commands.add_parser(name)
        sub.add_argument("--tabsize", type=int, default=default)

    fold = commands.add_parser("fold")
    fold.add_argument("--width", type=int, default=80)

    threshold = commands.add_parser("threshold")
    threshold.add_argument("--threshold", type=int, default=50)

    histogram = commands.add_parser("histogram")
    histogram.add_argument("--max-length", type=int, default=25)
    histogram.add_argument("--max-count", type=int, default=40)
    histogram.add_argument("--vertical", action="store_true")
    return parser


def _run(args: argparse.Namespace) -> str:
    command = args.command
    if command == "hello":
        return hello() + "\n"
    if command == "eof":
        return f"{EOF}\n"
    if command in _TABLES:
        return "".join(line + "\n" for line in _TABLES[command]())
    if command == "repeat":
        return repeat_line()
    if command in _TEXT_FILTERS:
        return _TEXT_FILTERS[command](sys.stdin.read())
    if command == "detab":
        return detab(sys.stdin.read(), args.tabsize)
    if command == "entab":
        return entab(sys.stdin.read(), args.tabsize)
    if command == "fold":
        return fold_text(sys.stdin.read(), args.width)
    if command == "histogram":
        counts = word_lengths(sys.stdin.read(), args.max_length)
        render = vertical_histogram if args.vertical else horizontal_histogram
        return render(counts, args.max_count)
    if command == "longest":
        return longest_line(read_lines(sys.stdin)) or ""
    if command == "threshold":
        return "".join(lines_at_least(read_lines(sys.stdin), args.threshold))
    if command == "trailing":
        return "".join(strip_trailing(read_lines(sys.stdin)))
    if command == "reverse":
        return "".join(reverse_lines(read_lines(sys.stdin)))
    raise ValueError(f"unknown command {command!r}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one text tool; returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "lint":
        try:
            check_brackets(sys.stdin.read())
        except LintError as exc:
            print(exc, file=sys.stderr)
            return 1
        return 0
    try:
        output = _run(args)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())