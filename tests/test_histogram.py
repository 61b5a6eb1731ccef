from textbench.histogram import (
    char_frequencies,
    frequency_histogram,
    horizontal_histogram,
    vertical_histogram,
    word_lengths,
)


def test_word_lengths_counts_each_word():
    words = ["a", "bb", "ccc", "dd"]
    counts = word_lengths(" ".join(words) + "\n")
    assert counts == {len(w): words.count(w) + 0 for w in words} | {2: 2}


def test_word_lengths_last_word_needs_separator():
    assert word_lengths("a bb") == {1: 1}


def test_word_lengths_caps_long_words():
    assert word_lengths("x" * 50 + " ", max_length=25) == {25: 1}


def test_word_lengths_ignores_whitespace_runs():
    counts = word_lengths("\t\t  word \n\n  word\n")
    assert counts == {len("word"): 2}


def test_horizontal_histogram_line_format():
    assert horizontal_histogram({3: 2}) == "  3 ██\n"


def test_horizontal_histogram_caps_bars_and_skips_zero():
    result = horizontal_histogram({1: 100, 2: 0, 4: 5}, max_count=40)
    lines = result.splitlines()
    assert len(lines) == 2
    assert lines[0].count("█") == 40
    assert lines[1].count("█") == 5


def test_vertical_histogram_layout():
    result = vertical_histogram({1: 2, 3: 1}, 25)
    lines = result.split("\n")
    assert lines[-1] == ""
    assert lines[-2] == " 1   3  "
    bars = lines[:-2]
    assert len(bars) == 2
    assert bars[-1].count("███") == 2
    assert bars[0].count("███") == 1


def test_vertical_histogram_marks_capped_column():
    result = vertical_histogram({2: 25}, 25)
    lines = result.splitlines()
    assert "25+" in lines[-1]
    assert len(lines) == 25 + 1


def test_vertical_histogram_empty():
    assert vertical_histogram({}) == "\n"


def test_char_frequencies_only_printable_ascii():
    counts = char_frequencies("aab\x01é\n")
    assert counts == {"a": 2, "b": 1}


def test_frequency_histogram_order_and_lengths():
    text = "ba a cab ~"
    lines = frequency_histogram(text).splitlines()
    firsts = [line[0] for line in lines]
    assert firsts == sorted(set(text))
    for line in lines:
        assert line[1] == " "
        assert line.count("█") == text.count(line[0])


def test_frequency_histogram_caps_bars():
    lines = frequency_histogram("q" * 100, max_count=40).splitlines()
    assert len(lines) == 1
    assert lines[0].count("█") == 40