# textbench

A collection of small, dependency-free text tools: character and line
filters, counters and histograms, a C comment stripper and bracket checker,
plus a few encoders: Base32, Base64 with configurable alphabets, HOTP/TOTP
one-time codes and time-ordered UUIDv7 identifiers.

Requires Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Three commands are installed.

### `textbench`

Runs one tool, chosen by a sub-command. Tools that process text read all of
standard input and write to standard output.

```
textbench hello                 # prints "hello, world"
textbench eof                   # prints -1
echo "one two" | textbench wc   # lines, words, characters
textbench detab --tabsize 8 < file.txt
textbench lint < program.c      # exit status 1 and a message on stderr if brackets do not balance
```

Sub-commands:

| Sub-command | Does |
|---|---|
| `hello` | print the greeting |
| `eof` | print the end-of-input marker value, `-1` |
| `copy` | copy input to output |
| `squeeze` | replace runs of blanks with one blank |
| `escape` | show tabs, backspaces and backslashes as `\t`, `\b`, `\\` |
| `words` | one word per line |
| `uncomment` | remove C comments |
| `chars` | count characters |
| `lines` | count newlines |
| `blanks` | count blanks, tabs and newlines |
| `wc` | count lines, words and characters |
| `digits` | count each digit, white space and other characters |
| `frequencies` | bar chart of printable ASCII characters |
| `histogram [--max-length N] [--max-count N] [--vertical]` | bar chart of word lengths (defaults 25 and 40) |
| `detab [--tabsize N]` | expand tabs to blanks (default 4) |
| `entab [--tabsize N]` | replace runs of blanks with tabs (default 2) |
| `fold [--width N]` | fold long lines (default 80) |
| `longest` | print the longest line |
| `threshold [--threshold N]` | print lines of at least N characters, newline included (default 50) |
| `trailing` | strip trailing blanks and tabs, drop blank lines |
| `reverse` | reverse each line |
| `lint` | check that `()`, `[]` and `{}` balance in C source |
| `celsius`, `fahrenheit` | temperature conversion tables |
| `power` | powers of 2 and -3 for 0 to 9 |
| `limits` | ranges of the native integer and floating types |
| `repeat` | a line of 1500 `a` characters |

### `textbench-totp`

```
textbench-totp <base32-key> [--time SECONDS] [--period 30] [--digits 6]
```

Prints the time step, its eight bytes in hex, the HMAC-SHA1 digest in hex
and the one-time code. The time defaults to now. An invalid key prints a
message on stderr and exits with status 1.

### `textbench-uuid7`

```
textbench-uuid7 [-n COUNT]
```

Prints `COUNT` (default 10) freshly generated version 7 UUIDs, one per line.

## Library overview

### Tables — `textbench.tables`

```python
from textbench.tables import celsius_to_fahr, power

celsius_to_fahr(100)   # 212.0
power(2, 10)           # 1024
```

`fahr_to_celsius(fahr)` converts the other way. `celsius_table(lower, upper,
step)`, `fahrenheit_table(lower, upper, step)`, `power_table(count)`,
`limits_report()` return lists of formatted lines; `repeat_line(char,
count)` returns a repeated character followed by a newline. A non-positive
step or a negative exponent raises `ValueError`.

### Counting — `textbench.counting`

```python
from textbench.counting import count_chars, count_lines, word_count

count_chars("hello\n")          # 6
count_lines("a\nb\n")           # 2
print(word_count("one two\nthree\n").report(), end="")   # 2 3 14
```

`count_whitespace(text)` returns a `WhitespaceCounts`, `word_count(text)` a
`WordCount` and `digit_stats(text)` a `DigitStats`; each is a frozen
dataclass with a `report()` method that renders it as text.

### Filters — `textbench.filters`

```python
from textbench.filters import detab, entab, squeeze_blanks, escape_visible

detab("a\tb", 4)              # "a   b"
entab("        x", 4)         # "\t\tx"
squeeze_blanks("a    b")      # "a b"
escape_visible("a\tb\\c")     # "a\\tb\\\\c"
```

Also available: `copy_text(text)`, which takes a string, a readable text
stream or an iterable of strings, and `one_word_per_line(text)`. A
non-positive tab size raises `ValueError`.

### Histograms — `textbench.histogram`

`word_lengths(text, max_length)` returns a `Counter` of word lengths, long
words counted at `max_length`. `horizontal_histogram(counts, max_count)` and
`vertical_histogram(counts, max_count)` draw it with block characters.
`char_frequencies(text)` counts printable ASCII characters and
`frequency_histogram(text, max_count)` draws them.

### Lines — `textbench.lines`

```python
import io
from textbench.lines import read_lines, longest_line

lines = list(read_lines(io.StringIO("short\na much longer line\n")))
longest_line(lines)   # "a much longer line\n"
```

`read_lines(stream, limit)` yields lines with newlines kept, splitting lines
longer than `limit - 1` characters when a limit is given. `longest_line`
returns `None` when there is no non-empty line. `lines_at_least(lines,
threshold)`, `strip_trailing(lines)` and `reverse_lines(lines)` are
generators over lines.

### Folding — `textbench.fold`

`fold_line(line, width)` and `fold_text(text, width)` break long lines at
the last blank or tab within reach, or cut at exactly `width` characters
when there is none.

### UTF-8 reversal — `textbench.utf8`

`reverse_utf8(data)` reverses a UTF-8 byte string while keeping each
multi-byte character intact, raising `ValueError` on a truncated sequence;
`reverse_line(line)` does the same for a `str` and leaves a trailing newline
in place. `reverse_bytes(data)` is the plain byte reversal.

### C source tools — `textbench.csource`

```python
from textbench.csource import uncomment, check_brackets, LintError

uncomment('int x; /* note */\n')   # 'int x;  \n'

try:
    check_brackets("int main() { return 0; }\n)")
except LintError as err:
    print(err)
```

`check_brackets` ignores brackets in literals and comments and returns the
number of matched pairs. `matching_token(token)` maps each bracket to its
partner and raises `ValueError` for anything else.

### Base32 — `textbench.base32`

```python
from textbench import base32

text = base32.encode(b"hello")   # "NBSWY3DP"
base32.decode(text)              # b"hello"
```

White space in the input is ignored; malformed input raises
`base32.Base32Error`, a subclass of `ValueError`.

### Base64 — `textbench.base64`

`std_encoding()` and `url_encoding()` return a `Base64Encoding` for the
standard and URL-safe alphabets with `=` padding. `Base64Encoding(alphabet,
padding)` builds one for any 64 distinct characters; `padding=None` means
no padding. Each has `encode(data)` and `decode(text)`; malformed input
raises `ValueError`.

### One-time passwords — `textbench.totp`

```python
from textbench.totp import hotp, totp, encode_time_step

key = b"secret"
hotp(key, 0, 6)
totp(key, 1_700_000_000, 30, 6)
encode_time_step(1)   # b"\x00\x00\x00\x00\x00\x00\x00\x01"
```

`totp` uses the current time when `timestamp` is `None`.

### UUIDv7 — `textbench.uuid7`

```python
from textbench.uuid7 import UUIDv7Generator, format_uuid

gen = UUIDv7Generator()
print(format_uuid(gen.generate()))
```

Values from one generator have strictly increasing timestamps even when
several are made within the same millisecond; the clock can be replaced by
passing `clock=` to the generator. `epoch_ms()` returns the current Unix
time in milliseconds.

### Products — `textbench.products`

`connect(path)` opens an SQLite database, `insert_product(conn, product,
generator)` stores a `Product` under a fresh UUIDv7 id and returns it, and
`list_titles(conn)` and `first_product(conn)` read rows back.
`SAMPLE_PRODUCTS` holds two example products.

## What it does not do

- `textbench.products` does not create its table: the database must already
  have a `products` table with the columns `id`, `title`, `slug`,
  `description`, `base_price`, `inserted_at` and `updated_at`.
- The product functions are library-only; no command reads or writes the
  database.