# primer

A collection of small, self-contained programs and libraries that show
common programming techniques at work: counting lines, echoing arguments,
fetching URLs, converting temperatures, drawing fractals, figures and
surfaces, sorting with trees, encoding JSON, searching an issue tracker,
deep equality, bzip2 compression and more.

Most pieces are usable both as a library and as a command.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command             | What it does                                                          |
|---------------------|-----------------------------------------------------------------------|
| `primer-dup`        | Prints lines that appear more than once, with their counts            |
| `primer-echo`       | Prints its arguments (`-n` omits the newline, `-s` sets the separator) |
| `primer-fetch`      | Prints the content found at each URL                                  |
| `primer-fetchall`   | Fetches URLs concurrently and reports times and sizes                 |
| `primer-cf`         | Shows each number as Celsius and Fahrenheit, converted both ways      |
| `primer-text`       | Subcommands `basename`, `comma` and `printints`                       |
| `primer-lissajous`  | Writes an animated GIF of a random Lissajous figure; `web` serves one per request on localhost:8000 |
| `primer-mandelbrot` | Writes a PNG image; `--func` picks `mandelbrot`, `acos`, `sqrt` or `newton` |
| `primer-surface`    | Writes an SVG rendering of the surface sin(r)/r                       |
| `primer-jpeg`       | Reads a PNG or JPEG image from standard input and writes it as JPEG   |
| `primer-charcount`  | Subcommands `charcount` (character and UTF-8 length counts) and `dedup` |
| `primer-movie`      | Prints a list of movies as compact JSON, indented JSON and titles     |
| `primer-digest`     | Compares the SHA-256 digests of two strings (default `x` and `X`)     |
| `primer-issues`     | Searches GitHub issues; `--format` is `table`, `html` or `report`     |
| `primer-bzipper`    | Compresses standard input with bzip2 to standard output               |

Some examples:

```
primer-echo -s , a b c
primer-cf 212 -40
primer-dup notes.txt todo.txt
primer-text comma 1234567890
primer-mandelbrot > mandelbrot.png
primer-mandelbrot | primer-jpeg > mandelbrot.jpg
primer-bzipper < big.log > big.log.bz2
```

## Library use

Temperatures:

```python
from primer.tempconv import Celsius, c_to_f, f_to_c

print(f_to_c(212.0))          # 100°C
print(c_to_f(Celsius(100)))   # 212°F
```

Palindromes, ignoring case and non-letters:

```python
from primer.word import is_palindrome

is_palindrome("A man, a plan, a canal: Panama")   # True
```

Deep equality that copes with cycles:

```python
from primer.equal import equal

equal([1, 2, 3], [1, 2, 3])   # True
```

Streaming bzip2 compression (the output stream is left open):

```python
from primer.bzip import Writer

with Writer(out) as w:
    w.write(b"hello")
```

Other modules: `primer.popcount` (`pop_count`), `primer.treesort` (`sort`),
`primer.graph` (`Graph`), `primer.netflag` (`Flags` and helpers),
`primer.shapes` (`Point`, `Circle`, `Wheel`), `primer.autoescape`
(`render`, `HTML`), `primer.github` (`search_issues`, `parse_result`) and
`primer.methods` (`print_methods`).

## What is not included

- No standalone HTTP echo, counter or request-dump servers; the only server
  is the `web` mode of `primer-lissajous`.
- No search endpoint that fills records from query parameters.
- No S-expression encoding or decoding, no structural display of values, and
  no generic value formatter.
- No list growth, reversal or rotation helpers.