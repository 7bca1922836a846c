# rushmatch

`rushmatch` reads a rectangle drawn in text and tells you which of the five
rush box styles (`rush-00` to `rush-04`) could have drawn it, together with
the rectangle's width and height.

## Installation

```
pip install .
```

## Command line

Pipe a drawing into `rushmatch` on standard input:

```
$ printf 'o--o\n|  |\no--o\n' | rushmatch
[rush-00] [4] [3]
```

When several styles draw the same rectangle, every match is listed in style
order, separated by ` || `:

```
$ printf 'A\n' | rushmatch
[rush-02] [1] [1] || [rush-03] [1] [1] || [rush-04] [1] [1]
```

When no style matches, the answer is `aucune`:

```
$ printf 'hello\n' | rushmatch
aucune
```

The input is read as bytes and decoded as Latin-1. The width is the length of
the first line and the height is the number of newline characters. The command
exits with status 0 after printing its answer.

## The five styles

| Style   | Top left | Top right | Bottom left | Bottom right | Horizontal | Vertical |
|---------|----------|-----------|-------------|--------------|------------|----------|
| rush-00 | `o`      | `o`       | `o`         | `o`          | `-`        | `\|`     |
| rush-01 | `/`      | `\`       | `\`         | `/`          | `*`        | `*`      |
| rush-02 | `A`      | `A`       | `C`         | `C`          | `B`        | `B`      |
| rush-03 | `A`      | `C`       | `A`         | `C`          | `B`        | `B`      |
| rush-04 | `A`      | `C`       | `C`         | `A`          | `B`        | `B`      |

The inside of the rectangle is made of spaces, and every line ends with a
newline.

## Library use

```python
from rushmatch.cli import describe, get_width, get_length
from rushmatch.shapes import RUSH_STYLES, count_matching_lines, matching_rush_types

print(describe("o--o\n|  |\no--o\n"), end="")   # [rush-00] [4] [3]
print(matching_rush_types("AC\nAC\n", 2, 2))      # [3]
print(count_matching_lines("AC\nAC\n", 2, 2, 4))  # 1
```

- `rushmatch.shapes.RushStyle` holds the characters of one style and checks a
  single top, middle or bottom line against it (`first_line_matches`,
  `middle_line_matches`, `last_line_matches`). `RUSH_STYLES` holds the five
  styles in order.
- `count_matching_lines` counts how many leading rows fit a style; it raises
  `ValueError` for a style number outside 0 to 4.
- `rushmatch.report.RushMatch` is a matched style with the rectangle's
  dimensions; `str()` of it gives `[rush-0N] [width] [height]`.
  `rushmatch.report.format_matches` joins a sequence of them into the same
  one-line report the command prints, or returns `aucune` when it is empty.

## What it does not do

`rushmatch` only recognises rectangles. It does not draw boxes in any of the
styles, and it does not accept the drawing from a file or argument; it reads
standard input only.

## Running the tests

```
pip install .[test]
pytest
```