"""Box styles and the matching of drawn boxes against them."""

from dataclasses import dataclass

RUSH_TYPES = 5

_NUL = "\0"


def _char_at(text, index):
    """Return the character at ``index``, or NUL past the end of ``text``."""
    return text[index] if 0 <= index < len(text) else _NUL


@dataclass(frozen=True)
class RushStyle:
    """The characters one box style draws with."""

    vertical: str
    horizontal: str
    upper_left: str
    lower_left: str
    upper_right: str
    lower_right: str

    def _edge_matches(self, line, width, left, right):
        for col in range(width):
            if col == 0:
                expected = left
            elif col == width - 1:
                expected = right
            else:
                expected = self.horizontal
            if _char_at(line, col) != expected:
                return False
        return True

    def first_line_matches(self, line, width):
        """Whether ``line`` is this style's top edge of the given width."""
        if not self._edge_matches(line, width, self.upper_left, self.upper_right):
            return False
        return _char_at(line, width) in ("\n", _NUL)

    def middle_line_matches(self, line, width):
        """Whether ``line`` is one of this style's inner rows."""
        for col in range(width):
            expected = self.vertical if col in (0, width - 1) else " "
            if _char_at(line, col) != expected:
                return False
        return _char_at(line, width) == "\n"

    def last_line_matches(self, line, width):
        """Whether ``line`` is this style's bottom edge of the given width."""
        if not self._edge_matches(line, width, self.lower_left, self.lower_right):
            return False
        return _char_at(line, width) == "\n"


RUSH_STYLES = (
    RushStyle("|", "-", "o", "o", "o", "o"),
    RushStyle("*", "*", "/", "\\", "\\", "/"),
    RushStyle("B", "B", "A", "C", "A", "C"),
    RushStyle("B", "B", "A", "A", "C", "C"),
    RushStyle("B", "B", "A", "C", "C", "A"),
)


def count_matching_lines(text, width, length, rush_type):
    """Count the leading rows of ``text`` that fit style ``rush_type``."""
    if not 0 <= rush_type < RUSH_TYPES:
        raise ValueError(f"unknown rush type: {rush_type}")
    style = RUSH_STYLES[rush_type]
    stride = width + 1
    for line_no in range(length):
        start = line_no * stride
        line = text[start:start + stride]
        if line_no == 0:
            matched = style.first_line_matches(line, width)
        elif line_no == length - 1:
            matched = style.last_line_matches(line, width)
        else:
            matched = style.middle_line_matches(line, width)
        if not matched:
            return line_no
    return length


def matching_rush_types(text, width, length):
    """Return, in order, every rush type whose box ``text`` draws."""
    return [
        rush_type
        for rush_type in range(RUSH_TYPES)
        if count_matching_lines(text, width, length, rush_type) == length
    ]