"""Command that names the box styles a drawing on standard input fits."""

import sys

from rushmatch.report import RushMatch, format_matches
from rushmatch.shapes import matching_rush_types


def get_width(text):
    """Length of the first line of ``text``."""
    for index, char in enumerate(text):
        if char in ("\n", "\0"):
            return index
    return len(text)


def get_length(text):
    """Number of newlines in ``text`` before any NUL character."""
    return text.split("\0", 1)[0].count("\n")


def describe(text):
    """Return the output line listing every style ``text`` matches."""
    width = get_width(text)
    length = get_length(text)
    matches = [
        RushMatch(rush_type, width, length)
        for rush_type in matching_rush_types(text, width, length)
    ]
    return format_matches(matches) + "\n"


def main(argv=None):
    """Read a drawing from standard input and print the styles it matches."""
    if argv is None:
        argv = sys.argv
    if not argv or not argv[0]:
        return 1
    text = sys.stdin.buffer.read().decode("latin-1")
    sys.stdout.write(describe(text))
    sys.stdout.flush()
    return 0