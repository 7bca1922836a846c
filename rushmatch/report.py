"""Formatting of matched box descriptions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RushMatch:
    """A box style that matched, with the box's dimensions."""

    rush_type: int
    width: int
    length: int

    def __str__(self):
        return f"[rush-0{self.rush_type}] [{self.width}] [{self.length}]"


def format_matches(matches):
    """Join matches with ``" || "``, or return ``"aucune"`` if there are none."""
    parts = [str(match) for match in matches]
    return " || ".join(parts) if parts else "aucune"