"""Recognise which rush box style drew a text rectangle."""

__version__ = "1.0.0"
__all__ = ["shapes", "report", "cli"]