"""Classic algorithm puzzles grouped by technique, as importable functions."""

__version__ = "0.1.0"