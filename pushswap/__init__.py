"""Two-stack integer sorting with a fixed set of moves, plus small text and buffer helpers."""

__version__ = "1.0.0"