"""Printf-style formatting with exact float rendering, plus C-style character, string and linked-list helpers."""

__version__ = "0.1.0"