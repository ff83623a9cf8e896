"""Welcome Page - Markdown wiki pages served straight from a directory."""

__version__ = "0.1.0"
