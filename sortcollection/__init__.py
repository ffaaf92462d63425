"""Sorting algorithms grouped by category, array helpers and an interactive menu."""

__version__ = "1.0.0"