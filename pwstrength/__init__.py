"""Heuristic password strength checker."""

__version__ = "0.1.0"
