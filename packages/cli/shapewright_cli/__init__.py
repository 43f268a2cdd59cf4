"""Shapewright CLI — select instance types from the command line."""

__version__ = "0.1.0"
