"""Structural validator for numeric grid files."""

__version__ = "0.1.0"
