"""Disc golf throw recommendation and flight path engine."""

__version__ = "0.1.0"
