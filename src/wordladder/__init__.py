"""wordladder — one-edit word graphs with precomputed shortest ladders."""

__version__ = "0.1.0"
