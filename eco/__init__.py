"""Eco Habits backend."""

__version__ = "0.1.0"
