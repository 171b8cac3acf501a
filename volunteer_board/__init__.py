"""Ramadan volunteer sign-up board."""

__version__ = "1.0.0"
