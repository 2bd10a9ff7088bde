"""Fetch AtCoder sample cases and verify solutions against them locally."""

__version__ = "0.1.0"
