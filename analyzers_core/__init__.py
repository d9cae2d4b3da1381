"""Core building blocks for static analysis of PHP code."""

__version__ = "0.1.0"
