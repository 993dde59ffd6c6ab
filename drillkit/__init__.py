"""Bit, digit, string and list exercises, and a binary-to-C-array converter."""

__version__ = "0.1.0"
__all__ = ["__version__"]