"""Classic competitive-programming algorithms and data structures."""

__version__ = "0.1.0"