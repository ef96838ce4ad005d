"""A small printf-style formatter with a fixed set of conversion specifiers."""

__version__ = "0.1.0"
__all__ = ["conversions", "handlers", "printf"]