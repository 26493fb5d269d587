"""A small printf with a fixed set of conversions, and those conversions on their own."""

__version__ = "0.1.0"
__all__ = ["conversions", "printf"]