"""Console calculator for arithmetic written in Spanish number words, with a user file and event log."""

__version__ = "1.0.0"
__all__ = ["__version__"]