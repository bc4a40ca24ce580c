"""Daily puzzle solutions, one module per day, and an input reader."""

__version__ = "0.1.0"