"""Map loading and validation for a small tile-based collect-and-exit game."""

__version__ = "0.1.0"