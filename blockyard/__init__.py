"""Block-grid snake game, a small program launcher and an HTTP request helper."""

__version__ = "0.1.0"