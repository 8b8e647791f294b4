"""A tile-based maze game: collect every item, then reach the exit."""

__version__ = "0.1.0"