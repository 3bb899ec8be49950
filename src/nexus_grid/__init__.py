"""NexusGrid: a two-player hex territory game."""

__version__ = "0.1.0"
