"""Runtime helpers for NexusGrid."""

from .helpers import configure_logging

try:
    from .arcade_runtime import ArcadeFrameClock, ArcadeWindowController, MouseClick, TextCache
except ModuleNotFoundError:
    pass

__all__ = [
    "ArcadeFrameClock",
    "ArcadeWindowController",
    "MouseClick",
    "TextCache",
    "configure_logging",
]
