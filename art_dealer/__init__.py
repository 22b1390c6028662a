"""Top-level package for the Art Dealer pattern game."""

from . import cards, hand, patterns, progress, state

__all__ = [
    "cards",
    "hand",
    "patterns",
    "progress",
    "state",
]
