"""Scoring engine and scoreboard rendering for ten-pin bowling."""

from . import bowling, scoreboard

__all__ = [
    "bowling",
    "scoreboard",
]
