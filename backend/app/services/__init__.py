"""Internal application services (pure helpers, no I/O)."""

from .validation import MAX_ROLLS_PER_GAME, ValidationError, validate_rolls

__all__ = [
    "MAX_ROLLS_PER_GAME",
    "validate_rolls",
    "ValidationError",
]
