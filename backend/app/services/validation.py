from typing import Any, List, Optional, Sequence

# Twelve strikes is the shortest complete game; 21 rolls the longest.
MAX_ROLLS_PER_GAME = 21


class ValidationError(Exception):
    """Raised when a submitted roll list is malformed."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def validate_rolls(
    rolls: Sequence[Any],
    *,
    max_rolls: Optional[int] = MAX_ROLLS_PER_GAME,
) -> List[int]:
    """Check a list of pin counts submitted to seed a game.

    Rules:
    - ``rolls`` must be a list or tuple (strings are rejected)
    - at most ``max_rolls`` entries (if provided)
    - each entry must be an ``int`` (booleans, floats and strings are rejected)

    Pin ranges and frame caps are left to the score engine, which reports
    them with the roll's position in the game.
    """

    if not isinstance(rolls, (list, tuple)):
        raise ValidationError("Rolls must be provided as a list of integers.")
    if max_rolls is not None and len(rolls) > max_rolls:
        raise ValidationError(f"Too many rolls. Max allowed is {max_rolls}.")

    normalized: List[int] = []
    for index, raw in enumerate(rolls, start=1):
        # Reject booleans explicitly (bool is a subclass of int in Python)
        if isinstance(raw, bool):
            raise ValidationError(f"Roll #{index} must be an integer (not a boolean).")
        if not isinstance(raw, int):
            raise ValidationError(f"Roll #{index} must be an integer.")
        normalized.append(raw)

    return normalized
