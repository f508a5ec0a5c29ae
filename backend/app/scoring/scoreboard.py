"""Scoreboard rendering for a bowling game.

Turns the engine's rolls and frame scores into what a scoreboard shows:
``X`` for a strike, ``/`` for a spare, the miss symbol for a gutter ball and
the pin count otherwise, plus cumulative totals with a placeholder for frames
still waiting on bonus rolls.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..config import SCOREBOARD_MISS_SYMBOL, SCOREBOARD_PLACEHOLDER
from .bowling import FRAMES, PINS, ScoreEngine


def roll_symbols(frame_rolls: Sequence[int], *, miss: str = SCOREBOARD_MISS_SYMBOL) -> List[str]:
    symbols: List[str] = []
    rack = 0
    balls = 0  # deliveries at the current rack
    for pins in frame_rolls:
        if balls == 0 and pins == PINS:
            symbols.append("X")
        elif balls > 0 and rack + pins == PINS:
            symbols.append("/")
        elif pins == 0:
            symbols.append(miss)
        else:
            symbols.append(str(pins))
        rack += pins
        balls += 1
        if rack == PINS:
            rack = 0
            balls = 0
    return symbols


def render(
    engine: ScoreEngine,
    *,
    placeholder: str = SCOREBOARD_PLACEHOLDER,
    miss: str = SCOREBOARD_MISS_SYMBOL,
) -> List[Dict]:
    """Return all ten frames as display rows.

    Frames not yet started have no rolls and an empty ``display``. A started
    frame whose cumulative total is not known yet shows ``placeholder``.
    """
    frames = engine.frames()
    scores = engine.frame_scores()
    totals = engine.running_totals()

    rows: List[Dict] = []
    for i in range(FRAMES):
        if i < len(frames):
            cumulative: Optional[int] = totals[i]
            rows.append(
                {
                    "frame": i + 1,
                    "rolls": list(frames[i]),
                    "symbols": roll_symbols(frames[i], miss=miss),
                    "score": scores[i],
                    "cumulative": cumulative,
                    "display": placeholder if cumulative is None else str(cumulative),
                }
            )
        else:
            rows.append(
                {
                    "frame": i + 1,
                    "rolls": [],
                    "symbols": [],
                    "score": None,
                    "cumulative": None,
                    "display": "",
                }
            )
    return rows
