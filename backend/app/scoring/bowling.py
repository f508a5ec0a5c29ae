"""Ten-pin bowling scoring engine.

Rolls are recorded one delivery at a time. Frame scores are never stored:
they are recomputed from the roll history on every query, so a strike or
spare resolves as soon as the rolls it depends on have been recorded.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from ..exceptions import FrameOverflow, GameAlreadyOver, InvalidPinCount

logger = logging.getLogger(__name__)

FRAMES = 10
PINS = 10


class FrameCursor(NamedTuple):
    frame: int
    roll: int


class ScoreEngine:
    """Score keeper for a single game of one bowler.

    The engine does no locking; callers must not record rolls concurrently.
    """

    def __init__(self) -> None:
        self.reset()

    @classmethod
    def from_rolls(cls, rolls: Iterable[int]) -> "ScoreEngine":
        """Build an engine by replaying ``rolls`` in order."""
        engine = cls()
        for pins in rolls:
            engine.record_roll(pins)
        return engine

    def reset(self) -> None:
        self._rolls: List[int] = []
        # Index into ``_rolls`` of the first roll of every frame started.
        self._frame_starts: List[int] = []
        self._frame = 1
        self._roll = 1
        self._game_over = False

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------
    def record_roll(self, pins: int) -> None:
        """Record one delivery that knocked down ``pins`` pins.

        Raises:
            InvalidPinCount: ``pins`` is not an integer in ``[0, 10]``.
            GameAlreadyOver: the tenth frame is already complete.
            FrameOverflow: more pins than are standing in the current rack.

        Nothing is recorded when an exception is raised.
        """
        if isinstance(pins, bool) or not isinstance(pins, int):
            raise InvalidPinCount(pins)
        if not 0 <= pins <= PINS:
            raise InvalidPinCount(pins)
        if self._game_over:
            raise GameAlreadyOver()
        standing = self.pins_standing()
        if pins > standing:
            raise FrameOverflow(pins, standing, self._frame)

        if self._roll == 1:
            self._frame_starts.append(len(self._rolls))
        self._rolls.append(pins)
        logger.debug("frame %d roll %d: %d pins", self._frame, self._roll, pins)
        self._advance()

    def _advance(self) -> None:
        frame_rolls = self._rolls[self._frame_starts[-1]:]
        if self._frame < FRAMES:
            if frame_rolls[0] == PINS or len(frame_rolls) == 2:
                self._frame += 1
                self._roll = 1
            else:
                self._roll += 1
            return

        # Tenth frame: a third roll only follows a strike or a spare.
        if len(frame_rolls) == 3 or (len(frame_rolls) == 2 and sum(frame_rolls) < PINS):
            self._game_over = True
            logger.info("game over, final score %d", self.total_score())
        else:
            self._roll += 1

    def _current_frame_rolls(self) -> List[int]:
        """Rolls already made in the frame the next roll belongs to."""
        if self._roll == 1:
            return []
        return self._rolls[self._frame_starts[-1]:]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def pins_standing(self) -> int:
        """Most pins the next roll may knock down; ``0`` once the game is over."""
        if self._game_over:
            return 0
        rack = 0
        for pins in self._current_frame_rolls():
            rack += pins
            if rack == PINS:
                # Only reachable mid-frame in the tenth: the pins are reset.
                rack = 0
        return PINS - rack

    def is_game_over(self) -> bool:
        return self._game_over

    @property
    def rolls(self) -> Tuple[int, ...]:
        return tuple(self._rolls)

    @property
    def cursor(self) -> Optional[FrameCursor]:
        """Where the next roll goes, or ``None`` when the game is over."""
        if self._game_over:
            return None
        return FrameCursor(self._frame, self._roll)

    def frames(self) -> List[Tuple[int, ...]]:
        """Rolls of every frame started so far, grouped by frame."""
        bounds = self._frame_starts + [len(self._rolls)]
        return [tuple(self._rolls[bounds[i]:bounds[i + 1]]) for i in range(len(self._frame_starts))]

    def frame_scores(self) -> List[Optional[int]]:
        """Score of every frame started so far; ``None`` marks a pending frame."""
        return [self._frame_score(i) for i in range(len(self._frame_starts))]

    def _frame_score(self, index: int) -> Optional[int]:
        rolls = self._rolls
        start = self._frame_starts[index]
        if index == FRAMES - 1:
            return sum(rolls[start:]) if self._game_over else None

        first = rolls[start]
        if first == PINS:
            bonus = rolls[start + 1:start + 3]
            return PINS + sum(bonus) if len(bonus) == 2 else None
        if start + 1 >= len(rolls):
            return None
        second = rolls[start + 1]
        if first + second == PINS:
            bonus = rolls[start + 2:start + 3]
            return PINS + bonus[0] if bonus else None
        return first + second

    def running_totals(self) -> List[Optional[int]]:
        """Cumulative totals per frame, ``None`` from the first pending frame on."""
        totals: List[Optional[int]] = []
        running: Optional[int] = 0
        for score in self.frame_scores():
            if running is None or score is None:
                running = None
            else:
                running += score
            totals.append(running)
        return totals

    def total_score(self) -> int:
        """Sum of the resolved frames; the official score once the game is over."""
        return sum(score for score in self.frame_scores() if score is not None)


# ----------------------------------------------------------------------
# Event interface shared by the scoring modules
# ----------------------------------------------------------------------
def init_state(config: Dict) -> Dict:
    return {"config": config, "engine": ScoreEngine()}


def apply(event: Dict, state: Dict) -> Dict:
    kind = event.get("type")
    engine: ScoreEngine = state["engine"]
    if kind == "ROLL":
        engine.record_roll(event.get("pins"))
    elif kind == "UNDO":
        rolls = engine.rolls
        if not rolls:
            raise ValueError("no rolls to undo")
        state["engine"] = ScoreEngine.from_rolls(rolls[:-1])
    elif kind == "RESET":
        engine.reset()
    else:
        raise ValueError("invalid bowling event")
    return state


def summary(state: Dict) -> Dict:
    engine: ScoreEngine = state["engine"]
    cursor = engine.cursor
    return {
        "rolls": list(engine.rolls),
        "frames": [list(f) for f in engine.frames()],
        "scores": engine.frame_scores(),
        "totals": engine.running_totals(),
        "total": engine.total_score(),
        "gameOver": engine.is_game_over(),
        "frame": cursor.frame if cursor else None,
        "roll": cursor.roll if cursor else None,
        "pinsStanding": engine.pins_standing(),
    }
