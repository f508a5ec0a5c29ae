from __future__ import annotations

from asyncio import Lock
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
import logging
import time
from typing import Any
import uuid

from .config import GAME_TTL_SECONDS
from .exceptions import GameNotFound
from .scoring import bowling

logger = logging.getLogger(__name__)


@dataclass
class Game:
    id: str
    state: dict[str, Any]
    created_at: float = field(default=0.0)
    updated_at: float = field(default=0.0)

    @property
    def engine(self) -> bowling.ScoreEngine:
        return self.state["engine"]


class GameStore:
    """In-memory registry of games with idle expiry and async-safe access.

    Every mutation runs under one lock, so rolls for a game are recorded one
    at a time even when requests overlap.
    """

    def __init__(
        self,
        ttl_seconds: float = GAME_TTL_SECONDS,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._lock = Lock()
        self._games: dict[str, Game] = {}

    def __len__(self) -> int:
        return len(self._games)

    def _expired(self, game: Game, now: float) -> bool:
        return game.updated_at + self._ttl <= now

    def _lookup(self, game_id: str, now: float) -> Game:
        game = self._games.get(game_id)
        if game is None:
            raise GameNotFound(game_id)
        if self._expired(game, now):
            self._games.pop(game_id, None)
            logger.info("Game %s expired after %.0fs idle", game_id, self._ttl)
            raise GameNotFound(game_id)
        return game

    def _purge(self, now: float) -> int:
        expired = [gid for gid, game in self._games.items() if self._expired(game, now)]
        for gid in expired:
            self._games.pop(gid, None)
        if expired:
            logger.info("Purged %d idle game(s)", len(expired))
        return len(expired)

    async def create(self, rolls: Iterable[int] = ()) -> Game:
        """Start a game, optionally replaying ``rolls`` into it.

        A roll the engine rejects aborts creation and nothing is stored. Idle
        games are purged before the new one is stored.
        """
        state = bowling.init_state({})
        for pins in rolls:
            state = bowling.apply({"type": "ROLL", "pins": pins}, state)
        game = Game(id=uuid.uuid4().hex, state=state)
        async with self._lock:
            now = self._clock()
            self._purge(now)
            game.created_at = game.updated_at = now
            self._games[game.id] = game
        logger.info("Created game %s", game.id)
        return game

    async def get(self, game_id: str) -> Game:
        async with self._lock:
            return self._lookup(game_id, self._clock())

    async def apply(self, game_id: str, event: dict[str, Any]) -> Game:
        async with self._lock:
            now = self._clock()
            game = self._lookup(game_id, now)
            game.state = bowling.apply(event, game.state)
            game.updated_at = now
            return game

    async def delete(self, game_id: str) -> None:
        async with self._lock:
            self._lookup(game_id, self._clock())
            self._games.pop(game_id, None)

    async def purge_expired(self) -> int:
        async with self._lock:
            return self._purge(self._clock())

    async def clear(self) -> None:
        async with self._lock:
            self._games.clear()


game_store = GameStore()


def get_game_store() -> GameStore:
    return game_store
