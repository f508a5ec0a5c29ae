import asyncio

import pytest

from app.exceptions import FrameOverflow, GameAlreadyOver, GameNotFound
from app.game_store import GameStore


@pytest.fixture
def store(clock):
    return GameStore(ttl_seconds=60, clock=clock)


def test_create_and_get(store):
    async def scenario():
        game = await store.create()
        fetched = await store.get(game.id)
        return game, fetched

    game, fetched = asyncio.run(scenario())
    assert fetched is game
    assert game.engine.rolls == ()
    assert len(store) == 1


def test_create_replays_rolls(store):
    game = asyncio.run(store.create([10, 7, 3]))
    assert game.engine.frames() == [(10,), (7, 3)]


def test_create_with_rejected_roll_stores_nothing(store):
    with pytest.raises(FrameOverflow):
        asyncio.run(store.create([6, 7]))
    assert len(store) == 0


def test_apply_records_rolls(store):
    async def scenario():
        game = await store.create()
        await store.apply(game.id, {"type": "ROLL", "pins": 4})
        return await store.apply(game.id, {"type": "ROLL", "pins": 5})

    game = asyncio.run(scenario())
    assert game.engine.frame_scores() == [9]


def test_apply_rejection_leaves_game_unchanged(store):
    async def scenario():
        game = await store.create([0] * 20)
        with pytest.raises(GameAlreadyOver):
            await store.apply(game.id, {"type": "ROLL", "pins": 0})
        return await store.get(game.id)

    game = asyncio.run(scenario())
    assert len(game.engine.rolls) == 20


def test_undo_swaps_in_replayed_engine(store):
    async def scenario():
        game = await store.create([3, 4, 5])
        return await store.apply(game.id, {"type": "UNDO"})

    game = asyncio.run(scenario())
    assert game.engine.rolls == (3, 4)


def test_idle_games_expire(store, clock):
    game = asyncio.run(store.create())
    clock.advance(61)
    with pytest.raises(GameNotFound):
        asyncio.run(store.get(game.id))
    assert len(store) == 0


def test_activity_keeps_game_alive(store, clock):
    game = asyncio.run(store.create())
    clock.advance(50)
    asyncio.run(store.apply(game.id, {"type": "ROLL", "pins": 3}))
    clock.advance(50)
    assert asyncio.run(store.get(game.id)).engine.rolls == (3,)


def test_purge_expired(store, clock):
    async def scenario():
        old = await store.create()
        clock.advance(45)
        fresh = await store.create()
        clock.advance(20)
        purged = await store.purge_expired()
        return old, fresh, purged

    old, fresh, purged = asyncio.run(scenario())
    assert purged == 1
    assert len(store) == 1
    assert asyncio.run(store.get(fresh.id)) is fresh


def test_delete_and_unknown_games(store):
    game = asyncio.run(store.create())
    asyncio.run(store.delete(game.id))
    with pytest.raises(GameNotFound):
        asyncio.run(store.get(game.id))
    with pytest.raises(GameNotFound):
        asyncio.run(store.delete("missing"))
    with pytest.raises(GameNotFound):
        asyncio.run(store.apply("missing", {"type": "ROLL", "pins": 1}))


def test_clear(store):
    asyncio.run(store.create())
    asyncio.run(store.create())
    asyncio.run(store.clear())
    assert len(store) == 0


def test_create_purges_abandoned_games(store, clock):
    async def scenario():
        for _ in range(50):
            await store.create()
        clock.advance(10_000)
        game = await store.create()
        await store.apply(game.id, {"type": "ROLL", "pins": 4})
        return game

    game = asyncio.run(scenario())
    assert len(store) == 1
    assert asyncio.run(store.get(game.id)) is game


def test_create_keeps_active_games(store, clock):
    first = asyncio.run(store.create())
    clock.advance(30)
    asyncio.run(store.create())
    assert len(store) == 2
    assert asyncio.run(store.get(first.id)) is first


def test_game_timestamps(store, clock):
    game = asyncio.run(store.create())
    assert game.created_at == game.updated_at == clock.now
    clock.advance(5)
    asyncio.run(store.apply(game.id, {"type": "ROLL", "pins": 2}))
    assert game.created_at == clock.now - 5
    assert game.updated_at == clock.now
