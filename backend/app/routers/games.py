# backend/app/routers/games.py
import logging

from fastapi import APIRouter, Depends, Response

from ..exceptions import RollRejected, http_problem
from ..game_store import Game, GameStore, get_game_store
from ..schemas import EventIn, FrameOut, GameCreate, RollIn, ScoreboardOut
from ..scoring import bowling, scoreboard
from ..services.validation import ValidationError, validate_rolls

logger = logging.getLogger(__name__)

# Resource-only prefix
router = APIRouter(prefix="/games", tags=["games"])


def _scoreboard(game: Game) -> ScoreboardOut:
    summary = bowling.summary(game.state)
    return ScoreboardOut(
        id=game.id,
        frames=[FrameOut(**row) for row in scoreboard.render(game.engine)],
        total=summary["total"],
        game_over=summary["gameOver"],
        frame=summary["frame"],
        roll=summary["roll"],
        pins_standing=summary["pinsStanding"],
    )


async def _apply(store: GameStore, game_id: str, event: dict) -> ScoreboardOut:
    try:
        game = await store.apply(game_id, event)
    except RollRejected as exc:
        logger.warning("Rejected %s for game %s: %s", event, game_id, exc.detail)
        raise
    except ValueError as exc:
        raise http_problem(
            status_code=400,
            detail=str(exc),
            code="game_event_invalid",
        )
    return _scoreboard(game)


# POST /api/v0/games
@router.post("", response_model=ScoreboardOut, status_code=201)
async def create_game(
    body: GameCreate | None = None,
    store: GameStore = Depends(get_game_store),
):
    try:
        rolls = validate_rolls(body.rolls if body else [])
    except ValidationError as e:
        raise http_problem(
            status_code=422,
            detail=str(e),
            code="game_validation_error",
        )
    game = await store.create(rolls)
    return _scoreboard(game)


# GET /api/v0/games/{game_id}
@router.get("/{game_id}", response_model=ScoreboardOut)
async def get_game(game_id: str, store: GameStore = Depends(get_game_store)):
    return _scoreboard(await store.get(game_id))


# POST /api/v0/games/{game_id}/rolls
@router.post("/{game_id}/rolls", response_model=ScoreboardOut)
async def record_roll(
    game_id: str,
    body: RollIn,
    store: GameStore = Depends(get_game_store),
):
    return await _apply(store, game_id, {"type": "ROLL", "pins": body.pins})


# POST /api/v0/games/{game_id}/events
@router.post("/{game_id}/events", response_model=ScoreboardOut)
async def append_event(
    game_id: str,
    ev: EventIn,
    store: GameStore = Depends(get_game_store),
):
    return await _apply(store, game_id, ev.model_dump())


# POST /api/v0/games/{game_id}/reset
@router.post("/{game_id}/reset", response_model=ScoreboardOut)
async def reset_game(game_id: str, store: GameStore = Depends(get_game_store)):
    return await _apply(store, game_id, {"type": "RESET"})


@router.delete("/{game_id}", status_code=204)
async def delete_game(game_id: str, store: GameStore = Depends(get_game_store)):
    await store.delete(game_id)
    return Response(status_code=204)
