from typing import Any, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class GameCreate(BaseModel):
    # Checked by validate_rolls so malformed entries get a per-roll message.
    rolls: List[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class RollIn(BaseModel):
    pins: int = Field(..., strict=True)

    model_config = ConfigDict(extra="forbid")


class EventIn(BaseModel):
    type: Literal["ROLL", "UNDO", "RESET"]
    pins: Optional[int] = Field(default=None, strict=True)

    @model_validator(mode="after")
    def _validate_roll(self) -> "EventIn":
        if self.type == "ROLL" and self.pins is None:
            raise ValueError("pins is required for ROLL events")
        return self


class FrameOut(BaseModel):
    frame: int
    rolls: List[int]
    symbols: List[str]
    score: Optional[int] = None
    cumulative: Optional[int] = None
    display: str


class ScoreboardOut(BaseModel):
    id: str
    frames: List[FrameOut]
    total: int
    game_over: bool = Field(alias="gameOver")
    frame: Optional[int] = None
    roll: Optional[int] = None
    pins_standing: int = Field(alias="pinsStanding")

    model_config = ConfigDict(populate_by_name=True)
