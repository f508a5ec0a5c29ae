from fastapi import HTTPException
from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code


class RollRejected(DomainException, ValueError):
    """A roll the score engine refused; the engine state is unchanged."""


class InvalidPinCount(RollRejected):
    def __init__(self, pins: object) -> None:
        super().__init__(
            status_code=422,
            title="Invalid pin count",
            detail=f"pin count must be an integer between 0 and 10, got {pins!r}",
            code="invalid_pin_count",
        )
        self.pins = pins


class FrameOverflow(RollRejected):
    def __init__(self, pins: int, standing: int, frame: int) -> None:
        super().__init__(
            status_code=422,
            title="Frame overflow",
            detail=(
                f"cannot knock down {pins} pins in frame {frame}; "
                f"only {standing} left standing"
            ),
            code="frame_overflow",
        )
        self.pins = pins
        self.standing = standing
        self.frame = frame


class GameAlreadyOver(RollRejected):
    def __init__(self) -> None:
        super().__init__(
            status_code=409,
            title="Game over",
            detail="the game is over; reset or start a new game",
            code="game_already_over",
        )


class GameNotFound(DomainException):
    def __init__(self, game_id: str) -> None:
        super().__init__(
            status_code=404,
            title="Game not found",
            detail=f"game '{game_id}' not found",
            code="game_not_found",
        )


def http_problem(
    status_code: int,
    detail: str,
    code: str,
    *,
    headers: Optional[dict[str, str]] = None,
) -> HTTPException:
    """Create an HTTPException with an attached problem code."""

    exc = HTTPException(status_code=status_code, detail=detail, headers=headers)
    setattr(exc, "code", code)
    return exc
