"""Database models for Grue."""

import datetime as dt

from sqlmodel import Field, SQLModel


def _now() -> dt.datetime:
    return dt.datetime.now(dt.UTC)


class Player(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    fingerprint: str = Field(unique=True, index=True)
    games_played: int = 0
    created_at: dt.datetime = Field(default_factory=_now)
    last_seen: dt.datetime = Field(default_factory=_now)


class SavedGame(SQLModel, table=True):
    """The single game in progress for a player."""

    id: int | None = Field(default=None, primary_key=True)
    player_id: int = Field(foreign_key="player.id", unique=True, index=True)
    state_blob: bytes  # zlib-compressed pickle of GameState.snapshot()
    moves: int = 0
    score: int = 0
    deaths: int = 0
    is_finished: bool = False
    started_at: dt.datetime = Field(default_factory=_now)
    last_played: dt.datetime = Field(default_factory=_now)
