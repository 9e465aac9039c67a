"""Players are known only by the fingerprint of their client certificate."""

import datetime as dt
from dataclasses import dataclass

from sqlmodel import Session, select

from .engine.actions import rank_for
from .logging import get_logger
from .models import Player, SavedGame

logger = get_logger(__name__)


@dataclass(frozen=True)
class Progress:
    """How a player's current game stands, for the title page."""

    score: int
    moves: int
    deaths: int
    rank: str
    is_finished: bool
    last_played: dt.datetime


def find_player(session: Session, fingerprint: str) -> Player | None:
    return session.exec(select(Player).where(Player.fingerprint == fingerprint)).first()


def get_or_create_player(session: Session, fingerprint: str) -> Player:
    """Fetch the player for a fingerprint, creating one on first visit."""
    player = find_player(session, fingerprint)
    if player is None:
        player = Player(fingerprint=fingerprint)
        session.add(player)
        logger.info("player_created", fingerprint=fingerprint)
    else:
        player.last_seen = dt.datetime.now(dt.UTC)
        logger.debug(
            "player_accessed", fingerprint=fingerprint, games=player.games_played
        )

    session.commit()
    session.refresh(player)
    return player


def saved_game_for(session: Session, player: Player) -> SavedGame | None:
    return session.exec(
        select(SavedGame).where(SavedGame.player_id == player.id)
    ).first()


def progress_for(session: Session, fingerprint: str) -> Progress | None:
    """Summary of the caller's saved game, or None if they have not played.

    Read-only: an unknown fingerprint does not create a player.
    """
    player = find_player(session, fingerprint)
    if player is None:
        return None
    saved = saved_game_for(session, player)
    if saved is None:
        return None
    return Progress(
        score=saved.score,
        moves=saved.moves,
        deaths=saved.deaths,
        rank=rank_for(saved.score),
        is_finished=saved.is_finished,
        last_played=saved.last_played,
    )
