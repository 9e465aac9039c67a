"""Session layer bridging the game engine and the database."""

import datetime as dt
import pickle
import zlib

from sqlmodel import Session

from .engine.actions import (
    get_exits,
    get_inventory,
    get_room_description,
)
from .engine.executor import handle_command
from .engine.state import GameState, new_game_state
from .engine.world import World
from .logging import get_logger
from .models import Player, SavedGame
from .users import saved_game_for

logger = get_logger(__name__)


def pack_state(state: GameState) -> bytes:
    return zlib.compress(pickle.dumps(state.snapshot()))


def unpack_state(world: World, blob: bytes) -> GameState:
    """Rebuild a live GameState from a stored snapshot."""
    state = new_game_state(world)
    state.restore(pickle.loads(zlib.decompress(blob)))
    return state


class GrueSession:
    """A player, their saved game row and the live GameState."""

    def __init__(
        self,
        db_session: Session,
        player: Player,
        saved_game: SavedGame | None,
        state: GameState,
        world: World,
        seed: int | None = None,
    ):
        self.db_session = db_session
        self.player = player
        self.saved_game = saved_game
        self.state = state
        self.world = world
        self.seed = seed

    @classmethod
    def load_or_create(
        cls,
        db_session: Session,
        player: Player,
        world: World,
        seed: int | None = None,
    ) -> "GrueSession":
        """Resume the player's unfinished game, or begin a new one."""
        saved_game = saved_game_for(db_session, player)

        if saved_game is not None and not saved_game.is_finished:
            state = unpack_state(world, saved_game.state_blob)
            logger.debug(
                "game_loaded", fingerprint=player.fingerprint, moves=saved_game.moves
            )
        else:
            state = new_game_state(world, seed=seed)
            player.games_played += 1
            if saved_game is not None:
                saved_game.started_at = dt.datetime.now(dt.UTC)
            logger.info(
                "new_game_started",
                fingerprint=player.fingerprint,
                games_played=player.games_played,
            )

        return cls(db_session, player, saved_game, state, world, seed)

    def process_command(self, raw_input: str) -> str:
        return handle_command(self.state, raw_input)

    def save(self) -> None:
        """Write the current state back to the player's saved game row."""
        now = dt.datetime.now(dt.UTC)
        blob = pack_state(self.state)

        if self.saved_game is None:
            self.saved_game = SavedGame(player_id=self.player.id, state_blob=blob)
            self.db_session.add(self.saved_game)
        else:
            self.saved_game.state_blob = blob
        self.saved_game.moves = self.state.moves
        self.saved_game.score = self.state.score
        self.saved_game.deaths = self.state.deaths
        self.saved_game.is_finished = self.state.is_finished
        self.saved_game.last_played = now

        self.db_session.add(self.player)
        self.db_session.commit()
        logger.debug(
            "game_saved",
            fingerprint=self.player.fingerprint,
            moves=self.state.moves,
            score=self.state.score,
            bytes=len(blob),
        )

    def get_room_description(self) -> str:
        return get_room_description(self.state)

    def get_exits(self) -> list[str]:
        return get_exits(self.state)

    def get_inventory(self) -> list[str]:
        return get_inventory(self.state)

    def reset(self) -> None:
        """Throw away the current game and start over."""
        self.state = new_game_state(self.world, seed=self.seed)
        self.player.games_played += 1
        if self.saved_game is not None:
            self.saved_game.started_at = dt.datetime.now(dt.UTC)
        logger.info("game_reset", fingerprint=self.player.fingerprint)
