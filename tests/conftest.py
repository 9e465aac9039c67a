"""Shared test fixtures for Grue."""

from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from grue.app import create_app, get_world_path
from grue.config import Config
from grue.engine.flags import ObjectFlag
from grue.engine.loader import load_world
from grue.engine.state import LAMP, PLAYER, GameState, new_game_state
from grue.engine.world import World
from grue.models import Player

SEED = 1234


@pytest.fixture(scope="session")
def world() -> World:
    return load_world(get_world_path())


@pytest.fixture
def state(world: World) -> GameState:
    return new_game_state(world, seed=SEED)


@pytest.fixture
def lit_lamp(state: GameState) -> GameState:
    """The player carries the brass lantern, switched on."""
    state.move_object(LAMP, PLAYER)
    state.set_object_flag(LAMP, ObjectFlag.ON)
    state.drain_changes()
    return state


@pytest.fixture
def db_engine(tmp_path: Path):
    engine = create_engine(f"sqlite:///{tmp_path}/test.db")
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def db_session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def test_player(db_session: Session) -> Player:
    player = Player(fingerprint="test-fingerprint-abc123")
    db_session.add(player)
    db_session.commit()
    db_session.refresh(player)
    return player


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    return Config(database_url=f"sqlite:///{tmp_path}/test.db", seed=SEED)


@pytest.fixture
def app(test_config: Config):
    return create_app(test_config)


@pytest.fixture
def client(app):
    from xitzin.testing import test_app

    with test_app(app) as client:
        yield client


@pytest.fixture
def auth_client(client):
    return client.with_certificate("test-fingerprint-abc123")
