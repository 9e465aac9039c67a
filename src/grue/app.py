"""Xitzin application factory for Grue."""

from importlib import resources
from pathlib import Path

from sqlmodel import Session, SQLModel, create_engine
from xitzin import Xitzin

from .config import Config
from .engine.loader import load_world
from .engine.world import World
from .logging import get_logger

logger = get_logger(__name__)


def get_world_path() -> Path:
    """Locate world.json inside the installed package."""
    return resources.files("grue.data").joinpath("world.json")


def create_app(config: Config | None = None, world: World | None = None) -> Xitzin:
    """Create and configure the Xitzin application.

    The world is loaded at startup unless an already loaded one is passed in.
    """
    config = config or Config.from_env()

    app = Xitzin(
        title="Grue",
        version="0.1.0",
        templates_dir=Path(__file__).parent / "templates",
    )

    engine = create_engine(config.database_url)
    app.state.engine = engine
    app.state.config = config

    @app.on_startup
    async def startup():
        """Create tables and load the world."""
        SQLModel.metadata.create_all(engine)
        logger.debug("database_setup_complete", url=config.database_url)

        loaded = world if world is not None else load_world(get_world_path())
        app.state.world = loaded
        logger.info(
            "world_loaded",
            rooms=len(loaded.rooms),
            objects=len(loaded.objects),
            nouns=len(loaded.vocabulary.nouns),
        )

    from .routes import home, play

    home.register_routes(app)
    play.register_routes(app)

    return app


def get_session(app: Xitzin) -> Session:
    """Open a database session bound to the app's engine."""
    return Session(app.state.engine)
