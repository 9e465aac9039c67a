"""Grue: a Zork-style interactive fiction engine served over Gemini."""

from .app import create_app, get_world_path
from .config import Config
from .engine.loader import WorldDataError, load_world
from .logging import configure_logging, get_logger

__all__ = ["main", "create_app", "Config"]


def main() -> None:
    """Validate the world data, then run the Gemini server.

    A broken world.json stops the process before it binds a port.
    """
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
        hash_fingerprints=config.hash_fingerprints,
    )
    logger = get_logger(__name__)

    try:
        world = load_world(get_world_path())
    except WorldDataError as exc:
        logger.error("world_data_invalid", error=str(exc))
        raise SystemExit(1) from exc

    logger.info(
        "application_starting",
        host=config.host,
        port=config.port,
        log_level=config.log_level,
        seeded=config.seed is not None,
        start_room=world.start_room,
    )

    app = create_app(config, world=world)
    app.run(
        host=config.host,
        port=config.port,
        certfile=str(config.certfile) if config.certfile else None,
        keyfile=str(config.keyfile) if config.keyfile else None,
    )
