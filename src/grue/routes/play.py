"""Gameplay routes. Every one of them needs a client certificate."""

from contextlib import contextmanager

from sqlmodel import Session
from xitzin import Redirect, Request, Xitzin
from xitzin.auth import get_identity, require_certificate

from ..engine.actions import rank_for
from ..engine.state import MAX_SCORE
from ..session import GrueSession
from ..users import get_or_create_player


@contextmanager
def _game_session(request: Request):
    """Load the caller's game and close the database session afterwards."""
    identity = get_identity(request)
    db_session = Session(request.app.state.engine)
    try:
        player = get_or_create_player(db_session, identity.fingerprint)
        yield GrueSession.load_or_create(
            db_session,
            player,
            request.app.state.world,
            seed=request.app.state.config.seed,
        )
    finally:
        db_session.close()


def _render_play(app: Xitzin, game: GrueSession, message: str = ""):
    state = game.state
    return app.template(
        "play.gmi",
        description=game.get_room_description(),
        exits=game.get_exits(),
        message=message,
        moves=state.moves,
        score=state.score,
        dead=state.dead,
        is_finished=state.is_finished,
    )


def _run(app: Xitzin, request: Request, command: str):
    with _game_session(request) as game:
        message = game.process_command(command)
        game.save()
        return _render_play(app, game, message=message)


def _register_action_routes(app: Xitzin) -> None:
    @app.gemini("/play", name="play")
    @require_certificate
    def play(request: Request):
        """Main game view."""
        with _game_session(request) as game:
            game.save()
            return _render_play(app, game)

    @app.gemini("/go/{direction}", name="go")
    @require_certificate
    def go(request: Request, direction: str):
        """Movement through a clickable exit link."""
        return _run(app, request, direction)

    @app.input("/cmd", prompt="What do you want to do?", name="cmd")
    @require_certificate
    def cmd(request: Request, query: str):
        """Free-form command entry."""
        return _run(app, request, query)

    @app.gemini("/look", name="look")
    @require_certificate
    def look(request: Request):
        return _run(app, request, "look")


def _register_info_routes(app: Xitzin) -> None:
    @app.gemini("/inventory", name="inventory")
    @require_certificate
    def inventory(request: Request):
        """Show what the player carries without spending a turn."""
        with _game_session(request) as game:
            items = game.get_inventory()
            if items:
                message = "You are carrying:\n" + "\n".join(f"  {i}" for i in items)
            else:
                message = "You are empty-handed."
            return _render_play(app, game, message=message)

    @app.gemini("/score", name="score")
    @require_certificate
    def score(request: Request):
        with _game_session(request) as game:
            state = game.state
            message = (
                f"Your score is {state.score} (total of {MAX_SCORE} points), "
                f"in {state.moves} moves.\n"
                f"This gives you the rank of {rank_for(state.score)}."
            )
            return _render_play(app, game, message=message)

    @app.input(
        "/new",
        prompt="Are you sure you want to start over? Type YES to confirm:",
        name="new_game",
    )
    @require_certificate
    def new_game(request: Request, query: str):
        """Start over after confirmation."""
        with _game_session(request) as game:
            if query.strip().upper() != "YES":
                return Redirect("/play")
            game.reset()
            game.save()
            return _render_play(app, game, message="A new game begins.")


def register_routes(app: Xitzin) -> None:
    _register_action_routes(app)
    _register_info_routes(app)
