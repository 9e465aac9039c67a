"""Front pages: the title screen, help and about."""

from sqlmodel import Session
from xitzin import Request, Xitzin
from xitzin.auth import get_identity

from ..engine.state import MAX_SCORE
from ..engine.vocabulary import DIRECTIONS, VERBS
from ..users import progress_for


def _command_words() -> str:
    return ", ".join(sorted(v.upper() for v in VERBS))


def register_routes(app: Xitzin) -> None:
    @app.gemini("/", name="home")
    def home(request: Request):
        """Title screen. A returning player also sees where their game stands."""
        identity = get_identity(request)
        progress = None
        if identity is not None:
            with Session(request.app.state.engine) as db_session:
                progress = progress_for(db_session, identity.fingerprint)
        return app.template("home.gmi", progress=progress, max_score=MAX_SCORE)

    @app.gemini("/help", name="help")
    def help_page(request: Request):
        return app.template(
            "help.gmi",
            verbs=_command_words(),
            directions=", ".join(d.upper() for d in DIRECTIONS),
        )

    @app.gemini("/about", name="about")
    def about(request: Request):
        world = request.app.state.world
        return app.template(
            "about.gmi",
            rooms=len(world.rooms),
            objects=len(world.objects),
            max_score=MAX_SCORE,
        )
