"""What a ghost can and cannot do."""

from typing import TYPE_CHECKING

from .narration import Narration
from .state import FOREST_1, SOUTH_TEMPLE
from .vocabulary import Vocabulary

if TYPE_CHECKING:
    from .state import GameState

# Verbs that behave normally after death
ALLOWED_VERBS = frozenset(
    {"brief", "verbose", "superbrief", "version", "save", "restore", "quit", "restart"}
)

REFUSALS = {
    **dict.fromkeys(("attack", "wave"), "All such attacks are vain in your condition."),
    **dict.fromkeys(
        ("open", "close", "eat", "drink", "turn", "extinguish"),
        "Even such an action is beyond your capabilities.",
    ),
    "wait": "Might as well. You've got an eternity.",
    "light": "You need no light to guide you.",
    "score": "You're dead! How can you think of your score?",
    **dict.fromkeys(("take", "touch", "put", "give"), "Your hand passes through its object."),
    **dict.fromkeys(("drop", "throw", "inventory"), "You have no possessions."),
    "diagnose": "You are dead.",
}
DEFAULT_REFUSAL = "You can't even do that."


def is_allowed(verb: str) -> bool:
    return verb in ALLOWED_VERBS or Vocabulary.is_direction(verb)


def refusal(verb: str) -> str:
    return REFUSALS.get(verb, DEFAULT_REFUSAL)


def look(state: "GameState", description: str, out: Narration) -> None:
    """Describe the room the way a spirit sees it."""
    if state.room.objects:
        out.say("The room looks strange and unearthly and objects appear indistinct.")
    else:
        out.say("The room looks strange and unearthly.")
    if not state.is_lit():
        out.say("Although there is no light, the room seems dimly illuminated.")
    out.say(description)


def pray(state: "GameState", out: Narration) -> bool:
    """Resurrection, available only at the altar."""
    if state.current_room != SOUTH_TEMPLE:
        out.say("Your prayers are not heard.")
        return False
    out.say(
        "From the distance the sound of a lone trumpet is heard. The room "
        "becomes very bright and you feel disembodied. In a moment, the "
        "brightness fades and you find yourself rising as if from a long "
        "sleep, deep in the woods. In the distance you can faintly hear a "
        "songbird and the sounds of the forest."
    )
    state.dead = False
    state.current_room = FOREST_1
    state.events.enable("forest")
    return True
