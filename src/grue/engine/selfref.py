"""Commands aimed at the player's own person (ME, MYSELF, SELF, CRETIN)."""

from typing import TYPE_CHECKING

from .combat import WEAPONS
from .narration import Narration
from .state import PLAYER, SELF_ID

if TYPE_CHECKING:
    from .parser import ParsedCommand
    from .state import GameState

SELF_MESSAGES = {
    **dict.fromkeys(
        ("tell", "hello"),
        "Talking to yourself is said to be a sign of impending mental collapse.",
    ),
    "eat": "Auto-cannibalism is not the answer.",
    "throw": "Why don't you just walk like normal people?",
    "take": "How romantic!",
    "examine": "That's difficult unless your eyes are prehensile.",
    "make": "Only you can do that.",
}


def refers_to_self(cmd: "ParsedCommand") -> bool:
    return any(
        ref is not None and ref.object_id == SELF_ID
        for ref in (cmd.direct, cmd.indirect)
    )


def handle_self(state: "GameState", cmd: "ParsedCommand", out: Narration) -> bool | None:
    """Respond to a self-directed command.

    Returns None when the verb has nothing special to say, so the caller
    can fall back to its own refusal.
    """
    from .death import jigs_up

    verb = cmd.verb
    if verb == "attack" and cmd.direct and cmd.direct.object_id == SELF_ID:
        weapon = cmd.indirect.object_id if cmd.indirect else None
        if weapon in WEAPONS and state.objects[weapon].location == PLAYER:
            jigs_up(state, "If you insist.... Poof, you're dead!", out)
            return True
        out.say("Suicide is not the answer.")
        return False

    if verb == "give" and cmd.indirect and cmd.indirect.object_id == SELF_ID:
        return None

    message = SELF_MESSAGES.get(verb)
    if message is None:
        return None
    out.say(message)
    return False
