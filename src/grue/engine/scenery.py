"""Scenery responses and state-dependent descriptions.

Scenery objects (the house, the kitchen window, the forest) answer a few
verbs with fixed lines instead of going through the generic handlers.
The executor asks the session's SceneryRegistry for an (object, verb)
action before it falls back to VERB_HANDLERS.

DescriptionTable holds texts that change with the game: the kitchen once
the window is open, the Cyclops Room once the cyclops is asleep. The first
variant whose condition holds wins; a variant without a condition is the
default.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from .flags import GameFlag, ObjectFlag
from .narration import Narration

if TYPE_CHECKING:
    from .state import GameState


SceneryAction = Callable[["GameState", Narration], bool]
Condition = Callable[["GameState"], bool]

HOUSE = "house"
WINDOW = "window"
TREES = "trees"
SONGBIRD = "songbird"
TRAP_DOOR = "trap-door"

INSIDE_HOUSE = frozenset({"kitchen", "living-room", "attic"})


class SceneryRegistry:
    """Per-session table of (object id, verb) -> action."""

    def __init__(self) -> None:
        self._actions: dict[tuple[str, str], SceneryAction] = {}

    def register(
        self, object_id: str, verbs: tuple[str, ...], action: SceneryAction
    ) -> None:
        for verb in verbs:
            self._actions[(object_id, verb)] = action

    def lookup(self, object_id: str | None, verb: str) -> SceneryAction | None:
        if object_id is None:
            return None
        return self._actions.get((object_id, verb))

    def __len__(self) -> int:
        return len(self._actions)


class DescriptionTable:
    """Per-session table of room and object texts keyed by id."""

    def __init__(self) -> None:
        self._variants: dict[str, list[tuple[Condition | None, str]]] = {}

    def register(self, target_id: str, text: str, when: Condition | None = None):
        self._variants.setdefault(target_id, []).append((when, text))

    def has(self, target_id: str) -> bool:
        return target_id in self._variants

    def describe(
        self, state: "GameState", target_id: str, default: str | None = None
    ) -> str | None:
        for when, text in self._variants.get(target_id, ()):
            if when is None or when(state):
                return text
        return default


def _says(message: str, success: bool = False) -> SceneryAction:
    def action(state: "GameState", out: Narration) -> bool:
        out.say(message)
        return success

    return action


def _inside(state: "GameState") -> bool:
    return state.current_room in INSIDE_HOUSE


def _is_open(obj_id: str) -> Condition:
    return lambda state: state.objects[obj_id].has(ObjectFlag.OPEN)


def _has_flag(flag: GameFlag) -> Condition:
    return lambda state: state.has_flag(flag)


# The house

def _examine_house(state: "GameState", out: Narration) -> bool:
    if _inside(state):
        out.say("Why not find your brains?")
        return False
    out.say(state.objects[HOUSE].description)
    return True


def _enter_house(state: "GameState", out: Narration) -> bool:
    if _inside(state):
        out.say("Why not find your brains?")
    else:
        out.say("I can't see how to get in from here.")
    return False


# The kitchen window

def _examine_window(state: "GameState", out: Narration) -> bool:
    if state.objects[WINDOW].has(ObjectFlag.OPEN):
        out.say("The window is open.")
    else:
        out.say("The window is slightly ajar, but not enough to allow entry.")
    return True


def _open_window(state: "GameState", out: Narration) -> bool:
    if state.objects[WINDOW].has(ObjectFlag.OPEN):
        out.say("It's already open.")
        return False
    state.set_object_flag(WINDOW, ObjectFlag.OPEN)
    out.say("With great effort, you open the window far enough to allow entry.")
    return True


def _look_through_window(state: "GameState", out: Narration) -> bool:
    if state.current_room == "kitchen":
        out.say("You can see a clear area leading towards a forest.")
    else:
        out.say("You can see what appears to be a kitchen.")
    return True


def register_scenery(state: "GameState") -> None:
    """Install the scenery actions and conditional texts on a new session."""
    scenery = state.scenery
    scenery.register(HOUSE, ("examine",), _examine_house)
    scenery.register(HOUSE, ("open", "enter"), _enter_house)
    scenery.register(HOUSE, ("light",), _says("You must be joking."))

    scenery.register(WINDOW, ("examine",), _examine_window)
    scenery.register(WINDOW, ("open",), _open_window)
    scenery.register(WINDOW, ("look-in",), _look_through_window)

    scenery.register(
        TREES, ("examine",), _says("The trees are tall and imposing.", True)
    )
    scenery.register(TREES, ("take",), _says("You can't be serious."))
    scenery.register(TREES, ("climb",), _says("You cannot climb the trees here."))
    scenery.register(
        TREES,
        ("listen",),
        _says("The pines and the hemlocks seem to be murmuring.", True),
    )

    scenery.register(
        SONGBIRD,
        ("take",),
        _says("The songbird is not here but is probably nearby."),
    )
    scenery.register(SONGBIRD, ("listen",), _says("You can't hear the songbird now."))
    scenery.register(SONGBIRD, ("examine",), _says("You can't see any songbird here."))

    descriptions = state.descriptions
    kitchen = (
        "You are in the kitchen of the white house. A table seems to have been "
        "used recently for the preparation of food. A passage leads to the west "
        "and a dark staircase can be seen leading upward. "
    )
    descriptions.register(
        "kitchen",
        kitchen + "To the east is a small window which is open.",
        when=_is_open(WINDOW),
    )
    descriptions.register(
        "kitchen", kitchen + "To the east is a small window which is slightly ajar."
    )

    descriptions.register(
        "living-room",
        "You are in the living room. There is a doorway to the east, a wooden "
        "door with strange gothic lettering to the west, which appears to be "
        "nailed shut, and an open trap door at your feet.",
        when=_is_open(TRAP_DOOR),
    )

    descriptions.register(
        "cyclops-room",
        "This room has an exit on the northwest, and a staircase leading up. "
        "Nothing now bars the way up the stairs.",
        when=_has_flag(GameFlag.CYCLOPS_FLAG),
    )

    descriptions.register(
        TRAP_DOOR, "The trap door is open.", when=_is_open(TRAP_DOOR)
    )
    descriptions.register(TRAP_DOOR, "The trap door is closed.")
