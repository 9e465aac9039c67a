"""Tests for scenery responses and state-dependent descriptions."""

from grue.engine.actions import get_room_description
from grue.engine.executor import run_sentence
from grue.engine.flags import GameFlag, ObjectFlag
from grue.engine.narration import Narration
from grue.engine.scenery import DescriptionTable, SceneryRegistry
from grue.engine.state import PLAYER, GameState, new_game_state
from grue.engine.world import World


def test_registry_lookup():
    """Actions are found by object and verb, and only by both."""
    registry = SceneryRegistry()

    def action(state, out):
        return True

    registry.register("statue", ("examine", "touch"), action)
    assert registry.lookup("statue", "touch") is action
    assert registry.lookup("statue", "take") is None
    assert registry.lookup(None, "examine") is None
    assert len(registry) == 2


def test_description_table_order(state: GameState):
    """The first matching variant wins; a bare variant is the fallback."""
    table = DescriptionTable()
    table.register("hall", "Bright hall.", when=lambda s: s.score > 0)
    table.register("hall", "Plain hall.")
    assert table.describe(state, "hall") == "Plain hall."
    state.score = 5
    assert table.describe(state, "hall") == "Bright hall."
    assert table.describe(state, "cellar", "Default.") == "Default."
    assert not table.has("cellar")


def test_sessions_get_their_own_tables(world: World):
    """Each new game builds its own registries."""
    a = new_game_state(world, seed=1)
    b = new_game_state(world, seed=1)
    assert a.scenery is not b.scenery
    assert a.descriptions is not b.descriptions
    assert a.scenery.lookup("window", "open") is not None


def test_examine_house_outside(state: GameState):
    """From the yard the house gets its full description."""
    result = run_sentence(state, "examine house", skip_daemons=True)
    assert result.success
    assert result.message.startswith("The house is a beautiful colonial house")


def test_house_from_inside(state: GameState):
    """Asking about the house from within it earns a rebuke."""
    state.current_room = "kitchen"
    out = Narration()
    assert not state.scenery.lookup("house", "examine")(state, out)
    assert out.text() == "Why not find your brains?"


def test_cannot_open_house(state: GameState):
    """The front door stays shut."""
    result = run_sentence(state, "open house", skip_daemons=True)
    assert not result.success
    assert result.message == "I can't see how to get in from here."


def test_window_examine_and_open(state: GameState):
    """The window is ajar until pushed open, and then it stays open."""
    state.current_room = "behind-house"
    result = run_sentence(state, "examine window", skip_daemons=True)
    assert result.message == "The window is slightly ajar, but not enough to allow entry."

    result = run_sentence(state, "open window", skip_daemons=True)
    assert result.success
    assert "far enough to allow entry" in result.message
    assert state.objects["window"].has(ObjectFlag.OPEN)

    assert run_sentence(state, "examine window", skip_daemons=True).message == (
        "The window is open."
    )
    again = run_sentence(state, "open window", skip_daemons=True)
    assert not again.success
    assert again.message == "It's already open."


def test_look_through_window(state: GameState):
    """Each side of the window shows the other."""
    state.current_room = "behind-house"
    result = run_sentence(state, "look in window", skip_daemons=True)
    assert result.message == "You can see what appears to be a kitchen."
    state.current_room = "kitchen"
    result = run_sentence(state, "look in window", skip_daemons=True)
    assert result.message == "You can see a clear area leading towards a forest."


def test_songbird_is_never_here(state: GameState):
    """The songbird can be heard about but never caught."""
    state.current_room = "forest-1"
    result = run_sentence(state, "take bird", skip_daemons=True)
    assert not result.success
    assert result.message == "The songbird is not here but is probably nearby."
    assert state.objects["songbird"].location != PLAYER
    result = run_sentence(state, "listen to bird", skip_daemons=True)
    assert result.message == "You can't hear the songbird now."


def test_trees(state: GameState):
    """The trees answer a few verbs of their own."""
    state.current_room = "forest-1"
    assert run_sentence(state, "examine trees", skip_daemons=True).message == (
        "The trees are tall and imposing."
    )
    assert run_sentence(state, "climb tree", skip_daemons=True).message == (
        "You cannot climb the trees here."
    )
    assert run_sentence(state, "take tree", skip_daemons=True).message == (
        "You can't be serious."
    )


def test_unregistered_verb_falls_through(state: GameState):
    """Verbs with no scenery action reach the ordinary handler."""
    state.current_room = "behind-house"
    result = run_sentence(state, "close window", skip_daemons=True)
    assert result.message != ""
    assert state.scenery.lookup("window", "close") is None


def test_kitchen_follows_window(state: GameState):
    """The kitchen mentions whether its window is open."""
    state.current_room = "kitchen"
    assert "small window which is slightly ajar." in get_room_description(state)
    state.set_object_flag("window", ObjectFlag.OPEN)
    assert "small window which is open." in get_room_description(state)


def test_living_room_follows_trap_door(state: GameState):
    """An open trap door shows in the living room."""
    state.current_room = "living-room"
    assert "a trap door set into the floor" in get_room_description(state)
    state.set_object_flag("trap-door", ObjectFlag.OPEN)
    assert "an open trap door at your feet" in get_room_description(state)


def test_cyclops_room_follows_flag(lit_lamp: GameState):
    """With the cyclops asleep the stairs are free."""
    state = lit_lamp
    state.current_room = "cyclops-room"
    assert "Nothing now bars" not in get_room_description(state)
    state.set_flag(GameFlag.CYCLOPS_FLAG)
    assert "Nothing now bars the way up the stairs." in get_room_description(state)


def test_examine_trap_door(state: GameState):
    """Examining the trap door reports whether it is open."""
    state.current_room = "living-room"
    assert run_sentence(state, "examine trap door", skip_daemons=True).message == (
        "The trap door is closed."
    )
    state.set_object_flag("trap-door", ObjectFlag.OPEN)
    assert run_sentence(state, "examine trap door", skip_daemons=True).message == (
        "The trap door is open."
    )


def test_restored_game_uses_restored_flags(world: World, state: GameState):
    """Descriptions read live state, so a restored window shows as open."""
    state.set_object_flag("window", ObjectFlag.OPEN)
    saved = state.snapshot()
    fresh = new_game_state(world, seed=2)
    fresh.restore(saved)
    fresh.current_room = "kitchen"
    assert "small window which is open." in get_room_description(fresh)
