"""Tests for the thief and the cyclops."""

import pytest

from grue.engine.actors import ActorState
from grue.engine.combat import kill_villain
from grue.engine.cyclops import WRATH_MESSAGES
from grue.engine.daemons import thief_daemon
from grue.engine.executor import run_sentence
from grue.engine.flags import GameFlag, ObjectFlag, RoomFlag
from grue.engine.narration import Narration
from grue.engine.state import (
    BOTTLE,
    CYCLOPS,
    LUNCH,
    PLAYER,
    SWORD,
    THIEF,
    WATER,
    GameState,
)


@pytest.fixture
def rigged(state: GameState, monkeypatch) -> GameState:
    """Every random roll comes up 0.0."""
    monkeypatch.setattr(state.rng, "random", lambda: 0.0)
    return state


def test_thief_robs_visited_room(rigged: GameState):
    """Treasure lying in a room the player has seen goes into the bag."""
    state = rigged
    state.move_object(THIEF, "gallery")
    state.rooms["gallery"].flags.add(RoomFlag.TOUCHED)
    thief_daemon(state, Narration())
    painting = state.objects["painting"]
    assert painting.location == THIEF
    assert painting.has(ObjectFlag.INVISIBLE)
    assert state.objects[THIEF].location == "round-room"


def test_thief_ignores_unvisited_room(rigged: GameState):
    """Rooms the player never entered are left alone."""
    state = rigged
    state.move_object(THIEF, "gallery")
    thief_daemon(state, Narration())
    assert state.objects["painting"].location == "gallery"


def test_thief_appears(rigged: GameState):
    """In a lit room the thief may show himself."""
    state = rigged
    state.current_room = "round-room"
    state.move_object("lamp", PLAYER)
    state.set_object_flag("lamp", ObjectFlag.ON)
    out = Narration()
    assert thief_daemon(state, out)
    assert "large bag" in out.text()
    assert not state.objects[THIEF].has(ObjectFlag.INVISIBLE)
    assert state.objects[THIEF].location == "round-room"


def test_thief_steals_in_the_dark(rigged: GameState):
    """In the dark the thief lifts a treasure from the player."""
    state = rigged
    state.current_room = "round-room"
    state.move_object("egg", PLAYER)
    out = Narration()
    thief_daemon(state, out)
    assert "swipes something" in out.text()
    assert state.objects["egg"].location == THIEF
    assert "egg" not in state.inventory


def test_thief_stashes_loot(rigged: GameState):
    """Back in the treasure room the bag is emptied of treasure."""
    state = rigged
    state.move_object(THIEF, "treasure-room")
    state.move_object("painting", THIEF)
    state.set_object_flag("painting", ObjectFlag.INVISIBLE)
    thief_daemon(state, Narration())
    painting = state.objects["painting"]
    assert painting.location == "treasure-room"
    assert not painting.has(ObjectFlag.INVISIBLE)
    assert state.objects[THIEF].location == "attic"


def test_thief_skips_sacred_rooms(rigged: GameState):
    """The thief never wanders into sacred rooms."""
    state = rigged
    for _ in range(len(state.rooms) * 2):
        thief_daemon(state, Narration())
        room = state.rooms[state.objects[THIEF].location]
        assert RoomFlag.SACRED not in room.flags


def test_dead_thief_drops_booty(rigged: GameState):
    """Killing the thief spills his bag where he fell."""
    state = rigged
    state.current_room = "round-room"
    state.move_object("painting", THIEF)
    thief = state.actors.get(THIEF)
    out = Narration()
    kill_villain(state, thief, out)
    assert "booty remains" in out.text()
    assert state.objects["painting"].location == "round-room"
    assert state.objects["stiletto"].location == "round-room"
    assert state.objects[THIEF].location is None
    assert state.score == 25


def test_unconscious_thief_stays_put(rigged: GameState):
    """An unconscious thief does not wander."""
    state = rigged
    thief = state.actors.get(THIEF)
    thief.transition(ActorState.UNCONSCIOUS, state, Narration())
    assert not thief_daemon(state, Narration())
    assert state.objects[THIEF].location == "round-room"


def test_thief_talk(state: GameState):
    """The thief keeps his own counsel."""
    assert state.actors.get(THIEF).on_talk(state) == "The thief is a strong, silent type."


@pytest.fixture
def at_cyclops(lit_lamp: GameState) -> GameState:
    state = lit_lamp
    state.current_room = "cyclops-room"
    state.move_object(LUNCH, PLAYER)
    state.move_object(BOTTLE, PLAYER)
    return state


def test_cyclops_blocks_stairs(at_cyclops: GameState):
    """The way up is closed while the cyclops is awake."""
    result = run_sentence(at_cyclops, "up", skip_daemons=True)
    assert result.message == "The cyclops doesn't look like he'll let you past."
    assert at_cyclops.current_room == "cyclops-room"


def test_feed_and_water_cyclops(at_cyclops: GameState):
    """Lunch makes him thirsty; water puts him to sleep."""
    state = at_cyclops
    result = run_sentence(state, "give lunch to cyclops", skip_daemons=True)
    assert "hot peppers" in result.message
    cyclops = state.actors.get(CYCLOPS)
    assert cyclops.memory["wrath"] < 0
    assert state.objects[LUNCH].location is None

    result = run_sentence(state, "give bottle to cyclops", skip_daemons=True)
    assert "falls fast asleep" in result.message
    assert cyclops.state is ActorState.SLEEPING
    assert state.has_flag(GameFlag.CYCLOPS_FLAG)
    assert state.objects[WATER].location is None
    assert state.objects[BOTTLE].location == "cyclops-room"
    assert state.score == 10

    run_sentence(state, "up", skip_daemons=True)
    assert state.current_room == "treasure-room"


def test_water_before_lunch_is_refused(at_cyclops: GameState):
    """A cyclops that has not eaten is not thirsty."""
    result = run_sentence(at_cyclops, "give bottle to cyclops", skip_daemons=True)
    assert "not thirsty" in result.message
    assert at_cyclops.actors.get(CYCLOPS).state is ActorState.NORMAL


def test_cyclops_wrath_builds(at_cyclops: GameState):
    """Each turn in his company makes the cyclops angrier, then he eats you."""
    state = at_cyclops
    cyclops = state.actors.get(CYCLOPS)
    spoken = []
    for _ in range(6):
        out = Narration()
        cyclops.execute_turn(state, out)
        if out:
            spoken.append(out.text())
    assert spoken == list(WRATH_MESSAGES[:5])
    assert cyclops.memory["wrath"] == 6

    out = Narration()
    cyclops.execute_turn(state, out)
    assert "Just like Mom used to make" in out.text()
    assert state.deaths == 1


def test_thirsty_cyclops_grows_thirstier(at_cyclops: GameState):
    """After lunch the count runs negative."""
    state = at_cyclops
    run_sentence(state, "give lunch to cyclops", skip_daemons=True)
    cyclops = state.actors.get(CYCLOPS)
    cyclops.execute_turn(state, Narration())
    assert cyclops.memory["wrath"] == -2


def test_attacking_cyclops(at_cyclops: GameState):
    """The cyclops shrugs off attacks and does not fight back."""
    state = at_cyclops
    state.move_object(SWORD, PLAYER)
    result = run_sentence(state, "attack cyclops with sword", skip_daemons=True)
    assert result.message == "The cyclops shrugs but otherwise ignores your pitiful attempt."
    assert state.events.is_enabled("cyclops")


def test_sleeping_cyclops_wakes_when_attacked(at_cyclops: GameState):
    """Hitting a sleeping cyclops wakes him and closes the stairs."""
    state = at_cyclops
    state.move_object(SWORD, PLAYER)
    run_sentence(state, "give lunch to cyclops", skip_daemons=True)
    run_sentence(state, "give bottle to cyclops", skip_daemons=True)
    result = run_sentence(state, "attack cyclops with sword", skip_daemons=True)
    assert "yawns" in result.message
    assert state.actors.get(CYCLOPS).state is ActorState.NORMAL
    assert not state.has_flag(GameFlag.CYCLOPS_FLAG)
