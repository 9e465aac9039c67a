"""Tests for dying, the afterlife and resurrection."""

from grue.engine.death import DEATH_PENALTY, grue_check, jigs_up, scatter_possessions
from grue.engine.executor import GAME_OVER, handle_command, run_sentence
from grue.engine.flags import RoomFlag
from grue.engine.lighting import DARKNESS
from grue.engine.narration import Narration
from grue.engine.state import LAMP, PLAYER, SOUTH_TEMPLE, GameState


def _kill(state: GameState) -> str:
    out = Narration()
    jigs_up(state, "You fall into a bottomless pit.", out)
    return out.text()


def test_first_death_returns_to_forest(state: GameState):
    """Without a visit to the altar the player is revived in the forest."""
    text = _kill(state)
    assert text.startswith("You fall into a bottomless pit.")
    assert "****  You have died  ****" in text
    assert state.current_room == "forest-1"
    assert not state.dead
    assert state.deaths == 1
    assert state.score == -DEATH_PENALTY
    assert state.events.is_enabled("forest")


def test_possessions_are_scattered(state: GameState):
    """The lamp goes home, treasure is hidden, the rest stays put."""
    for obj_id in (LAMP, "egg", "garlic"):
        state.move_object(obj_id, PLAYER)
    scatter_possessions(state, "kitchen")
    assert state.inventory == []
    assert state.objects[LAMP].location == "living-room"
    assert state.objects["garlic"].location == "kitchen"
    egg_room = state.objects["egg"].location
    assert RoomFlag.LAND in state.rooms[egg_room].flags


def test_death_after_altar_leaves_a_ghost(state: GameState):
    """Once the altar is known the player wakes as a spirit at Hades."""
    state.rooms[SOUTH_TEMPLE].flags.add(RoomFlag.TOUCHED)
    text = _kill(state)
    assert "gates of Hell" in text
    assert state.dead
    assert state.current_room == "entrance-to-hades"


def test_ghost_refusals(state: GameState):
    """A spirit cannot handle things, but can still move about."""
    state.rooms[SOUTH_TEMPLE].flags.add(RoomFlag.TOUCHED)
    _kill(state)
    assert handle_command(state, "wait") == "Might as well. You've got an eternity."
    assert handle_command(state, "inventory") == "You have no possessions."
    assert handle_command(state, "take all") == "Your hand passes through its object."
    assert handle_command(state, "score") == "You're dead! How can you think of your score?"
    assert "Your prayers are not heard." in handle_command(state, "pray")


def test_ghost_look(state: GameState):
    """The afterlife looks a little different."""
    state.rooms[SOUTH_TEMPLE].flags.add(RoomFlag.TOUCHED)
    _kill(state)
    text = handle_command(state, "look")
    assert text.startswith("The room looks strange and unearthly.")
    assert "Entrance to Hades" in text


def test_ghost_sees_in_the_dark(state: GameState):
    """A spirit in an unlit room still gets the room's description."""
    state.rooms[SOUTH_TEMPLE].flags.add(RoomFlag.TOUCHED)
    _kill(state)
    state.current_room = "cellar"
    assert not state.is_lit()
    text = run_sentence(state, "look", skip_daemons=True).message
    assert "Although there is no light, the room seems dimly illuminated." in text
    assert "Cellar" in text
    assert "dark and damp cellar" in text
    assert DARKNESS not in text


def test_prayer_at_altar(state: GameState):
    """Praying at the altar brings the player back to life."""
    state.rooms[SOUTH_TEMPLE].flags.add(RoomFlag.TOUCHED)
    _kill(state)
    run_sentence(state, "up", skip_daemons=True)
    assert state.current_room == SOUTH_TEMPLE
    result = run_sentence(state, "pray", skip_daemons=True)
    assert "lone trumpet" in result.message
    assert not state.dead
    assert state.current_room == "forest-1"


def test_dying_while_dead_ends_game(state: GameState):
    """There is no coming back from a second death in the afterlife."""
    state.dead = True
    text = _kill(state)
    assert "talented person" in text
    assert state.is_finished
    assert handle_command(state, "look") == GAME_OVER


def test_third_death_ends_game(state: GameState):
    """Three deaths and the game is over."""
    state.deaths = 2
    text = _kill(state)
    assert "suicidal maniac" in text
    assert state.is_finished
    assert handle_command(state, "north") == GAME_OVER


def test_restart_after_game_over(state: GameState):
    """RESTART is the way out of a finished game."""
    state.deaths = 2
    _kill(state)
    handle_command(state, "restart")
    assert not state.is_finished
    assert state.deaths == 0
    assert state.current_room == "west-of-house"


def test_grue_in_the_dark(state: GameState, monkeypatch):
    """Walking from darkness into darkness risks a grue."""
    state.current_room = "attic"
    monkeypatch.setattr(state.rng, "random", lambda: 0.0)
    assert not grue_check(state, was_lit=True, out=Narration())
    out = Narration()
    assert grue_check(state, was_lit=False, out=out)
    assert "lurking grue" in out.text()
    assert state.deaths == 1


def test_grue_spares_the_lucky(state: GameState, monkeypatch):
    """A high roll lets the player pass."""
    state.current_room = "attic"
    monkeypatch.setattr(state.rng, "random", lambda: 0.9)
    assert not grue_check(state, was_lit=False, out=Narration())
    assert state.deaths == 0
