"""Tests for command execution and turn sequencing."""

from grue.engine import actions
from grue.engine.executor import (
    ENGINE_FAULT,
    GAME_OVER,
    HANDLER_FAULT,
    handle_command,
    run_sentence,
)
from grue.engine.flags import ObjectFlag
from grue.engine.state import FOREST_1, LAMP, PLAYER, SWORD, GameState


def test_take_lamp_scenario(state: GameState):
    """TAKE LAMP succeeds, says Taken. and moves the lamp into inventory."""
    state.current_room = "living-room"
    result = run_sentence(state, "take lamp")
    assert result.success
    assert result.message == "Taken."
    assert state.objects[LAMP].location == PLAYER
    assert LAMP in state.inventory
    assert LAMP not in state.room.objects


def test_changes_are_reported(state: GameState):
    """Mutations made by the handler come back on the result."""
    state.current_room = "living-room"
    result = run_sentence(state, "take lamp")
    assert any(c.kind == "move" and c.target == LAMP for c in result.changes)


def test_examine_room_scenario(state: GameState):
    """An unknown word fails the turn with the parser's message."""
    result = run_sentence(state, "examine room")
    assert not result.success
    assert result.message == 'I don\'t know the word "room".'


def test_parse_error_consumes_turn(state: GameState):
    """The clock still advances after a parse error."""
    handle_command(state, "xyzzy")
    assert state.moves == 1


def test_non_turn_verbs(state: GameState):
    """SCORE and VERSION do not advance the clock."""
    handle_command(state, "score")
    handle_command(state, "version")
    assert state.moves == 0
    handle_command(state, "wait")
    assert state.moves == 1


def test_take_all(state: GameState):
    """TAKE ALL takes every portable object in the room."""
    state.current_room = "living-room"
    result = handle_command(state, "take all")
    assert result == "brass lantern: Taken.\nsword: Taken."
    assert state.inventory == [LAMP, SWORD]


def test_drop_all_empty_handed(state: GameState):
    """DROP ALL with nothing carried says so."""
    assert handle_command(state, "drop all") == "You are empty-handed."


def test_all_with_other_verbs(state: GameState):
    """Only TAKE and DROP accept ALL."""
    assert handle_command(state, "open all") == "I don't know how to open all."


def test_turn_on_remaps_to_light(state: GameState):
    """TURN ON and TURN OFF behave like LIGHT and EXTINGUISH."""
    state.move_object(LAMP, PLAYER)
    assert handle_command(state, "turn on lamp") == "The brass lantern is now on."
    assert state.objects[LAMP].has(ObjectFlag.ON)
    assert state.events.remaining_ticks("lantern") == 99
    assert handle_command(state, "turn lamp off") == "The brass lantern is now off."
    assert not state.objects[LAMP].has(ObjectFlag.ON)


def test_look_in_container(state: GameState):
    """LOOK IN lists contents with indefinite articles."""
    state.current_room = "living-room"
    assert handle_command(state, "look in case") == "The trophy case is empty."
    state.move_object(SWORD, "trophy-case")
    assert handle_command(state, "look in case") == "The trophy case contains:\n  A sword"


def test_look_in_non_container(state: GameState):
    """LOOK IN something that holds nothing is refused."""
    state.current_room = "living-room"
    assert handle_command(state, "look in lamp") == "You can't look inside the brass lantern."


def test_look_in_closed_container(state: GameState):
    """LOOK IN a closed container says it is closed."""
    assert handle_command(state, "look in mailbox") == "The small mailbox is closed."


def test_handler_fault_is_contained(state: GameState, monkeypatch):
    """A handler that raises becomes a generic failure and the turn passes."""

    def boom(state, cmd, out):
        raise RuntimeError("boom")

    monkeypatch.setitem(actions.VERB_HANDLERS, "jump", boom)
    assert handle_command(state, "jump") == HANDLER_FAULT
    assert state.moves == 1


def test_engine_fault_is_contained(state: GameState, monkeypatch):
    """An error outside any handler still returns a message."""

    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("grue.engine.executor.run_sentence", boom)
    assert handle_command(state, "look") == ENGINE_FAULT


def test_multiple_commands_one_turn_of_daemons(state: GameState):
    """Sentences split on periods and THEN; daemons run after the last."""
    state.current_room = "living-room"
    result = handle_command(state, "take lamp. take sword")
    assert result == "Taken.\nTaken."
    assert state.moves == 1
    assert state.inventory == [LAMP, SWORD]


def test_failed_sentence_drops_rest_of_line(state: GameState):
    """A parse failure mid-line stops the line but the turn still passes."""
    state.current_room = "living-room"
    result = handle_command(state, "take lamp then xyzzy then take sword")
    assert 'I don\'t know the word "xyzzy".' in result
    assert state.objects[LAMP].location == PLAYER
    assert state.objects[SWORD].location == "living-room"
    assert state.moves == 1


def test_again(state: GameState):
    """AGAIN repeats the last good command."""
    assert handle_command(state, "again") == "Beg pardon?"
    handle_command(state, "wait")
    assert handle_command(state, "g") == "Time passes..."
    assert state.moves == 2


def test_again_after_mistake(state: GameState):
    """AGAIN refuses to repeat a failed parse."""
    handle_command(state, "wait")
    handle_command(state, "xyzzy")
    assert handle_command(state, "again") == "That would just repeat a mistake."


def test_oops(state: GameState):
    """OOPS swaps in a correction for the last unknown word."""
    state.current_room = "living-room"
    handle_command(state, "take lanturn")
    assert handle_command(state, "oops lantern") == "Taken."
    assert state.objects[LAMP].location == PLAYER


def test_oops_with_nothing_to_fix(state: GameState):
    """OOPS without a prior unknown word has nothing to replace."""
    assert handle_command(state, "oops lamp") == "There was no word to replace!"


def test_referent_memory(state: GameState):
    """IT refers to the object named in the previous command."""
    state.current_room = "living-room"
    handle_command(state, "examine sword")
    assert handle_command(state, "take it") == "Taken."
    assert state.objects[SWORD].location == PLAYER


def test_game_over(state: GameState):
    """A finished game only answers RESTART."""
    state.is_finished = True
    assert handle_command(state, "look") == GAME_OVER


def test_quit_then_restart(state: GameState):
    """QUIT ends the game; RESTART brings back a fresh world."""
    state.current_room = "living-room"
    handle_command(state, "take lamp")
    assert "Thanks for playing!" in handle_command(state, "quit")
    assert state.is_finished

    result = handle_command(state, "restart")
    assert "West of House" in result
    assert not state.is_finished
    assert state.moves == 0
    assert state.current_room == "west-of-house"
    assert state.objects[LAMP].location == "living-room"
    assert state.inventory == []


def test_self_reference_responses(state: GameState):
    """ME as an argument gets its own replies."""
    assert (
        handle_command(state, "examine me")
        == "That's difficult unless your eyes are prehensile."
    )
    assert handle_command(state, "attack myself") == "Suicide is not the answer."
    assert handle_command(state, "drop me") == "You can't drop yourself."


def test_attack_self_with_weapon(state: GameState):
    """Attacking yourself with a weapon is fatal."""
    state.move_object(SWORD, PLAYER)
    result = handle_command(state, "kill me with sword")
    assert "If you insist.... Poof, you're dead!" in result
    assert state.deaths == 1
    assert state.current_room == FOREST_1


def test_say_and_echo(state: GameState):
    """Free-text verbs repeat what was said."""
    assert handle_command(state, "say xyzzy") == 'You say "xyzzy", but nothing happens.'
    assert handle_command(state, "echo hello") == "hello hello ..."
