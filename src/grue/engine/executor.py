"""Command execution and turn sequencing.

handle_command(state, raw_input) -> str is the entry point used by every
front end. It splits the input into sentences, handles AGAIN and OOPS,
parses each sentence and runs it through execute(), which dispatches to
the verb handlers and then advances the event scheduler by one turn.
"""

import re
from dataclasses import dataclass, field

from ..logging import get_logger
from . import dead, selfref
from .actions import BULK_HANDLERS, VERB_HANDLERS, get_room_description, look_in
from .lexer import tokenize
from .narration import Narration
from .parser import (
    OBJECT_VERBS,
    ParsedCommand,
    ParseError,
    ParseErrorKind,
    Parser,
    ParseResult,
)
from .state import SELF_ID, GameState, StateChange
from .vocabulary import Vocabulary

logger = get_logger(__name__)

# Verbs that never advance the clock
NON_TURN_VERBS = frozenset({"score", "version", "save", "restore", "quit", "restart"})

# TURN ON / TURN OFF and friends
PARTICLE_VERBS = {
    ("turn", "on"): "light",
    ("turn", "off"): "extinguish",
}
LOOK_INSIDE = frozenset({"in", "into", "inside"})

HANDLER_FAULT = "Something went wrong with that action."
ENGINE_FAULT = "Something unexpected happened. The game is still running."
GAME_OVER = "The game is over. Type RESTART to play again."

_SENTENCE_SPLIT = re.compile(r"\.|\bthen\b", re.IGNORECASE)


@dataclass
class ActionResult:
    success: bool
    message: str
    changes: list[StateChange] = field(default_factory=list)


def _remap_particle(cmd: ParsedCommand) -> ParsedCommand:
    verb = PARTICLE_VERBS.get((cmd.verb, cmd.preposition or ""))
    if verb is None:
        return cmd
    return ParsedCommand(
        verb,
        direct=cmd.direct or cmd.indirect,
        raw_input=cmd.raw_input,
    )


def _scenery_verb(cmd: ParsedCommand) -> str:
    if cmd.verb == "look" and cmd.preposition in LOOK_INSIDE:
        return "look-in"
    return cmd.verb


def _scenery_target(cmd: ParsedCommand) -> str | None:
    target = cmd.direct or cmd.indirect
    return target.object_id if target is not None else None


def _dispatch(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    """Steps between parsing and the scheduler: special cases, then the handler."""
    if cmd.verb in ("say", "echo"):
        return VERB_HANDLERS[cmd.verb](state, cmd, out)

    if cmd.is_all:
        bulk = BULK_HANDLERS.get(cmd.verb)
        if bulk is None:
            out.say(f"I don't know how to {cmd.verb} all.")
            return False
        if state.dead:
            out.say(dead.refusal(cmd.verb))
            return False
        return bulk(state, cmd, out)

    if state.dead:
        if cmd.verb == "pray":
            return dead.pray(state, out)
        if cmd.verb == "look" and cmd.direct is None and cmd.indirect is None:
            dead.look(state, get_room_description(state, ignore_dark=True), out)
            return True
        if not dead.is_allowed(cmd.verb):
            out.say(dead.refusal(cmd.verb))
            return False

    if selfref.refers_to_self(cmd):
        handled = selfref.handle_self(state, cmd, out)
        if handled is not None:
            return handled
        out.say(f"You can't {cmd.verb} yourself.")
        return False

    cmd = _remap_particle(cmd)

    scenery = state.scenery.lookup(_scenery_target(cmd), _scenery_verb(cmd))
    if scenery is not None:
        return scenery(state, out)

    if cmd.verb == "look" and cmd.preposition in LOOK_INSIDE and cmd.indirect:
        return look_in(state, cmd, out)

    handler = VERB_HANDLERS.get(cmd.verb)
    if handler is None:
        out.say(f"I don't know how to {cmd.verb}.")
        return False
    if cmd.verb in OBJECT_VERBS and cmd.direct is None:
        out.say(f"What do you want to {cmd.verb}?")
        return False
    return handler(state, cmd, out)


def execute(
    command: ParseResult, state: GameState, skip_daemons: bool = False
) -> ActionResult:
    """Run one parsed command (or report a parse error) and advance the clock.

    Handler exceptions are logged and reported as a failed action; they
    never reach the caller.
    """
    out = Narration()
    if isinstance(command, ParseError):
        out.say(command.message)
        success = False
        verb = None
    else:
        verb = command.verb
        try:
            success = _dispatch(state, command, out)
        except Exception:
            logger.exception("handler_failed", verb=verb, room=state.current_room)
            out.say(HANDLER_FAULT)
            success = False

    changes = state.drain_changes()

    if not skip_daemons and verb not in NON_TURN_VERBS and not state.is_finished:
        state.events.process_turn(state, out)
        state.drain_changes()

    return ActionResult(success, out.text(), changes)


def parser_for(state: GameState) -> Parser:
    world = state.world
    if world.vocabulary is None:
        world.vocabulary = Vocabulary.from_objects(world.objects.values())
    return Parser(world.vocabulary)


def _split_sentences(raw_input: str) -> list[str]:
    parts = [p.strip() for p in _SENTENCE_SPLIT.split(raw_input)]
    return [p for p in parts if p] or [""]


def _expand_again(state: GameState, sentence: str) -> str | ActionResult:
    """Replace AGAIN/G with the last good command, or explain why not."""
    if state.last_failed_input is not None:
        return ActionResult(False, "That would just repeat a mistake.")
    if state.last_command is None:
        return ActionResult(False, "Beg pardon?")
    return state.last_command


def _expand_oops(state: GameState, words: list[str]) -> str | ActionResult:
    """Substitute a correction for the last unknown word."""
    if (
        len(words) < 2
        or state.last_unknown_word is None
        or state.last_failed_input is None
    ):
        return ActionResult(False, "There was no word to replace!")
    replacement = " ".join(words[1:])
    pattern = re.compile(rf"\b{re.escape(state.last_unknown_word)}\b", re.IGNORECASE)
    return pattern.sub(replacement, state.last_failed_input, count=1)


def run_sentence(state: GameState, sentence: str, skip_daemons: bool = False) -> ActionResult:
    """Parse and execute a single sentence, keeping the parser's memory."""
    tokens = tokenize(sentence)
    words = [t.word for t in tokens]
    if words and words[0] in ("again", "g"):
        expanded = _expand_again(state, sentence)
        if isinstance(expanded, ActionResult):
            return expanded
        sentence = expanded
        tokens = tokenize(sentence)
    elif words and words[0] == "oops":
        expanded = _expand_oops(state, words)
        if isinstance(expanded, ActionResult):
            return expanded
        sentence = expanded
        tokens = tokenize(sentence)

    command = parser_for(state).parse(
        tokens,
        state.reachable_objects(),
        raw_input=sentence,
        referent=state.last_mentioned,
    )
    result = execute(command, state, skip_daemons)

    if isinstance(command, ParseError):
        state.last_failed_input = sentence
        if command.kind is ParseErrorKind.UNKNOWN_WORD:
            state.last_unknown_word = command.word
    else:
        state.last_failed_input = None
        state.last_unknown_word = None
        state.last_command = sentence
        if command.direct is not None and command.direct.object_id != SELF_ID:
            state.last_mentioned = command.direct.object_id
    return result


def handle_command(state: GameState, raw_input: str) -> str:
    """Process a line of player input and return the text to show."""
    try:
        sentences = _split_sentences(raw_input)
        if state.is_finished and sentences[0].lower() != "restart":
            return GAME_OVER
        messages = []
        for i, sentence in enumerate(sentences):
            result = run_sentence(
                state, sentence, skip_daemons=i < len(sentences) - 1
            )
            if result.message:
                messages.append(result.message)
            if state.is_finished:
                break
            if state.last_failed_input is not None and i < len(sentences) - 1:
                # The rest of the line is dropped but the turn still passes
                out = Narration()
                state.events.process_turn(state, out)
                if out:
                    messages.append(out.text())
                break
        return "\n".join(messages)
    except Exception:
        logger.exception("command_failed", raw_input=raw_input)
        return ENGINE_FAULT
