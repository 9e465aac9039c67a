"""Verb handlers and room description.

Every handler has the shape handler(state, cmd, out) -> bool. It mutates
state in place, writes its text to the Narration and returns whether the
action succeeded. VERB_HANDLERS maps canonical verbs to handlers; the
executor owns dispatch, dead-state checks and turn sequencing.
"""

from collections.abc import Callable

from .actors import ActorState
from .combat import player_blow
from .daemons import BURN_TABLES, start_burning, stop_burning
from .death import grue_check
from .flags import ObjectFlag, RoomFlag, Verbosity
from .lighting import DARKNESS
from .narration import Narration
from .parser import ParsedCommand
from .state import CYCLOPS, PLAYER, GameObject, GameState, new_game_state

Handler = Callable[[GameState, ParsedCommand, Narration], bool]

VERSION_TEXT = "GRUE: an interactive fiction engine\nRelease 1 / Serial number 261018"

RANKS = (
    (350, "Master Adventurer"),
    (330, "Wizard"),
    (300, "Master"),
    (200, "Adventurer"),
    (100, "Junior Adventurer"),
    (50, "Novice Adventurer"),
    (25, "Amateur Adventurer"),
    (0, "Beginner"),
)

GREETINGS = (
    "Hello.",
    "Good day.",
    "Nice weather we've been having lately.",
    "Goodbye.",
)


# -- description helpers ----------------------------------------------------


def _with_article(obj: GameObject) -> str:
    return f"{obj.article} {obj.name}"


def _visible_in(state: GameState, container_id: str) -> list[GameObject]:
    return [
        state.objects[o]
        for o in state.contents_of(container_id)
        if not state.objects[o].has(ObjectFlag.INVISIBLE)
    ]


def _describe_contents(state: GameState, obj: GameObject, indent: str = "") -> list[str]:
    """Lines listing what an open container holds, nested."""
    if not (obj.has(ObjectFlag.CONTAINER) and obj.has(ObjectFlag.OPEN)):
        return []
    inner = _visible_in(state, obj.id)
    if not inner:
        return []
    lines = [f"{indent}The {obj.name} contains:"]
    for item in inner:
        lines.append(f"{indent}  {_with_article(item).capitalize()}")
        lines.extend(_describe_contents(state, item, indent + "  "))
    return lines


def get_visible_objects(state: GameState, ignore_dark: bool = False) -> list[str]:
    """Descriptions of the objects lying in the current room."""
    if not ignore_dark and not state.is_lit():
        return []
    lines = []
    for obj_id in state.room.objects:
        obj = state.objects[obj_id]
        if obj.has(ObjectFlag.INVISIBLE) or obj.has(ObjectFlag.NDESC):
            continue
        lines.append(obj.description or f"There is {_with_article(obj)} here.")
        lines.extend(_describe_contents(state, obj))
    return lines


def get_room_description(
    state: GameState, full: bool = True, ignore_dark: bool = False
) -> str:
    """Name, description and contents of the current room.

    The description text comes from the session's DescriptionTable when it
    has a variant for the room. ignore_dark describes the room as if it were
    lit; spirits see without a lamp.
    """
    if not ignore_dark and not state.is_lit():
        return DARKNESS
    room = state.room
    lines = [room.name]
    if full:
        lines.append(state.descriptions.describe(state, room.id, room.description))
    lines.extend(get_visible_objects(state, ignore_dark))
    return "\n".join(line for line in lines if line)


def get_exits(state: GameState) -> list[str]:
    """Directions with an open way out of the current room."""
    if not state.is_lit():
        return []
    exits = []
    for direction, exit_ in state.room.exits.items():
        if exit_.destination is None:
            continue
        if exit_.condition is not None and not state.has_flag(exit_.condition):
            continue
        if exit_.door is not None and not state.objects[exit_.door].has(ObjectFlag.OPEN):
            continue
        exits.append(direction)
    return exits


def get_inventory(state: GameState) -> list[str]:
    """Inventory lines, including what open containers hold."""
    lines = []
    for obj_id in state.inventory:
        obj = state.objects[obj_id]
        lines.append(_with_article(obj).capitalize())
        lines.extend(_describe_contents(state, obj, "  "))
    return lines


def load_of(state: GameState, holder: str = PLAYER) -> int:
    """Total size of everything under a holder, nested."""
    total = 0
    for obj_id in state.contents_of(holder):
        total += state.objects[obj_id].size + load_of(state, obj_id)
    return total


def _obj(state: GameState, cmd: ParsedCommand) -> GameObject:
    return state.objects[cmd.direct.object_id]


# -- movement ---------------------------------------------------------------


def _cmd_go(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    """Handle a direction verb."""
    exit_ = state.room.exits.get(cmd.verb)
    if exit_ is None:
        out.say("You can't go that way.")
        return False
    if exit_.condition is not None and not state.has_flag(exit_.condition):
        out.say(exit_.message or "You can't go that way.")
        return False
    if exit_.door is not None and not state.objects[exit_.door].has(ObjectFlag.OPEN):
        out.say(exit_.message or f"The {state.objects[exit_.door].name} is closed.")
        return False
    if exit_.destination is None:
        out.say(exit_.message or "You can't go that way.")
        return False

    was_lit = state.is_lit()
    state.current_room = exit_.destination
    room = state.room
    first_visit = RoomFlag.TOUCHED not in room.flags
    room.flags.add(RoomFlag.TOUCHED)
    if room.value:
        state.award(f"room:{room.id}", room.value)
    if RoomFlag.FOREST in room.flags:
        state.events.enable("forest")

    if grue_check(state, was_lit, out):
        return True

    verbosity = state.verbosity
    full = verbosity is Verbosity.VERBOSE or (
        first_visit and verbosity is not Verbosity.SUPERBRIEF
    )
    out.say(get_room_description(state, full=full))
    cyclops = state.objects.get(CYCLOPS)
    if cyclops is not None and cyclops.location == room.id:
        actor = state.actors.get(CYCLOPS)
        if actor is not None and actor.state is not ActorState.SLEEPING:
            state.events.queue_interrupt("cyclops", 1)
    return True


# -- objects ----------------------------------------------------------------


def _take(state: GameState, obj: GameObject) -> tuple[bool, str]:
    if obj.location == PLAYER:
        return False, "You already have that."
    if obj.has(ObjectFlag.ACTOR) or not obj.has(ObjectFlag.TAKE):
        return False, f"You can't take the {obj.name}."
    if load_of(state) + obj.size + load_of(state, obj.id) > state.load_allowed:
        return False, "You're carrying too much already."

    state.move_object(obj.id, PLAYER)
    state.set_object_flag(obj.id, ObjectFlag.TOUCHED)
    if obj.value:
        state.award(f"treasure:{obj.id}", obj.value)
    if obj.id in BURN_TABLES and obj.has(ObjectFlag.ON):
        start_burning(state, obj.id)
    return True, "Taken."


def _cmd_take(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    ok, message = _take(state, _obj(state, cmd))
    out.say(message)
    return ok


def _cmd_take_all(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    candidates = []
    if state.is_lit():
        candidates = [
            state.objects[o]
            for o in state.room.objects
            if state.objects[o].has(ObjectFlag.TAKE)
            and not state.objects[o].has(ObjectFlag.INVISIBLE)
            and not state.objects[o].has(ObjectFlag.ACTOR)
        ]
    if not candidates:
        out.say("There's nothing here you can take.")
        return False
    any_taken = False
    for obj in candidates:
        ok, message = _take(state, obj)
        out.say(f"{obj.name}: {message}")
        any_taken = any_taken or ok
    return any_taken


def _drop(state: GameState, obj: GameObject) -> tuple[bool, str]:
    if obj.location != PLAYER:
        return False, "You don't have that."
    state.move_object(obj.id, state.current_room)
    return True, "Dropped."


def _cmd_drop(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    ok, message = _drop(state, _obj(state, cmd))
    out.say(message)
    return ok


def _cmd_drop_all(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    if not state.inventory:
        out.say("You are empty-handed.")
        return False
    for obj_id in list(state.inventory):
        obj = state.objects[obj_id]
        _, message = _drop(state, obj)
        out.say(f"{obj.name}: {message}")
    return True


def _cmd_put(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    obj = _obj(state, cmd)
    target = state.objects[cmd.indirect.object_id]
    if obj.id == target.id:
        out.say("How can you do that?")
        return False
    if not target.has(ObjectFlag.CONTAINER):
        out.say(f"You can't put anything in the {target.name}.")
        return False
    if not target.has(ObjectFlag.OPEN):
        out.say(f"The {target.name} isn't open.")
        return False
    if obj.location == target.id:
        out.say(f"The {obj.name} is already in the {target.name}.")
        return False
    if obj.location != PLAYER:
        ok, message = _take(state, obj)
        if not ok:
            out.say(message)
            return False
    if load_of(state, target.id) + obj.size > target.capacity:
        out.say("There's no room.")
        return False
    state.move_object(obj.id, target.id)
    out.say("Done.")
    return True


def _cmd_give(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    obj = _obj(state, cmd)
    recipient = state.objects[cmd.indirect.object_id]
    if obj.location != PLAYER:
        out.say("You don't have that.")
        return False
    actor = state.actors.get(recipient.id)
    if actor is None:
        out.say(f"You can't give {_with_article(obj)} to {_with_article(recipient)}!")
        return False
    before = len(out.lines)
    accepted = actor.on_receive_item(state, obj.id, out)
    if not accepted and len(out.lines) == before:
        out.say(f"The {recipient.name} refuses it politely.")
    return accepted


def _cmd_throw(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    obj = _obj(state, cmd)
    if obj.location != PLAYER:
        out.say("You don't have that.")
        return False
    state.move_object(obj.id, state.current_room)
    target = state.actors.get(cmd.indirect.object_id) if cmd.indirect else None
    if target is None:
        out.say("Thrown.")
        return True
    out.say(f"The {obj.name} bounces harmlessly off the {target.obj(state).name}.")
    target.on_attacked(state, out, obj.id)
    return True


def _cmd_examine(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    obj = _obj(state, cmd)
    if obj.has(ObjectFlag.READ) and obj.text:
        out.say(obj.text)
    elif obj.has(ObjectFlag.CONTAINER):
        if not obj.has(ObjectFlag.OPEN):
            out.say(f"The {obj.name} is closed.")
        elif not _visible_in(state, obj.id):
            out.say(f"The {obj.name} is empty.")
        else:
            out.extend(_lines(_describe_contents(state, obj)))
    elif obj.has(ObjectFlag.LIGHT):
        if obj.has(ObjectFlag.BURNED_OUT):
            out.say(f"The {obj.name} has burned out.")
        else:
            state_word = "on" if obj.has(ObjectFlag.ON) else "off"
            out.say(f"The {obj.name} is turned {state_word}.")
    elif state.descriptions.has(obj.id):
        out.say(state.descriptions.describe(state, obj.id))
    elif obj.has(ObjectFlag.ACTOR) and obj.description:
        out.say(obj.description)
    else:
        out.say(f"There's nothing special about the {obj.name}.")
    return True


def _lines(lines: list[str]) -> Narration:
    narration = Narration()
    for line in lines:
        narration.say(line)
    return narration


def look_in(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    """LOOK IN <container>."""
    target = state.objects[(cmd.indirect or cmd.direct).object_id]
    if not target.has(ObjectFlag.CONTAINER):
        out.say(f"You can't look inside the {target.name}.")
        return False
    if not target.has(ObjectFlag.OPEN):
        out.say(f"The {target.name} is closed.")
        return False
    inner = _visible_in(state, target.id)
    if not inner:
        out.say(f"The {target.name} is empty.")
        return True
    out.say(f"The {target.name} contains:")
    for item in inner:
        out.say(f"  {_with_article(item).capitalize()}")
    return True


def _cmd_look(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    if cmd.direct is not None:
        return _cmd_examine(state, cmd, out)
    out.say(get_room_description(state, full=True))
    return True


def _cmd_inventory(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    lines = get_inventory(state)
    if not lines:
        out.say("You are empty-handed.")
        return True
    out.say("You are carrying:")
    for line in lines:
        out.say(f"  {line}")
    return True


def _cmd_open(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    obj = _obj(state, cmd)
    if not (obj.has(ObjectFlag.CONTAINER) or obj.has(ObjectFlag.DOOR)):
        out.say(f"You must tell me how to do that to {_with_article(obj)}.")
        return False
    if obj.has(ObjectFlag.OPEN):
        out.say("It's already open.")
        return False
    state.set_object_flag(obj.id, ObjectFlag.OPEN)
    inner = _visible_in(state, obj.id)
    if obj.has(ObjectFlag.CONTAINER) and inner:
        names = ", ".join(_with_article(o) for o in inner)
        out.say(f"Opening the {obj.name} reveals {names}.")
    else:
        out.say("Opened.")
    return True


def _cmd_close(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    obj = _obj(state, cmd)
    if not (obj.has(ObjectFlag.CONTAINER) or obj.has(ObjectFlag.DOOR)):
        out.say(f"You must tell me how to do that to {_with_article(obj)}.")
        return False
    if not obj.has(ObjectFlag.OPEN):
        out.say("It's already closed.")
        return False
    state.set_object_flag(obj.id, ObjectFlag.OPEN, False)
    out.say("Closed.")
    return True


def _cmd_read(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    obj = _obj(state, cmd)
    if not state.is_lit():
        out.say("It is impossible to read in the dark.")
        return False
    if not obj.has(ObjectFlag.READ) or not obj.text:
        out.say(f"There is nothing written on the {obj.name}.")
        return False
    out.say(obj.text)
    return True


def _cmd_light(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    obj = _obj(state, cmd)
    if not obj.has(ObjectFlag.LIGHT):
        out.say("You can't turn that on.")
        return False
    if obj.has(ObjectFlag.BURNED_OUT):
        out.say("A burned-out lamp won't light.")
        return False
    if obj.has(ObjectFlag.ON):
        out.say("It is already on.")
        return False
    was_lit = state.is_lit()
    state.set_object_flag(obj.id, ObjectFlag.ON)
    start_burning(state, obj.id)
    out.say(f"The {obj.name} is now on.")
    if not was_lit and state.is_lit():
        out.say(get_room_description(state, full=True))
    return True


def _cmd_extinguish(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    obj = _obj(state, cmd)
    if not obj.has(ObjectFlag.LIGHT):
        out.say("You can't turn that off.")
        return False
    if not obj.has(ObjectFlag.ON):
        out.say("It is already off.")
        return False
    state.set_object_flag(obj.id, ObjectFlag.ON, False)
    stop_burning(state, obj.id)
    out.say(f"The {obj.name} is now off.")
    if not state.is_lit():
        out.say("It is now pitch black.")
    return True


def _cmd_turn(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    out.say("Your bare hands don't appear to be enough.")
    return False


def _cmd_attack(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    target = _obj(state, cmd)
    actor = state.actors.get(target.id)
    if actor is None:
        out.say(f"I've known strange people, but fighting {_with_article(target)}?")
        return False
    if actor.state is ActorState.DEAD or target.location != state.current_room:
        out.say(f"You can't see any {target.name} here!")
        return False
    if cmd.indirect is None:
        out.say(
            f"Trying to attack {_with_article(target)} with your bare hands is suicidal."
        )
        return False
    weapon = state.objects[cmd.indirect.object_id]
    if weapon.location != PLAYER:
        out.say(f"You aren't even holding the {weapon.name}.")
        return False
    if not weapon.has(ObjectFlag.WEAPON):
        out.say(
            f"Trying to attack the {target.name} with {_with_article(weapon)} is suicidal."
        )
        return False

    actor.on_attacked(state, out, weapon.id)
    if actor.definition.fights_back and actor.state is not ActorState.DEAD:
        player_blow(state, actor, weapon.id, out)
    return True


def _cmd_eat(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    obj = _obj(state, cmd)
    if not obj.has(ObjectFlag.FOOD):
        out.say(f"I don't think that the {obj.name} would agree with you.")
        return False
    state.remove_object(obj.id)
    out.say("Thank you very much. It really hit the spot.")
    return True


def _cmd_drink(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    obj = _obj(state, cmd)
    if not obj.has(ObjectFlag.DRINK):
        out.say(f"I don't think that the {obj.name} would agree with you.")
        return False
    container = state.objects.get(obj.location or "")
    if container is not None and not container.has(ObjectFlag.OPEN):
        out.say(f"The {container.name} is closed.")
        return False
    state.remove_object(obj.id)
    out.say("Thank you very much. I was rather thirsty (from all this talking, probably).")
    return True


def _cmd_tell(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    ref = cmd.direct or cmd.indirect
    if ref is None:
        out.say("Talking to yourself is said to be a sign of impending mental collapse.")
        return False
    actor = state.actors.get(ref.object_id)
    if actor is None:
        out.say(f"You can't talk to the {state.objects[ref.object_id].name}!")
        return False
    out.say(actor.on_talk(state))
    return True


def _cmd_hello(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    if cmd.direct is None:
        out.say(GREETINGS[int(state.rng.random() * len(GREETINGS))])
        return True
    obj = _obj(state, cmd)
    if state.actors.get(obj.id) is not None:
        out.say(f"The {obj.name} bows his head to you in greeting.")
    else:
        out.say(
            "It's a well known fact that only schizophrenics say \"Hello\" to "
            f"{_with_article(obj)}."
        )
    return True


def _cmd_say(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    words = cmd.raw_input.split(maxsplit=1)
    text = words[1].strip() if len(words) > 1 else ""
    if not text:
        out.say("What do you want to say?")
        return False
    out.say(f'You say "{text}", but nothing happens.')
    return True


def _cmd_echo(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    words = cmd.raw_input.split(maxsplit=1)
    text = words[1].strip() if len(words) > 1 else ""
    if not text:
        out.say("echo echo ...")
        return True
    out.say(f"{text} {text} ...")
    return True


def _cmd_wave(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    obj = _obj(state, cmd)
    if obj.location != PLAYER:
        out.say(f"You aren't even holding the {obj.name}.")
        return False
    out.say(f"Waving the {obj.name} has no effect.")
    return True


def _cmd_touch(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    out.say("Fiddling with that has no effect.")
    return True


def _cmd_climb(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    if cmd.direct is None:
        out.say("You can't go that way.")
    else:
        out.say("You can't climb that!")
    return False


def _cmd_enter(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    out.say("You can't go that way.")
    return False


def _cmd_wake(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    if cmd.direct is None:
        out.say("You are already awake.")
        return False
    actor = state.actors.get(cmd.direct.object_id)
    if actor is not None and actor.state is ActorState.SLEEPING:
        actor.transition(ActorState.NORMAL, state, out)
        return True
    out.say(f"The {_obj(state, cmd).name} isn't sleeping.")
    return False


# -- meta -------------------------------------------------------------------


def rank_for(score: int) -> str:
    for threshold, rank in RANKS:
        if score >= threshold:
            return rank
    return RANKS[-1][1]


def _cmd_score(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    moves = "move" if state.moves == 1 else "moves"
    out.say(
        f"Your score is {state.score} (total of 350 points), in {state.moves} {moves}."
    )
    out.say(f"This gives you the rank of {rank_for(state.score)}.")
    return True


def _cmd_diagnose(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    wounds = -state.wounds
    if wounds == 0:
        out.say("You are in perfect health.")
    else:
        ticks = state.events.remaining_ticks("cure")
        kind = "a light wound" if wounds == 1 else "several wounds"
        out.say(f"You have {kind}, which will be cured after {ticks} moves.")
    if state.deaths == 1:
        out.say("You have been killed once.")
    elif state.deaths > 1:
        out.say(f"You have been killed {state.deaths} times.")
    return True


def _set_verbosity(level: Verbosity, message: str) -> Handler:
    def handler(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
        state.verbosity = level
        out.say(message)
        return True
    return handler


def _cmd_save(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    out.say("Your game is automatically saved after each move.")
    return True


def _cmd_restore(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    out.say("Your saved game is restored automatically when you return.")
    return True


def _cmd_quit(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    state.is_finished = True
    out.say(
        f"Your score is {state.score} (total of 350 points), in {state.moves} moves."
    )
    out.say("Thanks for playing!")
    return True


def _cmd_restart(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
    """Start over in place with a fresh world derived from this session's seed."""
    fresh = new_game_state(state.world, seed=state.rng.getrandbits(32))
    state.restore(fresh.snapshot())
    out.say("Restarting.")
    out.say(get_room_description(state, full=True))
    return True


def _static_response(message: str, success: bool = True) -> Handler:
    """Return a handler that ignores its arguments and says one thing."""
    def handler(state: GameState, cmd: ParsedCommand, out: Narration) -> bool:
        out.say(message)
        return success
    return handler


VERB_HANDLERS: dict[str, Handler] = {
    **dict.fromkeys(
        ("north", "south", "east", "west", "northeast", "northwest",
         "southeast", "southwest", "up", "down", "out"),
        _cmd_go,
    ),
    "take": _cmd_take,
    "drop": _cmd_drop,
    "put": _cmd_put,
    "give": _cmd_give,
    "throw": _cmd_throw,
    "examine": _cmd_examine,
    "look": _cmd_look,
    "inventory": _cmd_inventory,
    "open": _cmd_open,
    "close": _cmd_close,
    "read": _cmd_read,
    "light": _cmd_light,
    "extinguish": _cmd_extinguish,
    "turn": _cmd_turn,
    "attack": _cmd_attack,
    "eat": _cmd_eat,
    "drink": _cmd_drink,
    "tell": _cmd_tell,
    "hello": _cmd_hello,
    "say": _cmd_say,
    "echo": _cmd_echo,
    "wave": _cmd_wave,
    "touch": _cmd_touch,
    "climb": _cmd_climb,
    "enter": _cmd_enter,
    "wake": _cmd_wake,
    "score": _cmd_score,
    "diagnose": _cmd_diagnose,
    "verbose": _set_verbosity(Verbosity.VERBOSE, "Maximum verbosity."),
    "brief": _set_verbosity(Verbosity.BRIEF, "Brief descriptions."),
    "superbrief": _set_verbosity(Verbosity.SUPERBRIEF, "Superbrief descriptions."),
    "version": _static_response(VERSION_TEXT),
    "save": _cmd_save,
    "restore": _cmd_restore,
    "quit": _cmd_quit,
    "restart": _cmd_restart,
    "wait": _static_response("Time passes..."),
    "pray": _static_response("If you pray enough, your prayers may be answered."),
    "yell": _static_response("Aaaarrrrgggghhhh!"),
    "jump": _static_response("Wheeeeeeeeee!!!!"),
    "listen": _static_response("You hear nothing unusual."),
    "smell": _static_response("You smell nothing unusual."),
    "dig": _static_response("The ground is too hard for digging here.", False),
    "swim": _static_response("Go jump in a lake!", False),
    "make": _static_response("You can't do that.", False),
    "yes": _static_response("That was just a rhetorical question."),
    "no": _static_response("That was just a rhetorical question."),
}

BULK_HANDLERS: dict[str, Handler] = {
    "take": _cmd_take_all,
    "drop": _cmd_drop_all,
}