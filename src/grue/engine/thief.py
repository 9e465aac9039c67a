"""The thief: a roaming robber with a large bag.

He wanders the land rooms on his own daemon, pockets any treasure lying
in rooms the player has visited, lifts treasure from the player in the
dark, discards junk, and stashes his haul in the treasure room.
"""

from typing import TYPE_CHECKING

from .actors import Actor, ActorDefinition, ActorState
from .combat import CombatProfile, CombatResult
from .flags import ObjectFlag, RoomFlag
from .narration import Narration
from .state import KNIFE, STILETTO, TREASURE_ROOM, TROLL

if TYPE_CHECKING:
    from .state import GameObject, GameState

ROB_ROOM_CHANCE = 0.75
STEAL_FROM_PLAYER_CHANCE = 0.3
APPEAR_CHANCE = 0.3
DROP_JUNK_CHANCE = 0.3

NORMAL_DESCRIPTION = "A seedy-looking individual with a large bag is here."
UNCONSCIOUS_DESCRIPTION = "An unconscious robber is lying here."

THIEF_COMBAT = CombatProfile(
    best_weapon=KNIFE,
    best_weapon_advantage=1,
    messages={
        CombatResult.MISSED: (
            "The thief's stiletto misses you by an inch.",
            "The thief lunges at you but misses.",
        ),
        CombatResult.LIGHT_WOUND: (
            "The thief pricks you with his stiletto.",
            "The thief's blade scratches you.",
        ),
        CombatResult.SERIOUS_WOUND: (
            "The thief stabs you with his stiletto!",
            "The thief's blade finds its mark!",
        ),
        CombatResult.STAGGER: ("The thief's attack staggers you!",),
        CombatResult.LOSE_WEAPON: ("The thief deftly disarms you!",),
        CombatResult.UNCONSCIOUS: ("The thief's blow renders you unconscious!",),
        CombatResult.KILLED: ("The thief's stiletto finds your heart!",),
        CombatResult.HESITATE: ("The thief pauses, eyeing you warily.",),
    },
)


def _is_treasure(obj: "GameObject") -> bool:
    return obj.value > 0


def _booty(actor: Actor, state: "GameState") -> list["GameObject"]:
    return [
        state.objects[o] for o in state.contents_of(actor.id) if o != STILETTO
    ]


def _steal(state: "GameState", obj_id: str, thief_id: str) -> None:
    state.move_object(obj_id, thief_id)
    state.set_object_flag(obj_id, ObjectFlag.TOUCHED)
    state.set_object_flag(obj_id, ObjectFlag.INVISIBLE)


def _deposit_booty(actor: Actor, state: "GameState") -> None:
    for obj in _booty(actor, state):
        if _is_treasure(obj):
            state.set_object_flag(obj.id, ObjectFlag.INVISIBLE, False)
            state.move_object(obj.id, TREASURE_ROOM)


def _steal_from_player(actor: Actor, state: "GameState", out: Narration) -> bool:
    if state.rng.random() >= STEAL_FROM_PLAYER_CHANCE:
        return False
    treasures = [o for o in state.inventory if _is_treasure(state.objects[o])]
    if not treasures:
        return False
    target = treasures[int(state.rng.random() * len(treasures))]
    _steal(state, target, actor.id)
    out.say("The robber stealthily approaches and swipes something from you!")
    return True


def _rob_room(actor: Actor, state: "GameState", room_id: str) -> bool:
    candidates = [
        o
        for o in state.rooms[room_id].objects
        if _is_treasure(state.objects[o])
        and not state.objects[o].has(ObjectFlag.SACRED)
        and not state.objects[o].has(ObjectFlag.INVISIBLE)
    ]
    stolen = False
    for obj_id in candidates:
        if state.rng.random() < ROB_ROOM_CHANCE:
            _steal(state, obj_id, actor.id)
            stolen = True
    return stolen


def _drop_junk(actor: Actor, state: "GameState", room_id: str, out: Narration) -> bool:
    dropped = False
    for obj in _booty(actor, state):
        if _is_treasure(obj) or state.rng.random() >= DROP_JUNK_CHANCE:
            continue
        state.set_object_flag(obj.id, ObjectFlag.INVISIBLE, False)
        state.move_object(obj.id, room_id)
        if not dropped and room_id == state.current_room:
            out.say(
                "The robber, rummaging through his bag, dropped a few items he "
                "found valueless."
            )
        dropped = True
    return dropped


def _recover_stiletto(actor: Actor, state: "GameState") -> None:
    if state.objects[STILETTO].location == actor.obj(state).location:
        actor.take_weapon(state)


def _next_room(state: "GameState", current: str | None) -> str | None:
    """The next land, non-sacred room after the current one, wrapping."""
    ids = list(state.rooms)
    start = ids.index(current) if current in ids else -1
    for step in range(1, len(ids) + 1):
        room = state.rooms[ids[(start + step) % len(ids)]]
        if RoomFlag.LAND in room.flags and RoomFlag.SACRED not in room.flags:
            return room.id
    return None


def _thief_turn(actor: Actor, state: "GameState", out: Narration) -> bool:
    obj = actor.obj(state)
    room = obj.location
    visible = actor.is_visible(state)
    with_player = actor.is_with_player(state)
    acted = False

    if room == TREASURE_ROOM and not with_player:
        _deposit_booty(actor, state)
    elif with_player and not state.is_lit() and TROLL not in state.room.objects:
        if _steal_from_player(actor, state, out):
            return True
    elif with_player and not visible:
        if state.rng.random() < APPEAR_CHANCE:
            state.set_object_flag(actor.id, ObjectFlag.INVISIBLE, False)
            actor.memory["appeared"] = True
            out.say(
                "Someone carrying a large bag is casually leaning against one "
                "of the walls here. He does not speak, but it is clear from his "
                "aspect that the bag will be taken only over his dead body."
            )
            return True
    else:
        if visible and not with_player:
            state.set_object_flag(actor.id, ObjectFlag.INVISIBLE)
            actor.memory["appeared"] = False
        if room in state.rooms and RoomFlag.TOUCHED in state.rooms[room].flags:
            acted = _rob_room(actor, state, room)

    if not actor.is_visible(state):
        _recover_stiletto(actor, state)
        destination = _next_room(state, room)
        if destination and destination != room:
            state.move_object(actor.id, destination)
            state.set_object_flag(actor.id, ObjectFlag.FIGHT, False)

    if room in state.rooms and room != TREASURE_ROOM:
        acted = _drop_junk(actor, state, room, out) or acted
    return acted


def _thief_should_act(actor: Actor, state: "GameState") -> bool:
    return actor.state in (ActorState.NORMAL, ActorState.FIGHTING)


def _thief_dies(actor: Actor, state: "GameState", out: Narration) -> None:
    room = actor.obj(state).location or state.current_room
    actor.drop_weapon(state)
    for obj in _booty(actor, state):
        state.set_object_flag(obj.id, ObjectFlag.INVISIBLE, False)
        state.move_object(obj.id, room)
    state.award("defeat_thief", 25)
    if room == state.current_room:
        out.say("The robber's booty remains.")


def _thief_knocked_out(actor: Actor, state: "GameState", out: Narration) -> None:
    actor.drop_weapon(state)
    actor.obj(state).description = UNCONSCIOUS_DESCRIPTION


def _thief_revives(actor: Actor, state: "GameState", out: Narration) -> None:
    actor.tell_if_visible(
        state,
        out,
        "The robber revives, briefly feigning continued unconsciousness, and, "
        "when he sees his moment, scrambles away from you.",
    )
    state.set_object_flag(actor.id, ObjectFlag.FIGHT)
    actor.obj(state).description = NORMAL_DESCRIPTION
    _recover_stiletto(actor, state)


def _thief_attacked(
    actor: Actor, state: "GameState", out: Narration, weapon: str | None
) -> None:
    if actor.state is ActorState.NORMAL:
        actor.transition(ActorState.FIGHTING, state, out)
    state.set_object_flag(actor.id, ObjectFlag.INVISIBLE, False)


def _thief_talk(actor: Actor, state: "GameState") -> str:
    return "The thief is a strong, silent type."


THIEF_ACTOR = ActorDefinition(
    kind="thief",
    weapon=STILETTO,
    combat=THIEF_COMBAT,
    wake_state=ActorState.NORMAL,
    execute_turn=_thief_turn,
    on_attacked=_thief_attacked,
    on_talk=_thief_talk,
    should_act=_thief_should_act,
    transitions={
        (None, ActorState.DEAD): _thief_dies,
        (None, ActorState.UNCONSCIOUS): _thief_knocked_out,
        (ActorState.UNCONSCIOUS, ActorState.NORMAL): _thief_revives,
    },
    memory={"appeared": False},
)
