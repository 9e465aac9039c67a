"""The game's timed behaviour, registered on every new session.

Registration order is the run order and must stay fixed: fight, sword,
thief, candles, lantern, forest, cyclops, cure.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .actors import ActorState
from .combat import cure_interrupt, fight_daemon
from .flags import ObjectFlag, RoomFlag
from .narration import Narration
from .state import CANDLES, CYCLOPS, LAMP, PLAYER, SWORD, THIEF

if TYPE_CHECKING:
    from .state import GameState

SONGBIRD_CHANCE = 0.15


@dataclass(frozen=True)
class BurnTable:
    """Remaining-fuel thresholds at which a light source announces itself."""

    event_id: str
    fuel: int
    stages: tuple[tuple[int, str], ...]


LAMP_BURN = BurnTable(
    "lantern",
    200,
    (
        (100, "The lamp appears a bit dimmer."),
        (70, "The lamp is definitely dimmer now."),
        (15, "The lamp is nearly out."),
        (0, "The brass lantern has gone out."),
    ),
)

CANDLES_BURN = BurnTable(
    "candles",
    40,
    (
        (20, "The candles are getting quite short now."),
        (10, "The candles are becoming very short."),
        (0, "You'd better have more light than from the pair of candles."),
    ),
)

BURN_TABLES = {LAMP: LAMP_BURN, CANDLES: CANDLES_BURN}

SWORD_GLOW = {
    2: "Your sword has begun to glow very brightly.",
    1: "Your sword is glowing with a faint blue glow.",
    0: "Your sword is no longer glowing.",
}


def _stage_delay(table: BurnTable, stage: int) -> int:
    previous = table.fuel if stage == 0 else table.stages[stage - 1][0]
    return previous - table.stages[stage][0]


def start_burning(state: "GameState", obj_id: str) -> None:
    """Arm or resume a light source's countdown after lighting it."""
    table = BURN_TABLES.get(obj_id)
    if table is None:
        return
    obj = state.objects[obj_id]
    if "burn_stage" not in obj.properties:
        obj.properties["burn_stage"] = 0
        state.events.queue_interrupt(table.event_id, _stage_delay(table, 0))
    else:
        state.events.enable(table.event_id)


def stop_burning(state: "GameState", obj_id: str) -> None:
    """Pause a light source's countdown, keeping the ticks left."""
    table = BURN_TABLES.get(obj_id)
    if table is not None:
        state.events.disable(table.event_id)


def _burn(state: "GameState", obj_id: str, out: Narration) -> bool:
    table = BURN_TABLES[obj_id]
    obj = state.objects[obj_id]
    stage = obj.properties.get("burn_stage", 0)
    _, message = table.stages[stage]

    if obj.location == PLAYER or obj.location == state.current_room:
        out.say(message)

    if stage + 1 >= len(table.stages):
        state.set_object_flag(obj_id, ObjectFlag.ON, False)
        state.set_object_flag(obj_id, ObjectFlag.BURNED_OUT)
        obj.properties["burn_stage"] = stage + 1
        return True

    obj.properties["burn_stage"] = stage + 1
    state.events.queue_interrupt(table.event_id, _stage_delay(table, stage + 1))
    return True


def lantern_interrupt(state: "GameState", out: Narration) -> bool:
    return _burn(state, LAMP, out)


def candles_interrupt(state: "GameState", out: Narration) -> bool:
    return _burn(state, CANDLES, out)


def _enemy_in(state: "GameState", room_id: str | None) -> bool:
    if room_id is None or room_id not in state.rooms:
        return False
    for obj_id in state.rooms[room_id].objects:
        obj = state.objects[obj_id]
        if obj.has(ObjectFlag.ACTOR) and not obj.has(ObjectFlag.INVISIBLE):
            actor = state.actors.get(obj_id)
            if actor is None or actor.state is not ActorState.DEAD:
                return True
    return False


def sword_daemon(state: "GameState", out: Narration) -> bool:
    """Glow when an enemy is here or one room away."""
    if SWORD not in state.objects:
        return False
    sword = state.objects[SWORD]
    if _enemy_in(state, state.current_room):
        level = 2
    elif any(
        _enemy_in(state, exit_.destination) for exit_ in state.room.exits.values()
    ):
        level = 1
    else:
        level = 0

    old = sword.properties.get("glow", 0)
    sword.properties["glow"] = level
    if level != old and sword.location == PLAYER:
        out.say(SWORD_GLOW[level])
        return True
    return False


def thief_daemon(state: "GameState", out: Narration) -> bool:
    actor = state.actors.get(THIEF)
    if actor is None or not actor.should_act(state):
        return False
    return actor.execute_turn(state, out)


def forest_daemon(state: "GameState", out: Narration) -> bool:
    """Songbird in the woods; goes quiet when the player leaves them."""
    if RoomFlag.FOREST not in state.room.flags:
        state.events.disable("forest")
        return False
    if state.rng.random() < SONGBIRD_CHANCE:
        out.say("You hear in the distance the chirping of a song bird.")
        return True
    return False


def cyclops_interrupt(state: "GameState", out: Narration) -> bool:
    actor = state.actors.get(CYCLOPS)
    if actor is None or not actor.should_act(state):
        return False
    return actor.execute_turn(state, out)


def register_events(state: "GameState") -> None:
    events = state.events
    events.register_daemon("fight", fight_daemon)
    events.register_daemon("sword", sword_daemon)
    events.register_daemon("thief", thief_daemon)
    events.register_interrupt("candles", candles_interrupt, 0, enabled=False)
    events.register_interrupt("lantern", lantern_interrupt, 0, enabled=False)
    events.register_daemon(
        "forest", forest_daemon, enabled=RoomFlag.FOREST in state.room.flags
    )
    events.register_interrupt("cyclops", cyclops_interrupt, 0, enabled=False)
    events.register_interrupt("cure", cure_interrupt, 0, enabled=False)
