"""Mutable per-session game state.

GameState owns live copies of every room and object built from the shared
World definitions, plus the session's scheduler, actor registry and random
source. Persistence goes through snapshot()/restore(), which deal only in
plain data, so the World itself is never serialized.
"""

import random
from dataclasses import dataclass, field
from typing import Any

from .actors import ActorRegistry
from .events import EventSystem
from .flags import GameFlag, ObjectFlag, RoomFlag, Verbosity
from .lighting import is_lit
from .scenery import DescriptionTable, SceneryRegistry, register_scenery
from .world import ExitDef, ObjectDef, RoomDef, World

# Location of carried objects
PLAYER = "player"
# Reserved reference for ME/MYSELF/SELF/CRETIN
SELF_ID = "me"

LOAD_LIMIT = 100
MAX_SCORE = 350

# Object ids the engine refers to directly
LAMP = "lamp"
CANDLES = "candles"
SWORD = "sword"
KNIFE = "knife"
AXE = "axe"
STILETTO = "stiletto"
TROLL = "troll"
THIEF = "thief"
CYCLOPS = "cyclops"
LUNCH = "lunch"
GARLIC = "garlic"
WATER = "water"
BOTTLE = "bottle"

# Room ids the engine refers to directly
FOREST_1 = "forest-1"
SOUTH_TEMPLE = "south-temple"
ENTRANCE_TO_HADES = "entrance-to-hades"
TREASURE_ROOM = "treasure-room"


@dataclass
class GameObject:
    """A live object. Location is a room id, an object id, PLAYER or None."""

    id: str
    name: str
    synonyms: tuple[str, ...] = ()
    adjectives: tuple[str, ...] = ()
    flags: set[ObjectFlag] = field(default_factory=set)
    location: str | None = None
    size: int = 5
    value: int = 0
    capacity: int = 0
    text: str = ""
    description: str = ""
    actor: str | None = None
    properties: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_def(cls, d: ObjectDef) -> "GameObject":
        return cls(
            id=d.id,
            name=d.name,
            synonyms=d.synonyms,
            adjectives=d.adjectives,
            flags=set(d.flags),
            location=d.location,
            size=d.size,
            value=d.value,
            capacity=d.capacity,
            text=d.text,
            description=d.description,
            actor=d.actor,
            properties={"strength": d.strength} if d.strength else {},
        )

    def has(self, flag: ObjectFlag) -> bool:
        return flag in self.flags

    @property
    def article(self) -> str:
        return "an" if self.name[:1].lower() in "aeiou" else "a"


@dataclass
class Room:
    id: str
    name: str
    description: str
    exits: dict[str, ExitDef]
    objects: list[str] = field(default_factory=list)
    flags: set[RoomFlag] = field(default_factory=set)
    globals: tuple[str, ...] = ()
    value: int = 0

    @classmethod
    def from_def(cls, d: RoomDef) -> "Room":
        return cls(
            id=d.id,
            name=d.name,
            description=d.description,
            exits=d.exits,
            flags=set(d.flags),
            globals=d.globals,
            value=d.value,
        )


@dataclass(frozen=True)
class StateChange:
    """A mutation performed during a command, recorded for logging/replay."""

    kind: str
    target: str
    value: Any = None


@dataclass
class GameState:
    world: World
    rooms: dict[str, Room]
    objects: dict[str, GameObject]
    current_room: str
    inventory: list[str] = field(default_factory=list)

    score: int = 0
    moves: int = 0

    # Player condition
    deaths: int = 0
    dead: bool = False
    is_finished: bool = False
    wounds: int = 0
    load_allowed: int = LOAD_LIMIT
    staggered: bool = False

    verbosity: Verbosity = Verbosity.BRIEF
    game_flags: set[GameFlag] = field(default_factory=set)
    scored: set[str] = field(default_factory=set)  # one-time awards already given

    # Parser memory
    last_mentioned: str | None = None
    last_command: str | None = None
    last_failed_input: str | None = None
    last_unknown_word: str | None = None

    rng: random.Random = field(default_factory=random.Random)
    events: EventSystem = field(default_factory=EventSystem)
    actors: ActorRegistry = field(default_factory=ActorRegistry)
    scenery: SceneryRegistry = field(default_factory=SceneryRegistry)
    descriptions: DescriptionTable = field(default_factory=DescriptionTable)
    changes: list[StateChange] = field(default_factory=list)

    @property
    def room(self) -> Room:
        return self.rooms[self.current_room]

    def is_carried(self, obj_id: str) -> bool:
        return self.objects[obj_id].location == PLAYER

    def contents_of(self, container_id: str) -> list[str]:
        return [o.id for o in self.objects.values() if o.location == container_id]

    def move_object(self, obj_id: str, destination: str | None) -> None:
        """Relocate an object, keeping room lists and inventory in step."""
        obj = self.objects[obj_id]
        old = obj.location
        if old == PLAYER:
            self.inventory.remove(obj_id)
        elif old in self.rooms:
            self.rooms[old].objects.remove(obj_id)

        obj.location = destination
        if destination == PLAYER:
            self.inventory.append(obj_id)
        elif destination in self.rooms:
            self.rooms[destination].objects.append(obj_id)
        self.changes.append(StateChange("move", obj_id, destination))

    def remove_object(self, obj_id: str) -> None:
        self.move_object(obj_id, None)

    def set_object_flag(self, obj_id: str, flag: ObjectFlag, on: bool = True) -> None:
        flags = self.objects[obj_id].flags
        if on:
            flags.add(flag)
        else:
            flags.discard(flag)
        self.changes.append(StateChange("flag", obj_id, (flag, on)))

    def has_flag(self, flag: GameFlag) -> bool:
        return flag in self.game_flags

    def set_flag(self, flag: GameFlag, on: bool = True) -> None:
        if on:
            self.game_flags.add(flag)
        else:
            self.game_flags.discard(flag)
        self.changes.append(StateChange("game_flag", flag, on))

    def award(self, key: str, points: int) -> bool:
        """Add points for an achievement once per game."""
        if key in self.scored:
            return False
        self.scored.add(key)
        self.score += points
        self.changes.append(StateChange("score", key, points))
        return True

    def is_lit(self, room_id: str | None = None) -> bool:
        return is_lit(self, room_id)

    def drain_changes(self) -> list[StateChange]:
        changes, self.changes = self.changes, []
        return changes

    def _open_contents(self, obj_id: str) -> list[str]:
        obj = self.objects[obj_id]
        if not (obj.has(ObjectFlag.CONTAINER) and obj.has(ObjectFlag.OPEN)):
            return []
        found = []
        for inner in self.contents_of(obj_id):
            found.append(inner)
            found.extend(self._open_contents(inner))
        return found

    def reachable_objects(self) -> list[GameObject]:
        """Objects the parser may resolve nouns against.

        Inventory, room contents, open-container contents and the room's
        global scenery. In the dark only what the player carries counts.
        """
        ids: list[str] = []
        for obj_id in self.inventory:
            ids.append(obj_id)
            ids.extend(self._open_contents(obj_id))
        if self.is_lit():
            for obj_id in self.room.objects:
                ids.append(obj_id)
                ids.extend(self._open_contents(obj_id))
            ids.extend(self.room.globals)
        seen: set[str] = set()
        reachable = []
        for obj_id in ids:
            obj = self.objects.get(obj_id)
            if obj is None or obj_id in seen or obj.has(ObjectFlag.INVISIBLE):
                continue
            seen.add(obj_id)
            reachable.append(obj)
        return reachable

    def snapshot(self) -> dict[str, Any]:
        """Plain-data copy of every mutable field."""
        return {
            "current_room": self.current_room,
            "inventory": list(self.inventory),
            "score": self.score,
            "moves": self.moves,
            "deaths": self.deaths,
            "dead": self.dead,
            "is_finished": self.is_finished,
            "wounds": self.wounds,
            "load_allowed": self.load_allowed,
            "staggered": self.staggered,
            "verbosity": str(self.verbosity),
            "game_flags": sorted(self.game_flags),
            "scored": sorted(self.scored),
            "last_mentioned": self.last_mentioned,
            "last_command": self.last_command,
            "last_failed_input": self.last_failed_input,
            "last_unknown_word": self.last_unknown_word,
            "objects": {
                o.id: {
                    "location": o.location,
                    "flags": sorted(o.flags),
                    "description": o.description,
                    "properties": dict(o.properties),
                }
                for o in self.objects.values()
            },
            "rooms": {
                r.id: {"objects": list(r.objects), "flags": sorted(r.flags)}
                for r in self.rooms.values()
            },
            "events": self.events.snapshot(),
            "actors": self.actors.snapshot(),
            "rng": self.rng.getstate(),
        }

    def restore(self, data: dict[str, Any]) -> None:
        """Overwrite mutable fields from a snapshot() dict."""
        self.current_room = data["current_room"]
        self.inventory = list(data["inventory"])
        self.score = data["score"]
        self.moves = data["moves"]
        self.deaths = data["deaths"]
        self.dead = data["dead"]
        self.is_finished = data["is_finished"]
        self.wounds = data["wounds"]
        self.load_allowed = data["load_allowed"]
        self.staggered = data["staggered"]
        self.verbosity = Verbosity(data["verbosity"])
        self.game_flags = {GameFlag(f) for f in data["game_flags"]}
        self.scored = set(data["scored"])
        self.last_mentioned = data["last_mentioned"]
        self.last_command = data["last_command"]
        self.last_failed_input = data["last_failed_input"]
        self.last_unknown_word = data["last_unknown_word"]
        for obj_id, saved in data["objects"].items():
            obj = self.objects[obj_id]
            obj.location = saved["location"]
            obj.flags = {ObjectFlag(f) for f in saved["flags"]}
            obj.description = saved["description"]
            obj.properties = dict(saved["properties"])
        for room_id, saved in data["rooms"].items():
            room = self.rooms[room_id]
            room.objects = list(saved["objects"])
            room.flags = {RoomFlag(f) for f in saved["flags"]}
        self.events.restore(data["events"])
        self.actors.restore(data["actors"])
        self.rng.setstate(data["rng"])
        self.changes = []


def new_game_state(world: World, seed: int | None = None) -> GameState:
    """Assemble a fresh session from the static world tables."""
    from .cyclops import CYCLOPS_ACTOR
    from .daemons import register_events
    from .thief import THIEF_ACTOR
    from .troll import TROLL_ACTOR

    state = GameState(
        world=world,
        rooms={rid: Room.from_def(d) for rid, d in world.rooms.items()},
        objects={oid: GameObject.from_def(d) for oid, d in world.objects.items()},
        current_room=world.start_room,
        rng=random.Random(seed),
        actors=ActorRegistry([TROLL_ACTOR, THIEF_ACTOR, CYCLOPS_ACTOR]),
    )
    for obj in state.objects.values():
        if obj.location == PLAYER:
            state.inventory.append(obj.id)
        elif obj.location in state.rooms:
            state.rooms[obj.location].objects.append(obj.id)
        if obj.actor:
            state.actors.register(obj.id, obj.actor)

    register_events(state)
    register_scenery(state)
    state.room.flags.add(RoomFlag.TOUCHED)
    state.changes.clear()
    return state
