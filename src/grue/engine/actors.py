"""NPC behaviour as data.

Each actor kind is one ActorDefinition: its starting state, its canonical
weapon, its combat profile and a table of transition side effects, plus the
hooks behind the shared capability interface. The engine only ever talks to
the Actor wrapper, never to a concrete kind.

Live per-session data (current state, scratch memory) sits in ActorRecord
inside the GameState's ActorRegistry.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from .flags import ObjectFlag
from .narration import Narration

if TYPE_CHECKING:
    from .combat import CombatProfile
    from .state import GameObject, GameState


class ActorState(StrEnum):
    NORMAL = "normal"
    FIGHTING = "fighting"
    UNCONSCIOUS = "unconscious"
    DEAD = "dead"
    SLEEPING = "sleeping"


TurnHook = Callable[["Actor", "GameState", Narration], bool]
AttackHook = Callable[["Actor", "GameState", Narration, str | None], None]
GiftHook = Callable[["Actor", "GameState", str, Narration], bool]
TalkHook = Callable[["Actor", "GameState"], str]
ActHook = Callable[["Actor", "GameState"], bool]
TransitionHook = Callable[["Actor", "GameState", Narration], None]


def _no_turn(actor: "Actor", state: "GameState", out: Narration) -> bool:
    return False


def _become_hostile(
    actor: "Actor", state: "GameState", out: Narration, weapon: str | None
) -> None:
    if actor.state is ActorState.NORMAL:
        actor.transition(ActorState.FIGHTING, state, out)


def _refuse_gift(actor: "Actor", state: "GameState", item: str, out: Narration) -> bool:
    return False


def _silent(actor: "Actor", state: "GameState") -> str:
    return f"The {actor.obj(state).name} doesn't respond."


def _alive(actor: "Actor", state: "GameState") -> bool:
    return actor.state is not ActorState.DEAD


@dataclass(frozen=True)
class ActorDefinition:
    kind: str
    initial_state: ActorState = ActorState.NORMAL
    weapon: str | None = None
    combat: "CombatProfile | None" = None
    # state entered when waking from UNCONSCIOUS
    wake_state: ActorState = ActorState.NORMAL
    # player blows are resolved through the combat tables
    fights_back: bool = True
    # execute_turn runs from the fight daemon rather than its own timer
    driven_by_combat: bool = False
    execute_turn: TurnHook = _no_turn
    on_attacked: AttackHook = _become_hostile
    on_receive_item: GiftHook = _refuse_gift
    on_talk: TalkHook = _silent
    should_act: ActHook = _alive
    # (old, new) or (None, new) -> side effect
    transitions: Mapping[tuple[ActorState | None, ActorState], TransitionHook] = field(
        default_factory=dict
    )
    memory: Mapping[str, Any] = field(default_factory=dict)


@dataclass
class ActorRecord:
    object_id: str
    kind: str
    state: ActorState
    memory: dict[str, Any] = field(default_factory=dict)


class Actor:
    """Capability interface over one actor's definition and live record."""

    def __init__(self, definition: ActorDefinition, record: ActorRecord):
        self.definition = definition
        self.record = record

    @property
    def id(self) -> str:
        return self.record.object_id

    @property
    def state(self) -> ActorState:
        return self.record.state

    @property
    def memory(self) -> dict[str, Any]:
        return self.record.memory

    def obj(self, state: "GameState") -> "GameObject":
        return state.objects[self.id]

    def execute_turn(self, state: "GameState", out: Narration) -> bool:
        return self.definition.execute_turn(self, state, out)

    def on_attacked(
        self, state: "GameState", out: Narration, weapon: str | None = None
    ) -> None:
        self.definition.on_attacked(self, state, out, weapon)

    def on_receive_item(self, state: "GameState", item: str, out: Narration) -> bool:
        return self.definition.on_receive_item(self, state, item, out)

    def on_talk(self, state: "GameState") -> str:
        return self.definition.on_talk(self, state)

    def should_act(self, state: "GameState") -> bool:
        return self.definition.should_act(self, state)

    def transition(
        self, new_state: ActorState, state: "GameState", out: Narration
    ) -> None:
        old_state = self.record.state
        self.record.state = new_state
        self.on_state_changed(old_state, new_state, state, out)

    def on_state_changed(
        self,
        old_state: ActorState,
        new_state: ActorState,
        state: "GameState",
        out: Narration,
    ) -> None:
        if new_state is ActorState.FIGHTING:
            state.set_object_flag(self.id, ObjectFlag.FIGHT)
        elif new_state in (ActorState.UNCONSCIOUS, ActorState.DEAD):
            state.set_object_flag(self.id, ObjectFlag.FIGHT, False)

        transitions = self.definition.transitions
        hook = transitions.get((old_state, new_state)) or transitions.get(
            (None, new_state)
        )
        if hook is not None:
            hook(self, state, out)

        if new_state is ActorState.DEAD and self.obj(state).location is not None:
            state.remove_object(self.id)

    def is_with_player(self, state: "GameState") -> bool:
        return self.obj(state).location == state.current_room

    def is_visible(self, state: "GameState") -> bool:
        return not self.obj(state).has(ObjectFlag.INVISIBLE)

    def tell_if_visible(self, state: "GameState", out: Narration, message: str) -> bool:
        if self.is_with_player(state) and self.is_visible(state):
            out.say(message)
            return True
        return False

    def has_weapon(self, state: "GameState") -> bool:
        weapon = self.definition.weapon
        return weapon is not None and state.objects[weapon].location == self.id

    def drop_weapon(self, state: "GameState") -> bool:
        """Let go of the canonical weapon onto the floor."""
        if not self.has_weapon(state):
            return False
        weapon = self.definition.weapon
        room = self.obj(state).location
        state.move_object(weapon, room if room in state.rooms else state.current_room)
        state.set_object_flag(weapon, ObjectFlag.NDESC, False)
        state.set_object_flag(weapon, ObjectFlag.WEAPON)
        return True

    def take_weapon(self, state: "GameState") -> None:
        weapon = self.definition.weapon
        state.move_object(weapon, self.id)
        state.set_object_flag(weapon, ObjectFlag.NDESC)
        state.set_object_flag(weapon, ObjectFlag.WEAPON, False)


class ActorRegistry:
    """Per-session table of the actors in play, in registration order."""

    def __init__(self, definitions: Iterable[ActorDefinition] = ()):
        self._definitions = {d.kind: d for d in definitions}
        self._records: dict[str, ActorRecord] = {}

    def register(self, object_id: str, kind: str) -> Actor:
        definition = self._definitions[kind]
        record = ActorRecord(
            object_id, kind, definition.initial_state, dict(definition.memory)
        )
        self._records[object_id] = record
        return Actor(definition, record)

    def get(self, object_id: str | None) -> Actor | None:
        record = self._records.get(object_id) if object_id else None
        if record is None:
            return None
        return Actor(self._definitions[record.kind], record)

    def __iter__(self) -> Iterator[Actor]:
        for record in list(self._records.values()):
            yield Actor(self._definitions[record.kind], record)

    def snapshot(self) -> dict[str, tuple[str, str, dict[str, Any]]]:
        return {
            r.object_id: (r.kind, str(r.state), dict(r.memory))
            for r in self._records.values()
        }

    def restore(self, data: dict[str, tuple[str, str, dict[str, Any]]]) -> None:
        self._records = {
            object_id: ActorRecord(object_id, kind, ActorState(state), dict(memory))
            for object_id, (kind, state, memory) in data.items()
        }
