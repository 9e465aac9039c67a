"""Immutable definitions for the game world.

These are loaded once from world.json at startup and shared across all
players. Each game session builds its own live copies (see state.py).
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .flags import GameFlag, ObjectFlag, RoomFlag

if TYPE_CHECKING:
    from .vocabulary import Vocabulary


@dataclass(frozen=True)
class ExitDef:
    """A room exit: destination, optionally gated by a flag or a door."""

    destination: str | None
    condition: GameFlag | None = None
    door: str | None = None
    message: str = ""


@dataclass(frozen=True)
class RoomDef:
    """A location in the game world."""

    id: str
    name: str
    description: str = ""
    exits: dict[str, ExitDef] = field(default_factory=dict)
    flags: frozenset[RoomFlag] = frozenset()
    globals: tuple[str, ...] = ()
    value: int = 0


@dataclass(frozen=True)
class ObjectDef:
    """An object in the game world."""

    id: str
    name: str
    synonyms: tuple[str, ...] = ()
    adjectives: tuple[str, ...] = ()
    flags: frozenset[ObjectFlag] = frozenset()
    location: str | None = None
    size: int = 5
    value: int = 0
    capacity: int = 0
    text: str = ""
    description: str = ""
    strength: int = 0
    actor: str | None = None


@dataclass
class World:
    """The complete immutable game world, loaded from world.json."""

    start_room: str
    rooms: dict[str, RoomDef] = field(default_factory=dict)
    objects: dict[str, ObjectDef] = field(default_factory=dict)
    vocabulary: "Vocabulary | None" = None
