"""Read world.json into a World object.

The file has three top-level keys: "start" (room id), "rooms" and
"objects", both keyed by id. An exit is either a destination room id or an
object with "to", "door", "condition" and "message" keys. Flag names are
the lowercase values of the flag enums.
"""

import json
from collections.abc import Iterable
from enum import StrEnum
from pathlib import Path
from typing import Any, TypeVar

from ..logging import get_logger
from .flags import GameFlag, ObjectFlag, RoomFlag
from .state import PLAYER
from .vocabulary import Vocabulary
from .world import ExitDef, ObjectDef, RoomDef, World

logger = get_logger(__name__)

F = TypeVar("F", bound=StrEnum)


class WorldDataError(ValueError):
    """world.json is malformed or refers to things that don't exist."""


def _flags(kind: type[F], names: Iterable[str], owner: str) -> frozenset[F]:
    try:
        return frozenset(kind(name) for name in names)
    except ValueError as exc:
        raise WorldDataError(f"{owner}: {exc}") from exc


def _parse_exit(room_id: str, direction: str, raw: Any) -> ExitDef:
    if raw is None or isinstance(raw, str):
        return ExitDef(destination=raw)
    if not isinstance(raw, dict):
        raise WorldDataError(f"{room_id}.{direction}: exit must be a string or object")
    condition = raw.get("condition")
    try:
        condition = GameFlag(condition) if condition else None
    except ValueError as exc:
        raise WorldDataError(f"{room_id}.{direction}: {exc}") from exc
    return ExitDef(
        destination=raw.get("to"),
        condition=condition,
        door=raw.get("door"),
        message=raw.get("message", ""),
    )


def _parse_room(room_id: str, raw: dict) -> RoomDef:
    if "name" not in raw:
        raise WorldDataError(f"room {room_id} has no name")
    exits = {
        direction: _parse_exit(room_id, direction, target)
        for direction, target in raw.get("exits", {}).items()
    }
    for direction in exits:
        if not Vocabulary.is_direction(direction):
            raise WorldDataError(f"room {room_id}: unknown direction {direction!r}")
    return RoomDef(
        id=room_id,
        name=raw["name"],
        description=raw.get("description", ""),
        exits=exits,
        flags=_flags(RoomFlag, raw.get("flags", ()), f"room {room_id}"),
        globals=tuple(raw.get("globals", ())),
        value=raw.get("value", 0),
    )


def _parse_object(obj_id: str, raw: dict) -> ObjectDef:
    if "name" not in raw:
        raise WorldDataError(f"object {obj_id} has no name")
    return ObjectDef(
        id=obj_id,
        name=raw["name"],
        synonyms=tuple(raw.get("synonyms", ())),
        adjectives=tuple(raw.get("adjectives", ())),
        flags=_flags(ObjectFlag, raw.get("flags", ()), f"object {obj_id}"),
        location=raw.get("location"),
        size=raw.get("size", 5),
        value=raw.get("value", 0),
        capacity=raw.get("capacity", 0),
        text=raw.get("text", ""),
        description=raw.get("description", ""),
        strength=raw.get("strength", 0),
        actor=raw.get("actor"),
    )


def _check_references(world: World) -> None:
    """Every exit, door, global and location must name something real."""
    for room in world.rooms.values():
        for direction, exit_ in room.exits.items():
            if exit_.destination is not None and exit_.destination not in world.rooms:
                raise WorldDataError(
                    f"room {room.id}.{direction} leads to unknown room {exit_.destination}"
                )
            if exit_.door is not None and exit_.door not in world.objects:
                raise WorldDataError(f"room {room.id}.{direction}: unknown door {exit_.door}")
        for global_id in room.globals:
            if global_id not in world.objects:
                raise WorldDataError(f"room {room.id}: unknown global {global_id}")
    for obj in world.objects.values():
        loc = obj.location
        if loc is not None and loc != PLAYER and loc not in world.rooms and loc not in world.objects:
            raise WorldDataError(f"object {obj.id} is in unknown location {loc}")


def parse_world(data: dict) -> World:
    """Build a World from already-decoded world.json data."""
    try:
        start = data["start"]
        rooms = {rid: _parse_room(rid, raw) for rid, raw in data["rooms"].items()}
        objects = {oid: _parse_object(oid, raw) for oid, raw in data["objects"].items()}
    except KeyError as exc:
        raise WorldDataError(f"missing key {exc}") from exc
    if start not in rooms:
        raise WorldDataError(f"start room {start} does not exist")

    world = World(start_room=start, rooms=rooms, objects=objects)
    _check_references(world)
    world.vocabulary = Vocabulary.from_objects(objects.values())
    return world


def load_world(data_path: Path) -> World:
    """Parse world.json and return a populated World."""
    try:
        with open(data_path) as fh:
            data = json.load(fh)
    except json.JSONDecodeError as exc:
        raise WorldDataError(f"{data_path}: {exc}") from exc
    world = parse_world(data)
    logger.debug(
        "world_parsed", path=str(data_path), rooms=len(world.rooms), objects=len(world.objects)
    )
    return world
