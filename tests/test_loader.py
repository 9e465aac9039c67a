"""Tests for the world loader."""

import json
from pathlib import Path

import pytest

from grue.engine.flags import GameFlag, ObjectFlag, RoomFlag
from grue.engine.loader import WorldDataError, load_world, parse_world
from grue.engine.world import World


def _minimal() -> dict:
    return {
        "start": "hall",
        "rooms": {
            "hall": {"name": "Hall", "exits": {"north": "yard"}},
            "yard": {"name": "Yard", "flags": ["lit"], "exits": {"south": "hall"}},
        },
        "objects": {
            "key": {"name": "brass key", "flags": ["take"], "location": "hall"},
        },
    }


def test_load_world(world: World):
    """The bundled world loads with its rooms, objects and vocabulary."""
    assert world.start_room == "west-of-house"
    assert len(world.rooms) > 20
    assert "lamp" in world.objects
    assert world.vocabulary is not None
    assert "lantern" in world.vocabulary.nouns


def test_room_and_object_fields(world: World):
    """Flags, values and actor kinds are parsed."""
    assert RoomFlag.LIT in world.rooms["west-of-house"].flags
    assert RoomFlag.FOREST in world.rooms["forest-1"].flags
    assert world.rooms["kitchen"].value == 10
    lamp = world.objects["lamp"]
    assert ObjectFlag.LIGHT in lamp.flags
    assert lamp.size == 15
    assert world.objects["troll"].actor == "troll"
    assert world.objects["troll"].strength == 2
    assert world.objects["egg"].value == 5


def test_exit_forms(world: World):
    """Exits may be plain, gated by a flag, through a door, or blocked."""
    assert world.rooms["west-of-house"].exits["north"].destination == "north-of-house"
    gated = world.rooms["troll-room"].exits["east"]
    assert gated.condition is GameFlag.TROLL_FLAG
    assert gated.message.startswith("The troll fends you off")
    door = world.rooms["living-room"].exits["down"]
    assert door.destination == "cellar"
    assert door.door == "trap-door"
    blocked = world.rooms["west-of-house"].exits["east"]
    assert blocked.destination is None
    assert blocked.message


def test_parse_minimal():
    """A small hand-built world parses."""
    world = parse_world(_minimal())
    assert world.rooms["hall"].exits["north"].destination == "yard"
    assert world.vocabulary.nouns == {"key"}
    assert world.vocabulary.adjectives == set()


def test_load_from_file(tmp_path: Path):
    """load_world reads JSON from disk."""
    path = tmp_path / "world.json"
    path.write_text(json.dumps(_minimal()))
    assert load_world(path).start_room == "hall"


def test_invalid_json(tmp_path: Path):
    """Broken JSON is a WorldDataError."""
    path = tmp_path / "world.json"
    path.write_text("{not json")
    with pytest.raises(WorldDataError):
        load_world(path)


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d.pop("start"),
        lambda d: d.update(start="nowhere"),
        lambda d: d["rooms"]["hall"]["exits"].update(north="nowhere"),
        lambda d: d["rooms"]["hall"]["exits"].update(sideways="yard"),
        lambda d: d["rooms"]["hall"].update(flags=["glowing"]),
        lambda d: d["objects"]["key"].update(location="nowhere"),
        lambda d: d["objects"]["key"].pop("name"),
        lambda d: d["rooms"]["hall"]["exits"].update(
            north={"to": "yard", "condition": "dragon_flag"}
        ),
        lambda d: d["rooms"]["hall"]["exits"].update(north={"to": "yard", "door": "gate"}),
        lambda d: d["rooms"]["hall"].update(globals=["sky"]),
    ],
)
def test_bad_world_data(mutate):
    """Malformed or dangling references are rejected at load time."""
    data = _minimal()
    mutate(data)
    with pytest.raises(WorldDataError):
        parse_world(data)
